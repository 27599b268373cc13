"""
Error responses for the catalog API.

Every failure leaves the API as ``{"message": str}``. Structural
validation failures are summarised per field; store failures carry their
own status code; anything else is a generic 500.
"""

import logging
from collections.abc import Sequence
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from aacboard.models.errors import CatalogError, ValidationError

logger = logging.getLogger(__name__)

VALIDATION_PREFIX = "Validation error"

# Request sections that do not name a field
_LOCATION_ROOTS = frozenset({"body", "query", "path", "header", "cookie"})


def _field_path(loc: Sequence[Any]) -> str:
    parts = [str(part) for part in loc if part not in _LOCATION_ROOTS]
    return ".".join(parts)


def summarize_validation_errors(errors: Sequence[dict[str, Any]]) -> str:
    """
    Build a human-readable summary of structural validation errors.

    Example: 'Validation error: Field required at "name"; Input should be
    a valid integer at "categoryId"'
    """
    findings: list[str] = []
    for error in errors:
        message = error.get("msg", "Invalid value")
        path = _field_path(error.get("loc", ()))
        findings.append(f'{message} at "{path}"' if path else message)

    if not findings:
        return VALIDATION_PREFIX
    return f"{VALIDATION_PREFIX}: {'; '.join(findings)}"


def describe_catalog_error(error: CatalogError) -> str:
    """Caller-facing message for a store failure."""
    if isinstance(error, ValidationError) and error.field:
        return f'{VALIDATION_PREFIX}: {error.message} at "{error.field}"'
    return error.message


async def request_validation_handler(_request: Request, exc: Exception) -> JSONResponse:
    errors = exc.errors() if isinstance(exc, RequestValidationError) else []
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": summarize_validation_errors(errors)},
    )


async def http_exception_handler(_request: Request, exc: Exception) -> JSONResponse:
    if not isinstance(exc, StarletteHTTPException):
        raise exc
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def catalog_error_handler(request: Request, exc: Exception) -> JSONResponse:
    if not isinstance(exc, CatalogError):
        raise exc
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("Catalog failure on %s %s: %s", request.method, request.url.path, exc)
        message = "Internal server error"
    else:
        message = describe_catalog_error(exc)
    return JSONResponse(status_code=exc.status_code, content={"message": message})


def register_exception_handlers(app: FastAPI) -> None:
    """Install the ``{"message": ...}`` error contract on an application."""
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(CatalogError, catalog_error_handler)
