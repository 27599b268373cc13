"""
Health check endpoints.

Provides liveness and readiness checks. Readiness confirms the catalog
store is attached and answering reads.
"""

from fastapi import APIRouter, Response, status
from pydantic import BaseModel

from aacboard.api.deps import StoreDep

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    categories: int | None = None
    cards: int | None = None


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """
    Liveness check.

    Returns healthy if the service is running.
    Does not check the store.
    """
    return HealthResponse(status="healthy")


@router.get(
    "/ready",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse}},
)
async def ready(response: Response, store: StoreDep) -> HealthResponse:
    """
    Readiness check.

    Returns 503 if no store is attached or it fails to answer.
    """
    try:
        return HealthResponse(
            status="ready",
            categories=len(store.list_categories()),
            cards=len(store.list_cards()),
        )
    except Exception:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return HealthResponse(status="not ready")
