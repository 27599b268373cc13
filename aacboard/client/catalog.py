"""
HTTP client for the catalog API.

Used by the board session to load categories and cards. Responses are
converted back into catalog records.
"""

import logging
from collections.abc import Callable
from typing import Any, TypeVar

import httpx

from aacboard.models.catalog import Card, Category

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Malformed bodies and records surface as one of these
_DECODE_ERRORS = (ValueError, KeyError, TypeError, AttributeError)


class CatalogClientError(Exception):
    """A catalog request failed; carries the server's message when available."""

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


def _category_from_json(data: dict[str, Any]) -> Category:
    return Category(
        id=data["id"],
        name=data["name"],
        name_portuguese=data.get("namePortuguese") or "",
        icon=data["icon"],
        display_order=data.get("displayOrder") or 0,
    )


def _card_from_json(data: dict[str, Any]) -> Card:
    return Card(
        id=data["id"],
        category_id=data["categoryId"],
        label=data["label"],
        label_portuguese=data.get("labelPortuguese") or "",
        image_url=data["imageUrl"],
        display_order=data.get("displayOrder") or 0,
    )


def _error_message(response: httpx.Response) -> str:
    """Server-provided message of an error response, else the reason phrase."""
    try:
        body = response.json()
    except ValueError:
        return response.reason_phrase
    if isinstance(body, dict) and isinstance(body.get("message"), str):
        return body["message"]
    return response.reason_phrase


class CatalogClient:
    """
    Read-only client for the catalog REST surface.

    Args:
        base_url: API root (e.g., "http://localhost:8000")
        client: Optional httpx client for connection reuse or testing
    """

    def __init__(self, base_url: str = "", client: httpx.Client | None = None):
        self._client = client or httpx.Client(base_url=base_url)
        self._owns_client = client is None

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "CatalogClient":
        return self

    def __exit__(self, *_exc: object) -> None:
        self.close()

    def _get(self, path: str, convert: Callable[[Any], T]) -> T:
        """
        GET a path and convert the decoded body.

        Raises:
            CatalogClientError: On transport failure, an error status, or a
                body that does not decode into the expected records
        """
        try:
            response = self._client.get(path)
        except httpx.HTTPError as e:
            logger.error("Request to %s failed: %s", path, e)
            raise CatalogClientError(f"Request failed: {e}") from e

        if response.is_error:
            message = _error_message(response)
            logger.warning("GET %s returned %d: %s", path, response.status_code, message)
            raise CatalogClientError(message, status_code=response.status_code)

        try:
            return convert(response.json())
        except _DECODE_ERRORS as e:
            logger.error("Malformed response from %s: %s", path, e)
            raise CatalogClientError(
                "Invalid response from server", status_code=response.status_code
            ) from e

    def list_categories(self) -> list[Category]:
        """Fetch all categories in display order."""
        return self._get("/api/categories", lambda body: [_category_from_json(i) for i in body])

    def get_category(self, category_id: int) -> Category:
        return self._get(f"/api/categories/{category_id}", _category_from_json)

    def list_cards(self) -> list[Card]:
        return self._get("/api/cards", lambda body: [_card_from_json(i) for i in body])

    def list_cards_by_category(self, category_id: int) -> list[Card]:
        """Fetch one category's cards in display order."""
        return self._get(
            f"/api/categories/{category_id}/cards",
            lambda body: [_card_from_json(i) for i in body],
        )
