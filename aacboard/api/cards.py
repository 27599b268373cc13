"""
Card API endpoints.

Lists every card and creates new cards under an existing category.
"""

import logging

from fastapi import APIRouter, HTTPException, status

from aacboard.api.deps import StoreDep
from aacboard.api.schemas import CardCreateRequest, CardResponse, MessageResponse
from aacboard.models.errors import CatalogError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/cards", tags=["cards"])


@router.get("", response_model=list[CardResponse])
async def list_cards(store: StoreDep) -> list[CardResponse]:
    """List all cards in creation order."""
    try:
        cards = store.list_cards()
    except Exception as e:
        logger.exception("Error fetching cards")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch cards",
        ) from e

    return [CardResponse.from_model(c) for c in cards]


@router.post(
    "",
    response_model=CardResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": MessageResponse}, 404: {"model": MessageResponse}},
)
async def create_card(request: CardCreateRequest, store: StoreDep) -> CardResponse:
    """
    Create a card.

    The category is resolved first (404 if absent), then the store
    validates both labels and the image URL (400 on failure).
    """
    try:
        if store.get_category(request.category_id) is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Category not found",
            )
        card = store.create_card(request.to_model())
    except (HTTPException, CatalogError):
        raise
    except Exception as e:
        logger.exception("Error creating card")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create card",
        ) from e

    return CardResponse.from_model(card)
