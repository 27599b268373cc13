"""
Category API endpoints.

Lists and creates board categories and serves each category's cards.
"""

import logging

from fastapi import APIRouter, HTTPException, status

from aacboard.api.deps import StoreDep, parse_category_id
from aacboard.api.schemas import (
    CardResponse,
    CategoryCreateRequest,
    CategoryResponse,
    MessageResponse,
)
from aacboard.models.errors import CatalogError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/categories", tags=["categories"])

_NOT_FOUND = "Category not found"


@router.get("", response_model=list[CategoryResponse])
async def list_categories(store: StoreDep) -> list[CategoryResponse]:
    """
    List all categories.

    Returns categories ordered by display order (ascending).
    """
    try:
        categories = store.list_categories()
    except Exception as e:
        logger.exception("Error fetching categories")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch categories",
        ) from e

    return [CategoryResponse.from_model(c) for c in categories]


@router.get(
    "/{category_id}",
    response_model=CategoryResponse,
    responses={400: {"model": MessageResponse}, 404: {"model": MessageResponse}},
)
async def get_category(category_id: str, store: StoreDep) -> CategoryResponse:
    """
    Get a single category.

    Returns 400 if the ID is not an integer, 404 if it does not exist.
    """
    parsed_id = parse_category_id(category_id)

    try:
        category = store.get_category(parsed_id)
    except Exception as e:
        logger.exception("Error fetching category %d", parsed_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch category",
        ) from e

    if category is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_NOT_FOUND)

    return CategoryResponse.from_model(category)


@router.post(
    "",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": MessageResponse}},
)
async def create_category(request: CategoryCreateRequest, store: StoreDep) -> CategoryResponse:
    """
    Create a category.

    Portuguese name defaults to "" and display order to 0.
    """
    try:
        category = store.create_category(request.to_model())
    except CatalogError:
        # Handled by the catalog error handler
        raise
    except Exception as e:
        logger.exception("Error creating category")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create category",
        ) from e

    return CategoryResponse.from_model(category)


@router.get(
    "/{category_id}/cards",
    response_model=list[CardResponse],
    responses={400: {"model": MessageResponse}, 404: {"model": MessageResponse}},
)
async def list_category_cards(category_id: str, store: StoreDep) -> list[CardResponse]:
    """
    List the cards of one category.

    Returns cards ordered by display order (ascending), 404 if the
    category does not exist.
    """
    parsed_id = parse_category_id(category_id)

    try:
        category = store.get_category(parsed_id)
        cards = store.list_cards_by_category(parsed_id) if category else []
    except Exception as e:
        logger.exception("Error fetching cards for category %d", parsed_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch cards for category",
        ) from e

    if category is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_NOT_FOUND)

    return [CardResponse.from_model(c) for c in cards]
