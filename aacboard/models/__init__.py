from aacboard.models.catalog import (
    Card,
    CardCreate,
    Category,
    CategoryCreate,
    User,
    UserCreate,
)
from aacboard.models.errors import (
    CatalogError,
    NotFoundError,
    UnexpectedError,
    ValidationError,
)

__all__ = [
    "Card",
    "CardCreate",
    "CatalogError",
    "Category",
    "CategoryCreate",
    "NotFoundError",
    "UnexpectedError",
    "User",
    "UserCreate",
    "ValidationError",
]
