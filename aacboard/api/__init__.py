from aacboard.api.cards import router as cards_router
from aacboard.api.categories import router as categories_router
from aacboard.api.health import router as health_router

__all__ = [
    "cards_router",
    "categories_router",
    "health_router",
]
