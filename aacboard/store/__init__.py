from aacboard.store.catalog import CatalogStore
from aacboard.store.seed import seed_catalog

__all__ = [
    "CatalogStore",
    "seed_catalog",
]
