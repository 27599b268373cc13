from aacboard.client.catalog import CatalogClient, CatalogClientError

__all__ = [
    "CatalogClient",
    "CatalogClientError",
]
