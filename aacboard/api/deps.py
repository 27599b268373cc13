import re
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from aacboard.store.catalog import CatalogStore

# Optional sign followed by ASCII digits only
_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def get_store(request: Request) -> CatalogStore:
    """Return the catalog store owned by the running application."""
    store: CatalogStore = request.app.state.store
    return store


StoreDep = Annotated[CatalogStore, Depends(get_store)]


def parse_category_id(raw: str) -> int:
    """
    Parse a category ID path segment.

    Raises:
        HTTPException: 400 if the segment is not an integer
    """
    if not _ID_PATTERN.fullmatch(raw):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid category ID",
        )
    return int(raw)
