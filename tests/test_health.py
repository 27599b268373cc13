"""Smoke tests for application startup."""

from fastapi.testclient import TestClient

from aacboard.main import create_app
from aacboard.store.catalog import CatalogStore


def test_app_imports() -> None:
    """Verify the app can be imported without errors."""
    from aacboard.main import app

    assert app.title == "AAC Board"


def test_lifespan_creates_seeded_store() -> None:
    app = create_app()

    with TestClient(app) as client:
        response = client.get("/api/categories")

    assert response.status_code == 200
    assert len(response.json()) == 6
    assert isinstance(app.state.store, CatalogStore)


def test_supplied_store_is_kept() -> None:
    store = CatalogStore(seed=False)
    app = create_app(store=store)

    with TestClient(app) as client:
        response = client.get("/api/categories")

    assert response.json() == []
    assert app.state.store is store
