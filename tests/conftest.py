import pytest
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from aacboard.api.deps import get_store
from aacboard.main import app
from aacboard.models.catalog import CategoryCreate
from aacboard.store.catalog import CatalogStore


@pytest.fixture
def store() -> CatalogStore:
    """Empty catalog store (no seed data)."""
    return CatalogStore(seed=False)


@pytest.fixture
def seeded_store() -> CatalogStore:
    """Catalog store with the built-in seed."""
    return CatalogStore()


@pytest.fixture
def basic_needs(store: CatalogStore):
    """A single 'Basic Needs' category in the empty store (id=1)."""
    return store.create_category(CategoryCreate(name="Basic Needs", icon="home", display_order=1))


@pytest.fixture
async def client(store: CatalogStore):
    """Provide an async test client serving the given store."""
    app.dependency_overrides[get_store] = lambda: store

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def sync_client(seeded_store: CatalogStore):
    """Synchronous httpx client (TestClient) serving the seeded store."""
    app.dependency_overrides[get_store] = lambda: seeded_store

    yield TestClient(app)

    app.dependency_overrides.clear()
