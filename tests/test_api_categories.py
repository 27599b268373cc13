"""Tests for category API endpoints."""

from unittest.mock import MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from aacboard.api.deps import get_store
from aacboard.main import app
from aacboard.models.catalog import Category, CategoryCreate
from aacboard.models.errors import UnexpectedError
from aacboard.store.catalog import CatalogStore


async def _request_with_store(store: object, method: str, url: str, **kwargs):
    app.dependency_overrides[get_store] = lambda: store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.request(method, url, **kwargs)
    app.dependency_overrides.clear()
    return response


class TestListCategories:
    async def test_empty(self, client: AsyncClient) -> None:
        response = await client.get("/api/categories")

        assert response.status_code == 200
        assert response.json() == []

    async def test_ordered_by_display_order(
        self, client: AsyncClient, store: CatalogStore
    ) -> None:
        store.create_category(CategoryCreate(name="Second", icon="b", display_order=2))
        store.create_category(CategoryCreate(name="First", icon="a", display_order=1))

        response = await client.get("/api/categories")

        assert response.status_code == 200
        assert [c["name"] for c in response.json()] == ["First", "Second"]

    async def test_camel_case_fields(
        self,
        client: AsyncClient,
        basic_needs: Category,  # noqa: ARG002
    ) -> None:
        response = await client.get("/api/categories")

        assert response.json()[0] == {
            "id": 1,
            "name": "Basic Needs",
            "namePortuguese": "",
            "icon": "home",
            "displayOrder": 1,
        }

    async def test_store_failure_returns_500(self) -> None:
        broken = MagicMock()
        broken.list_categories.side_effect = RuntimeError("boom")

        response = await _request_with_store(broken, "GET", "/api/categories")

        assert response.status_code == 500
        assert response.json() == {"message": "Failed to fetch categories"}


class TestGetCategory:
    async def test_found(self, client: AsyncClient, basic_needs: Category) -> None:
        response = await client.get(f"/api/categories/{basic_needs.id}")

        assert response.status_code == 200
        assert response.json()["name"] == "Basic Needs"

    async def test_not_found(self, client: AsyncClient) -> None:
        response = await client.get("/api/categories/9999")

        assert response.status_code == 404
        assert response.json() == {"message": "Category not found"}

    async def test_non_integer_id(self, client: AsyncClient) -> None:
        response = await client.get("/api/categories/abc")

        assert response.status_code == 400
        assert response.json() == {"message": "Invalid category ID"}

    @pytest.mark.parametrize("raw_id", ["0_1", "1.0", "1e2", "%201"])
    async def test_non_decimal_id_rejected(
        self,
        client: AsyncClient,
        basic_needs: Category,  # noqa: ARG002
        raw_id: str,
    ) -> None:
        response = await client.get(f"/api/categories/{raw_id}")

        assert response.status_code == 400
        assert response.json() == {"message": "Invalid category ID"}

    async def test_signed_id_accepted(self, client: AsyncClient, basic_needs: Category) -> None:
        response = await client.get("/api/categories/+1")

        assert response.status_code == 200
        assert response.json()["id"] == basic_needs.id


class TestCreateCategory:
    async def test_created(self, client: AsyncClient, store: CatalogStore) -> None:
        response = await client.post(
            "/api/categories",
            json={
                "name": "Places",
                "namePortuguese": "Lugares",
                "icon": "place",
                "displayOrder": 4,
            },
        )

        assert response.status_code == 201
        assert response.json() == {
            "id": 1,
            "name": "Places",
            "namePortuguese": "Lugares",
            "icon": "place",
            "displayOrder": 4,
        }
        assert store.get_category(1) is not None

    async def test_defaults_applied(self, client: AsyncClient) -> None:
        response = await client.post("/api/categories", json={"name": "Places", "icon": "place"})

        assert response.status_code == 201
        data = response.json()
        assert data["namePortuguese"] == ""
        assert data["displayOrder"] == 0

    async def test_missing_field_returns_400(self, client: AsyncClient) -> None:
        response = await client.post("/api/categories", json={"name": "Places"})

        assert response.status_code == 400
        message = response.json()["message"]
        assert message.startswith("Validation error")
        assert '"icon"' in message

    async def test_wrong_type_returns_400(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/categories",
            json={"name": "Places", "icon": "place", "displayOrder": "first"},
        )

        assert response.status_code == 400
        assert '"displayOrder"' in response.json()["message"]

    async def test_boolean_display_order_returns_400(
        self, client: AsyncClient, store: CatalogStore
    ) -> None:
        response = await client.post(
            "/api/categories",
            json={"name": "Places", "icon": "place", "displayOrder": True},
        )

        assert response.status_code == 400
        assert '"displayOrder"' in response.json()["message"]
        assert store.list_categories() == []

    async def test_empty_name_returns_400(self, client: AsyncClient, store: CatalogStore) -> None:
        response = await client.post("/api/categories", json={"name": "", "icon": "place"})

        assert response.status_code == 400
        assert response.json() == {
            "message": 'Validation error: Category name is required at "name"'
        }
        assert store.list_categories() == []

    async def test_store_fault_returns_500(self) -> None:
        broken = MagicMock()
        broken.create_category.side_effect = UnexpectedError("disk on fire")

        response = await _request_with_store(
            broken, "POST", "/api/categories", json={"name": "Places", "icon": "place"}
        )

        assert response.status_code == 500
        assert response.json() == {"message": "Internal server error"}

    async def test_unexpected_failure_returns_500(self) -> None:
        broken = MagicMock()
        broken.create_category.side_effect = RuntimeError("boom")

        response = await _request_with_store(
            broken, "POST", "/api/categories", json={"name": "Places", "icon": "place"}
        )

        assert response.status_code == 500
        assert response.json() == {"message": "Failed to create category"}


class TestListCategoryCards:
    async def test_non_integer_id(self, client: AsyncClient) -> None:
        response = await client.get("/api/categories/x1/cards")

        assert response.status_code == 400
        assert response.json() == {"message": "Invalid category ID"}

    async def test_unknown_category(self, client: AsyncClient) -> None:
        response = await client.get("/api/categories/9999/cards")

        assert response.status_code == 404
        assert response.json() == {"message": "Category not found"}

    async def test_empty_category(self, client: AsyncClient, basic_needs: Category) -> None:
        response = await client.get(f"/api/categories/{basic_needs.id}/cards")

        assert response.status_code == 200
        assert response.json() == []

    async def test_store_failure_returns_500(self) -> None:
        broken = MagicMock()
        broken.get_category.side_effect = RuntimeError("boom")

        response = await _request_with_store(broken, "GET", "/api/categories/1/cards")

        assert response.status_code == 500
        assert response.json() == {"message": "Failed to fetch cards for category"}
