"""Tests for card API endpoints."""

from unittest.mock import MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from aacboard.api.deps import get_store
from aacboard.main import app
from aacboard.models.catalog import CardCreate, Category
from aacboard.store.catalog import CatalogStore


def _card_body(category_id: int = 1, **overrides) -> dict:
    body = {
        "categoryId": category_id,
        "label": "Water",
        "labelPortuguese": "Água",
        "imageUrl": "http://x/water.png",
        "displayOrder": 2,
    }
    body.update(overrides)
    return body


class TestListCards:
    async def test_empty(self, client: AsyncClient) -> None:
        response = await client.get("/api/cards")

        assert response.status_code == 200
        assert response.json() == []

    async def test_lists_all_categories(
        self, client: AsyncClient, store: CatalogStore, basic_needs: Category
    ) -> None:
        store.create_card(
            CardCreate(
                category_id=basic_needs.id,
                label="Water",
                label_portuguese="Água",
                image_url="http://x/water.png",
            )
        )

        response = await client.get("/api/cards")

        assert response.status_code == 200
        assert response.json() == [
            {
                "id": 1,
                "categoryId": 1,
                "label": "Water",
                "labelPortuguese": "Água",
                "imageUrl": "http://x/water.png",
                "displayOrder": 0,
            }
        ]

    async def test_store_failure_returns_500(self) -> None:
        broken = MagicMock()
        broken.list_cards.side_effect = RuntimeError("boom")
        app.dependency_overrides[get_store] = lambda: broken

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/api/cards")

        app.dependency_overrides.clear()

        assert response.status_code == 500
        assert response.json() == {"message": "Failed to fetch cards"}


class TestCreateCard:
    async def test_created(
        self,
        client: AsyncClient,
        basic_needs: Category,  # noqa: ARG002
    ) -> None:
        response = await client.post("/api/cards", json=_card_body())

        assert response.status_code == 201
        assert response.json() == {
            "id": 1,
            "categoryId": 1,
            "label": "Water",
            "labelPortuguese": "Água",
            "imageUrl": "http://x/water.png",
            "displayOrder": 2,
        }

    async def test_unknown_category_returns_404(
        self,
        client: AsyncClient,
        basic_needs: Category,  # noqa: ARG002
    ) -> None:
        response = await client.post("/api/cards", json=_card_body(category_id=9999))

        assert response.status_code == 404
        assert response.json() == {"message": "Category not found"}

    async def test_ftp_image_returns_400(
        self,
        client: AsyncClient,
        store: CatalogStore,
        basic_needs: Category,  # noqa: ARG002
    ) -> None:
        response = await client.post("/api/cards", json=_card_body(imageUrl="ftp://x"))

        assert response.status_code == 400
        assert response.json() == {
            "message": 'Validation error: A valid image URL is required at "imageUrl"'
        }
        assert store.list_cards() == []

    @pytest.mark.parametrize("label_portuguese", ["", "   "])
    async def test_blank_portuguese_label_returns_400(
        self,
        client: AsyncClient,
        basic_needs: Category,  # noqa: ARG002
        label_portuguese: str,
    ) -> None:
        response = await client.post(
            "/api/cards", json=_card_body(labelPortuguese=label_portuguese)
        )

        assert response.status_code == 400
        assert '"labelPortuguese"' in response.json()["message"]

    async def test_omitted_portuguese_label_returns_400(
        self,
        client: AsyncClient,
        basic_needs: Category,  # noqa: ARG002
    ) -> None:
        body = _card_body()
        del body["labelPortuguese"]

        response = await client.post("/api/cards", json=body)

        assert response.status_code == 400

    async def test_missing_image_returns_400(self, client: AsyncClient) -> None:
        body = _card_body()
        del body["imageUrl"]

        response = await client.post("/api/cards", json=body)

        assert response.status_code == 400
        assert response.json()["message"] == 'Validation error: Field required at "imageUrl"'

    async def test_non_integer_category_returns_400(self, client: AsyncClient) -> None:
        response = await client.post("/api/cards", json=_card_body(category_id="abc"))

        assert response.status_code == 400
        assert '"categoryId"' in response.json()["message"]

    @pytest.mark.parametrize("category_id", [True, "1", 1.5])
    async def test_non_integer_category_types_return_400(
        self,
        client: AsyncClient,
        store: CatalogStore,
        basic_needs: Category,  # noqa: ARG002
        category_id: object,
    ) -> None:
        response = await client.post("/api/cards", json=_card_body(category_id=category_id))

        assert response.status_code == 400
        assert '"categoryId"' in response.json()["message"]
        assert store.list_cards() == []

    async def test_unexpected_failure_returns_500(self) -> None:
        broken = MagicMock()
        broken.get_category.return_value = object()
        broken.create_card.side_effect = RuntimeError("boom")
        app.dependency_overrides[get_store] = lambda: broken

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.post("/api/cards", json=_card_body())

        app.dependency_overrides.clear()

        assert response.status_code == 500
        assert response.json() == {"message": "Failed to create card"}


class TestCardOrderingEndToEnd:
    async def test_cards_listed_by_display_order(self, client: AsyncClient) -> None:
        """Food (order 1) is listed before Water (order 2) despite being created later."""
        created = await client.post(
            "/api/categories", json={"name": "Basic Needs", "icon": "home", "displayOrder": 1}
        )
        assert created.json()["id"] == 1

        water = await client.post(
            "/api/cards",
            json=_card_body(label="Water", imageUrl="http://x/water.png", displayOrder=2),
        )
        food = await client.post(
            "/api/cards",
            json=_card_body(
                label="Food",
                labelPortuguese="Comida",
                imageUrl="http://x/food.png",
                displayOrder=1,
            ),
        )
        assert water.status_code == food.status_code == 201

        response = await client.get("/api/categories/1/cards")

        assert response.status_code == 200
        assert [c["label"] for c in response.json()] == ["Food", "Water"]
