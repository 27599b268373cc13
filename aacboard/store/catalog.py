"""
In-memory catalog store.

Owns categories, cards and users for the lifetime of the process.
Records are append-only: nothing is updated or deleted, and ids come
from one monotonically increasing counter per entity kind.
"""

import logging

from aacboard.models.catalog import (
    Card,
    CardCreate,
    Category,
    CategoryCreate,
    User,
    UserCreate,
)
from aacboard.models.errors import NotFoundError, ValidationError
from aacboard.store.seed import seed_catalog

logger = logging.getLogger(__name__)


def _is_blank(value: str | None) -> bool:
    return not value or not value.strip()


class CatalogStore:
    """
    Authoritative collections of categories and cards.

    Construct one per application and hand it to the API layer; there is
    no module-level instance. All operations are synchronous and complete
    without yielding, so concurrently dispatched requests cannot interleave
    inside them.
    """

    def __init__(self, seed: bool = True) -> None:
        self._categories: dict[int, Category] = {}
        self._cards: dict[int, Card] = {}
        self._users: dict[int, User] = {}

        self._next_category_id = 1
        self._next_card_id = 1
        self._next_user_id = 1

        if seed:
            seed_catalog(self)
            logger.info(
                "Seeded catalog with %d categories and %d cards",
                len(self._categories),
                len(self._cards),
            )

    # --- Category Operations ---

    def list_categories(self) -> list[Category]:
        """Return all categories by ascending display order, ties in insertion order."""
        return sorted(self._categories.values(), key=lambda c: c.display_order)

    def get_category(self, category_id: int) -> Category | None:
        return self._categories.get(category_id)

    def create_category(self, data: CategoryCreate) -> Category:
        """
        Create a category.

        Raises:
            ValidationError: If name or icon is empty
        """
        if not data.name:
            raise ValidationError("Category name is required", field="name")
        if not data.icon:
            raise ValidationError("Category icon is required", field="icon")

        category = self.add_category(data)
        logger.info("Created category %d (%s)", category.id, category.name)
        return category

    def add_category(self, data: CategoryCreate) -> Category:
        """Store a category with defaults applied, without validation."""
        category = Category(
            id=self._next_category_id,
            name=data.name,
            name_portuguese=data.name_portuguese or "",
            icon=data.icon,
            display_order=data.display_order or 0,
        )
        self._next_category_id += 1
        self._categories[category.id] = category
        return category

    # --- Card Operations ---

    def list_cards(self) -> list[Card]:
        """Return every card in creation order."""
        return list(self._cards.values())

    def list_cards_by_category(self, category_id: int) -> list[Card]:
        """Return a category's cards by ascending display order, ties in creation order."""
        cards = [card for card in self._cards.values() if card.category_id == category_id]
        return sorted(cards, key=lambda c: c.display_order)

    def create_card(self, data: CardCreate) -> Card:
        """
        Create a card after strict validation.

        Both labels must be non-blank and the image must be an http(s) URL.

        Raises:
            ValidationError: If a required field is missing or malformed
            NotFoundError: If the category does not exist
        """
        if not data.category_id:
            raise ValidationError("Category ID is required", field="categoryId")
        if _is_blank(data.label):
            raise ValidationError("Card label is required", field="label")
        if _is_blank(data.label_portuguese):
            raise ValidationError("Portuguese label is required", field="labelPortuguese")
        if not data.image_url or not data.image_url.startswith("http"):
            raise ValidationError("A valid image URL is required", field="imageUrl")

        if data.category_id not in self._categories:
            raise NotFoundError("Category", data.category_id)

        card = self.add_card(data)
        logger.info(
            "Created card %d (%s) in category %d", card.id, card.label, card.category_id
        )
        return card

    def add_card(self, data: CardCreate) -> Card:
        """Store a card with defaults applied, without validation."""
        if data.category_id is None:
            msg = "Card requires a category ID"
            raise ValueError(msg)

        card = Card(
            id=self._next_card_id,
            category_id=data.category_id,
            label=data.label,
            label_portuguese=data.label_portuguese or "",
            image_url=data.image_url,
            display_order=data.display_order or 0,
        )
        self._next_card_id += 1
        self._cards[card.id] = card
        return card

    # --- User Operations ---

    def get_user(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> User | None:
        return next((u for u in self._users.values() if u.username == username), None)

    def create_user(self, data: UserCreate) -> User:
        """
        Create a user.

        Raises:
            ValidationError: If the username is already taken
        """
        if self.get_user_by_username(data.username) is not None:
            raise ValidationError(f"Username '{data.username}' already exists", field="username")

        user = User(id=self._next_user_id, username=data.username, password=data.password)
        self._next_user_id += 1
        self._users[user.id] = user
        return user
