"""
Catalog records.

Categories group cards; cards are the tappable, image-labelled units
of a message. Both carry an English label and a Brazilian Portuguese one.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Category:
    """
    A group of cards shown as one board tab.

    Attributes:
        id: Store-assigned identifier, starting at 1
        name: English display name
        name_portuguese: Portuguese display name ("" when not provided)
        icon: Symbolic glyph key (e.g., "home", "emoji_emotions")
        display_order: Ascending presentation order
    """

    id: int
    name: str
    name_portuguese: str
    icon: str
    display_order: int = 0


@dataclass(frozen=True, slots=True)
class Card:
    """
    A communication card.

    Attributes:
        id: Store-assigned identifier, starting at 1
        category_id: Owning category, fixed at creation
        label: English label
        label_portuguese: Portuguese label ("" when not provided)
        image_url: Absolute http(s) image location
        display_order: Ascending order within the category
    """

    id: int
    category_id: int
    label: str
    label_portuguese: str
    image_url: str
    display_order: int = 0


@dataclass(frozen=True, slots=True)
class User:
    """Account record. Kept for schema completeness; no route reads it."""

    id: int
    username: str
    password: str


@dataclass(frozen=True, slots=True)
class CategoryCreate:
    """Input for creating a category. Omitted fields receive store defaults."""

    name: str
    icon: str
    name_portuguese: str | None = None
    display_order: int | None = None


@dataclass(frozen=True, slots=True)
class CardCreate:
    """Input for creating a card."""

    category_id: int | None
    label: str
    image_url: str
    label_portuguese: str | None = None
    display_order: int | None = None


@dataclass(frozen=True, slots=True)
class UserCreate:
    """Input for creating a user."""

    username: str
    password: str
