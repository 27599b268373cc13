"""
Locale handling for board labels.

All locale-dependent text selection goes through ``label_for`` so the
Portuguese-to-English fallback lives in one place.
"""

from enum import Enum
from typing import TYPE_CHECKING

from aacboard.models.catalog import Card, Category

if TYPE_CHECKING:
    from aacboard.composer.message import SelectedCard


class Locale(str, Enum):
    """Supported board locales."""

    EN_US = "en-US"
    PT_BR = "pt-BR"

    @property
    def language(self) -> str:
        """Language prefix of the locale tag (e.g., "pt")."""
        return self.value.split("-")[0]

    @property
    def is_primary(self) -> bool:
        return self is Locale.EN_US


PRIMARY_LOCALE = Locale.EN_US

# Glyphs for category icon keys; unknown keys render blank
ICON_GLYPHS: dict[str, str] = {
    "home": "\U0001f3e0",
    "emoji_emotions": "\U0001f642",
    "directions_run": "\U0001f463",
    "place": "\U0001f4cd",
    "person": "\U0001f464",
}


def label_for(entity: "Category | Card | SelectedCard", locale: Locale) -> str:
    """
    Return an entity's display label in the given locale.

    The secondary locale falls back to the primary label when its own
    label is empty.
    """
    if isinstance(entity, Category):
        primary, secondary = entity.name, entity.name_portuguese
    else:
        primary, secondary = entity.label, entity.label_portuguese

    if locale.is_primary or not secondary:
        return primary
    return secondary


def icon_glyph(icon: str) -> str:
    return ICON_GLYPHS.get(icon, "")
