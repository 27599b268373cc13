"""
Message composition state.

Holds the selected category, the ordered cards the user has tapped and
the active locale. The composed text is derived on access, so it always
reflects the current selection and locale.
"""

import logging
from dataclasses import dataclass

from aacboard.composer.labels import PRIMARY_LOCALE, Locale, label_for
from aacboard.models.catalog import Card

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SelectedCard:
    """Projection of a card kept in the message, with both labels."""

    id: int
    label: str
    label_portuguese: str
    image_url: str

    @classmethod
    def from_card(cls, card: Card) -> "SelectedCard":
        return cls(
            id=card.id,
            label=card.label,
            label_portuguese=card.label_portuguese,
            image_url=card.image_url,
        )


class MessageComposer:
    """
    Accumulates tapped cards into an ordered message.

    Appending is the only way cards enter the message: duplicates are
    kept and order is never changed. Switching locale changes rendering
    only, never the selection.
    """

    def __init__(self, locale: Locale = PRIMARY_LOCALE) -> None:
        self.selected_category_id: int | None = None
        self.locale = locale
        self._selected_cards: list[SelectedCard] = []

    @property
    def selected_cards(self) -> tuple[SelectedCard, ...]:
        return tuple(self._selected_cards)

    @property
    def is_empty(self) -> bool:
        return not self._selected_cards

    @property
    def composed_text(self) -> str:
        """Space-joined labels of the selected cards in the active locale."""
        return " ".join(label_for(card, self.locale) for card in self._selected_cards)

    @property
    def rendered_labels(self) -> list[str]:
        """Per-card labels in the active locale, in message order."""
        return [label_for(card, self.locale) for card in self._selected_cards]

    def select_category(self, category_id: int) -> None:
        self.selected_category_id = category_id

    def append_card(self, card: Card | SelectedCard) -> SelectedCard:
        """Append a card to the end of the message."""
        selected = card if isinstance(card, SelectedCard) else SelectedCard.from_card(card)
        self._selected_cards.append(selected)
        logger.debug(
            "Appended card %d; message has %d cards", selected.id, len(self._selected_cards)
        )
        return selected

    def clear(self) -> None:
        self._selected_cards.clear()

    def set_locale(self, locale: Locale) -> None:
        self.locale = locale
