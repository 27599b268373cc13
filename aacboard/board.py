"""
Board session.

Drives one user's board: loads categories and cards through the catalog
client, feeds taps into the message composer and hands the composed text
to the speech adapter. User-facing feedback is emitted as bilingual
notifications through an injected callback.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from aacboard.client.catalog import CatalogClient, CatalogClientError
from aacboard.composer.labels import Locale, label_for
from aacboard.composer.message import MessageComposer, SelectedCard
from aacboard.config import Settings, settings
from aacboard.models.catalog import Card, Category
from aacboard.speech.adapter import SpeechAdapter
from aacboard.speech.platform import SpeechPlatform

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Notification:
    """A one-shot message for the user."""

    title: str
    description: str
    destructive: bool = False


# (title, description) per locale
_TEXT: dict[str, dict[Locale, tuple[str, str]]] = {
    "card_added": {
        Locale.EN_US: ("Card added", 'Added "{label}" to your message'),
        Locale.PT_BR: ("Cartão adicionado", 'Adicionado "{label}" à sua mensagem'),
    },
    "message_cleared": {
        Locale.EN_US: ("Message cleared", "Your message has been cleared"),
        Locale.PT_BR: ("Mensagem apagada", "Sua mensagem foi apagada"),
    },
    "speech_unsupported": {
        Locale.EN_US: (
            "Speech synthesis not supported",
            "Your browser does not support speech synthesis.",
        ),
        Locale.PT_BR: (
            "Síntese de voz não suportada",
            "Seu navegador não suporta síntese de voz.",
        ),
    },
    "no_cards": {
        Locale.EN_US: ("No cards selected", "Please select some cards to create a message."),
        Locale.PT_BR: (
            "Nenhum cartão selecionado",
            "Por favor, selecione alguns cartões para criar uma mensagem.",
        ),
    },
    "locale_changed": {
        Locale.EN_US: ("English selected", "Speech will be in English"),
        Locale.PT_BR: ("Português selecionado", "A fala será em Português Brasileiro"),
    },
}

EMPTY_MESSAGE_PROMPT: dict[Locale, str] = {
    Locale.EN_US: "Select cards below to build your message",
    Locale.PT_BR: "Selecione cartões abaixo para construir sua mensagem",
}


class BoardSession:
    """
    UI state for one communication board.

    Args:
        client: Catalog API client
        composer: Message state; a fresh composer when omitted
        speech: Speech adapter; an unsupported adapter when omitted
        notify: Receives user notifications
    """

    def __init__(
        self,
        client: CatalogClient,
        composer: MessageComposer | None = None,
        speech: SpeechAdapter | None = None,
        notify: Callable[[Notification], None] | None = None,
    ) -> None:
        self.client = client
        self.composer = composer or MessageComposer()
        self.speech = speech or SpeechAdapter(None, locale=self.composer.locale)
        self._notify = notify

        self.categories: list[Category] = []
        self.categories_error: str | None = None
        self.cards: list[Card] = []
        self.cards_error: str | None = None

    @classmethod
    def from_settings(
        cls,
        platform: SpeechPlatform | None = None,
        notify: Callable[[Notification], None] | None = None,
        config: Settings = settings,
    ) -> "BoardSession":
        """Build a session against the configured API, locale and voice settings."""
        locale = config.default_locale
        return cls(
            client=CatalogClient(base_url=config.api_base_url),
            composer=MessageComposer(locale=locale),
            speech=SpeechAdapter(
                platform,
                locale=locale,
                rate=config.speech_rate,
                pitch=config.speech_pitch,
            ),
            notify=notify,
        )

    @property
    def locale(self) -> Locale:
        return self.composer.locale

    @property
    def can_speak(self) -> bool:
        return not self.composer.is_empty and not self.speech.speaking

    @property
    def message_placeholder(self) -> str | None:
        """Prompt shown in place of an empty message."""
        if self.composer.is_empty:
            return EMPTY_MESSAGE_PROMPT[self.locale]
        return None

    def _send(self, key: str, destructive: bool = False, **values: str) -> None:
        if self._notify is None:
            return
        title, description = _TEXT[key][self.locale]
        self._notify(
            Notification(
                title=title,
                description=description.format(**values),
                destructive=destructive,
            )
        )

    # --- Catalog loading ---

    def load_categories(self) -> list[Category]:
        """
        Fetch the category list.

        On the first successful load with nothing selected, the first
        category is selected and its cards loaded. A failed fetch records
        ``categories_error`` and leaves the previous list in place.
        """
        try:
            categories = self.client.list_categories()
        except CatalogClientError as e:
            logger.warning("Failed to load categories: %s", e.message)
            self.categories_error = f"Error loading categories: {e.message}"
            return self.categories

        self.categories = categories
        self.categories_error = None

        if categories and self.composer.selected_category_id is None:
            self.select_category(categories[0].id)

        return categories

    def select_category(self, category_id: int) -> None:
        """Select a category and load its cards."""
        self.composer.select_category(category_id)
        self.cards = []
        self.cards_error = None

        try:
            cards = self.client.list_cards_by_category(category_id)
        except CatalogClientError as e:
            logger.warning("Failed to load cards for category %d: %s", category_id, e.message)
            if self.composer.selected_category_id == category_id:
                self.cards_error = f"Error loading cards: {e.message}"
            return

        self.receive_cards(category_id, cards)

    def receive_cards(self, category_id: int, cards: list[Card]) -> bool:
        """
        Apply a card fetch result.

        Results for a category that is no longer selected are dropped, so
        the latest selection always wins.
        """
        if self.composer.selected_category_id != category_id:
            logger.debug("Dropping cards for superseded category %d", category_id)
            return False
        self.cards = cards
        return True

    # --- Message ---

    def tap_card(self, card: Card) -> SelectedCard:
        selected = self.composer.append_card(card)
        self._send("card_added", label=label_for(selected, self.locale))
        return selected

    def clear(self) -> None:
        self.composer.clear()
        self._send("message_cleared")

    def set_locale(self, locale: Locale) -> None:
        """Switch rendering and speech to another locale."""
        self.composer.set_locale(locale)
        self.speech.set_locale(locale)
        self._send("locale_changed")

    def speak(self) -> bool:
        """
        Speak the composed message.

        Returns False, after notifying the user, when speech is
        unavailable or the message is empty. Composer state is untouched.
        """
        if not self.speech.supported:
            self._send("speech_unsupported", destructive=True)
            return False

        if self.composer.is_empty:
            self._send("no_cards", destructive=True)
            return False

        self.speech.speak(self.composer.composed_text)
        return True
