"""
Speech adapter.

Wraps a host speech platform as a capability-gated service. When no
platform is present every operation is a no-op; callers decide how to
tell the user.
"""

import logging
from collections.abc import Callable

from aacboard.composer.labels import PRIMARY_LOCALE, Locale
from aacboard.speech.platform import SpeechPlatform, Utterance, Voice

logger = logging.getLogger(__name__)

DEFAULT_RATE = 0.9
DEFAULT_PITCH = 1.0

NATURAL_VOICE_MARKER = "Natural"


def choose_voice(voices: list[Voice], locale: Locale) -> Voice | None:
    """
    Pick a natural-sounding voice for the locale's language.

    Returns None when no such voice exists, leaving the platform default.
    """
    return next(
        (v for v in voices if NATURAL_VOICE_MARKER in v.name and locale.language in v.lang),
        None,
    )


class SpeechAdapter:
    """
    Speaks composed messages through a host platform.

    A new ``speak`` supersedes the utterance in flight instead of queueing
    behind it. Each utterance ends at most once; late callbacks from a
    superseded utterance are ignored.

    Args:
        platform: Host speech capability, or None when unavailable
        locale: Locale tag applied to utterances
        rate: Speaking rate (1.0 is normal)
        pitch: Voice pitch (1.0 is normal)
        on_speaking_change: Called with the new value whenever ``speaking`` flips
    """

    def __init__(
        self,
        platform: SpeechPlatform | None,
        locale: Locale = PRIMARY_LOCALE,
        rate: float = DEFAULT_RATE,
        pitch: float = DEFAULT_PITCH,
        on_speaking_change: Callable[[bool], None] | None = None,
    ) -> None:
        self._platform = platform
        self.locale = locale
        self.rate = rate
        self.pitch = pitch
        self.speaking = False
        self._on_speaking_change = on_speaking_change
        self._current: Utterance | None = None

    @property
    def supported(self) -> bool:
        return self._platform is not None

    def set_locale(self, locale: Locale) -> None:
        self.locale = locale

    def speak(self, text: str) -> None:
        """Speak text, cancelling anything already being spoken."""
        if self._platform is None:
            return

        self._cancel_current()

        utterance = Utterance(
            text=text,
            lang=self.locale.value,
            rate=self.rate,
            pitch=self.pitch,
            voice=choose_voice(self._platform.voices(), self.locale),
        )
        utterance.on_start = lambda: self._handle_start(utterance)
        utterance.on_end = lambda: self._handle_end(utterance)
        utterance.on_error = lambda: self._handle_end(utterance)

        self._current = utterance
        logger.debug("Speaking %d characters in %s", len(text), utterance.lang)
        self._platform.speak(utterance)

    def cancel(self) -> None:
        """Stop any utterance in flight."""
        if self._platform is None:
            return
        self._cancel_current()
        self._set_speaking(False)

    def _cancel_current(self) -> None:
        if self._platform is None:
            return
        previous = self._current
        self._platform.cancel()
        # The platform may not report the cancellation itself
        if previous is not None:
            self._handle_end(previous)

    def _handle_start(self, utterance: Utterance) -> None:
        if utterance is not self._current:
            return
        self._set_speaking(True)

    def _handle_end(self, utterance: Utterance) -> None:
        if utterance is not self._current:
            return
        self._current = None
        self._set_speaking(False)

    def _set_speaking(self, value: bool) -> None:
        if self.speaking == value:
            return
        self.speaking = value
        if self._on_speaking_change is not None:
            self._on_speaking_change(value)
