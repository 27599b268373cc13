"""
Speech platform contracts and an in-memory platform.

The host supplies the actual synthesis. A platform receives utterances
and reports their lifecycle through the utterance callbacks.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol


@dataclass(frozen=True, slots=True)
class Voice:
    """A platform voice, e.g. Voice(name="Microsoft Francisca Online (Natural)", lang="pt-BR")."""

    name: str
    lang: str


@dataclass(slots=True)
class Utterance:
    """One request to speak a piece of text."""

    text: str
    lang: str
    rate: float
    pitch: float
    voice: Voice | None = None
    on_start: Callable[[], None] | None = None
    on_end: Callable[[], None] | None = None
    on_error: Callable[[], None] | None = None


class SpeechPlatform(Protocol):
    """Text-to-speech capability provided by the host."""

    def voices(self) -> list[Voice]: ...

    def speak(self, utterance: Utterance) -> None: ...

    def cancel(self) -> None: ...


@dataclass
class RecordingSpeechPlatform:
    """
    In-memory platform that records utterances.

    Playback is driven explicitly with ``start``, ``finish`` and ``fail``.
    ``cancel`` reports an error on the in-flight utterance, as browser
    speech synthesis does.
    """

    available_voices: list[Voice] = field(default_factory=list)
    spoken: list[Utterance] = field(default_factory=list)
    cancel_count: int = 0
    _active: Utterance | None = None

    def voices(self) -> list[Voice]:
        return list(self.available_voices)

    def speak(self, utterance: Utterance) -> None:
        self.spoken.append(utterance)
        self._active = utterance

    def cancel(self) -> None:
        self.cancel_count += 1
        active, self._active = self._active, None
        if active is not None and active.on_error:
            active.on_error()

    def start(self) -> None:
        """Begin playing the most recent utterance."""
        if self._active is not None and self._active.on_start:
            self._active.on_start()

    def finish(self) -> None:
        """Complete the in-flight utterance."""
        active, self._active = self._active, None
        if active is not None and active.on_end:
            active.on_end()

    def fail(self) -> None:
        active, self._active = self._active, None
        if active is not None and active.on_error:
            active.on_error()
