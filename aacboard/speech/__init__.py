from aacboard.speech.adapter import SpeechAdapter, choose_voice
from aacboard.speech.platform import (
    RecordingSpeechPlatform,
    SpeechPlatform,
    Utterance,
    Voice,
)

__all__ = [
    "RecordingSpeechPlatform",
    "SpeechAdapter",
    "SpeechPlatform",
    "Utterance",
    "Voice",
    "choose_voice",
]
