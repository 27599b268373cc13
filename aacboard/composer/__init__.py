from aacboard.composer.labels import (
    ICON_GLYPHS,
    PRIMARY_LOCALE,
    Locale,
    icon_glyph,
    label_for,
)
from aacboard.composer.message import MessageComposer, SelectedCard

__all__ = [
    "ICON_GLYPHS",
    "PRIMARY_LOCALE",
    "Locale",
    "MessageComposer",
    "SelectedCard",
    "icon_glyph",
    "label_for",
]
