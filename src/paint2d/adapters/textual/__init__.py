"""Textual host for the painter."""

from .controller import (
    TextualCanvasAdapter,
    TextualUIHooks,
    create_textual_engine,
    textual_key_event,
)
from .surface import TextualSurface

__all__ = [
    "TextualCanvasAdapter",
    "TextualSurface",
    "TextualUIHooks",
    "create_textual_engine",
    "textual_key_event",
]
