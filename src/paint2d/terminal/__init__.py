"""Terminal capability and its concrete backends."""

from .base import Terminal
from .blessed_terminal import BlessedTerminal, translate_key

__all__ = ["Terminal", "BlessedTerminal", "translate_key"]
