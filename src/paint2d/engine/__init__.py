"""Canvas engine, its input events and the shared running flag."""

from .events import Event, Interrupt, KeyPress, Resize
from .interrupt import InterruptListener, RunFlag
from .engine import CanvasEngine

__all__ = [
    "CanvasEngine",
    "Event",
    "Interrupt",
    "InterruptListener",
    "KeyPress",
    "Resize",
    "RunFlag",
]
