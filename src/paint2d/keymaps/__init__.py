"""Key bindings from terminal key tokens to painter actions."""

from .models import ActionRef, Binding, KeyStroke, ResolvedAction
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats
from .defaults import default_actions, default_bindings, load_default_keymaps

__all__ = [
    "ActionRef",
    "Binding",
    "KeyStroke",
    "ResolvedAction",
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
    "default_actions",
    "default_bindings",
    "load_default_keymaps",
]
