"""Terminal painting surface: a wrap-around cursor over a colored cell grid."""

__all__ = [
    "actions",
    "adapters",
    "canvas",
    "config",
    "engine",
    "keymaps",
    "runtime",
    "terminal",
]

__version__ = "0.1.0"
