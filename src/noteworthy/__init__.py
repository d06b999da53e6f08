"""Bounded note editing engine: a note never outgrows the screen."""

__all__ = [
    "adapters",
    "buffer",
    "runtime",
    "storage",
]

__version__ = "0.1.0"
