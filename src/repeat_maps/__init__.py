"""Compile declarative repeat-mode descriptions into dispatch tables."""

__all__ = [
    "runtime",
    "tables",
]

__version__ = "0.1.0"
