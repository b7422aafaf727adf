"""Utility functions."""

from .terminal import (
    HighlightMode,
    banner,
    bg,
    fg,
    paint,
    reset,
    write,
)

__all__ = [
    "HighlightMode",
    "banner",
    "bg",
    "fg",
    "paint",
    "reset",
    "write",
]
