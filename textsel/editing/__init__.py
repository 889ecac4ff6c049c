"""Textobject selection helpers."""

from typing import TYPE_CHECKING, Any

from .navigation import char_at, is_whitespace_after, next_position
from .types import Position, Range, SelectionMode, TextBuffer
from .whitespace import include_surrounding_whitespace

if TYPE_CHECKING:
    from .selection import (
        SelectionResult,
        TextobjectSelector,
        detect_selection_mode,
        select_textobject,
    )

__all__ = [
    # Types
    "Position",
    "Range",
    "SelectionMode",
    "TextBuffer",
    # Navigation
    "char_at",
    "is_whitespace_after",
    "next_position",
    # Whitespace
    "include_surrounding_whitespace",
    # Selection
    "SelectionResult",
    "TextobjectSelector",
    "detect_selection_mode",
    "select_textobject",
]

_SELECTION_EXPORTS = {"SelectionResult", "TextobjectSelector", "detect_selection_mode", "select_textobject"}


def __getattr__(name: str) -> Any:
    """Lazy import for the resolver, which depends on textsel.config."""
    if name in _SELECTION_EXPORTS:
        from . import selection

        return getattr(selection, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
