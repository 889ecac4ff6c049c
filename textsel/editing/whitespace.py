"""Grow a textobject range across adjacent whitespace."""

from __future__ import annotations

import logging

from .navigation import is_whitespace_after, next_position
from .types import Range, SelectionMode, TextBuffer

logger = logging.getLogger(__name__)


def include_surrounding_whitespace(
    buffer: TextBuffer, textobject: Range, selection_mode: SelectionMode
) -> Range:
    """Extend a range over the whitespace that follows it, or else precedes it.

    Trailing whitespace wins: when the end moves, the start is left alone so
    a selection never eats whitespace on both sides. Line breaks are walked
    one position at a time like any other whitespace.
    """
    start = textobject.start
    end = textobject.end

    extended = False
    while is_whitespace_after(buffer, end.row, end.col):
        step = next_position(buffer, end.row, end.col, forward=True)
        if step is None:
            break
        end = step
        extended = True
    if extended:
        logger.debug("Extended %s forward to %s", textobject.as_tuple(), end.as_tuple())
        return Range(start, end)

    moved = False
    peek = next_position(buffer, start.row, start.col, forward=False)
    while peek is not None and is_whitespace_after(buffer, peek.row, peek.col):
        start = peek
        moved = True
        peek = next_position(buffer, start.row, start.col, forward=False)

    if moved and selection_mode == SelectionMode.LINEWISE:
        start = next_position(buffer, start.row, start.col, forward=True) or start

    if moved:
        logger.debug("Extended %s backward to %s", textobject.as_tuple(), start.as_tuple())
    return Range(start, end)
