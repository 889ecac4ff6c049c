"""Position arithmetic over a line-addressed buffer."""

from __future__ import annotations

from .types import Position, TextBuffer


def char_at(buffer: TextBuffer, row: int | None, col: int | None) -> str | None:
    """Read the character at (row, col).

    Returns "" at end-of-line and None for a position that cannot be read.
    """
    if row is None or col is None:
        return None
    if not 0 <= row < buffer.line_count:
        return None
    line = buffer.line(row)
    if not 0 <= col <= len(line):
        return None
    return line[col : col + 1]


def is_whitespace_after(buffer: TextBuffer, row: int | None, col: int | None) -> bool:
    """Check if the character at (row, col) counts as whitespace.

    End-of-line is a line break and counts as whitespace, except on the
    last line where there is no newline to cross.
    """
    ch = char_at(buffer, row, col)
    if ch is None:
        return False
    if ch == "":
        return row != buffer.line_count - 1
    return ch.isspace()


def next_position(
    buffer: TextBuffer, row: int, col: int, forward: bool
) -> Position | None:
    """Step one position forward or backward, crossing line breaks.

    Forward from end-of-line lands on the next line's column 0; backward
    from column 0 lands on the previous line's end-of-line. Returns None
    at the buffer's edges and for a row outside the buffer.
    """
    if not 0 <= row < buffer.line_count:
        return None
    if forward:
        if col >= len(buffer.line(row)):
            if row >= buffer.line_count - 1:
                return None
            return Position(row + 1, 0)
        return Position(row, col + 1)

    if col == 0:
        if row == 0:
            return None
        return Position(row - 1, len(buffer.line(row - 1)))
    return Position(row, col - 1)
