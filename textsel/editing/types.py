"""Core types for textobject selection."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True, order=True)
class Position:
    """A (row, col) position in a text buffer.

    Column ``len(line)`` is the virtual end-of-line position.
    """

    row: int
    col: int

    def as_tuple(self) -> tuple[int, int]:
        return (self.row, self.col)


class SelectionMode(Enum):
    """How a range is presented to the editing layer."""

    CHARWISE = "charwise"
    LINEWISE = "linewise"
    BLOCKWISE = "blockwise"

    @classmethod
    def parse(cls, value: str | SelectionMode) -> SelectionMode:
        """Parse a mode name or visual-mode alias (v, V, <c-v>)."""
        if isinstance(value, SelectionMode):
            return value
        mode = _MODE_ALIASES.get(value)
        if mode is None:
            raise ValueError(f"Unknown selection mode: {value!r}")
        return mode

    @classmethod
    def from_visual(cls, visual_mode: str | None) -> SelectionMode | None:
        """Map the last char of an editor mode string to a visual variant.

        Returns None for anything that is not v, V or CTRL-V.
        """
        return _VISUAL_MODES.get(visual_mode or "")


_VISUAL_MODES: dict[str, SelectionMode] = {
    "v": SelectionMode.CHARWISE,
    "V": SelectionMode.LINEWISE,
    "\x16": SelectionMode.BLOCKWISE,
}

_MODE_ALIASES: dict[str, SelectionMode] = {
    "charwise": SelectionMode.CHARWISE,
    "linewise": SelectionMode.LINEWISE,
    "blockwise": SelectionMode.BLOCKWISE,
    "<c-v>": SelectionMode.BLOCKWISE,
    "<C-v>": SelectionMode.BLOCKWISE,
    "<C-V>": SelectionMode.BLOCKWISE,
    **_VISUAL_MODES,
}


@dataclass(frozen=True)
class Range:
    """A textobject range.

    ``end`` is the position just after the last character, which is the
    first position checked when growing the range forward.
    """

    start: Position
    end: Position

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"Range start {self.start} is after end {self.end}")

    @classmethod
    def from_tuple(cls, bounds: tuple[int, int, int, int]) -> Range:
        """Build a range from (start_row, start_col, end_row, end_col)."""
        start_row, start_col, end_row, end_col = bounds
        return cls(Position(start_row, start_col), Position(end_row, end_col))

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.start.row, self.start.col, self.end.row, self.end.col)


@dataclass(frozen=True)
class TextBuffer:
    """Read-only, line-addressed view of a buffer's text.

    The buffer must not change while a selection is being resolved.
    """

    lines: tuple[str, ...]
    name: str = ""

    def __post_init__(self) -> None:
        if not self.lines:
            object.__setattr__(self, "lines", ("",))

    @classmethod
    def from_text(cls, text: str, name: str = "") -> TextBuffer:
        return cls(tuple(text.split("\n")), name)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def line(self, row: int) -> str:
        return self.lines[row]

    def is_valid(self, position: Position) -> bool:
        """Check if a position lies inside the buffer (end-of-line included)."""
        if not 0 <= position.row < self.line_count:
            return False
        return 0 <= position.col <= len(self.lines[position.row])
