"""Apply resolved textobject selections to a textual TextArea."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.widgets.text_area import Selection

from textsel.editing.types import Range, SelectionMode, TextBuffer

if TYPE_CHECKING:
    from textual.widgets import TextArea


def selection_for(buffer: TextBuffer, textobject: Range, mode: SelectionMode) -> Selection:
    """Convert a range into a TextArea selection.

    Linewise ranges are widened to whole lines. TextArea has no rectangular
    selection, so blockwise ranges select their charwise span.
    """
    start = textobject.start
    end = textobject.end
    if mode == SelectionMode.LINEWISE:
        last_row = end.row
        # An end at column 0 of a later line only covers the line break before it
        if end.col == 0 and end.row > start.row:
            last_row -= 1
        return Selection((start.row, 0), (last_row, len(buffer.line(last_row))))
    return Selection(start.as_tuple(), end.as_tuple())


class TextAreaSelectionApplier:
    """Selection collaborator backed by a TextArea widget."""

    def __init__(self, text_area: TextArea) -> None:
        self._text_area = text_area

    def buffer(self) -> TextBuffer:
        """Snapshot the widget's text as a buffer."""
        return TextBuffer.from_text(self._text_area.text)

    def apply_selection(
        self, buffer: TextBuffer, textobject: Range, mode: SelectionMode
    ) -> None:
        self._text_area.selection = selection_for(buffer, textobject, mode)
