"""Unit tests for buffer position navigation."""

from __future__ import annotations

import pytest

from textsel.editing.navigation import char_at, is_whitespace_after, next_position
from textsel.editing.types import Position, Range, TextBuffer


class TestTextBuffer:
    """Tests for the buffer and range value types."""

    def test_from_text_splits_lines(self) -> None:
        buffer = TextBuffer.from_text("a\nbc\n")
        assert buffer.lines == ("a", "bc", "")
        assert buffer.line_count == 3

    def test_empty_text_is_one_empty_line(self) -> None:
        buffer = TextBuffer.from_text("")
        assert buffer.lines == ("",)
        assert buffer.text == ""

    def test_is_valid_includes_end_of_line(self) -> None:
        buffer = TextBuffer.from_text("abc")
        assert buffer.is_valid(Position(0, 3))
        assert not buffer.is_valid(Position(0, 4))
        assert not buffer.is_valid(Position(1, 0))

    def test_range_rejects_start_after_end(self) -> None:
        with pytest.raises(ValueError):
            Range(Position(1, 0), Position(0, 5))

    def test_range_tuple_conversion(self) -> None:
        textobject = Range.from_tuple((0, 2, 1, 0))
        assert textobject.start == Position(0, 2)
        assert textobject.end == Position(1, 0)
        assert textobject.as_tuple() == (0, 2, 1, 0)

    def test_positions_order_row_major(self) -> None:
        assert Position(0, 9) < Position(1, 0)
        assert Position(1, 2) < Position(1, 3)


class TestCharAt:
    """Tests for single character reads."""

    def test_reads_character(self, padded_buffer: TextBuffer) -> None:
        assert char_at(padded_buffer, 0, 2) == "f"
        assert char_at(padded_buffer, 1, 3) == "t"

    def test_end_of_line_is_empty_string(self, padded_buffer: TextBuffer) -> None:
        assert char_at(padded_buffer, 0, 12) == ""
        assert char_at(padded_buffer, 1, 4) == ""

    @pytest.mark.parametrize(
        ("row", "col"),
        [(0, 13), (0, -1), (2, 0), (-1, 0), (None, 0), (0, None)],
    )
    def test_unreadable_position_is_none(self, padded_buffer: TextBuffer, row, col) -> None:
        assert char_at(padded_buffer, row, col) is None


class TestIsWhitespaceAfter:
    """Tests for whitespace detection."""

    def test_space_is_whitespace(self, padded_buffer: TextBuffer) -> None:
        assert is_whitespace_after(padded_buffer, 0, 0)
        assert is_whitespace_after(padded_buffer, 0, 11)

    def test_tab_is_whitespace(self) -> None:
        assert is_whitespace_after(TextBuffer.from_text("a\tb"), 0, 1)

    def test_word_char_is_not_whitespace(self, padded_buffer: TextBuffer) -> None:
        assert not is_whitespace_after(padded_buffer, 0, 2)

    def test_line_break_is_whitespace(self, padded_buffer: TextBuffer) -> None:
        assert is_whitespace_after(padded_buffer, 0, 12)

    def test_end_of_last_line_is_not_whitespace(self, padded_buffer: TextBuffer) -> None:
        assert not is_whitespace_after(padded_buffer, 1, 4)

    def test_unreadable_position_is_not_whitespace(self, padded_buffer: TextBuffer) -> None:
        assert not is_whitespace_after(padded_buffer, 5, 0)
        assert not is_whitespace_after(padded_buffer, None, None)


class TestNextPosition:
    """Tests for forward/backward stepping."""

    def test_forward_within_line(self, padded_buffer: TextBuffer) -> None:
        assert next_position(padded_buffer, 0, 3, forward=True) == Position(0, 4)

    def test_forward_from_end_of_line_wraps(self, padded_buffer: TextBuffer) -> None:
        assert next_position(padded_buffer, 0, 12, forward=True) == Position(1, 0)

    def test_forward_stops_at_end_of_buffer(self, padded_buffer: TextBuffer) -> None:
        assert next_position(padded_buffer, 1, 4, forward=True) is None

    def test_backward_within_line(self, padded_buffer: TextBuffer) -> None:
        assert next_position(padded_buffer, 0, 5, forward=False) == Position(0, 4)

    def test_backward_from_line_start_wraps_to_previous_end(self, padded_buffer: TextBuffer) -> None:
        assert next_position(padded_buffer, 1, 0, forward=False) == Position(0, 12)

    def test_backward_stops_at_start_of_buffer(self, padded_buffer: TextBuffer) -> None:
        assert next_position(padded_buffer, 0, 0, forward=False) is None

    def test_backward_onto_empty_line(self) -> None:
        buffer = TextBuffer.from_text("a\n\nb")
        assert next_position(buffer, 2, 0, forward=False) == Position(1, 0)
        assert next_position(buffer, 1, 0, forward=False) == Position(0, 1)

    @pytest.mark.parametrize("forward", [True, False])
    def test_row_outside_buffer_is_none(self, padded_buffer: TextBuffer, forward: bool) -> None:
        assert next_position(padded_buffer, 5, 0, forward=forward) is None
        assert next_position(padded_buffer, -1, 0, forward=forward) is None
