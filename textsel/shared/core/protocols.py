"""Protocols for the collaborators of textobject selection.

The query engine that locates textobjects, the editing layer that applies a
selection, and the host's keymap API are all injected through these
protocols so the selection logic runs without a host editor.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from textsel.editing.types import Position, Range, SelectionMode, TextBuffer


@runtime_checkable
class QueryProviderProtocol(Protocol):
    """Protocol for the engine that finds textobjects in a buffer."""

    def find_textobject_at(
        self,
        query_string: str,
        *,
        buffer: TextBuffer | None,
        cursor: Position | None,
        lookahead: bool | int,
        lookbehind: bool | int,
    ) -> tuple[TextBuffer, Range] | None:
        """Find the textobject matching a query at or around the cursor.

        Args:
            query_string: Capture name, e.g. "@function.outer".
            buffer: Buffer to search, or None for the current one.
            cursor: Cursor position, or None for the current one.
            lookahead: How far forward to search for a match.
            lookbehind: How far backward to search for a match.

        Returns:
            Tuple of (buffer, range), or None if nothing matched.
        """
        ...


@runtime_checkable
class SelectionApplierProtocol(Protocol):
    """Protocol for the editing layer that shows a selection."""

    def apply_selection(
        self, buffer: TextBuffer, textobject: Range, mode: SelectionMode
    ) -> None:
        ...


@runtime_checkable
class KeymapRegistrarProtocol(Protocol):
    """Protocol for the host's buffer-local keymap API."""

    def set(
        self,
        modes: Sequence[str],
        lhs: str,
        callback: Callable[[], object],
        *,
        buffer: object,
        desc: str,
    ) -> None:
        ...

    def delete(self, modes: Sequence[str], lhs: str, *, buffer: object) -> None:
        ...


@runtime_checkable
class QuerySetProtocol(Protocol):
    """Protocol answering whether a language defines textobject queries."""

    def has_textobjects(self, lang: str | None) -> bool:
        ...
