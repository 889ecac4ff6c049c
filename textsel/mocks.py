"""In-memory collaborators for the CLI and tests.

Usage:
    provider = StaticQueryProvider(buffer, {"@function.outer": Range.from_tuple((0, 2, 0, 10))})
    applier = RecordingSelectionApplier()
    select_textobject("@function.outer", "o", query_provider=provider, applier=applier)
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

from .editing.types import Position, Range, SelectionMode, TextBuffer


@dataclass
class StaticQueryProvider:
    """Query provider returning fixed ranges per query."""

    buffer: TextBuffer
    ranges: dict[str, Range] = field(default_factory=dict)
    calls: list[dict[str, Any]] = field(default_factory=list)

    def find_textobject_at(
        self,
        query_string: str,
        *,
        buffer: TextBuffer | None,
        cursor: Position | None,
        lookahead: bool | int,
        lookbehind: bool | int,
    ) -> tuple[TextBuffer, Range] | None:
        self.calls.append(
            {
                "query_string": query_string,
                "buffer": buffer,
                "cursor": cursor,
                "lookahead": lookahead,
                "lookbehind": lookbehind,
            }
        )
        found = self.ranges.get(query_string)
        if found is None:
            return None
        return (buffer or self.buffer), found


@dataclass
class AppliedSelection:
    buffer: TextBuffer
    range: Range
    mode: SelectionMode


@dataclass
class RecordingSelectionApplier:
    """Selection applier that records every applied selection."""

    applied: list[AppliedSelection] = field(default_factory=list)

    def apply_selection(
        self, buffer: TextBuffer, textobject: Range, mode: SelectionMode
    ) -> None:
        self.applied.append(AppliedSelection(buffer, textobject, mode))

    @property
    def last(self) -> AppliedSelection | None:
        return self.applied[-1] if self.applied else None


@dataclass
class MockKeymapRegistrar:
    """Keymap registrar storing bindings per (buffer, mode, key)."""

    bindings: dict[tuple[Any, str, str], tuple[Callable[[], object], str]] = field(
        default_factory=dict
    )

    def set(
        self,
        modes: Sequence[str],
        lhs: str,
        callback: Callable[[], object],
        *,
        buffer: object,
        desc: str,
    ) -> None:
        for mode in modes:
            self.bindings[(buffer, mode, lhs)] = (callback, desc)

    def delete(self, modes: Sequence[str], lhs: str, *, buffer: object) -> None:
        for mode in modes:
            key = (buffer, mode, lhs)
            if key not in self.bindings:
                raise KeyError(f"No mapping for {lhs!r} in mode {mode!r}")
            del self.bindings[key]

    def press(self, buffer: object, mode: str, lhs: str) -> object:
        callback, _desc = self.bindings[(buffer, mode, lhs)]
        return callback()


@dataclass
class MockQuerySet:
    """Query set where only the listed languages define textobjects."""

    languages: set[str] = field(default_factory=set)

    def has_textobjects(self, lang: str | None) -> bool:
        return lang in self.languages
