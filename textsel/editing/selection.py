"""Resolve a textobject query into the selection handed to the editor."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from textsel.config import SelectConfig, SelectionModeContext, WhitespaceContext
from textsel.exceptions import ConfigError

from .types import Position, Range, SelectionMode, TextBuffer
from .whitespace import include_surrounding_whitespace

if TYPE_CHECKING:
    from textsel.shared.core.protocols import (
        QueryProviderProtocol,
        SelectionApplierProtocol,
    )

logger = logging.getLogger(__name__)

OPERATOR_PENDING = "operator-pending"
VISUAL = "visual"

# Keymap mode the binding was invoked from -> selection method
KEYMAP_TO_METHOD: dict[str, str] = {
    "o": OPERATOR_PENDING,
    "s": VISUAL,
    "v": VISUAL,
    "x": VISUAL,
}


@dataclass(frozen=True)
class SelectionResult:
    """The selection applied for a resolved textobject."""

    buffer: TextBuffer
    range: Range
    mode: SelectionMode


def keymap_mode_to_method(keymap_mode: str | None) -> str | None:
    """Map a keymap mode (o, s, v, x) to a selection method."""
    return KEYMAP_TO_METHOD.get(keymap_mode or "")


def detect_selection_mode(
    query_string: str,
    keymap_mode: str | None,
    *,
    config: SelectConfig,
    live_mode: str | None = "o",
) -> SelectionMode:
    """Pick the selection mode for a query.

    The configured mode applies unless the editor is already in a visual
    variant (v, V, CTRL-V), in which case that variant is kept.

    Args:
        query_string: Textobject query being selected.
        keymap_mode: Mode the binding was invoked from.
        config: Select options.
        live_mode: Last character of the editor's current mode string.
            "o" while operator-pending.
    """
    method = keymap_mode_to_method(keymap_mode)
    modes = config.selection_modes.resolve(SelectionModeContext(query_string, method))

    if isinstance(modes, Mapping):
        configured = modes.get(query_string)
    else:
        configured = modes
    try:
        selection_mode = SelectionMode.parse(configured) if configured else SelectionMode.CHARWISE
    except (ValueError, TypeError) as exc:
        raise ConfigError("selection_modes", f"unknown selection mode {configured!r}") from exc

    return SelectionMode.from_visual(live_mode) or selection_mode


def select_textobject(
    query_string: str,
    keymap_mode: str | None,
    *,
    query_provider: QueryProviderProtocol,
    applier: SelectionApplierProtocol,
    config: SelectConfig | None = None,
    live_mode: str | None = "o",
    buffer: TextBuffer | None = None,
    cursor: Position | None = None,
) -> SelectionResult | None:
    """Find a textobject and select it.

    Returns the applied selection, or None when the query found nothing
    (nothing is applied in that case).
    """
    if config is None:
        config = SelectConfig()

    found = query_provider.find_textobject_at(
        query_string,
        buffer=buffer,
        cursor=cursor,
        lookahead=config.lookahead,
        lookbehind=config.lookbehind,
    )
    if found is None:
        logger.debug("No textobject found for %s", query_string)
        return None

    found_buffer, textobject = found
    selection_mode = detect_selection_mode(
        query_string, keymap_mode, config=config, live_mode=live_mode
    )
    if config.include_surrounding_whitespace.resolve(
        WhitespaceContext(query_string, selection_mode)
    ):
        textobject = include_surrounding_whitespace(found_buffer, textobject, selection_mode)

    applier.apply_selection(found_buffer, textobject, selection_mode)
    return SelectionResult(found_buffer, textobject, selection_mode)


@dataclass
class TextobjectSelector:
    """Select textobjects with a fixed set of collaborators.

    ``live_mode`` is called on every selection to read the editor's current
    mode, so bindings created once keep honoring a later v/V/CTRL-V.
    """

    query_provider: QueryProviderProtocol
    applier: SelectionApplierProtocol
    config: SelectConfig = field(default_factory=SelectConfig)
    live_mode: Callable[[], str | None] = field(default=lambda: "o")

    def select(self, query_string: str, keymap_mode: str | None) -> SelectionResult | None:
        return select_textobject(
            query_string,
            keymap_mode,
            query_provider=self.query_provider,
            applier=self.applier,
            config=self.config,
            live_mode=self.live_mode(),
        )
