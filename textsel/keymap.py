"""Buffer-local keymaps for textobject selection.

Each configured mapping is bound twice: in operator-pending mode ("o") and
in visual mode ("x"). Languages without textobject queries get no bindings.

Usage:
    from textsel.keymap import attach, detach

    attach(buffer, "python", config=config, registrar=registrar,
           query_set=queries, selector=selector)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from textsel.config import SelectConfig
    from textsel.editing.selection import TextobjectSelector
    from textsel.shared.core.protocols import KeymapRegistrarProtocol, QuerySetProtocol

logger = logging.getLogger(__name__)

BIND_MODES: tuple[str, ...] = ("o", "x")


@dataclass
class TextobjectKeyDef:
    """Definition of a textobject keybinding."""

    key: str  # Trigger key (e.g., "af")
    query: str  # Textobject query (e.g., "@function.outer")
    desc: str  # Description shown by the host


def get_keymap_defs(config: SelectConfig) -> list[TextobjectKeyDef]:
    """Build key definitions from the configured keymaps."""
    defs: list[TextobjectKeyDef] = []
    for key, target in config.keymaps.items():
        desc = None
        if isinstance(target, dict):
            desc = target.get("desc")
            query = target["query"]
        else:
            query = target
        defs.append(TextobjectKeyDef(key, query, desc or f"Select textobject {query}"))
    return defs


def available_textobjects(config: SelectConfig) -> list[str]:
    """List the configured queries (for command completion)."""
    return sorted({d.query for d in get_keymap_defs(config)})


def attach(
    buffer: object,
    lang: str | None,
    *,
    config: SelectConfig,
    registrar: KeymapRegistrarProtocol,
    query_set: QuerySetProtocol,
    selector: TextobjectSelector,
) -> list[TextobjectKeyDef]:
    """Bind the configured textobject keymaps in a buffer.

    Returns:
        The definitions that were bound (empty when the module is disabled
        or the language has no textobject queries).
    """
    if not config.enable:
        logger.debug("Textobject select is disabled, skipping keymaps")
        return []
    if not query_set.has_textobjects(lang):
        logger.debug("No textobjects query for %s, skipping keymaps", lang)
        return []

    bound: list[TextobjectKeyDef] = []
    for keydef in get_keymap_defs(config):
        for mode in BIND_MODES:
            registrar.set(
                [mode],
                keydef.key,
                _make_callback(selector, keydef.query, mode),
                buffer=buffer,
                desc=keydef.desc,
            )
        bound.append(keydef)
    return bound


def detach(
    buffer: object,
    lang: str | None,
    *,
    config: SelectConfig,
    registrar: KeymapRegistrarProtocol,
    query_set: QuerySetProtocol,
) -> list[TextobjectKeyDef]:
    """Remove the keymaps that ``attach`` binds for this buffer and language."""
    if not config.enable:
        return []
    if not query_set.has_textobjects(lang):
        return []

    removed: list[TextobjectKeyDef] = []
    for keydef in get_keymap_defs(config):
        registrar.delete(list(BIND_MODES), keydef.key, buffer=buffer)
        removed.append(keydef)
    return removed


def _make_callback(selector: TextobjectSelector, query: str, mode: str):
    def callback():
        return selector.select(query, mode)

    return callback
