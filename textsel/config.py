"""Configuration for textobject selection.

Options that may be either a plain value or a function of the call context
are held as ``Static`` or ``Computed`` settings and resolved once per call.

Usage:
    from textsel.config import SelectConfig, load_select_config

    config = SelectConfig(
        lookahead=True,
        include_surrounding_whitespace=lambda ctx: ctx.query_string.endswith(".outer"),
        selection_modes={"@function.outer": "V"},
    )
    config = load_select_config(load_settings())
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, fields
from typing import Any, Generic, TypeVar

from .editing.types import SelectionMode
from .exceptions import ConfigError

SETTINGS_KEY = "textobjects.select"

T = TypeVar("T")
C = TypeVar("C")


@dataclass(frozen=True)
class WhitespaceContext:
    """Context passed to a computed ``include_surrounding_whitespace``."""

    query_string: str
    selection_mode: SelectionMode


@dataclass(frozen=True)
class SelectionModeContext:
    """Context passed to a computed ``selection_modes``."""

    query_string: str
    method: str | None


@dataclass(frozen=True)
class Static(Generic[T]):
    value: T

    def resolve(self, context: Any) -> T:
        return self.value


@dataclass(frozen=True)
class Computed(Generic[C, T]):
    func: Callable[[C], T]

    def resolve(self, context: C) -> T:
        return self.func(context)


def as_setting(value: Any) -> Static | Computed:
    """Wrap a plain value or a callable as a setting."""
    if isinstance(value, (Static, Computed)):
        return value
    if callable(value):
        return Computed(value)
    return Static(value)


def _check_window(key: str, value: Any) -> bool | int:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value >= 0:
        return value
    raise ConfigError(key, f"expected a boolean or non-negative integer, got {value!r}")


def _normalize_modes(key: str, value: Any) -> Any:
    """Validate a static selection_modes value into SelectionMode(s)."""
    if value is None:
        return {}
    try:
        if isinstance(value, Mapping):
            return {str(query): SelectionMode.parse(mode) for query, mode in value.items()}
        return SelectionMode.parse(value)
    except (ValueError, TypeError) as exc:
        raise ConfigError(key, str(exc)) from exc


def _normalize_keymaps(key: str, value: Any) -> dict[str, str | dict[str, str]]:
    if not isinstance(value, Mapping):
        raise ConfigError(key, f"expected a mapping, got {type(value).__name__}")
    keymaps: dict[str, str | dict[str, str]] = {}
    for lhs, target in value.items():
        if isinstance(target, str):
            keymaps[str(lhs)] = target
        elif isinstance(target, Mapping) and isinstance(target.get("query"), str):
            desc = target.get("desc")
            if desc is not None and not isinstance(desc, str):
                raise ConfigError(key, f"description for {lhs!r} must be a string")
            entry = {"query": target["query"]}
            if desc:
                entry["desc"] = desc
            keymaps[str(lhs)] = entry
        else:
            raise ConfigError(key, f"mapping {lhs!r} must be a query string or {{query, desc}}")
    return keymaps


@dataclass
class SelectConfig:
    """Options of the textobject select module."""

    enable: bool = False
    lookahead: bool | int = False
    lookbehind: bool | int = False
    include_surrounding_whitespace: Any = field(default_factory=lambda: Static(False))
    selection_modes: Any = field(default_factory=lambda: Static({}))
    keymaps: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.enable, bool):
            raise ConfigError("enable", f"expected a boolean, got {self.enable!r}")
        self.lookahead = _check_window("lookahead", self.lookahead)
        self.lookbehind = _check_window("lookbehind", self.lookbehind)

        whitespace = as_setting(self.include_surrounding_whitespace)
        if isinstance(whitespace, Static) and not isinstance(whitespace.value, bool):
            raise ConfigError(
                "include_surrounding_whitespace",
                f"expected a boolean or a function, got {whitespace.value!r}",
            )
        self.include_surrounding_whitespace = whitespace

        modes = as_setting(self.selection_modes)
        if isinstance(modes, Static):
            modes = Static(_normalize_modes("selection_modes", modes.value))
        self.selection_modes = modes

        self.keymaps = _normalize_keymaps("keymaps", self.keymaps)


_OPTION_NAMES = frozenset(f.name for f in fields(SelectConfig))


def load_select_config(settings: Mapping[str, Any] | None = None) -> SelectConfig:
    """Build a SelectConfig from the application settings dict.

    Options are read from the ``"textobjects.select"`` object and merged
    over the defaults. Raises ConfigError for unknown options or bad types.
    """
    if settings is None:
        from .stores.settings import load_settings

        settings = load_settings()
    section = settings.get(SETTINGS_KEY, {})
    if section is None:
        section = {}
    if not isinstance(section, Mapping):
        raise ConfigError(SETTINGS_KEY, f"expected an object, got {type(section).__name__}")
    unknown = sorted(set(section) - _OPTION_NAMES)
    if unknown:
        raise ConfigError(unknown[0], "unknown option")
    return SelectConfig(**dict(section))
