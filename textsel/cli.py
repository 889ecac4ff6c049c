#!/usr/bin/env python3
"""textsel - resolve textobject selections from the command line.

The candidate range stands in for the query engine's result, so the CLI
shows how whitespace extension and mode detection treat a given range.

Usage:
    textsel select app.py 3 4 3 18 --query @function.outer --whitespace
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from .config import SelectConfig, load_select_config
from .editing.selection import select_textobject
from .editing.types import Range, SelectionMode, TextBuffer
from .exceptions import ConfigError
from .mocks import RecordingSelectionApplier, StaticQueryProvider


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="textsel",
        description="Resolve textobject selections over a text file.",
    )
    parser.add_argument("--settings", type=Path, help="Path to a settings.json file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    select_parser = subparsers.add_parser("select", help="Resolve a candidate range")
    select_parser.add_argument("file", type=Path, help="Text file to read")
    select_parser.add_argument("start_row", type=int)
    select_parser.add_argument("start_col", type=int)
    select_parser.add_argument("end_row", type=int)
    select_parser.add_argument("end_col", type=int, help="Column just after the last character")
    select_parser.add_argument("--query", default="@textobject", help="Query name used for config lookups")
    select_parser.add_argument(
        "--keymap-mode",
        default="o",
        choices=["o", "s", "v", "x"],
        help="Mode the selection was invoked from (default: o)",
    )
    select_parser.add_argument(
        "--live-mode",
        default="o",
        help="Last char of the editor mode: o, v, V or ctrl-v (default: o)",
    )
    select_parser.add_argument(
        "--selection-mode",
        help="Configured selection mode for the query (charwise, linewise, blockwise, v, V)",
    )
    select_parser.add_argument(
        "--whitespace",
        dest="whitespace",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Include surrounding whitespace (default: from settings)",
    )
    return parser


def _apply_overrides(config: SelectConfig, args: argparse.Namespace) -> SelectConfig:
    changes: dict = {}
    if args.whitespace is not None:
        changes["include_surrounding_whitespace"] = args.whitespace
    if args.selection_mode:
        changes["selection_modes"] = {args.query: args.selection_mode}
    return replace(config, **changes) if changes else config


def _live_mode(value: str) -> str:
    if value.lower() in {"ctrl-v", "<c-v>", "^v"}:
        return "\x16"
    return value


def cmd_select(args: argparse.Namespace) -> int:
    try:
        text = args.file.read_text(encoding="utf-8")
    except OSError as exc:
        print(f"Error: cannot read {args.file}: {exc}", file=sys.stderr)
        return 1

    try:
        config = _apply_overrides(load_select_config(_settings(args)), args)
        candidate = Range.from_tuple((args.start_row, args.start_col, args.end_row, args.end_col))
    except (ConfigError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    buffer = TextBuffer.from_text(text, name=str(args.file))
    if not (buffer.is_valid(candidate.start) and buffer.is_valid(candidate.end)):
        print(f"Error: range {candidate.as_tuple()} is outside {args.file}", file=sys.stderr)
        return 2

    applier = RecordingSelectionApplier()
    result = select_textobject(
        args.query,
        args.keymap_mode,
        query_provider=StaticQueryProvider(buffer, {args.query: candidate}),
        applier=applier,
        config=config,
        live_mode=_live_mode(args.live_mode),
    )
    if result is None:
        return 1
    print(_format_result(result.mode, result.range))
    return 0


def _settings(args: argparse.Namespace) -> dict | None:
    if args.settings is None:
        return None
    from .stores.settings import load_settings

    return load_settings(args.settings)


def _format_result(mode: SelectionMode, textobject: Range) -> str:
    return " ".join([mode.value, *(str(n) for n in textobject.as_tuple())])


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.command == "select":
        return cmd_select(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
