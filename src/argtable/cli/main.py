"""Command line entry point.

    $ argtable show argtypes.json --control --args values.json
    $ argtable groups argtypes.json
"""

import argparse
import json
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from loguru import logger
from rich.console import Console

from ..group import SpecDisplayOptions, filter_entries, group_entries
from ..io import load_entries
from ..render import ArgsTableRenderer
from ..spec import EnumArgsTableError
from .base import SmartFormatter


def _add_input_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("file_in", type=Path, help="ArgTypes JSON document.")
    parser.add_argument(
        "--verbose", action="store_true", help="Log debug messages to stderr."
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="argtable",
        description="Render component arguments as a grouped table.",
        formatter_class=SmartFormatter,
    )
    cls_sub = parser.add_subparsers(title="Commands", dest="command", required=True)

    p_show = cls_sub.add_parser(
        "show", help="Print the args table.", formatter_class=SmartFormatter
    )
    _add_input_args(p_show)
    p_show.add_argument(
        "--compact",
        action="store_true",
        help="Only show the name (and control) columns.",
    )
    p_show.add_argument(
        "--control", action="store_true", help="Show the control column."
    )
    p_show.add_argument(
        "--args",
        dest="file_args",
        type=Path,
        default=None,
        help="JSON object of current arg values, shown in the control column.",
    )
    p_show.add_argument(
        "--error",
        choices=[e.name.lower() for e in EnumArgsTableError],
        default=None,
        help="Render a caller-level error state instead of the table.",
    )

    p_groups = cls_sub.add_parser(
        "groups",
        help="Print the grouped arg keys as JSON.",
        formatter_class=SmartFormatter,
    )
    _add_input_args(p_groups)
    return parser


def _configure_logging(if_verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if if_verbose else "WARNING")


def _load_args(file_args: Path | None) -> dict[str, Any] | None:
    if file_args is None:
        return None
    raw = json.loads(file_args.read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError(f"Args document must be an object: {str(file_args)!r}")
    return raw


def run_show(ns: argparse.Namespace, *, console: Console) -> None:
    cls_renderer = ArgsTableRenderer(console=console)
    if ns.error is not None:
        cls_renderer.print(error=EnumArgsTableError[ns.error.upper()])
        return

    dict_entries = load_entries(ns.file_in)
    cls_renderer.print(
        dict_entries,
        args=_load_args(ns.file_args),
        options=SpecDisplayOptions(
            if_compact=ns.compact, if_control_column=ns.control
        ),
    )


def run_groups(ns: argparse.Namespace, *, console: Console) -> None:
    cls_grouped = group_entries(filter_entries(load_entries(ns.file_in)))
    console.print_json(data=cls_grouped.to_dict())


def main(argv: Sequence[str] | None = None, *, console: Console | None = None) -> int:
    ns = build_parser().parse_args(argv)
    _configure_logging(ns.verbose)
    console = console or Console()

    dict_handlers = {"show": run_show, "groups": run_groups}
    try:
        dict_handlers[ns.command](ns, console=console)
    except (OSError, ValueError) as e:
        logger.error(f"[{ns.command}] {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
