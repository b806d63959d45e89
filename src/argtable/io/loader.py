"""Build argument sets from argTypes documents and argparse parsers."""

import argparse
import json
from collections.abc import Iterator, Mapping, Sequence
from os import PathLike
from pathlib import Path
from types import MappingProxyType
from typing import Any, cast

from loguru import logger

from ..spec import SpecArgEntry, SpecPlacement


def entry_from_mapping(key: str, raw: Any) -> SpecArgEntry:
    """Lift one argTypes object into an entry.

    The whole object becomes read-only metadata; its ``table`` object is
    parsed into the placement. A non-object ``table`` is logged and treated
    as no placement.

    Raises:
        ValueError: If ``raw`` is not a mapping or a placement field has the
            wrong type.
    """
    if not isinstance(raw, Mapping):
        raise ValueError(
            f"Arg entry must be an object: {key!r} -> {type(raw).__name__}"
        )
    raw = cast(Mapping[str, Any], raw)

    cls_placement: SpecPlacement | None = None
    if (table := raw.get("table")) is not None:
        if isinstance(table, Mapping):
            try:
                cls_placement = SpecPlacement.from_mapping(table)
            except ValueError as e:
                raise ValueError(f"Invalid `table` for arg {key!r}: {e}") from e
        else:
            logger.warning(
                f"Arg {key!r}: `table` is {type(table).__name__}, not an object; ignoring placement."
            )

    return SpecArgEntry(metadata=MappingProxyType(dict(raw)), placement=cls_placement)


def entries_from_mapping(raw: Any) -> dict[str, SpecArgEntry]:
    """Build an argument set from a decoded argTypes document.

    Raises:
        ValueError: If ``raw`` is not an object keyed by argument name.
    """
    if not isinstance(raw, Mapping):
        raise ValueError(
            f"ArgTypes document must be an object, got {type(raw).__name__}"
        )
    raw = cast(Mapping[Any, Any], raw)

    dict_entries: dict[str, SpecArgEntry] = {}
    for k, v in raw.items():
        if not isinstance(k, str):
            raise ValueError(f"Arg key must be a string, got {k!r}")
        dict_entries[k] = entry_from_mapping(k, v)
    return dict_entries


def load_entries(source: str | PathLike[str] | Mapping[str, Any]) -> dict[str, SpecArgEntry]:
    """Load an argument set from a JSON file path or an in-memory mapping.

    Key order of the JSON object is kept; it is the display order.

    Raises:
        ValueError: If the file is not valid JSON or the document is malformed.
        FileNotFoundError: If ``source`` is a path that does not exist.
    """
    if isinstance(source, Mapping):
        return entries_from_mapping(source)

    p_source = Path(source)
    try:
        raw = json.loads(p_source.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {str(p_source)!r}: {e}") from e

    dict_entries = entries_from_mapping(raw)
    logger.debug(f"Loaded {len(dict_entries)} args from {str(p_source)!r}")
    return dict_entries


def _iter_action_groups(
    parser: argparse.ArgumentParser,
) -> Iterator[tuple[argparse._ArgumentGroup, Sequence[argparse.Action]]]:
    """Yield (group, actions) pairs with private-API access isolated in one place."""
    for group in getattr(parser, "_action_groups", ()):
        yield group, cast(Sequence[argparse.Action], getattr(group, "_group_actions", ()))


def _summarize_type(action: argparse.Action) -> str | None:
    if action.choices is not None and not isinstance(action.choices, Mapping):
        return " | ".join(repr(c) for c in action.choices)
    if action.nargs == 0:
        return "flag"
    if action.type is None:
        return "str"
    return getattr(action.type, "__name__", None) or repr(action.type)


def _summarize_default(action: argparse.Action) -> str | None:
    if action.default is None or action.default is argparse.SUPPRESS:
        return None
    return repr(action.default)


def entries_from_parser(parser: argparse.ArgumentParser) -> dict[str, SpecArgEntry]:
    """Describe the arguments of an argparse parser as an argument set.

    Titled argument groups become categories; arguments of the two default
    groups (positionals and options) stay ungrouped. ``help=SUPPRESS``
    marks an argument disabled. Help actions and subparser actions are
    skipped.
    """
    set_default_groups = {
        id(getattr(parser, "_positionals", None)),
        id(getattr(parser, "_optionals", None)),
    }

    dict_entries: dict[str, SpecArgEntry] = {}
    for group, l_actions in _iter_action_groups(parser):
        c_category = None if id(group) in set_default_groups else group.title
        for action in l_actions:
            if isinstance(action, argparse._HelpAction | argparse._SubParsersAction):
                continue

            if_disable = action.help is argparse.SUPPRESS
            c_name = max(action.option_strings, key=len, default=action.dest)
            dict_table: dict[str, Any] = {
                "category": c_category,
                "disable": if_disable,
                "type": {"summary": _summarize_type(action)},
            }
            if (c_default := _summarize_default(action)) is not None:
                dict_table["defaultValue"] = {"summary": c_default}

            dict_entries[action.dest] = SpecArgEntry(
                metadata=MappingProxyType(
                    {
                        "name": c_name,
                        "description": None if if_disable else action.help,
                        "type": {"required": bool(action.required)},
                        "table": dict_table,
                    }
                ),
                placement=SpecPlacement(category=c_category, disable=if_disable),
            )

    logger.debug(f"Collected {len(dict_entries)} args from parser {parser.prog!r}")
    return dict_entries
