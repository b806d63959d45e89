from __future__ import annotations

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parents[1] / "src"
sys.path.insert(0, str(SRC_DIR))

from argtable.group import filter_entries, is_entry_displayed  # noqa: E402
from argtable.spec import SpecArgEntry, SpecPlacement  # noqa: E402


def test_filter_entries_drops_only_disabled_entries() -> None:
    entries = {
        "a": SpecArgEntry(placement=SpecPlacement(disable=True)),
        "b": SpecArgEntry(placement=SpecPlacement(disable=False)),
        "c": SpecArgEntry(),
    }

    dict_kept = filter_entries(entries, is_entry_displayed)

    assert list(dict_kept) == ["b", "c"]
    assert dict_kept["b"] is entries["b"]


def test_filter_entries_defaults_to_display_policy() -> None:
    entries = {
        "z": SpecArgEntry(),
        "y": SpecArgEntry(placement=SpecPlacement(category="C", disable=True)),
        "x": SpecArgEntry(placement=SpecPlacement(category="C")),
    }

    assert list(filter_entries(entries)) == ["z", "x"]


def test_filter_entries_accepts_custom_predicate() -> None:
    entries = {
        "a": SpecArgEntry(placement=SpecPlacement(category="C")),
        "b": SpecArgEntry(),
        "c": SpecArgEntry(placement=SpecPlacement(category="D")),
    }

    dict_kept = filter_entries(
        entries, lambda p: p is not None and p.category == "C"
    )

    assert list(dict_kept) == ["a"]


def test_filter_entries_returns_new_mapping() -> None:
    entries = {"a": SpecArgEntry()}

    dict_kept = filter_entries(entries)
    dict_kept["b"] = SpecArgEntry()

    assert list(entries) == ["a"]


def test_filter_entries_empty_input() -> None:
    assert filter_entries({}) == {}
    assert filter_entries(None) == {}
