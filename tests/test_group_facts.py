from __future__ import annotations

import sys
from pathlib import Path

import pytest

SRC_DIR = Path(__file__).resolve().parents[1] / "src"
sys.path.insert(0, str(SRC_DIR))

from argtable.group import (  # noqa: E402
    ArgRow,
    ArgSection,
    GroupedArgs,
    SpecDisplayOptions,
    derive_facts,
    group_entries,
)
from argtable.spec import SpecArgEntry  # noqa: E402


def test_empty_result_is_empty_and_not_expandable() -> None:
    cls_facts = derive_facts(group_entries({}))

    assert cls_facts.is_empty
    assert not cls_facts.is_expandable


@pytest.mark.parametrize(
    ("if_compact", "if_control_column", "n_expected"),
    [
        (True, False, 1),
        (True, True, 2),
        (False, False, 3),
        (False, True, 4),
    ],
)
def test_column_count(if_compact: bool, if_control_column: bool, n_expected: int) -> None:
    cls_options = SpecDisplayOptions(
        if_compact=if_compact, if_control_column=if_control_column
    )

    assert derive_facts(GroupedArgs(), cls_options).n_columns == n_expected


def test_default_options_use_full_read_only_layout() -> None:
    assert derive_facts(GroupedArgs()).n_columns == 3


def test_sections_alone_make_result_expandable_and_non_empty() -> None:
    cls_grouped = GroupedArgs(
        sections={"A": ArgSection(ungrouped=[ArgRow(key="a", entry=SpecArgEntry())])}
    )

    cls_facts = derive_facts(cls_grouped)

    assert cls_facts.is_expandable
    assert not cls_facts.is_empty


def test_empty_section_still_counts() -> None:
    cls_facts = derive_facts(GroupedArgs(sections={"A": ArgSection()}))

    assert cls_facts.is_expandable
    assert not cls_facts.is_empty


def test_subsections_only_are_not_expandable() -> None:
    cls_grouped = GroupedArgs(
        ungrouped_subsections={"S": [ArgRow(key="a", entry=SpecArgEntry())]}
    )

    cls_facts = derive_facts(cls_grouped)

    assert not cls_facts.is_empty
    assert not cls_facts.is_expandable
