from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

SRC_DIR = Path(__file__).resolve().parents[1] / "src"
sys.path.insert(0, str(SRC_DIR))

from rich.console import Console  # noqa: E402

from argtable.cli import build_parser, main  # noqa: E402


def _write_json(path: Path, data: object) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def file_argtypes(tmp_path: Path) -> Path:
    return _write_json(
        tmp_path / "argtypes.json",
        {
            "primary": {"name": "primary", "description": "Primary style"},
            "label": {"name": "label", "table": {"category": "content"}},
            "size": {"name": "size", "table": {"subcategory": "layout"}},
            "legacy": {"name": "legacy", "table": {"disable": True}},
        },
    )


def _console() -> Console:
    return Console(record=True, width=120, color_system=None)


def test_show_prints_grouped_table(file_argtypes: Path, tmp_path: Path) -> None:
    console = _console()
    file_args = _write_json(tmp_path / "args.json", {"label": "Click me"})

    rc = main(
        ["show", str(file_argtypes), "--control", "--args", str(file_args)],
        console=console,
    )

    c_text = console.export_text()
    assert rc == 0
    assert "CONTENT" in c_text
    assert "layout" in c_text
    assert "'Click me'" in c_text
    assert "legacy" not in c_text


def test_show_error_state(file_argtypes: Path) -> None:
    console = _console()

    rc = main(["show", str(file_argtypes), "--error", "no_component"], console=console)

    assert rc == 0
    assert "No component found." in console.export_text()


def test_groups_prints_keys_as_json(file_argtypes: Path) -> None:
    console = _console()

    rc = main(["groups", str(file_argtypes)], console=console)

    assert rc == 0
    assert json.loads(console.export_text()) == {
        "ungrouped": ["primary"],
        "ungrouped_subsections": {"layout": ["size"]},
        "sections": {"content": {"ungrouped": ["label"], "subsections": {}}},
    }


def test_missing_file_returns_non_zero(tmp_path: Path) -> None:
    assert main(["show", str(tmp_path / "missing.json")], console=_console()) == 1


def test_malformed_document_returns_non_zero(tmp_path: Path) -> None:
    file_bad = _write_json(tmp_path / "bad.json", {"a": {"table": {"category": 1}}})

    assert main(["groups", str(file_bad)], console=_console()) == 1


def test_command_is_required() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args([])
