from __future__ import annotations

from typing import TYPE_CHECKING, Any

from argtable._optional_deps import import_optional_attr

__all__ = ["main", "build_parser"]

if TYPE_CHECKING:
    from .main import build_parser, main


def __getattr__(name: str) -> Any:
    if name in __all__:
        return import_optional_attr(
            module_name=".main",
            attr_name=name,
            package=__name__,
            feature="argtable.cli",
            extras=("cli",),
            required_modules=("rich_argparse", "rich"),
        )
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
