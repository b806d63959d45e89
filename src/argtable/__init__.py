from __future__ import annotations

from importlib import import_module
from importlib.metadata import PackageNotFoundError, version
from types import ModuleType
from typing import TYPE_CHECKING, Any

from .group import (
    ArgRow,
    ArgSection,
    GroupedArgs,
    ReportPresentationFacts,
    SpecDisplayOptions,
    derive_facts,
    filter_entries,
    group_entries,
    is_entry_displayed,
)
from .spec import ArgumentSet, EnumArgsTableError, SpecArgEntry, SpecPlacement

__all__ = [
    "__version__",
    # Entry model
    "ArgumentSet",
    "EnumArgsTableError",
    "SpecArgEntry",
    "SpecPlacement",
    # Grouping core
    "ArgRow",
    "ArgSection",
    "GroupedArgs",
    "ReportPresentationFacts",
    "SpecDisplayOptions",
    "derive_facts",
    "filter_entries",
    "group_entries",
    "is_entry_displayed",
    # Lazy submodules
    "io",
    "render",
    "cli",
]

try:
    __version__ = version("argtable")
except PackageNotFoundError:
    __version__ = "0.0.0"

if TYPE_CHECKING:
    import argtable.cli as cli
    import argtable.io as io
    import argtable.render as render

_ALIAS_MODULES: dict[str, str] = {
    "io": "argtable.io",
    "render": "argtable.render",
    "cli": "argtable.cli",
}


def __getattr__(name: str) -> Any:
    module_name = _ALIAS_MODULES.get(name)
    if module_name is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_loaded: ModuleType = import_module(module_name)
    globals()[name] = module_loaded
    return module_loaded


def __dir__() -> list[str]:
    return sorted(set(globals()) | set(__all__))
