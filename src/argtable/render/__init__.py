from __future__ import annotations

from typing import TYPE_CHECKING, Any

from argtable._optional_deps import import_optional_attr

__all__ = [
    "ArgsTableRenderer",
    "SpecTableTheme",
    "render_args_table",
    "MSG_EMPTY",
]

if TYPE_CHECKING:
    from .table import MSG_EMPTY, ArgsTableRenderer, render_args_table
    from .theme import SpecTableTheme

_ATTR_MODULES: dict[str, str] = {
    "ArgsTableRenderer": ".table",
    "render_args_table": ".table",
    "MSG_EMPTY": ".table",
    "SpecTableTheme": ".theme",
}


def __getattr__(name: str) -> Any:
    module_name = _ATTR_MODULES.get(name)
    if module_name is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    return import_optional_attr(
        module_name=module_name,
        attr_name=name,
        package=__name__,
        feature="argtable.render",
        extras=("cli",),
        required_modules=("rich",),
    )
