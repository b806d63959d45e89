from .entry import ArgumentSet, SpecArgEntry, SpecPlacement
from .enum import URL_DOCS, EnumArgsTableError, EnumSectionLevel

__all__ = [
    "ArgumentSet",
    "SpecArgEntry",
    "SpecPlacement",
    # Enums
    "EnumArgsTableError",
    "EnumSectionLevel",
    "URL_DOCS",
]
