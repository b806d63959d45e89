from .loader import (
    entries_from_mapping,
    entries_from_parser,
    entry_from_mapping,
    load_entries,
)

__all__ = [
    "entry_from_mapping",
    "entries_from_mapping",
    "entries_from_parser",
    "load_entries",
]
