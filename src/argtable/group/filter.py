from collections.abc import Callable
from typing import TypeAlias

from ..spec import ArgumentSet, SpecArgEntry, SpecPlacement

PlacementPredicate: TypeAlias = Callable[[SpecPlacement | None], bool]


def is_entry_displayed(placement: SpecPlacement | None) -> bool:
    """Default policy: keep everything not explicitly disabled."""
    return placement is None or not placement.disable


def filter_entries(
    entries: ArgumentSet | None,
    predicate: PlacementPredicate = is_entry_displayed,
) -> dict[str, SpecArgEntry]:
    """Keep the entries whose placement satisfies ``predicate``.

    Args:
        entries: Key -> entry mapping. ``None`` is treated as empty.
        predicate: Called with each entry's placement (possibly ``None``).

    Returns:
        dict[str, SpecArgEntry]: A new mapping in the original key order.
    """
    if not entries:
        return {}
    return {k: v for k, v in entries.items() if predicate(v.placement)}
