from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, TypeAlias, TypeVar

from ..spec import SpecArgEntry, SpecPlacement


def _dig(metadata: Mapping[str, Any], *path: str) -> Any:
    """Walk nested mappings; ``None`` as soon as a step is missing."""
    value: Any = metadata
    for c_step in path:
        if not isinstance(value, Mapping):
            return None
        value = value.get(c_step)
    return value


@dataclass(frozen=True, slots=True)
class ArgRow:
    """An entry together with its key: the unit a renderer draws."""

    key: str
    entry: SpecArgEntry

    @property
    def metadata(self) -> Mapping[str, Any]:
        return self.entry.metadata

    @property
    def placement(self) -> SpecPlacement | None:
        return self.entry.placement

    @property
    def name(self) -> str:
        c_name = self.metadata.get("name")
        return c_name if isinstance(c_name, str) and c_name else self.key

    @property
    def description(self) -> str | None:
        return self.metadata.get("description")

    @property
    def type_summary(self) -> str | None:
        c_summary = _dig(self.metadata, "table", "type", "summary")
        if c_summary is None:
            c_summary = _dig(self.metadata, "type", "name")
        return c_summary

    @property
    def default_summary(self) -> str | None:
        return _dig(self.metadata, "table", "defaultValue", "summary")

    @property
    def required(self) -> bool:
        return bool(_dig(self.metadata, "type", "required"))


Subsection: TypeAlias = list[ArgRow]


@dataclass(slots=True)
class ArgSection:
    """Rows of one category: its own ungrouped rows, then its subsections."""

    ungrouped: list[ArgRow] = field(default_factory=list)
    subsections: dict[str, Subsection] = field(default_factory=dict)

    def iter_rows(self):
        yield from self.ungrouped
        for l_rows in self.subsections.values():
            yield from l_rows


@dataclass(slots=True)
class GroupedArgs:
    """Three-tier display hierarchy.

    Attributes:
        ungrouped: Rows with neither category nor subcategory.
        ungrouped_subsections: Rows with a subcategory but no category,
            keyed by subcategory in first-seen order.
        sections: One section per category, in first-seen order.
    """

    ungrouped: list[ArgRow] = field(default_factory=list)
    ungrouped_subsections: dict[str, Subsection] = field(default_factory=dict)
    sections: dict[str, ArgSection] = field(default_factory=dict)

    def iter_rows(self):
        """Yield every row in display order."""
        yield from self.ungrouped
        for l_rows in self.ungrouped_subsections.values():
            yield from l_rows
        for cls_section in self.sections.values():
            yield from cls_section.iter_rows()

    def to_dict(self) -> dict[str, Any]:
        # keys only, for logs and test assertions
        return {
            "ungrouped": [r.key for r in self.ungrouped],
            "ungrouped_subsections": {
                k: [r.key for r in v] for k, v in self.ungrouped_subsections.items()
            },
            "sections": {
                k: {
                    "ungrouped": [r.key for r in v.ungrouped],
                    "subsections": {
                        k_sub: [r.key for r in v_sub]
                        for k_sub, v_sub in v.subsections.items()
                    },
                }
                for k, v in self.sections.items()
            },
        }


K = TypeVar("K")
V = TypeVar("V")


def get_or_insert(mapping: dict[K, V], key: K, factory: Callable[[], V]) -> V:
    """Return ``mapping[key]``, inserting ``factory()`` first if absent.

    ``dict`` keeps insertion order, so keys end up in first-seen order.
    """
    if key not in mapping:
        mapping[key] = factory()
    return mapping[key]
