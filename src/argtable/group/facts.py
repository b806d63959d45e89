from dataclasses import dataclass

from .model import GroupedArgs


@dataclass(frozen=True, slots=True)
class SpecDisplayOptions:
    """Display switches chosen by the caller.

    Attributes:
        if_compact: Drop the description and default columns.
        if_control_column: Add a column showing the live value of each arg.
    """

    if_compact: bool = False
    if_control_column: bool = False


@dataclass(frozen=True, slots=True)
class ReportPresentationFacts:
    is_empty: bool
    n_columns: int
    is_expandable: bool


def derive_facts(
    grouped: GroupedArgs, options: SpecDisplayOptions | None = None
) -> ReportPresentationFacts:
    """Derive what a renderer needs to lay out ``grouped``.

    ``n_columns`` is the span used by section/subsection heading rows:
    name, plus control when shown, plus description and default unless
    compact. ``is_expandable`` is set whenever at least one category section
    exists.
    """
    options = options or SpecDisplayOptions()

    n_columns = 1
    if options.if_control_column:
        n_columns += 1
    if not options.if_compact:
        n_columns += 2

    return ReportPresentationFacts(
        is_empty=(
            not grouped.ungrouped
            and not grouped.ungrouped_subsections
            and not grouped.sections
        ),
        n_columns=n_columns,
        is_expandable=len(grouped.sections) > 0,
    )
