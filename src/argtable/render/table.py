from collections.abc import Mapping
from typing import Any

from rich import box
from rich.console import Console, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..group import (
    ArgRow,
    GroupedArgs,
    ReportPresentationFacts,
    SpecDisplayOptions,
    derive_facts,
    filter_entries,
    group_entries,
)
from ..spec import URL_DOCS, ArgumentSet, EnumArgsTableError, EnumSectionLevel
from .theme import SpecTableTheme

MSG_EMPTY = "No inputs found for this component."
_INDENT = "  "


class ArgsTableRenderer:
    """Draw an argument set as a ``rich`` table.

    Rows are laid out in a fixed order: top-level ungrouped rows, top-level
    subsections, then each section with its own ungrouped rows followed by
    its subsections. Heading rows for sections and subsections occupy the
    first cell of an otherwise blank row spanning ``n_columns``.
    """

    def __init__(
        self, *, console: Console | None = None, theme: SpecTableTheme | None = None
    ):
        self.console = console or Console()
        self.theme = theme or SpecTableTheme()

    def _build_notice(self, message: str) -> Panel:
        text = Text.assemble(
            message,
            " ",
            ("Read the docs →", self.theme.style_muted.update_link(URL_DOCS)),
        )
        return Panel(text, box=box.ROUNDED, expand=False)

    def _build_heading(
        self, label: str, *, level: EnumSectionLevel, n_columns: int, depth: int
    ) -> list[RenderableType]:
        style = (
            self.theme.style_section
            if level == EnumSectionLevel.SECTION
            else self.theme.style_subsection
        )
        c_label = label.upper() if level == EnumSectionLevel.SECTION else label
        return [Text(f"{_INDENT * depth}{c_label}", style=style), *([""] * (n_columns - 1))]

    def _build_row(
        self,
        row: ArgRow,
        *,
        args: Mapping[str, Any] | None,
        options: SpecDisplayOptions,
        depth: int,
        if_expandable: bool,
    ) -> list[RenderableType]:
        cls_name = Text(_INDENT * depth)
        if if_expandable:
            cls_name.append(f"{self.theme.marker_expand} ", style=self.theme.style_muted)
        cls_name.append(row.name, style="bold")
        if row.required:
            cls_name.append("*", style=self.theme.style_required)

        l_cells: list[RenderableType] = [cls_name]
        if not options.if_compact:
            cls_desc = Text(str(row.description or ""))
            if row.type_summary:
                if cls_desc:
                    cls_desc.append("\n")
                cls_desc.append(str(row.type_summary), style=self.theme.style_muted)
            l_cells.append(cls_desc)
            l_cells.append(Text(str(row.default_summary) if row.default_summary else "-"))
        if options.if_control_column:
            if args is not None and row.key in args:
                l_cells.append(Text(repr(args[row.key])))
            else:
                l_cells.append(Text("-", style=self.theme.style_muted))
        return l_cells

    def _build_table(
        self,
        grouped: GroupedArgs,
        facts: ReportPresentationFacts,
        *,
        args: Mapping[str, Any] | None,
        options: SpecDisplayOptions,
    ) -> Table:
        table = Table(box=box.SIMPLE_HEAD, expand=True)
        table.add_column("Name", ratio=3, no_wrap=True)
        if not options.if_compact:
            table.add_column("Description", ratio=5)
            table.add_column("Default", ratio=2)
        if options.if_control_column:
            table.add_column("Control", ratio=2)

        def add_rows(rows: list[ArgRow], *, depth: int, if_expandable: bool) -> None:
            for cls_row in rows:
                table.add_row(
                    *self._build_row(
                        cls_row,
                        args=args,
                        options=options,
                        depth=depth,
                        if_expandable=if_expandable,
                    )
                )

        def add_subsections(subsections: dict[str, list[ArgRow]], *, depth: int) -> None:
            for c_subcategory, l_rows in subsections.items():
                table.add_row(
                    *self._build_heading(
                        c_subcategory,
                        level=EnumSectionLevel.SUBSECTION,
                        n_columns=facts.n_columns,
                        depth=depth,
                    )
                )
                add_rows(l_rows, depth=depth + 1, if_expandable=facts.is_expandable)

        add_rows(grouped.ungrouped, depth=0, if_expandable=False)
        add_subsections(grouped.ungrouped_subsections, depth=0)
        for c_category, cls_section in grouped.sections.items():
            table.add_row(
                *self._build_heading(
                    c_category,
                    level=EnumSectionLevel.SECTION,
                    n_columns=facts.n_columns,
                    depth=0,
                )
            )
            add_rows(cls_section.ungrouped, depth=1, if_expandable=False)
            add_subsections(cls_section.subsections, depth=1)

        return table

    def build(
        self,
        entries: ArgumentSet | None = None,
        *,
        args: Mapping[str, Any] | None = None,
        options: SpecDisplayOptions | None = None,
        error: EnumArgsTableError | None = None,
    ) -> RenderableType:
        """Build the renderable for an argument set.

        Args:
            entries: Key -> entry mapping in display order.
            args: Current argument values shown in the control column.
            options: Column switches. Defaults to full, read-only layout.
            error: Caller-level error; when set, nothing is grouped and a
                notice with the error text is returned instead.

        Returns:
            RenderableType: A table, or a notice panel for the error and
            empty states.
        """
        if error is not None:
            return self._build_notice(EnumArgsTableError(error).value)

        options = options or SpecDisplayOptions()
        grouped = group_entries(filter_entries(entries))
        facts = derive_facts(grouped, options)
        if facts.is_empty:
            return self._build_notice(MSG_EMPTY)
        return self._build_table(grouped, facts, args=args, options=options)

    def print(
        self,
        entries: ArgumentSet | None = None,
        *,
        args: Mapping[str, Any] | None = None,
        options: SpecDisplayOptions | None = None,
        error: EnumArgsTableError | None = None,
    ) -> None:
        self.console.print(self.build(entries, args=args, options=options, error=error))


def render_args_table(
    entries: ArgumentSet | None = None,
    *,
    args: Mapping[str, Any] | None = None,
    options: SpecDisplayOptions | None = None,
    error: EnumArgsTableError | None = None,
) -> RenderableType:
    return ArgsTableRenderer().build(entries, args=args, options=options, error=error)
