from dataclasses import dataclass

from rich.style import Style


@dataclass(frozen=True, slots=True)
class SpecTableTheme:
    section: str = "#7C3AED"
    subsection: str = "#00FFFF"
    muted: str = "grey50"
    required: str = "#F87171"
    marker_expand: str = "▸"

    @property
    def style_section(self) -> Style:
        return Style(color=self.section, bold=True)

    @property
    def style_subsection(self) -> Style:
        return Style(color=self.subsection, italic=True)

    @property
    def style_muted(self) -> Style:
        return Style(color=self.muted)

    @property
    def style_required(self) -> Style:
        return Style(color=self.required, bold=True)
