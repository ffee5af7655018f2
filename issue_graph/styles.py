"""Presentation lookup tables for item status, type and priority."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from issue_graph.errors import UnmappedPriorityError
from issue_graph.models import Item

WHITE = "#FFFFFF"
WARNING_COLOR = "#F08080"


@dataclass(frozen=True)
class TypeStyle:
    """Short label and fill color for an item type."""

    label: str
    color: str


DEFAULT_STATUS_COLORS: Mapping[str, str] = MappingProxyType(
    {
        "To Do": "#007DBA",
        "In Progress": "#F2A900",
        "Done": "#009A44",
    }
)

DEFAULT_TYPE_STYLES: Mapping[str, TypeStyle] = MappingProxyType(
    {
        "Requirement": TypeStyle(label="R", color="#ADD8E6"),
        "Initiative": TypeStyle(label="I", color="#DDA0DD"),
    }
)

DEFAULT_PRIORITY_GLYPHS: Mapping[str, str] = MappingProxyType(
    {
        "Highest": "⬆",
        "High": "⬈",
        "Medium": "⬌",
        "Low": "⬊",
        "Lowest": "⬇",
    }
)


@dataclass(frozen=True)
class StyleRules:
    """Immutable style tables used by the node encoder.

    Status and type lookups fall back to white (and, for types, the first
    character of the type name). Priorities have no fallback: every priority
    in the tracker is expected to be listed, so a missing one raises
    UnmappedPriorityError.
    """

    status_colors: Mapping[str, str] = field(default_factory=lambda: DEFAULT_STATUS_COLORS)
    type_styles: Mapping[str, TypeStyle] = field(default_factory=lambda: DEFAULT_TYPE_STYLES)
    priority_glyphs: Mapping[str, str] = field(default_factory=lambda: DEFAULT_PRIORITY_GLYPHS)

    def with_overrides(
        self,
        status: Mapping[str, str] | None = None,
        types: Mapping[str, TypeStyle] | None = None,
        priorities: Mapping[str, str] | None = None,
    ) -> "StyleRules":
        """Return new rules with the given entries merged over the current ones."""
        return StyleRules(
            status_colors=MappingProxyType({**self.status_colors, **(status or {})}),
            type_styles=MappingProxyType({**self.type_styles, **(types or {})}),
            priority_glyphs=MappingProxyType({**self.priority_glyphs, **(priorities or {})}),
        )

    def status_color(self, item: Item) -> str:
        return self.status_colors.get(item.status_category, WHITE)

    def type_color(self, item: Item) -> str:
        match = self.type_styles.get(item.type)
        return match.color if match else WHITE

    def type_label(self, item: Item) -> str:
        match = self.type_styles.get(item.type)
        return match.label if match else item.type[:1]

    def priority_glyph(self, item: Item) -> str:
        try:
            return self.priority_glyphs[item.priority]
        except KeyError:
            raise UnmappedPriorityError(item.priority, key=item.key) from None

    def label_color(self, item: Item) -> str:
        return WARNING_COLOR if item.analysis.warnings else WHITE


DEFAULT_STYLES = StyleRules()
