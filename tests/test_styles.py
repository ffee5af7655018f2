"""Tests for style rules."""

import pytest

from conftest import make_item
from issue_graph.errors import ConfigurationError, UnmappedPriorityError
from issue_graph.models import Analysis
from issue_graph.styles import (
    DEFAULT_PRIORITY_GLYPHS,
    DEFAULT_STATUS_COLORS,
    DEFAULT_STYLES,
    DEFAULT_TYPE_STYLES,
    WARNING_COLOR,
    WHITE,
    StyleRules,
    TypeStyle,
)


def test_status_color_lookup_and_fallback() -> None:
    """Test status category colors with white fallback."""
    assert DEFAULT_STYLES.status_color(make_item("A", status_category="Done")) == "#009A44"
    assert DEFAULT_STYLES.status_color(make_item("A", status_category="In Progress")) == "#F2A900"
    assert DEFAULT_STYLES.status_color(make_item("A", status_category="Blocked")) == WHITE


def test_type_style_lookup_and_fallback() -> None:
    """Test type labels and colors, falling back to the first character."""
    requirement = make_item("A", type="Requirement")
    assert DEFAULT_STYLES.type_label(requirement) == "R"
    assert DEFAULT_STYLES.type_color(requirement) == "#ADD8E6"

    story = make_item("A", type="story")
    assert DEFAULT_STYLES.type_label(story) == "s"
    assert DEFAULT_STYLES.type_color(story) == WHITE


def test_priority_glyphs() -> None:
    """Test every default priority has a glyph."""
    priorities = ["Highest", "High", "Medium", "Low", "Lowest"]
    glyphs = [DEFAULT_STYLES.priority_glyph(make_item("A", priority=p)) for p in priorities]
    assert glyphs == ["⬆", "⬈", "⬌", "⬊", "⬇"]


def test_unmapped_priority_raises() -> None:
    """Test that an unknown priority is a configuration error, not a silent fallback."""
    with pytest.raises(UnmappedPriorityError, match="Blocker") as excinfo:
        DEFAULT_STYLES.priority_glyph(make_item("PROJ-9", priority="Blocker"))
    assert excinfo.value.key == "PROJ-9"
    assert isinstance(excinfo.value, ConfigurationError)


def test_label_color_flags_warnings() -> None:
    """Test that items with warnings get the warning color."""
    assert DEFAULT_STYLES.label_color(make_item("A")) == WHITE
    assert DEFAULT_STYLES.label_color(make_item("A", analysis=Analysis(warnings=["cycle"]))) == WARNING_COLOR


def test_with_overrides_leaves_defaults_untouched() -> None:
    """Test overriding styles returns new rules."""
    rules = DEFAULT_STYLES.with_overrides(
        priorities={"Blocker": "!"},
        types={"Bug": TypeStyle(label="B", color="#FF0000")},
    )
    assert rules.priority_glyph(make_item("A", priority="Blocker")) == "!"
    assert rules.priority_glyph(make_item("A", priority="High")) == "⬈"
    assert rules.type_label(make_item("A", type="Bug")) == "B"
    assert "Blocker" not in DEFAULT_STYLES.priority_glyphs


def test_tables_are_read_only() -> None:
    """Test style tables cannot be mutated in place."""
    with pytest.raises(TypeError):
        StyleRules().status_colors["Done"] = "#000000"  # type: ignore[index]


def test_default_rules_share_default_tables() -> None:
    """Test rules built without arguments use the default tables."""
    rules = StyleRules()
    assert rules.status_colors is DEFAULT_STATUS_COLORS
    assert rules.type_styles is DEFAULT_TYPE_STYLES
    assert rules.priority_glyphs is DEFAULT_PRIORITY_GLYPHS
    assert rules == DEFAULT_STYLES
