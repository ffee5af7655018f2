"""Tests for node and edge encoding."""

import pytest

from conftest import make_item
from issue_graph.encoder import (
    ENTRY_FRAME_OPEN,
    EXIT_FRAME_OPEN,
    FRAME_CLOSE,
    INNER_TABLE_OPEN,
    encode_link,
    encode_node,
    format_score,
)
from issue_graph.errors import UnmappedPriorityError
from issue_graph.models import Analysis, Item, Link


def test_encode_plain_node() -> None:
    """Test the full label of an item without frames."""
    item = make_item(
        "PROJ-1",
        type="Requirement",
        status_category="Done",
        priority="High",
        summary="Ship it",
        analysis=Analysis(total_score=3),
    )
    expected = (
        '"PROJ-1"[label=<'
        '<TABLE BORDER="0" CELLBORDER="1" CELLPADDING="4" CELLSPACING="0">'
        "<TR>"
        '<TD BGCOLOR="#ADD8E6">R</TD>'
        '<TD BGCOLOR="#FFFFFF" ALIGN="TEXT">PROJ-1              </TD>'
        '<TD BGCOLOR="#009A44">⬈ 3</TD>'
        "</TR>"
        '<TR><TD COLSPAN="3" BGCOLOR="#FFFFFF">Ship it               </TD></TR>'
        "</TABLE>"
        ">];"
    )
    assert encode_node(item) == expected


def test_encode_node_with_warnings_and_markup() -> None:
    """Test warning color and escaping of key and summary."""
    item = make_item("K[1]", summary="a < b & c", analysis=Analysis(warnings=["no estimate"]))
    stmt = encode_node(item)
    assert '<TD BGCOLOR="#F08080" ALIGN="TEXT">K&#91;1&#93;' in stmt
    assert "a &lt; b &amp; c" in stmt
    assert stmt.startswith('"K[1]"[label=<')


def test_exit_node_has_thin_frame() -> None:
    """Test that exit items are wrapped once with the thin frame."""
    stmt = encode_node(make_item("A", analysis=Analysis(exit=True)))
    assert stmt.startswith('"A"[label=<' + EXIT_FRAME_OPEN + INNER_TABLE_OPEN)
    assert stmt.endswith("</TABLE>" + FRAME_CLOSE + ">];")
    assert ENTRY_FRAME_OPEN not in stmt


def test_entry_node_has_heavy_frame() -> None:
    """Test that entry items are wrapped once with the heavy frame."""
    stmt = encode_node(make_item("A", analysis=Analysis(entry=True)))
    assert stmt.startswith('"A"[label=<' + ENTRY_FRAME_OPEN + INNER_TABLE_OPEN)
    assert EXIT_FRAME_OPEN not in stmt


def test_entry_and_exit_frames_nest_exit_innermost() -> None:
    """Test both frames apply with the exit frame closest to the table."""
    stmt = encode_node(make_item("A", analysis=Analysis(entry=True, exit=True)))
    assert stmt.startswith('"A"[label=<' + ENTRY_FRAME_OPEN + EXIT_FRAME_OPEN + INNER_TABLE_OPEN)
    assert stmt.endswith("</TABLE>" + FRAME_CLOSE + FRAME_CLOSE + ">];")
    assert stmt.count("<TABLE") == 3
    assert stmt.count("</TABLE>") == 3


def test_encode_node_unmapped_priority() -> None:
    """Test that encoding fails on a priority without a glyph."""
    with pytest.raises(UnmappedPriorityError):
        encode_node(make_item("A", priority="Urgent"))


@pytest.mark.parametrize(("score", "text"), [(3, "3"), (3.0, "3"), (2.5, "2.5"), (0, "0")])
def test_format_score(score: float, text: str) -> None:
    """Test score formatting."""
    assert format_score(score) == text


def test_encode_link() -> None:
    """Test edge statements are unstyled and unescaped."""
    assert encode_link(Link(src_key="A", dst_key="B")) == '"A"->"B";'
    assert encode_link(Link(src_key="EPIC-1", dst_key="X[1]", type="Epic")) == '"EPIC-1"->"X[1]";'


def test_encode_node_missing_priority() -> None:
    """Test a record without a priority is rejected instead of getting a default glyph."""
    item = Item.from_dict({"key": "A", "type": "Story", "summary": "x"})
    with pytest.raises(UnmappedPriorityError):
        encode_node(item)
