"""Shared fixtures."""

import pytest

from issue_graph.cli import configure_logging
from issue_graph.models import Analysis, Item, Link, Subgraph


@pytest.fixture(autouse=True)
def quiet_logging() -> None:
    """Only let critical log events through during tests."""
    configure_logging("critical")


def make_item(key: str, **kwargs) -> Item:
    """Build an item with rendering-safe defaults."""
    kwargs.setdefault("type", "Story")
    kwargs.setdefault("status_category", "To Do")
    kwargs.setdefault("priority", "Medium")
    kwargs.setdefault("summary", f"Summary of {key}")
    return Item(key=key, **kwargs)


@pytest.fixture
def epic_subgraph() -> Subgraph:
    """A subgraph with one epic, one child, one top-level item and both link kinds."""
    return Subgraph(
        label="S1",
        nodes=[
            make_item("EPIC-1", type="Epic"),
            make_item("PROJ-2", epic_key="EPIC-1", analysis=Analysis(total_score=5, exit=True)),
            make_item("PROJ-3", analysis=Analysis(total_score=1, entry=True)),
        ],
        edges=[
            Link(src_key="EPIC-1", dst_key="PROJ-2", type="Epic"),
            Link(src_key="PROJ-3", dst_key="PROJ-2", type="Dependency"),
        ],
    )
