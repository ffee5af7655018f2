"""Data models for issue graphs."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

EPIC_TYPE = "Epic"
ROOT_KEY = "root"


def _pick(data: dict[str, Any], *names: str, default: Any = None) -> Any:
    """Return the first present value among alternative field names."""
    for name in names:
        if name in data:
            return data[name]
    return default


@dataclass
class Analysis:
    """Computed metadata attached to an item by the upstream analysis step."""

    total_score: float = 0
    warnings: list[str] = field(default_factory=list)
    entry: bool = False
    exit: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "Analysis":
        data = data or {}
        return cls(
            total_score=_pick(data, "totalScore", "total_score", default=0),
            warnings=list(data.get("warnings") or []),
            entry=bool(data.get("entry", False)),
            exit=bool(data.get("exit", False)),
        )


@dataclass
class Item:
    """Represents an issue-tracker item."""

    key: str
    type: str
    status: str = ""
    status_category: str = ""
    priority: str = ""
    summary: str = ""
    epic_key: str | None = None
    analysis: Analysis = field(default_factory=Analysis)

    @property
    def is_epic(self) -> bool:
        return self.type == EPIC_TYPE

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Item":
        """Build an item from a tracker record (camelCase or snake_case fields)."""
        return cls(
            key=str(data["key"]),
            type=str(data.get("type", "")),
            status=data.get("status", ""),
            status_category=_pick(data, "statusCategory", "status_category", default=""),
            priority=data.get("priority") or "",
            summary=data.get("summary") or "",
            epic_key=_pick(data, "epicKey", "epic_key"),
            analysis=Analysis.from_dict(data.get("analysis")),
        )


@dataclass
class Link:
    """Represents a directed link between two items."""

    src_key: str
    dst_key: str
    type: str = "Dependency"

    @property
    def is_epic(self) -> bool:
        return self.type == EPIC_TYPE

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Link":
        return cls(
            src_key=str(_pick(data, "srcKey", "src_key")),
            dst_key=str(_pick(data, "dstKey", "dst_key")),
            type=data.get("type", "Dependency"),
        )


@dataclass
class Subgraph:
    """An independently rendered set of items and links."""

    label: str
    nodes: list[Item] = field(default_factory=list)
    edges: list[Link] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Subgraph":
        return cls(
            label=str(data["label"]),
            nodes=[Item.from_dict(node) for node in data.get("nodes") or []],
            edges=[Link.from_dict(edge) for edge in data.get("edges") or []],
        )


class Placement(Enum):
    """Where an item sits relative to epic clusters."""

    EPIC = "epic"
    CHILD_OF_EPIC = "child_of_epic"
    ROOT = "root"


@dataclass
class Cluster:
    """Items and links sharing one epic affiliation."""

    key: str
    nodes: list[Item] = field(default_factory=list)
    edges: list[Link] = field(default_factory=list)


@dataclass
class Grouping:
    """Clusters of one subgraph, keyed by epic, plus the top-level root cluster."""

    clusters: dict[str, Cluster] = field(default_factory=dict)
    root: Cluster = field(default_factory=lambda: Cluster(key=ROOT_KEY))
