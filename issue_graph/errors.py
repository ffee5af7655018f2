"""Exceptions raised by issue-graph."""


class IssueGraphError(Exception):
    """Base class for issue-graph errors."""


class ConfigurationError(IssueGraphError, ValueError):
    """Raised when style tables or settings do not cover a value they must."""


class UnmappedPriorityError(ConfigurationError):
    """Raised when an item's priority has no glyph in the style rules."""

    def __init__(self, priority: str, key: str | None = None) -> None:
        self.priority = priority
        self.key = key
        where = f" (item {key})" if key else ""
        super().__init__(f"No style defined for priority {priority!r}{where}")


class SourceError(IssueGraphError):
    """Raised when a subgraph source cannot be read or parsed."""


class InvalidLabelError(IssueGraphError, ValueError):
    """Raised when a subgraph label cannot be used as an output file name."""
