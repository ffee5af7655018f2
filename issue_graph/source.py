"""Subgraph sources: the boundary to the tracker data collaborator."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import structlog
import yaml

from issue_graph.errors import SourceError
from issue_graph.models import Subgraph

logger = structlog.get_logger()


class SubgraphSource(ABC):
    """Abstract base class for providers of analysed subgraphs."""

    @abstractmethod
    def load(self) -> list[Subgraph]:
        """Return the subgraphs to render."""
        pass


class FileSource(SubgraphSource):
    """Reads subgraphs persisted by the tracker data source as YAML or JSON.

    The document is either a list of subgraphs or a mapping with a
    ``subgraphs`` list. Each subgraph has ``label``, ``nodes`` and ``edges``.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def _read(self) -> Any:
        if not self.path.exists():
            raise SourceError(f"Subgraph store not found: {self.path}")

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                return yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.error("Failed to read subgraph store", path=str(self.path), error=str(e))
            raise SourceError(f"Failed to read subgraphs from {self.path}: {e}") from e

    def load(self) -> list[Subgraph]:
        logger.info("Loading subgraphs", path=str(self.path))
        data = self._read()

        if isinstance(data, dict):
            data = data.get("subgraphs")
        if data is None:
            data = []
        if not isinstance(data, list):
            raise SourceError(f"Expected a list of subgraphs in {self.path}")

        try:
            subgraphs = [Subgraph.from_dict(entry) for entry in data]
        except (KeyError, TypeError, AttributeError) as e:
            raise SourceError(f"Malformed subgraph record in {self.path}: {e!r}") from e

        logger.info("Subgraphs loaded", count=len(subgraphs))
        return subgraphs
