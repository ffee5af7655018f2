"""Batch rendering of subgraphs to Graphviz sources and images."""

import os
import subprocess
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

import structlog

from issue_graph.assembler import encode_graph
from issue_graph.errors import InvalidLabelError
from issue_graph.models import Subgraph
from issue_graph.styles import DEFAULT_STYLES, StyleRules

logger = structlog.get_logger()

DOT_DIR_NAME = "subdot"
IMAGE_DIR_NAME = "subgraphs"


def check_label(label: str) -> str:
    """Reject labels that would place output files outside their directory."""
    separators = [sep for sep in (os.sep, os.altsep, "/") if sep]
    if label in ("", ".", "..") or any(sep in label for sep in separators):
        raise InvalidLabelError(f"Subgraph label {label!r} is not a valid file name")
    return label


@dataclass
class RenderResult:
    """Files produced for one subgraph."""

    label: str
    dot_path: Path
    image_path: Path


class BatchRenderer:
    """Writes one Graphviz source per subgraph and renders each to an image.

    All writes are submitted and joined before any render starts. Both phases
    run on a bounded thread pool, so at most ``max_workers`` render processes
    are alive at a time. The first failure is re-raised once its turn comes in
    the join; work already started is not cancelled and files already written
    are kept.
    """

    def __init__(
        self,
        output_dir: str | Path,
        styles: StyleRules = DEFAULT_STYLES,
        max_workers: int | None = None,
        binary: str = "dot",
        image_format: str = "png",
    ) -> None:
        """Initialize the renderer.

        Args:
            output_dir: Root directory holding the source and image directories
            styles: Style rules used to encode nodes
            max_workers: Maximum concurrent writes/render processes (defaults to the CPU count)
            binary: Graphviz executable used for rendering
            image_format: Graphviz output format
        """
        self.output_dir = Path(output_dir)
        self.dot_dir = self.output_dir / DOT_DIR_NAME
        self.image_dir = self.output_dir / IMAGE_DIR_NAME
        self.styles = styles
        self.max_workers = max_workers or os.cpu_count() or 1
        self.binary = binary
        self.image_format = image_format
        logger.debug(
            "Initializing batch renderer",
            output_dir=str(self.output_dir),
            max_workers=self.max_workers,
            binary=self.binary,
        )

    def dot_path(self, label: str) -> Path:
        return self.dot_dir / f"{label}.dot"

    def image_path(self, label: str) -> Path:
        return self.image_dir / f"{label}.{self.image_format}"

    def ensure_dirs(self) -> None:
        """Create the source and image directories if they are missing."""
        self.dot_dir.mkdir(parents=True, exist_ok=True)
        self.image_dir.mkdir(parents=True, exist_ok=True)

    def encode_all(self, subgraphs: Iterable[Subgraph]) -> dict[str, str]:
        """Encode each subgraph, keyed by label. A repeated label replaces the earlier subgraph."""
        dots: dict[str, str] = {}
        for subgraph in subgraphs:
            check_label(subgraph.label)
            if subgraph.label in dots:
                logger.warning("Duplicate subgraph label, keeping the last one", label=subgraph.label)
            dots[subgraph.label] = encode_graph(subgraph, self.styles)
        return dots

    def _write(self, label: str, dot: str) -> Path:
        path = self.dot_path(label)
        path.write_text(dot, encoding="utf-8")
        logger.debug("Wrote graph source", label=label, path=str(path))
        return path

    def _run_render(self, label: str) -> Path:
        source = self.dot_path(label)
        target = self.image_path(label)
        cmd = [self.binary, f"-T{self.image_format}", "-o", str(target), str(source)]
        logger.debug("Running render command", cmd=cmd)

        try:
            subprocess.run(cmd, capture_output=True, text=True, check=True)
        except subprocess.CalledProcessError as e:
            logger.error("Render command failed", label=label, stderr=e.stderr, returncode=e.returncode)
            raise

        logger.debug("Rendered graph image", label=label, path=str(target))
        return target

    @staticmethod
    def _join(futures: list[Future]) -> list:
        return [future.result() for future in futures]

    def render(self, subgraphs: Iterable[Subgraph]) -> list[RenderResult]:
        """Write and render every subgraph.

        Returns:
            One result per distinct label, in first-seen order
        """
        dots = self.encode_all(subgraphs)
        self.ensure_dirs()
        logger.info("Rendering subgraphs", count=len(dots), output_dir=str(self.output_dir))

        if not dots:
            return []

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            self._join([executor.submit(self._write, label, dot) for label, dot in dots.items()])
            images = self._join([executor.submit(self._run_render, label) for label in dots])

        results = [
            RenderResult(label=label, dot_path=self.dot_path(label), image_path=image)
            for label, image in zip(dots, images)
        ]
        logger.info("Subgraphs rendered", count=len(results))
        return results
