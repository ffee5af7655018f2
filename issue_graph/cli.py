"""CLI for issue-graph."""

import sys
from typing import Annotated, Literal

import structlog
from cyclopts import App, Parameter

from issue_graph.assembler import encode_graph
from issue_graph.config import get_config
from issue_graph.config_commands import config_app
from issue_graph.grouping import find_dangling_links, group_subgraph
from issue_graph.renderer import BatchRenderer
from issue_graph.source import FileSource, SubgraphSource

logger = structlog.get_logger()

app = App(
    help="Issue Graph - Render issue-tracker subgraphs as clustered Graphviz diagrams",
)

app.command(config_app)


def configure_logging(log_level: str) -> None:
    """Configure structlog to write to stderr at the specified log level."""
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(min_level=log_level.lower()),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )


def get_source(path: str | None = None) -> SubgraphSource:
    """Get the subgraph source, falling back to the configured store path."""
    config = get_config()
    return FileSource(path or config.get("source.path"))


@app.command
def render(
    source: str | None = None,
    output: str | None = None,
    max_workers: int | None = None,
    binary: str | None = None,
) -> None:
    """Write a Graphviz source and a PNG image for every subgraph.

    Args:
        source: Path to the persisted subgraph store (YAML or JSON)
        output: Output root holding the subdot/ and subgraphs/ directories
        max_workers: Maximum number of render processes running at once
        binary: Graphviz executable
    """
    config = get_config()
    subgraphs = get_source(source).load()
    print(f"{len(subgraphs)} subgraph(s) found")

    renderer = BatchRenderer(
        output_dir=output or config.get("output"),
        styles=config.styles(),
        max_workers=max_workers or config.get_int("render.max_workers"),
        binary=binary or config.get("render.binary"),
    )
    for result in renderer.render(subgraphs):
        print(f"{result.label}: {result.dot_path} -> {result.image_path}")


@app.command
def dot(label: str, source: str | None = None) -> None:
    """Print the Graphviz source of one subgraph.

    Args:
        label: Label of the subgraph to print
        source: Path to the persisted subgraph store (YAML or JSON)
    """
    config = get_config()
    for subgraph in get_source(source).load():
        if subgraph.label == label:
            print(encode_graph(subgraph, config.styles()))
            return
    raise ValueError(f"No subgraph labelled {label!r}")


@app.command
def summary(source: str | None = None) -> None:
    """List subgraphs with their item, link and cluster counts.

    Args:
        source: Path to the persisted subgraph store (YAML or JSON)
    """
    subgraphs = get_source(source).load()

    print(f"Found {len(subgraphs)} subgraph(s):\n")
    for subgraph in subgraphs:
        grouping = group_subgraph(subgraph)
        dangling = find_dangling_links(subgraph)
        line = (
            f"{subgraph.label}: {len(subgraph.nodes)} item(s), {len(subgraph.edges)} link(s), "
            f"{len(grouping.clusters)} epic cluster(s)"
        )
        if dangling:
            line += f", {len(dangling)} dangling link(s)"
        print(line)


@app.meta.default
def main(
    *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
    log_level: Literal["debug", "info", "warning", "error", "critical"] = "critical",
) -> None:
    """Main entry point with global options."""
    configure_logging(log_level)
    app(tokens)


if __name__ == "__main__":
    app.meta()
