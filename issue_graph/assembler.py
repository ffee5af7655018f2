"""Assembly of complete Graphviz documents from grouped subgraphs."""

import structlog

from issue_graph.encoder import encode_link, encode_node
from issue_graph.grouping import find_dangling_links, group_subgraph
from issue_graph.models import Cluster, Subgraph
from issue_graph.styles import DEFAULT_STYLES, StyleRules

logger = structlog.get_logger()

STATEMENT_SEPARATOR = "\n  "


def _statements(cluster: Cluster, styles: StyleRules) -> list[str]:
    return [encode_node(item, styles) for item in cluster.nodes] + [encode_link(link) for link in cluster.edges]


def encode_cluster(cluster: Cluster, index: int, styles: StyleRules = DEFAULT_STYLES) -> str:
    """Render one epic cluster as a filled grey subgraph block.

    The block is named by its position rather than the epic key, since keys
    are not guaranteed to be valid Graphviz identifiers.
    """
    stmts = _statements(cluster, styles)
    return f"subgraph cluster_{index} {{\nstyle=filled;\ncolor=lightgrey;\n{STATEMENT_SEPARATOR.join(stmts)}\n}}"


def encode_graph(subgraph: Subgraph, styles: StyleRules = DEFAULT_STYLES) -> str:
    """Render a subgraph as a left-to-right Graphviz digraph."""
    for link in find_dangling_links(subgraph):
        logger.warning(
            "Link references an item outside the subgraph",
            label=subgraph.label,
            src_key=link.src_key,
            dst_key=link.dst_key,
        )

    grouping = group_subgraph(subgraph)
    stmts = [encode_cluster(cluster, index, styles) for index, cluster in enumerate(grouping.clusters.values())]
    stmts.extend(_statements(grouping.root, styles))
    return f"digraph{{\nrankdir=LR\nnode [shape=plain]\n{STATEMENT_SEPARATOR.join(stmts)}\n}}"
