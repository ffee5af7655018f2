"""Partitioning of a subgraph's items and links into epic clusters."""

import structlog

from issue_graph.models import ROOT_KEY, Cluster, Grouping, Item, Link, Placement, Subgraph

logger = structlog.get_logger()


def classify(item: Item) -> Placement:
    """Classify an item as an epic, a member of an epic, or a top-level item."""
    if item.is_epic:
        return Placement.EPIC
    if item.epic_key:
        return Placement.CHILD_OF_EPIC
    return Placement.ROOT


def cluster_key(item: Item) -> str:
    """Return the key of the cluster an item belongs to."""
    placement = classify(item)
    if placement is Placement.EPIC:
        return item.key
    if placement is Placement.CHILD_OF_EPIC:
        return item.epic_key
    return ROOT_KEY


def link_cluster_key(link: Link) -> str:
    """Epic containment links belong to their epic; every other link is top-level."""
    return link.src_key if link.is_epic else ROOT_KEY


def _epic_cluster(grouping: Grouping, key: str) -> Cluster:
    if key not in grouping.clusters:
        grouping.clusters[key] = Cluster(key=key)
    return grouping.clusters[key]


def group_subgraph(subgraph: Subgraph) -> Grouping:
    """Partition a subgraph into epic clusters and the root cluster.

    Clusters keep the order in which their key first appears among the items,
    followed by keys that only appear among the links.
    """
    grouping = Grouping()

    for item in subgraph.nodes:
        if classify(item) is Placement.ROOT:
            grouping.root.nodes.append(item)
        else:
            _epic_cluster(grouping, cluster_key(item)).nodes.append(item)

    for link in subgraph.edges:
        if link.is_epic:
            _epic_cluster(grouping, link_cluster_key(link)).edges.append(link)
        else:
            grouping.root.edges.append(link)

    logger.debug(
        "Grouped subgraph",
        label=subgraph.label,
        clusters=len(grouping.clusters),
        root_nodes=len(grouping.root.nodes),
        root_edges=len(grouping.root.edges),
    )
    return grouping


def find_dangling_links(subgraph: Subgraph) -> list[Link]:
    """Return links with an endpoint that is not an item of the subgraph."""
    keys = {item.key for item in subgraph.nodes}
    return [link for link in subgraph.edges if link.src_key not in keys or link.dst_key not in keys]
