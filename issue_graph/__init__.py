"""Clustered Graphviz diagrams of issue-tracker subgraphs."""

from issue_graph.assembler import encode_graph
from issue_graph.models import Analysis, Item, Link, Subgraph
from issue_graph.renderer import BatchRenderer
from issue_graph.styles import StyleRules

__all__ = ["Analysis", "BatchRenderer", "Item", "Link", "StyleRules", "Subgraph", "encode_graph"]
