"""Node valence analysis for short segment detection."""

from typing import NamedTuple

from ..graph.entities import Edge, Node
from ..graph.road_graph import RoadGraph


class LowValenceNodes(NamedTuple):
    """An edge's endpoints together with the first low valence endpoint."""

    start: Node
    end: Node
    offending: Node


def main_edge_count(graph: RoadGraph, node: Node) -> int:
    """Count the main edges incident to a node."""
    return len(graph.main_edges(node))


def is_closed_way_section_node(graph: RoadGraph, node: Node, edge: Edge) -> bool:
    """Check whether a node only joins two sections of the edge's own way.

    Sectioning a closed way leaves a node with exactly two main edges that
    both trace back to the same way.
    """
    main_edges = graph.main_edges(node)
    return (
        len(main_edges) == 2
        and sum(1 for e in main_edges if e.way_id == edge.way_id) > 1
    )


def find_low_valence_node(
    graph: RoadGraph, edge: Edge, threshold_valence: int
) -> LowValenceNodes | None:
    """Find the first endpoint of an edge with fewer main edges than required.

    Endpoints are checked start first; the end node is not examined once the
    start node qualifies. Nodes produced by sectioning a closed way are
    skipped.

    Args:
        graph: The road graph.
        edge: The edge whose endpoints are checked.
        threshold_valence: Minimum number of main edges a node needs.

    Returns:
        The edge's start and end nodes plus the offending node, or None.
    """
    start, end = graph.connected_nodes(edge)
    for node in (start, end):
        if main_edge_count(graph, node) >= threshold_valence:
            continue
        if is_closed_way_section_node(graph, node, edge):
            continue
        return LowValenceNodes(start, end, node)
    return None
