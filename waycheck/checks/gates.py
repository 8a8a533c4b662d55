"""Barrier-induced short segment detection."""

from ..graph.entities import Edge
from ..graph.road_graph import RoadGraph
from .valence import main_edge_count


def is_gate_like(graph: RoadGraph, edge: Edge) -> bool:
    """Check if an edge has a barrier on one end and a connected node on the other.

    A gate or similar barrier on a long way forces a section break at the
    barrier node, leaving a short edge whose other end is still connected to
    more than one main edge.
    """
    start, end = graph.connected_nodes(edge)
    return (main_edge_count(graph, start) > 1 and end.is_barrier) or (
        main_edge_count(graph, end) > 1 and start.is_barrier
    )
