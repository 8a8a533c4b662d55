"""Exclusion of edges clipped at a synthetic boundary."""

from ..graph.entities import Edge
from ..graph.road_graph import RoadGraph


def is_edge_with_synthetic_boundary_node(graph: RoadGraph, edge: Edge) -> bool:
    """Check if either endpoint of an edge is a synthetic boundary node."""
    return any(node.is_synthetic_boundary_node for node in graph.connected_nodes(edge))
