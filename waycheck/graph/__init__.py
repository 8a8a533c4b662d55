"""Graph layer for representing road networks as networkx graphs."""

from .entities import Edge, Location, Node, edge_identifier
from .errors import GraphIntegrityError
from .tags import HighwayTag
from .road_graph import RoadGraph
from .builder import build_graph

__all__ = [
    "Edge",
    "Location",
    "Node",
    "edge_identifier",
    "GraphIntegrityError",
    "HighwayTag",
    "RoadGraph",
    "build_graph",
]
