"""RoadGraph wrapper around networkx for sectioned road networks."""

from typing import Iterator

import networkx as nx

from .entities import Edge, Node
from .errors import GraphIntegrityError


class RoadGraph:
    """A read-only view of a sectioned road network.

    Wraps a networkx MultiDiGraph. Nodes are keyed by node identifier and
    edges by edge identifier; the Node and Edge records hold identifiers
    only, so adjacency is always resolved through the graph.
    """

    def __init__(self):
        """Initialize an empty road graph."""
        self._graph = nx.MultiDiGraph()
        self._edge_index: dict[int, Edge] = {}

    @property
    def graph(self) -> nx.MultiDiGraph:
        """Get the underlying networkx graph."""
        return self._graph

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    def add_node(self, node: Node) -> int:
        """Add a node to the graph.

        Args:
            node: The node record.

        Returns:
            The node identifier.
        """
        self._graph.add_node(node.identifier, node=node)
        return node.identifier

    def add_edge(self, edge: Edge) -> int:
        """Add a directed edge between two existing nodes.

        Args:
            edge: The edge record.

        Returns:
            The edge identifier.

        Raises:
            GraphIntegrityError: If an endpoint is missing or the id is taken.
        """
        for node_id in (edge.start, edge.end):
            if not self._graph.has_node(node_id):
                raise GraphIntegrityError(
                    f"Edge {edge.identifier} references unknown node {node_id}",
                    node_id,
                )
        if edge.identifier in self._edge_index:
            raise GraphIntegrityError(
                f"Duplicate edge identifier {edge.identifier}", edge.identifier
            )

        self._graph.add_edge(edge.start, edge.end, key=edge.identifier, edge=edge)
        self._edge_index[edge.identifier] = edge
        return edge.identifier

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def node(self, identifier: int) -> Node:
        """Get a node by identifier."""
        if not self._graph.has_node(identifier):
            raise GraphIntegrityError(f"Unknown node {identifier}", identifier)
        return self._graph.nodes[identifier]["node"]

    def edge(self, identifier: int) -> Edge:
        """Get an edge by identifier."""
        try:
            return self._edge_index[identifier]
        except KeyError:
            raise GraphIntegrityError(
                f"Unknown edge {identifier}", identifier
            ) from None

    def has_node(self, identifier: int) -> bool:
        return self._graph.has_node(identifier)

    def has_edge(self, identifier: int) -> bool:
        return identifier in self._edge_index

    def start(self, edge: Edge) -> Node:
        """Get the start node of an edge."""
        return self.node(edge.start)

    def end(self, edge: Edge) -> Node:
        """Get the end node of an edge."""
        return self.node(edge.end)

    def connected_nodes(self, edge: Edge) -> tuple[Node, Node]:
        """Get the (start, end) nodes of an edge."""
        return self.start(edge), self.end(edge)

    def connected_edges(self, node: Node) -> list[Edge]:
        """Get every directed edge incident to a node, each exactly once.

        Both incoming and outgoing edges are included, ordered by identifier.
        """
        if not self._graph.has_node(node.identifier):
            raise GraphIntegrityError(
                f"Unknown node {node.identifier}", node.identifier
            )

        incident: dict[int, Edge] = {}
        for _, _, data in self._graph.out_edges(node.identifier, data=True):
            incident[data["edge"].identifier] = data["edge"]
        for _, _, data in self._graph.in_edges(node.identifier, data=True):
            incident[data["edge"].identifier] = data["edge"]

        return [incident[key] for key in sorted(incident)]

    def main_edges(self, node: Node) -> list[Edge]:
        """Get the main edges incident to a node."""
        return [e for e in self.connected_edges(node) if e.is_main_edge]

    def nodes(self) -> Iterator[Node]:
        """Iterate over all nodes in identifier order."""
        for identifier in sorted(self._graph.nodes):
            yield self._graph.nodes[identifier]["node"]

    def edges(self) -> Iterator[Edge]:
        """Iterate over all edges in identifier order."""
        for identifier in sorted(self._edge_index):
            yield self._edge_index[identifier]

    def node_count(self) -> int:
        return self._graph.number_of_nodes()

    def edge_count(self) -> int:
        return len(self._edge_index)
