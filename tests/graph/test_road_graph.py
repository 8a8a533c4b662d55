"""Tests for RoadGraph."""

import pytest

from waycheck.graph.entities import Edge, Location, Node
from waycheck.graph.errors import GraphIntegrityError
from waycheck.graph.road_graph import RoadGraph
from waycheck.graph.tags import HighwayTag


@pytest.fixture
def graph():
    graph = RoadGraph()
    graph.add_node(Node(1, Location(0.0, 0.0)))
    graph.add_node(Node(2, Location(0.0, 0.001)))
    graph.add_node(Node(3, Location(0.0, 0.002), {"barrier": "gate"}))
    return graph


def _edge(identifier, start, end):
    return Edge(identifier, start, end, 10.0, HighwayTag.RESIDENTIAL)


class TestConstruction:
    def test_add_edge(self, graph):
        graph.add_edge(_edge(1_000_001, 1, 2))

        assert graph.has_edge(1_000_001)
        assert graph.edge_count() == 1

    def test_unknown_endpoint(self, graph):
        with pytest.raises(GraphIntegrityError) as exc_info:
            graph.add_edge(_edge(1_000_001, 1, 99))

        assert exc_info.value.identifier == 99

    def test_duplicate_edge(self, graph):
        graph.add_edge(_edge(1_000_001, 1, 2))

        with pytest.raises(GraphIntegrityError):
            graph.add_edge(_edge(1_000_001, 2, 3))

    def test_parallel_edges_between_same_nodes(self, graph):
        graph.add_edge(_edge(1_000_001, 1, 2))
        graph.add_edge(_edge(2_000_001, 1, 2))

        assert len(graph.connected_edges(graph.node(1))) == 2


class TestQueries:
    def test_unknown_node(self, graph):
        with pytest.raises(GraphIntegrityError):
            graph.node(42)

    def test_unknown_edge(self, graph):
        with pytest.raises(GraphIntegrityError):
            graph.edge(42)

    def test_connected_nodes_order(self, graph):
        edge = _edge(1_000_001, 2, 1)
        graph.add_edge(edge)

        start, end = graph.connected_nodes(edge)

        assert (start.identifier, end.identifier) == (2, 1)

    def test_connected_edges_both_directions(self, graph):
        graph.add_edge(_edge(1_000_001, 1, 2))
        graph.add_edge(_edge(-1_000_001, 2, 1))
        graph.add_edge(_edge(2_000_001, 2, 3))

        edges = graph.connected_edges(graph.node(2))

        assert [e.identifier for e in edges] == [-1_000_001, 1_000_001, 2_000_001]

    def test_self_loop_listed_once(self, graph):
        graph.add_edge(_edge(1_000_001, 1, 1))

        assert len(graph.connected_edges(graph.node(1))) == 1

    def test_main_edges(self, graph):
        graph.add_edge(_edge(1_000_001, 1, 2))
        graph.add_edge(_edge(-1_000_001, 2, 1))

        assert [e.identifier for e in graph.main_edges(graph.node(1))] == [1_000_001]

    def test_edges_sorted(self, graph):
        graph.add_edge(_edge(2_000_001, 2, 3))
        graph.add_edge(_edge(1_000_001, 1, 2))

        assert [e.identifier for e in graph.edges()] == [1_000_001, 2_000_001]
        assert [n.identifier for n in graph.nodes()] == [1, 2, 3]


class TestEntities:
    def test_edge_identifier_parts(self):
        edge = _edge(-123_000_004, 1, 2)

        assert edge.way_id == 123
        assert edge.section == 4
        assert not edge.is_main_edge

    def test_node_tags(self, graph):
        gate = graph.node(3)

        assert gate.is_barrier
        assert gate.has_tag("barrier")
        assert not gate.is_synthetic_boundary_node
        assert not graph.node(1).is_barrier

    def test_location_str(self):
        assert str(Location(52.5, 13.25)) == "POINT (13.25 52.5)"
