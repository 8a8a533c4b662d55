"""Shared fixtures for tests."""

from pathlib import Path

import pytest

from waycheck.graph.builder import build_graph
from waycheck.graph.entities import Edge, Location, Node, edge_identifier
from waycheck.graph.road_graph import RoadGraph
from waycheck.graph.tags import HighwayTag
from waycheck.schema.loader import parse_graph_from_string


@pytest.fixture
def examples_dir() -> Path:
    """Return the path to the examples directory."""
    return Path(__file__).parent.parent / "examples"


@pytest.fixture
def crossing_yaml() -> str:
    """Return two residential streets crossing at node 1."""
    return """
nodes:
  - {id: 1, lat: 52.000, lon: 13.000}
  - {id: 2, lat: 52.001, lon: 13.000}
  - {id: 3, lat: 51.999, lon: 13.000}
  - {id: 4, lat: 52.000, lon: 13.001}
  - {id: 5, lat: 52.000, lon: 12.999}

ways:
  - id: 10
    nodes: [2, 1, 3]
    tags: {highway: residential}
  - id: 11
    nodes: [4, 1, 5]
    tags: {highway: residential}
"""


@pytest.fixture
def crossing_document(crossing_yaml):
    """Return the parsed crossing document."""
    return parse_graph_from_string(crossing_yaml)


@pytest.fixture
def crossing_graph(crossing_document):
    """Return a graph built from the crossing document."""
    return build_graph(crossing_document)


class GraphFactory:
    """Builds RoadGraphs section by section for topology tests.

    Each call to `way` adds one undirected section as a main edge plus its
    reverse edge.
    """

    def __init__(self):
        self.graph = RoadGraph()
        self._sections: dict[int, int] = {}

    def node(self, identifier: int, **tags: str) -> Node:
        node = Node(
            identifier=identifier,
            location=Location(52.0 + identifier * 1e-4, 13.0),
            tags=tags,
        )
        self.graph.add_node(node)
        return node

    def way(
        self,
        way_id: int,
        start: int,
        end: int,
        length_m: float = 50.0,
        highway: HighwayTag = HighwayTag.RESIDENTIAL,
        oneway: bool = False,
    ) -> Edge:
        for node_id in (start, end):
            if not self.graph.has_node(node_id):
                self.node(node_id)

        section = self._sections.get(way_id, 0) + 1
        self._sections[way_id] = section

        main = Edge(
            identifier=edge_identifier(way_id, section),
            start=start,
            end=end,
            length_m=length_m,
            highway=highway,
        )
        self.graph.add_edge(main)
        if not oneway:
            self.graph.add_edge(
                Edge(
                    identifier=edge_identifier(way_id, section, main=False),
                    start=end,
                    end=start,
                    length_m=length_m,
                    highway=highway,
                )
            )
        return main


@pytest.fixture
def factory() -> GraphFactory:
    """Return an empty graph factory."""
    return GraphFactory()
