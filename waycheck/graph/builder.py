"""Builder for converting a GraphDocument into a sectioned RoadGraph."""

from collections import Counter

from loguru import logger

from ..schema.errors import SchemaValidationError
from ..schema.models import GraphDocument, WaySpec
from .entities import Edge, Location, Node, edge_identifier
from .geometry import polyline_length
from .road_graph import RoadGraph
from .tags import HIGHWAY, ONEWAY, ONEWAY_FORWARD, ONEWAY_REVERSE, HighwayTag


def build_graph(document: GraphDocument) -> RoadGraph:
    """Build a RoadGraph from a GraphDocument.

    Every highway way is split into sections at its endpoints, at nodes it
    shares with other highway ways (or revisits itself), and at barrier or
    synthetic boundary nodes.

    Args:
        document: The parsed road-network document.

    Returns:
        A RoadGraph holding every node and the directed section edges.
    """
    graph = RoadGraph()

    # Add all nodes first
    nodes: dict[int, Node] = {}
    for node_spec in document.nodes:
        node = Node(
            identifier=node_spec.id,
            location=Location(node_spec.lat, node_spec.lon),
            tags=dict(node_spec.tags),
        )
        nodes[node.identifier] = node
        graph.add_node(node)

    highway_ways: list[tuple[WaySpec, HighwayTag]] = []
    for way in document.ways:
        highway = HighwayTag.from_value(way.tags.get(HIGHWAY, ""))
        if highway is None:
            logger.debug(f"Skipping way {way.id}: not a recognized highway")
            continue
        highway_ways.append((way, highway))

    # A node used by more than one highway way is an intersection
    usage: Counter[int] = Counter()
    for way, _ in highway_ways:
        usage.update(set(way.nodes))

    for way, highway in highway_ways:
        sections = _section_way(way, nodes, usage)
        lengths = _section_lengths(way, sections, nodes)
        direction = way.tags.get(ONEWAY, "").strip().lower()

        for index, (section, length) in enumerate(zip(sections, lengths), start=1):
            start, end = section[0], section[-1]
            if direction in ONEWAY_REVERSE:
                start, end = end, start

            graph.add_edge(
                Edge(
                    identifier=edge_identifier(way.id, index),
                    start=start,
                    end=end,
                    length_m=length,
                    highway=highway,
                    tags=dict(way.tags),
                )
            )
            if direction in ONEWAY_FORWARD or direction in ONEWAY_REVERSE:
                continue
            graph.add_edge(
                Edge(
                    identifier=edge_identifier(way.id, index, main=False),
                    start=end,
                    end=start,
                    length_m=length,
                    highway=highway,
                    tags=dict(way.tags),
                )
            )

        logger.debug(f"Way {way.id} sectioned into {len(sections)} edge(s)")

    return graph


def _section_way(
    way: WaySpec, nodes: dict[int, Node], usage: Counter
) -> list[list[int]]:
    """Split a way's node list into sections at its split points."""
    sequence = way.nodes
    # The closing node of a closed way is not a repeat
    interior = sequence[:-1] if way.is_closed else sequence
    repeats = {n for n, count in Counter(interior).items() if count > 1}

    split_indexes = [0]
    for index in range(1, len(sequence) - 1):
        node_id = sequence[index]
        node = nodes[node_id]
        if (
            usage[node_id] > 1
            or node_id in repeats
            or node.is_barrier
            or node.is_synthetic_boundary_node
        ):
            split_indexes.append(index)
    split_indexes.append(len(sequence) - 1)

    return [
        sequence[split_indexes[i] : split_indexes[i + 1] + 1]
        for i in range(len(split_indexes) - 1)
    ]


def _section_lengths(
    way: WaySpec, sections: list[list[int]], nodes: dict[int, Node]
) -> list[float]:
    """Section lengths in meters, explicit when the way provides them."""
    if way.length_m is not None:
        if len(way.length_m) != len(sections):
            raise SchemaValidationError(
                f"Way {way.id} gives {len(way.length_m)} length(s) "
                f"for {len(sections)} section(s)",
                [{"loc": f"ways.{way.id}.length_m", "msg": "section count mismatch", "type": "value_error"}],
            )
        return list(way.length_m)

    return [
        polyline_length([nodes[node_id].location for node_id in section])
        for section in sections
    ]
