"""Short segment check.

Flags main edges shorter than a maximum length that have an endpoint with
fewer main edges than a minimum valence. Short edges produced by sectioning
a closed way, by barriers and by boundary clipping are not flagged.
"""

from typing import Any

from loguru import logger

from ..graph.entities import Edge
from ..graph.road_graph import RoadGraph
from .base import CheckFlag
from .boundary import is_edge_with_synthetic_boundary_node
from .config import ShortSegmentConfig
from .gates import is_gate_like
from .valence import find_low_valence_node

CHECK_NAME = "ShortSegmentCheck"

FALLBACK_INSTRUCTIONS = [
    "This segment from startNode {0} to endNode {1} on way {2} is short "
    "(length < {3} m) and node {4} has less than {5} connections.",
]


class ShortSegmentRule:
    """Decides whether a single edge is a short, poorly connected segment.

    The rule holds configuration only. Each call to `evaluate` reads the
    edge's endpoints and their incident edges from the graph it is given.
    """

    name = CHECK_NAME

    def __init__(self, configuration: ShortSegmentConfig | None = None):
        self.configuration = configuration or ShortSegmentConfig()

    @classmethod
    def from_configuration(cls, settings: dict[str, Any] | None) -> "ShortSegmentRule":
        """Build a rule from raw dotted-key settings.

        Raises:
            ConfigurationError: If any setting is invalid.
        """
        return cls(ShortSegmentConfig.from_mapping(settings))

    @property
    def maximum_length_m(self) -> float:
        return self.configuration.maximum_length_m

    @property
    def minimum_valence(self) -> int:
        return self.configuration.minimum_valence

    @property
    def fallback_instructions(self) -> list[str]:
        return FALLBACK_INSTRUCTIONS

    def instruction(self, index: int, *arguments: Any) -> str:
        """Format one of the instruction templates."""
        return self.fallback_instructions[index].format(*arguments)

    def is_eligible(self, obj: object) -> bool:
        """Check if an object is a main edge that is important and short enough."""
        return (
            isinstance(obj, Edge)
            and obj.is_main_edge
            and obj.highway.is_more_important_than_or_equal_to(
                self.configuration.minimum_highway_priority
            )
            and obj.length_m < self.maximum_length_m
        )

    def evaluate(self, graph: RoadGraph, obj: object) -> CheckFlag | None:
        """Flag an edge if it is short and has a low valence endpoint.

        Args:
            graph: The road graph the edge belongs to.
            obj: The object to evaluate.

        Returns:
            A CheckFlag anchored at the offending node, or None.
        """
        if not self.is_eligible(obj):
            return None
        edge: Edge = obj  # type: ignore[assignment]

        low_valence = find_low_valence_node(graph, edge, self.minimum_valence)
        if low_valence is None:
            return None

        if is_gate_like(graph, edge):
            logger.debug(f"Edge {edge.identifier}: short segment caused by a barrier")
            return None

        if is_edge_with_synthetic_boundary_node(graph, edge):
            logger.debug(f"Edge {edge.identifier}: clipped at a synthetic boundary")
            return None

        start, end, offending = low_valence
        return CheckFlag(
            check=self.name,
            identifier=edge.identifier,
            instruction=self.instruction(
                0,
                start.identifier,
                end.identifier,
                edge.way_id,
                _format_meters(self.maximum_length_m),
                offending.identifier,
                self.minimum_valence,
            ),
            points=[offending.location],
            details={
                "start_node": start.identifier,
                "end_node": end.identifier,
                "way": edge.way_id,
                "offending_node": offending.identifier,
                "length_m": edge.length_m,
                "maximum_length_m": self.maximum_length_m,
                "minimum_valence": self.minimum_valence,
            },
        )


def _format_meters(value: float) -> str:
    """Render a distance without a trailing `.0` or digit loss."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
