"""Immutable node and edge records stored in the road graph."""

from dataclasses import dataclass, field
from typing import NamedTuple

from .tags import (
    BARRIER,
    SYNTHETIC_BOUNDARY_NODE,
    SYNTHETIC_BOUNDARY_VALUES,
    HighwayTag,
    has_value,
)

# Edge identifiers pack the way id and the 1-based section index
SECTION_MULTIPLIER = 1_000_000


class Location(NamedTuple):
    """A WGS84 coordinate."""

    latitude: float
    longitude: float

    def __str__(self) -> str:
        return f"POINT ({self.longitude} {self.latitude})"


@dataclass(frozen=True)
class Node:
    """A graph node. Incident edges live in the graph adjacency."""

    identifier: int
    location: Location
    tags: dict[str, str] = field(default_factory=dict, compare=False, hash=False)

    def has_tag(self, key: str) -> bool:
        """Check whether the node carries a non-negated value for a tag."""
        return has_value(self.tags, key)

    @property
    def is_barrier(self) -> bool:
        """Any barrier tag counts, whatever its value."""
        return BARRIER in self.tags

    @property
    def is_synthetic_boundary_node(self) -> bool:
        value = self.tags.get(SYNTHETIC_BOUNDARY_NODE, "")
        return value.strip().lower() in SYNTHETIC_BOUNDARY_VALUES


@dataclass(frozen=True)
class Edge:
    """One directed section of a way.

    The canonical direction of a section has a positive identifier and is the
    main edge; the opposite direction reuses the identifier negated.
    """

    identifier: int
    start: int
    end: int
    length_m: float
    highway: HighwayTag
    tags: dict[str, str] = field(default_factory=dict, compare=False, hash=False)

    @property
    def way_id(self) -> int:
        """Identifier of the source way this edge was sectioned from."""
        return abs(self.identifier) // SECTION_MULTIPLIER

    @property
    def section(self) -> int:
        return abs(self.identifier) % SECTION_MULTIPLIER

    @property
    def is_main_edge(self) -> bool:
        return self.identifier > 0

    def has_tag(self, key: str) -> bool:
        return has_value(self.tags, key)


def edge_identifier(way_id: int, section: int, main: bool = True) -> int:
    """Build an edge identifier from a way id and a 1-based section index."""
    identifier = way_id * SECTION_MULTIPLIER + section
    return identifier if main else -identifier
