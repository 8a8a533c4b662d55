"""Tag vocabulary and highway classification for the road graph."""

from enum import Enum

HIGHWAY = "highway"
BARRIER = "barrier"
ONEWAY = "oneway"
SYNTHETIC_BOUNDARY_NODE = "synthetic_boundary_node"
SYNTHETIC_BOUNDARY_VALUES = {"yes", "existing"}

ONEWAY_FORWARD = {"yes", "true", "1"}
ONEWAY_REVERSE = {"-1", "reverse"}

# Values that mean the tag is present but negated
NEGATIVE_VALUES = {"no", "false", "0"}


class HighwayTag(str, Enum):
    """Highway classifications, ranked from most to least important."""

    MOTORWAY = "motorway"
    MOTORWAY_LINK = "motorway_link"
    TRUNK = "trunk"
    TRUNK_LINK = "trunk_link"
    PRIMARY = "primary"
    PRIMARY_LINK = "primary_link"
    SECONDARY = "secondary"
    SECONDARY_LINK = "secondary_link"
    TERTIARY = "tertiary"
    TERTIARY_LINK = "tertiary_link"
    UNCLASSIFIED = "unclassified"
    RESIDENTIAL = "residential"
    SERVICE = "service"
    LIVING_STREET = "living_street"
    PEDESTRIAN = "pedestrian"
    TRACK = "track"
    BUS_GUIDEWAY = "bus_guideway"
    RACEWAY = "raceway"
    ROAD = "road"
    FOOTWAY = "footway"
    BRIDLEWAY = "bridleway"
    STEPS = "steps"
    PATH = "path"
    CYCLEWAY = "cycleway"

    @property
    def priority(self) -> int:
        """Rank of this classification; lower is more important."""
        return _PRIORITIES[self]

    def is_more_important_than(self, other: "HighwayTag") -> bool:
        return self.priority < other.priority

    def is_more_important_than_or_equal_to(self, other: "HighwayTag") -> bool:
        return self.priority <= other.priority

    @classmethod
    def from_value(cls, value: str) -> "HighwayTag | None":
        """Look up a classification by tag value or enum name, ignoring case."""
        normalized = value.strip().lower()
        try:
            return cls(normalized)
        except ValueError:
            return None


# Link roads rank with the road they connect to
_PRIORITIES = {
    HighwayTag.MOTORWAY: 0,
    HighwayTag.MOTORWAY_LINK: 0,
    HighwayTag.TRUNK: 1,
    HighwayTag.TRUNK_LINK: 1,
    HighwayTag.PRIMARY: 2,
    HighwayTag.PRIMARY_LINK: 2,
    HighwayTag.SECONDARY: 3,
    HighwayTag.SECONDARY_LINK: 3,
    HighwayTag.TERTIARY: 4,
    HighwayTag.TERTIARY_LINK: 4,
    HighwayTag.UNCLASSIFIED: 5,
    HighwayTag.RESIDENTIAL: 6,
    HighwayTag.SERVICE: 7,
    HighwayTag.LIVING_STREET: 8,
    HighwayTag.PEDESTRIAN: 9,
    HighwayTag.TRACK: 10,
    HighwayTag.BUS_GUIDEWAY: 11,
    HighwayTag.RACEWAY: 12,
    HighwayTag.ROAD: 13,
    HighwayTag.FOOTWAY: 14,
    HighwayTag.BRIDLEWAY: 15,
    HighwayTag.STEPS: 16,
    HighwayTag.PATH: 17,
    HighwayTag.CYCLEWAY: 18,
}


def has_value(tags: dict[str, str], key: str) -> bool:
    """Check whether a tag is present with a non-negated value."""
    value = tags.get(key)
    if value is None:
        return False
    return value.strip().lower() not in NEGATIVE_VALUES
