"""Pydantic models for road-network documents."""

from collections import Counter

from pydantic import BaseModel, Field, field_validator, model_validator


class NodeSpec(BaseModel):
    """A map node with a location and tags."""

    id: int
    lat: float = Field(ge=-90.0, le=90.0)
    lon: float = Field(ge=-180.0, le=180.0)
    tags: dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def normalize_location(cls, data: dict) -> dict:
        """Accept a `location: [lat, lon]` shorthand."""
        if isinstance(data, dict) and "location" in data:
            data = dict(data)
            location = data.pop("location")
            if isinstance(location, (list, tuple)) and len(location) == 2:
                data.setdefault("lat", location[0])
                data.setdefault("lon", location[1])
        return data

    @field_validator("tags", mode="before")
    @classmethod
    def stringify_tags(cls, value):
        """YAML turns `yes` and numbers into non-strings; tags are always text."""
        if isinstance(value, dict):
            return {str(k): _tag_text(v) for k, v in value.items()}
        return value


class WaySpec(BaseModel):
    """A map way: an ordered list of node ids plus tags."""

    id: int = Field(gt=0)
    nodes: list[int] = Field(min_length=2)
    tags: dict[str, str] = Field(default_factory=dict)
    length_m: list[float] | None = None

    @field_validator("tags", mode="before")
    @classmethod
    def stringify_tags(cls, value):
        if isinstance(value, dict):
            return {str(k): _tag_text(v) for k, v in value.items()}
        return value

    @property
    def is_closed(self) -> bool:
        return self.nodes[0] == self.nodes[-1]


class GraphDocument(BaseModel):
    """Root model for a road-network document."""

    nodes: list[NodeSpec] = Field(default_factory=list)
    ways: list[WaySpec] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_references(self) -> "GraphDocument":
        """Ensure identifiers are unique and ways only reference defined nodes."""
        node_ids = Counter(n.id for n in self.nodes)
        duplicates = {i for i, count in node_ids.items() if count > 1}
        if duplicates:
            raise ValueError(f"Duplicate node ids: {sorted(duplicates)}")

        way_ids = Counter(w.id for w in self.ways)
        duplicates = {i for i, count in way_ids.items() if count > 1}
        if duplicates:
            raise ValueError(f"Duplicate way ids: {sorted(duplicates)}")

        known = set(node_ids)
        for way in self.ways:
            missing = [n for n in way.nodes if n not in known]
            if missing:
                raise ValueError(
                    f"Way {way.id} references undefined nodes: {missing}"
                )
        return self

    def get_node(self, identifier: int) -> NodeSpec | None:
        """Get a node by id."""
        for node in self.nodes:
            if node.id == identifier:
                return node
        return None

    def get_way(self, identifier: int) -> WaySpec | None:
        """Get a way by id."""
        for way in self.ways:
            if way.id == identifier:
                return way
        return None


def _tag_text(value) -> str:
    if isinstance(value, bool):
        return "yes" if value else "no"
    return str(value)
