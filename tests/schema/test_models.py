"""Tests for schema models."""

import pytest
from pydantic import ValidationError

from waycheck.schema.models import GraphDocument, NodeSpec, WaySpec


class TestNodeSpec:
    def test_basic_node(self):
        node = NodeSpec(id=1, lat=52.0, lon=13.0)
        assert node.tags == {}

    def test_location_shorthand(self):
        node = NodeSpec.model_validate({"id": 1, "location": [52.0, 13.0]})
        assert (node.lat, node.lon) == (52.0, 13.0)

    def test_location_shorthand_leaves_input_untouched(self):
        raw = {"id": 1, "location": [52.0, 13.0]}

        NodeSpec.model_validate(raw)

        assert raw == {"id": 1, "location": [52.0, 13.0]}

    def test_latitude_range(self):
        with pytest.raises(ValidationError):
            NodeSpec(id=1, lat=91.0, lon=0.0)

    def test_tag_values_become_text(self):
        node = NodeSpec.model_validate(
            {"id": 1, "lat": 0, "lon": 0, "tags": {"synthetic_boundary_node": True, "level": 1}}
        )
        assert node.tags == {"synthetic_boundary_node": "yes", "level": "1"}


class TestWaySpec:
    def test_closed_way(self):
        way = WaySpec(id=1, nodes=[1, 2, 3, 1])
        assert way.is_closed

    def test_open_way(self):
        way = WaySpec(id=1, nodes=[1, 2, 3])
        assert not way.is_closed

    def test_needs_two_nodes(self):
        with pytest.raises(ValidationError):
            WaySpec(id=1, nodes=[1])

    def test_positive_id(self):
        with pytest.raises(ValidationError):
            WaySpec(id=-5, nodes=[1, 2])


class TestGraphDocument:
    def test_duplicate_node_ids(self):
        with pytest.raises(ValidationError) as exc_info:
            GraphDocument.model_validate(
                {"nodes": [{"id": 1, "lat": 0, "lon": 0}, {"id": 1, "lat": 1, "lon": 1}]}
            )
        assert "Duplicate node ids" in str(exc_info.value)

    def test_duplicate_way_ids(self):
        with pytest.raises(ValidationError):
            GraphDocument.model_validate(
                {
                    "nodes": [{"id": 1, "lat": 0, "lon": 0}, {"id": 2, "lat": 1, "lon": 1}],
                    "ways": [{"id": 3, "nodes": [1, 2]}, {"id": 3, "nodes": [2, 1]}],
                }
            )

    def test_lookups(self):
        document = GraphDocument.model_validate(
            {
                "nodes": [{"id": 1, "lat": 0, "lon": 0}, {"id": 2, "lat": 1, "lon": 1}],
                "ways": [{"id": 3, "nodes": [1, 2]}],
            }
        )
        assert document.get_node(2).lat == 1
        assert document.get_node(9) is None
        assert document.get_way(3).nodes == [1, 2]
        assert document.get_way(9) is None
