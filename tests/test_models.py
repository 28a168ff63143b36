import pytest
from shapely.geometry import LinearRing

from nsidc.pointfill.models import (
    CandidateBoundary,
    Extent,
    FillState,
    GeneratedPoint,
)


class TestExtent:
    """Test suite for the Extent value type."""

    def test_from_bounds(self):
        extent = Extent.from_bounds([0, 1, 10, 20])
        assert extent.as_tuple() == (0.0, 1.0, 10.0, 20.0)

    def test_from_bounds_wrong_length(self):
        with pytest.raises(ValueError):
            Extent.from_bounds([0, 1, 10])

    def test_area(self):
        assert Extent(0, 0, 10, 20).area == 200

    def test_intersection_of_overlapping_boxes(self):
        overlap = Extent(0, 0, 10, 10).intersection(Extent(5, -5, 20, 8))
        assert overlap == Extent(5, 0, 10, 8)
        assert not overlap.is_empty

    def test_intersection_of_disjoint_boxes_is_inverted(self):
        overlap = Extent(0, 0, 10, 10).intersection(Extent(20, 20, 30, 30))
        assert overlap.xmin > overlap.xmax
        assert overlap.is_empty
        assert overlap.area == 0.0

    def test_equality_is_exact(self):
        assert Extent(0, 0, 10, 10) == Extent(0.0, 0.0, 10.0, 10.0)
        assert Extent(0, 0, 10, 10) != Extent(0, 0, 10, 10.000001)


class TestFillState:
    """Test suite for the refill decision."""

    def test_new_state_needs_refill(self):
        assert FillState().needs_refill(Extent(0, 0, 1, 1))

    def test_clean_state_same_extent(self):
        state = FillState(last_extent=Extent(0, 0, 1, 1), dirty=False)
        assert not state.needs_refill(Extent(0, 0, 1, 1))

    def test_clean_state_new_extent(self):
        state = FillState(last_extent=Extent(0, 0, 1, 1), dirty=False)
        assert state.needs_refill(Extent(0, 0, 2, 1))

    def test_dirty_state_same_extent(self):
        state = FillState(last_extent=Extent(0, 0, 1, 1), dirty=True)
        assert state.needs_refill(Extent(0, 0, 1, 1))


def test_candidate_boundary_polygon_has_no_holes():
    boundary = CandidateBoundary(
        ring=LinearRing([(0, 0), (10, 0), (10, 10), (0, 10)]), label="forest"
    )
    assert boundary.polygon.area == 100
    assert len(boundary.polygon.interiors) == 0


def test_generated_point_to_geojson():
    point = GeneratedPoint(1.5, 2.5, 2)
    assert point.coordinates == (1.5, 2.5)
    assert point.to_geojson() == {
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": [1.5, 2.5]},
        "properties": {"style": 2},
    }
    assert point.to_geojson("mangrove")["properties"]["style"] == "mangrove"
