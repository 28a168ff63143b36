import pytest
from shapely.geometry import LinearRing, LineString, MultiPolygon, Polygon, box

from nsidc.pointfill.geometry import (
    Containment,
    GeometryError,
    extent_area,
    flat_coordinates,
    geometry_extent,
    point_in_polygon,
    polygon_area,
    polygon_parts,
    polygon_rings,
)
from nsidc.pointfill.models import Extent


@pytest.fixture
def square_with_hole():
    return Polygon(
        [(0, 0), (100, 0), (100, 100), (0, 100)],
        [[(30, 30), (70, 30), (70, 70), (30, 70)]],
    )


def test_polygon_rings_keeps_source_order(square_with_hole):
    rings = polygon_rings(square_with_hole)
    assert len(rings) == 2
    assert rings[0].bounds == (0, 0, 100, 100)
    assert rings[1].bounds == (30, 30, 70, 70)


def test_polygon_rings_of_empty_polygon():
    assert polygon_rings(Polygon()) == []


def test_polygon_parts():
    multi = MultiPolygon([box(0, 0, 1, 1), box(2, 2, 3, 3)])
    assert len(polygon_parts(multi)) == 2
    assert len(polygon_parts(box(0, 0, 1, 1))) == 1


def test_polygon_parts_rejects_lines():
    with pytest.raises(GeometryError):
        polygon_parts(LineString([(0, 0), (1, 1)]))


def test_geometry_extent(square_with_hole):
    assert geometry_extent(square_with_hole) == Extent(0, 0, 100, 100)


def test_geometry_extent_of_empty_geometry():
    with pytest.raises(GeometryError):
        geometry_extent(Polygon())


def test_extent_area_uses_bounding_box():
    triangle = LinearRing([(0, 0), (10, 0), (0, 10)])
    assert extent_area(triangle) == 100


def test_polygon_area_ignores_orientation():
    clockwise = Polygon([(0, 0), (0, 10), (10, 10), (10, 0)])
    assert polygon_area(clockwise) == 100


def test_polygon_area_subtracts_holes(square_with_hole):
    assert polygon_area(square_with_hole) == 10000 - 1600


def test_flat_coordinates():
    ring = LinearRing([(0, 0), (10, 0), (10, 10)])
    assert flat_coordinates(ring) == [0, 0, 10, 0, 10, 10, 0, 0]


def test_flat_coordinates_drops_z():
    ring = LinearRing([(0, 0, 5), (10, 0, 5), (10, 10, 5)])
    assert flat_coordinates(ring)[:4] == [0, 0, 10, 0]


class TestContainment:
    """Test suite for the point-in-polygon test."""

    def test_interior_point(self, square_with_hole):
        assert point_in_polygon(10, 10, square_with_hole)

    def test_exterior_point(self, square_with_hole):
        assert not point_in_polygon(110, 10, square_with_hole)

    def test_point_on_outline_is_inside(self, square_with_hole):
        assert point_in_polygon(0, 0, square_with_hole)
        assert point_in_polygon(50, 100, square_with_hole)

    def test_point_in_hole_is_outside(self, square_with_hole):
        assert not point_in_polygon(50, 50, square_with_hole)

    def test_prepared_containment_is_reusable(self, square_with_hole):
        contains = Containment(square_with_hole)
        assert contains(5, 5)
        assert not contains(50, 50)
        assert contains(95, 95)
