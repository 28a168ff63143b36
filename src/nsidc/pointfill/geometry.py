"""
Geometry primitives used by the ring selector, duplicate filter and sampler.

Only a handful of operations are needed (extents, areas, point containment
and ring flattening), so they are collected here as thin wrappers around
shapely rather than spread through the sampling code.
"""

from typing import List, Union

import numpy as np
from shapely.geometry import LinearRing, MultiPolygon, Point, Polygon
from shapely.prepared import prep

from nsidc.pointfill.models import Extent


class GeometryError(Exception):
    """Raised when a feature geometry cannot be sampled."""

    pass


def polygon_rings(polygon: Polygon) -> List[LinearRing]:
    """
    Return every ring of a polygon in the order the source listed them.

    The first ring is whatever shapely holds as the exterior, which for
    tiled or rendered sources is not necessarily the outer loop.
    """
    if polygon.is_empty:
        return []
    return [polygon.exterior, *polygon.interiors]


def polygon_parts(geometry: Union[Polygon, MultiPolygon]) -> List[Polygon]:
    """Split an areal geometry into its constituent polygons."""
    if isinstance(geometry, Polygon):
        return [geometry]
    if isinstance(geometry, MultiPolygon):
        return list(geometry.geoms)
    raise GeometryError(
        f"Expected a Polygon or MultiPolygon, found {geometry.geom_type}"
    )


def geometry_extent(geometry) -> Extent:
    if geometry.is_empty:
        raise GeometryError("Cannot compute the extent of an empty geometry")
    return Extent.from_bounds(geometry.bounds)


def extent_area(geometry) -> float:
    """Area of the bounding box of a ring or polygon."""
    return geometry_extent(geometry).area


def polygon_area(polygon: Polygon) -> float:
    return abs(polygon.area)


def flat_coordinates(ring: LinearRing) -> List[float]:
    """
    Flatten a ring's coordinates to ``[x0, y0, x1, y1, ...]``.

    Any z values are dropped.
    """
    coords = np.asarray(ring.coords, dtype=float)
    if coords.size == 0:
        return []
    return coords[:, :2].ravel().tolist()


class Containment:
    """
    Boundary-inclusive point-in-polygon test against a prepared polygon.

    Points on the outline count as inside; points in holes do not.
    """

    def __init__(self, polygon: Polygon):
        self.polygon = polygon
        self._prepared = prep(polygon)

    def __call__(self, x: float, y: float) -> bool:
        return self._prepared.covers(Point(x, y))


def point_in_polygon(x: float, y: float, polygon: Polygon) -> bool:
    return Containment(polygon)(x, y)
