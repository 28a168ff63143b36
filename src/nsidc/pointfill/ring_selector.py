"""
Selection of the outer boundary ring of each polygon part.

Rendered and tiled feature sources do not always list the outer ring first,
so the ring with the largest bounding-box area is taken as the outer loop.
Holes always sit strictly inside the ring that contains them, so their
bounding boxes are always smaller.
"""

import logging
from typing import List

from shapely.geometry import LinearRing, Polygon

from nsidc.pointfill.geometry import (
    GeometryError,
    extent_area,
    polygon_parts,
    polygon_rings,
)
from nsidc.pointfill.models import AreaFeature, CandidateBoundary

logger = logging.getLogger(__name__)


def find_largest_ring(rings: List[LinearRing]) -> LinearRing:
    """
    Return the ring with the largest bounding-box area.

    Ties keep the ring listed first.

    Raises:
        GeometryError: If there are no rings to choose from
    """
    if not rings:
        raise GeometryError("Polygon has no rings")

    largest = rings[0]
    largest_area = extent_area(largest)
    for ring in rings[1:]:
        area = extent_area(ring)
        if area > largest_area:
            largest, largest_area = ring, area
    return largest


def outer_ring(polygon: Polygon) -> LinearRing:
    return find_largest_ring(polygon_rings(polygon))


def select_outer_boundaries(feature: AreaFeature) -> List[CandidateBoundary]:
    """
    Determine the authoritative outer boundary of each polygon in a feature.

    A Polygon yields exactly one boundary; a MultiPolygon yields one per
    constituent polygon. Each boundary carries the feature's label.

    Args:
        feature: The area feature to inspect

    Returns:
        List of CandidateBoundary, one per polygon part

    Raises:
        GeometryError: If the feature is not areal or has no non-empty parts
    """
    geometry = feature.geometry
    if geometry is None:
        raise GeometryError("Feature has no geometry")

    boundaries = []
    for polygon in polygon_parts(geometry):
        if polygon.is_empty:
            logger.warning(f"Skipping empty polygon part of {feature.label!r}")
            continue
        boundaries.append(CandidateBoundary(ring=outer_ring(polygon), label=feature.label))
    if not boundaries:
        raise GeometryError(f"{geometry.geom_type} has no polygons")

    logger.debug(f"Selected {len(boundaries)} outer ring(s) for {feature.label}")
    return boundaries
