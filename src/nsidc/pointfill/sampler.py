"""
Jittered grid sampling of points inside a boundary polygon.

The sampler walks a regular grid over the part of the boundary that is
visible, keeps each cell with a fixed probability, shifts the kept cells by a
random amount and finally drops anything the shift pushed outside the
boundary.

Algorithm:
    1. Intersect the viewport with the boundary's extent; no overlap, no points
    2. Walk the overlap column by column (x outer, y inner) with step ``density``
    3. Keep a cell with probability ``probability``
    4. Jitter x and y independently (see ``jitter_magnitude``); every other
       cell of a column is also moved half a cell along x, giving a staggered
       lattice without vertical banding
    5. Keep the point only if the boundary covers it

The result is not a uniform or Poisson-disk distribution, and there is no
reproducibility guarantee unless a seeded random source is passed in.
"""

import logging
from typing import List, Optional

import numpy as np
from shapely.geometry import Polygon

from nsidc.pointfill.geometry import Containment, geometry_extent
from nsidc.pointfill.interfaces import RandomSource
from nsidc.pointfill.models import Extent, GeneratedPoint, SamplingSkipped

logger = logging.getLogger(__name__)


def grid_steps(start: float, stop: float, step: float) -> np.ndarray:
    """Grid coordinates from start up to, but excluding, stop."""
    steps = np.arange(start, stop, step)
    return steps[steps < stop]


def jitter_magnitude(
    density: float,
    randomness: float,
    extent_min: float,
    extent_max: float,
    rng: RandomSource,
) -> float:
    """
    Random shift for one axis of a grid cell.

    The shift is uniform in ``[-density*randomness/2, density*randomness/2)``
    when the boundary spans more than one cell along the axis. For boundaries
    narrower than a cell the range is halved so points stay near the sliver.
    """
    span = density * randomness
    if abs(extent_max - extent_min) > density:
        return -span / 2 + rng.random() * span
    return -span / 4 + rng.random() * span / 2


def generate_points(
    viewport_extent: Extent,
    boundary: Polygon,
    density: float,
    randomness: float,
    probability: float,
    style_index: int,
    rng: Optional[RandomSource] = None,
) -> List[GeneratedPoint]:
    """
    Scatter points over the visible part of a boundary polygon.

    Args:
        viewport_extent: Visible map extent
        boundary: Polygon to fill; holes are honored when present
        density: Grid spacing in map units
        randomness: Fraction of a cell the jitter may span, 0 disables jitter
        probability: Chance of keeping each grid cell
        style_index: Style assigned to every generated point
        rng: Source of uniform floats in [0, 1)

    Returns:
        List of GeneratedPoint, possibly empty

    Raises:
        ValueError: If density is not positive
    """
    if density <= 0:
        raise ValueError(f"Grid density must be positive, found {density}")
    if rng is None:
        rng = np.random.default_rng()

    boundary_extent = geometry_extent(boundary)
    overlap = viewport_extent.intersection(boundary_extent)
    if overlap.is_empty:
        logger.debug(f"Sampling skipped: {SamplingSkipped.NO_OVERLAP.value}")
        return []

    contains = Containment(boundary)
    half_cell = density / 2
    points = []

    for x in grid_steps(overlap.xmin, overlap.xmax, density):
        staggered = False

        for y in grid_steps(overlap.ymin, overlap.ymax, density):
            if rng.random() < probability:
                px, py = float(x), float(y)

                if randomness > 0:
                    px += jitter_magnitude(
                        density,
                        randomness,
                        boundary_extent.xmin,
                        boundary_extent.xmax,
                        rng,
                    )
                    py += jitter_magnitude(
                        density,
                        randomness,
                        boundary_extent.ymin,
                        boundary_extent.ymax,
                        rng,
                    )
                    if staggered:
                        px += half_cell

                if contains(px, py):
                    points.append(GeneratedPoint(px, py, style_index))

            staggered = not staggered

    return points
