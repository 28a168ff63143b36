"""
Viewport fill orchestration.

The orchestrator is meant to be called from a host's "view changed" or
"post render" callback. Most calls arrive with an unchanged view, so the fill
state decides whether a pass is needed at all before any feature is touched.

Refill rules:
    - An unchanged extent with a clean state is a no-op
    - A changed extent, or a dirty state, refills the sink from scratch
    - A pass triggered by an extent change that processed at least one
      boundary leaves the state dirty, so the following call refills once
      more and picks up features that were still streaming in
    - A pass that fails part way leaves the state dirty as well, if it
      processed anything, so the next call retries
"""

import logging
from typing import Iterable, Optional, Set

import numpy as np

from nsidc.pointfill import constants
from nsidc.pointfill.classification import SamplingTable, default_table
from nsidc.pointfill.duplicates import is_duplicate
from nsidc.pointfill.geometry import GeometryError, polygon_area
from nsidc.pointfill.interfaces import (
    FeatureSource,
    PointSink,
    RandomSource,
    ViewportProvider,
)
from nsidc.pointfill.models import (
    AreaFeature,
    CandidateBoundary,
    Extent,
    FillReport,
    FillState,
    SamplingSkipped,
)
from nsidc.pointfill.ring_selector import select_outer_boundaries
from nsidc.pointfill.sampler import generate_points

logger = logging.getLogger(__name__)


class ViewportFillOrchestrator:
    """Keeps a point sink filled with scattered points for the current view."""

    def __init__(
        self,
        sink: PointSink,
        viewport: ViewportProvider,
        table: Optional[SamplingTable] = None,
        state: Optional[FillState] = None,
        rng: Optional[RandomSource] = None,
        min_pixel_area: float = constants.DEFAULT_MIN_PIXEL_AREA,
    ):
        self.sink = sink
        self.viewport = viewport
        self.table = table if table is not None else default_table()
        self.state = state if state is not None else FillState()
        self.rng = rng if rng is not None else np.random.default_rng()
        self.min_pixel_area = min_pixel_area

    def sync(self, feature_source: FeatureSource) -> FillReport:
        """Fill for the viewport's current extent, querying the feature source."""
        extent = self.viewport.extent()
        if not self.state.needs_refill(extent):
            logger.debug(f"Extent unchanged, skipping fill for {extent.as_tuple()}")
            return FillReport()
        return self.fill(extent, feature_source.get_features_in_extent(extent))

    def fill(
        self, viewport_extent: Extent, visible_features: Iterable[AreaFeature]
    ) -> FillReport:
        """
        Replace the sink's contents with points scattered over the visible
        features, unless nothing changed since the last fill.

        Args:
            viewport_extent: Visible map extent
            visible_features: Area features intersecting the extent

        Returns:
            FillReport with the counters for this call
        """
        report = FillReport()
        if not self.state.needs_refill(viewport_extent):
            logger.debug(
                f"Extent unchanged, skipping fill for {viewport_extent.as_tuple()}"
            )
            return report

        resolution = self.viewport.resolution()
        if resolution <= 0:
            raise ValueError(f"Resolution must be positive, found {resolution}")

        extent_changed = viewport_extent != self.state.last_extent
        self.state.last_extent = viewport_extent
        self.state.dirty = False
        report.refilled = True

        seen: Set[str] = set()
        completed = False
        self.sink.clear()
        try:
            for feature in visible_features:
                report.features += 1
                try:
                    boundaries = select_outer_boundaries(feature)
                except GeometryError as e:
                    logger.warning(f"Skipping feature {feature.label!r}: {e}")
                    report.skipped_invalid += 1
                    continue

                for boundary in boundaries:
                    self._fill_boundary(
                        boundary, viewport_extent, resolution, seen, report
                    )
            completed = True
        finally:
            if report.boundaries > 0 and (extent_changed or not completed):
                self.state.dirty = True

        logger.debug(
            f"Filled {report.points} points from {report.boundaries} boundaries "
            f"({report.duplicates} duplicates, {report.skipped_small} too small, "
            f"{report.skipped_invalid} invalid)"
        )
        return report

    def _fill_boundary(
        self,
        boundary: CandidateBoundary,
        viewport_extent: Extent,
        resolution: float,
        seen: Set[str],
        report: FillReport,
    ):
        report.boundaries += 1

        if is_duplicate(boundary.ring, seen):
            logger.debug(f"Sampling skipped: {SamplingSkipped.DUPLICATE.value}")
            report.duplicates += 1
            return

        polygon = boundary.polygon
        pixel_area = polygon_area(polygon) / (resolution * resolution)
        if pixel_area <= self.min_pixel_area:
            logger.debug(f"Sampling skipped: {SamplingSkipped.SUB_PIXEL.value}")
            report.skipped_small += 1
            return

        parameters = self.table.lookup(boundary.label, resolution)
        points = generate_points(
            viewport_extent,
            polygon,
            parameters.density,
            parameters.randomness,
            parameters.probability,
            parameters.style_index,
            rng=self.rng,
        )
        self.sink.add_features(points)
        report.points += len(points)
