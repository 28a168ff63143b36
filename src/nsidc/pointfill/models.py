"""
Data models for the pointfill package.

This module contains the dataclasses passed between the ring selector, the
duplicate filter, the sampler and the viewport fill orchestrator.
"""

import dataclasses
from enum import Enum
from typing import Any, Mapping, Optional, Sequence, Tuple, Union

from shapely.geometry import LinearRing, MultiPolygon, Polygon


@dataclasses.dataclass(frozen=True)
class Extent:
    """
    Axis-aligned bounding box.

    An extent produced by ``intersection`` may be inverted (``xmin > xmax`` or
    ``ymin > ymax``), which means the two boxes do not overlap.
    """

    xmin: float
    ymin: float
    xmax: float
    ymax: float

    @classmethod
    def from_bounds(cls, bounds: Sequence[float]) -> "Extent":
        """Build an extent from an ``[xmin, ymin, xmax, ymax]`` sequence."""
        if len(bounds) != 4:
            raise ValueError(f"An extent needs 4 values, found {len(bounds)}")
        xmin, ymin, xmax, ymax = (float(value) for value in bounds)
        return cls(xmin, ymin, xmax, ymax)

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.xmin, self.ymin, self.xmax, self.ymax)

    @property
    def width(self) -> float:
        return self.xmax - self.xmin

    @property
    def height(self) -> float:
        return self.ymax - self.ymin

    @property
    def area(self) -> float:
        if self.is_empty:
            return 0.0
        return self.width * self.height

    @property
    def is_empty(self) -> bool:
        return self.xmin > self.xmax or self.ymin > self.ymax

    def intersection(self, other: "Extent") -> "Extent":
        return Extent(
            max(self.xmin, other.xmin),
            max(self.ymin, other.ymin),
            min(self.xmax, other.xmax),
            min(self.ymax, other.ymax),
        )


@dataclasses.dataclass(frozen=True)
class AreaFeature:
    """An area feature as delivered by a feature source."""

    geometry: Union[Polygon, MultiPolygon]
    label: Optional[str] = None
    attributes: Mapping[str, Any] = dataclasses.field(default_factory=dict)


@dataclasses.dataclass(frozen=True)
class CandidateBoundary:
    """
    The ring chosen as the outer boundary of one polygon part, paired with
    the classification label of the feature it came from.
    """

    ring: LinearRing
    label: Optional[str] = None

    @property
    def polygon(self) -> Polygon:
        return Polygon(self.ring)


@dataclasses.dataclass(frozen=True)
class SamplingParameters:
    density: float  # grid spacing in map units
    randomness: float  # fraction of a cell the jitter may span
    probability: float  # per-cell keep chance
    style_index: int


@dataclasses.dataclass(frozen=True)
class GeneratedPoint:
    x: float
    y: float
    style_index: int

    @property
    def coordinates(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def to_geojson(self, style: Any = None) -> dict:
        return {
            "type": "Feature",
            "geometry": {"type": "Point", "coordinates": [self.x, self.y]},
            "properties": {
                "style": self.style_index if style is None else style,
            },
        }


class SamplingSkipped(Enum):
    """Reasons a boundary produced no points. None of these are errors."""

    DUPLICATE = "duplicate"  # Ring already seen in this pass
    SUB_PIXEL = "sub_pixel"  # Boundary smaller than about one screen pixel
    NO_OVERLAP = "no_overlap"  # Boundary outside the viewport


@dataclasses.dataclass
class FillState:
    """
    Refill bookkeeping owned by a single orchestrator.

    When ``dirty`` is False the destination sink holds points generated for
    ``last_extent``. When ``dirty`` is True the next fill refills regardless
    of the extent.
    """

    last_extent: Optional[Extent] = None
    dirty: bool = False

    def needs_refill(self, extent: Extent) -> bool:
        return self.dirty or extent != self.last_extent


@dataclasses.dataclass
class FillReport:
    """Counters describing one call to the orchestrator."""

    refilled: bool = False
    features: int = 0
    boundaries: int = 0
    duplicates: int = 0
    skipped_small: int = 0
    skipped_invalid: int = 0
    points: int = 0
