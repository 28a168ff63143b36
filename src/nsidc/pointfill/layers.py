"""
In-memory feature sources, point sinks and viewports.

These cover batch use of the orchestrator: area features are read from a
GeoJSON FeatureCollection, generated points are collected in a PointLayer and
written back out as GeoJSON.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from shapely import STRtree
from shapely.geometry import MultiPolygon, Polygon, box, shape

from nsidc.pointfill import constants
from nsidc.pointfill.models import AreaFeature, Extent, GeneratedPoint

logger = logging.getLogger(__name__)


def read_features(
    path, label_attribute: str = constants.DEFAULT_LABEL_ATTRIBUTE
) -> List[AreaFeature]:
    """
    Read the area features of a GeoJSON FeatureCollection.

    Features without a Polygon or MultiPolygon geometry are skipped.

    Args:
        path: Path to the GeoJSON file
        label_attribute: Property holding the classification label

    Returns:
        List of AreaFeature
    """
    with open(path) as file:
        collection = json.load(file)
    return features_from_geojson(collection, label_attribute)


def features_from_geojson(
    collection: dict, label_attribute: str = constants.DEFAULT_LABEL_ATTRIBUTE
) -> List[AreaFeature]:
    if collection.get("type") != "FeatureCollection":
        raise ValueError(
            f"Expected a GeoJSON FeatureCollection, found {collection.get('type')}"
        )

    features = []
    for index, item in enumerate(collection.get("features", [])):
        properties = item.get("properties") or {}
        if item.get("geometry") is None:
            logger.warning(f"Skipping feature {index}: no geometry")
            continue

        geometry = shape(item["geometry"])
        if not isinstance(geometry, (Polygon, MultiPolygon)):
            logger.warning(
                f"Skipping feature {index}: {geometry.geom_type} is not an area"
            )
            continue

        features.append(
            AreaFeature(
                geometry=geometry,
                label=properties.get(label_attribute),
                attributes=properties,
            )
        )

    logger.debug(f"Read {len(features)} area features")
    return features


class FeatureLayer:
    """Feature source over a fixed list of area features."""

    def __init__(self, features: Sequence[AreaFeature]):
        self.features = list(features)
        self._tree = STRtree([feature.geometry for feature in self.features])

    def __len__(self):
        return len(self.features)

    def get_features_in_extent(self, extent: Extent) -> List[AreaFeature]:
        if extent.is_empty or not self.features:
            return []
        indexes = self._tree.query(box(*extent.as_tuple()))
        return [self.features[index] for index in sorted(indexes)]


class PointLayer:
    """Point sink holding the most recent fill."""

    def __init__(self, styles: Optional[Sequence[str]] = None):
        self.styles = list(styles) if styles else []
        self.points: List[GeneratedPoint] = []

    def __len__(self):
        return len(self.points)

    def clear(self):
        self.points = []

    def add_features(self, points: Iterable[GeneratedPoint]):
        self.points.extend(points)

    def style_name(self, style_index: int):
        if style_index < len(self.styles):
            return self.styles[style_index]
        return style_index

    def to_geojson(self) -> dict:
        return {
            "type": "FeatureCollection",
            "features": [
                point.to_geojson(self.style_name(point.style_index))
                for point in self.points
            ],
        }


def write_points(path, layer: PointLayer) -> Path:
    path = Path(path)
    with open(path, "tw") as file:
        json.dump(layer.to_geojson(), file)
    logger.debug(f"Wrote {len(layer)} points to {path}")
    return path


@dataclass
class StaticViewport:
    """Viewport provider with a fixed extent and resolution."""

    current_extent: Extent
    current_resolution: float = constants.DEFAULT_RESOLUTION

    def extent(self) -> Extent:
        return self.current_extent

    def resolution(self) -> float:
        return self.current_resolution
