"""
Collaborators the viewport fill orchestrator talks to.

Anything with matching methods will do; nsidc.pointfill.layers provides
in-memory implementations.
"""

from typing import Iterable, Protocol, Sequence

from nsidc.pointfill.models import AreaFeature, Extent, GeneratedPoint


class FeatureSource(Protocol):
    def get_features_in_extent(self, extent: Extent) -> Sequence[AreaFeature]:
        """Return area features intersecting the extent. Entries may repeat."""
        ...


class PointSink(Protocol):
    def clear(self) -> None: ...

    def add_features(self, points: Iterable[GeneratedPoint]) -> None: ...


class ViewportProvider(Protocol):
    def extent(self) -> Extent: ...

    def resolution(self) -> float:
        """Map units per screen pixel."""
        ...


class RandomSource(Protocol):
    def random(self) -> float:
        """Uniform float in [0, 1)."""
        ...
