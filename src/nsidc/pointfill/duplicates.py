"""
Cheap duplicate detection for boundary rings.

Tiled sources return the same feature once per tile it touches. Comparing
whole rings is too costly for the volume involved, so rings are keyed on their
first two coordinate pairs only. Distinct rings that share those two points
are reported as duplicates; that false positive is accepted.
"""

import json
from typing import Set

from shapely.geometry import LinearRing

from nsidc.pointfill.geometry import flat_coordinates

FINGERPRINT_LENGTH = 4  # x0, y0, x1, y1


def ring_fingerprint(ring: LinearRing) -> str:
    return json.dumps(flat_coordinates(ring)[:FINGERPRINT_LENGTH])


def is_duplicate(ring: LinearRing, seen: Set[str]) -> bool:
    """
    Return True if a ring with the same fingerprint is already in ``seen``.

    Otherwise the ring's fingerprint is added to ``seen`` and False is
    returned.
    """
    fingerprint = ring_fingerprint(ring)
    if fingerprint in seen:
        return True
    seen.add(fingerprint)
    return False
