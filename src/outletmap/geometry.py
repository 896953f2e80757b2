"""Service-circle overlap between outlets.

Distances use a flat-plane approximation: the Euclidean distance in
degree space scaled by a fixed metres-per-degree factor. This understates
east-west distances away from the equator and is only meaningful for
city-scale spans; callers depend on it exactly as written.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from outletmap._constants import METERS_PER_DEGREE
from outletmap.models.outlet import Outlet


def approx_distance_m(a: Outlet, b: Outlet) -> float:
    """Approximate distance in metres between two outlets."""
    dx = a.lng - b.lng
    dy = a.lat - b.lat
    return math.sqrt(dx * dx + dy * dy) * METERS_PER_DEGREE


def circles_overlap(a: Outlet, b: Outlet) -> bool:
    """Whether the service circles of *a* and *b* intersect.

    Tangent circles do not overlap.
    """
    return approx_distance_m(a, b) < a.radius + b.radius


def overlaps_of(target: Outlet, outlets: Iterable[Outlet]) -> set[int | str]:
    """Ids of every other outlet whose service circle intersects *target*'s.

    *target* itself is never part of the result.
    """
    return {other.id for other in outlets if other.id != target.id and circles_overlap(target, other)}
