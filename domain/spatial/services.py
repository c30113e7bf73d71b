"""Spatial Bounded Context - Domain Services.

Pure distance helpers and the brute-force range query that every pruned
index must agree with. NO I/O operations.
"""

from __future__ import annotations

import math

from domain.spatial.errors import InvalidRadiusError
from domain.spatial.value_objects import Point, PointSet


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------
def validate_radius(radius: float) -> float:
    """Return ``radius`` as float, raising if it is negative or non-finite."""
    radius = float(radius)
    if not math.isfinite(radius) or radius < 0:
        raise InvalidRadiusError(radius)
    return radius


# ---------------------------------------------------------------------------
# Euclidean Distance
# ---------------------------------------------------------------------------
def euclidean_distance(a: Point, b: Point) -> float:
    """Straight-line distance between two points.

    Every range check in the project goes through this function so that the
    linear scan and the k-d tree compare bit-identical distances.
    """
    dx = a.x - b.x
    dy = a.y - b.y
    dz = a.z - b.z
    return math.sqrt(dx * dx + dy * dy + dz * dz)


def within_radius(a: Point, b: Point, radius: float) -> bool:
    return euclidean_distance(a, b) <= radius


# ---------------------------------------------------------------------------
# Linear Scan
# ---------------------------------------------------------------------------
def brute_force_range_query(
    points: PointSet, target: Point, radius: float
) -> frozenset[int]:
    """Return ids of all points within ``radius`` of ``target`` by full scan.

    The target itself is included when it belongs to ``points``. A negative
    radius yields an empty result (no point can be closer than zero).
    """
    if math.isnan(radius) or math.isinf(radius):
        raise InvalidRadiusError(radius)
    if radius < 0:
        return frozenset()
    return frozenset(p.id for p in points.points if within_radius(p, target, radius))


class LinearScanIndex:
    """RangeIndex implementation that scans every point per query.

    Serves as the correctness oracle for KdTree and as the engine of the
    brute-force coverage strategy.
    """

    def __init__(self, points: PointSet) -> None:
        self.points = points

    def __len__(self) -> int:
        return len(self.points)

    def range_query(self, target: Point, radius: float) -> frozenset[int]:
        return brute_force_range_query(self.points, target, radius)
