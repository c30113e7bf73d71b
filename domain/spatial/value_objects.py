"""Spatial Bounded Context - Value Objects.

Immutable data structures for points in 3-D Cartesian space.
All validation occurs at construction time via Pydantic.
"""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np
from numpy.typing import NDArray
from pydantic import BaseModel, ConfigDict, model_validator

# Axis indices used by the k-d tree (depth % 3)
AXIS_X, AXIS_Y, AXIS_Z = 0, 1, 2


# ---------------------------------------------------------------------------
# Point
# ---------------------------------------------------------------------------
class Point(BaseModel):
    """Identified position in 3-D Cartesian space (Value Object).

    Invariants:
        PT-1: x, y, z are finite (NaN and +/-inf are rejected, never coerced)

    Identifiers are unique within a PointSet but need not be contiguous.
    Synthetic positions (e.g. grid search winners) use a sentinel id.
    """

    id: int
    x: float
    y: float
    z: float

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    def coordinate(self, axis: int) -> float:
        """Return the coordinate along axis 0 (x), 1 (y) or 2 (z)."""
        if axis == AXIS_X:
            return self.x
        if axis == AXIS_Y:
            return self.y
        if axis == AXIS_Z:
            return self.z
        raise ValueError(f"axis must be 0, 1 or 2, got {axis}")

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


# ---------------------------------------------------------------------------
# BoundingBox3D
# ---------------------------------------------------------------------------
class BoundingBox3D(BaseModel):
    """Axis-aligned extent of a set of points (Value Object).

    Degenerate boxes (min == max on some or all axes) are valid: they arise
    whenever all points share a coordinate.
    """

    min_x: float
    min_y: float
    min_z: float
    max_x: float
    max_y: float
    max_z: float

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    @model_validator(mode="after")
    def validate_ordering(self) -> "BoundingBox3D":
        for axis, lo, hi in (
            ("x", self.min_x, self.max_x),
            ("y", self.min_y, self.max_y),
            ("z", self.min_z, self.max_z),
        ):
            if lo > hi:
                raise ValueError(f"Invalid {axis} ordering: min={lo} > max={hi}")
        return self

    def center(self) -> tuple[float, float, float]:
        return (
            (self.min_x + self.max_x) / 2,
            (self.min_y + self.max_y) / 2,
            (self.min_z + self.max_z) / 2,
        )

    def spans(self) -> tuple[float, float, float]:
        """Return (width, depth, height) of the box."""
        return (
            self.max_x - self.min_x,
            self.max_y - self.min_y,
            self.max_z - self.min_z,
        )


# ---------------------------------------------------------------------------
# PointSet
# ---------------------------------------------------------------------------
class PointSet(BaseModel):
    """Ordered, immutable collection of uniquely identified points.

    Insertion order is preserved and serves as the deterministic tie-break
    source for every coverage strategy; it has no effect on distances.

    Invariants:
        PS-1: point ids are unique
    """

    points: tuple[Point, ...] = ()

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_unique_ids(self) -> "PointSet":
        seen: set[int] = set()
        for point in self.points:
            if point.id in seen:
                raise ValueError(f"Duplicate point id: {point.id}")
            seen.add(point.id)
        return self

    @classmethod
    def from_coordinates(
        cls, coords: Iterable[tuple[float, float, float]], start_id: int = 1
    ) -> "PointSet":
        """Build a PointSet assigning sequential ids from ``start_id``."""
        return cls(
            points=tuple(
                Point(id=start_id + i, x=x, y=y, z=z)
                for i, (x, y, z) in enumerate(coords)
            )
        )

    def __len__(self) -> int:
        return len(self.points)

    def is_empty(self) -> bool:
        return not self.points

    def ids(self) -> tuple[int, ...]:
        """Return point ids in insertion order."""
        return tuple(p.id for p in self.points)

    def bounding_box(self) -> BoundingBox3D:
        """Return the axis-aligned bounding box of all points.

        Raises:
            ValueError: If the set is empty (an empty set has no extent)
        """
        if not self.points:
            raise ValueError("Empty PointSet has no bounding box")
        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        zs = [p.z for p in self.points]
        return BoundingBox3D(
            min_x=min(xs),
            min_y=min(ys),
            min_z=min(zs),
            max_x=max(xs),
            max_y=max(ys),
            max_z=max(zs),
        )

    def as_array(self) -> NDArray[np.float64]:
        """Return an (n, 3) read-only float64 array of coordinates.

        The array is a fresh copy; marking it read-only keeps the value
        semantics of the PointSet intact for vectorised consumers.
        """
        data = np.array(
            [p.as_tuple() for p in self.points], dtype=np.float64
        ).reshape(-1, 3)
        data.flags.writeable = False
        return data
