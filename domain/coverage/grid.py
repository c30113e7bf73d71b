"""Coverage Bounded Context - Search Grid.

Regular lattice of candidate camera positions spanning a bounding box.
Positions are enumerated in scan order: x outermost, z innermost.
"""

from __future__ import annotations

import math
from collections.abc import Iterator

import numpy as np
from numpy.typing import NDArray

from domain.spatial.value_objects import BoundingBox3D

# Absorbs span/step quotients such as 0.3/0.1 == 2.9999999999999996
_STEP_COUNT_TOLERANCE = 1e-9


def axis_count(span: float, step: float) -> int:
    """Number of lattice values on one axis: floor(span / step) + 1.

    A zero span (degenerate box) yields exactly one value.
    """
    return int(math.floor(span / step + _STEP_COUNT_TOLERANCE)) + 1


class SearchGrid:
    """Lattice ``min + i * step`` (per axis) clipped to the box maxima."""

    def __init__(self, bounds: BoundingBox3D, step: float) -> None:
        self.bounds = bounds
        self.step = step
        dx, dy, dz = bounds.spans()
        self.shape: tuple[int, int, int] = (
            axis_count(dx, step),
            axis_count(dy, step),
            axis_count(dz, step),
        )

    @property
    def size(self) -> int:
        nx, ny, nz = self.shape
        return nx * ny * nz

    def _axis_values(self, lo: float, hi: float, count: int) -> NDArray[np.float64]:
        values = lo + np.arange(count, dtype=np.float64) * self.step
        return np.minimum(values, hi)

    def iter_chunks(self, chunk_size: int) -> Iterator[NDArray[np.float64]]:
        """Yield (k, 3) position blocks of at most ``chunk_size`` rows in scan order."""
        b = self.bounds
        xs = self._axis_values(b.min_x, b.max_x, self.shape[0])
        ys = self._axis_values(b.min_y, b.max_y, self.shape[1])
        zs = self._axis_values(b.min_z, b.max_z, self.shape[2])

        for offset in range(0, self.size, chunk_size):
            flat = np.arange(offset, min(offset + chunk_size, self.size))
            ix, iy, iz = np.unravel_index(flat, self.shape)
            yield np.column_stack((xs[ix], ys[iy], zs[iz]))
