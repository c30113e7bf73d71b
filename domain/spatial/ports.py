"""Domain Port(s) for radius queries.

Defines the interface (Protocol) that spatial indexes implement so coverage
selection can run against either a linear scan or a k-d tree.
"""

from __future__ import annotations

from typing import Protocol

from .value_objects import Point


class RangeIndex(Protocol):
    """Port for answering radius range queries over a fixed PointSet.

    Implementations: LinearScanIndex (oracle), KdTree (pruned).
    """

    def range_query(self, target: Point, radius: float) -> frozenset[int]:
        """Return ids of all indexed points within ``radius`` of ``target``."""
        ...
