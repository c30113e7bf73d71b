"""Spatial Bounded Context - k-d Tree.

Static 3-D k-d tree built once from a PointSet and answering exact radius
range queries with hyperplane pruning.

Build:
    At depth d the working subset is sorted on axis d % 3 (x -> y -> z), ties
    broken by insertion order in the PointSet. The element at index size // 2
    becomes the node; the elements before and after it form the left and
    right subtrees.

Query:
    Visit the near child first, then the far child only when the splitting
    plane lies within the radius. The tree only changes traversal volume:
    results are identical to ``brute_force_range_query`` for every input.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from domain.spatial.errors import InvalidRadiusError
from domain.spatial.services import euclidean_distance
from domain.spatial.value_objects import Point, PointSet

logger = logging.getLogger(__name__)

DIMENSIONS = 3


@dataclass(frozen=True)
class KdNode:
    """Tree node owning its partitioning point and both child slots."""

    point: Point
    depth: int
    left: KdNode | None = None
    right: KdNode | None = None

    @property
    def axis(self) -> int:
        return self.depth % DIMENSIONS

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _build_subtree(items: Sequence[tuple[int, Point]], depth: int) -> KdNode | None:
    """Build the subtree for ``items`` (pairs of insertion index and point)."""
    if not items:
        return None

    axis = depth % DIMENSIONS
    ordered = sorted(items, key=lambda item: (item[1].coordinate(axis), item[0]))
    median = len(ordered) // 2

    return KdNode(
        point=ordered[median][1],
        depth=depth,
        left=_build_subtree(ordered[:median], depth + 1),
        right=_build_subtree(ordered[median + 1 :], depth + 1),
    )


class KdTree:
    """Immutable k-d tree over a PointSet (implements RangeIndex).

    Use :meth:`build` to construct; there is no insertion or removal.
    """

    def __init__(self, root: KdNode | None, size: int) -> None:
        self._root = root
        self._size = size

    @classmethod
    def build(cls, points: PointSet) -> "KdTree":
        """Build a balanced tree by recursive median partitioning.

        Args:
            points: Source points; an empty set yields an empty tree

        Returns:
            KdTree owning one node per point
        """
        root = _build_subtree(list(enumerate(points.points)), 0)
        tree = cls(root, len(points))
        logger.debug("Built k-d tree: %d points, height %d", len(tree), tree.height)
        return tree

    @property
    def root(self) -> KdNode | None:
        return self._root

    def __len__(self) -> int:
        return self._size

    @property
    def height(self) -> int:
        """Number of levels (0 for an empty tree, 1 for a single leaf)."""
        if self._root is None:
            return 0
        height = 0
        stack = [self._root]
        while stack:
            node = stack.pop()
            height = max(height, node.depth + 1)
            stack.extend(c for c in (node.left, node.right) if c is not None)
        return height

    def iter_nodes(self) -> Iterator[KdNode]:
        """Yield nodes in pre-order (node, left subtree, right subtree)."""
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def range_query(self, target: Point, radius: float) -> frozenset[int]:
        """Return ids of all points within ``radius`` of ``target``.

        The target is included when it is one of the indexed points.

        Args:
            target: Query position (need not belong to the tree)
            radius: View radius; a negative value yields an empty result

        Raises:
            InvalidRadiusError: If radius is NaN or infinite
        """
        if math.isnan(radius) or math.isinf(radius):
            raise InvalidRadiusError(radius)
        if radius < 0 or self._root is None:
            return frozenset()

        radius_sq = radius * radius
        found: set[int] = set()
        stack = [self._root]

        while stack:
            node = stack.pop()
            if euclidean_distance(node.point, target) <= radius:
                found.add(node.point.id)

            axis = node.axis
            delta = target.coordinate(axis) - node.point.coordinate(axis)
            if delta < 0:
                near, far = node.left, node.right
            else:
                near, far = node.right, node.left

            # abs() avoids rounding at the boundary; the squared form covers
            # deltas whose square underflows to zero.
            if far is not None and (abs(delta) <= radius or delta * delta <= radius_sq):
                stack.append(far)
            # Pushed last so it is explored first
            if near is not None:
                stack.append(near)

        return frozenset(found)
