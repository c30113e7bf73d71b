"""Coverage Bounded Context - Domain Services.

Finds the camera position that covers the most points within a view radius.

Strategies:
    BRUTE_FORCE        candidates are the input points, coverage by linear scan
    INDEX_ACCELERATED  same candidates, coverage by k-d tree range query
    GRID_SEARCH        candidates form a lattice over the bounding box

Tie-break (point candidates): first candidate in PointSet order wins; a later
candidate replaces the best only on a strictly larger coverage count. The two
point strategies therefore always return the same point and count.

Tie-break (grid candidates): largest coverage, then closest to the bounding
box center, then first in scan order.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from domain.coverage.grid import SearchGrid
from domain.coverage.value_objects import (
    SYNTHETIC_POINT_ID,
    CoverageResult,
    SelectionStrategy,
)
from domain.spatial.errors import GridTooLargeError, InvalidGridStepError
from domain.spatial.kdtree import KdTree
from domain.spatial.ports import RangeIndex
from domain.spatial.services import (
    LinearScanIndex,
    brute_force_range_query,
    validate_radius,
)
from domain.spatial.value_objects import Point, PointSet

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
DEFAULT_MAX_GRID_POINTS = 2_000_000  # hard limit on lattice size
GRID_SIZE_WARNING = 100_000  # lattices above this are logged as slow
_CHUNK_ELEMENTS = 1_000_000  # max (grid rows x points) evaluated at once


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _validate_grid_step(grid_step: float | None) -> float:
    if grid_step is None:
        raise InvalidGridStepError(grid_step)
    step = float(grid_step)
    if not math.isfinite(step) or step <= 0:
        raise InvalidGridStepError(grid_step)
    return step


def count_coverage(points: PointSet, target: Point, radius: float) -> frozenset[int]:
    """Return ids of ``points`` covered by a camera at ``target``.

    Useful to re-verify any CoverageResult independently of its strategy.
    """
    return brute_force_range_query(points, target, validate_radius(radius))


def _select_from_points(
    points: PointSet,
    index: RangeIndex,
    radius: float,
    strategy: SelectionStrategy,
) -> CoverageResult:
    """Fold over candidates in PointSet order keeping the first maximum."""
    best_point: Point | None = None
    best_ids: frozenset[int] = frozenset()

    for candidate in points.points:
        covered = index.range_query(candidate, radius)
        if best_point is None or len(covered) > len(best_ids):
            best_point, best_ids = candidate, covered

    assert best_point is not None  # points is non-empty
    return CoverageResult(
        point=best_point,
        covered_count=len(best_ids),
        covered_ids=best_ids,
        strategy=strategy,
    )


def _grid_search(
    points: PointSet, radius: float, step: float, max_grid_points: int
) -> CoverageResult:
    bounds = points.bounding_box()
    grid = SearchGrid(bounds, step)
    if grid.size > max_grid_points:
        raise GridTooLargeError(grid.size, max_grid_points)
    if grid.size > GRID_SIZE_WARNING:
        logger.warning(
            "Grid search over %d positions (shape %s); consider a larger grid_step",
            grid.size,
            grid.shape,
        )
    logger.debug("Grid search: shape %s, step %.4f, %d points", grid.shape, step, len(points))

    coords = points.as_array()
    ids = np.array(points.ids(), dtype=np.int64)
    center = np.array(bounds.center(), dtype=np.float64)
    chunk_size = max(1, _CHUNK_ELEMENTS // len(points))

    best_count = -1
    best_center_dist = math.inf
    best_position: np.ndarray | None = None
    best_mask: np.ndarray | None = None

    for positions in grid.iter_chunks(chunk_size):
        diff = positions[:, np.newaxis, :] - coords[np.newaxis, :, :]
        covered = np.sqrt((diff * diff).sum(axis=2)) <= radius
        counts = covered.sum(axis=1)

        chunk_max = int(counts.max())
        if chunk_max < best_count:
            continue

        tied = np.flatnonzero(counts == chunk_max)
        offsets = positions[tied] - center
        center_dist = np.sqrt((offsets * offsets).sum(axis=1))
        pick = int(np.argmin(center_dist))  # first minimum = earliest in scan order

        if chunk_max > best_count or center_dist[pick] < best_center_dist:
            row = int(tied[pick])
            best_count = chunk_max
            best_center_dist = float(center_dist[pick])
            best_position = positions[row].copy()
            best_mask = covered[row].copy()

    assert best_position is not None and best_mask is not None
    covered_ids = frozenset(int(i) for i in ids[best_mask])
    return CoverageResult(
        point=Point(
            id=SYNTHETIC_POINT_ID,
            x=float(best_position[0]),
            y=float(best_position[1]),
            z=float(best_position[2]),
        ),
        covered_count=len(covered_ids),
        covered_ids=covered_ids,
        strategy=SelectionStrategy.GRID_SEARCH,
    )


# ---------------------------------------------------------------------------
# Main Service: select_best_coverage
# ---------------------------------------------------------------------------
def select_best_coverage(
    points: PointSet,
    radius: float,
    strategy: SelectionStrategy | str = SelectionStrategy.BRUTE_FORCE,
    grid_step: float | None = None,
    *,
    max_grid_points: int = DEFAULT_MAX_GRID_POINTS,
) -> CoverageResult | None:
    """Find the camera position covering the most points within ``radius``.

    Args:
        points: Nodes to cover (also the candidates for point strategies)
        radius: View radius (inclusive)
        strategy: Candidate/counting strategy
        grid_step: Lattice spacing, required for GRID_SEARCH
        max_grid_points: Upper bound on lattice size for GRID_SEARCH

    Returns:
        CoverageResult, or None when ``points`` is empty

    Raises:
        InvalidRadiusError: If radius is negative or non-finite
        InvalidGridStepError: If GRID_SEARCH lacks a finite positive grid_step
        GridTooLargeError: If the lattice would exceed max_grid_points

    Example:
        >>> points = PointSet.from_coordinates([(0, 0, 0), (1, 0, 0), (9, 0, 0)])
        >>> result = select_best_coverage(points, 1.5)
        >>> result.point.id, result.covered_count
        (1, 2)
    """
    # PRE-1: radius valid for every strategy
    radius = validate_radius(radius)
    strategy = SelectionStrategy(strategy)

    # PRE-2: grid step valid when it will be used
    step = None
    if strategy is SelectionStrategy.GRID_SEARCH:
        step = _validate_grid_step(grid_step)

    if points.is_empty():
        logger.debug("select_best_coverage: empty PointSet, no result")
        return None

    if strategy is SelectionStrategy.GRID_SEARCH:
        assert step is not None
        result = _grid_search(points, radius, step, max_grid_points)
    else:
        index: RangeIndex
        if strategy is SelectionStrategy.INDEX_ACCELERATED:
            index = KdTree.build(points)
        else:
            index = LinearScanIndex(points)
        result = _select_from_points(points, index, radius, strategy)

    logger.debug(
        "select_best_coverage(%s): point %d covers %d/%d",
        strategy.value,
        result.point.id,
        result.covered_count,
        len(points),
    )
    return result
