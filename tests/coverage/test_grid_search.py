"""Tests for the GRID_SEARCH strategy and the SearchGrid lattice.

Grid tie-break: largest coverage, then closest to the bounding box center,
then first position in scan order (x outermost, z innermost).
"""

from __future__ import annotations

import logging
import math

import numpy as np
import pytest

from domain.coverage.grid import SearchGrid, axis_count
from domain.coverage.services import count_coverage, select_best_coverage
from domain.coverage.value_objects import SYNTHETIC_POINT_ID, SelectionStrategy
from domain.geodesy.services import point_set_from_geo, point_to_geo
from domain.geodesy.value_objects import GeoPoint
from domain.spatial.errors import GridTooLargeError, InvalidGridStepError
from domain.spatial.value_objects import BoundingBox3D
from tests.conftest_utils import make_points, random_point_set

GRID = SelectionStrategy.GRID_SEARCH


def unit_box(size: float = 1.0) -> BoundingBox3D:
    return BoundingBox3D(min_x=0, min_y=0, min_z=0, max_x=size, max_y=size, max_z=size)


# ===========================================================================
# SearchGrid
# ===========================================================================
@pytest.mark.parametrize(
    ("span", "step", "expected"),
    [
        (0.0, 1.0, 1),
        (1.0, 0.5, 3),
        (1.0, 0.4, 3),
        (0.3, 0.1, 4),  # 0.3 / 0.1 == 2.9999999999999996
        (10.0, 3.0, 4),
    ],
)
def test_axis_count(span, step, expected):
    assert axis_count(span, step) == expected


def test_grid_shape_and_size():
    box = BoundingBox3D(min_x=0, min_y=0, min_z=0, max_x=2, max_y=1, max_z=0)
    grid = SearchGrid(box, 0.5)

    assert grid.shape == (5, 3, 1)
    assert grid.size == 15


def test_grid_scan_order():
    grid = SearchGrid(unit_box(), 1.0)

    positions = np.concatenate(list(grid.iter_chunks(100)))

    np.testing.assert_array_equal(
        positions,
        [
            [0, 0, 0],
            [0, 0, 1],
            [0, 1, 0],
            [0, 1, 1],
            [1, 0, 0],
            [1, 0, 1],
            [1, 1, 0],
            [1, 1, 1],
        ],
    )


@pytest.mark.parametrize("chunk_size", [1, 3, 7, 64])
def test_grid_chunking_preserves_order(chunk_size):
    grid = SearchGrid(unit_box(2.0), 0.5)

    chunks = list(grid.iter_chunks(chunk_size))

    assert all(len(c) <= chunk_size for c in chunks)
    np.testing.assert_array_equal(
        np.concatenate(chunks), np.concatenate(list(grid.iter_chunks(grid.size)))
    )


def test_grid_values_clipped_to_box():
    box = BoundingBox3D(min_x=0, min_y=0, min_z=0, max_x=0.3, max_y=0, max_z=0)

    positions = np.concatenate(list(SearchGrid(box, 0.1).iter_chunks(10)))

    assert positions[:, 0].max() == 0.3


# ===========================================================================
# Grid step validation
# ===========================================================================
@pytest.mark.parametrize("bad", [None, 0.0, -1.0, math.nan, math.inf])
def test_invalid_grid_step(line_points, bad):
    with pytest.raises(InvalidGridStepError):
        select_best_coverage(line_points, 5.0, GRID, grid_step=bad)


def test_grid_step_ignored_by_point_strategies(line_points):
    result = select_best_coverage(line_points, 2.0, SelectionStrategy.BRUTE_FORCE, grid_step=-1.0)

    assert result.point.id == 2


# ===========================================================================
# Selection
# ===========================================================================
def test_degenerate_box_single_candidate():
    points = make_points([(1, 1, 1)] * 3)

    result = select_best_coverage(points, 0.0, GRID, grid_step=0.5)

    assert result.point.id == SYNTHETIC_POINT_ID
    assert result.is_synthetic
    assert result.point.as_tuple() == (1.0, 1.0, 1.0)
    assert result.covered_count == 3
    assert result.strategy is GRID


def test_tie_prefers_position_nearest_center():
    points = make_points([(0, 0, 0), (4, 0, 0)])

    result = select_best_coverage(points, 10.0, GRID, grid_step=1.0)

    assert result.point.as_tuple() == (2.0, 0.0, 0.0)
    assert result.covered_ids == frozenset({1, 2})


def test_equidistant_tie_prefers_scan_order():
    """x = 0 and x = 2 are both 1 from the center; x = 0 is scanned first."""
    points = make_points([(0, 0, 0), (2, 0, 0)])

    result = select_best_coverage(points, 10.0, GRID, grid_step=2.0)

    assert result.point.as_tuple() == (0.0, 0.0, 0.0)


def test_coverage_beats_center_distance():
    points = make_points([(0, 0, 0), (0.5, 0, 0), (1, 0, 0), (10, 0, 0)])

    result = select_best_coverage(points, 1.5, GRID, grid_step=0.5)

    assert result.point.as_tuple() == (1.5, 0.0, 0.0)
    assert result.covered_count == 3
    assert result.covered_ids == frozenset({1, 2, 3})


def test_grid_result_can_be_off_the_input_points():
    """Midpoint covers both points at a radius where no input point does."""
    points = make_points([(0, 0, 0), (2, 0, 0)])

    grid = select_best_coverage(points, 1.0, GRID, grid_step=0.5)
    brute = select_best_coverage(points, 1.0, SelectionStrategy.BRUTE_FORCE)

    assert grid.covered_count == 2
    assert grid.point.as_tuple() == (1.0, 0.0, 0.0)
    assert brute.covered_count == 1


def test_grid_covered_ids_match_count_coverage(rng):
    points = random_point_set(rng, 40, scale=5.0, decimals=3)

    result = select_best_coverage(points, 2.7, GRID, grid_step=0.37)

    assert count_coverage(points, result.point, 2.7) == result.covered_ids


def test_grid_at_least_as_good_on_lattice_points():
    """Inputs on the lattice are themselves candidates."""
    points = make_points([(0, 0, 0), (1, 0, 0), (3, 0, 0), (4, 1, 0), (4, 2, 0)])

    grid = select_best_coverage(points, 1.5, GRID, grid_step=1.0)
    brute = select_best_coverage(points, 1.5, SelectionStrategy.BRUTE_FORCE)

    assert grid.covered_count >= brute.covered_count


def test_geographic_nodes():
    geo = [
        GeoPoint(latitude=0.0, longitude=0.0),
        GeoPoint(latitude=0.01, longitude=0.0),
        GeoPoint(latitude=0.0, longitude=0.01),
    ]
    points = point_set_from_geo(geo)

    result = select_best_coverage(points, 10.0, GRID, grid_step=0.5)

    assert result.covered_count == 3
    position = point_to_geo(result.point)
    assert abs(position.latitude) < 0.02
    assert abs(position.longitude) < 0.02


# ===========================================================================
# Resource guard
# ===========================================================================
def test_grid_too_large():
    points = make_points([(0, 0, 0), (100, 100, 100)])

    with pytest.raises(GridTooLargeError) as exc_info:
        select_best_coverage(points, 5.0, GRID, grid_step=1.0, max_grid_points=1000)

    assert exc_info.value.grid_points == 101**3
    assert exc_info.value.limit == 1000


@pytest.mark.slow
def test_large_grid_logs_warning(caplog):
    points = make_points([(0, 0, 0), (50, 50, 50)])

    with caplog.at_level(logging.WARNING, logger="domain.coverage.services"):
        result = select_best_coverage(points, 1.0, GRID, grid_step=1.0)

    assert result.covered_count == 1
    assert "Grid search over 132651 positions" in caplog.text
