"""Root pytest configuration for all tests.

Provides deterministic random generators and small reference point sets.
Import paths (``domain.*``, ``infrastructure.*``, ``shared.*``) resolve via
``pythonpath = [".", "src"]`` in pyproject.toml.
"""

from __future__ import annotations

import numpy as np
import pytest

from domain.spatial.value_objects import PointSet
from tests.conftest_utils import make_points


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator so random inputs are reproducible per test."""
    return np.random.default_rng(42)


@pytest.fixture
def line_points() -> PointSet:
    """Four points on the x axis spaced 2 apart: ids 1..4 at x = 0, 2, 4, 6."""
    return make_points([(0, 0, 0), (2, 0, 0), (4, 0, 0), (6, 0, 0)])


@pytest.fixture
def two_clusters() -> PointSet:
    """Two tight clusters 100 units apart (ids 1-3 and 4-6)."""
    return make_points(
        [
            (0, 0, 0),
            (1, 0, 0),
            (0, 1, 0),
            (100, 0, 0),
            (101, 0, 0),
            (100, 1, 0),
        ]
    )
