"""Random node generation for benchmarks and ad-hoc experiments.

Draws positions uniformly in latitude/longitude (not uniformly over the
sphere's area), matching how benchmark inputs have always been produced.
"""

from __future__ import annotations

import numpy as np

from domain.geodesy.services import point_set_from_geo
from domain.geodesy.value_objects import GeoPoint
from domain.spatial.value_objects import PointSet


def random_node_count(rng: np.random.Generator, min_nodes: int, max_nodes: int) -> int:
    """Draw a node count in [min_nodes, max_nodes] (both inclusive)."""
    if min_nodes > max_nodes:
        raise ValueError(f"min_nodes={min_nodes} > max_nodes={max_nodes}")
    return int(rng.integers(min_nodes, max_nodes, endpoint=True))


def generate_random_geo_points(rng: np.random.Generator, size: int) -> list[GeoPoint]:
    """Draw ``size`` points with lat in [-90, 90) and lon in [-180, 180)."""
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    latitudes = rng.uniform(-90.0, 90.0, size)
    longitudes = rng.uniform(-180.0, 180.0, size)
    return [
        GeoPoint(latitude=float(lat), longitude=float(lon))
        for lat, lon in zip(latitudes, longitudes)
    ]


def generate_random_point_set(rng: np.random.Generator, size: int) -> PointSet:
    """Random geographic nodes converted to Cartesian, ids 1..size."""
    return point_set_from_geo(generate_random_geo_points(rng, size))
