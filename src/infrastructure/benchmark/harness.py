"""Benchmark harness timing the placement algorithms on random inputs.

Per trial:
1) Draw a node count and random geographic nodes (seeded numpy Generator)
2) Build the proximity graph for the dominating set (not timed)
3) Time each configured algorithm with time.perf_counter
4) Emit one BenchmarkRecord per algorithm

The harness only observes return values and wall-clock time; it never relies
on traversal order inside the domain services.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterator
from enum import Enum
from typing import Any

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, model_validator

from domain.coverage.services import select_best_coverage
from domain.coverage.value_objects import SelectionStrategy
from domain.siting.services import approximate_dominating_set
from domain.spatial.graph import build_proximity_graph
from domain.spatial.value_objects import PointSet
from infrastructure.benchmark.random_points import (
    generate_random_point_set,
    random_node_count,
)
from shared.defaults import (
    DEFAULT_COVERAGE_VIEW_RANGE_KM,
    DEFAULT_GRAPH_VIEW_RANGE_KM,
    DEFAULT_MAX_NODES,
    DEFAULT_MIN_NODES,
    DEFAULT_TRIALS,
)

logger = logging.getLogger(__name__)


class Algorithm(str, Enum):
    """Benchmarked algorithms; values are the labels written to reports."""

    MINIMUM_DOMINATING_SET = "Minimum Dominating Set"
    BRUTE_FORCE_CAMERA = "Brute Force Camera Position"
    KD_TREE_CAMERA = "KD-Tree Camera Position"


class BenchmarkConfig(BaseModel):
    """Validated benchmark parameters (Value Object)."""

    trials: int = Field(default=DEFAULT_TRIALS, ge=1)
    min_nodes: int = Field(default=DEFAULT_MIN_NODES, ge=1)
    max_nodes: int = Field(default=DEFAULT_MAX_NODES, ge=1)
    coverage_view_range_km: float = Field(default=DEFAULT_COVERAGE_VIEW_RANGE_KM, ge=0)
    graph_view_range_km: float = Field(default=DEFAULT_GRAPH_VIEW_RANGE_KM, ge=0)
    seed: int | None = None
    algorithms: tuple[Algorithm, ...] = tuple(Algorithm)

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    @model_validator(mode="after")
    def validate_config(self) -> "BenchmarkConfig":
        if self.min_nodes > self.max_nodes:
            raise ValueError(
                f"min_nodes ({self.min_nodes}) must not exceed max_nodes ({self.max_nodes})"
            )
        if not self.algorithms:
            raise ValueError("At least one algorithm must be selected")
        if len(set(self.algorithms)) != len(self.algorithms):
            raise ValueError("Duplicate algorithms in configuration")
        return self


class BenchmarkRecord(BaseModel):
    """One timed algorithm run (Value Object)."""

    trial: int = Field(ge=1)
    node_size: int = Field(ge=0)
    algorithm: Algorithm
    runtime_ms: float = Field(ge=0)

    model_config = ConfigDict(frozen=True)


def time_call(fn: Callable[[], Any]) -> tuple[Any, float]:
    """Run ``fn`` once and return (result, elapsed milliseconds)."""
    start = time.perf_counter()
    result = fn()
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    return result, elapsed_ms


def _runner(
    algorithm: Algorithm, points: PointSet, config: BenchmarkConfig
) -> Callable[[], Any]:
    if algorithm is Algorithm.MINIMUM_DOMINATING_SET:
        graph = build_proximity_graph(points, config.graph_view_range_km)
        return lambda: approximate_dominating_set(graph)
    if algorithm is Algorithm.BRUTE_FORCE_CAMERA:
        return lambda: select_best_coverage(
            points, config.coverage_view_range_km, SelectionStrategy.BRUTE_FORCE
        )
    return lambda: select_best_coverage(
        points, config.coverage_view_range_km, SelectionStrategy.INDEX_ACCELERATED
    )


def run_trial(trial: int, points: PointSet, config: BenchmarkConfig) -> list[BenchmarkRecord]:
    """Time every configured algorithm on one point set."""
    records = []
    for algorithm in config.algorithms:
        _, runtime_ms = time_call(_runner(algorithm, points, config))
        records.append(
            BenchmarkRecord(
                trial=trial,
                node_size=len(points),
                algorithm=algorithm,
                runtime_ms=runtime_ms,
            )
        )
    return records


def iter_benchmark(config: BenchmarkConfig) -> Iterator[BenchmarkRecord]:
    """Yield records trial by trial (lets callers report progress)."""
    rng = np.random.default_rng(config.seed)
    logger.info(
        "Benchmark: %d trials, %d-%d nodes, algorithms=%s",
        config.trials,
        config.min_nodes,
        config.max_nodes,
        [a.value for a in config.algorithms],
    )
    for trial in range(1, config.trials + 1):
        size = random_node_count(rng, config.min_nodes, config.max_nodes)
        points = generate_random_point_set(rng, size)
        yield from run_trial(trial, points, config)


def run_benchmark(config: BenchmarkConfig) -> list[BenchmarkRecord]:
    """Run all trials and return every record."""
    records = list(iter_benchmark(config))
    logger.info("Benchmark finished: %d records", len(records))
    return records
