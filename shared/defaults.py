"""Single source of truth for run defaults.

Used by:
- scripts/run_benchmark.py and scripts/find_camera_position.py (CLI defaults)
- src/infrastructure/benchmark (BenchmarkConfig defaults, CSV layout)
- tests (expected header, default ranges)

When changing a default, update ONLY this module.
"""

from __future__ import annotations

# View ranges in km (chord length between Cartesian points)
DEFAULT_COVERAGE_VIEW_RANGE_KM: float = 10.0  # single-camera placement
DEFAULT_GRAPH_VIEW_RANGE_KM: float = 8.0  # proximity graph / dominating set
DEFAULT_GRID_STEP_KM: float = 0.5

# Benchmark trials
DEFAULT_TRIALS: int = 100
DEFAULT_MIN_NODES: int = 5
DEFAULT_MAX_NODES: int = 10

# CSV report layout
CSV_HEADER: tuple[str, ...] = ("trial", "nodeSize", "algorithm", "runtimeMs")
DEFAULT_REPORT_NAME: str = "results.csv"
