"""Benchmark infrastructure: random inputs, timing harness, CSV reports.

Harness and writer exported for simplified imports.
"""

from .csv_report import write_benchmark_csv
from .harness import Algorithm, BenchmarkConfig, BenchmarkRecord, run_benchmark

__all__ = [
    "Algorithm",
    "BenchmarkConfig",
    "BenchmarkRecord",
    "run_benchmark",
    "write_benchmark_csv",
]
