#!/usr/bin/env python3
"""Benchmark the camera placement algorithms on random inputs.

Runs the dominating set approximation and both point-candidate coverage
strategies on randomly generated nodes, printing one line per timed run and
writing a CSV report.

Usage:
    python scripts/run_benchmark.py --trials 100 --seed 42 --output results.csv

Output:
    CSV with header trial,nodeSize,algorithm,runtimeMs
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from pydantic import ValidationError

from infrastructure.benchmark.csv_report import format_record_line, write_benchmark_csv
from infrastructure.benchmark.harness import Algorithm, BenchmarkConfig, iter_benchmark
from infrastructure.logging_config import setup_logging
from shared.defaults import (
    DEFAULT_COVERAGE_VIEW_RANGE_KM,
    DEFAULT_GRAPH_VIEW_RANGE_KM,
    DEFAULT_MAX_NODES,
    DEFAULT_MIN_NODES,
    DEFAULT_REPORT_NAME,
    DEFAULT_TRIALS,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Time camera placement algorithms on random nodes."
    )
    parser.add_argument("--trials", type=int, default=DEFAULT_TRIALS)
    parser.add_argument("--min-nodes", type=int, default=DEFAULT_MIN_NODES)
    parser.add_argument("--max-nodes", type=int, default=DEFAULT_MAX_NODES)
    parser.add_argument(
        "--coverage-range",
        type=float,
        default=DEFAULT_COVERAGE_VIEW_RANGE_KM,
        help="View range (km) for single-camera placement",
    )
    parser.add_argument(
        "--graph-range",
        type=float,
        default=DEFAULT_GRAPH_VIEW_RANGE_KM,
        help="View range (km) for the proximity graph",
    )
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--algorithm",
        action="append",
        choices=[a.value for a in Algorithm],
        help="Algorithm to time (repeatable, default: all)",
    )
    parser.add_argument("--output", type=Path, default=Path(DEFAULT_REPORT_NAME))
    parser.add_argument("--log-file", default=None)
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the benchmark.

    Returns:
        0 on success, 1 on invalid configuration or write failure
    """
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, args.log_file)

    try:
        config = BenchmarkConfig(
            trials=args.trials,
            min_nodes=args.min_nodes,
            max_nodes=args.max_nodes,
            coverage_view_range_km=args.coverage_range,
            graph_view_range_km=args.graph_range,
            seed=args.seed,
            algorithms=tuple(
                Algorithm(a) for a in (args.algorithm or [a.value for a in Algorithm])
            ),
        )
    except ValidationError as e:
        print(f"ERROR: Invalid benchmark configuration:\n{e}")
        return 1

    print("Camera placement benchmark started")
    records = []
    for record in iter_benchmark(config):
        records.append(record)
        print(format_record_line(record))

    try:
        path = write_benchmark_csv(records, args.output)
    except OSError as e:
        print(f"ERROR: Cannot write report: {e.strerror or e}")
        return 1

    print(f"Runtime results saved to {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
