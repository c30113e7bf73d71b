"""CSV reporting for benchmark records.

Layout (one row per timed run):
    trial,nodeSize,algorithm,runtimeMs
"""

from __future__ import annotations

import csv
import logging
from collections.abc import Iterable
from pathlib import Path

from infrastructure.benchmark.harness import BenchmarkRecord
from shared.defaults import CSV_HEADER

logger = logging.getLogger(__name__)


def record_to_row(record: BenchmarkRecord) -> list[str]:
    """Format a record as CSV cells (runtime with two decimals)."""
    return [
        str(record.trial),
        str(record.node_size),
        record.algorithm.value,
        f"{record.runtime_ms:.2f}",
    ]


def format_record_line(record: BenchmarkRecord) -> str:
    """Human-readable progress line for console output."""
    return (
        f"Trial {record.trial} | Node Size: {record.node_size} | "
        f"Algorithm: {record.algorithm.value} | Runtime: {record.runtime_ms:.2f} ms"
    )


def write_benchmark_csv(records: Iterable[BenchmarkRecord], path: Path | str) -> Path:
    """Write records to ``path`` (overwriting) and return the path.

    Raises:
        OSError: If the file cannot be written (logged with file name only)
    """
    path = Path(path)
    rows = 0
    try:
        with path.open("w", newline="", encoding="utf-8") as handle:
            writer = csv.writer(handle)
            writer.writerow(CSV_HEADER)
            for record in records:
                writer.writerow(record_to_row(record))
                rows += 1
    except OSError as e:
        # Log only the file name to avoid leaking absolute paths
        logger.error(
            "Failed to write %s (errno=%s, strerror=%s)",
            path.name,
            getattr(e, "errno", "unknown"),
            getattr(e, "strerror", "unknown"),
        )
        raise

    logger.info("Wrote %d benchmark rows to %s", rows, path.name)
    return path
