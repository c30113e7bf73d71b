#!/usr/bin/env python3
"""Find the best camera position for a set of geographic nodes.

Nodes are given as "lat,lon" pairs on the command line or, when none are
given, one pair per line on stdin. Invalid pairs are reported and skipped.

Usage:
    python scripts/find_camera_position.py 0,0 0.01,0.01 10,10
    python scripts/find_camera_position.py --strategy grid_search --grid-step 0.5 < nodes.txt
    python scripts/find_camera_position.py --sites 0,0 0.01,0.01 10,10
    python scripts/find_camera_position.py -- -20.5,-45 -20.51,-45.02

Pairs starting with '-' must follow '--' so argparse does not read them as
options.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable

from domain.coverage.services import DEFAULT_MAX_GRID_POINTS, select_best_coverage
from domain.coverage.value_objects import SelectionStrategy
from domain.geodesy.services import point_set_from_geo, point_to_geo, surface_distance_km
from domain.geodesy.value_objects import GeoPoint
from domain.siting.services import approximate_dominating_set
from domain.spatial.errors import InvalidArgumentError
from domain.spatial.graph import build_proximity_graph
from infrastructure.logging_config import setup_logging
from shared.defaults import (
    DEFAULT_COVERAGE_VIEW_RANGE_KM,
    DEFAULT_GRAPH_VIEW_RANGE_KM,
    DEFAULT_GRID_STEP_KM,
)


def parse_lat_lon(text: str) -> GeoPoint:
    """Parse "lat,lon" (comma and/or whitespace separated) into a GeoPoint.

    Raises:
        ValueError: If the text is not two numbers in valid ranges
    """
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        raise ValueError(f"expected 'lat,lon', got {text!r}")
    return GeoPoint(latitude=float(parts[0]), longitude=float(parts[1]))


def read_nodes(entries: Iterable[str]) -> list[GeoPoint]:
    nodes = []
    for entry in entries:
        entry = entry.strip()
        if not entry or entry.startswith("#"):
            continue
        try:
            nodes.append(parse_lat_lon(entry))
        except ValueError as e:  # includes pydantic ValidationError
            print(f"Invalid input skipped ({e.__class__.__name__}): {entry!r}", file=sys.stderr)
    return nodes


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Find the best camera position.")
    parser.add_argument("nodes", nargs="*", help="lat,lon pairs (default: read stdin)")
    parser.add_argument(
        "--view-range", type=float, default=DEFAULT_COVERAGE_VIEW_RANGE_KM
    )
    parser.add_argument(
        "--strategy",
        choices=[s.value for s in SelectionStrategy],
        default=SelectionStrategy.INDEX_ACCELERATED.value,
    )
    parser.add_argument("--grid-step", type=float, default=DEFAULT_GRID_STEP_KM)
    parser.add_argument("--max-grid-points", type=int, default=DEFAULT_MAX_GRID_POINTS)
    parser.add_argument(
        "--sites",
        action="store_true",
        help="Also print a greedy dominating set of camera sites",
    )
    parser.add_argument("--graph-range", type=float, default=DEFAULT_GRAPH_VIEW_RANGE_KM)
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Returns 0 when a position was found, 1 otherwise."""
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    geo_nodes = read_nodes(args.nodes if args.nodes else sys.stdin)
    points = point_set_from_geo(geo_nodes)

    print("Finding optimal camera position...")
    try:
        result = select_best_coverage(
            points,
            args.view_range,
            SelectionStrategy(args.strategy),
            grid_step=args.grid_step,
            max_grid_points=args.max_grid_points,
        )
    except InvalidArgumentError as e:
        print(f"ERROR: {e}")
        return 1

    if result is None:
        print("No optimal position found.")
        return 1

    position = point_to_geo(result.point)
    print(
        f"Optimal camera position is at coordinates: "
        f"({position.latitude:.6f}°, {position.longitude:.6f}°)"
    )
    print(f"Number of nodes in view range: {result.covered_count}")
    if result.covered_ids:
        print(f"IDs of nodes in view range: {sorted(result.covered_ids)}")
        for node_id in sorted(result.covered_ids):
            distance = surface_distance_km(position, geo_nodes[node_id - 1])
            print(f"  node {node_id}: {distance:.3f} km along the surface")
    else:
        print("No nodes are within view range.")

    if args.sites:
        try:
            graph = build_proximity_graph(points, args.graph_range)
        except InvalidArgumentError as e:
            print(f"ERROR: {e}")
            return 1
        sites = approximate_dominating_set(graph)
        print(f"Camera sites (greedy dominating set): {list(sites.selection_order)}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
