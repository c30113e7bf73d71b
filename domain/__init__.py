"""Camera Planner Domain Layer.

This package contains the core business logic organized by bounded contexts:
- geodesy: Latitude/longitude <-> Cartesian conversion on the Earth sphere
- spatial: Points, k-d tree range queries, proximity graphs
- coverage: Single camera placement maximizing covered nodes
- siting: Multi-camera placement (greedy dominating set)
"""

# Imports alphabetized per project style (isort)
from domain import coverage, geodesy, siting, spatial

__all__ = ["coverage", "geodesy", "siting", "spatial"]
