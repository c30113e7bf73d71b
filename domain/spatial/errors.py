"""Spatial Bounded Context - Error Hierarchy.

Custom exceptions for spatial indexing, coverage selection and siting.

"Nothing found" outcomes (e.g. an empty PointSet) are NOT errors: operations
return ``None`` or an empty result for them. Only invalid arguments and
internal inconsistencies raise.
"""

from __future__ import annotations


class SpatialError(Exception):
    """Base error for spatial operations."""


class InvalidArgumentError(SpatialError, ValueError):
    """An operation was called with an argument outside its domain."""


class InvalidRadiusError(InvalidArgumentError):
    """View radius is negative, NaN or infinite."""

    def __init__(self, radius: float) -> None:
        self.radius = radius
        super().__init__(f"Radius must be a finite, non-negative number, got {radius!r}")


class InvalidGridStepError(InvalidArgumentError):
    """Grid step is missing, non-positive or non-finite."""

    def __init__(self, grid_step: float | None) -> None:
        self.grid_step = grid_step
        super().__init__(
            f"grid_step must be a finite, positive number, got {grid_step!r}"
        )


# ---------------------------------------------------------------------------
# Resource guards
# ---------------------------------------------------------------------------
class GridTooLargeError(InvalidArgumentError):
    """Search grid would contain more candidate positions than allowed.

    Attributes:
        grid_points: Number of grid positions the request would enumerate
        limit: Configured maximum
    """

    def __init__(self, grid_points: int, limit: int) -> None:
        self.grid_points = grid_points
        self.limit = limit
        super().__init__(
            f"Grid of {grid_points} positions exceeds limit of {limit}; "
            f"increase grid_step or max_grid_points"
        )


class UnknownNodeError(SpatialError, LookupError):
    """Adjacency lookup for a node id that is not part of the graph.

    Indicates a graph construction bug, never a user input problem.
    """

    def __init__(self, node_id: int) -> None:
        self.node_id = node_id
        super().__init__(f"Node {node_id} is not part of the graph")
