"""Coverage Bounded Context - Value Objects."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from domain.spatial.value_objects import Point

# Id carried by positions that are not members of the input PointSet
SYNTHETIC_POINT_ID = -1


class SelectionStrategy(str, Enum):
    """Candidate generation / coverage counting strategy."""

    BRUTE_FORCE = "brute_force"  # input points, linear scan per candidate
    INDEX_ACCELERATED = "index_accelerated"  # input points, k-d tree queries
    GRID_SEARCH = "grid_search"  # synthetic grid over the bounding box


class CoverageResult(BaseModel):
    """Best camera position and the points it covers (Value Object).

    Invariants:
        CR-1: covered_count == len(covered_ids)
    """

    point: Point
    covered_count: int = Field(ge=0)
    covered_ids: frozenset[int]
    strategy: SelectionStrategy

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_count(self) -> "CoverageResult":
        if self.covered_count != len(self.covered_ids):
            raise ValueError(
                f"covered_count={self.covered_count} but "
                f"{len(self.covered_ids)} covered ids"
            )
        return self

    @property
    def is_synthetic(self) -> bool:
        """True when the position is not one of the input points."""
        return self.point.id == SYNTHETIC_POINT_ID
