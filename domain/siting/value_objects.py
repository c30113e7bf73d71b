"""Siting Bounded Context - Value Objects."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator


class DominatingSet(BaseModel):
    """Nodes chosen as camera sites by the greedy approximation (Value Object).

    Invariants:
        DS-1: node_ids == set(selection_order), no repeats in selection_order
        DS-2: len(coverage_progress) == len(selection_order)
        DS-3: coverage_progress strictly increasing
    """

    node_ids: frozenset[int] = frozenset()
    selection_order: tuple[int, ...] = ()  # ids in the order they were chosen
    coverage_progress: tuple[int, ...] = ()  # |covered| after each iteration

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_trace(self) -> "DominatingSet":
        if len(set(self.selection_order)) != len(self.selection_order):
            raise ValueError("selection_order contains repeated ids")
        if frozenset(self.selection_order) != self.node_ids:
            raise ValueError("node_ids must match selection_order")
        if len(self.coverage_progress) != len(self.selection_order):
            raise ValueError(
                f"coverage_progress has {len(self.coverage_progress)} entries, "
                f"expected {len(self.selection_order)}"
            )
        for i in range(1, len(self.coverage_progress)):
            if self.coverage_progress[i] <= self.coverage_progress[i - 1]:
                raise ValueError("coverage_progress must be strictly increasing")
        return self

    def __len__(self) -> int:
        return len(self.node_ids)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.node_ids
