"""Siting Bounded Context - Domain Services.

Greedy approximation of a minimum dominating set: the fewest cameras, placed
on nodes, such that every node hosts a camera or is adjacent to one.

Each iteration picks the unselected node with the most uncovered neighbors
(smallest id on ties), marks it and its neighbors covered, and repeats until
every node is covered. Nodes whose whole closed neighborhood is already
covered are never picked, so every iteration covers at least one new node
and the loop ends after at most n iterations.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from domain.siting.value_objects import DominatingSet
from domain.spatial.graph import ProximityGraph

logger = logging.getLogger(__name__)


def approximate_dominating_set(graph: ProximityGraph) -> DominatingSet:
    """Select camera sites greedily until every node is dominated.

    Args:
        graph: Proximity graph (edges between nodes within view radius)

    Returns:
        DominatingSet with the chosen ids, their selection order and the
        covered-node count after each iteration. Empty graph -> empty set.
    """
    all_ids = graph.node_ids
    ordered_ids = sorted(all_ids)

    covered: set[int] = set()
    selected: set[int] = set()
    selection_order: list[int] = []
    progress: list[int] = []

    while not covered.issuperset(all_ids):
        best_id: int | None = None
        best_score = -1

        # Ascending id order + strict '>' keeps the smallest id on ties
        for node_id in ordered_ids:
            if node_id in selected:
                continue
            neighbors = graph.neighbors(node_id)
            if node_id in covered and neighbors <= covered:
                continue  # would cover nothing new
            score = len(neighbors - covered)
            if score > best_score:
                best_id, best_score = node_id, score

        # Any uncovered node qualifies, so a pick always exists
        assert best_id is not None

        selected.add(best_id)
        selection_order.append(best_id)
        covered.add(best_id)
        covered.update(graph.neighbors(best_id))
        progress.append(len(covered))

        logger.debug(
            "Greedy step %d: node %d (+%d uncovered neighbors), covered %d/%d",
            len(selection_order),
            best_id,
            best_score,
            len(covered),
            len(all_ids),
        )

    return DominatingSet(
        node_ids=frozenset(selected),
        selection_order=tuple(selection_order),
        coverage_progress=tuple(progress),
    )


def is_dominating_set(graph: ProximityGraph, node_ids: Iterable[int]) -> bool:
    """Check that every node is in ``node_ids`` or adjacent to a member.

    Ids that are not part of the graph make the answer False.
    """
    chosen = frozenset(node_ids)
    if not chosen <= graph.node_ids:
        return False
    return all(
        node_id in chosen or not graph.neighbors(node_id).isdisjoint(chosen)
        for node_id in graph.node_ids
    )
