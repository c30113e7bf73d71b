"""Spatial Bounded Context - Proximity Graph.

Undirected graph linking every pair of points that lie within a fixed radius
of each other. Consumed by the siting context (dominating set).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, model_validator

from domain.spatial.errors import UnknownNodeError
from domain.spatial.kdtree import KdTree
from domain.spatial.services import validate_radius, within_radius
from domain.spatial.value_objects import PointSet

logger = logging.getLogger(__name__)


class GraphBuildMethod(str, Enum):
    """How candidate edges are discovered. Both produce identical graphs."""

    BRUTE_FORCE = "brute_force"  # every unordered pair, O(n^2)
    INDEXED = "indexed"  # one k-d tree range query per point


# ---------------------------------------------------------------------------
# ProximityGraph
# ---------------------------------------------------------------------------
class ProximityGraph(BaseModel):
    """Adjacency map from point id to neighbor ids (Value Object).

    Invariants:
        PG-1: no self-loops
        PG-2: symmetric (j in adj[i] <=> i in adj[j])
        PG-3: every neighbor id is itself a node

    The adjacency mapping is wrapped in a read-only proxy after validation.
    """

    adjacency: Mapping[int, frozenset[int]]
    radius: float = Field(ge=0)

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    @model_validator(mode="after")
    def validate_adjacency(self) -> "ProximityGraph":
        for node_id, neighbors in self.adjacency.items():
            if node_id in neighbors:
                raise ValueError(f"Self-loop on node {node_id}")
            for other in neighbors:
                if other not in self.adjacency:
                    raise ValueError(
                        f"Edge ({node_id}, {other}) references unknown node {other}"
                    )
                if node_id not in self.adjacency[other]:
                    raise ValueError(f"Edge ({node_id}, {other}) is not symmetric")

        object.__setattr__(
            self,
            "adjacency",
            MappingProxyType({k: frozenset(v) for k, v in self.adjacency.items()}),
        )
        return self

    def __len__(self) -> int:
        return len(self.adjacency)

    @property
    def node_ids(self) -> frozenset[int]:
        return frozenset(self.adjacency)

    @property
    def edge_count(self) -> int:
        return sum(len(n) for n in self.adjacency.values()) // 2

    def neighbors(self, node_id: int) -> frozenset[int]:
        """Return the neighbors of ``node_id``.

        Looking up an id that is not in the graph is a construction bug: it
        raises UnknownNodeError in debug runs and degrades to "no neighbors"
        when Python runs with -O.
        """
        found = self.adjacency.get(node_id)
        if found is None:
            if __debug__:
                raise UnknownNodeError(node_id)
            logger.error("Unknown node %d in adjacency lookup; treating as isolated", node_id)
            return frozenset()
        return found

    def degree(self, node_id: int) -> int:
        return len(self.neighbors(node_id))


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------
def build_proximity_graph(
    points: PointSet,
    radius: float,
    method: GraphBuildMethod = GraphBuildMethod.BRUTE_FORCE,
) -> ProximityGraph:
    """Link every pair of points whose distance is <= radius.

    Args:
        points: Graph nodes
        radius: Edge threshold (inclusive)
        method: Pair enumeration strategy

    Returns:
        ProximityGraph with one entry per point (isolated points map to an
        empty neighbor set)

    Raises:
        InvalidRadiusError: If radius is negative or non-finite
    """
    radius = validate_radius(radius)
    adjacency: dict[int, set[int]] = {p.id: set() for p in points.points}

    if method is GraphBuildMethod.INDEXED:
        tree = KdTree.build(points)
        for point in points.points:
            adjacency[point.id] = set(tree.range_query(point, radius)) - {point.id}
    else:
        members = points.points
        for i, a in enumerate(members):
            for b in members[i + 1 :]:
                if within_radius(a, b, radius):
                    adjacency[a.id].add(b.id)
                    adjacency[b.id].add(a.id)

    graph = ProximityGraph(
        adjacency={k: frozenset(v) for k, v in adjacency.items()}, radius=radius
    )
    logger.debug(
        "Built proximity graph (%s): %d nodes, %d edges, radius %.3f",
        method.value,
        len(graph),
        graph.edge_count,
        radius,
    )
    return graph
