"""Heuristic functions for nodes that keep a neighbor -> edge cost mapping."""

from typing import Callable, Dict, Protocol

from .types import NodeKey


class WeightedNode(Protocol):
    neighbors: Dict[NodeKey, float]

    @property
    def key(self) -> NodeKey:
        ...


HeuristicFunc = Callable[[WeightedNode, WeightedNode], float]


def zero_distance(node: WeightedNode, other: WeightedNode) -> float:
    """
    Always 0. Turns A* into uniform-cost search and is trivially admissible.
    """
    return 0.0


def edge_distance(node: WeightedNode, other: WeightedNode) -> float:
    """
    Estimate based on the edges leaving ``node``.

    0 for the node itself, the direct edge cost if ``other`` is a neighbor,
    otherwise the cheapest outgoing edge (0 for a node without edges).
    Not admissible: it can overestimate, so A* may return a costlier path.
    """
    if node.key == other.key:
        return 0.0

    if other.key in node.neighbors:
        return node.neighbors[other.key]

    if not node.neighbors:
        return 0.0
    return min(node.neighbors.values())


# Mapping from heuristic IDs to functions
HEURISTICS: Dict[str, HeuristicFunc] = {
    "zero": zero_distance,
    "edge": edge_distance,
}


def get_heuristic(heuristic_id: str) -> HeuristicFunc:
    """
    Get heuristic function by ID.

    Raises:
        ValueError: If the ID is unknown
    """
    try:
        return HEURISTICS[heuristic_id]
    except KeyError:
        raise ValueError(
            f"Unknown heuristic {heuristic_id!r}, expected one of {sorted(HEURISTICS)}"
        ) from None
