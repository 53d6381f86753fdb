"""Path reconstruction and validation utilities."""

from typing import List

from .errors import BrokenParentChain
from .types import SearchGraph, SearchNode


def reconstruct_path(start: SearchNode, end: SearchNode, graph: SearchGraph) -> List[SearchNode]:
    """
    Rebuild the path from start to end by following parent keys from end.

    Nodes are stacked while walking backwards so that popping the stack
    yields them in start-to-end order.

    Raises:
        BrokenParentChain: If the chain stops or loops before reaching start
    """
    stack = [end]
    visited = {end.key}
    current = end

    while current != start:
        if current.parent is None:
            raise BrokenParentChain(f"{current.key!r} has no parent before reaching {start.key!r}")
        parent = graph.get_node(current.parent)
        if parent is None:
            raise BrokenParentChain(f"Parent {current.parent!r} of {current.key!r} is not in the graph")
        if parent.key in visited:
            raise BrokenParentChain(f"Parent chain of {end.key!r} loops at {parent.key!r}")
        visited.add(parent.key)
        stack.append(parent)
        current = parent

    path = []
    while stack:
        path.append(stack.pop())
    return path


def calculate_path_cost(path: List[SearchNode], graph: SearchGraph) -> float:
    """
    Sum the edge costs along a path.

    Raises:
        ValueError: If two consecutive nodes are not linked by an edge
    """
    total_cost = 0.0
    for i in range(1, len(path)):
        total_cost += _edge_cost(path[i - 1], path[i], graph)
    return total_cost


def validate_path(path: List[SearchNode], graph: SearchGraph) -> bool:
    """
    Validate that a path is connected through the graph's edges.
    Returns True if every consecutive pair is linked by a successor edge.
    """
    if not path:
        return False

    for node in path:
        if graph.get_node(node.key) is None:
            return False

    for i in range(1, len(path)):
        successors = path[i - 1].get_successors(graph)
        if path[i] not in successors:
            return False

    return True


def _edge_cost(from_node: SearchNode, to_node: SearchNode, graph: SearchGraph) -> float:
    """Cost of the edge from_node -> to_node as reported by the successor step."""
    for successor in from_node.get_successors(graph):
        if successor == to_node:
            return successor.self_cost
    raise ValueError(f"No edge from {from_node.key!r} to {to_node.key!r}")
