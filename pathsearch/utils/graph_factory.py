"""Directed weighted graph used as a search space, plus factories for it."""

from typing import Dict, Iterator, List, Optional, Tuple

from ..domain.heuristics import HeuristicFunc, get_heuristic
from ..domain.types import INFINITE_COST, SearchGraph, SearchNode
from .rng import SeededRNG, default_rng

Edge = Tuple[str, str, float]


class GraphNode(SearchNode):
    """Node of a directed graph, keyed by a string identifier."""

    def __init__(self, key: str, heuristic: HeuristicFunc):
        super().__init__(key)
        self.neighbors: Dict[str, float] = {}
        self._heuristic = heuristic

    def add_neighbor(self, neighbor_key: str, cost: float):
        """Add or overwrite the edge to a neighbor."""
        self.neighbors[neighbor_key] = cost

    def get_successors(self, graph: SearchGraph) -> List[SearchNode]:
        successors = []
        for neighbor_key, cost in self.neighbors.items():
            neighbor = graph.get_node(neighbor_key)
            if neighbor is None:
                continue
            neighbor.self_cost = cost
            successors.append(neighbor)
        return successors

    def get_distance(self, other: SearchNode) -> float:
        return self._heuristic(self, other)

    def reset_costs(self):
        """Forget everything a previous search wrote on this node."""
        self.self_cost = 0.0
        self.g_cost = INFINITE_COST
        self.h_cost = 0.0
        self.parent = None


class DirectedGraph:
    """Directed graph with per-edge costs; edges may be asymmetric or self-loops."""

    def __init__(self, heuristic: str = "zero"):
        self.heuristic = heuristic
        self._heuristic_func = get_heuristic(heuristic)
        self.nodes: Dict[str, GraphNode] = {}

    def __contains__(self, key: str) -> bool:
        return key in self.nodes

    def __len__(self) -> int:
        return len(self.nodes)

    def add_node(self, key: str) -> GraphNode:
        """Add a node if it does not exist yet and return it."""
        node = self.nodes.get(key)
        if node is None:
            node = GraphNode(key, self._heuristic_func)
            self.nodes[key] = node
        return node

    def add_edge(self, from_key: str, to_key: str, cost: float):
        """
        Add a directed edge. Adding the same edge twice keeps the last cost.

        Raises:
            ValueError: If either node is unknown or the cost is negative
        """
        if from_key not in self.nodes:
            raise ValueError(f"Unknown source node {from_key!r}")
        if to_key not in self.nodes:
            raise ValueError(f"Unknown destination node {to_key!r}")
        if cost < 0:
            raise ValueError(f"Edge cost must be non-negative, got {cost}")
        self.nodes[from_key].add_neighbor(to_key, cost)

    def get_node(self, key: str) -> Optional[GraphNode]:
        """Get node by key, returns None if absent."""
        return self.nodes.get(key)

    def edges(self) -> Iterator[Edge]:
        """Iterate over all (from, to, cost) edges."""
        for key, node in self.nodes.items():
            for neighbor_key, cost in node.neighbors.items():
                yield (key, neighbor_key, cost)

    def reset_search_state(self, start_key: str) -> GraphNode:
        """
        Prepare every node for a new query: infinite g-cost everywhere
        except the start, which gets 0.

        Raises:
            KeyError: If the start node is unknown
        """
        start = self.nodes[start_key]
        for node in self.nodes.values():
            node.reset_costs()
        start.g_cost = 0.0
        return start


def create_example_graph(heuristic: str = "zero") -> DirectedGraph:
    """
    Create the five node demo graph.

    The cheapest route from A to E is A -> C -> D -> E (cost 5); the
    A -> B -> D -> E route costs 6.
    """
    graph = DirectedGraph(heuristic)
    for key in ("A", "B", "C", "D", "E"):
        graph.add_node(key)

    graph.add_edge("A", "B", 1.0)
    graph.add_edge("A", "C", 2.0)
    graph.add_edge("B", "D", 3.0)
    graph.add_edge("C", "D", 1.0)
    graph.add_edge("D", "E", 2.0)
    return graph


def create_random_graph(node_count: int, edge_probability: float = 0.3,
                        max_cost: float = 10.0, seed: Optional[int] = None,
                        heuristic: str = "zero") -> DirectedGraph:
    """
    Create a random directed graph with nodes "n0" .. "n{node_count-1}".

    Args:
        node_count: Number of nodes (must be > 0)
        edge_probability: Chance of each ordered pair being linked (0.0 to 1.0)
        max_cost: Upper bound for edge costs (costs are drawn from [1, max_cost])
        seed: Seed for reproducible graphs (uses the default RNG if None)
        heuristic: Heuristic ID for the nodes

    Raises:
        ValueError: If any argument is out of range
    """
    if node_count <= 0:
        raise ValueError(f"Node count must be positive, got {node_count}")
    if not (0.0 <= edge_probability <= 1.0):
        raise ValueError(f"Edge probability must be between 0.0 and 1.0, got {edge_probability}")
    if max_cost < 1.0:
        raise ValueError(f"Maximum edge cost must be at least 1.0, got {max_cost}")

    rng = SeededRNG(seed) if seed is not None else default_rng

    graph = DirectedGraph(heuristic)
    keys = [f"n{i}" for i in range(node_count)]
    for key in keys:
        graph.add_node(key)

    for from_key in keys:
        for to_key in keys:
            if from_key == to_key:
                continue
            if rng.random() < edge_probability:
                graph.add_edge(from_key, to_key, round(rng.uniform(1.0, max_cost), 2))

    return graph
