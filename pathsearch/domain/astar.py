"""Core A* (and Dijkstra) graph search implementation."""

import logging
from typing import Dict, List, Optional

from .closed_set import ExploredSet
from .errors import InvalidSearchInput
from .path import reconstruct_path
from .priority_queue import BoundedPriorityQueue
from .types import NodeKey, SearchGraph, SearchNode, SearchResult

logger = logging.getLogger(__name__)


class AStarSearcher:
    """
    Best-first searcher over any graph whose nodes implement ``SearchNode``.

    The open list is bounded: once it reaches ``capacity`` the search stops
    at the next node it finalizes, which may not be the target. Callers
    initialize node costs before each query (every g-cost infinite, the
    start at 0); the searcher only clears its own open and closed lists.

    One instance may be reused for any number of queries, but not for
    concurrent ones.
    """

    def __init__(self, graph: SearchGraph, capacity: int = 200):
        self.graph = graph
        self._frontier = BoundedPriorityQueue(capacity)
        self._explored = ExploredSet()
        self.nodes_explored = 0

    @property
    def capacity(self) -> int:
        return self._frontier.capacity

    @property
    def frontier(self) -> BoundedPriorityQueue:
        return self._frontier

    @property
    def explored(self) -> ExploredSet:
        return self._explored

    def reset(self):
        """Reset the search state."""
        self._frontier.clear()
        self._explored.clear()
        self.nodes_explored = 0

    def find_path(self, start: SearchNode, target: SearchNode) -> SearchResult:
        """
        Search for the cheapest path from start to target.

        Returns a SearchResult whose path is empty if the target is
        unreachable, or ends at a node other than the target if the
        frontier capacity cut the search short (``truncated``).

        Raises:
            InvalidSearchInput: If start/target are not in the graph, the
                start cost is not initialized, or a negative edge cost or
                heuristic is encountered
        """
        self._validate_node(start, "Start")
        self._validate_node(target, "Target")
        self._validate_start_cost(start)

        self.reset()
        self._frontier.push(start)
        logger.debug(f"Searching {start.key!r} -> {target.key!r} (capacity {self.capacity})")

        while not self._frontier.is_empty():
            # Fullness left behind by the previous expansion; the root never counts
            saturated = self.nodes_explored > 0 and self._frontier.is_full()

            current = self._frontier.pop()
            self._explored.add(current)
            self.nodes_explored += 1

            if current == target or saturated:
                path = reconstruct_path(start, current, self.graph)
                truncated = current != target
                if truncated:
                    logger.info(
                        f"Frontier reached capacity {self.capacity}; "
                        f"stopping at {current.key!r} instead of {target.key!r}"
                    )
                else:
                    logger.debug(
                        f"Reached {target.key!r} at cost {current.g_cost} "
                        f"after exploring {self.nodes_explored} nodes"
                    )
                return SearchResult(
                    path=path,
                    target=target,
                    nodes_explored=self.nodes_explored,
                    truncated=truncated,
                    cost=current.g_cost,
                )

            self._relax(current, target)

        logger.debug(f"No path from {start.key!r} to {target.key!r}")
        return SearchResult(path=[], target=target, nodes_explored=self.nodes_explored)

    def find_all_paths(self, start: SearchNode) -> Dict[SearchNode, List[SearchNode]]:
        """
        Uniform-cost search from start to every reachable node.

        Returns a mapping from each finalized node to its cheapest path from
        start. The frontier capacity still bounds how far expansion goes.
        """
        self._validate_node(start, "Start")
        self._validate_start_cost(start)

        self.reset()
        self._frontier.push(start)
        all_paths: Dict[SearchNode, List[SearchNode]] = {}

        while not self._frontier.is_empty():
            current = self._frontier.pop()
            self._explored.add(current)
            self.nodes_explored += 1

            if current not in all_paths:
                all_paths[current] = reconstruct_path(start, current, self.graph)

            self._relax(current, None)

        logger.debug(f"Finalized {len(all_paths)} nodes from {start.key!r}")
        return all_paths

    def _relax(self, current: SearchNode, target: Optional[SearchNode]):
        """
        Update costs of current's successors. A target of None means
        Dijkstra mode, where every heuristic is 0.
        """
        successors = current.get_successors(self.graph)
        if not successors:
            return

        for successor in successors:
            # Finalized nodes are never revisited
            if successor in self._explored:
                continue

            if successor.self_cost < 0:
                raise InvalidSearchInput(
                    f"Negative edge cost {successor.self_cost} from {current.key!r} to {successor.key!r}"
                )

            tentative_g = current.g_cost + successor.self_cost
            not_in_frontier = successor not in self._frontier

            if not_in_frontier and self._frontier.is_full():
                logger.debug(f"Frontier full, dropping successor {successor.key!r}")
                continue

            if not_in_frontier or tentative_g < successor.g_cost:
                h_cost = self._heuristic(successor, target)
                successor.g_cost = tentative_g
                successor.h_cost = h_cost
                successor.parent = current.key

                if not_in_frontier:
                    self._frontier.push(successor)
                else:
                    self._frontier.update(successor)

    def _heuristic(self, node: SearchNode, target: Optional[SearchNode]) -> float:
        """Heuristic cost from node to target, 0 without a target."""
        if target is None:
            return 0.0

        h_cost = target.get_distance(node)
        if h_cost < 0:
            raise InvalidSearchInput(f"Negative heuristic {h_cost} between {target.key!r} and {node.key!r}")
        return h_cost

    def _validate_node(self, node: SearchNode, role: str):
        if self.graph.get_node(node.key) is None:
            raise InvalidSearchInput(f"{role} node {node.key!r} is not in the graph")

    def _validate_start_cost(self, start: SearchNode):
        if start.g_cost != 0:
            raise InvalidSearchInput(f"Start node {start.key!r} must have g_cost 0, got {start.g_cost}")

    def get_open_keys(self) -> List[NodeKey]:
        """Identities of all nodes currently in the open list."""
        return [node.key for node in self._frontier.nodes()]

    def get_closed_keys(self) -> List[NodeKey]:
        """Identities of all nodes finalized by the last query."""
        return [node.key for node in self._explored]
