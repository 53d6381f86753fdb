"""Bounded priority queue used as the open list of the search engine."""

import heapq
import itertools
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .errors import InvalidSearchInput
from .types import NodeKey, SearchNode

logger = logging.getLogger(__name__)


@dataclass
class PriorityItem:
    """
    Heap entry holding a snapshot of a node's priority.

    Comparison order:
    1. f_cost (lower is better)
    2. h_cost (lower is better - favor nodes closer to target)
    3. sequence (insertion order, for determinism)
    """
    f_cost: float
    h_cost: float
    sequence: int
    node: Optional[SearchNode] = field(compare=False)

    def __lt__(self, other: 'PriorityItem') -> bool:
        if self.f_cost != other.f_cost:
            return self.f_cost < other.f_cost
        if self.h_cost != other.h_cost:
            return self.h_cost < other.h_cost
        return self.sequence < other.sequence


class BoundedPriorityQueue:
    """
    Min-priority queue of search nodes with a fixed capacity.

    Decrease-key is supported by invalidating the old heap entry and pushing
    a fresh snapshot. Stale entries stay in the heap until they surface, but
    membership and size only ever count live entries.
    """

    def __init__(self, capacity: int = 200):
        if capacity <= 0:
            raise InvalidSearchInput(f"Frontier capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._heap: List[PriorityItem] = []
        self._entry_finder: Dict[NodeKey, PriorityItem] = {}
        self._counter = itertools.count()

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._entry_finder)

    def __contains__(self, node: SearchNode) -> bool:
        return self.contains(node)

    def size(self) -> int:
        """Get the number of live nodes in the queue."""
        return len(self._entry_finder)

    def is_empty(self) -> bool:
        return len(self._entry_finder) == 0

    def is_full(self) -> bool:
        """Whether the queue holds as many nodes as its capacity allows."""
        return len(self._entry_finder) >= self._capacity

    def contains(self, node: SearchNode) -> bool:
        """Check if a node (by identity) is waiting in the queue."""
        return node.key in self._entry_finder

    def push(self, node: SearchNode) -> bool:
        """
        Add a node using its current f/h costs.

        Returns False without modifying the queue when it is already full.
        A node that is already queued is re-prioritized instead.
        """
        if node.key in self._entry_finder:
            self.update(node)
            return True
        if self.is_full():
            logger.debug(f"Frontier full ({self._capacity}), rejected {node.key!r}")
            return False
        self._add_entry(node)
        return True

    def update(self, node: SearchNode) -> None:
        """Re-prioritize a queued node after its costs changed."""
        existing = self._entry_finder.get(node.key)
        if existing is None:
            raise KeyError(node.key)
        existing.node = None
        self._add_entry(node)

    def pop(self) -> SearchNode:
        """
        Remove and return the node with the lowest priority.

        Raises:
            IndexError: If the queue is empty
        """
        while self._heap:
            entry = heapq.heappop(self._heap)
            if entry.node is not None:
                del self._entry_finder[entry.node.key]
                return entry.node
        raise IndexError("pop from an empty frontier")

    def peek(self) -> Optional[SearchNode]:
        """Look at the next node without removing it, None if empty."""
        while self._heap:
            entry = self._heap[0]
            if entry.node is not None:
                return entry.node
            heapq.heappop(self._heap)
        return None

    def clear(self) -> None:
        """Remove all nodes from the queue."""
        self._heap.clear()
        self._entry_finder.clear()

    def nodes(self) -> List[SearchNode]:
        """All live nodes in the queue, in no particular order."""
        return [entry.node for entry in self._entry_finder.values()]

    def _add_entry(self, node: SearchNode) -> None:
        f_cost, h_cost = node.sort_key()
        entry = PriorityItem(f_cost, h_cost, next(self._counter), node)
        self._entry_finder[node.key] = entry
        heapq.heappush(self._heap, entry)
