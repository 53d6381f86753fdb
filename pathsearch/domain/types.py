"""Core type definitions for the graph search engine."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Hashable, List, Optional, Protocol, Sequence, Tuple

# Identity used for node equality, hashing and parent back-references
NodeKey = Hashable

# Sentinel "infinite" cost used by callers to initialize g-costs
INFINITE_COST = float("inf")


class SearchGraph(Protocol):
    """Anything the searcher can resolve node identities against."""

    def get_node(self, key: NodeKey) -> Optional["SearchNode"]:
        ...


class SearchNode(ABC):
    """
    Capabilities the searcher requires of a node.

    Nodes are equal iff their keys are equal. The parent link stores the
    predecessor's key, never the predecessor itself, and is resolved through
    the graph when a path is reconstructed.
    """

    def __init__(self, key: NodeKey):
        self._key = key
        self.self_cost: float = 0.0  # Edge cost into this node, set by the predecessor
        self.g_cost: float = INFINITE_COST  # Cost from start
        self.h_cost: float = 0.0  # Heuristic estimate to target
        self.parent: Optional[NodeKey] = None

    @property
    def key(self) -> NodeKey:
        return self._key

    @property
    def f_cost(self) -> float:
        """Total estimated cost (g + h), always derived."""
        return self.g_cost + self.h_cost

    def sort_key(self) -> Tuple[float, float]:
        """Ordering key: f-cost first, ties broken by h-cost."""
        return (self.f_cost, self.h_cost)

    @abstractmethod
    def get_successors(self, graph: SearchGraph) -> Sequence["SearchNode"]:
        """
        Return outgoing neighbors with ``self_cost`` set to the edge weight.
        An empty sequence means the node cannot be expanded further.
        """

    @abstractmethod
    def get_distance(self, other: "SearchNode") -> float:
        """Non-negative heuristic distance to ``other``; 0 when ``other`` is self."""

    def __lt__(self, other: "SearchNode") -> bool:
        return self.sort_key() < other.sort_key()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SearchNode):
            return NotImplemented
        return self._key == other._key

    def __hash__(self) -> int:
        return hash(self._key)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._key!r}, g={self.g_cost}, h={self.h_cost})"


@dataclass
class SearchResult:
    """Result of a single-target search."""
    path: List[SearchNode] = field(default_factory=list)
    target: Optional[SearchNode] = None
    nodes_explored: int = 0
    truncated: bool = False  # Ended by the frontier capacity cutoff
    cost: float = 0.0  # g-cost of the terminal node when the search ended

    @property
    def terminal(self) -> Optional[SearchNode]:
        """Last node of the path, or None if the path is empty."""
        return self.path[-1] if self.path else None

    @property
    def found(self) -> bool:
        """Whether the path actually ends at the requested target."""
        return self.terminal is not None and self.terminal == self.target

    def keys(self) -> List[NodeKey]:
        """Identities along the path, start first."""
        return [node.key for node in self.path]


@dataclass
class EngineConfig:
    """Per-run settings for building a searcher and its example graph."""
    capacity: int = 200
    heuristic: str = "zero"
