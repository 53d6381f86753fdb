"""Generic best-first graph search: A* with a Dijkstra mode and a bounded open list."""

from .domain.astar import AStarSearcher
from .domain.errors import BrokenParentChain, InvalidSearchInput, SearchError
from .domain.types import INFINITE_COST, EngineConfig, SearchNode, SearchResult

__version__ = "1.0.0"

__all__ = [
    "AStarSearcher",
    "BrokenParentChain",
    "EngineConfig",
    "INFINITE_COST",
    "InvalidSearchInput",
    "SearchError",
    "SearchNode",
    "SearchResult",
]
