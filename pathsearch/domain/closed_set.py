"""Closed list of finalized nodes."""

from typing import Dict, Iterator

from .types import NodeKey, SearchNode


class ExploredSet:
    """Nodes whose g-cost is final, keyed by node identity."""

    def __init__(self):
        self._nodes: Dict[NodeKey, SearchNode] = {}

    def add(self, node: SearchNode) -> None:
        self._nodes[node.key] = node

    def contains(self, node: SearchNode) -> bool:
        return node.key in self._nodes

    def __contains__(self, node: SearchNode) -> bool:
        return self.contains(node)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[SearchNode]:
        return iter(self._nodes.values())

    def clear(self) -> None:
        self._nodes.clear()
