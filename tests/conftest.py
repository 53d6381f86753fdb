"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from typing import Dict, Optional

import pytest

from pathsearch.domain.astar import AStarSearcher
from pathsearch.utils.graph_factory import DirectedGraph, create_example_graph


@pytest.fixture
def example_graph() -> DirectedGraph:
    """The five node A..E demo graph."""
    return create_example_graph()


@pytest.fixture
def searcher(example_graph: DirectedGraph) -> AStarSearcher:
    """A searcher bound to the demo graph with the default capacity."""
    return AStarSearcher(example_graph)


def _reference_costs(graph: DirectedGraph, start_key: str) -> Dict[str, float]:
    """Cheapest cost from start to every reachable node, by exhaustive relaxation."""
    costs: Dict[str, float] = {start_key: 0.0}
    changed = True
    while changed:
        changed = False
        for from_key, to_key, cost in graph.edges():
            if from_key not in costs:
                continue
            candidate = costs[from_key] + cost
            best: Optional[float] = costs.get(to_key)
            if best is None or candidate < best - 1e-9:
                costs[to_key] = candidate
                changed = True
    return costs


@pytest.fixture
def reference_costs():
    """Brute-force shortest path costs to check search results against."""
    return _reference_costs
