"""
Graph serialization utilities for saving and loading search problems.
Graphs are stored as JSON together with an optional start/target pair.
"""

import json
import logging
import os
from datetime import datetime
from typing import Any, Dict, List, Optional

from .graph_factory import DirectedGraph, Edge

logger = logging.getLogger(__name__)

FORMAT_VERSION = "1.0"


class GraphData:
    """Container for a serialized graph with metadata."""

    def __init__(self, nodes: List[str], edges: List[Edge],
                 start: Optional[str] = None, target: Optional[str] = None,
                 name: str = "", heuristic: str = "zero"):
        self.nodes = nodes
        self.edges = edges
        self.start = start
        self.target = target
        self.name = name
        self.heuristic = heuristic
        self.created_at = datetime.now().isoformat()

    def to_dict(self) -> Dict[str, Any]:
        """Convert graph data to dictionary for serialization."""
        return {
            'nodes': self.nodes,
            'edges': [list(edge) for edge in self.edges],
            'start': self.start,
            'target': self.target,
            'name': self.name,
            'heuristic': self.heuristic,
            'created_at': self.created_at,
            'version': FORMAT_VERSION
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GraphData':
        """
        Create graph data from dictionary.

        Raises:
            ValueError: If required keys are missing or edges are malformed
        """
        if 'nodes' not in data or 'edges' not in data:
            raise ValueError("Graph data needs 'nodes' and 'edges'")

        edges = []
        for edge in data['edges']:
            if not isinstance(edge, (list, tuple)) or len(edge) != 3:
                raise ValueError(f"Edge must be [from, to, cost], got {edge!r}")
            from_key, to_key, cost = edge
            try:
                cost = float(cost)
            except (TypeError, ValueError):
                raise ValueError(f"Edge cost must be a number, got {cost!r}") from None
            edges.append((str(from_key), str(to_key), cost))

        graph_data = cls(
            nodes=[str(key) for key in data['nodes']],
            edges=edges,
            start=data.get('start'),
            target=data.get('target'),
            name=data.get('name', ''),
            heuristic=data.get('heuristic', 'zero')
        )
        graph_data.created_at = data.get('created_at', graph_data.created_at)
        return graph_data


def graph_to_data(graph: DirectedGraph, start: Optional[str] = None,
                  target: Optional[str] = None, name: str = "") -> GraphData:
    """Extract serializable data from a graph."""
    return GraphData(
        nodes=list(graph.nodes),
        edges=list(graph.edges()),
        start=start,
        target=target,
        name=name,
        heuristic=graph.heuristic
    )


def data_to_graph(graph_data: GraphData) -> DirectedGraph:
    """
    Build a graph from serialized data.

    Raises:
        ValueError: If an edge references an unknown node or has a negative cost
    """
    graph = DirectedGraph(graph_data.heuristic)
    for key in graph_data.nodes:
        graph.add_node(key)
    for from_key, to_key, cost in graph_data.edges:
        graph.add_edge(from_key, to_key, cost)
    return graph


def save_graph(graph_data: GraphData, filepath: str):
    """Save graph data to a JSON file, creating parent directories as needed."""
    directory = os.path.dirname(filepath)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(filepath, 'w') as f:
        json.dump(graph_data.to_dict(), f, indent=2)
    logger.debug(f"Saved graph with {len(graph_data.nodes)} nodes to {filepath}")


def load_graph(filepath: str) -> GraphData:
    """
    Load graph data from a JSON file.

    Raises:
        OSError: If the file cannot be read
        ValueError: If the file is not valid graph JSON
    """
    with open(filepath, 'r') as f:
        data = json.load(f)
    return GraphData.from_dict(data)
