"""Command line demo: search a directed graph and log the resulting path."""

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from . import config
from .domain.astar import AStarSearcher
from .domain.errors import InvalidSearchInput
from .domain.heuristics import HEURISTICS
from .domain.types import EngineConfig
from .utils.graph_factory import DirectedGraph, create_example_graph
from .utils.graph_serialization import data_to_graph, load_graph

logger = logging.getLogger("pathsearch")

EXIT_FOUND = 0
EXIT_NOT_FOUND = 1
EXIT_INVALID = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathsearch",
        description="Find cheapest paths in a directed weighted graph with A*"
    )
    parser.add_argument("--graph", type=str, help="Path to a saved graph JSON file (uses the demo graph if omitted)")
    parser.add_argument("--start", type=str, help="Start node identifier")
    parser.add_argument("--target", type=str, help="Target node identifier")
    parser.add_argument("--all", action="store_true", help="Compute cheapest paths from start to every reachable node")
    parser.add_argument("--capacity", type=int, default=config.DEFAULT_CAPACITY,
                        help="Open list capacity before the search gives up")
    parser.add_argument("--heuristic", choices=sorted(HEURISTICS), help="Heuristic used by graph nodes")
    parser.add_argument("--log-level", default=config.LOG_LEVEL, help="Logging level (DEBUG, INFO, WARNING, ERROR)")
    return parser


def load_search_problem(args: argparse.Namespace,
                        engine_config: EngineConfig) -> Tuple[DirectedGraph, Optional[str], Optional[str]]:
    """
    Build the graph and the start/target identifiers requested on the command line.

    Raises:
        OSError: If the graph file cannot be read
        ValueError: If the graph file is malformed
    """
    if args.graph:
        graph_data = load_graph(args.graph)
        if args.heuristic:
            graph_data.heuristic = args.heuristic
        graph = data_to_graph(graph_data)
        start = args.start or graph_data.start
        target = args.target or graph_data.target
        return graph, start, target

    graph = create_example_graph(engine_config.heuristic)
    return graph, args.start or "A", args.target or "E"


def format_path(path) -> str:
    return " -> ".join(str(node.key) for node in path)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the demo."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    engine_config = EngineConfig(
        capacity=args.capacity,
        heuristic=args.heuristic or config.DEFAULT_HEURISTIC
    )

    try:
        graph, start_key, target_key = load_search_problem(args, engine_config)
    except (OSError, ValueError) as e:
        logger.error(f"Could not load graph: {e}")
        return EXIT_INVALID

    if start_key is None or start_key not in graph:
        logger.error(f"Start node {start_key!r} is not in the graph")
        return EXIT_INVALID

    try:
        searcher = AStarSearcher(graph, capacity=engine_config.capacity)
        start = graph.reset_search_state(start_key)

        if args.all:
            all_paths = searcher.find_all_paths(start)
            logger.info(f"Cheapest paths from {start_key}:")
            for node, path in all_paths.items():
                logger.info(f"  {node.key} (cost {node.g_cost}): {format_path(path)}")
            return EXIT_FOUND

        target = graph.get_node(target_key) if target_key is not None else None
        if target is None:
            logger.error(f"Target node {target_key!r} is not in the graph")
            return EXIT_INVALID

        result = searcher.find_path(start, target)
    except InvalidSearchInput as e:
        logger.error(f"Invalid search input: {e}")
        return EXIT_INVALID

    if result.found:
        logger.info(f"Path from {start_key} to {target_key} (cost {result.cost}): {format_path(result.path)}")
        return EXIT_FOUND

    if result.truncated:
        logger.warning(
            f"Search stopped at capacity {engine_config.capacity}; partial path to "
            f"{result.terminal.key}: {format_path(result.path)}"
        )
    else:
        logger.warning(f"No path from {start_key} to {target_key}")
    return EXIT_NOT_FOUND


if __name__ == "__main__":
    sys.exit(main())
