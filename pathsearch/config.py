"""
Configuration constants for the graph search engine.

Defaults can be overridden through environment variables or a ``.env``
file in the working directory.
"""

import os

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# Search Configuration
# =============================================================================

# Maximum number of nodes waiting in the open list before the search gives up
DEFAULT_CAPACITY = int(os.environ.get("PATHSEARCH_CAPACITY", "200"))

# Heuristic used by the example graph nodes. "zero" keeps results optimal;
# "edge" may overestimate and return more expensive paths
DEFAULT_HEURISTIC = os.environ.get("PATHSEARCH_HEURISTIC", "zero")

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
