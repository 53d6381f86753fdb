"""Exceptions raised by the search engine."""


class SearchError(Exception):
    """Base class for search engine errors."""


class InvalidSearchInput(SearchError, ValueError):
    """
    The caller broke the search contract: unknown start/target, an
    uninitialized start cost, a negative edge weight or heuristic.
    """


class BrokenParentChain(SearchError):
    """Parent back-references of a node do not lead back to the start."""
