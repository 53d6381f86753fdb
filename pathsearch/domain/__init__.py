"""Search engine core: node contract, open/closed lists, searcher and path utilities."""
