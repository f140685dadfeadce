"""Search package: breadth-first shortest-path solver and its result models."""

from four_bishops.engine.bfs_search import BreadthFirstSearch, find_shortest_path
from four_bishops.engine.search import SearchLimits, SearchOutcome, SearchResult

__all__ = [
    "BreadthFirstSearch",
    "SearchLimits",
    "SearchOutcome",
    "SearchResult",
    "find_shortest_path",
]
