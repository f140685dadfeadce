"""Shortest-path solver for the four-bishops swap puzzle on a 5x4 board."""

from four_bishops.core import Configuration, Coordinate, Move, Side
from four_bishops.engine import (
    SearchLimits,
    SearchOutcome,
    SearchResult,
    find_shortest_path,
)

__all__ = [
    "Configuration",
    "Coordinate",
    "Move",
    "SearchLimits",
    "SearchOutcome",
    "SearchResult",
    "Side",
    "find_shortest_path",
]
