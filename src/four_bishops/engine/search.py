"""Shared search models: limits, outcome and result."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from four_bishops.core.enums import Side
from four_bishops.core.move import move_between

if TYPE_CHECKING:
    from four_bishops.core.configuration import Configuration
    from four_bishops.core.move import Move


class SearchOutcome(StrEnum):
    """How a search call ended."""

    SOLVED = "solved"
    NO_SOLUTION = "no solution"
    DEPTH_LIMIT = "depth limit reached"


@dataclass(slots=True, frozen=True)
class SearchLimits:
    """Constraints for a single shortest-path search."""

    max_depth: int | None = None
    first_to_move: Side = Side.WHITE

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError("Search depth limit must be >= 0")


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result of a shortest-path search.

    ``path`` runs from start to goal inclusive, or is ``None`` when no path
    was found. ``depth`` is the number of plies explored (the path length in
    moves when solved) and ``nodes`` the number of distinct configurations
    visited.
    """

    outcome: SearchOutcome
    path: tuple[Configuration, ...] | None
    depth: int
    nodes: int

    @property
    def solved(self) -> bool:
        return self.path is not None

    @property
    def plies(self) -> int | None:
        """Number of moves in the path, ``None`` without one."""
        if self.path is None:
            return None
        return len(self.path) - 1

    @property
    def moves(self) -> list[Move]:
        if self.path is None:
            return []
        return [
            move_between(before, after)
            for before, after in zip(self.path, self.path[1:])
        ]
