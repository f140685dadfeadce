"""Breadth-first shortest-path search over the configuration graph."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from four_bishops.core.configuration import Configuration
from four_bishops.core.enums import Side
from four_bishops.core.move_generator import MoveGenerator
from four_bishops.engine.search import SearchLimits, SearchOutcome, SearchResult

_LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class _SearchState:
    """Bookkeeping owned by a single :meth:`BreadthFirstSearch.search` call."""

    frontier: list[Configuration]
    # canonical key -> parent key; the start maps to None.
    parents: dict[int, int | None] = field(default_factory=dict)
    depth: int = 0
    side_to_move: Side = Side.WHITE


class BreadthFirstSearch:
    """Finds a minimum-ply path between two configurations.

    The whole frontier is expanded with the same side to move, so one depth
    step is exactly one ply and sides alternate between depths.
    """

    __slots__ = ("_limits",)

    def __init__(self, limits: SearchLimits | None = None) -> None:
        self._limits = limits or SearchLimits()

    @property
    def limits(self) -> SearchLimits:
        return self._limits

    def search(self, start: Configuration, goal: Configuration) -> SearchResult:
        limits = self._limits
        goal_key = goal.encode()
        state = _SearchState(
            frontier=[start],
            parents={start.encode(): None},
            side_to_move=limits.first_to_move,
        )

        while state.frontier:
            for config in state.frontier:
                if config.encode() == goal_key:
                    path = self._reconstruct_path(state.parents, goal_key)
                    _LOGGER.info(
                        "Solved in %d plies (%d configurations visited)",
                        state.depth,
                        len(state.parents),
                    )
                    return SearchResult(
                        SearchOutcome.SOLVED, path, state.depth, len(state.parents)
                    )

            if limits.max_depth is not None and state.depth >= limits.max_depth:
                _LOGGER.info(
                    "Depth limit %d reached (%d configurations visited)",
                    limits.max_depth,
                    len(state.parents),
                )
                return SearchResult(
                    SearchOutcome.DEPTH_LIMIT, None, state.depth, len(state.parents)
                )

            _LOGGER.debug(
                "ply %d: %s to move, frontier=%d, visited=%d",
                state.depth + 1,
                state.side_to_move,
                len(state.frontier),
                len(state.parents),
            )
            self._expand(state)

        _LOGGER.info(
            "No solution: frontier exhausted after %d plies (%d configurations visited)",
            state.depth,
            len(state.parents),
        )
        return SearchResult(
            SearchOutcome.NO_SOLUTION, None, state.depth, len(state.parents)
        )

    # -- Internals ------------------------------------------------------------

    @staticmethod
    def _expand(state: _SearchState) -> None:
        parents = state.parents
        side = state.side_to_move
        next_frontier: list[Configuration] = []
        append = next_frontier.append

        for config in state.frontier:
            parent_key = config.encode()
            for successor in MoveGenerator(config).next_configurations(side):
                key = successor.encode()
                if key in parents:
                    continue
                parents[key] = parent_key
                append(successor)

        state.frontier = next_frontier
        state.depth += 1
        state.side_to_move = side.opposite

    @staticmethod
    def _reconstruct_path(
        parents: dict[int, int | None], goal_key: int
    ) -> tuple[Configuration, ...]:
        keys: list[int] = []
        key: int | None = goal_key
        while key is not None:
            keys.append(key)
            key = parents[key]
        keys.reverse()
        return tuple(Configuration.decode(k) for k in keys)


def find_shortest_path(
    start: Configuration,
    goal: Configuration,
    limits: SearchLimits | None = None,
) -> SearchResult:
    """Shortest alternating-ply path from *start* to *goal*."""
    return BreadthFirstSearch(limits).search(start, goal)
