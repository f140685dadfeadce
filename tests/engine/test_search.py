"""Tests for the breadth-first shortest-path search."""

import logging

import pytest

from four_bishops.core.configuration import Configuration
from four_bishops.core.enums import Side
from four_bishops.core.errors import InvariantViolationError
from four_bishops.core.move_generator import next_configurations
from four_bishops.core.types import Coordinate
from four_bishops.engine import (
    BreadthFirstSearch,
    SearchLimits,
    SearchOutcome,
    SearchResult,
    find_shortest_path,
)


class TestShortPaths:
    def test_start_equals_goal(self, initial: Configuration) -> None:
        result = find_shortest_path(initial, initial)

        assert result.outcome == SearchOutcome.SOLVED
        assert result.path == (initial,)
        assert result.plies == 0
        assert result.depth == 0
        assert result.nodes == 1
        assert result.moves == []

    def test_goal_equal_by_occupancy(self, initial: Configuration) -> None:
        reordered = Configuration(initial.white[::-1], initial.black[::-1])
        assert find_shortest_path(initial, reordered).plies == 0

    def test_one_ply(self, initial: Configuration) -> None:
        target = next_configurations(initial, Side.WHITE)[0]
        result = find_shortest_path(initial, target)

        assert result.solved
        assert result.plies == 1
        assert result.path is not None
        assert result.path[0] == initial
        assert result.path[-1] == target
        assert [str(m) for m in result.moves] == ["white a1-b2"]

    def test_two_plies_alternate_sides(self, initial: Configuration) -> None:
        after_white = next_configurations(initial, Side.WHITE)[0]
        target = next_configurations(after_white, Side.BLACK)[0]
        result = find_shortest_path(initial, target)

        assert result.plies == 2
        assert [m.side for m in result.moves] == [Side.WHITE, Side.BLACK]

    def test_black_first(self, initial: Configuration) -> None:
        target = next_configurations(initial, Side.BLACK)[0]
        result = find_shortest_path(
            initial, target, SearchLimits(first_to_move=Side.BLACK)
        )
        assert result.plies == 1
        assert result.moves[0].side == Side.BLACK


class TestNoSolution:
    def test_frontier_exhausted(self, stuck: Configuration, goal: Configuration) -> None:
        result = find_shortest_path(stuck, goal)

        assert result.outcome == SearchOutcome.NO_SOLUTION
        assert result.path is None
        assert not result.solved
        assert result.plies is None
        assert result.moves == []
        assert result.nodes == 1
        assert result.depth == 1

    def test_depth_limit(self, initial: Configuration, goal: Configuration) -> None:
        result = find_shortest_path(initial, goal, SearchLimits(max_depth=2))

        assert result.outcome == SearchOutcome.DEPTH_LIMIT
        assert result.path is None
        assert result.depth == 2

    def test_zero_depth_limit_still_checks_start(self, initial: Configuration) -> None:
        result = find_shortest_path(initial, initial, SearchLimits(max_depth=0))
        assert result.solved

    def test_negative_depth_limit(self) -> None:
        with pytest.raises(ValueError):
            SearchLimits(max_depth=-1)

    def test_invalid_goal_fails_at_construction(self) -> None:
        with pytest.raises(InvariantViolationError):
            Configuration(
                [Coordinate(4, r) for r in range(4)],
                [Coordinate(4, 0), Coordinate(0, 1), Coordinate(0, 2), Coordinate(0, 3)],
            )


class TestSearchState:
    def test_calls_do_not_share_state(self, initial: Configuration) -> None:
        search = BreadthFirstSearch()
        target = next_configurations(initial, Side.WHITE)[0]

        first = search.search(initial, target)
        second = search.search(initial, target)

        assert first == second
        assert search.search(initial, initial).nodes == 1

    def test_default_limits(self) -> None:
        limits = BreadthFirstSearch().limits
        assert limits.max_depth is None
        assert limits.first_to_move == Side.WHITE

    def test_logs_outcome(
        self, initial: Configuration, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="four_bishops.engine.bfs_search"):
            find_shortest_path(initial, initial.swapped(), SearchLimits(max_depth=1))
        assert "ply 1: white to move" in caplog.text
        assert "Depth limit 1 reached" in caplog.text


@pytest.mark.slow
class TestCanonicalSwap:
    def test_solved(self, solved_swap: SearchResult) -> None:
        assert solved_swap.outcome == SearchOutcome.SOLVED
        assert solved_swap.path is not None
        assert solved_swap.path[0] == Configuration.initial()
        assert solved_swap.path[-1] == Configuration.goal()
        assert solved_swap.plies == solved_swap.depth

    def test_every_step_is_a_legal_ply(self, solved_swap: SearchResult) -> None:
        assert solved_swap.path is not None
        side = Side.WHITE
        for before, after in zip(solved_swap.path, solved_swap.path[1:]):
            assert after in next_configurations(before, side)
            side = side.opposite

    def test_no_shorter_path(self, solved_swap: SearchResult) -> None:
        assert solved_swap.plies is not None
        shorter = find_shortest_path(
            Configuration.initial(),
            Configuration.goal(),
            SearchLimits(max_depth=solved_swap.plies - 1),
        )
        assert shorter.outcome == SearchOutcome.DEPTH_LIMIT
