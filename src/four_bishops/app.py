"""Command-line entry point: solve the bishop swap and print the moves.

Usage examples:
- Canonical puzzle: ``four-bishops``
- Custom target: ``four-bishops --goal "B...W/W...B/W...B/B...W" --max-depth 20``
"""

from __future__ import annotations

import argparse
import logging
import sys

from four_bishops.core.configuration import Configuration
from four_bishops.core.enums import Side
from four_bishops.core.notation import (
    GOAL_LAYOUT,
    STARTING_LAYOUT,
    configuration_from_layout,
    render,
)
from four_bishops.engine.bfs_search import find_shortest_path
from four_bishops.engine.search import SearchLimits, SearchResult

_LOGGER = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="four-bishops",
        description="Find the shortest alternating-move bishop swap on a 5x4 board",
    )
    parser.add_argument(
        "--start", default=STARTING_LAYOUT, help="Start layout, e.g. W...B/W...B/W...B/W...B"
    )
    parser.add_argument(
        "--goal", default=GOAL_LAYOUT, help="Goal layout, e.g. B...W/B...W/B...W/B...W"
    )
    parser.add_argument("--max-depth", type=int, default=None, help="Stop after this many plies")
    parser.add_argument("--black-first", action="store_true", help="Let black make the first move")
    parser.add_argument("--unicode", action="store_true", help="Draw boards with chess symbols")
    parser.add_argument("--quiet", action="store_true", help="Print the move list without boards")
    parser.add_argument("--verbose", action="store_true", help="Log per-ply search progress")
    args = parser.parse_args(argv)

    try:
        args.start_config = configuration_from_layout(args.start)
        args.goal_config = configuration_from_layout(args.goal)
        args.limits = SearchLimits(
            max_depth=args.max_depth,
            first_to_move=Side.BLACK if args.black_first else Side.WHITE,
        )
    except ValueError as exc:
        parser.error(str(exc))
    return args


def format_result(result: SearchResult, unicode: bool = False, quiet: bool = False) -> str:
    """Human-readable report of a search result."""
    if result.path is None:
        return (
            f"No solution ({result.outcome}) after {result.depth} plies, "
            f"{result.nodes} configurations visited"
        )

    lines = [f"Solved in {result.plies} plies ({result.nodes} configurations visited)"]
    if not quiet:
        lines += ["", render(result.path[0], unicode=unicode)]
    for ply, (move, config) in enumerate(zip(result.moves, result.path[1:]), start=1):
        lines.append(f"{ply:>3}. {move}")
        if not quiet:
            lines += [render(config, unicode=unicode), ""]
    return "\n".join(lines).rstrip()


def solve(start: Configuration, goal: Configuration, limits: SearchLimits) -> SearchResult:
    _LOGGER.info("Searching with %s to move first", limits.first_to_move)
    return find_shortest_path(start, goal, limits)


def main(argv: list[str] | None = None) -> int:
    """Run the solver; exit status 0 when a path was found."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    result = solve(args.start_config, args.goal_config, args.limits)
    print(format_result(result, unicode=args.unicode, quiet=args.quiet))
    return 0 if result.solved else 1


if __name__ == "__main__":
    sys.exit(main())
