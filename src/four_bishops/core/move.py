"""Move value object and recovery of moves from consecutive configurations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from four_bishops.core.enums import Side
from four_bishops.core.types import Coordinate

if TYPE_CHECKING:
    from four_bishops.core.configuration import Configuration


@dataclass(frozen=True, slots=True)
class Move:
    """One bishop sliding from *origin* to *target*."""

    side: Side
    origin: Coordinate
    target: Coordinate

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{self.side} {self.origin}-{self.target}"


def move_between(before: Configuration, after: Configuration) -> Move:
    """The single-token move that turns *before* into *after*.

    Raises ``ValueError`` unless exactly one token of exactly one side moved.
    """
    changed: list[Move] = []
    for side in Side:
        left = set(before.tokens(side)) - set(after.tokens(side))
        arrived = set(after.tokens(side)) - set(before.tokens(side))
        if not left and not arrived:
            continue
        if len(left) != 1 or len(arrived) != 1:
            raise ValueError(f"{side} moved more than one token")
        changed.append(Move(side, left.pop(), arrived.pop()))

    if len(changed) != 1:
        raise ValueError(
            f"Expected exactly one moved token, found {len(changed)} changed sides"
        )
    return changed[0]
