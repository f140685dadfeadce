"""Successor enumeration under the blocking and threat-avoidance rules."""

from __future__ import annotations

from four_bishops.core.configuration import Configuration
from four_bishops.core.enums import Diagonal, Side
from four_bishops.core.move import Move
from four_bishops.core.rays import walk
from four_bishops.core.types import Coordinate

BISHOP_DIRS: tuple[Diagonal, ...] = (
    Diagonal.UPPER_LEFT,
    Diagonal.UPPER_RIGHT,
    Diagonal.LOWER_LEFT,
    Diagonal.LOWER_RIGHT,
)


class MoveGenerator:
    """Generates the configurations one ply away from a :class:`Configuration`.

    A token slides along each diagonal until it meets one of its own side's
    tokens or the board edge. Cells attacked by the opponent are passed over
    but never landed on. Cells holding an opponent token are rejected too;
    every other cell on a ray through an opponent token is attacked by it,
    so those landings are never reachable by sliding further.
    """

    __slots__ = ("_config",)

    def __init__(self, configuration: Configuration) -> None:
        self._config = configuration

    # -- Public API ---------------------------------------------------------

    def destinations(self, side: Side, slot: int) -> list[Coordinate]:
        """Legal landing cells for *side*'s token in *slot*."""
        config = self._config
        return self._gen_targets(
            config.tokens(side)[slot],
            config.occupancy_bitmap(side),
            config.occupancy_bitmap(side.opposite),
            config.threat_bitmap(side.opposite),
        )

    def legal_moves(self, side: Side) -> list[Move]:
        """Every single-token move available to *side*."""
        config = self._config
        own = config.occupancy_bitmap(side)
        opponent = config.occupancy_bitmap(side.opposite)
        threat = config.threat_bitmap(side.opposite)

        moves: list[Move] = []
        for origin in config.tokens(side):
            for target in self._gen_targets(origin, own, opponent, threat):
                moves.append(Move(side, origin, target))
        return moves

    def next_configurations(self, side: Side) -> list[Configuration]:
        """Configurations reachable by moving exactly one of *side*'s tokens.

        Different moves never collide here, but the result is not checked
        against any visited set; that is the caller's job.
        """
        config = self._config
        own = config.occupancy_bitmap(side)
        opponent = config.occupancy_bitmap(side.opposite)
        threat = config.threat_bitmap(side.opposite)

        successors: list[Configuration] = []
        append = successors.append
        for slot, origin in enumerate(config.tokens(side)):
            for target in self._gen_targets(origin, own, opponent, threat):
                append(config.replace_token(side, slot, target))
        return successors

    # -- Ray scanning (private) ---------------------------------------------

    @staticmethod
    def _gen_targets(
        origin: Coordinate,
        own: int,
        opponent: int,
        threat: int,
    ) -> list[Coordinate]:
        targets: list[Coordinate] = []
        for diagonal in BISHOP_DIRS:
            for target in walk(origin, diagonal):
                bit = target.bit
                if own & bit:
                    break
                if threat & bit or opponent & bit:
                    continue
                targets.append(target)
        return targets


def next_configurations(configuration: Configuration, side: Side) -> list[Configuration]:
    """Convenience wrapper around :meth:`MoveGenerator.next_configurations`."""
    return MoveGenerator(configuration).next_configurations(side)
