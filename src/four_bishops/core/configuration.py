"""Configuration - the placement of four white and four black bishops."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Final

from four_bishops.core.enums import Side
from four_bishops.core.errors import InvariantViolationError, OutOfRangeError
from four_bishops.core.rays import diagonal_mask
from four_bishops.core.types import TOKENS_PER_SIDE, Coordinate

# Canonical key layout (40 bits, most significant first):
#   [white: 4 x 5-bit cell fields][black: 4 x 5-bit cell fields]
# Inside a side the cells are ordered light shade first, then dark, each
# class by ascending index, so token order never affects the key.
_CELL_FIELD_BITS: Final = 5
_CELL_FIELD_MASK: Final = (1 << _CELL_FIELD_BITS) - 1
_SIDE_KEY_BITS: Final = _CELL_FIELD_BITS * TOKENS_PER_SIDE
_SIDE_KEY_MASK: Final = (1 << _SIDE_KEY_BITS) - 1
KEY_BITS: Final = 2 * _SIDE_KEY_BITS

_FIELD_SHIFTS: Final = tuple(
    _CELL_FIELD_BITS * slot for slot in range(TOKENS_PER_SIDE - 1, -1, -1)
)


def _canonical_order(coordinate: Coordinate) -> tuple[int, int]:
    return (coordinate.shade, coordinate.to_index())


def _pack_side(group: tuple[Coordinate, ...]) -> int:
    bits = 0
    for coordinate in sorted(group, key=_canonical_order):
        bits = (bits << _CELL_FIELD_BITS) | coordinate.to_index()
    return bits


def _unpack_side(bits: int) -> tuple[Coordinate, ...]:
    return tuple(
        Coordinate.from_index((bits >> shift) & _CELL_FIELD_MASK)
        for shift in _FIELD_SHIFTS
    )


def _validated_group(side: Side, group: Iterable[Coordinate]) -> tuple[Coordinate, ...]:
    coords = tuple(group)
    if len(coords) != TOKENS_PER_SIDE:
        raise InvariantViolationError(
            f"{side} must have exactly {TOKENS_PER_SIDE} tokens, got {len(coords)}"
        )
    for coordinate in coords:
        if not isinstance(coordinate, Coordinate):
            raise TypeError(f"Expected Coordinate, got {coordinate!r}")
    return coords


@dataclass(frozen=True, slots=True, eq=False)
class Configuration:
    """Immutable board state: two unordered groups of four occupied cells.

    Two configurations are equal when their canonical keys match, i.e. when
    each side occupies the same set of cells.
    """

    white: tuple[Coordinate, ...]
    black: tuple[Coordinate, ...]
    _key: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        white = _validated_group(Side.WHITE, self.white)
        black = _validated_group(Side.BLACK, self.black)

        seen: set[Coordinate] = set()
        for coordinate in white + black:
            if coordinate in seen:
                raise InvariantViolationError(
                    f"Two tokens share cell {coordinate}"
                )
            seen.add(coordinate)

        object.__setattr__(self, "white", white)
        object.__setattr__(self, "black", black)
        object.__setattr__(
            self, "_key", (_pack_side(white) << _SIDE_KEY_BITS) | _pack_side(black)
        )

    # ── Construction helpers ────────────────────────────────────────────

    @classmethod
    def initial(cls) -> Configuration:
        """White on file a, black on file e, one token per rank."""
        return cls(
            tuple(Coordinate(0, rank) for rank in range(TOKENS_PER_SIDE)),
            tuple(Coordinate(4, rank) for rank in range(TOKENS_PER_SIDE)),
        )

    @classmethod
    def goal(cls) -> Configuration:
        """The initial configuration with the two sides' files exchanged."""
        return cls.initial().swapped()

    def swapped(self) -> Configuration:
        return Configuration(self.black, self.white)

    def replace_token(self, side: Side, slot: int, coordinate: Coordinate) -> Configuration:
        """Copy with *side*'s token in *slot* moved to *coordinate*."""
        group = list(self.tokens(side))
        group[slot] = coordinate
        if side == Side.WHITE:
            return Configuration(tuple(group), self.black)
        return Configuration(self.white, tuple(group))

    # ── Queries ─────────────────────────────────────────────────────────

    def tokens(self, side: Side) -> tuple[Coordinate, ...]:
        return self.white if side == Side.WHITE else self.black

    def occupancy_bitmap(self, side: Side) -> int:
        """20-bit set of the cells holding *side*'s tokens."""
        bitmap = 0
        for coordinate in self.tokens(side):
            bitmap |= coordinate.bit
        return bitmap

    def occupied_bitmap(self) -> int:
        return self.occupancy_bitmap(Side.WHITE) | self.occupancy_bitmap(Side.BLACK)

    def threat_bitmap(self, side: Side) -> int:
        """20-bit set of cells attacked by *side*.

        Every diagonal is marked all the way to the edge, straight through
        any token in between. Move generation, by contrast, stops at the
        mover's own tokens; both behaviours are intentional.
        """
        bitmap = 0
        for coordinate in self.tokens(side):
            bitmap |= diagonal_mask(coordinate)
        return bitmap

    def piece_at(self, coordinate: Coordinate) -> Side | None:
        if coordinate in self.white:
            return Side.WHITE
        if coordinate in self.black:
            return Side.BLACK
        return None

    # ── Canonical key ───────────────────────────────────────────────────

    def encode(self) -> int:
        """Canonical 40-bit key; internal, not a stable external format."""
        return self._key

    @classmethod
    def decode(cls, key: int) -> Configuration:
        """Rebuild a configuration with the same per-side occupancy as *key*."""
        if not (0 <= key < (1 << KEY_BITS)):
            raise OutOfRangeError(f"Key {key:#x} does not fit in {KEY_BITS} bits")
        return cls(
            _unpack_side(key >> _SIDE_KEY_BITS),
            _unpack_side(key & _SIDE_KEY_MASK),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Configuration):
            return NotImplemented
        return self._key == other._key

    def __hash__(self) -> int:
        return hash(self._key)
