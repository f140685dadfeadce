"""Coordinate value type and board geometry helpers.

Cell layout (file-major, four ranks per file)::

    index = 4 * file + rank

    a1=0, a2=1, a3=2, a4=3
    b1=4, b2=5, ...
    ...
    e1=16, ..., e4=19
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, TypeAlias

from four_bishops.core.errors import OutOfRangeError

BOARD_FILES: Final = 5
BOARD_RANKS: Final = 4
CELL_COUNT: Final = BOARD_FILES * BOARD_RANKS
TOKENS_PER_SIDE: Final = 4
BOARD_MASK: Final = (1 << CELL_COUNT) - 1

Cell: TypeAlias = int  # 0–19

_FILE_NAMES: Final = "abcde"
_RANK_NAMES: Final = "1234"


def is_valid_cell(cell: int) -> bool:
    """Check whether integer is a valid cell index."""
    return 0 <= cell < CELL_COUNT


@dataclass(frozen=True, slots=True, order=True)
class Coordinate:
    """Validated ``(file, rank)`` reference to one cell of the 5x4 grid."""

    file: int
    rank: int

    def __post_init__(self) -> None:
        if not (0 <= self.file < BOARD_FILES and 0 <= self.rank < BOARD_RANKS):
            raise OutOfRangeError(
                f"Coordinate ({self.file}, {self.rank}) is outside the "
                f"{BOARD_FILES}x{BOARD_RANKS} board"
            )

    # ── Index bijection ─────────────────────────────────────────────────

    def to_index(self) -> Cell:
        return BOARD_RANKS * self.file + self.rank

    @classmethod
    def from_index(cls, cell: int) -> Coordinate:
        if not is_valid_cell(cell):
            raise OutOfRangeError(f"Cell index {cell} is outside [0, {CELL_COUNT})")
        return ALL_COORDINATES[cell]

    # ── Display / geometry ──────────────────────────────────────────────

    @property
    def shade(self) -> int:
        """0 for light cells, 1 for dark ones; a bishop never changes shade."""
        return (self.file + self.rank) & 1

    @property
    def bit(self) -> int:
        """Single-bit mask of this cell."""
        return 1 << self.to_index()

    def __str__(self) -> str:
        return _FILE_NAMES[self.file] + _RANK_NAMES[self.rank]


ALL_COORDINATES: Final[tuple[Coordinate, ...]] = tuple(
    Coordinate(cell // BOARD_RANKS, cell % BOARD_RANKS) for cell in range(CELL_COUNT)
)


def parse_coordinate(name: str) -> Coordinate:
    """Parse algebraic cell name, e.g. ``'b3'`` → ``Coordinate(1, 2)``."""
    if len(name) != 2 or name[0] not in _FILE_NAMES or name[1] not in _RANK_NAMES:
        raise OutOfRangeError(f"Invalid cell name: {name!r}")
    return Coordinate(_FILE_NAMES.index(name[0]), _RANK_NAMES.index(name[1]))


def cells_of(bitmap: int) -> list[Coordinate]:
    """Coordinates of the bits set in a 20-bit cell bitmap, in index order."""
    cells: list[Coordinate] = []
    while bitmap:
        lsb = bitmap & -bitmap
        cells.append(ALL_COORDINATES[lsb.bit_length() - 1])
        bitmap ^= lsb
    return cells
