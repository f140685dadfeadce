"""Core enumerations for the bishop-swap domain."""

from __future__ import annotations

from enum import Enum, IntEnum


class Side(IntEnum):
    """Token colour; also the side to move during a search."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Side:
        return Side(1 - self.value)

    @property
    def marker(self) -> str:
        """Single-letter layout marker, ``W`` or ``B``."""
        return self.name[0]

    def __str__(self) -> str:
        return self.name.lower()


class Diagonal(Enum):
    """The four bishop directions as ``(file step, rank step)``.

    "Upper" means increasing rank.
    """

    UPPER_LEFT = (-1, 1)
    UPPER_RIGHT = (1, 1)
    LOWER_LEFT = (-1, -1)
    LOWER_RIGHT = (1, -1)

    @property
    def file_step(self) -> int:
        return self.value[0]

    @property
    def rank_step(self) -> int:
        return self.value[1]
