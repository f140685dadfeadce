"""Diagonal rays on the 5x4 board.

Rays are precomputed once per (cell, diagonal). :func:`walk` hands them out as
one-shot iterators; any blocking or threat filtering is the caller's job.
"""

from __future__ import annotations

from collections.abc import Iterator

from four_bishops.core.enums import Diagonal
from four_bishops.core.types import (
    ALL_COORDINATES,
    BOARD_FILES,
    BOARD_RANKS,
    CELL_COUNT,
    Coordinate,
)

_DIAGONALS: tuple[Diagonal, ...] = tuple(Diagonal)


# -- Precomputed lookup tables ---------------------------------------------


def _build_rays() -> tuple[dict[Diagonal, tuple[Coordinate, ...]], ...]:
    rays_per_cell: list[dict[Diagonal, tuple[Coordinate, ...]]] = []
    for origin in ALL_COORDINATES:
        cell_rays: dict[Diagonal, tuple[Coordinate, ...]] = {}
        for diagonal in _DIAGONALS:
            af = origin.file + diagonal.file_step
            ar = origin.rank + diagonal.rank_step
            ray: list[Coordinate] = []
            while 0 <= af < BOARD_FILES and 0 <= ar < BOARD_RANKS:
                ray.append(Coordinate(af, ar))
                af += diagonal.file_step
                ar += diagonal.rank_step
            cell_rays[diagonal] = tuple(ray)
        rays_per_cell.append(cell_rays)
    return tuple(rays_per_cell)


def _build_diagonal_masks(
    rays: tuple[dict[Diagonal, tuple[Coordinate, ...]], ...],
) -> tuple[int, ...]:
    masks: list[int] = [0] * CELL_COUNT
    for cell in range(CELL_COUNT):
        mask = 0
        for ray in rays[cell].values():
            for target in ray:
                mask |= target.bit
        masks[cell] = mask
    return tuple(masks)


_RAYS = _build_rays()
_DIAGONAL_MASKS = _build_diagonal_masks(_RAYS)


def walk(origin: Coordinate, diagonal: Diagonal) -> Iterator[Coordinate]:
    """Cells stepping away from *origin* along *diagonal*, nearest first.

    The sequence ends at the board edge and cannot be restarted.
    """
    return iter(_RAYS[origin.to_index()][diagonal])


def diagonal_mask(origin: Coordinate) -> int:
    """Every cell on *origin*'s four diagonals, edge to edge (origin excluded)."""
    return _DIAGONAL_MASKS[origin.to_index()]
