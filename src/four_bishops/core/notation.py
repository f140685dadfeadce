"""Layout strings and text rendering of configurations.

A layout string lists ranks from the top (rank 4) down to rank 1, separated
by ``/``. Each rank holds five characters for files a–e: ``W`` for a white
token, ``B`` for a black token and ``.`` for an empty cell::

    W...B/W...B/W...B/W...B   # the starting configuration
"""

from __future__ import annotations

from four_bishops.core.configuration import Configuration
from four_bishops.core.enums import Side
from four_bishops.core.types import BOARD_FILES, BOARD_RANKS, Coordinate

STARTING_LAYOUT = "W...B/W...B/W...B/W...B"
GOAL_LAYOUT = "B...W/B...W/B...W/B...W"

_EMPTY = "."
_MARKERS: dict[str, Side] = {side.marker: side for side in Side}
_UNICODE: dict[Side | None, str] = {
    Side.WHITE: "♗",
    Side.BLACK: "♝",
    None: "·",
}


# ── Layout strings ───────────────────────────────────────────────────────────


def configuration_from_layout(layout: str) -> Configuration:
    """Parse a layout string into a :class:`Configuration`."""
    ranks = layout.strip().split("/")
    if len(ranks) != BOARD_RANKS:
        raise ValueError(
            f"Invalid layout (must contain {BOARD_RANKS} ranks): {layout!r}"
        )

    groups: dict[Side, list[Coordinate]] = {Side.WHITE: [], Side.BLACK: []}
    for row_idx, rank_text in enumerate(ranks):
        rank = BOARD_RANKS - 1 - row_idx
        if len(rank_text) != BOARD_FILES:
            raise ValueError(f"Invalid layout rank width: {layout!r}")
        for file, ch in enumerate(rank_text):
            if ch == _EMPTY:
                continue
            side = _MARKERS.get(ch.upper())
            if side is None:
                raise ValueError(f"Invalid layout character {ch!r}: {layout!r}")
            groups[side].append(Coordinate(file, rank))

    return Configuration(groups[Side.WHITE], groups[Side.BLACK])


def configuration_to_layout(config: Configuration) -> str:
    """Serialise a :class:`Configuration` to a layout string."""
    rows: list[str] = []
    for rank in range(BOARD_RANKS - 1, -1, -1):
        row = ""
        for file in range(BOARD_FILES):
            side = config.piece_at(Coordinate(file, rank))
            row += _EMPTY if side is None else side.marker
        rows.append(row)
    return "/".join(rows)


# ── Rendering ────────────────────────────────────────────────────────────────


def render(config: Configuration, unicode: bool = False) -> str:
    """Multi-line board diagram with rank numbers and file letters."""
    lines: list[str] = []
    for rank in range(BOARD_RANKS - 1, -1, -1):
        cells: list[str] = []
        for file in range(BOARD_FILES):
            side = config.piece_at(Coordinate(file, rank))
            if unicode:
                cells.append(_UNICODE[side])
            else:
                cells.append(_EMPTY if side is None else side.marker)
        lines.append(f"{rank + 1} " + " ".join(cells))
    lines.append("  " + " ".join("abcde"[:BOARD_FILES]))
    return "\n".join(lines)
