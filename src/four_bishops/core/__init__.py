"""Core domain layer — board geometry, configurations and move generation.

Quick start::

    from four_bishops.core import Configuration, Side, next_configurations

    start = Configuration.initial()
    for successor in next_configurations(start, Side.WHITE):
        print(successor)
"""

from four_bishops.core.configuration import Configuration
from four_bishops.core.enums import Diagonal, Side
from four_bishops.core.errors import (
    FourBishopsError,
    InvariantViolationError,
    OutOfRangeError,
)
from four_bishops.core.move import Move, move_between
from four_bishops.core.move_generator import MoveGenerator, next_configurations
from four_bishops.core.notation import (
    GOAL_LAYOUT,
    STARTING_LAYOUT,
    configuration_from_layout,
    configuration_to_layout,
    render,
)
from four_bishops.core.rays import diagonal_mask, walk
from four_bishops.core.types import (
    ALL_COORDINATES,
    BOARD_FILES,
    BOARD_MASK,
    BOARD_RANKS,
    CELL_COUNT,
    TOKENS_PER_SIDE,
    Cell,
    Coordinate,
    cells_of,
    parse_coordinate,
)

__all__ = [
    # Enums
    "Diagonal",
    "Side",
    # Errors
    "FourBishopsError",
    "InvariantViolationError",
    "OutOfRangeError",
    # Types / helpers
    "ALL_COORDINATES",
    "BOARD_FILES",
    "BOARD_MASK",
    "BOARD_RANKS",
    "CELL_COUNT",
    "TOKENS_PER_SIDE",
    "Cell",
    "Coordinate",
    "cells_of",
    "diagonal_mask",
    "parse_coordinate",
    "walk",
    # Domain objects
    "Configuration",
    "Move",
    "MoveGenerator",
    "move_between",
    "next_configurations",
    # Notation
    "GOAL_LAYOUT",
    "STARTING_LAYOUT",
    "configuration_from_layout",
    "configuration_to_layout",
    "render",
]
