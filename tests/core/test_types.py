"""Tests for Coordinate and board geometry helpers."""

import pytest

from four_bishops.core.errors import OutOfRangeError
from four_bishops.core.types import (
    ALL_COORDINATES,
    BOARD_FILES,
    BOARD_RANKS,
    CELL_COUNT,
    Coordinate,
    cells_of,
    parse_coordinate,
)


class TestCoordinateIndex:
    def test_index_round_trip_for_every_cell(self) -> None:
        for file in range(BOARD_FILES):
            for rank in range(BOARD_RANKS):
                coord = Coordinate(file, rank)
                back = Coordinate.from_index(coord.to_index())
                assert (back.file, back.rank) == (file, rank)

    def test_index_layout(self) -> None:
        assert Coordinate(0, 0).to_index() == 0
        assert Coordinate(0, 3).to_index() == 3
        assert Coordinate(1, 0).to_index() == 4
        assert Coordinate(4, 3).to_index() == 19

    def test_indices_are_dense(self) -> None:
        indices = sorted(c.to_index() for c in ALL_COORDINATES)
        assert indices == list(range(CELL_COUNT))

    @pytest.mark.parametrize("cell", [-1, 20, 31])
    def test_from_index_out_of_range(self, cell: int) -> None:
        with pytest.raises(OutOfRangeError):
            Coordinate.from_index(cell)


class TestCoordinateValidation:
    @pytest.mark.parametrize("file, rank", [(5, 0), (0, 4), (-1, 0), (0, -1), (7, 7)])
    def test_out_of_range(self, file: int, rank: int) -> None:
        with pytest.raises(OutOfRangeError):
            Coordinate(file, rank)

    def test_out_of_range_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Coordinate(5, 0)


class TestCoordinateDisplay:
    def test_names(self) -> None:
        assert str(Coordinate(0, 0)) == "a1"
        assert str(Coordinate(4, 3)) == "e4"
        assert str(Coordinate(2, 1)) == "c2"

    def test_parse(self) -> None:
        assert parse_coordinate("c2") == Coordinate(2, 1)
        assert parse_coordinate("e4") == Coordinate(4, 3)

    @pytest.mark.parametrize("name", ["f1", "a5", "a", "a10", ""])
    def test_parse_invalid(self, name: str) -> None:
        with pytest.raises(OutOfRangeError):
            parse_coordinate(name)

    def test_shade(self) -> None:
        assert Coordinate(0, 0).shade == 0
        assert Coordinate(0, 1).shade == 1
        assert Coordinate(1, 1).shade == 0

    def test_cells_of(self) -> None:
        assert cells_of(0b101) == [Coordinate(0, 0), Coordinate(0, 2)]
        assert cells_of(0) == []
