"""Tests for the column-stack grid."""

import numpy as np
import pytest

from connectfour.exceptions import (ColumnFullError, ColumnOutOfRangeError, IllegalMoveError,
                                    InvalidDimensionError)
from connectfour.game.grid import Grid
from connectfour.utils import Token


class TestConstruction:
    def test_empty_grid(self):
        grid = Grid(6, 7)
        assert grid.height == 6
        assert grid.width == 7
        assert grid.total_occupied() == 0
        assert not grid.is_full()
        assert grid.valid_columns() == list(range(7))

    @pytest.mark.parametrize("height, width, message", [
        (3, 3, "Entered height and width are invalid! They should be >= 4."),
        (3, 7, "Entered height is invalid! It should be >= 4."),
        (6, 2, "Entered width is invalid! It should be >= 4."),
    ])
    def test_small_dimensions_rejected(self, height, width, message):
        with pytest.raises(InvalidDimensionError) as excinfo:
            Grid(height, width)
        assert str(excinfo.value) == message

    def test_minimum_dimensions_accepted(self):
        grid = Grid(4, 4)
        assert grid.valid_columns() == [0, 1, 2, 3]


class TestPlayable:
    def test_out_of_range_columns(self):
        grid = Grid(6, 7)
        assert not grid.is_column_playable(-1)
        assert not grid.is_column_playable(7)
        assert not grid.is_column_playable(100)

    def test_non_integer_column(self):
        grid = Grid(6, 7)
        assert not grid.is_column_playable("3")
        assert not grid.is_column_playable(None)

    def test_numpy_integer_column(self):
        grid = Grid(6, 7)
        assert grid.is_column_playable(np.int64(3))
        assert grid.drop(np.int64(3), Token.X) == 0

    def test_full_after_height_drops(self):
        grid = Grid(6, 7)
        for i in range(6):
            assert grid.is_column_playable(2)
            grid.drop(2, Token.X if i % 2 == 0 else Token.O)
        assert not grid.is_column_playable(2)
        assert 2 not in grid.valid_columns()


class TestDrop:
    def test_rows_stack_from_bottom(self):
        grid = Grid(4, 5)
        assert grid.drop(1, Token.X) == 0
        assert grid.drop(1, Token.O) == 1
        assert grid.drop(1, Token.X) == 2
        assert grid.column_height(1) == 3
        assert grid.occupant(0, 1) is Token.X
        assert grid.occupant(1, 1) is Token.O

    def test_full_column_raises(self):
        grid = Grid(4, 4)
        for _ in range(4):
            grid.drop(0, Token.X)
        with pytest.raises(ColumnFullError):
            grid.drop(0, Token.O)
        assert grid.total_occupied() == 4

    def test_out_of_range_raises(self):
        grid = Grid(4, 4)
        with pytest.raises(ColumnOutOfRangeError) as excinfo:
            grid.drop(4, Token.X)
        assert excinfo.value.column == 4
        with pytest.raises(IllegalMoveError):
            grid.drop(-1, Token.X)

    def test_illegal_move_is_value_error(self):
        grid = Grid(4, 4)
        with pytest.raises(ValueError):
            grid.drop(9, Token.X)


class TestOccupant:
    def test_absent_cells(self):
        grid = Grid(6, 7)
        grid.drop(3, Token.O)
        assert grid.occupant(0, 3) is Token.O
        assert grid.occupant(1, 3) is None
        assert grid.occupant(0, 2) is None

    def test_off_grid_is_absent(self):
        grid = Grid(6, 7)
        grid.drop(0, Token.X)
        assert grid.occupant(-1, 0) is None
        assert grid.occupant(0, -1) is None
        assert grid.occupant(0, 7) is None
        assert grid.occupant(6, 0) is None


class TestOccupancy:
    def test_total_and_full(self):
        grid = Grid(4, 4)
        previous = 0
        for col in range(4):
            for _ in range(4):
                grid.drop(col, Token.X)
                assert grid.total_occupied() == previous + 1
                previous += 1
        assert grid.total_occupied() == 16
        assert grid.is_full()
        assert grid.valid_columns() == []


class TestSnapshot:
    def test_to_array_bottom_row_first(self):
        grid = Grid(6, 7)
        grid.drop(0, Token.X)
        grid.drop(0, Token.O)
        grid.drop(4, Token.O)
        array = grid.to_array()
        assert array.shape == (6, 7)
        assert array.dtype == np.int8
        assert array[0, 0] == Token.X.value
        assert array[1, 0] == Token.O.value
        assert array[0, 4] == Token.O.value
        assert np.count_nonzero(array) == 3

    def test_render(self):
        grid = Grid(4, 4)
        grid.drop(0, Token.X)
        grid.drop(0, Token.O)
        lines = grid.render().splitlines()
        assert lines[0] == "+---------+"
        assert lines[1] == "| . . . . |"
        assert lines[3] == "| O . . . |"
        assert lines[4] == "| X . . . |"
        assert lines[-1] == "  1 2 3 4"
