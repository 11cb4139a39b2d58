"""
grid.py - Playing surface for Connect Four

The grid is stored as one stack per column. Tokens are appended to a column in
the order they are dropped, so a token's index in its stack is its row
(row 0 is the bottom). Columns fill independently, which means neighbouring
columns usually have different heights; every lookup goes through
``occupant`` rather than assuming a rectangular fill.
"""

import operator
from typing import List, Optional

import numpy as np

from connectfour.debug import DebugLevel, debug
from connectfour.exceptions import ColumnFullError, ColumnOutOfRangeError, InvalidDimensionError
from connectfour.utils import MIN_DIMENSION, Token, render_board_ascii


def check_grid_dimensions(height: int, width: int) -> None:
    """
    Validate grid dimensions.

    Raises:
        InvalidDimensionError: if the height or the width is below MIN_DIMENSION
    """
    if height < MIN_DIMENSION and width < MIN_DIMENSION:
        raise InvalidDimensionError(
            f"Entered height and width are invalid! They should be >= {MIN_DIMENSION}.")
    if height < MIN_DIMENSION:
        raise InvalidDimensionError(f"Entered height is invalid! It should be >= {MIN_DIMENSION}.")
    if width < MIN_DIMENSION:
        raise InvalidDimensionError(f"Entered width is invalid! It should be >= {MIN_DIMENSION}.")


class Grid:
    """
    Fixed-size Connect Four grid made of column stacks.

    ``drop`` is the only mutator and tokens are never removed, so column
    heights only grow over the life of a match.
    """

    def __init__(self, height: int, width: int):
        """
        Create an empty grid.

        Args:
            height: Number of rows (at least 4)
            width: Number of columns (at least 4)

        Raises:
            InvalidDimensionError: if either dimension is too small
        """
        check_grid_dimensions(height, width)
        self.height = height
        self.width = width
        self.columns: List[List[Token]] = [[] for _ in range(width)]
        if debug.is_enabled_for(DebugLevel.DEBUG, "grid"):
            debug.debug(f"Created {height}x{width} grid", "grid")

    def _column_index(self, column) -> Optional[int]:
        try:
            index = operator.index(column)
        except TypeError:
            return None
        if 0 <= index < self.width:
            return index
        return None

    def is_column_playable(self, column) -> bool:
        """
        Check whether a token can be dropped into a column.

        Out-of-range or non-integer columns give False rather than an error.
        """
        index = self._column_index(column)
        if index is None:
            return False
        return len(self.columns[index]) < self.height

    def drop(self, column: int, token: Token) -> int:
        """
        Drop a token into a column.

        Args:
            column: Column index (0-based)
            token: Token to place

        Returns:
            Row index where the token landed

        Raises:
            ColumnOutOfRangeError: if the column does not exist
            ColumnFullError: if the column already holds ``height`` tokens
        """
        index = self._column_index(column)
        if index is None:
            raise ColumnOutOfRangeError(column, self.width)
        stack = self.columns[index]
        if len(stack) >= self.height:
            raise ColumnFullError(index)
        stack.append(token)
        row = len(stack) - 1
        if debug.is_enabled_for(DebugLevel.TRACE, "grid"):
            debug.trace(f"Placed {token} at ({row}, {index})", "grid")
        return row

    def occupant(self, row: int, column: int) -> Optional[Token]:
        """Return the token at (row, column), or None if the cell is empty or off the grid."""
        if not (0 <= column < self.width) or row < 0:
            return None
        stack = self.columns[column]
        if row >= len(stack):
            return None
        return stack[row]

    def column_height(self, column: int) -> int:
        return len(self.columns[column])

    def total_occupied(self) -> int:
        return sum(len(stack) for stack in self.columns)

    def is_full(self) -> bool:
        return self.total_occupied() == self.height * self.width

    def valid_columns(self) -> List[int]:
        """All playable columns in ascending order."""
        return [col for col in range(self.width) if len(self.columns[col]) < self.height]

    def to_array(self) -> np.ndarray:
        """
        Snapshot of the grid as a (height, width) int8 array.

        Row 0 of the array is the bottom row. Empty cells are 0, otherwise the
        token's value.
        """
        array = np.zeros((self.height, self.width), dtype=np.int8)
        for col, stack in enumerate(self.columns):
            for row, token in enumerate(stack):
                array[row, col] = token.value
        return array

    def render(self) -> str:
        return render_board_ascii(self.height, self.width, self.occupant)

    def __str__(self) -> str:
        return self.render()
