"""
exceptions.py - Exception types for the Connect Four engine

Illegal moves are reported with boolean results by the engine; the classes
here cover the low-level grid primitive and misuse of the engine by a driver.
"""


class ConnectFourError(Exception):
    """Base class for all errors raised by the connectfour package."""


class InvalidDimensionError(ConnectFourError, ValueError):
    """Raised when a grid is created with a height or width below the minimum."""

    def __init__(self, message: str = "Entered width/height is invalid! The value should be >= 4."):
        super().__init__(message)


class IllegalMoveError(ConnectFourError, ValueError):
    """Raised by Grid.drop when a token cannot be placed in a column."""

    def __init__(self, column: int, message: str):
        super().__init__(message)
        self.column = column


class ColumnOutOfRangeError(IllegalMoveError):
    def __init__(self, column: int, width: int):
        super().__init__(column, f"Column {column} is out of range (0-{width - 1})")


class ColumnFullError(IllegalMoveError):
    def __init__(self, column: int):
        super().__init__(column, f"Column {column} is full")


class UnplayedCellError(ConnectFourError, LookupError):
    """Raised when a status check is requested for a cell that holds no token."""

    def __init__(self, row: int, column: int):
        super().__init__(f"No token at ({row}, {column}); status can only be evaluated for a played cell")
        self.row = row
        self.column = column
