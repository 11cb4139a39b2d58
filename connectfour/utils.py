"""
utils.py - Constants, enumerations and helpers for the Connect Four engine

This module holds the default settings of a match together with the small
value types shared by the grid, the engine and the driver layers.
"""

from enum import Enum, auto
from typing import Callable, List, Optional, Tuple

# Game constants
DEFAULT_HEIGHT = 6
DEFAULT_WIDTH = 7
MIN_DIMENSION = 4  # a smaller board cannot hold four in a row
CONNECT_N = 4  # Number of tokens in a row to win
EMPTY_SLOT = "."
DEFAULT_COMPUTER1 = "Computer1"
DEFAULT_COMPUTER2 = "Computer2"


class Token(Enum):
    """The two token identities. Values double as the array encoding (0 = empty)."""
    X = 1  # First player
    O = 2  # Second player

    def other(self) -> 'Token':
        """Get the opposing token."""
        return Token.O if self is Token.X else Token.X

    @property
    def symbol(self) -> str:
        return self.name

    def __str__(self):
        return self.symbol


class GameStatus(Enum):
    """Kind of outcome reported after a move."""
    CONTINUE = auto()
    WIN = auto()
    TIE = auto()

    def is_terminal(self) -> bool:
        return self is not GameStatus.CONTINUE


class Axis(Enum):
    """Lines along which four in a row is checked, in precedence order."""
    ROW = auto()             # horizontal
    COLUMN = auto()          # vertical
    DIAGONAL_RIGHT = auto()  # bottom-left to top-right
    DIAGONAL_LEFT = auto()   # top-left to bottom-right


# Positive direction (d_row, d_col) for each axis; row 0 is the bottom row.
# Runs are reported in the order of these vectors.
AXIS_VECTORS = {
    Axis.ROW: (0, 1),
    Axis.COLUMN: (1, 0),
    Axis.DIAGONAL_RIGHT: (1, 1),
    Axis.DIAGONAL_LEFT: (-1, 1),
}

AXIS_ORDER: Tuple[Axis, ...] = (Axis.ROW, Axis.COLUMN, Axis.DIAGONAL_RIGHT, Axis.DIAGONAL_LEFT)


class GameMode(Enum):
    PLAYER_VS_PLAYER = auto()
    PLAYER_VS_COMPUTER = auto()
    COMPUTER_VS_COMPUTER = auto()


class PlayerID(Enum):
    PLAYER_1 = 1
    PLAYER_2 = 2


def render_board_ascii(height: int, width: int,
                       occupant: Callable[[int, int], Optional[Token]]) -> str:
    """
    Render a board as ASCII art, top row first.

    Args:
        height: Number of rows
        width: Number of columns
        occupant: Lookup returning the token at (row, col) or None when empty

    Returns:
        Multi-line string with 1-based column numbers underneath
    """
    lines: List[str] = []
    border = "+" + "-" * (width * 2 + 1) + "+"
    lines.append(border)
    for row in range(height - 1, -1, -1):
        cells = []
        for col in range(width):
            token = occupant(row, col)
            cells.append(EMPTY_SLOT if token is None else token.symbol)
        lines.append("| " + " ".join(cells) + " |")
    lines.append(border)
    # Single digits stay aligned; wider boards show the last digit only
    lines.append("  " + " ".join(str((col + 1) % 10) for col in range(width)))
    return "\n".join(lines)
