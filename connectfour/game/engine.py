"""
engine.py - Turn sequencing and win/tie detection for Connect Four

MatchEngine holds the turn state of a single match on top of a Grid. A driver
uses it in four steps per turn:

    if engine.is_valid_move(col):
        row, ok = engine.play_move(col)
        outcome = engine.evaluate_status(row, col)
        if not outcome.is_terminal:
            engine.end_turn()

Win detection scans outward from the cell that was just filled, in both
directions along each of the four axes, and reports the full run of matching
tokens through that cell.
"""

from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Tuple

from connectfour.debug import DebugLevel, debug
from connectfour.exceptions import UnplayedCellError
from connectfour.game.grid import Grid
from connectfour.utils import AXIS_ORDER, AXIS_VECTORS, CONNECT_N, Axis, GameStatus, Token


class GridPosition(NamedTuple):
    row: int
    column: int

    def __str__(self):
        return f"({self.row}, {self.column})"


@dataclass(frozen=True)
class Outcome:
    """Result of evaluating the grid after a move."""
    status: GameStatus
    winner: Optional[Token] = None
    winning_sequence: Tuple[GridPosition, ...] = ()
    axis: Optional[Axis] = None

    @property
    def is_terminal(self) -> bool:
        return self.status.is_terminal()

    @classmethod
    def continue_(cls) -> 'Outcome':
        return cls(GameStatus.CONTINUE)

    @classmethod
    def tie(cls) -> 'Outcome':
        return cls(GameStatus.TIE)

    @classmethod
    def win(cls, winner: Token, sequence: List[GridPosition], axis: Axis) -> 'Outcome':
        return cls(GameStatus.WIN, winner, tuple(sequence), axis)


class MatchEngine:
    """
    Rules engine for one match.

    The engine does not refuse moves once a match is decided; stopping after a
    terminal outcome is up to the driver.
    """

    def __init__(self, grid: Grid, first: Token = Token.X):
        """
        Args:
            grid: Empty grid the match is played on
            first: Token that moves first
        """
        self.grid = grid
        self.current_turn = first

    def is_valid_move(self, column) -> bool:
        """Check if the current player may drop into ``column`` (0-based)."""
        return self.grid.is_column_playable(column)

    def play_move(self, column) -> Tuple[int, bool]:
        """
        Drop the current player's token into a column.

        The turn is not advanced; call ``end_turn`` once the outcome has been
        evaluated.

        Returns:
            (row, True) on success, or (-1, False) if the move is illegal, in
            which case the grid is untouched
        """
        logging_moves = debug.is_enabled_for(DebugLevel.DEBUG, "engine")
        if not self.is_valid_move(column):
            if logging_moves:
                debug.debug(f"Rejected move in column {column} for {self.current_turn}", "engine")
            return -1, False
        row = self.grid.drop(column, self.current_turn)
        if logging_moves:
            debug.debug(f"{self.current_turn} played ({row}, {column})", "engine")
        return row, True

    def end_turn(self) -> Token:
        """Hand the move to the other player and return the new current token."""
        self.current_turn = self.current_turn.other()
        return self.current_turn

    def _walk(self, row: int, column: int, d_row: int, d_col: int, token: Token) -> List[GridPosition]:
        # Cells matching ``token`` stepping away from (row, column), excluding the start
        cells = []
        r, c = row + d_row, column + d_col
        while self.grid.occupant(r, c) is token:
            cells.append(GridPosition(r, c))
            r += d_row
            c += d_col
        return cells

    def scan_axis(self, row: int, column: int, axis: Axis) -> List[GridPosition]:
        """
        Collect the maximal run of matching tokens through a cell along one axis.

        Args:
            row: Row of an occupied cell
            column: Column of that cell
            axis: Axis to scan

        Returns:
            Positions of the run ordered along the axis vector, including the
            start cell; just the start cell if no neighbour matches
        """
        token = self.grid.occupant(row, column)
        if token is None:
            raise UnplayedCellError(row, column)
        d_row, d_col = AXIS_VECTORS[axis]
        backward = self._walk(row, column, -d_row, -d_col, token)
        forward = self._walk(row, column, d_row, d_col, token)
        return backward[::-1] + [GridPosition(row, column)] + forward

    def evaluate_status(self, last_row: int, last_column: int) -> Outcome:
        """
        Decide whether the move at (last_row, last_column) ended the match.

        Axes are tried in the order row, column, right diagonal, left
        diagonal; the first one holding CONNECT_N or more tokens is reported.

        Raises:
            UnplayedCellError: if no token occupies the given cell
        """
        token = self.grid.occupant(last_row, last_column)
        if token is None:
            raise UnplayedCellError(last_row, last_column)

        tracing = debug.is_enabled_for(DebugLevel.TRACE, "engine")
        for axis in AXIS_ORDER:
            run = self.scan_axis(last_row, last_column, axis)
            if tracing:
                debug.trace(f"{axis.name} run of {len(run)} through ({last_row}, {last_column})", "engine")
            if len(run) >= CONNECT_N:
                if debug.is_enabled_for(DebugLevel.INFO, "engine"):
                    debug.info(f"{token} wins along {axis.name}: {[tuple(p) for p in run]}", "engine")
                return Outcome.win(token, run, axis)

        if self.grid.is_full():
            debug.info("Grid is full with no winner", "engine")
            return Outcome.tie()
        return Outcome.continue_()
