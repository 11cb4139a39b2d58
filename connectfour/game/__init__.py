"""
connectfour.game - Core game mechanics for Connect Four

This package contains the grid, the rules engine, player records and the
higher-level match and environment wrappers.
"""

from connectfour.game.grid import Grid, check_grid_dimensions
from connectfour.game.engine import GridPosition, MatchEngine, Outcome
from connectfour.game.players import ConnectFourInitializer, Player
from connectfour.game.rules import ConnectFourEnv, ConnectFourGame

__all__ = ['Grid', 'check_grid_dimensions', 'GridPosition', 'MatchEngine', 'Outcome',
           'ConnectFourInitializer', 'Player', 'ConnectFourEnv', 'ConnectFourGame']
