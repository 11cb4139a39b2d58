"""
connectfour - Connect Four rules engine

This package provides the grid, move validation and win/tie detection for a
Connect Four style game, plus the thin layers that drive it: player records
and a match factory, console rendering, a command-line game loop and a
Gymnasium environment.
"""

# Version number
__version__ = '0.1.0'
