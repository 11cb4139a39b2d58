"""
rules.py - Match management and Gymnasium environment for Connect Four

This module provides:
1. ConnectFourGame, which runs the per-turn protocol of a MatchEngine for a
   pair of players
2. A gymnasium-compatible environment built on top of it
"""

from typing import Any, Dict, List, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from connectfour.debug import debug
from connectfour.game.engine import GridPosition, MatchEngine, Outcome
from connectfour.game.grid import Grid
from connectfour.game.players import Player
from connectfour.utils import DEFAULT_HEIGHT, DEFAULT_WIDTH, GameMode, GameStatus, PlayerID, Token


class ConnectFourGame:
    """
    High-level Connect Four match.

    Wraps one Grid and MatchEngine and drives them the way a game loop
    does: validate, play, evaluate, then pass the turn. Once a win or tie
    has been reached further moves are refused.
    """

    def __init__(self, player1: Optional[Player] = None, player2: Optional[Player] = None,
                 mode: GameMode = GameMode.PLAYER_VS_PLAYER,
                 height: int = DEFAULT_HEIGHT, width: int = DEFAULT_WIDTH):
        """
        Args:
            player1: First player (moves first); defaults to a human playing X
            player2: Second player; defaults to a human playing O
            mode: Game mode the players were set up for
            height: Number of rows
            width: Number of columns
        """
        self.player1 = player1 or Player(PlayerID.PLAYER_1, "Player1", False, Token.X)
        self.player2 = player2 or Player(PlayerID.PLAYER_2, "Player2", False, Token.O)
        if self.player1.token is self.player2.token:
            raise ValueError("Players must use different tokens")
        self.mode = mode
        self.height = height
        self.width = width
        self.reset()

    def reset(self) -> None:
        """Start a new match on a fresh grid."""
        debug.debug("Resetting game", "game")
        self.grid = Grid(self.height, self.width)
        self.engine = MatchEngine(self.grid, first=self.player1.token)
        self.outcome = Outcome.continue_()
        self.moves_made: List[int] = []
        self.last_move: Optional[GridPosition] = None

    def make_move(self, column: int) -> bool:
        """
        Play one full turn for the current player.

        Args:
            column: Column to drop a token in (0-indexed)

        Returns:
            True if the move was played, False if it was illegal or the game
            is already over
        """
        if self.is_game_over():
            debug.debug(f"Move in column {column} refused: game is over", "game")
            return False

        row, ok = self.engine.play_move(column)
        if not ok:
            return False

        column = int(column)
        self.moves_made.append(column)
        self.last_move = GridPosition(row, column)
        self.outcome = self.engine.evaluate_status(row, column)
        if self.outcome.status is GameStatus.WIN:
            debug.info(f"{self.get_current_player()} wins after {len(self.moves_made)} moves", "game")
        elif self.outcome.status is GameStatus.TIE:
            debug.info("Game ends in a tie", "game")
        else:
            self.engine.end_turn()
        return True

    def is_valid_move(self, column) -> bool:
        return not self.is_game_over() and self.engine.is_valid_move(column)

    def get_valid_moves(self) -> List[int]:
        if self.is_game_over():
            return []
        return self.grid.valid_columns()

    def is_game_over(self) -> bool:
        return self.outcome.is_terminal

    def player_for(self, token: Token) -> Player:
        return self.player1 if token is self.player1.token else self.player2

    def get_current_player(self) -> Player:
        """Player to move, or the player who made the final move once the game is over."""
        return self.player_for(self.engine.current_turn)

    def get_winner(self) -> Optional[Player]:
        if self.outcome.winner is None:
            return None
        return self.player_for(self.outcome.winner)

    def get_winning_sequence(self) -> List[GridPosition]:
        return list(self.outcome.winning_sequence)

    def render(self) -> str:
        return self.grid.render()


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    Both players act through ``step``; rewards are given from the point of
    view of the player who made the move.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    def __init__(self, render_mode: Optional[str] = None,
                 height: int = DEFAULT_HEIGHT, width: int = DEFAULT_WIDTH):
        """
        Args:
            render_mode: "ascii" to return the board from render(), "human" to print it
            height: Number of rows
            width: Number of columns
        """
        debug.debug("Initializing ConnectFourEnv", "env")
        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        self.game = ConnectFourGame(height=height, width=width)
        self.render_mode = render_mode

        self.action_space = spaces.Discrete(width)
        # 0 = empty, 1 = X, 2 = O; row 0 is the bottom of the grid
        self.observation_space = spaces.Box(low=0, high=2, shape=(height, width), dtype=np.int8)

        self.reward_win = 1.0
        self.reward_draw = 0.1
        self.reward_invalid_move = -0.5
        self.reward_step = -0.01  # Small negative reward to encourage shorter games

    def reset(self, seed: Optional[int] = None,
              options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        self.game.reset()

        if self.render_mode == "human":
            self.render()
        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict[str, Any]]:
        """
        Play ``action`` for the player to move.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        debug.debug(f"Environment step with action {action}", "env")

        if not self.game.make_move(action):
            debug.debug(f"Invalid action: {action}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            return self._get_observation(), self.reward_invalid_move, False, True, info

        status = self.game.outcome.status
        if status is GameStatus.WIN:
            reward, terminated = self.reward_win, True
        elif status is GameStatus.TIE:
            reward, terminated = self.reward_draw, True
        else:
            reward, terminated = self.reward_step, False

        if self.render_mode == "human":
            self.render()
        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[str]:
        if self.render_mode == "ascii":
            return self.game.render()
        if self.render_mode == "human":
            print(self.game.render())
        return None

    def _get_observation(self) -> np.ndarray:
        return self.game.grid.to_array()

    def _get_info(self) -> Dict[str, Any]:
        valid_moves = self.game.get_valid_moves()
        return {
            'valid_moves': valid_moves,
            'num_valid_moves': len(valid_moves),
            'current_player': self.game.get_current_player().player_id.value,
            'game_result': self.game.outcome.status.name,
            'moves_made': len(self.game.moves_made),
            'winning_line': [tuple(p) for p in self.game.get_winning_sequence()],
            'last_move': tuple(self.game.last_move) if self.game.last_move else None,
        }

    def close(self):
        pass
