"""
players.py - Player records and match construction

ConnectFourInitializer builds ready-to-play matches for each game mode, with
either the default 6x7 grid or custom dimensions.
"""

from dataclasses import dataclass
from typing import Optional

from connectfour.debug import debug
from connectfour.game.grid import check_grid_dimensions
from connectfour.utils import (DEFAULT_COMPUTER1, DEFAULT_COMPUTER2, DEFAULT_HEIGHT, DEFAULT_WIDTH,
                               GameMode, PlayerID, Token)


@dataclass(frozen=True)
class Player:
    player_id: PlayerID
    name: str
    is_computer: bool
    token: Token

    def __str__(self):
        return f"{self.name} ({self.token})"


class ConnectFourInitializer:
    """
    Factory for ConnectFourGame instances.

    Player 1 always plays X and moves first; player 2 plays O.
    """

    def player_vs_player(self, name1: str, name2: str,
                         height: int = DEFAULT_HEIGHT, width: int = DEFAULT_WIDTH) -> 'ConnectFourGame':
        player1 = Player(PlayerID.PLAYER_1, name1, False, Token.X)
        player2 = Player(PlayerID.PLAYER_2, name2, False, Token.O)
        return self._build(GameMode.PLAYER_VS_PLAYER, player1, player2, height, width)

    def player_vs_computer(self, name: str,
                           height: int = DEFAULT_HEIGHT, width: int = DEFAULT_WIDTH) -> 'ConnectFourGame':
        player1 = Player(PlayerID.PLAYER_1, name, False, Token.X)
        player2 = Player(PlayerID.PLAYER_2, DEFAULT_COMPUTER1, True, Token.O)
        return self._build(GameMode.PLAYER_VS_COMPUTER, player1, player2, height, width)

    def computer_vs_computer(self, height: int = DEFAULT_HEIGHT,
                             width: int = DEFAULT_WIDTH) -> 'ConnectFourGame':
        player1 = Player(PlayerID.PLAYER_1, DEFAULT_COMPUTER1, True, Token.X)
        player2 = Player(PlayerID.PLAYER_2, DEFAULT_COMPUTER2, True, Token.O)
        return self._build(GameMode.COMPUTER_VS_COMPUTER, player1, player2, height, width)

    def create(self, mode: GameMode, name1: Optional[str] = None, name2: Optional[str] = None,
               height: int = DEFAULT_HEIGHT, width: int = DEFAULT_WIDTH) -> 'ConnectFourGame':
        """
        Build a match for any mode. Names not needed by the mode are ignored.

        Raises:
            InvalidDimensionError: if height or width is below 4
        """
        if mode is GameMode.PLAYER_VS_PLAYER:
            return self.player_vs_player(name1 or "Player1", name2 or "Player2", height, width)
        if mode is GameMode.PLAYER_VS_COMPUTER:
            return self.player_vs_computer(name1 or "Player1", height, width)
        return self.computer_vs_computer(height, width)

    def _build(self, mode: GameMode, player1: Player, player2: Player,
               height: int, width: int) -> 'ConnectFourGame':
        # Imported here since rules.py imports Player from this module
        from connectfour.game.rules import ConnectFourGame

        check_grid_dimensions(height, width)
        debug.debug(f"Initializing {mode.name} match on a {height}x{width} grid", "game")
        return ConnectFourGame(player1, player2, mode=mode, height=height, width=width)
