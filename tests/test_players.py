"""Tests for player records and match construction."""

import pytest

from connectfour.exceptions import InvalidDimensionError
from connectfour.game.players import ConnectFourInitializer, Player
from connectfour.game.rules import ConnectFourGame
from connectfour.utils import GameMode, PlayerID, Token


@pytest.fixture
def initializer():
    return ConnectFourInitializer()


class TestInitializer:
    def test_player_vs_player_defaults(self, initializer):
        game = initializer.player_vs_player("Ann", "Bo")
        assert isinstance(game, ConnectFourGame)
        assert game.mode is GameMode.PLAYER_VS_PLAYER
        assert (game.height, game.width) == (6, 7)
        assert game.player1 == Player(PlayerID.PLAYER_1, "Ann", False, Token.X)
        assert game.player2 == Player(PlayerID.PLAYER_2, "Bo", False, Token.O)
        assert game.get_current_player() is game.player1

    def test_player_vs_computer(self, initializer):
        game = initializer.player_vs_computer("Ann", height=5, width=8)
        assert (game.grid.height, game.grid.width) == (5, 8)
        assert not game.player1.is_computer
        assert game.player2.is_computer
        assert game.player2.name == "Computer1"

    def test_computer_vs_computer(self, initializer):
        game = initializer.computer_vs_computer()
        assert game.player1.is_computer and game.player2.is_computer
        assert [game.player1.name, game.player2.name] == ["Computer1", "Computer2"]
        assert game.player1.token is Token.X

    def test_create_dispatches_on_mode(self, initializer):
        assert initializer.create(GameMode.PLAYER_VS_PLAYER).player2.name == "Player2"
        assert initializer.create(GameMode.PLAYER_VS_COMPUTER, "Ann").player2.is_computer
        assert initializer.create(GameMode.COMPUTER_VS_COMPUTER).mode is GameMode.COMPUTER_VS_COMPUTER

    @pytest.mark.parametrize("height, width", [(3, 7), (6, 3), (0, 0)])
    def test_invalid_dimensions(self, initializer, height, width):
        with pytest.raises(InvalidDimensionError):
            initializer.player_vs_player("Ann", "Bo", height=height, width=width)

    def test_invalid_dimension_message(self, initializer):
        with pytest.raises(InvalidDimensionError, match="Entered width is invalid"):
            initializer.computer_vs_computer(height=6, width=2)


class TestPlayer:
    def test_str(self):
        assert str(Player(PlayerID.PLAYER_2, "Bo", False, Token.O)) == "Bo (O)"
