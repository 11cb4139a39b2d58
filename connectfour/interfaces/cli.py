"""
cli.py - Command-line interface for Connect Four

Provides an interactive game loop on top of the engine, a scripted demo match
and a small benchmark. Columns are shown and entered 1-based here and
converted to the engine's 0-based indices.
"""

import argparse
import random
import sys
from typing import List, Optional

from connectfour.debug import DebugLevel, debug
from connectfour.exceptions import InvalidDimensionError
from connectfour.game.engine import GridPosition, MatchEngine
from connectfour.game.grid import Grid
from connectfour.game.players import ConnectFourInitializer
from connectfour.game.rules import ConnectFourGame
from connectfour.utils import DEFAULT_HEIGHT, DEFAULT_WIDTH, GameMode, GameStatus, Token

MODES = {
    'pvp': GameMode.PLAYER_VS_PLAYER,
    'pvc': GameMode.PLAYER_VS_COMPUTER,
    'cvc': GameMode.COMPUTER_VS_COMPUTER,
}

QUIT = -1


def format_sequence(sequence: List[GridPosition]) -> str:
    """Format positions 1-based, as players see them."""
    return " ".join(f"({p.row + 1},{p.column + 1})" for p in sequence)


class SimpleCLI:
    """Simple command-line interface for playing and exercising Connect Four."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.args = None
        self.rng = rng or random.Random()

    def build_parser(self) -> argparse.ArgumentParser:
        common = argparse.ArgumentParser(add_help=False)
        common.add_argument('--debug', action='store_true', help='Enable debug output')
        common.add_argument('--debug_level',
                            choices=[level.name.lower() for level in DebugLevel],
                            default='warning', help='Logging level (default: warning)')
        common.add_argument('--log_file', type=str, default=None, help='Also write log records to this file')

        parser = argparse.ArgumentParser(description='Connect Four')
        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        play_parser = subparsers.add_parser('play', parents=[common], help='Play a game interactively')
        play_parser.add_argument('--height', type=int, default=DEFAULT_HEIGHT, help='Number of rows (>= 4)')
        play_parser.add_argument('--width', type=int, default=DEFAULT_WIDTH, help='Number of columns (>= 4)')
        play_parser.add_argument('--mode', choices=sorted(MODES), default='pvc',
                                 help='pvp, pvc (against a random computer) or cvc')
        play_parser.add_argument('--name1', type=str, default='Player1', help='Name of the first player')
        play_parser.add_argument('--name2', type=str, default='Player2', help='Name of the second player')
        play_parser.add_argument('--seed', type=int, default=None, help='Seed for computer moves')

        subparsers.add_parser('demo', parents=[common], help='Play a scripted four-in-a-row match')

        benchmark_parser = subparsers.add_parser('benchmark', parents=[common], help='Benchmark performance')
        benchmark_parser.add_argument('--iterations', type=int, default=1000,
                                      help='Number of random games to play')
        benchmark_parser.add_argument('--seed', type=int, default=None, help='Seed for random moves')
        return parser

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments and configure logging."""
        self.args = self.build_parser().parse_args(argv)

        if getattr(self.args, 'debug', False):
            debug.configure(level=DebugLevel.DEBUG)
        elif getattr(self.args, 'debug_level', None):
            debug.set_from_string(self.args.debug_level)
        if getattr(self.args, 'log_file', None):
            debug.configure(log_file=self.args.log_file)
        if getattr(self.args, 'seed', None) is not None:
            self.rng.seed(self.args.seed)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the command selected on the command line and return an exit code."""
        if self.args is None:
            self.parse_args(argv)

        if self.args.command == 'play':
            return self.play_game()
        if self.args.command == 'demo':
            return self.demo()
        if self.args.command == 'benchmark':
            return self.benchmark()
        print("Please specify a command. Use --help for options.")
        return 1

    def play_game(self) -> int:
        """Play a Connect Four game interactively."""
        try:
            game = ConnectFourInitializer().create(MODES[self.args.mode], self.args.name1, self.args.name2,
                                                   height=self.args.height, width=self.args.width)
        except InvalidDimensionError as e:
            print(e)
            return 1

        print("Starting a new Connect Four game!")
        print(f"Enter a column number (1-{game.width}) to make a move, or 'q' to quit.")
        print(game.render())

        while not game.is_game_over():
            player = game.get_current_player()
            if player.is_computer:
                column = self.get_computer_move(game)
                print(f"{player} plays column {column + 1}")
            else:
                column = self.get_human_move(game)
                if column == QUIT:
                    print("Quitting game.")
                    return 0

            if game.make_move(column):
                print(game.render())
            else:
                print(f"Column {column + 1} is full. Choose another column.")

        self.report_result(game)
        return 0

    def get_human_move(self, game: ConnectFourGame) -> int:
        """
        Prompt until the current player enters a usable column.

        Returns:
            0-based column index, or QUIT
        """
        player = game.get_current_player()
        while True:
            try:
                user_input = input(f"{player}, your move (1-{game.width}, q): ").strip().lower()
            except EOFError:
                return QUIT
            if user_input == 'q':
                return QUIT
            try:
                column = int(user_input) - 1
            except ValueError:
                print("Invalid input. Please enter a column number.")
                continue
            if game.is_valid_move(column):
                return column
            if 0 <= column < game.width:
                print(f"Column {column + 1} is full. Choose another column.")
            else:
                print(f"Column must be between 1 and {game.width}.")

    def get_computer_move(self, game: ConnectFourGame) -> int:
        """Computer seats pick a random legal column."""
        return self.rng.choice(game.get_valid_moves())

    def report_result(self, game: ConnectFourGame) -> None:
        print("Game over!")
        winner = game.get_winner()
        if winner is not None:
            print(f"Congrats! {winner.name} has won the game!")
            print(f"The winning sequence is: {format_sequence(game.get_winning_sequence())}")
        else:
            print("Game tied!")

    def demo(self) -> int:
        """X fills the bottom row from the left while O stacks in the last column."""
        engine = MatchEngine(Grid(DEFAULT_HEIGHT, DEFAULT_WIDTH), first=Token.X)
        script = [0, 6, 1, 6, 2, 6, 3]
        for column in script:
            player = engine.current_turn
            row, ok = engine.play_move(column)
            if not ok:
                print(f"{player} cannot play column {column + 1}")
                return 1
            outcome = engine.evaluate_status(row, column)
            print(f"{player} plays column {column + 1}")
            print(engine.grid.render())
            if outcome.is_terminal:
                break
            engine.end_turn()

        if outcome.status is GameStatus.WIN:
            print(f"{outcome.winner} wins along the {outcome.axis.name.lower()}: "
                  f"{[tuple(p) for p in outcome.winning_sequence]}")
        else:
            print(f"Result: {outcome.status.name}")
        return 0

    def benchmark(self) -> int:
        """Measure move and status-evaluation throughput with random games."""
        iterations = self.args.iterations
        print(f"Running benchmark with {iterations} random games...")

        debug.start_timer("benchmark")
        total_moves = 0
        results = {status: 0 for status in GameStatus}
        for _ in range(iterations):
            engine = MatchEngine(Grid(DEFAULT_HEIGHT, DEFAULT_WIDTH))
            while True:
                column = self.rng.choice(engine.grid.valid_columns())
                row, _ = engine.play_move(column)
                total_moves += 1
                outcome = engine.evaluate_status(row, column)
                if outcome.is_terminal:
                    results[outcome.status] += 1
                    break
                engine.end_turn()
        elapsed = debug.end_timer("benchmark", "cli") or 0.0

        print(f"Played {iterations} games with {total_moves} moves in {elapsed:.4f} seconds")
        if total_moves:
            print(f"{elapsed / total_moves * 1e6:.2f} us per move (drop + evaluation)")
        print(f"Wins: {results[GameStatus.WIN]}, ties: {results[GameStatus.TIE]}")
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    return cli.run(argv)


if __name__ == "__main__":
    sys.exit(main())
