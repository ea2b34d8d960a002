"""
cli.py - Command-line interface for the Connect Four engine

This module provides a terminal front end: a hot-seat game for two people,
a replay command that feeds a list of columns into a fresh engine, and a
random-play benchmark.
"""

import argparse
import random
import sys
from typing import List, Optional

from connectfour.debug import debug, DebugLevel
from connectfour.game.engine import GameEngine
from connectfour.game.outcome import MoveOutcome, MoveResult
from connectfour.utils import ROWS, COLS, CONNECT_N, Player, GameStatus

QUIT = 'q'
RESTART = 'r'

PLAYER_CHOICES = {'one': Player.ONE, 'two': Player.TWO}


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser shared by the CLI and run.py."""
    parser = argparse.ArgumentParser(description='Connect Four CLI')

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('--rows', type=int, default=ROWS, help='Number of board rows')
    common.add_argument('--columns', type=int, default=COLS, help='Number of board columns')
    common.add_argument('--win-length', type=int, default=CONNECT_N,
                        help='Tokens in a row needed to win')
    common.add_argument('--first', choices=sorted(PLAYER_CHOICES), default='one',
                        help='Player who moves first')
    common.add_argument('--debug', action='store_true', help='Enable debug logging')
    common.add_argument('--debug-level', type=str, default='warning',
                        choices=[level.name.lower() for level in DebugLevel],
                        help='Logging level')
    common.add_argument('--log-file', type=str, default=None, help='Also write logs to this file')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    subparsers.add_parser('play', parents=[common], help='Play a two-player game in the terminal')

    replay_parser = subparsers.add_parser('replay', parents=[common],
                                          help='Replay a comma-separated list of columns')
    replay_parser.add_argument('--moves', type=str, required=True,
                               help='Columns to drop into, e.g. 3,3,4,2')

    benchmark_parser = subparsers.add_parser('benchmark', parents=[common],
                                             help='Benchmark random play')
    benchmark_parser.add_argument('--iterations', type=int, default=1000,
                                  help='Number of games to play')
    benchmark_parser.add_argument('--seed', type=int, default=None, help='Random seed')

    return parser


def parse_moves(moves_str: str) -> List[int]:
    """
    Parse a comma-separated list of column numbers.

    Raises:
        ValueError: If an entry is not an integer
    """
    return [int(part) for part in moves_str.split(',') if part.strip()]


class SimpleCLI:
    """Simple command-line interface for Connect Four."""

    def __init__(self, args: Optional[argparse.Namespace] = None, out=None):
        """
        Initialize the CLI.

        Args:
            args: Pre-parsed arguments; parsed from sys.argv when omitted
            out: Stream to write to (stdout by default)
        """
        self.args = args
        self.out = out or sys.stdout
        self.engine: Optional[GameEngine] = None

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments and configure logging."""
        self.args = build_parser().parse_args(argv)
        self.configure_debug()

    def configure_debug(self) -> None:
        if getattr(self.args, 'debug', False):
            debug.configure(level=DebugLevel.DEBUG)
        elif getattr(self.args, 'debug_level', None):
            debug.set_from_string(self.args.debug_level)
        if getattr(self.args, 'log_file', None):
            debug.configure(log_file=self.args.log_file)

    def say(self, text: str = "") -> None:
        print(text, file=self.out)

    def new_engine(self) -> GameEngine:
        """Build a fresh engine from the command-line settings."""
        return GameEngine(
            rows=self.args.rows,
            columns=self.args.columns,
            win_length=self.args.win_length,
            starting_player=PLAYER_CHOICES[self.args.first],
        )

    def run(self) -> int:
        """
        Run the CLI based on the parsed arguments.

        Returns:
            Process exit code
        """
        if not self.args:
            self.parse_args()

        commands = {
            'play': self.play_game,
            'replay': self.replay,
            'benchmark': self.benchmark,
        }
        command = commands.get(self.args.command)
        if command is None:
            self.say("Please specify a command. Use --help for options.")
            return 1

        try:
            self.engine = self.new_engine()
        except ValueError as e:
            self.say(f"Invalid game settings: {e}")
            return 2

        return command()

    def report(self, result: MoveResult) -> None:
        """Translate a move result into a message for the players."""
        if result.outcome == MoveOutcome.COLUMN_FULL:
            self.say(f"Column {result.column} is full, pick another one.")
        elif result.outcome == MoveOutcome.INVALID_COLUMN:
            self.say(f"Column must be between 0 and {self.engine.columns - 1}.")
        elif result.outcome == MoveOutcome.GAME_ALREADY_OVER:
            self.say("The game is already over.")
        else:
            self.say(self.engine.render())

    def announce_result(self) -> None:
        status = self.engine.status
        if status.winner is not None:
            cells = ", ".join(f"({r}, {c})" for r, c in self.engine.winning_line)
            self.say(f"Player {status.winner} ({status.winner.name}) wins! Winning line: {cells}")
        elif status == GameStatus.DRAW:
            self.say("It's a draw!")

    def play_game(self) -> int:
        """Play a hot-seat game in the terminal."""
        self.say("Starting a new Connect Four game!")
        self.say(f"Enter a column number (0-{self.engine.columns - 1}) to drop a token.")
        self.say(f"Other commands: '{QUIT}' to quit, '{RESTART}' to restart.")
        self.say(self.engine.render())

        while not self.engine.is_game_over():
            command = self.get_human_move(self.engine.current_player)

            if command is None:
                continue
            if command == QUIT:
                self.say("Quitting game.")
                return 0
            if command == RESTART:
                self.engine = self.new_engine()
                self.say("Game restarted.")
                self.say(self.engine.render())
                continue

            self.report(self.engine.drop_token(command))

        self.say("Game over!")
        self.announce_result()
        return 0

    def get_human_move(self, player: Player):
        """
        Read one move from the terminal.

        Returns:
            Column index, QUIT, RESTART, or None if the input was not understood
        """
        try:
            user_input = input(f"Player {player} ({player.name}), your move: ").strip().lower()
        except EOFError:
            return QUIT

        if user_input in (QUIT, RESTART):
            return user_input

        try:
            return int(user_input)
        except ValueError:
            self.say("Invalid input. Please enter a column number or a command.")
            return None

    def replay(self) -> int:
        """Feed a list of columns into a fresh engine and show each outcome."""
        try:
            moves = parse_moves(self.args.moves)
        except ValueError as e:
            self.say(f"Error parsing moves: {e}")
            return 2

        rejected = 0
        for number, column in enumerate(moves, start=1):
            result = self.engine.drop_token(column)
            self.say(f"{number:>3}. {result.describe()}")
            if not result.accepted:
                rejected += 1

        self.say(self.engine.render())
        self.say(f"Status: {self.engine.status.name}")
        self.announce_result()
        return 1 if rejected else 0

    def benchmark(self) -> int:
        """Benchmark random play on fresh engines."""
        iterations = self.args.iterations
        rng = random.Random(self.args.seed)
        self.say(f"Running benchmark with {iterations} games...")

        outcomes = {status: 0 for status in GameStatus if status.is_game_over()}
        total_moves = 0

        debug.start_timer("benchmark")
        for _ in range(iterations):
            engine = self.new_engine()
            while not engine.is_game_over():
                engine.drop_token(rng.choice(engine.get_valid_moves()))
                total_moves += 1
            outcomes[engine.status] += 1
        elapsed = debug.end_timer("benchmark", "cli") or 0.0

        self.say(f"Played {iterations} games with {total_moves} moves in {elapsed:.3f} seconds")
        if total_moves:
            self.say(f"{elapsed / total_moves * 1000:.4f} ms per move")
        for status, count in outcomes.items():
            self.say(f"  {status.name}: {count}")
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    cli.parse_args(argv)
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())
