"""
cli.py - Command-line interface for dropfour

Subcommands:
    play       two players take turns at the same terminal
    analyze    load a grid and report win/room information for it
    benchmark  time the win checks and random full games
"""

import argparse
import random
import sys
from typing import List, Optional

import numpy as np

from dropfour.debug import debug, DebugLevel
from dropfour.game.board import Board
from dropfour.game.geometry import Position
from dropfour.game.rules import ConnectFourGame
from dropfour.utils import HEIGHT, WIDTH, CellState, GameResult, Player

QUIT_COMMANDS = {"q", "quit", "exit"}
COLUMN_CHOICES = [str(col) for col in range(1, WIDTH + 1)]


def parse_column(raw: str) -> int:
    """
    Convert a 1-based column typed by a player into a 0-based index.

    Raises:
        ValueError: if the text is not a column number between 1 and WIDTH
    """
    text = raw.strip()
    if text not in COLUMN_CHOICES:
        raise ValueError(f"column must be one of 1-{WIDTH}, got {raw!r}")
    return COLUMN_CHOICES.index(text)


def parse_position(text: str) -> Board:
    """
    Build a board from ROWS*COLS comma separated cell values.

    Values are 0 (empty), 1 (red) or 2 (black), bottom row first.
    """
    values = [int(v) for v in text.split(',')]
    if len(values) != HEIGHT * WIDTH:
        raise ValueError(f"position must have {HEIGHT * WIDTH} values, got {len(values)}")
    valid = {state.value for state in CellState}
    if any(v not in valid for v in values):
        raise ValueError(f"cell values must be one of {sorted(valid)}")

    board = Board()
    board.cells = np.array(values, dtype=np.int8).reshape(HEIGHT, WIDTH)
    return board


class SimpleCLI:
    """Interactive and diagnostic command-line front end."""

    def __init__(self):
        self.game = ConnectFourGame()
        self.args = None

    def build_parser(self) -> argparse.ArgumentParser:
        common = argparse.ArgumentParser(add_help=False)
        common.add_argument('--debug', action='store_true', help='Shortcut for --debug-level debug')
        common.add_argument('--debug-level', default=None,
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging level')
        common.add_argument('--log-file', default=None, help='Also write log records to this file')

        parser = argparse.ArgumentParser(prog='dropfour', description='Connect Four rule engine')
        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        subparsers.add_parser('play', parents=[common], help='Play a two-player game')

        analyze_parser = subparsers.add_parser('analyze', parents=[common],
                                               help='Analyze a board position')
        analyze_parser.add_argument('--position', type=str, required=True,
                                    help=f'{HEIGHT * WIDTH} comma separated values, bottom row first')

        benchmark_parser = subparsers.add_parser('benchmark', parents=[common],
                                                 help='Benchmark win detection')
        benchmark_parser.add_argument('--iterations', type=int, default=1000,
                                      help='Number of iterations')
        benchmark_parser.add_argument('--seed', type=int, default=None, help='Random seed')
        return parser

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        self.args = self.build_parser().parse_args(argv)

        if getattr(self.args, 'debug', False):
            debug.configure(level=DebugLevel.DEBUG)
        elif getattr(self.args, 'debug_level', None):
            debug.set_from_string(self.args.debug_level)
        if getattr(self.args, 'log_file', None):
            debug.configure(log_file=self.args.log_file)

    def run(self, argv: Optional[List[str]] = None) -> int:
        if self.args is None:
            self.parse_args(argv)

        if self.args.command == 'play':
            self.play_game()
        elif self.args.command == 'analyze':
            return self.analyze_position()
        elif self.args.command == 'benchmark':
            return self.benchmark()
        else:
            print("Please specify a command. Use --help for options.")
            return 1
        return 0

    # play

    def read_line(self) -> Optional[str]:
        try:
            return input()
        except EOFError:
            return None

    def get_player_column(self) -> Optional[int]:
        """
        Prompt until the player names a column with room.

        Returns:
            Zero-based column, or None if the player quit
        """
        while True:
            raw = self.read_line()
            if raw is None or raw.strip().lower() in QUIT_COMMANDS:
                return None

            try:
                column = parse_column(raw)
            except ValueError as e:
                debug.debug(f"Rejected input {raw!r}: {e}", "cli")
                print("Invalid selection, try again.")
                continue

            if self.game.board.column_has_room(column):
                return column
            print("Invalid selection (Row is full.)")

    def play_game(self) -> GameResult:
        """Run one interactive game to completion or until a player quits."""
        self.game.reset()

        while not self.game.is_game_over():
            print(self.game.render())
            color = self.game.get_current_player().color()
            print(f"{color}, choose a row number. (1-{WIDTH})")

            column = self.get_player_column()
            if column is None:
                print("Game quit.")
                return self.game.result

            self.game.play_turn(column)

        print(self.game.render())
        winner = self.game.get_winner()
        if winner is not None:
            print(f"{winner.color()} wins!")
        else:
            print("It's a draw!")
        return self.game.result

    # analyze

    def analyze_position(self) -> int:
        try:
            board = parse_position(self.args.position)
        except ValueError as e:
            print(f"Error parsing position: {e}")
            return 1

        print("Loaded position:")
        print(board.render())

        for player in (Player.ONE, Player.TWO):
            board.current_player = player
            line = board.winning_line()
            status = "wins" if board.check_for_win() else "no win"
            print(f"{player} ({player.color()}): {status}, longest chain {board.longest_chain()}")
            if line:
                cells = ", ".join(f"({p.x + 1}, {p.y + 1})" for p in line)
                print(f"  winning line: {cells}")

        open_columns = [col + 1 for col in board.valid_columns()]
        if open_columns:
            print(f"Columns with room: {open_columns}")
        else:
            print("Board is full")
        return 0

    # benchmark

    def random_game(self) -> ConnectFourGame:
        game = ConnectFourGame()
        while not game.is_game_over():
            game.play_turn(random.choice(game.get_valid_moves()))
        return game

    def benchmark(self) -> int:
        iterations = self.args.iterations
        if iterations < 1:
            print(f"Error: --iterations must be at least 1, got {iterations}")
            return 1
        if self.args.seed is not None:
            random.seed(self.args.seed)
        print(f"Running benchmark with {iterations} iterations...")

        boards = []
        last_positions = []
        for _ in range(iterations):
            board = Board()
            column = None
            for _ in range(random.randint(7, 20)):
                column = random.choice(board.valid_columns())
                row = board.place_piece(column, board.current_player.color())
                board.switch_player()
            board.switch_player()
            boards.append(board)
            last_positions.append(Position(column, row))

        debug.start_timer("exhaustive")
        for board in boards:
            board.check_for_win()
        exhaustive = debug.end_timer("exhaustive", "cli")

        debug.start_timer("localized")
        for board, pos in zip(boards, last_positions):
            board.check_for_win_from(pos)
        localized = debug.end_timer("localized", "cli")

        print(f"Exhaustive win check: {exhaustive / iterations * 1000:.4f} ms per board")
        print(f"Localized win check:  {localized / iterations * 1000:.4f} ms per board")

        games = max(1, iterations // 10)
        debug.start_timer("games")
        total_moves = 0
        for _ in range(games):
            total_moves += self.random_game().moves_made
        elapsed = debug.end_timer("games", "cli")
        print(f"Played {games} random games ({total_moves} moves): "
              f"{elapsed / games * 1000:.4f} ms per game")
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    cli = SimpleCLI()
    return cli.run(argv)


if __name__ == "__main__":
    sys.exit(main())
