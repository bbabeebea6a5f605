"""
rules.py - Turn sequencing for a dropfour game

ConnectFourGame drives a Board through one game: it validates the requested
column, places the current player's piece, checks for a win, declares a
draw when the board fills up, and otherwise passes the turn.
"""

from typing import List, Optional

from dropfour.debug import debug
from dropfour.game.board import Board
from dropfour.utils import WIDTH, GameResult, Player


class InvalidMoveError(ValueError):
    """The requested column is out of range or full."""


class GameOverError(RuntimeError):
    """A move was requested after the game finished."""


class ConnectFourGame:
    """Owns one Board and the outcome of the game being played on it."""

    def __init__(self):
        debug.debug("Initializing ConnectFourGame", "game")
        self.board = Board()
        self.result = GameResult.IN_PROGRESS
        self.moves_made = 0

    def reset(self) -> None:
        debug.debug("Resetting game", "game")
        self.board = Board()
        self.result = GameResult.IN_PROGRESS
        self.moves_made = 0

    def is_valid_move(self, column: int) -> bool:
        return (not self.result.is_game_over()
                and 0 <= column < WIDTH
                and self.board.column_has_room(column))

    def play_turn(self, column: int) -> GameResult:
        """
        Play one turn for the current player.

        Args:
            column: Zero-based column to drop into

        Returns:
            The game result after the move

        Raises:
            GameOverError: if the game has already finished
            InvalidMoveError: if the column is out of range or full
        """
        if self.result.is_game_over():
            raise GameOverError(f"game is over ({self.result.name})")
        if not 0 <= column < WIDTH:
            raise InvalidMoveError(f"column {column} out of range")
        if not self.board.column_has_room(column):
            raise InvalidMoveError(f"column {column} is full")

        player = self.board.current_player
        self.board.place_piece(column, player.color())
        self.moves_made += 1

        if self.board.check_for_win():
            self.result = GameResult.win_for(player)
            debug.info(f"{player} ({player.color()}) wins after {self.moves_made} moves", "game")
        elif self.board.is_full():
            self.result = GameResult.DRAW
            debug.info("Board is full, game drawn", "game")
        else:
            self.board.switch_player()

        return self.result

    def is_game_over(self) -> bool:
        return self.result.is_game_over()

    def get_winner(self) -> Optional[Player]:
        if self.result == GameResult.PLAYER_ONE_WIN:
            return Player.ONE
        if self.result == GameResult.PLAYER_TWO_WIN:
            return Player.TWO
        return None

    def get_current_player(self) -> Player:
        return self.board.current_player

    def get_valid_moves(self) -> List[int]:
        if self.result.is_game_over():
            return []
        return self.board.valid_columns()

    def render(self) -> str:
        return self.board.render()
