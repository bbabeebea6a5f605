"""
utils.py - Constants and enumerations shared across dropfour

Board dimensions, cell and player enumerations, the game outcome enum, and
the ASCII renderer used by the command-line interface.
"""

from enum import Enum, auto

import numpy as np

# Board dimensions are fixed for this game
WIDTH = 7
HEIGHT = 6
CONNECT_N = 4  # Pieces in a row needed to win


class CellState(Enum):
    """Occupancy of a single grid cell."""
    EMPTY = 0
    RED = 1
    BLACK = 2

    def symbol(self) -> str:
        return CELL_SYMBOLS[self]

    def __str__(self):
        return self.name.capitalize()


CELL_SYMBOLS = {
    CellState.EMPTY: " ",
    CellState.RED: "@",
    CellState.BLACK: "O",
}


class Player(Enum):
    """The two sides of a game. PlayerOne always moves first."""
    ONE = 1
    TWO = 2

    def color(self) -> CellState:
        """Color of the pieces this player drops."""
        if self == Player.ONE:
            return CellState.RED
        return CellState.BLACK

    def other(self) -> 'Player':
        if self == Player.ONE:
            return Player.TWO
        return Player.ONE

    def __str__(self):
        return "PlayerOne" if self == Player.ONE else "PlayerTwo"


class GameResult(Enum):
    """Outcome tracked by the game orchestrator."""
    IN_PROGRESS = auto()
    PLAYER_ONE_WIN = auto()
    PLAYER_TWO_WIN = auto()
    DRAW = auto()

    def is_game_over(self) -> bool:
        return self != GameResult.IN_PROGRESS

    @classmethod
    def win_for(cls, player: Player) -> 'GameResult':
        return cls.PLAYER_ONE_WIN if player == Player.ONE else cls.PLAYER_TWO_WIN


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render a grid as ASCII art, top row first.

    Args:
        grid: HEIGHT x WIDTH array of CellState values, row 0 at the bottom

    Returns:
        Multi-line string with a 1-based column footer
    """
    lines = []
    for row in range(HEIGHT - 1, -1, -1):
        line = ""
        for col in range(WIDTH):
            line += f"| {CellState(int(grid[row, col])).symbol()} "
        lines.append(line + "|")

    lines.append("".join(f"  {col + 1} " for col in range(WIDTH)))
    return "\n".join(lines)
