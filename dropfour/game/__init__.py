"""
dropfour.game - Core game mechanics

Board state, position geometry used by the win scan, and the game
orchestrator that sequences turns.
"""

from dropfour.game.board import Board, ColumnFullError
from dropfour.game.geometry import Direction, Position
from dropfour.game.rules import ConnectFourGame, GameOverError, InvalidMoveError

__all__ = ['Board', 'ColumnFullError', 'Direction', 'Position',
           'ConnectFourGame', 'GameOverError', 'InvalidMoveError']
