"""
geometry.py - Position arithmetic for the win scan

Positions are (x, y) pairs with x the column and y the row, row 0 at the
bottom. The scan only ever walks in four directions; the opposite four are
covered because every occupied cell is used as a starting point.
"""

from enum import Enum
from typing import List, NamedTuple, Tuple

from dropfour.utils import HEIGHT, WIDTH


class Position(NamedTuple):
    x: int
    y: int

    def on_board(self) -> bool:
        return 0 <= self.x < WIDTH and 0 <= self.y < HEIGHT


class Direction(Enum):
    """Scan directions as (dx, dy) unit vectors."""
    UP = (0, 1)
    UP_LEFT = (-1, 1)
    UP_RIGHT = (1, 1)
    RIGHT = (1, 0)

    @classmethod
    def all(cls) -> List['Direction']:
        return [cls.UP, cls.UP_LEFT, cls.UP_RIGHT, cls.RIGHT]

    @property
    def vector(self) -> Tuple[int, int]:
        return self.value

    def can_extend(self, pos: Position) -> bool:
        """Whether one step from ``pos`` stays on the board."""
        at_top = pos.y == HEIGHT - 1
        if self == Direction.UP:
            return not at_top
        if self == Direction.UP_LEFT:
            return not (at_top or pos.x == 0)
        if self == Direction.UP_RIGHT:
            return not (at_top or pos.x == WIDTH - 1)
        if self == Direction.RIGHT:
            return pos.x != WIDTH - 1
        raise AssertionError(f"unhandled direction {self!r}")

    def step(self, pos: Position) -> Position:
        """Adjacent position; only valid after ``can_extend`` returned True."""
        dx, dy = self.vector
        return Position(pos.x + dx, pos.y + dy)

    def step_back(self, pos: Position) -> Position:
        dx, dy = self.vector
        return Position(pos.x - dx, pos.y - dy)


def can_extend(direction: Direction, position: Position) -> bool:
    return direction.can_extend(position)


def step(direction: Direction, position: Position) -> Position:
    return direction.step(position)
