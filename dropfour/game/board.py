"""
board.py - Board state and win detection for dropfour

The Board owns the grid of cells and the marker for whose turn it is. It
places pieces, switches turns when told to, and answers whether the side
to move has a run of CONNECT_N or more.
"""

from typing import List

import numpy as np

from dropfour.debug import debug
from dropfour.game.geometry import Direction, Position
from dropfour.utils import (HEIGHT, WIDTH, CONNECT_N, CellState, Player,
                            render_board_ascii)


class ColumnFullError(RuntimeError):
    """A piece was placed into a column with no empty row."""


class Board:
    """
    A 7x6 Connect Four board.

    ``cells`` is indexed ``[row, column]`` with row 0 at the bottom and holds
    ``CellState`` values. Gravity is enforced by ``place_piece``; nothing
    else writes to the grid.
    """

    def __init__(self):
        self.cells = np.full((HEIGHT, WIDTH), CellState.EMPTY.value, dtype=np.int8)
        self.current_player = Player.ONE
        debug.trace("Created empty board", "board")

    def copy(self) -> 'Board':
        new_board = Board()
        new_board.cells = self.cells.copy()
        new_board.current_player = self.current_player
        return new_board

    def cell(self, position: Position) -> CellState:
        return CellState(int(self.cells[position.y, position.x]))

    def get_state(self) -> np.ndarray:
        """Copy of the grid, safe for callers to modify."""
        return self.cells.copy()

    # Placement and turns

    def column_has_room(self, column: int) -> bool:
        """True iff ``column`` still has an empty cell."""
        return bool(np.any(self.cells[:, column] == CellState.EMPTY.value))

    def valid_columns(self) -> List[int]:
        return [col for col in range(WIDTH) if self.column_has_room(col)]

    def is_full(self) -> bool:
        return not np.any(self.cells == CellState.EMPTY.value)

    def place_piece(self, column: int, color: CellState) -> int:
        """
        Drop a piece of ``color`` into ``column``.

        Args:
            column: Zero-based column, already range checked by the caller
            color: Color of the piece to drop

        Returns:
            The row the piece landed in

        Raises:
            ColumnFullError: if the column has no room. Callers are expected
                to check ``column_has_room`` first.
        """
        for row in range(HEIGHT):
            if self.cells[row, column] == CellState.EMPTY.value:
                self.cells[row, column] = color.value
                debug.debug(f"Placed {color} at ({column}, {row})", "board")
                return row

        debug.error(f"Attempted to place {color} into full column {column}", "board")
        raise ColumnFullError(f"column {column} is full")

    def switch_player(self) -> None:
        self.current_player = self.current_player.other()
        debug.debug(f"Turn passes to {self.current_player}", "board")

    # Win detection

    def _chain_from(self, anchor: Position, direction: Direction) -> int:
        """Length of the same-colored run starting at ``anchor`` walking one way."""
        color = self.cells[anchor.y, anchor.x]
        length = 1
        pos = anchor
        while direction.can_extend(pos):
            pos = direction.step(pos)
            if self.cells[pos.y, pos.x] != color:
                break
            length += 1
        return length

    def _anchors(self):
        """Occupied cells holding the current player's color, bottom row first."""
        color = self.current_player.color().value
        for row in range(HEIGHT):
            for col in range(WIDTH):
                if self.cells[row, col] == CellState.EMPTY.value:
                    continue
                if self.cells[row, col] != color:
                    continue
                yield Position(col, row)

    def longest_chain(self) -> int:
        """
        Longest single-direction run of the current player's color.

        Every occupied cell of that color is tried as an anchor in each of
        the four scan directions. Opposite directions are never combined.
        """
        longest = 0
        for anchor in self._anchors():
            for direction in Direction.all():
                longest = max(longest, self._chain_from(anchor, direction))
        return longest

    def check_for_win(self) -> bool:
        """True iff the current player has CONNECT_N or more in a row."""
        longest = self.longest_chain()
        debug.debug(f"Longest chain for {self.current_player.color()}: {longest}", "board")
        return longest >= CONNECT_N

    def check_for_win_from(self, position: Position) -> bool:
        """
        Win check restricted to lines through ``position``.

        Called with the cell just filled, this agrees with ``check_for_win``
        for any board reached through normal play.
        """
        color = self.current_player.color().value
        if self.cells[position.y, position.x] != color:
            return False

        for direction in Direction.all():
            count = 1
            pos = direction.step(position)
            while pos.on_board() and self.cells[pos.y, pos.x] == color:
                count += 1
                pos = direction.step(pos)
            pos = direction.step_back(position)
            while pos.on_board() and self.cells[pos.y, pos.x] == color:
                count += 1
                pos = direction.step_back(pos)
            if count >= CONNECT_N:
                return True
        return False

    def winning_line(self) -> List[Position]:
        """Cells of the first qualifying run for the current player, or []."""
        for anchor in self._anchors():
            for direction in Direction.all():
                length = self._chain_from(anchor, direction)
                if length < CONNECT_N:
                    continue
                line = [anchor]
                for _ in range(length - 1):
                    line.append(direction.step(line[-1]))
                return line
        return []

    def render(self) -> str:
        return render_board_ascii(self.cells)

    def __str__(self) -> str:
        return self.render()
