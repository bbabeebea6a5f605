"""Tests for piece placement, turn switching and column queries."""

import numpy as np
import pytest

from dropfour.game.board import Board, ColumnFullError
from dropfour.game.geometry import Position
from dropfour.utils import HEIGHT, WIDTH, CellState, Player


class TestNewBoard:
    def test_all_cells_empty(self, board):
        assert board.cells.shape == (HEIGHT, WIDTH)
        assert np.all(board.cells == CellState.EMPTY.value)

    def test_player_one_starts(self, board):
        assert board.current_player == Player.ONE
        assert board.current_player.color() == CellState.RED

    def test_every_column_has_room(self, board):
        assert board.valid_columns() == list(range(WIDTH))
        assert not board.is_full()


class TestPlacement:
    @pytest.mark.parametrize("column", range(WIDTH))
    def test_gravity_fills_bottom_up(self, board, column):
        for expected_row in range(HEIGHT):
            assert board.place_piece(column, CellState.RED) == expected_row
            assert board.cell(Position(column, expected_row)) == CellState.RED

    @pytest.mark.parametrize("column", range(WIDTH))
    def test_full_column_raises(self, board, column):
        for _ in range(HEIGHT):
            board.place_piece(column, CellState.BLACK)
        with pytest.raises(ColumnFullError):
            board.place_piece(column, CellState.BLACK)

    def test_full_column_left_untouched(self, board):
        for i in range(HEIGHT):
            board.place_piece(2, CellState.RED if i % 2 == 0 else CellState.BLACK)
        before = board.get_state()
        with pytest.raises(ColumnFullError):
            board.place_piece(2, CellState.RED)
        assert np.array_equal(board.cells, before)

    def test_place_touches_one_cell(self, board):
        board.place_piece(3, CellState.RED)
        board.place_piece(3, CellState.BLACK)
        assert np.count_nonzero(board.cells) == 2
        assert board.cell(Position(3, 0)) == CellState.RED
        assert board.cell(Position(3, 1)) == CellState.BLACK

    def test_place_does_not_switch_player(self, board):
        board.place_piece(0, CellState.RED)
        assert board.current_player == Player.ONE


class TestColumnHasRoom:
    def test_room_until_full(self, board):
        for placed in range(HEIGHT):
            assert board.column_has_room(4)
            board.place_piece(4, CellState.RED)
        assert not board.column_has_room(4)
        assert 4 not in board.valid_columns()
        # neighbours are unaffected
        assert board.column_has_room(3)
        assert board.column_has_room(5)

    def test_full_board(self, board):
        for col in range(WIDTH):
            for _ in range(HEIGHT):
                board.place_piece(col, CellState.BLACK)
        assert board.is_full()
        assert board.valid_columns() == []


class TestSwitchPlayer:
    def test_switch_toggles(self, board):
        board.switch_player()
        assert board.current_player == Player.TWO
        assert board.current_player.color() == CellState.BLACK

    def test_switch_twice_is_identity(self, board):
        board.switch_player()
        board.switch_player()
        assert board.current_player == Player.ONE


class TestCopyAndRender:
    def test_copy_is_independent(self, board):
        board.place_piece(0, CellState.RED)
        board.switch_player()
        clone = board.copy()
        clone.place_piece(0, CellState.BLACK)
        assert clone.current_player == Player.TWO
        assert board.cell(Position(0, 1)) == CellState.EMPTY

    def test_get_state_is_a_copy(self, board):
        state = board.get_state()
        state[0, 0] = CellState.RED.value
        assert board.cell(Position(0, 0)) == CellState.EMPTY

    def test_render_top_row_first(self, board):
        board.place_piece(0, CellState.RED)
        board.place_piece(1, CellState.BLACK)
        lines = board.render().splitlines()
        assert len(lines) == HEIGHT + 1
        assert lines[0] == "|   " * WIDTH + "|"
        assert lines[HEIGHT - 1] == "| @ | O " + "|   " * (WIDTH - 2) + "|"
        assert lines[-1].split() == [str(c) for c in range(1, WIDTH + 1)]
        assert str(board) == board.render()
