"""
Unit tests for the Connect Four board.

Tests verify:
1. Gravity drops pieces to the lowest empty row
2. Legal moves skip full columns
3. Win detection in all four directions
4. Win location enumeration matches the grid geometry
"""

import numpy as np
import pytest
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / 'src'))

from minimax_light.game import ConnectFour, Move, Player


class TestPlayer:

    def test_opponent_is_involutive(self):
        for player in Player:
            assert player.opponent() != player
            assert player.opponent().opponent() == player


class TestMoves:
    """Test move generation and application."""

    def test_drop_to_bottom(self):
        board = ConnectFour()
        board = board.apply_move(Move(Player.RED, 3))
        board = board.apply_move(Move(Player.YELLOW, 3))

        assert board.get_cell(5, 3) == Player.RED
        assert board.get_cell(4, 3) == Player.YELLOW
        assert board.get_cell(3, 3) is None

    def test_apply_move_does_not_mutate(self):
        board = ConnectFour()
        board.apply_move(Move(Player.RED, 0))

        assert board.num_empty() == 42
        assert board.get_cell(5, 0) is None

    def test_full_column_not_legal(self):
        board = ConnectFour()
        player = Player.RED
        for _ in range(6):
            board = board.apply_move(Move(player, 2))
            player = player.opponent()

        columns = [move.column for move in board.legal_moves(Player.RED)]
        assert columns == [0, 1, 3, 4, 5, 6]

        with pytest.raises(ValueError):
            board.apply_move(Move(Player.RED, 2))

    def test_out_of_range_column(self):
        board = ConnectFour()
        with pytest.raises(ValueError):
            board.apply_move(Move(Player.RED, 7))

    def test_legal_moves_carry_player(self):
        board = ConnectFour()
        moves = board.legal_moves(Player.YELLOW)

        assert len(moves) == 7
        assert all(move.player == Player.YELLOW for move in moves)

    def test_rejects_bad_state(self):
        with pytest.raises(ValueError):
            ConnectFour(state=np.zeros((5, 7)))
        with pytest.raises(ValueError):
            ConnectFour(state=np.full((6, 7), 2))


class TestWinDetection:
    """Test has_winner in every direction."""

    def test_empty_board_has_no_winner(self):
        assert ConnectFour().has_winner() is None

    def test_horizontal_win(self):
        state = np.zeros((6, 7))
        state[5, 2:6] = 1
        assert ConnectFour(state=state).has_winner() == Player.RED

    def test_vertical_win(self):
        state = np.zeros((6, 7))
        state[2:6, 0] = -1
        assert ConnectFour(state=state).has_winner() == Player.YELLOW

    def test_diagonal_win(self):
        state = np.zeros((6, 7))
        for i in range(4):
            state[2 + i, i] = 1
        assert ConnectFour(state=state).has_winner() == Player.RED

    def test_anti_diagonal_win(self):
        state = np.zeros((6, 7))
        for i in range(4):
            state[5 - i, 3 + i] = -1
        assert ConnectFour(state=state).has_winner() == Player.YELLOW

    def test_three_is_not_a_win(self):
        state = np.zeros((6, 7))
        state[5, 0:3] = 1
        assert ConnectFour(state=state).has_winner() is None

    def test_one_row_board(self):
        board = ConnectFour(row_count=1, column_count=4)
        for col in range(4):
            board = board.apply_move(Move(Player.RED, col))
        assert board.has_winner() == Player.RED


class TestWinLocations:

    def test_standard_board_count(self):
        # 24 horizontal, 21 vertical, 12 + 12 diagonal
        locations = ConnectFour().win_locations()
        assert len(locations) == 69
        assert all(len(location) == 4 for location in locations)

    def test_one_row_board_has_single_location(self):
        locations = ConnectFour(row_count=1, column_count=4).win_locations()
        assert locations == [(None, None, None, None)]

    def test_cells_reflect_pieces(self):
        board = ConnectFour(row_count=1, column_count=4)
        board = board.apply_move(Move(Player.RED, 0))
        board = board.apply_move(Move(Player.YELLOW, 3))

        assert board.win_locations() == [(Player.RED, None, None, Player.YELLOW)]

    def test_cached_line_indices_are_read_only(self):
        first = ConnectFour()
        second = ConnectFour()

        with pytest.raises(ValueError):
            first._line_rows[0, 0] = 5
        assert second.win_locations() == first.win_locations()
        assert len(ConnectFour(row_count=1, column_count=3).win_locations()) == 0

    def test_num_empty(self):
        board = ConnectFour().apply_move(Move(Player.RED, 3))
        assert board.num_empty() == 41
