from functools import lru_cache

import numpy as np

from minimax_light.config import GAME_CONFIG
from minimax_light.game.game import Board, Move, Player


_SYMBOLS = {1: 'X', -1: 'O', 0: '.'}
_CELL_TO_PLAYER = {1: Player.RED, -1: Player.YELLOW, 0: None}


@lru_cache(maxsize=None)
def _line_indices(row_count, column_count, win_length):
    """
    Row and column index arrays for every win location on the grid.

    Returns:
        (rows, cols), each of shape (num_locations, win_length)
    """
    lines = []
    directions = [(0, 1), (1, 0), (1, 1), (-1, 1)]  # right, down, down-right, up-right
    for dr, dc in directions:
        for row in range(row_count):
            for col in range(column_count):
                end_row = row + dr * (win_length - 1)
                end_col = col + dc * (win_length - 1)
                if 0 <= end_row < row_count and 0 <= end_col < column_count:
                    lines.append([(row + dr * i, col + dc * i) for i in range(win_length)])

    # Shared by every board of this size through the cache
    if not lines:
        coords = np.zeros((0, win_length, 2), dtype=np.intp)
    else:
        coords = np.array(lines, dtype=np.intp)
    coords.flags.writeable = False
    return coords[:, :, 0], coords[:, :, 1]


class ConnectFour(Board):
    """
    Connect Four (Four in a Row) board position.

    Board: row_count x column_count, row 0 is the top
    Cells: 0 empty, 1 Player.RED, -1 Player.YELLOW
    Moves: column index - disc drops to lowest empty row
    """

    def __init__(self, row_count=None, column_count=None, win_length=None, state=None):
        self.row_count = row_count if row_count is not None else GAME_CONFIG['row_count']
        self.column_count = column_count if column_count is not None else GAME_CONFIG['column_count']
        self.win_length = win_length if win_length is not None else GAME_CONFIG['win_length']

        if state is None:
            self._state = np.zeros((self.row_count, self.column_count), dtype=np.int8)
        else:
            state = np.asarray(state)
            if state.shape != (self.row_count, self.column_count):
                raise ValueError(
                    f"State shape {state.shape} does not match board "
                    f"{self.row_count}x{self.column_count}"
                )
            if not np.isin(state, (-1, 0, 1)).all():
                raise ValueError("State cells must be 0, 1 or -1")
            self._state = state.astype(np.int8)

        self._line_rows, self._line_cols = _line_indices(
            self.row_count, self.column_count, self.win_length
        )

    def __repr__(self):
        return f"ConnectFour({self.row_count}x{self.column_count}, win={self.win_length})"

    def __str__(self):
        header = " " + " ".join(str(col) for col in range(self.column_count))
        lines = [header, " " + "-" * (2 * self.column_count - 1)]
        for row in self._state:
            lines.append(" " + " ".join(_SYMBOLS[int(cell)] for cell in row))
        return "\n".join(lines)

    @property
    def state(self):
        """Copy of the underlying board array."""
        return self._state.copy()

    def get_cell(self, row, col):
        return _CELL_TO_PLAYER[int(self._state[row, col])]

    def has_winner(self):
        if self._line_rows.size == 0:
            return None

        sums = self._state[self._line_rows, self._line_cols].sum(axis=1, dtype=np.int32)
        complete = np.flatnonzero(np.abs(sums) == self.win_length)
        if complete.size == 0:
            return None
        return Player(int(np.sign(sums[complete[0]])))

    def win_locations(self):
        values = self._state[self._line_rows, self._line_cols]
        return [tuple(_CELL_TO_PLAYER[int(cell)] for cell in line) for line in values]

    def legal_moves(self, player):
        # A column is playable if its top row is empty
        columns = np.flatnonzero(self._state[0, :] == 0)
        return [Move(player, int(col)) for col in columns]

    def apply_move(self, move):
        """
        Apply gravity-based move: drop disc in column to lowest empty row.

        Returns:
            New board with the disc placed
        """
        column = move.column
        if not 0 <= column < self.column_count:
            raise ValueError(f"Column {column} is out of range")

        state = self._state.copy()
        for row in range(self.row_count - 1, -1, -1):
            if state[row, column] == 0:
                state[row, column] = move.player.value
                return ConnectFour(self.row_count, self.column_count, self.win_length, state=state)

        raise ValueError(f"Column {column} is full")

    def num_empty(self):
        return int(np.count_nonzero(self._state == 0))
