from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple


class Player(Enum):
    """The two sides of the game. Values match the board array encoding."""
    RED = 1
    YELLOW = -1

    def opponent(self) -> "Player":
        return Player(-self.value)

    def __str__(self):
        return self.name.capitalize()


@dataclass(frozen=True)
class Move:
    """A piece dropped by `player` into `column`."""
    player: Player
    column: int


class Board(ABC):
    """
    Abstract Base Class for a board position consumed by the search engine.

    A Board is never mutated by the engine: apply_move returns a new board.
    """

    row_count: int
    column_count: int
    win_length: int

    @abstractmethod
    def has_winner(self) -> Optional[Player]:
        """
        Returns the player owning a complete win location, or None.
        """
        pass

    @abstractmethod
    def win_locations(self) -> List[Tuple[Optional[Player], ...]]:
        """
        Returns the contents of every line of win_length cells
        (horizontal, vertical and diagonal) on the grid.
        """
        pass

    @abstractmethod
    def get_cell(self, row: int, col: int) -> Optional[Player]:
        """
        Returns the owner of the cell, or None if it is empty.
        """
        pass

    @abstractmethod
    def legal_moves(self, player: Player) -> List[Move]:
        """
        Returns one move per non-full column, in column order.
        """
        pass

    @abstractmethod
    def apply_move(self, move: Move) -> "Board":
        """
        Returns the board after the move has been played.
        """
        pass

    def num_empty(self) -> int:
        """Count the empty cells on the whole grid."""
        count = 0
        for row in range(self.row_count):
            for col in range(self.column_count):
                if self.get_cell(row, col) is None:
                    count += 1
        return count
