from typing import List, Optional

from minimax_light.game.game import Board, Move, Player


class SearchNode:
    """
    A node of the game tree: a board, the player to move on it, and the
    move that produced it from the parent position.

    Each node owns its children outright. `value` is written once by the
    minimax pass and never changed afterwards.
    """

    def __init__(self, player: Player, board: Board, last_move: Optional[Move] = None):
        self.player = player
        self.board = board
        self.last_move = last_move

        self.children: List["SearchNode"] = []
        self._value: Optional[int] = None

    def __repr__(self):
        return (f"SearchNode(player={self.player}, last_move={self.last_move}, "
                f"children={len(self.children)}, value={self._value})")

    @property
    def mover(self) -> Optional[Player]:
        """The player who made last_move, None at the root."""
        if self.last_move is None:
            return None
        return self.player.opponent()

    @property
    def value(self) -> Optional[int]:
        return self._value

    @value.setter
    def value(self, value: int):
        if self._value is not None:
            raise RuntimeError(f"Value of {self!r} is already assigned")
        self._value = value

    def is_leaf(self) -> bool:
        return len(self.children) == 0

    def is_terminal(self) -> bool:
        return self.board.has_winner() is not None

    def initialize_children(self):
        """
        Create one child per legal move of the player to move.
        Terminal positions get no children.
        """
        if self.children or self.is_terminal():
            return

        for move in self.board.legal_moves(self.player):
            child_board = self.board.apply_move(move)
            self.children.append(SearchNode(self.player.opponent(), child_board, move))

    def count_nodes(self) -> int:
        """Number of nodes in the subtree rooted here, including this one."""
        return 1 + sum(child.count_nodes() for child in self.children)
