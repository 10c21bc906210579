"""
Minimax move selection for Connect Four.

The engine expands the full game tree to a fixed depth, scores every leaf
with the static evaluator, and backs the scores up to the root:

    def minimax(node):
        if node is a leaf:
            node.value = evaluate_board(node.board, self.player)
            return
        best = None
        for child in node.children:
            minimax(child)
            if best is None:
                best = child.value                 # first child seeds the bound
            if child.player == self.player:        # opponent moved into child
                best = min(best, child.value)
            else:                                  # we moved into child
                best = max(best, child.value)
        node.value = best

All scores are from self.player's point of view, so there is no negation
between plies. Every root child whose value equals the root value is a best
move; ties are returned as-is rather than broken.
"""

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List

from minimax_light.config import ENGINE_CONFIG
from minimax_light.engine.evaluator import evaluate_board
from minimax_light.engine.node import SearchNode
from minimax_light.engine.tree import build_game_tree, validate_depth
from minimax_light.game.game import Board, Move, Player


logger = logging.getLogger(__name__)


class Solver(ABC):
    """Anything that can propose moves for a position."""

    @abstractmethod
    def get_moves(self, board: Board) -> List[Move]:
        """
        Returns the moves this solver considers best on board.
        An empty list means the game is already decided.
        """
        pass


@dataclass
class SearchResult:
    """Result of a minimax search."""
    best_moves: List[Move]
    score: int
    depth: int
    nodes_searched: int
    time_ms: int


class MinimaxEngine(Solver):
    """
    Fixed-depth minimax search without pruning.

    The tree is built fresh for every call and discarded afterwards; nothing
    is cached between searches.
    """

    def __init__(self, player: Player, depth: int = ENGINE_CONFIG['default_depth']):
        """
        Args:
            player: The player the engine chooses moves for
            depth: Plies to search, 0 to MAX_DEPTH

        Raises:
            InvalidArgumentError: depth is out of range
        """
        validate_depth(depth)
        self.player = player
        self.depth = depth

    def __repr__(self):
        return f"MinimaxEngine(player={self.player}, depth={self.depth})"

    def get_moves(self, board):
        return self.search(board).best_moves

    def search(self, board: Board) -> SearchResult:
        """
        Build the tree for board, score it and collect every best root move.

        Returns:
            SearchResult with the tied best moves (column order) and stats
        """
        start = time.perf_counter()

        root = SearchNode(self.player, board)
        build_game_tree(root, self.depth)
        self.minimax(root)

        best_moves = [child.last_move for child in root.children if child.value == root.value]

        result = SearchResult(
            best_moves=best_moves,
            score=root.value,
            depth=self.depth,
            nodes_searched=root.count_nodes(),
            time_ms=int((time.perf_counter() - start) * 1000),
        )
        logger.debug(
            "%s searched %d nodes in %dms: score=%d, moves=%s",
            self, result.nodes_searched, result.time_ms, result.score,
            [move.column for move in best_moves],
        )
        return result

    def minimax(self, node: SearchNode):
        """
        Assign a value to every node of the tree rooted at node, children
        before parents. Leaves are evaluated directly.
        """
        if node.is_leaf():
            node.value = self.evaluate_board(node.board)
            return

        best_value = None
        for child in node.children:
            self.minimax(child)
            child_value = child.value

            if best_value is None:
                best_value = child_value

            if child.player == self.player and child_value < best_value:
                best_value = child_value
            elif child.player == self.player.opponent() and child_value > best_value:
                best_value = child_value

        node.value = best_value

    def evaluate_board(self, board: Board) -> int:
        """Leaf score of board from this engine's point of view."""
        return evaluate_board(board, self.player)
