"""
Minimax search engine for Connect Four.

This module contains the search components:
- Search tree nodes
- Fixed-depth game tree construction
- Static leaf evaluation
- Minimax scoring and best-move selection
"""

from minimax_light.engine.node import SearchNode
from minimax_light.engine.tree import MAX_DEPTH, InvalidArgumentError, build_game_tree, validate_depth
from minimax_light.engine.evaluator import WIN_SCORE, evaluate_board, max_heuristic_score
from minimax_light.engine.minimax import MinimaxEngine, SearchResult, Solver

__all__ = [
    'SearchNode',
    'MAX_DEPTH',
    'InvalidArgumentError',
    'build_game_tree',
    'validate_depth',
    'WIN_SCORE',
    'evaluate_board',
    'max_heuristic_score',
    'MinimaxEngine',
    'SearchResult',
    'Solver',
]
