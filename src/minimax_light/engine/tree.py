"""
Game tree construction.

The tree is expanded in full to a fixed depth with no pruning, so the number
of nodes grows as column_count ** depth. MAX_DEPTH keeps that tractable.
"""

import numbers

from minimax_light.config import ENGINE_CONFIG
from minimax_light.engine.node import SearchNode


MAX_DEPTH = ENGINE_CONFIG['max_depth']


class InvalidArgumentError(ValueError):
    """Raised when a search is requested with an unusable depth."""


def validate_depth(depth):
    """Check a requested search depth before any tree work is done."""
    if isinstance(depth, bool) or not isinstance(depth, numbers.Integral):
        raise InvalidArgumentError(f"Depth must be an integer, got {depth!r}")
    if depth < 0:
        raise InvalidArgumentError(f"Depth must not be negative, got {depth}")
    if depth > MAX_DEPTH:
        raise InvalidArgumentError(f"The depth of the game tree must be {MAX_DEPTH} or less, got {depth}")


def build_game_tree(node: SearchNode, depth: int):
    """
    Expand the game tree rooted at node to the given depth.

    A node whose board already has a winner stays a leaf whatever depth
    remains.

    Args:
        node: Root of the (sub)tree, not yet expanded
        depth: Remaining plies to expand (0 to MAX_DEPTH)
    """
    validate_depth(depth)
    _expand(node, depth)


def _expand(node, depth):
    if depth == 0:
        return

    node.initialize_children()
    for child in node.children:
        _expand(child, depth - 1)
