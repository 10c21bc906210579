"""
Static evaluation of leaf positions.

Scores are always from one fixed player's point of view: higher is better
for that player.

    no winner:  +1 per own piece, -1 per opponent piece, summed over every
                cell of every win location
    winner:     +/-WIN_SCORE * (number of empty cells)

Weighting a win by the empty cells left prefers faster wins and slower
losses, and WIN_SCORE is large enough that any decided board outranks any
undecided one.
"""

from minimax_light.config import ENGINE_CONFIG
from minimax_light.game.game import Board, Player


WIN_SCORE = ENGINE_CONFIG['win_score']


def evaluate_board(board: Board, player: Player) -> int:
    """
    Evaluate the desirability of board for player.

    Intended for leaf positions of the game tree.

    Args:
        board: Position to evaluate
        player: Perspective player

    Returns:
        Integer score, positive when the position favours player
    """
    winner = board.has_winner()
    if winner is None:
        score = 0
        for location in board.win_locations():
            for cell in location:
                if cell == player:
                    score += 1
                elif cell is not None:
                    score -= 1
        return score

    sign = 1 if winner == player else -1
    return sign * WIN_SCORE * board.num_empty()


def max_heuristic_score(board: Board) -> int:
    """Largest magnitude evaluate_board can give a board without a winner."""
    return board.win_length * len(board.win_locations())
