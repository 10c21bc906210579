#!/usr/bin/env python3
"""
Demo: Minimax Engine self-play

Two minimax engines play one game of Connect Four against each other.
Shows the tied best moves, score and search statistics for every turn.
"""

import argparse
import logging
import sys
from pathlib import Path

import numpy as np

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from minimax_light.config import ENGINE_CONFIG, GAME_CONFIG
from minimax_light.engine import MAX_DEPTH, MinimaxEngine
from minimax_light.game import ConnectFour, Player


def play_game(board, engines, rng=None):
    """
    Play until the board is decided or full.

    Args:
        board: Starting position
        engines: {Player: MinimaxEngine}
        rng: numpy Generator used to break ties, None plays the first tied move

    Returns:
        (final board, winner or None)
    """
    player = Player.RED
    move_count = 0

    while True:
        result = engines[player].search(board)
        if not result.best_moves:
            break

        if rng is None:
            move = result.best_moves[0]
        else:
            move = result.best_moves[rng.integers(len(result.best_moves))]

        board = board.apply_move(move)
        move_count += 1

        print(f"Move {move_count}: {player} plays column {move.column} "
              f"(tied: {[m.column for m in result.best_moves]}, score {result.score}, "
              f"{result.nodes_searched:,} nodes, {result.time_ms}ms)")
        print(board)
        print()

        player = player.opponent()

    return board, board.has_winner()


def describe_result(board, winner):
    """
    Summarise how a game ended. An empty search result only means the game
    is over when the board is decided or full, so the board is checked here.
    """
    if winner is not None:
        return f"Result: {winner} wins"
    if board.num_empty() == 0:
        return "Result: draw"
    return f"Result: no move returned with {board.num_empty()} empty cells left"


def main():
    parser = argparse.ArgumentParser(description="Connect Four minimax self-play")
    parser.add_argument('--depth', type=int, default=ENGINE_CONFIG['default_depth'],
                        help=f"Search depth (1-{MAX_DEPTH})")
    parser.add_argument('--rows', type=int, default=GAME_CONFIG['row_count'])
    parser.add_argument('--columns', type=int, default=GAME_CONFIG['column_count'])
    parser.add_argument('--random-ties', action='store_true',
                        help="Pick randomly among tied best moves")
    parser.add_argument('--seed', type=int, default=None)
    parser.add_argument('--verbose', action='store_true', help="Log search details")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    # Depth 0 never returns a move
    if not 1 <= args.depth <= MAX_DEPTH:
        parser.error(f"--depth must be between 1 and {MAX_DEPTH}")

    board = ConnectFour(row_count=args.rows, column_count=args.columns)
    engines = {player: MinimaxEngine(player, args.depth) for player in Player}
    rng = np.random.default_rng(args.seed) if args.random_ties else None

    print("=" * 60)
    print(f"Minimax self-play on {board!r}, depth {args.depth}")
    print("=" * 60)
    print(board)
    print()

    board, winner = play_game(board, engines, rng)

    print(describe_result(board, winner))


if __name__ == '__main__':
    main()
