"""
Configuration for the Connect Four minimax engine.
"""


# Board geometry
GAME_CONFIG = {
    'row_count': 6,
    'column_count': 7,
    'win_length': 4,                    # Pieces in a row needed to win
}

# Search Configuration
ENGINE_CONFIG = {
    'max_depth': 4,                     # Hard cap: the tree is fully expanded, no pruning
    'default_depth': 4,
    'win_score': 10000,                 # Multiplied by empty cells left on a won board
}
