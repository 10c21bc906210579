"""
Bounded-depth minimax move selection for Connect Four style games.
"""

__version__ = "0.1"
