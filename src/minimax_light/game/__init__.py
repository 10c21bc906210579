# Game module

from .game import Board, Move, Player
from .connect_four import ConnectFour

__all__ = ['Board', 'Move', 'Player', 'ConnectFour']
