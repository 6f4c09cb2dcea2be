"""
Data Models Package

Contains all data models, enums and errors used throughout the application.
"""

from .game import Letter, CellStatus, GameStatus, Cell, Guess, GameState
from .errors import GameError, GameOverError, RowFullError, RowEmptyError, IncompleteRowError

__all__ = [
    'Letter', 'CellStatus', 'GameStatus', 'Cell', 'Guess', 'GameState',
    'GameError', 'GameOverError', 'RowFullError', 'RowEmptyError', 'IncompleteRowError'
]
