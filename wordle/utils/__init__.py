"""
Utilities Package

Contains the game logger and rendering helpers.
"""

from .helpers import format_board, format_guess, format_keyboard
from .game_logger import game_logger, GameLogger

__all__ = ['format_board', 'format_guess', 'format_keyboard', 'game_logger', 'GameLogger']
