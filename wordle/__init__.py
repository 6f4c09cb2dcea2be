"""
Wordle Game Engine Package

A single-player Wordle game: the rules engine, the keyboard controller that
front ends drive it through, and the configuration and logging around them.
"""

from .config import Config
from .controllers.keyboard_controller import KeyboardController
from .services.game_engine import WordleGame


def create_game(config_class=Config, target_word=None):
    """
    Factory for a ready-to-play game and its controller.

    Args:
        config_class: Configuration class to use
        target_word: Overrides the configured target word

    Returns:
        Tuple of (WordleGame, KeyboardController)
    """
    game = WordleGame(target_word or config_class.TARGET_WORD)
    return game, KeyboardController(game)


__all__ = ['create_game', 'WordleGame', 'KeyboardController', 'Config']
