"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: application configuration (environment-based)
- game_settings.py: game rules and constants
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import WORD_LENGTH, MAX_GUESSES, ALPHABET, WIN_MESSAGE, validate_target_word

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'WORD_LENGTH', 'MAX_GUESSES', 'ALPHABET', 'WIN_MESSAGE', 'validate_target_word'
]
