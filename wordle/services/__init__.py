"""
Services Package

Contains the game engine that enforces the rules of a single game.
"""

from .game_engine import WordleGame

__all__ = ['WordleGame']
