"""
Controllers Package

Contains the adapters between player input and the game engine.
"""

from .keyboard_controller import KeyboardController, ControlCharacter, KEYBOARD_LAYOUT

__all__ = ['KeyboardController', 'ControlCharacter', 'KEYBOARD_LAYOUT']
