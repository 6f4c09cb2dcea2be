"""
Game Errors

Every rule violation raised by the engine. All of them are recoverable: the
engine checks before it mutates, so the game is unchanged after any of these.
"""

from typing import Optional

from ..config.game_settings import WIN_MESSAGE
from .game import GameStatus


class GameError(Exception):
    """Base class for user-facing game rule violations."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class GameOverError(GameError):
    """Raised by any mutating operation once the game has ended."""

    def __init__(self, status: GameStatus, target_word: Optional[str] = None):
        message = WIN_MESSAGE if status == GameStatus.PLAYER_WINS else (target_word or "")
        super().__init__(message)
        self.status = status


class RowFullError(GameError):
    def __init__(self, message: str = "Too many letters"):
        super().__init__(message)


class RowEmptyError(GameError):
    def __init__(self, message: str = "No letters to delete"):
        super().__init__(message)


class IncompleteRowError(GameError):
    def __init__(self, message: str = "Not enough letters to submit"):
        super().__init__(message)
