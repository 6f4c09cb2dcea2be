"""
Keyboard Controller

Turns key presses into game operations and game errors into the message
shown to the player.
"""

import uuid
from enum import Enum
from typing import Iterable, List, Optional, Union

from ..config.game_settings import ALPHABET, WIN_MESSAGE
from ..models.errors import GameError
from ..models.game import GameStatus, Letter
from ..services.game_engine import WordleGame
from ..utils.game_logger import game_logger


class ControlCharacter(Enum):
    """Non-letter keys understood by the controller."""
    BACKSPACE = "BACKSPACE"
    ENTER = "ENTER"


KeyboardCharacter = Union[Letter, ControlCharacter]

KEYBOARD_LAYOUT: List[List[KeyboardCharacter]] = [
    [Letter(key) for key in "QWERTYUIOP"],
    [Letter(key) for key in "ASDFGHJKL"],
    [ControlCharacter.ENTER] + [Letter(key) for key in "ZXCVBNM"] + [ControlCharacter.BACKSPACE],
]


class KeyboardController:
    """
    Feeds key presses from a front end into one game.

    Letters are added to the current guess, BACKSPACE removes the last one
    and ENTER submits the guess. Any other key is ignored. Rule violations
    raised by the game are caught and become the current message; the game
    itself is left untouched by a rejected key.
    """

    def __init__(self, game: WordleGame, session_id: Optional[str] = None):
        self.game = game
        self.session_id = session_id or str(uuid.uuid4())
        self.message = ""
        game_logger.log_game_event(self.session_id, 'game_started')

    def handle_key(self, key: Union[str, KeyboardCharacter]) -> str:
        """
        Applies one key press to the game.

        Args:
            key: A key name as typed (e.g. 'h', 'Enter', 'Backspace') or a
                 Letter/ControlCharacter member

        Returns:
            str: The message to show the player ('' when there is nothing to say)
        """
        self.message = ""
        normalized = self._normalize_key(key)
        if normalized is None:
            return self.message

        action = self._action_name(normalized)
        was_over = self.game.is_over
        try:
            game_logger.log_user_action(action, self.session_id, key=normalized.value)
            if normalized == ControlCharacter.BACKSPACE:
                self.game.remove_last_letter()
            elif normalized == ControlCharacter.ENTER:
                self.message = self.game.submit_guess() or ""
                if self.game.status == GameStatus.PLAYER_WINS:
                    self.message = WIN_MESSAGE
            else:
                self.game.add_letter(normalized)
        except GameError as e:
            game_logger.log_error(e, action, self.session_id)
            self.message = e.message

        game_logger.log_game_state(self.session_id, self.game.get_game_state().to_dict())
        if not was_over and self.game.is_over:
            self._log_game_over()

        return self.message

    def handle_keys(self, keys: Iterable[Union[str, KeyboardCharacter]]) -> str:
        """Applies a sequence of key presses and returns the last message."""
        for key in keys:
            self.handle_key(key)
        return self.message

    def _normalize_key(self, key: Union[str, KeyboardCharacter]) -> Optional[KeyboardCharacter]:
        if isinstance(key, (Letter, ControlCharacter)):
            return key

        name = str(key).strip().upper()
        if name in ControlCharacter.__members__:
            return ControlCharacter[name]
        if len(name) == 1 and name in ALPHABET:
            return Letter.from_key(name)
        return None

    @staticmethod
    def _action_name(key: KeyboardCharacter) -> str:
        if key == ControlCharacter.BACKSPACE:
            return 'remove_letter'
        if key == ControlCharacter.ENTER:
            return 'submit_guess'
        return 'add_letter'

    def _log_game_over(self):
        state = self.game.get_game_state()
        event = 'game_won' if state.won else 'game_lost'
        game_logger.log_game_event(
            self.session_id, event,
            guesses_used=state.current_guess,
            answer=state.answer
        )
