"""
Game Configuration Constants Module

Defines the fixed rules of a game: board dimensions, the alphabet and the
message shown when the player wins. All game parameters are centralized here.
"""

from typing import Final

WORD_LENGTH: Final[int] = 5
"""
Number of letter cells in every guess row.
Type: Final[int] - Immutable to prevent accidental modification
"""

MAX_GUESSES: Final[int] = 6
"""
Number of guess rows on the board, i.e. attempts allowed per game.
"""

ALPHABET: Final[str] = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

WIN_MESSAGE: Final[str] = "You Win!"

_LETTERS = frozenset(ALPHABET)


def validate_target_word(word: str) -> bool:
    """
    Validates a target word before a game is created with it.

    The engine itself trusts its caller, so front ends that take the word
    from the environment or the command line check it here first.

    This function performs validation to ensure:
    1. Length validation: the word must be exactly WORD_LENGTH characters
    2. Character validation: only A-Z characters allowed
    3. Format validation: uppercase formatting

    Returns:
        bool: True if the word passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not isinstance(word, str) or not word:
        raise ValueError("Target word cannot be empty")

    if len(word) != WORD_LENGTH:
        raise ValueError(f"Target word '{word}' is not {WORD_LENGTH} characters long")

    if any(char.upper() not in _LETTERS for char in word):
        raise ValueError(f"Target word '{word}' contains non-alphabetic characters")

    if not word.isupper():
        raise ValueError(f"Target word '{word}' is not in uppercase format")

    return True
