"""
Pytest configuration for the Wordle engine.

Sends the game log to a throwaway directory so test runs never write into
the working tree.
"""

import os
import tempfile

import pytest

# Must happen before the wordle package (and its global logger) is imported.
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="wordle-test-logs-"))

from wordle.models import Letter  # noqa: E402
from wordle.services import WordleGame  # noqa: E402


def type_word(game, word):
    """Add every letter of `word` to the current guess."""
    for char in word:
        game.add_letter(Letter(char))


def play_guesses(game, *words):
    """Type and submit each word in turn, returning the last submit result."""
    result = None
    for word in words:
        type_word(game, word)
        result = game.submit_guess()
    return result


def board_letters(game):
    """Board as strings, '_' for an empty cell."""
    return [
        "".join(cell.letter.value if cell.letter else "_" for cell in guess.cells)
        for guess in game.guesses
    ]


@pytest.fixture
def game():
    return WordleGame("WWCSD")
