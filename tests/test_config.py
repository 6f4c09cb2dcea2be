"""
Tests for wordle.config package.
"""

import pytest

from wordle.config import (
    Config, DevelopmentConfig, ProductionConfig, TestingConfig, config,
    MAX_GUESSES, WORD_LENGTH, validate_target_word,
)


def test_board_dimensions():
    assert WORD_LENGTH == 5
    assert MAX_GUESSES == 6


def test_config_mapping():
    assert config['default'] is DevelopmentConfig
    assert config['production'] is ProductionConfig
    assert config['testing'] is TestingConfig
    assert DevelopmentConfig.DEBUG is True
    assert ProductionConfig.DEBUG is False
    assert TestingConfig.DEBUG is True


def test_defaults_are_loaded():
    assert Config.TARGET_WORD == Config.TARGET_WORD.upper()
    assert len(Config.TARGET_WORD) == WORD_LENGTH
    assert Config.LOG_LEVEL in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def test_valid_target_word():
    assert validate_target_word("WWCSD") is True


@pytest.mark.parametrize("word, fragment", [
    ("", "empty"),
    ("WORD", "5 characters"),
    ("WORDSS", "5 characters"),
    ("W0RDS", "non-alphabetic"),
    ("WÖRDS", "non-alphabetic"),
    ("words", "uppercase"),
    ("\ufb06RDSX", "non-alphabetic"),
])
def test_invalid_target_words(word, fragment):
    with pytest.raises(ValueError, match=fragment):
        validate_target_word(word)


def test_debug_profiles_raise_log_level():
    assert DevelopmentConfig.effective_log_level() == "DEBUG"
    assert TestingConfig.effective_log_level() == "DEBUG"
    assert ProductionConfig.effective_log_level() == Config.LOG_LEVEL
