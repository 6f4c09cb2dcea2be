"""
Tests for wordle.utils.game_logger module.
"""

import json
import os

from wordle.models import RowFullError
from wordle.utils import GameLogger


def _read_entries(logger):
    for handler in logger.logger.handlers:
        handler.flush()
    with open(logger.log_file, encoding="utf-8") as f:
        return [line.rstrip("\n").split(" | ", 2) for line in f if line.strip()]


def test_creates_log_directory(tmp_path):
    log_dir = tmp_path / "nested" / "logs"
    logger = GameLogger(str(log_dir), name="wordle_test_mkdir")

    assert log_dir.is_dir()
    assert logger.log_file.parent == log_dir


def test_entries_are_structured_json(tmp_path):
    logger = GameLogger(str(tmp_path), name="wordle_test_json")
    logger.log_user_action("add_letter", "s1", key="H")
    logger.log_game_event("s1", "game_lost", answer="WWCSD")

    (_, level, payload), (_, _, event_payload) = _read_entries(logger)
    entry = json.loads(payload)

    assert level == "INFO"
    assert entry["event_type"] == "USER_ACTION"
    assert entry["action"] == "add_letter"
    assert entry["session"] == "s1"
    assert entry["details"] == {"key": "H"}
    assert json.loads(event_payload)["details"] == {"answer": "WWCSD"}


def test_rule_violations_are_logged_at_info(tmp_path):
    logger = GameLogger(str(tmp_path), name="wordle_test_rules")
    logger.log_error(RowFullError(), "add_letter", "s1")
    logger.log_error(RuntimeError("boom"), "add_letter", "s1")

    (_, rule_level, rule_payload), (_, other_level, _) = _read_entries(logger)

    assert rule_level == "INFO"
    assert other_level == "ERROR"
    assert json.loads(rule_payload)["details"]["error_message"] == "Too many letters"


def test_level_filters_info_entries(tmp_path):
    logger = GameLogger(str(tmp_path), level="WARNING", name="wordle_test_level")
    logger.log_user_action("add_letter", "s1")

    assert _read_entries(logger) == []


def test_log_stats(tmp_path):
    logger = GameLogger(str(tmp_path), name="wordle_test_stats")
    logger.log_user_action("add_letter", "s1")
    logger.log_user_action("submit_guess", "s1")
    logger.log_game_event("s1", "game_won")
    logger.log_error(RowFullError(), "add_letter", "s1")

    stats = logger.get_log_stats()

    assert stats["total_entries"] == 4
    assert stats["user_actions"] == 2
    assert stats["game_events"] == 1
    assert stats["errors"] == 1


def test_log_file_is_the_file_the_handler_writes(tmp_path):
    logger = GameLogger(str(tmp_path), name="wordle_test_file")
    file_handlers = [h for h in logger.logger.handlers if hasattr(h, "baseFilename")]

    assert [h.baseFilename for h in file_handlers] == [os.path.abspath(logger.log_file)]


def test_configure_switches_directory_and_level(tmp_path):
    logger = GameLogger(str(tmp_path / "first"), name="wordle_test_configure")
    logger.configure(str(tmp_path / "second"), "DEBUG")

    logger.log_game_state("s1", {"status": "IN_PROGRESS"})

    assert logger.log_file.parent == tmp_path / "second"
    (_, level, payload), = _read_entries(logger)
    assert level == "DEBUG"
    assert json.loads(payload)["event_type"] == "GAME_STATE"
    assert json.loads(payload)["details"] == {"status": "IN_PROGRESS"}


def test_game_state_skipped_above_debug(tmp_path):
    logger = GameLogger(str(tmp_path), level="INFO", name="wordle_test_state")
    logger.log_game_state("s1", {"status": "IN_PROGRESS"})

    assert _read_entries(logger) == []
