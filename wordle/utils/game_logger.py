"""
Game Logger Module for the Wordle engine

This module provides logging for player key presses, errors surfaced to the
player and game events such as wins and losses.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path

from ..config.app_config import Config
from ..models.errors import GameError


class GameLogger:
    """
    Centralized logging system for Wordle games.

    Features:
    - Player action tracking per game session
    - Game event logging (wins, losses, revealed words)
    - Error logging for rule violations shown to the player
    - JSON structured logs for easy parsing
    """

    def __init__(self, log_dir: str = "logs", level: str = "INFO", name: str = "wordle_game"):
        self.name = name
        self.configure(log_dir, level)

    def configure(self, log_dir: str, level: str = "INFO"):
        """
        (Re)build the handlers for a log directory and level.

        Front ends call this once the configuration profile is known.
        """
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.level = getattr(logging, str(level).upper(), logging.INFO)

        # The file is fixed when the handler opens it
        self.log_file = self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

        # Setup main game logger
        self.logger = self._setup_logger()

    def _setup_logger(self) -> logging.Logger:
        """Setup the main game logger with file handler."""
        logger = logging.getLogger(self.name)
        logger.setLevel(self.level)
        logger.propagate = False

        # Prevent duplicate handlers
        if logger.handlers:
            for handler in list(logger.handlers):
                handler.close()
            logger.handlers.clear()

        # File handler for detailed logs
        file_handler = logging.FileHandler(self.log_file, encoding='utf-8')
        file_handler.setLevel(self.level)

        # Console handler for only important messages (WARNING and above)
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)

        file_formatter = logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        console_formatter = logging.Formatter(
            '%(levelname)s: %(message)s'
        )

        file_handler.setFormatter(file_formatter)
        console_handler.setFormatter(console_formatter)

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)

        return logger

    def _create_log_entry(self,
                          event_type: str,
                          action: str,
                          session_id: Optional[str],
                          details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'session': session_id,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False)

    def log_user_action(self,
                        action: str,
                        session_id: Optional[str] = None,
                        **kwargs):
        """
        Log player actions with full context.

        Args:
            action: Type of action (e.g., 'add_letter', 'remove_letter', 'submit_guess')
            session_id: Game session identifier if applicable
            **kwargs: Additional details to log
        """
        log_message = self._create_log_entry('USER_ACTION', action, session_id, dict(kwargs))
        self.logger.info(log_message)

    def log_game_event(self,
                       session_id: Optional[str],
                       event: str,
                       **kwargs):
        """
        Log game-specific events (wins, losses, etc.).

        Args:
            session_id: Game session identifier
            event: Type of game event (e.g., 'game_started', 'game_won', 'game_lost')
            **kwargs: Additional game details
        """
        log_message = self._create_log_entry('GAME_EVENT', event, session_id, dict(kwargs))
        self.logger.info(log_message)

    def log_game_state(self,
                       session_id: Optional[str],
                       state: Dict[str, Any]):
        """
        Log a full game snapshot at DEBUG level (debug profiles only).

        Args:
            session_id: Game session identifier
            state: Plain-data game state, answer already withheld while in play
        """
        if self.logger.isEnabledFor(logging.DEBUG):
            log_message = self._create_log_entry('GAME_STATE', 'state', session_id, state)
            self.logger.debug(log_message)

    def log_error(self,
                  error: Exception,
                  action: str,
                  session_id: Optional[str] = None):
        """
        Log errors with full context.

        Rule violations are expected during play and go to the file only;
        anything else is logged as an error.

        Args:
            error: Exception that occurred
            action: Action that was being performed
            session_id: Game session identifier if applicable
        """
        details = {
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }

        log_message = self._create_log_entry('ERROR', action, session_id, details)
        if isinstance(error, GameError):
            self.logger.info(log_message)
        else:
            self.logger.error(log_message)

    def get_log_stats(self) -> Dict[str, Any]:
        """Get statistics about logged events (useful for monitoring)."""
        log_file = self.log_file
        if not log_file.exists():
            return {'error': 'No log file found'}

        for handler in self.logger.handlers:
            handler.flush()

        stats = {
            'log_file': str(log_file),
            'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
            'total_entries': 0,
            'user_actions': 0,
            'game_events': 0,
            'errors': 0
        }

        with open(log_file, 'r', encoding='utf-8') as f:
            for line in f:
                if line.strip():
                    stats['total_entries'] += 1
                    if '"USER_ACTION"' in line:
                        stats['user_actions'] += 1
                    elif '"GAME_EVENT"' in line:
                        stats['game_events'] += 1
                    elif '"ERROR"' in line:
                        stats['errors'] += 1

        return stats


# Global logger instance
game_logger = GameLogger(Config.LOG_DIR, Config.effective_log_level())
