"""
Game Logger Module

This module provides structured logging for guesses, rejected input and
game events. Every entry is a single JSON object on its own log line.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, TextIO, Union


class GameLogger:
    """
    Centralized logging system for the game.

    Features:
    - Dated log file per day with every game event
    - Console output only for warnings and errors
    - JSON structured entries for easy parsing
    """

    def __init__(self,
                 log_dir: Union[str, Path] = "logs",
                 level: Union[str, int] = logging.INFO,
                 stream: Optional[TextIO] = None):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.level = level.upper() if isinstance(level, str) else level
        self.stream = stream

        # Setup main game logger
        self.logger = self._setup_logger()

    @property
    def log_file(self) -> Path:
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _setup_logger(self) -> logging.Logger:
        """Setup the main game logger with file and console handlers."""
        logger = logging.getLogger('wordle_game')
        logger.setLevel(self.level)
        logger.propagate = False

        # Prevent duplicate handlers
        if logger.handlers:
            for handler in list(logger.handlers):
                handler.close()
            logger.handlers.clear()

        file_handler = logging.FileHandler(self.log_file, encoding='utf-8')
        file_handler.setLevel(self.level)

        # The board owns stdout; only warnings and errors reach the console
        console_handler = logging.StreamHandler(self.stream)
        console_handler.setLevel(logging.WARNING)
        # Errors already shown to the player stay in the file only
        console_handler.addFilter(lambda record: getattr(record, 'echo', True))

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
                          game_id: Optional[str],
                          details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'game_id': game_id,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False)

    def log_game_started(self, game_id: str, **kwargs):
        """Log a new game. Callers must not pass the secret word."""
        log_message = self._create_log_entry('GAME_EVENT', 'game_started', game_id, kwargs)
        self.logger.info(log_message)

    def log_guess(self,
                  game_id: str,
                  guess: str,
                  pattern: str,
                  guess_count: int,
                  **kwargs):
        """
        Log an accepted and scored guess.

        Args:
            game_id: Game identifier
            guess: Normalized guess word
            pattern: Compact feedback string for the guess
            guess_count: Number of guesses recorded after this one
            **kwargs: Additional details to log
        """
        details = {
            'guess': guess,
            'pattern': pattern,
            'guess_count': guess_count,
            **kwargs
        }
        log_message = self._create_log_entry('GUESS', 'guess_scored', game_id, details)
        self.logger.info(log_message)

    def log_rejected_guess(self, game_id: str, guess: str, error: Exception):
        """Log a guess that was refused before scoring."""
        details = {
            'guess': guess,
            'error_type': type(error).__name__,
            'error_message': str(error)
        }
        log_message = self._create_log_entry('GUESS', 'guess_rejected', game_id, details)
        self.logger.info(log_message)

    def log_game_event(self, game_id: str, event: str, **kwargs):
        """
        Log game-specific events (wins, losses, abandoned sessions).

        Args:
            game_id: Game identifier
            event: Type of game event (e.g., 'game_won', 'game_lost')
            **kwargs: Additional game details
        """
        log_message = self._create_log_entry('GAME_EVENT', event, game_id, kwargs)
        self.logger.info(log_message)

    def log_error(self,
                  error: Exception,
                  action: str,
                  game_id: Optional[str] = None,
                  echo: bool = True):
        """
        Log an unrecoverable error with context.

        Args:
            error: Exception that occurred
            action: Action that was being performed
            game_id: Game identifier if applicable
            echo: Also write the entry to the console stream
        """
        details = {
            'error_type': type(error).__name__,
            'error_message': str(error)
        }
        log_message = self._create_log_entry('ERROR', action, game_id, details)
        self.logger.error(log_message, extra={'echo': echo})

    def close(self):
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)

    def get_log_stats(self) -> Dict[str, Any]:
        """Get statistics about today's logged events."""
        log_file = self.log_file
        if not log_file.exists():
            return {'error': 'No log file found for today'}

        for handler in self.logger.handlers:
            handler.flush()

        stats = {
            'log_file': str(log_file),
            'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
            'total_entries': 0,
            'guesses': 0,
            'rejected_guesses': 0,
            'game_events': 0,
            'errors': 0
        }

        with open(log_file, 'r', encoding='utf-8') as f:
            for line in f:
                if not line.strip():
                    continue
                stats['total_entries'] += 1
                if 'guess_rejected' in line:
                    stats['rejected_guesses'] += 1
                elif '"GUESS"' in line:
                    stats['guesses'] += 1
                elif 'GAME_EVENT' in line:
                    stats['game_events'] += 1
                elif '"ERROR"' in line:
                    stats['errors'] += 1

        return stats
