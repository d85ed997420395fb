"""
Game Logger Module for the Wordle engine

This module provides structured logging for board events and dictionary
load/save operations.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path

from ..config import Config


class GameLogger:
    """
    Centralized logging system for the Wordle engine.

    Features:
    - Game event logging (boards created, guesses, wins, resets)
    - Dictionary store events (load, fallback, save)
    - JSON structured logs for easy parsing
    - Optional daily log file next to the console output
    """

    def __init__(self, log_dir: Optional[str] = None, level: str = "INFO"):
        self.log_dir = Path(log_dir) if log_dir else None
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)

        self.level = logging.getLevelName(level.upper()) if isinstance(level, str) else level
        if not isinstance(self.level, int):
            self.level = logging.INFO

        # Setup main game logger
        self.logger = self._setup_logger()

    def _log_file(self) -> Optional[Path]:
        if self.log_dir is None:
            return None
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _setup_logger(self) -> logging.Logger:
        """Setup the engine logger with console and optional file handlers."""
        logger = logging.getLogger('wordle_engine')
        logger.setLevel(self.level)

        # Prevent duplicate handlers
        if logger.handlers:
            for handler in list(logger.handlers):
                handler.close()
            logger.handlers.clear()

        # Console handler for only important messages (WARNING and above)
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        logger.addHandler(console_handler)

        log_file = self._log_file()
        if log_file is not None:
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(self.level)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s | %(levelname)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            logger.addHandler(file_handler)

        return logger

    def _create_log_entry(self,
                          event_type: str,
                          action: str,
                          details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def log_game_event(self, event: str, **kwargs):
        """
        Log board events (board_created, guess_accepted, guess_rejected, game_won, ...).

        Args:
            event: Type of game event
            **kwargs: Additional game details
        """
        log_message = self._create_log_entry('GAME_EVENT', event, dict(kwargs))
        self.logger.info(log_message)

    def log_store_event(self, action: str, success: bool, **kwargs):
        """
        Log dictionary store operations.

        Args:
            action: Operation performed (e.g. 'load', 'save', 'fallback')
            success: Whether the operation succeeded
            **kwargs: Additional details to log
        """
        details = {'success': success, **kwargs}
        event_type = 'STORE_EVENT' if success else 'STORE_ERROR'
        log_message = self._create_log_entry(event_type, action, details)

        if success:
            self.logger.info(log_message)
        else:
            self.logger.warning(log_message)

    def log_error(self, error: Exception, action: str, **kwargs):
        """
        Log errors with full context.

        Args:
            error: Exception that occurred
            action: Action that was being performed
            **kwargs: Additional details to log
        """
        details = {
            'error_type': type(error).__name__,
            'error_message': str(error),
            **kwargs
        }

        log_message = self._create_log_entry('ERROR', action, details)
        self.logger.error(log_message)

    def get_log_stats(self) -> Dict[str, Any]:
        """Get statistics about logged events (useful for monitoring)."""
        log_file = self._log_file()
        if log_file is None:
            return {'error': 'File logging is disabled'}
        if not log_file.exists():
            return {'error': 'No log file found for today'}

        for handler in self.logger.handlers:
            handler.flush()

        stats = {
            'log_file': str(log_file),
            'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
            'total_entries': 0,
            'game_events': 0,
            'store_events': 0,
            'errors': 0
        }

        try:
            with open(log_file, 'r', encoding='utf-8') as f:
                for line in f:
                    if line.strip():
                        stats['total_entries'] += 1
                        if 'GAME_EVENT' in line:
                            stats['game_events'] += 1
                        elif 'STORE_EVENT' in line:
                            stats['store_events'] += 1
                        elif 'ERROR' in line:
                            stats['errors'] += 1
        except OSError as e:
            return {'error': f'Failed to get stats: {str(e)}'}

        return stats


# Global logger instance
game_logger = GameLogger(log_dir=Config.LOG_DIR, level=Config.LOG_LEVEL)
