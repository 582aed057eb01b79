"""
Game Logger Module for the Lingo Duel Server

This module provides structured logging for player inputs, server responses,
and game events (round start, guesses, timeouts, steals, scoring).
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path


class GameLogger:
    """
    Centralized logging system for the game server.

    Features:
    - Player input tracking (HTTP and WebSocket)
    - Server response logging
    - Game event logging
    - JSON structured logs for easy parsing

    No file is written until configure() is called with a log directory.
    """

    def __init__(self, log_dir: Optional[str] = None, level: str = 'INFO'):
        self.log_dir: Optional[Path] = None
        self.logger = self._setup_logger(level)
        if log_dir:
            self.configure(log_dir, level)

    def _setup_logger(self, level: str) -> logging.Logger:
        """Setup the main game logger with a console handler."""
        logger = logging.getLogger('lingo_game')
        logger.setLevel(level)

        # Prevent duplicate handlers
        if logger.handlers:
            logger.handlers.clear()

        # Console handler for only important messages (WARNING and above)
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        logger.addHandler(console_handler)

        return logger

    def configure(self, log_dir: str, level: str = 'INFO') -> None:
        """Attach the dated file handler under log_dir."""
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.logger.setLevel(level)

        for handler in list(self.logger.handlers):
            if isinstance(handler, logging.FileHandler):
                self.logger.removeHandler(handler)
                handler.close()

        file_handler = logging.FileHandler(self._log_file(), encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        self.logger.addHandler(file_handler)

    def _log_file(self) -> Path:
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _get_source(self, request) -> str:
        """Identify where an input came from."""
        if request is None:
            return 'system'
        return getattr(request, 'remote_addr', None) or 'unknown'

    def _create_log_entry(self,
                          event_type: str,
                          action: str,
                          source: str,
                          details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'source': source,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def log_user_action(self, request, action: str, **kwargs):
        """
        Log player inputs with full context.

        Args:
            request: Flask request object (or None for local input)
            action: Type of action (e.g., 'ready', 'submit_guess', 'skip')
            **kwargs: Additional details to log
        """
        details = {
            'endpoint': getattr(request, 'endpoint', None),
            'method': getattr(request, 'method', None),
            **kwargs
        }
        log_message = self._create_log_entry('USER_ACTION', action, self._get_source(request), details)
        self.logger.info(log_message)

    def log_server_response(self,
                            request,
                            action: str,
                            success: bool,
                            response_data: Dict[str, Any],
                            **kwargs):
        """Log server responses; failures are logged at ERROR level."""
        details = {
            'success': success,
            'response_data': self._sanitize_response_data(response_data),
            **kwargs
        }

        event_type = 'SERVER_RESPONSE_SUCCESS' if success else 'SERVER_RESPONSE_ERROR'
        log_message = self._create_log_entry(event_type, action, self._get_source(request), details)

        if success:
            self.logger.info(log_message)
        else:
            self.logger.error(log_message)

    def log_game_event(self, event: str, source: str = 'engine', **kwargs):
        """
        Log game-specific events.

        Args:
            event: Type of game event (e.g., 'round_started', 'guess_evaluated',
                'attempt_timed_out', 'steal_started', 'round_ended', 'game_ended')
            source: Component that produced the event
            **kwargs: Additional game details
        """
        log_message = self._create_log_entry('GAME_EVENT', event, source, kwargs)
        self.logger.info(log_message)

    def log_error(self, request, error: Exception, action: str):
        """Log errors with full context."""
        details = {
            'error_type': type(error).__name__,
            'error_message': str(error),
        }
        log_message = self._create_log_entry('ERROR', action, self._get_source(request), details)
        self.logger.error(log_message)

    def _sanitize_response_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Limit the size of logged responses and never log a hidden word."""
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        sanitized = data.copy()
        if 'state' in sanitized and isinstance(sanitized['state'], dict):
            state = sanitized['state']
            round_state = state.get('round') or {}
            sanitized['state'] = {
                'phase': state.get('phase'),
                'round_number': state.get('round_number'),
                'player1_score': state.get('player1_score'),
                'player2_score': state.get('player2_score'),
                'attempts_used': round_state.get('attempts_used'),
                'word_revealed': round_state.get('target_word') is not None
            }

        return sanitized

    def get_log_stats(self) -> Dict[str, Any]:
        """Get statistics about logged events (useful for monitoring)."""
        if self.log_dir is None:
            return {'error': 'File logging not configured'}

        log_file = self._log_file()
        if not log_file.exists():
            return {'error': 'No log file found for today'}

        stats = {
            'log_file': str(log_file),
            'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
            'total_entries': 0,
            'user_actions': 0,
            'server_responses': 0,
            'game_events': 0,
            'errors': 0
        }

        try:
            with open(log_file, 'r', encoding='utf-8') as f:
                for line in f:
                    if line.strip():
                        stats['total_entries'] += 1
                        if 'USER_ACTION' in line:
                            stats['user_actions'] += 1
                        elif 'SERVER_RESPONSE' in line:
                            stats['server_responses'] += 1
                        elif 'GAME_EVENT' in line:
                            stats['game_events'] += 1
                        elif 'ERROR' in line:
                            stats['errors'] += 1
        except OSError as e:
            return {'error': f'Failed to get stats: {e}'}

        return stats


# Global logger instance
game_logger = GameLogger()
