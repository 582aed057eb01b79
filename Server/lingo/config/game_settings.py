"""
Game Configuration Constants Module

This module defines all game configuration constants and the immutable
per-match settings. All game parameters are centralized here to enable
easy modification.
"""

import json
import logging
import os
from dataclasses import dataclass
from typing import Dict, Final, List, Optional, Tuple

logger = logging.getLogger('lingo_game')

# Core Game Configuration Constants
MAX_ATTEMPTS_PER_ROUND: Final[int] = 5
"""
Main-phase guess attempts allowed per round before the steal phase.
"""

ROUND_WORD_LENGTHS: Final[Tuple[int, ...]] = (4, 5, 5, 5, 6)
ROW_TIME_LIMIT_SECONDS: Final[float] = 30.0
STEAL_TIME_LIMIT_SECONDS: Final[float] = 15.0
END_ROUND_DELAY_SECONDS: Final[float] = 1.0

# Scoring
BASE_SCORE: Final[int] = 100
ATTEMPT_BONUS: Final[int] = 10

FALLBACK_WORD: Final[str] = "TEST"

DEFAULT_WORD_LIST_PATH: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'words.json'
)


def placeholder_word(length: int) -> str:
    """Deterministic stand-in word of exactly `length` letters."""
    length = max(1, length)
    return (FALLBACK_WORD * (length // len(FALLBACK_WORD) + 1))[:length]


def load_word_list(path: Optional[str] = None) -> Dict[int, List[str]]:
    """
    Load the word list grouped by length from a JSON file.

    The file maps a word length to an array of words, e.g.
    ``{"4": ["GAME"], "5": ["CRANE"]}``. Malformed entries are skipped.

    Returns:
        Dict[int, List[str]]: uppercase words keyed by length; empty if the
        file is missing or unreadable
    """
    json_file_path = path or DEFAULT_WORD_LIST_PATH

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            raw = json.load(f)
    except FileNotFoundError:
        logger.error(f"Word list file not found: {json_file_path}")
        return {}
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Invalid word list {json_file_path}: {e}")
        return {}

    if not isinstance(raw, dict):
        logger.error("Word list JSON must be an object keyed by word length")
        return {}

    words_by_length: Dict[int, List[str]] = {}
    for key, words in raw.items():
        try:
            length = int(key)
        except (TypeError, ValueError):
            logger.warning(f"Skipping word group with non-numeric key '{key}'")
            continue
        if not isinstance(words, list):
            logger.warning(f"Skipping word group '{key}': not a list")
            continue

        valid = []
        for word in words:
            if not isinstance(word, str) or len(word) != length or not word.isalpha():
                logger.warning(f"Skipping malformed word {word!r} in group '{key}'")
                continue
            valid.append(word.upper())
        if valid:
            words_by_length[length] = valid

    return words_by_length


def validate_word_list_integrity(words_by_length: Dict[int, List[str]]) -> bool:
    """
    Validates the integrity and consistency of a loaded word database.

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not words_by_length:
        raise ValueError("Word list cannot be empty")

    for length, words in words_by_length.items():
        for index, word in enumerate(words):
            if len(word) != length:
                raise ValueError(f"Word at index {index} '{word}' is not {length} characters long")
            if not word.isalpha():
                raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")
            if not word.isupper():
                raise ValueError(f"Word at index {index} '{word}' is not in uppercase format")

        if len(words) != len(set(words)):
            duplicates = sorted({word for word in words if words.count(word) > 1})
            raise ValueError(f"Duplicate {length}-letter words found in word list: {duplicates}")

    return True


@dataclass(frozen=True)
class MatchSettings:
    """Settings that stay fixed for the duration of a match."""
    round_word_lengths: Tuple[int, ...] = ROUND_WORD_LENGTHS
    max_attempts: int = MAX_ATTEMPTS_PER_ROUND
    row_time_limit_seconds: float = ROW_TIME_LIMIT_SECONDS
    steal_time_limit_seconds: float = STEAL_TIME_LIMIT_SECONDS
    end_round_delay_seconds: float = END_ROUND_DELAY_SECONDS
    base_score: int = BASE_SCORE
    attempt_bonus: int = ATTEMPT_BONUS
    starting_player: int = 1
    player1_name: str = "P1"
    player2_name: str = "P2"

    def __post_init__(self):
        object.__setattr__(self, 'round_word_lengths', tuple(self.round_word_lengths))

        if not self.round_word_lengths:
            raise ValueError("At least one round must be configured")
        if any(length < 1 for length in self.round_word_lengths):
            raise ValueError(f"Word lengths must be >= 1: {list(self.round_word_lengths)}")
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        if self.row_time_limit_seconds < 0 or self.steal_time_limit_seconds < 0:
            raise ValueError("Time limits cannot be negative")
        if self.end_round_delay_seconds < 0:
            raise ValueError("end_round_delay_seconds cannot be negative")
        if self.starting_player not in (1, 2):
            raise ValueError(f"starting_player must be 1 or 2, got {self.starting_player}")

    @property
    def round_count(self) -> int:
        return len(self.round_word_lengths)

    @classmethod
    def from_config(cls, config) -> "MatchSettings":
        """Build settings from a Config class (see app_config)."""
        return cls(
            round_word_lengths=tuple(config.ROUND_WORD_LENGTHS),
            max_attempts=config.MAX_ATTEMPTS_PER_ROUND,
            row_time_limit_seconds=config.ROW_TIME_LIMIT_SECONDS,
            steal_time_limit_seconds=config.STEAL_TIME_LIMIT_SECONDS,
            end_round_delay_seconds=config.END_ROUND_DELAY_SECONDS,
            starting_player=config.STARTING_PLAYER,
            player1_name=config.PLAYER1_NAME or "P1",
            player2_name=config.PLAYER2_NAME or "P2",
        )


# Module initialization: Validate configuration when run directly
if __name__ == "__main__":

    try:
        words = load_word_list()
        validate_word_list_integrity(words)
        print(" Word list validation passed")
        counts = {length: len(group) for length, group in sorted(words.items())}
        print(f" Words per length: {counts}")
        MatchSettings()
        print(" All configuration validation checks passed")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
