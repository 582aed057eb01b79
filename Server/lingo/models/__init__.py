"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .attempt import AttemptRow
from .game import (
    GamePhase,
    GuessRecord,
    LetterFeedback,
    LetterResult,
    MatchState,
    Player,
    RoundState,
    Scoreboard,
)

__all__ = [
    'AttemptRow', 'GamePhase', 'GuessRecord', 'LetterFeedback', 'LetterResult',
    'MatchState', 'Player', 'RoundState', 'Scoreboard'
]
