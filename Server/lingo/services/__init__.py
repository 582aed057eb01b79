"""
Services Package

Contains the game core (evaluation, scoring, round and match state
machines) and the service that drives it.
"""

from .evaluator import evaluate_guess, is_all_correct
from .game_service import GameService
from .match_controller import Match, MatchController
from .round_engine import RoundEngine
from .scheduler import TickScheduler
from .scoring import calculate_score
from .sinks import BoardSink, NullBoardSink, NullStatusSink, StatusSink
from .word_bank import WordBank

__all__ = [
    'evaluate_guess', 'is_all_correct', 'calculate_score',
    'RoundEngine', 'MatchController', 'Match', 'TickScheduler',
    'BoardSink', 'StatusSink', 'NullBoardSink', 'NullStatusSink',
    'WordBank', 'GameService'
]
