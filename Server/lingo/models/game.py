"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import List, Optional, Tuple


class LetterFeedback(Enum):
    """Letter evaluation status. NONE is only a placeholder before submission."""
    NONE = "NONE"
    CORRECT = "CORRECT"
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"


@dataclass(frozen=True)
class LetterResult:
    """Feedback for a single letter of an evaluated guess."""
    letter: str
    feedback: LetterFeedback

    def as_pair(self) -> Tuple[str, str]:
        return (self.letter, self.feedback.value)


class Player(IntEnum):
    ONE = 1
    TWO = 2

    @property
    def other(self) -> "Player":
        return Player.TWO if self is Player.ONE else Player.ONE


class GamePhase(Enum):
    """States of the round state machine plus the terminal match state."""
    WAITING_FOR_READY = "waiting_for_ready"
    WAITING_FOR_PLAYER_GUESS = "waiting_for_player_guess"
    WAITING_FOR_STEAL_GUESS = "waiting_for_steal_guess"
    ROUND_ENDED = "round_ended"
    GAME_ENDED = "game_ended"


@dataclass
class Scoreboard:
    """Cumulative match scores. Only grows within a match."""
    player1_score: int = 0
    player2_score: int = 0

    def add_score(self, player: Player, amount: int) -> None:
        if amount <= 0:
            return
        if Player(player) is Player.ONE:
            self.player1_score += amount
        else:
            self.player2_score += amount

    def score_for(self, player: Player) -> int:
        return self.player1_score if Player(player) is Player.ONE else self.player2_score

    def totals(self) -> Tuple[int, int]:
        return self.player1_score, self.player2_score


@dataclass(frozen=True)
class GuessRecord:
    """An evaluated guess as shown on the board."""
    row_index: int
    player: Player
    guess: str
    results: Tuple[LetterResult, ...]
    steal: bool = False


@dataclass
class RoundState:
    """Server-side round state representation."""
    round_number: int
    phase: str
    word_length: int
    first_letter: str
    max_attempts: int
    attempts_used: int
    starting_player: int
    stealing_player: int
    current_player: int
    time_remaining: Optional[float]
    active_row: Optional[int]
    active_row_letters: List[str]
    guess_results: List[Tuple[int, int, str, List[Tuple[str, str]]]]  # (row, player, guess, letters)
    target_word: Optional[str] = None  # Only included once the round is over


@dataclass
class MatchState:
    """Match state representation for JSON serialization."""
    phase: str
    round_number: int
    total_rounds: int
    player1_name: str
    player2_name: str
    player1_score: int
    player2_score: int
    round: Optional[RoundState] = None
    winner: Optional[int] = None  # Only set when the game is over and not a draw
    word_lengths: List[int] = field(default_factory=list)
