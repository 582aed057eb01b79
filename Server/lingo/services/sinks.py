"""
Output Ports

One-way interfaces the game core uses to notify a presentation layer.
The core never reads anything back through them.
"""

from typing import List, Protocol, Sequence
from ..models.game import LetterResult


class BoardSink(Protocol):
    """Receives letter-grid updates."""

    def setup_board(self, word_length: int, max_attempts: int, first_letter: str) -> None: ...

    def set_active_row(self, row_index: int) -> None: ...

    def create_steal_row(self, row_index: int) -> None: ...

    def show_row_letters(self, row_index: int, letters: List[str]) -> None: ...

    def show_guess_result(self, row_index: int, results: Sequence[LetterResult]) -> None: ...

    def lock_input(self) -> None: ...

    def unlock_input(self) -> None: ...


class StatusSink(Protocol):
    """Receives round, timer and score updates."""

    def update_round(self, round_number: int, word_length: int, starting_player: int) -> None: ...

    def show_ready_phase(self) -> None: ...

    def show_main_phase(self, player: int, attempt_number: int, remaining: float) -> None: ...

    def show_steal_phase(self, player: int, remaining: float) -> None: ...

    def update_main_timer(self, player: int, attempt_number: int, remaining: float) -> None: ...

    def update_steal_timer(self, player: int, remaining: float) -> None: ...

    def update_scores(self, player1_score: int, player2_score: int) -> None: ...

    def show_correct_word(self, word: str) -> None: ...

    def show_game_end(self, player1_score: int, player2_score: int) -> None: ...


class NullBoardSink:
    """Board that discards every update."""

    def setup_board(self, word_length, max_attempts, first_letter):
        pass

    def set_active_row(self, row_index):
        pass

    def create_steal_row(self, row_index):
        pass

    def show_row_letters(self, row_index, letters):
        pass

    def show_guess_result(self, row_index, results):
        pass

    def lock_input(self):
        pass

    def unlock_input(self):
        pass


class NullStatusSink:
    """Status display that discards every update."""

    def update_round(self, round_number, word_length, starting_player):
        pass

    def show_ready_phase(self):
        pass

    def show_main_phase(self, player, attempt_number, remaining):
        pass

    def show_steal_phase(self, player, remaining):
        pass

    def update_main_timer(self, player, attempt_number, remaining):
        pass

    def update_steal_timer(self, player, remaining):
        pass

    def update_scores(self, player1_score, player2_score):
        pass

    def show_correct_word(self, word):
        pass

    def show_game_end(self, player1_score, player2_score):
        pass
