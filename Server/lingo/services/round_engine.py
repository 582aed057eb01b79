"""
Round Engine

State machine for a single round: main-phase attempts, the single-shot
steal phase, per-phase timers and the deferred hand-off to the match.
"""

from typing import Callable, List, Optional
from ..config.game_settings import MatchSettings
from ..models.attempt import AttemptRow
from ..models.game import GamePhase, GuessRecord, LetterResult, Player, RoundState, Scoreboard
from ..utils.game_logger import game_logger
from .evaluator import evaluate_guess, is_all_correct
from .scheduler import ScheduledCall, TickScheduler
from .scoring import calculate_score
from .sinks import BoardSink, StatusSink


class RoundEngine:
    """
    Runs one round from WAITING_FOR_READY to ROUND_ENDED.

    Inputs that do not fit the current phase are ignored and report a falsy
    result; nothing here raises for bad input. A tick that follows an
    input-driven transition does not run the phase timer, so a guess and a
    timeout landing in the same tick consume a single attempt.
    """

    def __init__(self,
                 round_number: int,
                 target_word: str,
                 starting_player: Player,
                 settings: MatchSettings,
                 scoreboard: Scoreboard,
                 board: BoardSink,
                 status: StatusSink,
                 scheduler: TickScheduler,
                 award: Callable[[Player, int], None],
                 on_round_complete: Callable[["RoundEngine"], None]):
        self.round_number = round_number
        self.target_word = target_word.upper()
        self.word_length = len(self.target_word)
        self.settings = settings
        self.starting_player = Player(starting_player)
        self.stealing_player = self.starting_player.other
        self.current_player = self.starting_player

        self.phase = GamePhase.WAITING_FOR_READY
        self.attempts_used = 0
        self.time_remaining: Optional[float] = None
        self.steal_row_index: Optional[int] = None
        self.history: List[GuessRecord] = []
        self.solved_by: Optional[Player] = None

        self._scoreboard = scoreboard
        self._board = board
        self._status = status
        self._scheduler = scheduler
        self._award = award
        self._on_round_complete = on_round_complete

        self._row: Optional[AttemptRow] = None
        self._pending_advance: Optional[ScheduledCall] = None
        self._transitioned_since_tick = False
        self._torn_down = False

    @property
    def first_letter(self) -> str:
        return self.target_word[0]

    @property
    def max_attempts(self) -> int:
        return self.settings.max_attempts

    @property
    def can_type(self) -> bool:
        return self.phase in (GamePhase.WAITING_FOR_PLAYER_GUESS, GamePhase.WAITING_FOR_STEAL_GUESS)

    @property
    def is_waiting_for_ready(self) -> bool:
        return self.phase is GamePhase.WAITING_FOR_READY

    @property
    def active_row(self) -> Optional[AttemptRow]:
        return self._row

    def begin(self) -> None:
        """Lay out the board and announce the round; input stays locked until ready()."""
        self._board.setup_board(self.word_length, self.max_attempts, self.first_letter)
        self._board.lock_input()
        self._status.update_round(self.round_number, self.word_length, int(self.starting_player))
        self._status.update_scores(*self._scoreboard.totals())
        self._status.show_ready_phase()

        game_logger.log_game_event(
            'round_started', round_number=self.round_number, word_length=self.word_length,
            starting_player=int(self.starting_player), first_letter=self.first_letter
        )

    # Input events

    def ready(self) -> bool:
        if self.phase is not GamePhase.WAITING_FOR_READY:
            return False

        self.phase = GamePhase.WAITING_FOR_PLAYER_GUESS
        self.current_player = self.starting_player
        self.time_remaining = self.settings.row_time_limit_seconds
        self._transitioned_since_tick = True

        self._activate_row(0)
        self._board.unlock_input()
        self._status.show_main_phase(int(self.current_player), self.attempts_used + 1, self.time_remaining)
        return True

    def submit_guess(self, guess: Optional[str]) -> Optional[List[LetterResult]]:
        """Evaluate a guess for the player whose turn it is.

        Returns the letter results, or None when the guess was ignored
        (wrong phase, empty, or not exactly word_length letters).
        """
        if not self.can_type:
            return None
        if not guess or not isinstance(guess, str):
            return None

        normalized_guess = guess.strip().upper()
        if len(normalized_guess) != self.word_length:
            return None

        if self.phase is GamePhase.WAITING_FOR_PLAYER_GUESS:
            return self._process_main_guess(normalized_guess)
        return self._process_steal_guess(normalized_guess)

    def skip(self) -> bool:
        """Forfeit the current main-phase attempt without feedback."""
        if self.phase is not GamePhase.WAITING_FOR_PLAYER_GUESS:
            return False

        game_logger.log_game_event(
            'attempt_skipped', round_number=self.round_number,
            player=int(self.current_player), attempt_number=self.attempts_used + 1
        )
        self._transitioned_since_tick = True
        self._consume_attempt()
        return True

    def add_letter(self, letter: str) -> bool:
        if not self.can_type or self._row is None:
            return False
        if not self._row.add_letter(letter):
            return False
        self._board.show_row_letters(self._row.row_index, self._row.letters)
        return True

    def remove_letter(self) -> bool:
        if not self.can_type or self._row is None:
            return False
        if not self._row.remove_letter():
            return False
        self._board.show_row_letters(self._row.row_index, self._row.letters)
        return True

    def submit_current_row(self) -> Optional[List[LetterResult]]:
        if not self.can_type or self._row is None or not self._row.is_full():
            return None
        return self.submit_guess(self._row.text())

    def press_enter(self) -> bool:
        """Enter key: ready while waiting, otherwise submit a full row."""
        if self.is_waiting_for_ready:
            return self.ready()
        return self.submit_current_row() is not None

    # Clock

    def advance(self, elapsed: float) -> None:
        """Run the active phase timer for one tick."""
        if self._transitioned_since_tick:
            self._transitioned_since_tick = False
            return

        if self.phase is GamePhase.WAITING_FOR_PLAYER_GUESS:
            self.time_remaining -= elapsed
            self._status.update_main_timer(
                int(self.current_player), self.attempts_used + 1, max(0.0, self.time_remaining)
            )
            if self.time_remaining <= 0:
                self._handle_main_timeout()

        elif self.phase is GamePhase.WAITING_FOR_STEAL_GUESS:
            self.time_remaining -= elapsed
            self._status.update_steal_timer(int(self.current_player), max(0.0, self.time_remaining))
            if self.time_remaining <= 0:
                self._handle_steal_timeout()

    def teardown(self) -> None:
        """Cancel the pending hand-off to the match."""
        self._torn_down = True
        self._scheduler.cancel(self._pending_advance)
        self._pending_advance = None

    # Transitions

    def _process_main_guess(self, guess: str) -> List[LetterResult]:
        results = evaluate_guess(self.target_word, guess)
        row_index = self.attempts_used
        self._record(row_index, guess, results, steal=False)
        self._transitioned_since_tick = True

        if is_all_correct(results):
            points = calculate_score(
                self.attempts_used, True, self.max_attempts,
                self.settings.base_score, self.settings.attempt_bonus
            )
            self._solve(self.current_player, points)
            return results

        self._consume_attempt()
        return results

    def _process_steal_guess(self, guess: str) -> List[LetterResult]:
        results = evaluate_guess(self.target_word, guess)
        self._record(self.steal_row_index, guess, results, steal=True)
        self._transitioned_since_tick = True

        if is_all_correct(results):
            points = calculate_score(
                self.attempts_used, False, self.max_attempts,
                self.settings.base_score, self.settings.attempt_bonus
            )
            self._solve(self.stealing_player, points)
        else:
            self._end_round()
        return results

    def _record(self, row_index: int, guess: str, results: List[LetterResult], steal: bool) -> None:
        self.history.append(GuessRecord(row_index, self.current_player, guess, tuple(results), steal))
        self._board.show_guess_result(row_index, results)

        game_logger.log_game_event(
            'guess_evaluated', round_number=self.round_number, player=int(self.current_player),
            row=row_index, guess=guess, steal=steal,
            feedback=[result.feedback.value for result in results]
        )

    def _solve(self, player: Player, points: int) -> None:
        self.solved_by = player
        self._award(player, points)
        self._status.show_correct_word(self.target_word)
        self._status.update_scores(*self._scoreboard.totals())
        self._end_round()

    def _consume_attempt(self) -> None:
        self.attempts_used += 1

        if self.attempts_used >= self.max_attempts:
            self._start_steal_phase()
            return

        self.time_remaining = self.settings.row_time_limit_seconds
        self._activate_row(self.attempts_used)
        self._board.unlock_input()
        self._status.show_main_phase(int(self.current_player), self.attempts_used + 1, self.time_remaining)

    def _start_steal_phase(self) -> None:
        self.phase = GamePhase.WAITING_FOR_STEAL_GUESS
        self.current_player = self.stealing_player
        self.steal_row_index = self.max_attempts
        self.time_remaining = self.settings.steal_time_limit_seconds

        self._board.create_steal_row(self.steal_row_index)
        self._row = AttemptRow(self.steal_row_index, self.word_length, self.first_letter)
        self._board.show_row_letters(self.steal_row_index, self._row.letters)
        self._status.show_steal_phase(int(self.stealing_player), self.time_remaining)
        self._board.unlock_input()

        game_logger.log_game_event(
            'steal_started', round_number=self.round_number,
            player=int(self.stealing_player), attempts_used=self.attempts_used
        )

    def _handle_main_timeout(self) -> None:
        game_logger.log_game_event(
            'attempt_timed_out', round_number=self.round_number,
            player=int(self.current_player), attempt_number=self.attempts_used + 1
        )
        self._consume_attempt()

    def _handle_steal_timeout(self) -> None:
        self.time_remaining = 0.0
        game_logger.log_game_event(
            'steal_timed_out', round_number=self.round_number, player=int(self.stealing_player)
        )
        self._end_round()

    def _activate_row(self, row_index: int) -> None:
        self._row = AttemptRow(row_index, self.word_length, self.first_letter)
        self._board.set_active_row(row_index)
        self._board.show_row_letters(row_index, self._row.letters)

    def _end_round(self) -> None:
        self.phase = GamePhase.ROUND_ENDED
        self._row = None

        self._board.lock_input()
        self._status.show_correct_word(self.target_word)
        self._status.update_scores(*self._scoreboard.totals())

        game_logger.log_game_event(
            'round_ended', round_number=self.round_number, target_word=self.target_word,
            solved_by=int(self.solved_by) if self.solved_by else None,
            attempts_used=self.attempts_used
        )

        self._pending_advance = self._scheduler.call_later(
            self.settings.end_round_delay_seconds, self._complete, name=f'round-{self.round_number}-advance'
        )

    def _complete(self) -> None:
        self._pending_advance = None
        if self._torn_down:
            return
        self._on_round_complete(self)

    def snapshot(self) -> RoundState:
        ended = self.phase is GamePhase.ROUND_ENDED
        return RoundState(
            round_number=self.round_number,
            phase=self.phase.value,
            word_length=self.word_length,
            first_letter=self.first_letter,
            max_attempts=self.max_attempts,
            attempts_used=self.attempts_used,
            starting_player=int(self.starting_player),
            stealing_player=int(self.stealing_player),
            current_player=int(self.current_player),
            time_remaining=self.time_remaining if self.can_type else None,
            active_row=self._row.row_index if self._row else None,
            active_row_letters=self._row.letters if self._row else [],
            guess_results=[
                (record.row_index, int(record.player), record.guess,
                 [result.as_pair() for result in record.results])
                for record in self.history
            ],
            target_word=self.target_word if ended else None
        )
