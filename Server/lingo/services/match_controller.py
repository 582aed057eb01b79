"""
Match Controller

Owns the sequence of rounds, the starting-player rotation, the scoreboard
and game-end detection. Drives one RoundEngine at a time.
"""

import uuid
from typing import List, Optional, Protocol
from ..config.game_settings import MatchSettings, placeholder_word
from ..models.game import GamePhase, LetterResult, MatchState, Player, Scoreboard
from ..utils.game_logger import game_logger
from .round_engine import RoundEngine
from .scheduler import TickScheduler
from .sinks import BoardSink, NullBoardSink, NullStatusSink, StatusSink


class WordSource(Protocol):
    def get_word_by_length(self, length: int) -> str: ...


class MatchController:
    """
    The single owned match aggregate handed to a front end.

    Input methods mirror RoundEngine and are ignored once the game has
    ended. advance() is the only clock entry point.
    """

    def __init__(self,
                 word_source: WordSource,
                 settings: Optional[MatchSettings] = None,
                 board: Optional[BoardSink] = None,
                 status: Optional[StatusSink] = None,
                 scheduler: Optional[TickScheduler] = None,
                 match_id: Optional[str] = None):
        self.word_source = word_source
        self.settings = settings or MatchSettings()
        self.board = board or NullBoardSink()
        self.status = status or NullStatusSink()
        self.scheduler = scheduler or TickScheduler()
        self.match_id = match_id or str(uuid.uuid4())

        self.scoreboard = Scoreboard()
        self.current_round_index = 0
        self.current_starting_player = Player(self.settings.starting_player)
        self.engine: Optional[RoundEngine] = None
        self.game_ended = False
        self.started = False

    @property
    def phase(self) -> GamePhase:
        if self.game_ended:
            return GamePhase.GAME_ENDED
        if self.engine is None:
            return GamePhase.WAITING_FOR_READY
        return self.engine.phase

    @property
    def round_number(self) -> int:
        return min(self.current_round_index + 1, self.settings.round_count)

    def start(self) -> None:
        if self.started:
            return
        self.started = True
        game_logger.log_game_event(
            'match_started', source='match', match_id=self.match_id,
            rounds=list(self.settings.round_word_lengths),
            starting_player=int(self.current_starting_player)
        )
        self.start_new_round()

    def start_new_round(self) -> None:
        if self.current_round_index >= self.settings.round_count:
            self._end_game()
            return

        word_length = max(1, self.settings.round_word_lengths[self.current_round_index])
        target_word = self._request_word(word_length)

        if self.engine is not None:
            self.engine.teardown()

        self.engine = RoundEngine(
            round_number=self.current_round_index + 1,
            target_word=target_word,
            starting_player=self.current_starting_player,
            settings=self.settings,
            scoreboard=self.scoreboard,
            board=self.board,
            status=self.status,
            scheduler=self.scheduler,
            award=self.add_score,
            on_round_complete=self._on_round_complete,
        )
        self.engine.begin()

    def advance_after_round(self) -> None:
        self.current_round_index += 1
        self.current_starting_player = self.current_starting_player.other
        self.start_new_round()

    def add_score(self, player: Player, amount: int) -> None:
        self.scoreboard.add_score(player, amount)
        game_logger.log_game_event(
            'score_awarded', source='match', match_id=self.match_id,
            player=int(player), points=amount, totals=list(self.scoreboard.totals())
        )

    def winner(self) -> Optional[Player]:
        """Player with the higher final score; None before the end or on a draw."""
        if not self.game_ended:
            return None
        player1_score, player2_score = self.scoreboard.totals()
        if player1_score == player2_score:
            return None
        return Player.ONE if player1_score > player2_score else Player.TWO

    def reset(self) -> None:
        """Abandon the current match and start over from round 1."""
        if self.engine is not None:
            self.engine.teardown()
        self.scheduler.cancel_all()

        self.scoreboard = Scoreboard()
        self.current_round_index = 0
        self.current_starting_player = Player(self.settings.starting_player)
        self.engine = None
        self.game_ended = False
        self.started = False

        game_logger.log_game_event('match_reset', source='match', match_id=self.match_id)
        self.start()

    # Input events

    def ready(self) -> bool:
        if not self._accepting_input():
            return False
        return self.engine.ready()

    def submit_guess(self, guess: Optional[str]) -> Optional[List[LetterResult]]:
        if not self._accepting_input():
            return None
        return self.engine.submit_guess(guess)

    def skip(self) -> bool:
        if not self._accepting_input():
            return False
        return self.engine.skip()

    def add_letter(self, letter: str) -> bool:
        if not self._accepting_input():
            return False
        return self.engine.add_letter(letter)

    def remove_letter(self) -> bool:
        if not self._accepting_input():
            return False
        return self.engine.remove_letter()

    def submit_current_row(self) -> Optional[List[LetterResult]]:
        if not self._accepting_input():
            return None
        return self.engine.submit_current_row()

    def press_enter(self) -> bool:
        if not self._accepting_input():
            return False
        return self.engine.press_enter()

    # Clock

    def advance(self, elapsed_seconds: float) -> None:
        """Advance the match clock by one tick.

        Pending delayed calls run before the round timer, so a round
        scheduled to end in this tick starts counting down on the next one.
        """
        if self.game_ended or not self.started:
            return
        elapsed_seconds = max(0.0, elapsed_seconds)

        self.scheduler.advance(elapsed_seconds)
        if self.engine is not None and not self.game_ended:
            self.engine.advance(elapsed_seconds)

    def snapshot(self) -> MatchState:
        winner = self.winner()
        engine = self.engine
        return MatchState(
            phase=self.phase.value,
            round_number=self.round_number,
            total_rounds=self.settings.round_count,
            player1_name=self.settings.player1_name,
            player2_name=self.settings.player2_name,
            player1_score=self.scoreboard.player1_score,
            player2_score=self.scoreboard.player2_score,
            round=engine.snapshot() if engine is not None else None,
            winner=int(winner) if winner else None,
            word_lengths=list(self.settings.round_word_lengths),
        )

    def _accepting_input(self) -> bool:
        return not self.game_ended and self.engine is not None

    def _on_round_complete(self, engine: RoundEngine) -> None:
        # stale hand-off from a round that is no longer current
        if engine is not self.engine or self.game_ended:
            return
        self.advance_after_round()

    def _request_word(self, length: int) -> str:
        try:
            word = self.word_source.get_word_by_length(length)
        except Exception as e:
            game_logger.logger.warning(f"Word source failed for length {length}: {e}")
            word = None

        if not isinstance(word, str) or len(word) != length or not word.isalpha():
            game_logger.logger.warning(f"Word source returned {word!r} for length {length}, using placeholder")
            return placeholder_word(length)
        return word.upper()

    def _end_game(self) -> None:
        self.game_ended = True
        self.board.lock_input()
        self.status.show_game_end(*self.scoreboard.totals())

        winner = self.winner()
        game_logger.log_game_event(
            'game_ended', source='match', match_id=self.match_id,
            player1_score=self.scoreboard.player1_score,
            player2_score=self.scoreboard.player2_score,
            winner=int(winner) if winner else None
        )


Match = MatchController
