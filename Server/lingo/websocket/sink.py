"""
Socket.IO Output Sink

Implements the board and status ports by broadcasting events to every
client in the match room.
"""

import math
from typing import Optional, Tuple

MATCH_ROOM = 'match'


class SocketIOSink:
    """Board and status display backed by Socket.IO broadcasts."""

    def __init__(self, socketio, player_names: Tuple[str, str] = ("P1", "P2"), room: str = MATCH_ROOM):
        self.socketio = socketio
        self.player_names = player_names
        self.room = room
        self._last_timer: Optional[tuple] = None

    def _emit(self, event: str, payload: dict) -> None:
        self.socketio.emit(event, payload, room=self.room)

    def _name(self, player: int) -> str:
        return self.player_names[0] if player == 1 else self.player_names[1]

    # Board

    def setup_board(self, word_length, max_attempts, first_letter):
        self._emit('board_setup', {
            'word_length': word_length,
            'max_attempts': max_attempts,
            'first_letter': first_letter
        })

    def set_active_row(self, row_index):
        self._emit('row_activated', {'row': row_index})

    def create_steal_row(self, row_index):
        self._emit('steal_row_created', {'row': row_index})

    def show_row_letters(self, row_index, letters):
        self._emit('row_letters', {'row': row_index, 'letters': list(letters)})

    def show_guess_result(self, row_index, results):
        self._emit('guess_result', {
            'row': row_index,
            'results': [result.as_pair() for result in results]
        })

    def lock_input(self):
        self._emit('input_locked', {'locked': True})

    def unlock_input(self):
        self._emit('input_locked', {'locked': False})

    # Status

    def update_round(self, round_number, word_length, starting_player):
        stealing_player = 2 if starting_player == 1 else 1
        self._last_timer = None
        self._emit('round_update', {
            'round_number': round_number,
            'word_length': word_length,
            'starting_player': starting_player,
            'starter_name': self._name(starting_player),
            'stealer_name': self._name(stealing_player)
        })

    def show_ready_phase(self):
        self._emit('ready_phase', {})

    def show_main_phase(self, player, attempt_number, remaining):
        self._last_timer = ('main', player, attempt_number, math.ceil(remaining))
        self._emit('main_phase', {
            'player': player,
            'name': self._name(player),
            'attempt_number': attempt_number,
            'remaining': remaining,
            'display_seconds': math.ceil(remaining)
        })

    def show_steal_phase(self, player, remaining):
        self._last_timer = ('steal', player, None, math.ceil(remaining))
        self._emit('steal_phase', {
            'player': player,
            'name': self._name(player),
            'remaining': remaining,
            'display_seconds': math.ceil(remaining)
        })

    def update_main_timer(self, player, attempt_number, remaining):
        self._emit_timer('main', player, attempt_number, remaining)

    def update_steal_timer(self, player, remaining):
        self._emit_timer('steal', player, None, remaining)

    def _emit_timer(self, phase, player, attempt_number, remaining):
        # one event per displayed second
        key = (phase, player, attempt_number, math.ceil(remaining))
        if key == self._last_timer:
            return
        self._last_timer = key
        self._emit('timer_update', {
            'phase': phase,
            'player': player,
            'name': self._name(player),
            'attempt_number': attempt_number,
            'remaining': remaining,
            'display_seconds': key[3]
        })

    def update_scores(self, player1_score, player2_score):
        self._emit('score_update', {
            'player1_score': player1_score,
            'player2_score': player2_score,
            'player1_name': self.player_names[0],
            'player2_name': self.player_names[1]
        })

    def show_correct_word(self, word):
        self._emit('word_revealed', {'word': word})

    def show_game_end(self, player1_score, player2_score):
        if player1_score == player2_score:
            winner = None
        else:
            winner = 1 if player1_score > player2_score else 2
        self._emit('game_ended', {
            'player1_score': player1_score,
            'player2_score': player2_score,
            'winner': winner,
            'winner_name': self._name(winner) if winner else None
        })
