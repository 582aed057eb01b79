"""
WebSocket Event Handlers

Receives player input over Socket.IO and queues it on the game service.
State changes reach clients through the SocketIOSink broadcasts.
"""

from dataclasses import asdict
from flask import request
from flask_socketio import emit, join_room
from ..utils.game_logger import game_logger
from .sink import MATCH_ROOM


def register_websocket_handlers(socketio, game_service):
    """Register all WebSocket event handlers for one game service."""

    def queue(action, *args, **log_details):
        game_logger.log_user_action(request, action, transport='websocket', **log_details)
        game_service.enqueue(action, *args)

    @socketio.on('connect')
    def handle_connect(*args):
        """Join the match room and send the current state."""
        join_room(MATCH_ROOM)
        emit('match_state', {'success': True, 'state': asdict(game_service.snapshot())})

    @socketio.on('disconnect')
    def handle_disconnect(*args):
        game_logger.log_user_action(request, 'disconnect', transport='websocket')

    @socketio.on('request_state')
    def handle_request_state(data=None):
        emit('match_state', {'success': True, 'state': asdict(game_service.snapshot())})

    @socketio.on('ready')
    def handle_ready(data=None):
        queue('ready')

    @socketio.on('type_letter')
    def handle_type_letter(data):
        letter = data.get('letter') if isinstance(data, dict) else None
        if not isinstance(letter, str) or len(letter) != 1:
            emit('error', {'error': 'A single letter is required'})
            return
        game_service.enqueue('type_letter', letter)

    @socketio.on('delete_letter')
    def handle_delete_letter(data=None):
        game_service.enqueue('delete_letter')

    @socketio.on('submit_row')
    def handle_submit_row(data=None):
        queue('submit_row')

    @socketio.on('press_enter')
    def handle_press_enter(data=None):
        queue('press_enter')

    @socketio.on('submit_guess')
    def handle_submit_guess(data):
        guess = data.get('guess') if isinstance(data, dict) else None
        if not isinstance(guess, str) or not guess:
            emit('error', {'error': 'Guess is required'})
            return
        queue('submit_guess', guess, guess=guess)

    @socketio.on('skip')
    def handle_skip(data=None):
        queue('skip')

    @socketio.on('reset_match')
    def handle_reset(data=None):
        queue('reset')
