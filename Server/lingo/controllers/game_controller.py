"""
Game Controller

Handles all match-related HTTP endpoints. Inputs are queued on the game
service and applied on the next tick.
"""

from flask import Blueprint, current_app, request, jsonify
from dataclasses import asdict
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


def _queue_command(action, *args, **log_details):
    """Queue a command and build the JSON response."""
    try:
        game_service = current_app.game_service

        game_logger.log_user_action(request, action, **log_details)
        game_service.enqueue(action, *args)

        response_data = {
            'success': True,
            'queued': action,
            'pending_commands': game_service.pending_commands()
        }
        game_logger.log_server_response(request, action, True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, action)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, action, False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/state', methods=['GET'])
def get_state():
    """Get current match state."""
    try:
        state = current_app.game_service.snapshot()
        response_data = {
            'success': True,
            'state': asdict(state)
        }
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_state')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_state', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/ready', methods=['POST'])
def ready():
    """Start the main phase of the current round."""
    return _queue_command('ready')


@game_bp.route('/guess', methods=['POST'])
def submit_guess():
    """Submit a guess for the player whose turn it is."""
    data = request.get_json(silent=True)
    if not data or not isinstance(data.get('guess'), str) or not data['guess']:
        error_response = {
            'success': False,
            'error': 'Guess is required'
        }
        game_logger.log_server_response(request, 'submit_guess', False, error_response)
        return jsonify(error_response), 400

    guess = data['guess']
    return _queue_command('submit_guess', guess, guess=guess, guess_length=len(guess))


@game_bp.route('/skip', methods=['POST'])
def skip():
    """Forfeit the current attempt."""
    return _queue_command('skip')


@game_bp.route('/reset', methods=['POST'])
def reset():
    """Abandon the match and start again from round 1."""
    return _queue_command('reset')


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = current_app.game_service

        response_data = {
            'status': 'healthy',
            'phase': game_service.match.phase.value,
            'pending_commands': game_service.pending_commands(),
            'tick_loop_running': game_service.running,
            'log_stats': game_logger.get_log_stats()
        }
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
