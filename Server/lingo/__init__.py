"""
Lingo Duel Server Application Package

Two-player, turn-based word-guessing game core (rounds, steal phase,
scoring) served to a local front end over HTTP and Socket.IO.
"""

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config, MatchSettings


def build_game_service(config_class, sink=None):
    """Create the word bank, match and game service described by a config."""
    from .services.game_service import GameService
    from .services.match_controller import MatchController
    from .services.word_bank import WordBank

    settings = MatchSettings.from_config(config_class)
    match = MatchController(
        word_source=WordBank.from_file(config_class.WORD_LIST_PATH),
        settings=settings,
        board=sink,
        status=sink,
    )
    return GameService(match)


def create_app(config_class=Config, game_service=None):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use
        game_service: Prebuilt GameService; built from config_class when omitted

    Returns:
        Tuple of (Flask app, SocketIO instance) with the match started
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app)
    socketio = SocketIO(app, cors_allowed_origins="*", logger=False, engineio_logger=False)

    if game_service is None:
        from .websocket.sink import SocketIOSink
        sink = SocketIOSink(socketio, (config_class.PLAYER1_NAME, config_class.PLAYER2_NAME))
        game_service = build_game_service(config_class, sink)
    game_service.match.start()

    # Register blueprints
    from .controllers.game_controller import game_bp
    app.register_blueprint(game_bp, url_prefix='/api')

    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio, game_service)

    # Store instances for use in request handlers
    app.socketio = socketio
    app.game_service = game_service

    return app, socketio
