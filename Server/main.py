"""
Lingo Duel Server - Main Entry Point

This is the main entry point for the game server.
It configures logging, builds the match and starts the Flask-SocketIO
application together with the match tick loop.
"""

from lingo import create_app
from lingo.config import Config
from lingo.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        game_logger.configure(Config.LOG_DIR, Config.LOG_LEVEL)

        print("Creating Flask application...")
        app, socketio = create_app(Config)
        game_service = app.game_service
        print("✓ Flask application created successfully")

        # Drive the match clock from a background task
        socketio.start_background_task(
            game_service.run_tick_loop, Config.TICK_INTERVAL_SECONDS, socketio.sleep
        )
        print(f"✓ Tick loop started - advancing every {Config.TICK_INTERVAL_SECONDS}s")

        settings = game_service.match.settings
        game_logger.logger.info(
            f"Lingo Duel Server starting - rounds={list(settings.round_word_lengths)} "
            f"max_attempts={settings.max_attempts}"
        )

        print(f"\nStarting Lingo Duel Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        # the reloader would start a second tick loop in its parent process
        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG, use_reloader=False)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Lingo Duel Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
