import pytest

from lingo import create_app
from lingo.config import MatchSettings, TestingConfig
from lingo.services.game_service import GameService
from lingo.services.match_controller import MatchController
from lingo.services.round_engine import RoundEngine
from lingo.services.scheduler import TickScheduler
from lingo.models.game import Player, Scoreboard


class RecordingSink:
    """Board and status sink that remembers every call."""

    def __init__(self):
        self.calls = []

    def __getattr__(self, name):
        if name.startswith('_'):
            raise AttributeError(name)

        def record(*args):
            self.calls.append((name, args))
        return record

    def names(self):
        return [name for name, _ in self.calls]

    def last(self, name):
        for call_name, args in reversed(self.calls):
            if call_name == name:
                return args
        return None

    def count(self, name):
        return sum(1 for call_name, _ in self.calls if call_name == name)

    def clear(self):
        self.calls = []


class FixedWordSource:
    """Returns preset words per length, in order."""

    def __init__(self, words):
        self.words = list(words)
        self.requests = []

    def get_word_by_length(self, length):
        self.requests.append(length)
        for index, word in enumerate(self.words):
            if len(word) == length:
                return self.words.pop(index)
        return ""


def make_settings(**overrides):
    values = dict(
        round_word_lengths=(5, 5, 5),
        max_attempts=5,
        row_time_limit_seconds=30.0,
        steal_time_limit_seconds=15.0,
        end_round_delay_seconds=1.0,
    )
    values.update(overrides)
    return MatchSettings(**values)


@pytest.fixture()
def sink():
    return RecordingSink()


@pytest.fixture()
def settings():
    return make_settings()


@pytest.fixture()
def make_engine(sink):
    """Build a standalone RoundEngine wired to recording collaborators."""

    def factory(target='CRANE', starting_player=Player.ONE, **overrides):
        scoreboard = Scoreboard()
        scheduler = TickScheduler()
        completed = []
        engine = RoundEngine(
            round_number=1,
            target_word=target,
            starting_player=starting_player,
            settings=make_settings(**overrides),
            scoreboard=scoreboard,
            board=sink,
            status=sink,
            scheduler=scheduler,
            award=scoreboard.add_score,
            on_round_complete=completed.append,
        )
        engine.begin()
        engine.scoreboard = scoreboard
        engine.scheduler = scheduler
        engine.completed = completed
        return engine

    return factory


@pytest.fixture()
def make_match(sink):
    def factory(words=('CRANE', 'APPLE', 'GHOST'), **overrides):
        overrides.setdefault('round_word_lengths', tuple(len(word) for word in words))
        match = MatchController(
            word_source=FixedWordSource(words),
            settings=make_settings(**overrides),
            board=sink,
            status=sink,
        )
        match.start()
        return match

    return factory


class AppTestConfig(TestingConfig):
    ROUND_WORD_LENGTHS = [5, 5]


@pytest.fixture()
def game_service():
    match = MatchController(
        word_source=FixedWordSource(['CRANE', 'APPLE']),
        settings=MatchSettings.from_config(AppTestConfig),
    )
    return GameService(match)


@pytest.fixture()
def flask_app(game_service):
    app, _ = create_app(AppTestConfig, game_service=game_service)
    return app


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def socket_app():
    """App built from config so the Socket.IO sink is wired in."""
    app, socketio = create_app(AppTestConfig)
    app.game_service.match.word_source = FixedWordSource(['CRANE', 'APPLE'])
    app.game_service.match.reset()
    return app, socketio


@pytest.fixture()
def sio_client(socket_app):
    app, socketio = socket_app
    test_client = socketio.test_client(app, flask_test_client=app.test_client())
    yield test_client
    if test_client.is_connected():
        test_client.disconnect()
