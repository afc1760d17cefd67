import os
import sys
import pytest
from flask import g

# Ensure the backend root (containing the `splenda` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from splenda import create_app, db
from splenda.models import GameDeckCard, GameNoble
from splenda.services.games.constants import Color


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SHUFFLE_SEED = 1234
    USER_ID_HEADER = 'X-User-Id'
    ALLOWED_ORIGINS = []
    LOG_LEVEL = 'DEBUG'


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def file_flask_app(tmp_path):
    """App on a SQLite file, so separate sessions get separate connections."""
    class FileConfig(TestConfig):
        SQLALCHEMY_DATABASE_URI = f"sqlite:///{tmp_path / 'games.db'}"

    application = create_app(FileConfig)
    with application.app_context():
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()
        db.engine.dispose()


@pytest.fixture()
def client(flask_app):
    # The fixture's app context is shared by every test request, so flask-login's
    # per-request user cache on ``g`` must be cleared as a fresh context would.
    @flask_app.before_request
    def _fresh_login_cache():
        g.pop('_login_user', None)

    return flask_app.test_client()


@pytest.fixture()
def service(flask_app):
    return flask_app.extensions['splenda']


@pytest.fixture()
def make_game(service):
    """Create a game and return ``(game_id, turn_order)``."""
    def _make(players=('alice', 'bob'), creator=None):
        players = list(players)
        game_id = service.new_game(creator or players[0], players)
        order = [p['id'] for p in service.get_game(game_id, players[0])['players']]
        return game_id, order
    return _make


def _coins(coins):
    return {Color(name): count for name, count in coins.items()}


class Rig:
    """Puts a game into a specific position for a test."""

    def __init__(self, store):
        self.store = store

    def bank(self, game_id, **coins):
        with self.store.transaction(game_id) as tx:
            tx.update_coins(_coins(coins))
            tx.commit()

    def purse(self, game_id, user_id, **coins):
        with self.store.transaction(game_id) as tx:
            tx.update_player_coins(user_id, _coins(coins))
            tx.commit()

    def place(self, game_id, tier, index, card_id):
        with self.store.transaction(game_id) as tx:
            tx.transfer_card(tier, index, card_id)
            tx.commit()

    def own(self, game_id, user_id, *card_ids, reserved=False):
        with self.store.transaction(game_id) as tx:
            for card_id in card_ids:
                tx.insert_player_card(user_id, card_id, reserved=reserved)
            tx.commit()

    def empty_deck(self, game_id, tier):
        with self.store.transaction(game_id) as tx:
            tx.session.query(GameDeckCard).filter_by(game_id=game_id, tier=tier).delete()
            tx.commit()

    def nobles(self, game_id, *noble_ids):
        with self.store.transaction(game_id) as tx:
            tx.session.query(GameNoble).filter_by(game_id=game_id).delete()
            tx.insert_nobles(noble_ids)
            tx.commit()


@pytest.fixture()
def rig(service):
    return Rig(service.store)
