from flask import Flask, jsonify
from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager
from flask_cors import CORS
from flask_migrate import Migrate
import click
from config import Config

db = SQLAlchemy()
login_manager = LoginManager()
migrate = Migrate()


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    db.init_app(flask_app)
    login_manager.init_app(flask_app)
    migrate.init_app(flask_app, db)
    CORS(flask_app, supports_credentials=True, origins=flask_app.config.get('ALLOWED_ORIGINS', []))

    # Models must be registered on the metadata before migrations or create_all run
    from splenda import models  # noqa: F401

    from splenda.main import main
    flask_app.register_blueprint(main)

    from splenda.api.games import games
    flask_app.register_blueprint(games, url_prefix='/api/games')

    from splenda.services.games.randomness import make_random_source
    from splenda.services.games.service import GameService
    flask_app.extensions['splenda'] = GameService(
        rng=make_random_source(flask_app.config.get('SHUFFLE_SEED')),
    )

    # Identity is established upstream; the header carries the verified user id
    from splenda.auth import Identity

    @login_manager.request_loader
    def load_user_from_request(request):
        user_id = request.headers.get(flask_app.config.get('USER_ID_HEADER', 'X-User-Id'))
        if not user_id:
            return None
        return Identity(user_id)

    @login_manager.unauthorized_handler
    def unauthorized():
        return jsonify({'code': 'Unauthorized', 'error': 'missing user identity'}), 401

    @click.command('db-reset')
    def db_reset_command():
        """Drops and recreates every game table."""
        with flask_app.app_context():
            db.drop_all()
            db.create_all()
            print('Database has been reset!')

    flask_app.cli.add_command(db_reset_command)

    return flask_app
