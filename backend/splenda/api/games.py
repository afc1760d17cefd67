from flask import Blueprint, jsonify, request, current_app
from flask_login import login_required, current_user

from splenda.errors import (
    Conflict,
    InsufficientCoins,
    MoveNotAllowed,
    NoCardThere,
    NotFound,
    NotYourTurn,
    SplendaError,
    StoreError,
    TooManyReserved,
    ValidationError,
)


games = Blueprint('games', __name__)

_STATUS = {
    ValidationError: 400,
    NoCardThere: 400,
    TooManyReserved: 400,
    InsufficientCoins: 400,
    NotYourTurn: 403,
    NotFound: 404,
    Conflict: 409,
    MoveNotAllowed: 409,
    StoreError: 500,
}


def _status_for(exc: SplendaError) -> int:
    for cls in type(exc).__mro__:
        if cls in _STATUS:
            return _STATUS[cls]
    return 500


@games.errorhandler(SplendaError)
def handle_game_error(exc):
    return jsonify(exc.to_dict()), _status_for(exc)


def _service():
    return current_app.extensions['splenda']


def _body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError('request body must be a JSON object')
    return data


@games.route('', methods=['GET'])
@login_required
def list_games():
    return jsonify(_service().list_games(current_user.id))


@games.route('', methods=['POST'])
@login_required
def create_game():
    data = _body()
    game_id = _service().new_game(current_user.id, data.get('players'))
    return jsonify({'id': game_id}), 201


@games.route('/<string:game_id>', methods=['GET'])
@login_required
def get_game(game_id):
    return jsonify(_service().get_game(game_id, current_user.id))


@games.route('/<string:game_id>', methods=['DELETE'])
@login_required
def delete_game(game_id):
    _service().delete_game(game_id, current_user.id)
    return '', 204


@games.route('/<string:game_id>/take3', methods=['POST'])
@login_required
def take_three(game_id):
    data = _body()
    version = _service().take_three(game_id, current_user.id, data.get('colors'))
    return jsonify({'version': version})


@games.route('/<string:game_id>/take2', methods=['POST'])
@login_required
def take_two(game_id):
    data = _body()
    version = _service().take_two(game_id, current_user.id, data.get('color'))
    return jsonify({'version': version})


@games.route('/<string:game_id>/reserve', methods=['POST'])
@login_required
def reserve(game_id):
    data = _body()
    version = _service().reserve(game_id, current_user.id, data.get('tier'), data.get('index'))
    return jsonify({'version': version})


@games.route('/<string:game_id>/buy', methods=['POST'])
@login_required
def buy(game_id):
    data = _body()
    version = _service().buy(game_id, current_user.id, data.get('tier'), data.get('index'))
    return jsonify({'version': version})
