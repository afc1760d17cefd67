"""Creating, reading, listing and deleting games.

None of this goes through the turn sequencer: creation and deletion are not
moves, and reads never change the version.
"""
import secrets
from typing import Dict, List, Sequence

from flask import current_app

from splenda.errors import NotFound, ValidationError
from . import scoring
from .catalog import CARDS, NOBLES, noble_ids, tier_card_ids
from .constants import (
    ALL_COLORS,
    COINS_PER_COLOR,
    MAX_PLAYERS,
    MIN_PLAYERS,
    NORMAL_COLORS,
    SLOTS_PER_TIER,
    TIERS,
    WILD_COINS,
    Color,
)
from .randomness import RandomSource, pick, shuffle
from .store import Store


def new_game_id() -> str:
    return secrets.token_urlsafe(16)


def starting_bank(player_count: int) -> Dict[Color, int]:
    per_color = COINS_PER_COLOR[player_count]
    bank = {color: per_color for color in NORMAL_COLORS}
    bank[Color.WILD] = WILD_COINS
    return bank


def _check_players(creator: str, players: Sequence[str]) -> List[str]:
    if not isinstance(players, (list, tuple)):
        raise ValidationError('players must be a list of user ids')
    players = list(players)
    if len(players) < MIN_PLAYERS:
        raise ValidationError(f'need at least {MIN_PLAYERS} players')
    if len(players) > MAX_PLAYERS:
        raise ValidationError(f'no more than {MAX_PLAYERS} players')
    if any(not isinstance(p, str) or not p for p in players):
        raise ValidationError('player ids must be non-empty strings')
    if len(set(players)) != len(players):
        raise ValidationError('players must be unique')
    if creator not in players:
        raise ValidationError('creator must be one of the players')
    return players


def create_game(store: Store, creator: str, players: Sequence[str], rng: RandomSource) -> str:
    """Deal a new game and return its id.

    Turn order is drawn once here and never changes afterwards.
    """
    players = _check_players(creator, players)
    game_id = new_game_id()
    order = shuffle(players, rng)

    with store.transaction(game_id) as tx:
        tx.insert_game(order[0])
        tx.insert_coins(starting_bank(len(order)))
        tx.insert_nobles(pick(noble_ids(), len(order) + 1, rng))

        for tier in TIERS:
            deck = shuffle(tier_card_ids(tier), rng)
            tx.insert_cards(tier, deck[:SLOTS_PER_TIER])
            tx.insert_deck(tier, deck[SLOTS_PER_TIER:])

        tx.insert_players(order)
        for user_id in order:
            tx.insert_player_coins(user_id, ALL_COLORS)

        tx.commit()

    current_app.logger.info(f"[create] game={game_id} creator={creator} order={order}")
    return game_id


def _coins_dict(coins):
    return {color.value: coins.get(color, 0) for color in ALL_COLORS}


def _describe_player(tx, user_id: str) -> dict:
    nobles = tx.get_player_nobles(user_id)
    owned, reserved = tx.get_player_cards(user_id)
    grouped = scoring.partition(owned)
    return {
        'id': user_id,
        'coins': _coins_dict(tx.get_player_coins(user_id)),
        'nobles': [NOBLES[n].to_dict() for n in nobles],
        'cards': {color.value: [c.to_dict() for c in cards] for color, cards in grouped.items()},
        'reserved': [CARDS[c].to_dict() for c in reserved],
        'points': scoring.score(nobles, owned),
    }


def get_game(store: Store, game_id: str, user_id: str) -> dict:
    """Full read model of a game, visible to its players only."""
    with store.transaction(game_id) as tx:
        if not tx.is_playing(user_id):
            raise NotFound()
        game = tx.get_game_basics()
        table = {
            'coins': _coins_dict(tx.get_coins()),
            'nobles': [NOBLES[n].to_dict() for n in tx.get_nobles()],
            'cards': [
                [CARDS[c].to_dict() if c else None for c in tx.get_cards(tier)]
                for tier in TIERS
            ],
            'decks': tx.get_deck_sizes(),
        }
        players = [_describe_player(tx, p) for p in tx.get_players()]

    return {
        'id': game.id,
        'version': game.version,
        'state': game.state.value,
        'current': game.current,
        'table': table,
        'players': players,
    }


def list_games(store: Store, user_id: str) -> Dict[str, List[str]]:
    return store.list_games(user_id)


def delete_game(store: Store, game_id: str, user_id: str) -> None:
    with store.transaction(game_id) as tx:
        if not tx.is_playing(user_id):
            raise NotFound()
        tx.delete_game()
        tx.commit()
    current_app.logger.info(f"[delete] game={game_id} user={user_id}")
