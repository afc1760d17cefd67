"""Persistence for game aggregates.

A ``GameTransaction`` wraps one SQLAlchemy session scoped to a single game.
All reads and writes of a move go through it, and nothing is visible to
other sessions until ``commit``.
"""
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from flask import current_app
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError

from splenda import db
from splenda.errors import Conflict, NotFound, StoreError
from splenda.models import (
    Game,
    GameCard,
    GameCoin,
    GameDeckCard,
    GameNoble,
    Player,
    PlayerCard,
    PlayerCoin,
    PlayerNoble,
)
from .constants import Color, GameState, SLOTS_PER_TIER, TIERS


@dataclass(frozen=True)
class GameBasics:
    id: str
    version: int
    state: GameState
    current: str


class GameTransaction:
    """A single unit of work on one game."""

    def __init__(self, session, game_id: str):
        self.session = session
        self.game_id = game_id
        self.committed = False

    #
    # Queries
    #

    def is_playing(self, user_id: str) -> bool:
        q = self.session.query(Player).filter_by(game_id=self.game_id, user_id=user_id)
        return self.session.query(q.exists()).scalar()

    def get_game_basics(self) -> GameBasics:
        game = self.session.query(Game).filter_by(id=self.game_id).first()
        if game is None:
            raise NotFound()
        return GameBasics(id=game.id, version=game.version, state=game.state, current=game.current)

    def get_coins(self) -> Dict[Color, int]:
        rows = self.session.query(GameCoin).filter_by(game_id=self.game_id)
        return {row.color: row.count for row in rows}

    def get_nobles(self) -> List[str]:
        rows = self.session.query(GameNoble).filter_by(game_id=self.game_id).order_by(GameNoble.position)
        return [row.noble_id for row in rows]

    def get_cards(self, tier: int) -> List[Optional[str]]:
        """Card ids on the table for a tier; ``None`` marks an empty slot."""
        cards = [None] * SLOTS_PER_TIER
        for row in self.session.query(GameCard).filter_by(game_id=self.game_id, tier=tier):
            cards[row.position] = row.card_id
        return cards

    def get_deck_sizes(self) -> List[int]:
        rows = (
            self.session.query(GameDeckCard.tier, func.count())
            .filter_by(game_id=self.game_id)
            .group_by(GameDeckCard.tier)
        )
        counts = dict(rows)
        return [counts.get(tier, 0) for tier in TIERS]

    def get_top_card(self, tier: int) -> Optional[str]:
        row = (
            self.session.query(GameDeckCard)
            .filter_by(game_id=self.game_id, tier=tier)
            .order_by(GameDeckCard.position)
            .first()
        )
        return row.card_id if row else None

    def get_players(self) -> List[str]:
        rows = self.session.query(Player).filter_by(game_id=self.game_id).order_by(Player.position)
        return [row.user_id for row in rows]

    def get_player_coins(self, user_id: str) -> Dict[Color, int]:
        rows = self.session.query(PlayerCoin).filter_by(game_id=self.game_id, user_id=user_id)
        return {row.color: row.count for row in rows}

    def get_player_nobles(self, user_id: str) -> List[str]:
        rows = self.session.query(PlayerNoble).filter_by(game_id=self.game_id, user_id=user_id)
        return [row.noble_id for row in rows]

    def get_player_cards(self, user_id: str) -> Tuple[List[str], List[str]]:
        """Return ``(owned, reserved)`` card ids, each in acquisition order."""
        rows = (
            self.session.query(PlayerCard)
            .filter_by(game_id=self.game_id, user_id=user_id)
            .order_by(PlayerCard.sequence)
        )
        owned, reserved = [], []
        for row in rows:
            (reserved if row.reserved else owned).append(row.card_id)
        return owned, reserved

    #
    # Inserts
    #

    def insert_game(self, first_player: str) -> None:
        self.session.add(Game(id=self.game_id, version=0, state=GameState.PLAYING, current=first_player))
        self.session.flush()

    def insert_coins(self, coins: Mapping[Color, int]) -> None:
        for color, count in coins.items():
            self.session.add(GameCoin(game_id=self.game_id, color=color, count=count))

    def insert_nobles(self, nobles: Iterable[str]) -> None:
        for position, noble_id in enumerate(nobles):
            self.session.add(GameNoble(game_id=self.game_id, position=position, noble_id=noble_id))

    def insert_cards(self, tier: int, cards: Iterable[str]) -> None:
        for position, card_id in enumerate(cards):
            self.session.add(GameCard(game_id=self.game_id, tier=tier, position=position, card_id=card_id))

    def insert_deck(self, tier: int, cards: Iterable[str]) -> None:
        for position, card_id in enumerate(cards):
            self.session.add(GameDeckCard(game_id=self.game_id, tier=tier, position=position, card_id=card_id))

    def insert_players(self, user_ids: Iterable[str]) -> None:
        for position, user_id in enumerate(user_ids):
            self.session.add(Player(game_id=self.game_id, user_id=user_id, position=position))

    def insert_player_coins(self, user_id: str, colors: Iterable[Color]) -> None:
        for color in colors:
            self.session.add(PlayerCoin(game_id=self.game_id, user_id=user_id, color=color, count=0))

    def insert_player_card(self, user_id: str, card_id: str, reserved: bool) -> None:
        sequence = (
            self.session.query(func.count(PlayerCard.card_id))
            .filter_by(game_id=self.game_id, user_id=user_id)
            .scalar()
        )
        self.session.add(PlayerCard(
            game_id=self.game_id, user_id=user_id, card_id=card_id,
            reserved=reserved, sequence=sequence,
        ))
        self.session.flush()

    #
    # Updates
    #

    def update_coins(self, coins: Mapping[Color, int]) -> None:
        for color, count in coins.items():
            self.session.query(GameCoin).filter_by(game_id=self.game_id, color=color).update({'count': count})

    def update_player_coins(self, user_id: str, coins: Mapping[Color, int]) -> None:
        for color, count in coins.items():
            (self.session.query(PlayerCoin)
             .filter_by(game_id=self.game_id, user_id=user_id, color=color)
             .update({'count': count}))

    def transfer_card(self, tier: int, position: int, card_id: str) -> None:
        """Move ``card_id`` from the tier's deck onto the given table slot."""
        (self.session.query(GameDeckCard)
         .filter_by(game_id=self.game_id, tier=tier, card_id=card_id)
         .delete())
        updated = (
            self.session.query(GameCard)
            .filter_by(game_id=self.game_id, tier=tier, position=position)
            .update({'card_id': card_id})
        )
        if not updated:
            self.session.add(GameCard(game_id=self.game_id, tier=tier, position=position, card_id=card_id))
            self.session.flush()

    def remove_card(self, tier: int, position: int) -> None:
        (self.session.query(GameCard)
         .filter_by(game_id=self.game_id, tier=tier, position=position)
         .delete())

    def update_game(self, expected_version: int, state: GameState, current: str) -> int:
        """Bump the version iff it still equals ``expected_version``.

        Raises ``Conflict`` when another move committed in between.
        """
        updated = (
            self.session.query(Game)
            .filter_by(id=self.game_id, version=expected_version)
            .update(
                {'version': Game.version + 1, 'state': state, 'current': current},
                synchronize_session=False,
            )
        )
        if updated != 1:
            raise Conflict()
        return expected_version + 1

    #
    # Deletes
    #

    def delete_game(self) -> None:
        game = self.session.query(Game).filter_by(id=self.game_id).first()
        if game is None:
            raise NotFound()
        self.session.delete(game)

    def commit(self) -> None:
        self.session.commit()
        self.committed = True

    def rollback(self) -> None:
        self.session.rollback()


class Store:
    """Opens game transactions on the Flask-SQLAlchemy session."""

    def __init__(self, session=None):
        self._session = session

    @property
    def session(self):
        return self._session if self._session is not None else db.session

    @contextmanager
    def transaction(self, game_id: str, session=None):
        tx = GameTransaction(session if session is not None else self.session, game_id)
        try:
            yield tx
        except SQLAlchemyError as exc:
            tx.rollback()
            current_app.logger.exception(f"[store] game={game_id} database error")
            raise StoreError() from exc
        except Exception:
            tx.rollback()
            raise
        else:
            if not tx.committed:
                tx.rollback()

    def list_games(self, user_id: str) -> Dict[str, List[str]]:
        """Map each game the user plays in to its players in turn order."""
        session = self.session
        try:
            mine = db.select(Player.game_id).where(Player.user_id == user_id)
            rows = (
                session.query(Player.game_id, Player.user_id)
                .filter(Player.game_id.in_(mine))
                .order_by(Player.game_id, Player.position)
                .all()
            )
        except SQLAlchemyError as exc:
            session.rollback()
            current_app.logger.exception(f"[store] list games for user={user_id} failed")
            raise StoreError() from exc
        games: Dict[str, List[str]] = {}
        for game_id, uid in rows:
            games.setdefault(game_id, []).append(uid)
        return games
