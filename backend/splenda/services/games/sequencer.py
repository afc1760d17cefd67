"""Runs a move end to end inside one game transaction.

The sequence for every move is: open a transaction, load the game and its
turn order, check the caller is the current player, run the move, then bump
the version with a compare-and-swap and commit. A move that fails anywhere
leaves no trace, and a move that loses the race to another commit fails with
``Conflict``. Nothing here retries.
"""
from dataclasses import dataclass
from typing import List

from flask import current_app

from splenda.errors import Conflict, NotFound, NotYourTurn, SplendaError
from .constants import GameState
from .store import GameBasics, GameTransaction, Store


@dataclass(frozen=True)
class MoveOutcome:
    state: GameState
    current: str


@dataclass
class MoveContext:
    """Everything a move needs; lives only for the duration of one move."""
    tx: GameTransaction
    user_id: str
    game: GameBasics
    players: List[str]
    index: int

    def next_player(self) -> MoveOutcome:
        """Hand the turn to the cyclic successor of the acting player."""
        following = self.players[(self.index + 1) % len(self.players)]
        return MoveOutcome(GameState.PLAYING, following)

    def stay(self, state: GameState) -> MoveOutcome:
        """Switch state but keep the acting player current."""
        return MoveOutcome(state, self.user_id)


class TurnSequencer:
    def __init__(self, store: Store):
        self.store = store

    def apply_move(self, game_id: str, user_id: str, move) -> int:
        """Apply ``move`` for ``user_id`` and return the new game version."""
        with self.store.transaction(game_id) as tx:
            ctx = self.premove(tx, user_id)
            try:
                outcome = move.apply(ctx)
            except SplendaError as exc:
                current_app.logger.debug(
                    f"[move-rejected] game={game_id} user={user_id} kind={move.kind} code={exc.code}"
                )
                raise
            return self.postmove(ctx, outcome, move.kind)

    def premove(self, tx: GameTransaction, user_id: str) -> MoveContext:
        game = tx.get_game_basics()
        players = tx.get_players()
        if user_id not in players:
            raise NotFound()
        if user_id != game.current:
            raise NotYourTurn()
        return MoveContext(tx=tx, user_id=user_id, game=game, players=players, index=players.index(user_id))

    def postmove(self, ctx: MoveContext, outcome: MoveOutcome, kind: str = 'move') -> int:
        try:
            version = ctx.tx.update_game(ctx.game.version, outcome.state, outcome.current)
        except Conflict:
            current_app.logger.warning(
                f"[conflict] game={ctx.game.id} user={ctx.user_id} kind={kind} expected_version={ctx.game.version}"
            )
            raise
        ctx.tx.commit()
        current_app.logger.info(
            f"[move] game={ctx.game.id} user={ctx.user_id} kind={kind} version={version} "
            f"state={outcome.state.value} next={outcome.current}"
        )
        return version
