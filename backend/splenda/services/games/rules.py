"""Move rules.

Each move kind is an immutable object built by ``parse`` from raw request
values (raising ``ValidationError`` on bad input) and applied by the turn
sequencer through ``apply``. Rules read and write the game only through the
transaction on the move context.

Only ``PLAYING`` accepts the moves below. Choosing a noble once a buy has put
the game in ``PICKING_NOBLE`` is not implemented; such a move would subclass
``Move`` with ``allowed_state = GameState.PICKING_NOBLE``.
"""
from dataclasses import dataclass
from typing import Mapping, Tuple

from flask import current_app

from splenda.errors import (
    InsufficientCoins,
    MoveNotAllowed,
    NoCardThere,
    TooManyReserved,
    ValidationError,
)
from . import ledger, scoring
from .catalog import CARDS
from .constants import (
    MAX_RESERVED,
    SLOTS_PER_TIER,
    TAKE_TWO_MINIMUM,
    TIERS,
    WINNING_POINTS,
    Color,
    GameState,
)
from .sequencer import MoveContext, MoveOutcome


def _parse_normal_color(value) -> Color:
    try:
        color = Color(value)
    except (TypeError, ValueError):
        raise ValidationError(f'invalid coin color: {value!r}')
    if not color.is_normal:
        raise ValidationError(f'invalid coin color: {value!r}')
    return color


def _parse_int(name, value, valid) -> int:
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, bool) or not isinstance(value, int) or value not in valid:
        raise ValidationError(f'invalid {name}: {value!r}')
    return value


def _parse_slot(tier, index) -> Tuple[int, int]:
    return (
        _parse_int('tier', tier, TIERS),
        _parse_int('index', index, range(SLOTS_PER_TIER)),
    )


def _earn(ctx: MoveContext, limits: Mapping[Color, int], deltas: Mapping[Color, int]) -> None:
    bank = ctx.tx.get_coins()
    purse = ctx.tx.get_player_coins(ctx.user_id)
    bank, purse = ledger.earn_coins(bank, purse, limits, deltas)
    ctx.tx.update_coins(bank)
    ctx.tx.update_player_coins(ctx.user_id, purse)


def _pay(ctx: MoveContext, owned: Mapping[Color, int], cost: Mapping[Color, int]) -> None:
    bank = ctx.tx.get_coins()
    purse = ctx.tx.get_player_coins(ctx.user_id)
    bank, purse = ledger.pay_cost(bank, purse, owned, cost)
    ctx.tx.update_coins(bank)
    ctx.tx.update_player_coins(ctx.user_id, purse)


def _card_at(ctx: MoveContext, tier: int, index: int) -> str:
    card_id = ctx.tx.get_cards(tier)[index]
    if card_id is None:
        raise NoCardThere()
    return card_id


def _deal(ctx: MoveContext, tier: int, index: int) -> None:
    """Refill a vacated slot from the top of the tier's deck, if any."""
    card_id = ctx.tx.get_top_card(tier)
    if card_id is not None:
        ctx.tx.transfer_card(tier, index, card_id)
    else:
        ctx.tx.remove_card(tier, index)


def _someone_won(ctx: MoveContext) -> bool:
    for user_id in ctx.players:
        owned, _ = ctx.tx.get_player_cards(user_id)
        if scoring.score(ctx.tx.get_player_nobles(user_id), owned) >= WINNING_POINTS:
            return True
    return False


class Move:
    kind = 'move'
    allowed_state = GameState.PLAYING

    def apply(self, ctx: MoveContext) -> MoveOutcome:
        if ctx.game.state != self.allowed_state:
            raise MoveNotAllowed()
        return self.execute(ctx)

    def execute(self, ctx: MoveContext) -> MoveOutcome:
        raise NotImplementedError


@dataclass(frozen=True)
class TakeThree(Move):
    """Take one coin each of three different normal colors."""
    colors: Tuple[Color, ...]

    kind = 'take3'

    @classmethod
    def parse(cls, colors) -> 'TakeThree':
        if not isinstance(colors, (list, tuple)) or len(colors) != 3:
            raise ValidationError('must specify three colors')
        parsed = tuple(_parse_normal_color(c) for c in colors)
        if len(set(parsed)) != len(parsed):
            raise ValidationError('colors must be unique')
        return cls(parsed)

    def execute(self, ctx):
        delta = {color: 1 for color in self.colors}
        _earn(ctx, delta, delta)
        return ctx.next_player()


@dataclass(frozen=True)
class TakeTwo(Move):
    """Take two coins of one color, allowed only while the pile holds four."""
    color: Color

    kind = 'take2'

    @classmethod
    def parse(cls, color) -> 'TakeTwo':
        return cls(_parse_normal_color(color))

    def execute(self, ctx):
        _earn(ctx, {self.color: TAKE_TWO_MINIMUM}, {self.color: 2})
        return ctx.next_player()


@dataclass(frozen=True)
class Reserve(Move):
    tier: int
    index: int

    kind = 'reserve'

    @classmethod
    def parse(cls, tier, index) -> 'Reserve':
        return cls(*_parse_slot(tier, index))

    def execute(self, ctx):
        _, reserved = ctx.tx.get_player_cards(ctx.user_id)
        if len(reserved) >= MAX_RESERVED:
            raise TooManyReserved()

        card_id = _card_at(ctx, self.tier, self.index)
        _deal(ctx, self.tier, self.index)
        ctx.tx.insert_player_card(ctx.user_id, card_id, reserved=True)

        # The wildcard is a bonus; an empty wild pile does not block the reserve.
        bonus = {Color.WILD: 1}
        try:
            _earn(ctx, bonus, bonus)
        except InsufficientCoins:
            current_app.logger.debug(f"[reserve] game={ctx.game.id} user={ctx.user_id} no wildcard left")

        return ctx.next_player()


@dataclass(frozen=True)
class Buy(Move):
    tier: int
    index: int

    kind = 'buy'

    @classmethod
    def parse(cls, tier, index) -> 'Buy':
        return cls(*_parse_slot(tier, index))

    def execute(self, ctx):
        card_id = _card_at(ctx, self.tier, self.index)
        card = CARDS[card_id]

        owned, _ = ctx.tx.get_player_cards(ctx.user_id)
        counts = scoring.card_counts(owned)
        _pay(ctx, counts, card.cost)

        _deal(ctx, self.tier, self.index)
        ctx.tx.insert_player_card(ctx.user_id, card_id, reserved=False)
        counts[card.color] += 1

        if scoring.eligible_nobles(counts, ctx.tx.get_nobles()):
            return ctx.stay(GameState.PICKING_NOBLE)
        if _someone_won(ctx):
            return ctx.stay(GameState.OVER)
        return ctx.next_player()
