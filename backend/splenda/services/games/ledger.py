"""Coin transfers between the bank and a player's purse.

Both functions take snapshots and return new ``(bank, purse)`` dicts; the
inputs are never modified. Writing the result back is up to the caller.
"""
from typing import Dict, Mapping, Tuple

from splenda.errors import InsufficientCoins
from .constants import Color

Coins = Dict[Color, int]


def earn_coins(
    bank: Mapping[Color, int],
    purse: Mapping[Color, int],
    limits: Mapping[Color, int],
    deltas: Mapping[Color, int],
) -> Tuple[Coins, Coins]:
    """Move ``deltas`` from the bank to the purse.

    ``limits`` is checked first: the bank must hold at least ``limits[color]``
    of every listed color, otherwise nothing moves.
    """
    for color, limit in limits.items():
        if bank.get(color, 0) < limit:
            raise InsufficientCoins()

    new_bank = dict(bank)
    new_purse = dict(purse)
    for color, count in deltas.items():
        new_bank[color] = new_bank.get(color, 0) - count
        new_purse[color] = new_purse.get(color, 0) + count
    return new_bank, new_purse


def pay_cost(
    bank: Mapping[Color, int],
    purse: Mapping[Color, int],
    owned: Mapping[Color, int],
    cost: Mapping[Color, int],
) -> Tuple[Coins, Coins]:
    """Settle a card cost: owned cards discount, then coins, then wildcards.

    Settlement is greedy per color; any shortfall after a color's coins run
    out is covered by wildcards at the end.
    """
    new_bank = dict(bank)
    new_purse = dict(purse)
    wilds_needed = 0

    for color, price in cost.items():
        needed = price - owned.get(color, 0)
        if needed <= 0:
            continue
        paid = min(needed, new_purse.get(color, 0))
        new_purse[color] = new_purse.get(color, 0) - paid
        new_bank[color] = new_bank.get(color, 0) + paid
        wilds_needed += needed - paid

    if wilds_needed > 0:
        if new_purse.get(Color.WILD, 0) < wilds_needed:
            raise InsufficientCoins()
        new_purse[Color.WILD] = new_purse.get(Color.WILD, 0) - wilds_needed
        new_bank[Color.WILD] = new_bank.get(Color.WILD, 0) + wilds_needed

    return new_bank, new_purse
