import pytest

from splenda.errors import InsufficientCoins
from splenda.services.games.constants import Color
from splenda.services.games.ledger import earn_coins, pay_cost

W, U, G, R, K, X = Color.WHITE, Color.BLUE, Color.GREEN, Color.RED, Color.BLACK, Color.WILD


def test_earn_moves_deltas_from_bank_to_purse():
    bank = {W: 4, U: 4, G: 4}
    purse = {W: 0, U: 1, G: 0}
    delta = {W: 1, U: 1, G: 1}

    new_bank, new_purse = earn_coins(bank, purse, delta, delta)

    assert new_bank == {W: 3, U: 3, G: 3}
    assert new_purse == {W: 1, U: 2, G: 1}
    # inputs untouched
    assert bank == {W: 4, U: 4, G: 4}
    assert purse == {W: 0, U: 1, G: 0}


def test_earn_checks_limits_not_deltas():
    bank = {R: 3}
    with pytest.raises(InsufficientCoins):
        earn_coins(bank, {R: 0}, {R: 4}, {R: 2})

    new_bank, new_purse = earn_coins({R: 4}, {R: 0}, {R: 4}, {R: 2})
    assert new_bank[R] == 2
    assert new_purse[R] == 2


def test_earn_fails_when_any_color_is_short():
    bank = {W: 1, U: 0, G: 1}
    delta = {W: 1, U: 1, G: 1}
    with pytest.raises(InsufficientCoins):
        earn_coins(bank, {}, delta, delta)


def test_pay_uses_wildcards_for_the_shortfall():
    bank = {R: 0, X: 0}
    purse = {R: 2, X: 1}
    owned = {R: 1}

    new_bank, new_purse = pay_cost(bank, purse, owned, {R: 4})

    assert new_purse == {R: 0, X: 0}
    assert new_bank == {R: 2, X: 1}


def test_pay_owned_cards_cover_the_whole_cost():
    bank = {G: 0}
    purse = {G: 3}
    new_bank, new_purse = pay_cost(bank, purse, {G: 5}, {G: 4})
    assert new_bank == bank
    assert new_purse == purse


def test_pay_across_several_colors():
    bank = {W: 1, U: 1, X: 2}
    purse = {W: 2, U: 1, X: 2}
    new_bank, new_purse = pay_cost(bank, purse, {}, {W: 2, U: 3})
    assert new_purse == {W: 0, U: 0, X: 0}
    assert new_bank == {W: 3, U: 2, X: 4}


def test_pay_fails_without_enough_wildcards():
    purse = {K: 1, X: 1}
    with pytest.raises(InsufficientCoins):
        pay_cost({}, purse, {}, {K: 4})
    assert purse == {K: 1, X: 1}


def test_pay_conserves_coins():
    bank = {W: 2, R: 1, X: 3}
    purse = {W: 3, R: 1, X: 2}
    new_bank, new_purse = pay_cost(bank, purse, {R: 1}, {W: 3, R: 3})
    for color in (W, R, X):
        assert new_bank.get(color, 0) + new_purse.get(color, 0) == bank[color] + purse[color]
