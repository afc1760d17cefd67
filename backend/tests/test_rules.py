import pytest

from splenda.errors import (
    InsufficientCoins,
    MoveNotAllowed,
    NoCardThere,
    TooManyReserved,
    ValidationError,
)
from splenda.services.games.rules import Buy, Reserve, TakeThree, TakeTwo
from splenda.services.games.constants import Color


def _player(game, user_id):
    return next(p for p in game['players'] if p['id'] == user_id)


@pytest.mark.parametrize('colors', [
    ['white', 'blue'],
    ['white', 'blue', 'green', 'red'],
    ['white', 'white', 'blue'],
    ['white', 'blue', 'wild'],
    ['white', 'blue', 'purple'],
    ['white', 'blue', None],
    'wbg',
    None,
])
def test_take_three_rejects_bad_colors(colors):
    with pytest.raises(ValidationError):
        TakeThree.parse(colors)


@pytest.mark.parametrize('color', ['wild', 'gold', '', None, 3])
def test_take_two_rejects_bad_color(color):
    with pytest.raises(ValidationError):
        TakeTwo.parse(color)


@pytest.mark.parametrize('tier,index', [
    (0, 0), (4, 0), (1, -1), (1, 4), ('1', 0), (1, 1.0), (True, 0), (None, None),
])
def test_slot_moves_reject_bad_positions(tier, index):
    with pytest.raises(ValidationError):
        Reserve.parse(tier, index)
    with pytest.raises(ValidationError):
        Buy.parse(tier, index)


def test_parse_builds_immutable_moves():
    move = TakeThree.parse(['red', 'blue', 'black'])
    assert move.colors == (Color.RED, Color.BLUE, Color.BLACK)
    assert TakeTwo.parse('green').color == Color.GREEN
    assert Buy.parse(3, 2) == Buy(3, 2)


def test_take_three(service, make_game):
    game_id, (first, second) = make_game()

    assert service.take_three(game_id, first, ['white', 'blue', 'green']) == 1

    game = service.get_game(game_id, first)
    assert game['current'] == second
    assert game['table']['coins'] == {'white': 3, 'blue': 3, 'green': 3, 'red': 4, 'black': 4, 'wild': 5}
    assert _player(game, first)['coins'] == {'white': 1, 'blue': 1, 'green': 1, 'red': 0, 'black': 0, 'wild': 0}


def test_take_three_needs_every_color_in_bank(service, make_game, rig):
    game_id, (first, _) = make_game()
    rig.bank(game_id, red=0)

    with pytest.raises(InsufficientCoins):
        service.take_three(game_id, first, ['white', 'red', 'green'])

    game = service.get_game(game_id, first)
    assert game['version'] == 0
    assert game['current'] == first
    assert game['table']['coins']['white'] == 4
    assert _player(game, first)['coins']['white'] == 0


def test_take_two_needs_four_in_the_pile(service, make_game):
    game_id, (first, second) = make_game()

    service.take_two(game_id, first, 'black')
    game = service.get_game(game_id, first)
    assert game['table']['coins']['black'] == 2
    assert _player(game, first)['coins']['black'] == 2

    # two left is not enough for another pair
    with pytest.raises(InsufficientCoins):
        service.take_two(game_id, second, 'black')
    assert service.get_game(game_id, first)['current'] == second


def test_reserve(service, make_game):
    game_id, (first, second) = make_game()
    before = service.get_game(game_id, first)
    card = before['table']['cards'][1][2]

    assert service.reserve(game_id, first, 2, 2) == 1

    after = service.get_game(game_id, first)
    me = _player(after, first)
    assert me['reserved'] == [card]
    assert me['coins']['wild'] == 1
    assert me['points'] == 0
    assert after['table']['coins']['wild'] == 4
    assert after['table']['decks'] == [36, 25, 16]
    assert after['table']['cards'][1][2] not in (None, card)
    assert after['current'] == second


def test_reserve_without_wildcards_left(service, make_game, rig):
    game_id, (first, _) = make_game()
    rig.bank(game_id, wild=0)

    service.reserve(game_id, first, 1, 0)

    game = service.get_game(game_id, first)
    assert len(_player(game, first)['reserved']) == 1
    assert _player(game, first)['coins']['wild'] == 0
    assert game['table']['coins']['wild'] == 0


def test_reserve_limit(service, make_game, rig):
    game_id, (first, _) = make_game()
    rig.own(game_id, first, '3_7_0', '3_7_1', '3_7_2', reserved=True)

    with pytest.raises(TooManyReserved):
        service.reserve(game_id, first, 1, 0)

    assert service.get_game(game_id, first)['version'] == 0


def test_reserved_cards_keep_their_order(service, make_game):
    game_id, (first, second) = make_game()
    cards = []
    for tier in (3, 1, 2):
        cards.append(service.get_game(game_id, first)['table']['cards'][tier - 1][0]['id'])
        service.reserve(game_id, first, tier, 0)
        service.take_three(game_id, second, ['white', 'blue', 'green'])

    reserved = _player(service.get_game(game_id, first), first)['reserved']
    assert [c['id'] for c in reserved] == cards


def test_empty_deck_leaves_an_empty_slot(service, make_game, rig):
    game_id, (first, second) = make_game()
    rig.empty_deck(game_id, 1)

    service.reserve(game_id, first, 1, 3)

    game = service.get_game(game_id, first)
    assert game['table']['cards'][0][3] is None
    assert game['table']['decks'][0] == 0

    with pytest.raises(NoCardThere):
        service.reserve(game_id, second, 1, 3)
    with pytest.raises(NoCardThere):
        service.buy(game_id, second, 1, 3)


def test_buying_with_an_empty_deck_leaves_an_empty_slot(service, make_game, rig):
    game_id, (first, second) = make_game()
    rig.empty_deck(game_id, 1)
    rig.place(game_id, 1, 2, '1_4_0')
    rig.purse(game_id, first, green=4)

    service.buy(game_id, first, 1, 2)

    game = service.get_game(game_id, first)
    assert game['table']['cards'][0][2] is None
    assert game['table']['decks'][0] == 0
    assert [c['id'] for c in _player(game, first)['cards']['white']] == ['1_4_0']

    with pytest.raises(NoCardThere):
        service.buy(game_id, second, 1, 2)


def test_buy_with_coins(service, make_game, rig):
    game_id, (first, second) = make_game()
    rig.place(game_id, 1, 0, '1_4_0')
    rig.purse(game_id, first, green=4)
    rig.bank(game_id, green=0)

    service.buy(game_id, first, 1, 0)

    game = service.get_game(game_id, first)
    me = _player(game, first)
    assert me['cards'] == {'white': [{'id': '1_4_0', 'color': 'white', 'points': 1, 'cost': {'green': 4}}]}
    assert me['points'] == 1
    assert me['coins']['green'] == 0
    assert game['table']['coins']['green'] == 4
    assert game['table']['cards'][0][0]['id'] != '1_4_0'
    assert game['current'] == second


def test_buy_with_discount_and_wildcard(service, make_game, rig):
    game_id, (first, _) = make_game()
    rig.own(game_id, first, '1_4_4')
    rig.place(game_id, 1, 1, '1_4_3')
    rig.purse(game_id, first, red=2, wild=1)
    rig.bank(game_id, red=0, wild=0)

    service.buy(game_id, first, 1, 1)

    game = service.get_game(game_id, first)
    me = _player(game, first)
    assert me['coins']['red'] == 0
    assert me['coins']['wild'] == 0
    assert game['table']['coins']['red'] == 2
    assert game['table']['coins']['wild'] == 1
    assert [c['id'] for c in me['cards']['blue']] == ['1_4_3']


def test_buy_unaffordable_card(service, make_game, rig):
    game_id, (first, _) = make_game()
    rig.place(game_id, 3, 0, '3_7_0')
    rig.purse(game_id, first, black=3, wild=3)

    with pytest.raises(InsufficientCoins):
        service.buy(game_id, first, 3, 0)

    game = service.get_game(game_id, first)
    assert game['version'] == 0
    assert game['table']['cards'][2][0]['id'] == '3_7_0'
    assert _player(game, first)['coins']['black'] == 3


def test_buy_earning_a_noble_waits_for_the_pick(service, make_game, rig):
    game_id, (first, _) = make_game()
    rig.nobles(game_id, 'henry_viii')
    rig.own(game_id, first,
            '1_4_2', '1_3_2', '1_2_1_2', '1_22_2',
            '1_4_4', '1_3_4', '1_2_1_4')
    rig.place(game_id, 1, 0, '1_22_4')
    rig.purse(game_id, first, white=2)

    service.buy(game_id, first, 1, 0)

    game = service.get_game(game_id, first)
    assert game['state'] == 'picknoble'
    assert game['current'] == first

    with pytest.raises(MoveNotAllowed):
        service.take_three(game_id, first, ['white', 'blue', 'green'])


def test_reaching_fifteen_points_ends_the_game(service, make_game, rig):
    game_id, (first, second) = make_game()
    rig.nobles(game_id, 'mary_stuart')
    rig.own(game_id, first, '3_7_3_0', '3_7_3_1', '3_7_0')
    rig.place(game_id, 1, 0, '1_4_0')
    rig.purse(game_id, first, green=4)

    service.buy(game_id, first, 1, 0)

    game = service.get_game(game_id, first)
    assert game['state'] == 'gameover'
    assert game['current'] == first
    assert _player(game, first)['points'] == 15

    with pytest.raises(MoveNotAllowed):
        service.take_two(game_id, first, 'red')
