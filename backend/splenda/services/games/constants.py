from enum import Enum


class Color(str, Enum):
    WHITE = 'white'
    BLUE = 'blue'
    GREEN = 'green'
    RED = 'red'
    BLACK = 'black'
    WILD = 'wild'

    @property
    def is_normal(self) -> bool:
        return self is not Color.WILD


NORMAL_COLORS = tuple(c for c in Color if c.is_normal)
ALL_COLORS = tuple(Color)


class GameState(str, Enum):
    PLAYING = 'play'
    PICKING_NOBLE = 'picknoble'
    OVER = 'gameover'


TIERS = (1, 2, 3)
SLOTS_PER_TIER = 4

MIN_PLAYERS = 2
MAX_PLAYERS = 4

# Bank coins per normal color, keyed by player count.
COINS_PER_COLOR = {2: 4, 3: 5, 4: 7}
WILD_COINS = 5

NOBLE_POINTS = 3
MAX_RESERVED = 3
# Taking two of a color requires at least this many in the bank.
TAKE_TWO_MINIMUM = 4
WINNING_POINTS = 15
