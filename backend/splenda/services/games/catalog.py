"""Static card and noble definitions.

The tables are built once at import time and exposed through read-only
mappings; nothing in the process mutates them afterwards.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .constants import Color, NOBLE_POINTS

WHITE, BLUE, GREEN, RED, BLACK = (
    Color.WHITE, Color.BLUE, Color.GREEN, Color.RED, Color.BLACK
)


@dataclass(frozen=True)
class Card:
    id: str
    tier: int
    color: Color
    points: int
    cost: Mapping[Color, int]

    def to_dict(self):
        return {
            'id': self.id,
            'color': self.color.value,
            'points': self.points,
            'cost': {c.value: n for c, n in self.cost.items()},
        }


@dataclass(frozen=True)
class Noble:
    id: str
    cost: Mapping[Color, int]
    points: int = NOBLE_POINTS

    def to_dict(self):
        return {
            'id': self.id,
            'points': self.points,
            'cost': {c.value: n for c, n in self.cost.items()},
        }


def _card(card_id, color, points, cost):
    tier = int(card_id.split('_', 1)[0])
    return Card(card_id, tier, color, points, MappingProxyType(dict(cost)))


def _noble(noble_id, cost):
    return Noble(noble_id, MappingProxyType(dict(cost)))


_NOBLES = [
    _noble('mary_stuart', {RED: 4, GREEN: 4}),
    _noble('charles_v', {BLACK: 3, RED: 3, WHITE: 3}),
    _noble('macchiavelli', {BLUE: 4, WHITE: 4}),
    _noble('isabelle_of_castille', {BLACK: 4, WHITE: 4}),
    _noble('suleiman_i', {BLUE: 4, GREEN: 4}),
    _noble('catherine_of_medici', {GREEN: 3, BLUE: 3, RED: 3}),
    _noble('anne_of_brittany', {GREEN: 3, BLUE: 3, WHITE: 3}),
    _noble('henry_viii', {BLACK: 4, RED: 4}),
    _noble('elisabeth_of_austria', {BLACK: 3, BLUE: 3, WHITE: 3}),
    _noble('francis_i', {BLACK: 3, RED: 3, GREEN: 3}),
]

_CARDS = [
    # Tier 1
    _card('1_4_0', WHITE, 1, {GREEN: 4}),
    _card('1_4_1', GREEN, 1, {BLACK: 4}),
    _card('1_4_2', BLACK, 1, {BLUE: 4}),
    _card('1_4_3', BLUE, 1, {RED: 4}),
    _card('1_4_4', RED, 1, {WHITE: 4}),

    _card('1_3_0', WHITE, 0, {BLUE: 3}),
    _card('1_3_1', GREEN, 0, {RED: 3}),
    _card('1_3_2', BLACK, 0, {GREEN: 3}),
    _card('1_3_3', BLUE, 0, {BLACK: 3}),
    _card('1_3_4', RED, 0, {WHITE: 3}),

    _card('1_2_1_0', WHITE, 0, {RED: 2, BLACK: 1}),
    _card('1_2_1_1', GREEN, 0, {WHITE: 2, BLUE: 1}),
    _card('1_2_1_2', BLACK, 0, {GREEN: 2, RED: 1}),
    _card('1_2_1_3', BLUE, 0, {BLACK: 2, WHITE: 1}),
    _card('1_2_1_4', RED, 0, {BLUE: 2, GREEN: 1}),

    _card('1_22_0', WHITE, 0, {BLUE: 2, BLACK: 2}),
    _card('1_22_1', GREEN, 0, {BLUE: 2, RED: 2}),
    _card('1_22_2', BLACK, 0, {WHITE: 2, GREEN: 2}),
    _card('1_22_3', BLUE, 0, {GREEN: 2, BLACK: 2}),
    _card('1_22_4', RED, 0, {WHITE: 2, RED: 2}),

    _card('1_41_0', WHITE, 0, {BLUE: 1, GREEN: 1, RED: 1, BLACK: 1}),
    _card('1_41_1', GREEN, 0, {BLUE: 1, WHITE: 1, RED: 1, BLACK: 1}),
    _card('1_41_2', BLACK, 0, {BLUE: 1, GREEN: 1, RED: 1, WHITE: 1}),
    _card('1_41_3', BLUE, 0, {WHITE: 1, GREEN: 1, RED: 1, BLACK: 1}),
    _card('1_41_4', RED, 0, {BLUE: 1, GREEN: 1, WHITE: 1, BLACK: 1}),

    _card('1_3_21_0', WHITE, 0, {WHITE: 3, BLUE: 1, BLACK: 1}),
    _card('1_3_21_1', GREEN, 0, {BLUE: 3, WHITE: 1, GREEN: 1}),
    _card('1_3_21_2', BLACK, 0, {RED: 3, GREEN: 1, BLACK: 1}),
    _card('1_3_21_3', BLUE, 0, {GREEN: 3, RED: 1, BLUE: 1}),
    _card('1_3_21_4', RED, 0, {BLACK: 3, RED: 1, WHITE: 1}),

    _card('1_22_1_0', WHITE, 0, {BLUE: 2, GREEN: 2, BLACK: 1}),
    _card('1_22_1_1', GREEN, 0, {BLACK: 2, RED: 2, BLUE: 1}),
    _card('1_22_1_2', BLACK, 0, {WHITE: 2, BLUE: 2, RED: 1}),
    _card('1_22_1_3', BLUE, 0, {RED: 2, GREEN: 2, WHITE: 1}),
    _card('1_22_1_4', RED, 0, {WHITE: 2, BLACK: 2, GREEN: 1}),

    _card('1_2_31_0', WHITE, 0, {GREEN: 2, BLUE: 1, RED: 1, BLACK: 1}),
    _card('1_2_31_1', GREEN, 0, {BLACK: 2, BLUE: 1, RED: 1, WHITE: 1}),
    _card('1_2_31_2', BLACK, 0, {BLUE: 2, WHITE: 1, RED: 1, GREEN: 1}),
    _card('1_2_31_3', BLUE, 0, {RED: 2, WHITE: 1, GREEN: 1, BLACK: 1}),
    _card('1_2_31_4', RED, 0, {WHITE: 2, BLUE: 1, GREEN: 1, BLACK: 1}),

    # Tier 2
    _card('2_6_0', WHITE, 3, {WHITE: 6}),
    _card('2_6_1', GREEN, 3, {GREEN: 6}),
    _card('2_6_2', BLACK, 3, {BLACK: 6}),
    _card('2_6_3', BLUE, 3, {BLUE: 6}),
    _card('2_6_4', RED, 3, {RED: 6}),

    _card('2_5_0', WHITE, 2, {RED: 5}),
    _card('2_5_1', GREEN, 2, {GREEN: 5}),
    _card('2_5_2', BLACK, 2, {WHITE: 5}),
    _card('2_5_3', BLUE, 2, {BLUE: 5}),
    _card('2_5_4', RED, 2, {BLACK: 6}),

    _card('2_5_3_0', WHITE, 2, {RED: 5, BLACK: 3}),
    _card('2_5_3_1', GREEN, 2, {BLUE: 5, GREEN: 3}),
    _card('2_5_3_2', BLACK, 2, {GREEN: 5, RED: 3}),
    _card('2_5_3_3', BLUE, 2, {WHITE: 5, BLUE: 3}),
    _card('2_5_3_4', RED, 2, {BLACK: 5, WHITE: 3}),

    _card('2_4_2_1_0', WHITE, 2, {RED: 4, BLACK: 2, GREEN: 1}),
    _card('2_4_2_1_1', GREEN, 2, {WHITE: 4, BLUE: 2, BLACK: 1}),
    _card('2_4_2_1_2', BLACK, 2, {GREEN: 4, RED: 2, BLUE: 1}),
    _card('2_4_2_1_3', BLUE, 2, {BLACK: 4, WHITE: 2, RED: 1}),
    _card('2_4_2_1_4', RED, 2, {BLUE: 4, GREEN: 2, WHITE: 1}),

    _card('2_3_22_0', WHITE, 1, {GREEN: 3, RED: 2, BLACK: 2}),
    _card('2_3_22_1', GREEN, 1, {BLUE: 3, WHITE: 2, BLACK: 2}),
    _card('2_3_22_2', BLACK, 1, {WHITE: 3, BLUE: 2, GREEN: 2}),
    _card('2_3_22_3', BLUE, 1, {RED: 3, BLUE: 2, GREEN: 2}),
    _card('2_3_22_4', RED, 1, {BLACK: 3, RED: 2, WHITE: 2}),

    _card('2_23_2_0', WHITE, 1, {BLUE: 3, RED: 3, WHITE: 2}),
    _card('2_23_2_1', GREEN, 1, {RED: 3, WHITE: 3, GREEN: 2}),
    _card('2_23_2_2', BLACK, 1, {WHITE: 3, GREEN: 3, BLACK: 2}),
    _card('2_23_2_3', BLUE, 1, {GREEN: 3, BLACK: 3, BLUE: 2}),
    _card('2_23_2_4', RED, 1, {BLUE: 3, BLACK: 3, RED: 2}),

    # Tier 3
    _card('3_7_3_0', WHITE, 5, {BLACK: 7, WHITE: 3}),
    _card('3_7_3_1', GREEN, 5, {BLUE: 7, GREEN: 3}),
    _card('3_7_3_2', BLACK, 5, {RED: 7, BLACK: 3}),
    _card('3_7_3_3', BLUE, 5, {WHITE: 7, BLUE: 3}),
    _card('3_7_3_4', RED, 5, {GREEN: 7, RED: 3}),

    _card('3_7_0', WHITE, 4, {BLACK: 7}),
    _card('3_7_1', GREEN, 4, {BLUE: 7}),
    _card('3_7_2', BLACK, 4, {RED: 7}),
    _card('3_7_3', BLUE, 4, {WHITE: 7}),
    _card('3_7_4', RED, 4, {GREEN: 7}),

    _card('3_6_23_0', WHITE, 4, {BLACK: 6, WHITE: 3, RED: 3}),
    _card('3_6_23_1', GREEN, 4, {BLUE: 6, GREEN: 3, WHITE: 3}),
    _card('3_6_23_2', BLACK, 4, {RED: 6, BLACK: 3, GREEN: 3}),
    _card('3_6_23_3', BLUE, 4, {WHITE: 6, BLUE: 3, BLACK: 3}),
    _card('3_6_23_4', RED, 4, {GREEN: 6, BLUE: 3, RED: 3}),

    _card('3_5_33_0', WHITE, 3, {RED: 5, BLUE: 3, GREEN: 3, BLACK: 3}),
    _card('3_5_33_1', GREEN, 3, {WHITE: 5, BLUE: 3, RED: 3, BLACK: 3}),
    _card('3_5_33_2', BLACK, 3, {GREEN: 5, WHITE: 3, BLUE: 3, RED: 3}),
    _card('3_5_33_3', BLUE, 3, {BLACK: 5, WHITE: 3, GREEN: 3, RED: 3}),
    _card('3_5_33_4', RED, 3, {BLUE: 5, WHITE: 3, GREEN: 3, BLACK: 3}),
]

CARDS: Mapping[str, Card] = MappingProxyType({c.id: c for c in _CARDS})
NOBLES: Mapping[str, Noble] = MappingProxyType({n.id: n for n in _NOBLES})


def tier_card_ids(tier: int) -> list:
    """Sorted ids of every card in a tier, so seeded shuffles are stable."""
    return sorted(c.id for c in CARDS.values() if c.tier == tier)


def noble_ids() -> list:
    return sorted(NOBLES)
