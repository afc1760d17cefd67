from collections import Counter
from typing import Dict, Iterable, List, Mapping

from .catalog import CARDS, NOBLES, Card
from .constants import Color


def card_counts(card_ids: Iterable[str]) -> Counter:
    """Count owned cards per color; these are the buyer's discounts."""
    return Counter(CARDS[card_id].color for card_id in card_ids)


def partition(card_ids: Iterable[str]) -> Dict[Color, List[Card]]:
    grouped: Dict[Color, List[Card]] = {}
    for card_id in card_ids:
        card = CARDS[card_id]
        grouped.setdefault(card.color, []).append(card)
    return grouped


def score(noble_ids: Iterable[str], card_ids: Iterable[str]) -> int:
    """Points from owned nobles and owned cards. Reserved cards never count."""
    points = sum(NOBLES[noble_id].points for noble_id in noble_ids)
    points += sum(CARDS[card_id].points for card_id in card_ids)
    return points


def can_afford(counts: Mapping[Color, int], cost: Mapping[Color, int]) -> bool:
    return all(counts.get(color, 0) >= n for color, n in cost.items())


def eligible_nobles(counts: Mapping[Color, int], noble_ids: Iterable[str]) -> List[str]:
    """Nobles on offer whose cost the given card counts already meet."""
    return [noble_id for noble_id in noble_ids if can_afford(counts, NOBLES[noble_id].cost)]
