from __future__ import annotations

import math
from typing import Callable

from sixtyone.types import DECK_RANKS, SUITS, Card


def make_deck() -> list[Card]:
    return [Card(rank, suit) for suit in SUITS for rank in DECK_RANKS]


def rng_shuffle(li: list, rng: Callable[[], float]) -> None:
    """Fisher-Yates shuffle in place, walking from the last index down to 1."""
    for i in range(len(li) - 1, 0, -1):
        j = math.floor(rng() * (i + 1))
        li[i], li[j] = li[j], li[i]


def create_shuffled_deck(rng: Callable[[], float]) -> list[Card]:
    deck = make_deck()
    rng_shuffle(deck, rng)
    return deck
