from __future__ import annotations

from typing import cast

from sixtyone.state import MatchState
from sixtyone.types import RANK_ORDER, SUIT_SYMBOLS, SUITS, TEAM_NAMES, Card, Rank, Suit

TO_SUIT = {
    **{symbol: suit for suit, symbol in SUIT_SYMBOLS.items()},
    **{suit[0]: suit for suit in SUITS},
    **{suit: suit for suit in SUITS},
}


def suit_symbol(suit: Suit) -> str:
    return SUIT_SYMBOLS[suit]


def split_by_suit(hand: list[Card]) -> list[list[Card]]:
    """Group a hand by suit (display order), strongest card first."""
    hand = sorted(hand, key=lambda x: (SUITS.index(x.suit), RANK_ORDER.index(x.rank)))
    ret: list[list[Card]] = []
    prev_suit: Suit | None = None
    for card in hand:
        if card.suit != prev_suit:
            ret.append([])

        ret[-1].append(card)
        prev_suit = card.suit

    return ret


def parse_card(value: str) -> Card:
    """Parse "7d", "7♦", "ah" or "7 diamonds" into a Card."""
    text = value.strip()
    if not text:
        raise ValueError("Empty card")
    rank = text[0].upper()
    suit = TO_SUIT.get(text[1:].strip().lower())
    if rank not in RANK_ORDER or suit is None:
        raise ValueError(f"Could not parse card {value!r}")
    return Card(cast(Rank, rank), suit)


def generate_match_log(state: MatchState) -> str:
    """Human readable record of a hand: seed, trump, every move and scores.

    Players are numbered from 1 in the move lines.
    """
    lines = [f"Seed: {state.seed}", f"Trump: {state.trump}"]
    for i, entry in enumerate(state.log):
        lines.append(
            f"Move {i + 1}: Player {entry.player + 1} played "
            f"{entry.card.rank}{suit_symbol(entry.card.suit)}"
        )
    lines.append(
        "Scores - "
        + ", ".join(f"{name}: {score}" for name, score in zip(TEAM_NAMES, state.scores))
    )
    return "\n".join(lines) + "\n"
