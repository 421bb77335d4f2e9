from __future__ import annotations

from collections.abc import Sequence

from sixtyone.errors import InvalidInputError
from sixtyone.types import NUM_TEAMS, Card, Suit, TrickPlay, TrickResult

TRUMP_WEIGHT = 200
LED_WEIGHT = 100


def team_of_player(player: int) -> int:
    """Team 0 (A) holds the even seats, team 1 (B) the odd ones."""
    return player % NUM_TEAMS


def card_weight(card: Card, trump: Suit, led: Suit | None) -> int:
    if card.suit == trump:
        return TRUMP_WEIGHT + card.strength
    if led is not None and card.suit == led:
        return LED_WEIGHT + card.strength
    return card.strength


def trick_points(plays: Sequence[TrickPlay]) -> int:
    return sum(play.card.points for play in plays)


def resolve_trick(plays: Sequence[TrickPlay], trump: Suit) -> TrickResult:
    """Resolve a trick given the plays in the order they were made.

    The led suit is always taken from the first play. When more than one play
    shares the highest weight the trick is a tie and nobody wins it; the
    points are still reported so the caller can carry them forward.
    """
    if not plays:
        raise InvalidInputError("No plays to resolve")

    led = plays[0].card.suit
    weights = [card_weight(play.card, trump, led) for play in plays]
    max_weight = max(weights)
    best = [i for i, weight in enumerate(weights) if weight == max_weight]
    points = trick_points(plays)

    if len(best) > 1:
        return TrickResult(winner=None, points=points, tie=True)
    return TrickResult(winner=plays[best[0]].player, points=points, tie=False)


def next_lead(current_lead: int, winner: int | None) -> int:
    """Lead only moves when the other team wins the trick."""
    if winner is None:
        return current_lead
    if team_of_player(winner) == team_of_player(current_lead):
        return current_lead
    return winner
