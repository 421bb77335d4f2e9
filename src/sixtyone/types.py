from __future__ import annotations

from typing import Literal, NamedTuple

from pydantic.dataclasses import dataclass

Suit = Literal["spades", "hearts", "diamonds", "clubs"]
Rank = Literal["A", "K", "Q", "J", "7", "6", "5", "4", "3"]

NUM_PLAYERS = 6
NUM_TEAMS = 2
HAND_SIZE = 3

SUITS: tuple[Suit, ...] = ("spades", "hearts", "diamonds", "clubs")
# Order in which a fresh deck is enumerated before shuffling. Recorded seeds
# depend on it, so it is intentionally not the strength order.
DECK_RANKS: tuple[Rank, ...] = ("A", "K", "Q", "J", "7", "6", "5", "4", "3")
# Strongest first. 7 outranks K, Q and J.
RANK_ORDER: tuple[Rank, ...] = ("A", "7", "K", "Q", "J", "6", "5", "4", "3")

POINTS: dict[Rank, int] = {
    "A": 11,
    "7": 10,
    "K": 4,
    "J": 3,
    "Q": 2,
    "6": 0,
    "5": 0,
    "4": 0,
    "3": 0,
}
DECK_POINTS = sum(POINTS.values()) * len(SUITS)

SUIT_SYMBOLS: dict[Suit, str] = {
    "spades": "♠",
    "hearts": "♥",
    "diamonds": "♦",
    "clubs": "♣",
}
TEAM_NAMES = ("Team A", "Team B")


@dataclass(frozen=True)
class Card:
    rank: Rank
    suit: Suit

    @property
    def points(self) -> int:
        return POINTS[self.rank]

    @property
    def strength(self) -> int:
        return len(RANK_ORDER) - 1 - RANK_ORDER.index(self.rank)

    def __str__(self):
        return f"{self.rank}{SUIT_SYMBOLS[self.suit]}"

    def __repr__(self):
        return str(self)


@dataclass(frozen=True)
class TrickPlay:
    player: int
    card: Card

    def __post_init__(self):
        assert 0 <= self.player < NUM_PLAYERS

    def __str__(self):
        return f"P{self.player} plays {self.card}"

    def __repr__(self):
        return str(self)


class TrickResult(NamedTuple):
    winner: int | None
    points: int
    tie: bool


Action = Literal["play"]


@dataclass(frozen=True)
class LogEntry:
    player: int
    card: Card
    action: Action = "play"
