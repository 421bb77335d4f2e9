from __future__ import annotations

from dataclasses import field

from pydantic.dataclasses import dataclass

from sixtyone.punishment import PunishmentQueue
from sixtyone.types import NUM_PLAYERS, TEAM_NAMES, Card, LogEntry, Suit, TrickPlay


@dataclass(frozen=True)
class NoTrick:
    """No trick is being built: the next play opens a new one."""


@dataclass
class TrickInProgress:
    plays: list[TrickPlay]

    def __post_init__(self):
        assert 0 < len(self.plays) < NUM_PLAYERS


@dataclass
class MatchState:
    seed: str
    # Draw pile, front is drawn next.
    deck: list[Card]
    trump: Suit
    trump_card: Card
    lead_player: int
    hands: list[list[Card]]
    scores: list[int] = field(default_factory=lambda: [0, 0])
    tie_points: int = 0
    punishment: PunishmentQueue = field(default_factory=PunishmentQueue)
    log: list[LogEntry] = field(default_factory=list)
    trick: NoTrick | TrickInProgress = field(default_factory=NoTrick)

    def __post_init__(self):
        assert len(self.hands) == NUM_PLAYERS
        assert len(self.scores) == len(TEAM_NAMES)
        assert 0 <= self.lead_player < NUM_PLAYERS

    @property
    def current_trick(self) -> list[TrickPlay]:
        if isinstance(self.trick, TrickInProgress):
            return self.trick.plays
        return []

    @property
    def turn_player(self) -> int | None:
        """Seat expected to play next, or None once nobody holds a card.

        With every hand non-empty this is (lead_player + plays so far) % 6.
        Seats left empty-handed by a dry draw pile are skipped.
        """
        played = {play.player for play in self.current_trick}
        for offset in range(NUM_PLAYERS):
            player = (self.lead_player + offset) % NUM_PLAYERS
            if player not in played and self.hands[player]:
                return player
        return None

    @property
    def cards_in_hands(self) -> int:
        return sum(len(hand) for hand in self.hands)

    @property
    def is_complete(self) -> bool:
        return self.cards_in_hands == 0 and not self.deck

    @property
    def team_scores(self) -> dict[str, int]:
        return dict(zip(TEAM_NAMES, self.scores))

    def __str__(self):
        newline = "\n"
        return f"""Seed: {self.seed} Trump: {self.trump_card} Lead: {self.lead_player} Turn: {self.turn_player}
Scores: {" ".join(f"{name}={score}" for name, score in self.team_scores.items())} Tie points: {self.tie_points} Draw pile: {len(self.deck)}

Current Trick:
{newline.join(str(play) for play in self.current_trick)}

Hands:
{newline.join(f"{'** ' if i == self.turn_player else ''}{i}: {' '.join(map(str, hand))}" for i, hand in enumerate(self.hands))}
"""
