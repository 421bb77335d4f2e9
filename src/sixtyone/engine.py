from __future__ import annotations

from collections.abc import Iterable

from loguru import logger

from sixtyone.deck import create_shuffled_deck
from sixtyone.errors import MissingCardError, TurnError
from sixtyone.rng import create_rng, string_to_seed
from sixtyone.rules import next_lead, resolve_trick, team_of_player
from sixtyone.state import MatchState, NoTrick, TrickInProgress
from sixtyone.types import (
    HAND_SIZE,
    NUM_PLAYERS,
    TEAM_NAMES,
    Card,
    LogEntry,
    TrickPlay,
    TrickResult,
)


def gen_hands(deck: list[Card]) -> list[list[Card]]:
    """Deal HAND_SIZE cards to every seat from the front of the deck, one
    card per seat per round."""
    hands: list[list[Card]] = [[] for _ in range(NUM_PLAYERS)]
    for _ in range(HAND_SIZE):
        for player in range(NUM_PLAYERS):
            hands[player].append(deck.pop(0))
    return hands


def init_match(seed: str) -> MatchState:
    """Shuffle, deal and reveal trump for a new hand.

    The revealed card goes to the bottom of the draw pile so it is drawn last.
    Seat 0 leads the first trick.
    """
    rng = create_rng(string_to_seed(seed))
    deck = create_shuffled_deck(rng)
    hands = gen_hands(deck)

    trump_card = deck.pop(0)
    deck.append(trump_card)
    logger.debug(f"Dealt seed={seed!r} trump={trump_card} draw_pile={len(deck)}")

    return MatchState(
        seed=seed,
        deck=deck,
        trump=trump_card.suit,
        trump_card=trump_card,
        lead_player=0,
        hands=hands,
    )


def legal_moves(state: MatchState, player: int) -> list[Card]:
    # Following suit is not enforced: any card in hand may be played.
    if player != state.turn_player:
        return []
    return list(state.hands[player])


def first_card(state: MatchState, player: int) -> Card:
    """Placeholder strategy: always play the first card in hand."""
    return state.hands[player][0]


def draw_after_trick(state: MatchState, first_player: int) -> None:
    """Top hands back up to HAND_SIZE, one seat at a time, starting from
    first_player and going clockwise."""
    for offset in range(NUM_PLAYERS):
        player = (first_player + offset) % NUM_PLAYERS
        hand = state.hands[player]
        while len(hand) < HAND_SIZE and state.deck:
            hand.append(state.deck.pop(0))


def complete_trick(state: MatchState, plays: list[TrickPlay]) -> TrickResult:
    result = resolve_trick(plays, state.trump)

    if result.tie:
        state.tie_points += result.points
        logger.debug(
            f"Trick tied on {plays}: {result.points} points carried, "
            f"tie points now {state.tie_points}"
        )
        # Nobody wins a tie so nobody draws, unless the tie emptied every
        # hand while the pile still holds cards.
        if state.cards_in_hands == 0 and state.deck:
            draw_after_trick(state, state.lead_player)
        return result

    assert result.winner is not None
    team = team_of_player(result.winner)
    state.scores[team] += result.points + state.tie_points
    logger.debug(
        f"P{result.winner} wins {plays}: {TEAM_NAMES[team]} +{result.points} "
        f"(+{state.tie_points} tie points)"
    )
    state.tie_points = 0
    state.lead_player = next_lead(state.lead_player, result.winner)
    if state.deck:
        draw_after_trick(state, result.winner)
    return result


def play_card(state: MatchState, player: int, card: Card) -> None:
    """Play one card for the seat whose turn it is.

    Raises TurnError or MissingCardError without touching the state. When the
    play completes the trick, the trick is resolved, scored and the hands are
    replenished before returning.
    """
    turn_player = state.turn_player
    if player != turn_player:
        raise TurnError(player, turn_player)
    hand = state.hands[player]
    if card not in hand:
        raise MissingCardError(player, card)

    hand.remove(card)
    state.log.append(LogEntry(player=player, card=card))
    plays = [*state.current_trick, TrickPlay(player=player, card=card)]

    if len(plays) < NUM_PLAYERS:
        state.trick = TrickInProgress(plays=plays)
        if state.turn_player is not None:
            return

    state.trick = NoTrick()
    complete_trick(state, plays)

    if state.is_complete:
        logger.info(
            f"Hand {state.seed!r} complete: "
            + ", ".join(f"{name}: {score}" for name, score in state.team_scores.items())
            + f" (tie points left {state.tie_points})"
        )


def play_hand(state: MatchState) -> MatchState:
    """Simulate the rest of the hand with the placeholder strategy.

    A trick already started interactively is finished first. Returns the same
    state object, now complete.
    """
    while (player := state.turn_player) is not None:
        play_card(state, player, first_card(state, player))

    assert state.is_complete
    return state


def replay(seed: str, moves: Iterable[tuple[int, Card]]) -> MatchState:
    """Rebuild a hand from its seed and the recorded (player, card) moves."""
    state = init_match(seed)
    for player, card in moves:
        play_card(state, player, card)
    return state
