import pytest

from sixtyone.engine import init_match, play_hand
from sixtyone.state import MatchState
from sixtyone.types import Card, LogEntry
from sixtyone.utils import generate_match_log, parse_card, split_by_suit, suit_symbol


@pytest.mark.parametrize(
    "text,expected",
    [
        ("7d", Card("7", "diamonds")),
        ("7♦", Card("7", "diamonds")),
        ("ah", Card("A", "hearts")),
        ("Q♣", Card("Q", "clubs")),
        (" k spades ", Card("K", "spades")),
        ("3 Hearts", Card("3", "hearts")),
    ],
)
def test_parse_card(text: str, expected: Card) -> None:
    assert parse_card(text) == expected


@pytest.mark.parametrize("text", ["", "10h", "7x", "Z♠", "7"])
def test_parse_card_invalid(text: str) -> None:
    with pytest.raises(ValueError):
        parse_card(text)


def test_parse_card_roundtrips_str() -> None:
    card = Card("J", "clubs")
    assert parse_card(str(card)) == card


def test_suit_symbol() -> None:
    assert [suit_symbol(s) for s in ["spades", "hearts", "diamonds", "clubs"]] == [
        "♠",
        "♥",
        "♦",
        "♣",
    ]


def test_split_by_suit() -> None:
    hand = [Card("3", "spades"), Card("A", "hearts"), Card("K", "spades"), Card("7", "spades")]
    assert split_by_suit(hand) == [
        [Card("7", "spades"), Card("K", "spades"), Card("3", "spades")],
        [Card("A", "hearts")],
    ]


def test_generate_match_log() -> None:
    state = MatchState(
        seed="test",
        deck=[],
        trump="clubs",
        trump_card=Card("3", "clubs"),
        lead_player=0,
        hands=[[] for _ in range(6)],
        scores=[10, 20],
        log=[
            LogEntry(player=0, card=Card("A", "hearts")),
            LogEntry(player=5, card=Card("7", "diamonds")),
        ],
    )
    assert generate_match_log(state) == (
        "Seed: test\n"
        "Trump: clubs\n"
        "Move 1: Player 1 played A♥\n"
        "Move 2: Player 6 played 7♦\n"
        "Scores - Team A: 10, Team B: 20\n"
    )


def test_generate_match_log_full_hand() -> None:
    state = play_hand(init_match("log"))
    lines = generate_match_log(state).splitlines()

    assert lines[0] == "Seed: log"
    assert lines[1] == f"Trump: {state.trump}"
    assert len(lines) == 2 + 36 + 1
    assert lines[2].startswith("Move 1: Player ")
    assert lines[-1] == f"Scores - Team A: {state.scores[0]}, Team B: {state.scores[1]}"
