from __future__ import annotations

import time
from pathlib import Path

import click
from loguru import logger

from sixtyone.config import config
from sixtyone.engine import first_card, init_match, legal_moves, play_card, play_hand, replay
from sixtyone.errors import EngineError
from sixtyone.state import MatchState, NoTrick
from sixtyone.types import NUM_PLAYERS, Card
from sixtyone.utils import generate_match_log, parse_card, split_by_suit

LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class MoveType(click.ParamType):
    name = "Move"

    def convert(self, value, param, ctx):
        if isinstance(value, tuple):
            return value

        try:
            player, card = value.split(":", 1)
            return int(player), parse_card(card)
        except ValueError:
            self.fail(
                f"Could not parse move {value!r}, expected SEAT:CARD such as 3:7d",
                param,
                ctx,
            )


MOVE_TYPE = MoveType()


def setup_logging(level: str, log_file: Path | None = None) -> None:
    logger.remove()
    # Resolve stderr on every record so redirected streams are honoured.
    logger.add(lambda msg: click.echo(msg, err=True, nl=False), level=level.upper())
    if log_file is not None:
        logger.add(log_file, level="DEBUG")


def display_game_state(state: MatchState, seat: int) -> None:
    """Display the table as seen from the human's seat."""
    click.echo()
    click.echo("=" * 80)
    click.echo(
        f"\nTrump: {state.trump_card} | Lead: P{state.lead_player} | "
        f"Draw pile: {len(state.deck)}"
    )
    click.echo(
        "Scores: "
        + " | ".join(f"{name}: {score}" for name, score in state.team_scores.items())
        + f" | Tie points: {state.tie_points}"
    )

    if state.current_trick:
        click.echo("\nCurrent trick:")
        for play in state.current_trick:
            click.echo(f"P{play.player}: {play.card}")

    click.echo(f"\nYour hand (P{seat}):")
    click.echo(
        " | ".join(
            " ".join(str(card) for card in sub_hand)
            for sub_hand in split_by_suit(state.hands[seat])
        )
    )


def get_user_card(state: MatchState, seat: int) -> Card:
    """Get the next card from the user, by number or by name."""
    moves = legal_moves(state, seat)

    click.echo("\nLegal cards:")
    for i, card in enumerate(moves):
        click.echo(f"{i}: {card}")

    while True:
        choice = click.prompt("Choose card number or name (e.g. 7d)", type=str)
        if choice.isdigit():
            if 0 <= int(choice) < len(moves):
                return moves[int(choice)]
            click.echo("Invalid choice. Please try again.")
            continue
        try:
            return parse_card(choice)
        except ValueError as e:
            click.echo(f"{e}. Please try again.")


@click.group()
@click.option(
    "--log-level",
    default=config.log_level,
    show_default=True,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Minimum level of log records printed to stderr.",
)
@click.option(
    "--log-file",
    default=config.log_file,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Also write every log record to this file.",
)
def cli(log_level: str, log_file: Path | None) -> None:
    """61: a six-player trick-taking game."""
    setup_logging(log_level, log_file)


@cli.command()
@click.option(
    "--count",
    default=config.sim_count,
    show_default=True,
    type=click.IntRange(min=0),
    help="Number of hands to simulate.",
)
@click.option(
    "--seed-prefix",
    default=config.seed_prefix,
    show_default=True,
    help="Seeds are the prefix followed by 0..count-1.",
)
@click.option(
    "--seed", "seeds", multiple=True, help="Explicit seed; may be repeated."
)
def simulate(count: int, seed_prefix: str, seeds: tuple[str, ...]) -> None:
    """Play whole hands with the placeholder strategy and print their logs."""
    seeds = seeds or tuple(f"{seed_prefix}{i}" for i in range(count))
    for seed in seeds:
        state = play_hand(init_match(seed))
        click.echo(generate_match_log(state))


@cli.command(name="replay")
@click.argument("seed")
@click.argument("moves", nargs=-1, type=MOVE_TYPE)
def replay_command(seed: str, moves: tuple[tuple[int, Card], ...]) -> None:
    """Replay recorded SEAT:CARD moves (seats 0-5) on the hand dealt by SEED."""
    try:
        state = replay(seed, moves)
    except EngineError as e:
        logger.error(f"Replay of {seed!r} rejected: {e}")
        raise click.ClickException(str(e)) from e

    click.echo(generate_match_log(state))
    if not state.is_complete:
        click.echo(str(state))


@cli.command()
@click.option("--seed", default=None, help="Seed for reproducibility.")
@click.option(
    "--seat",
    default=config.human_seat,
    show_default=True,
    type=click.IntRange(0, NUM_PLAYERS - 1),
    help="Seat played from the keyboard; the others play automatically.",
)
def play(seed: str | None, seat: int) -> None:
    """Play a hand of 61 through CLI."""
    if seed is None:
        seed = f"game-{time.time_ns()}"
    state = init_match(seed)

    click.echo("Welcome to 61!")
    click.echo(f"Seed: {seed} | You are P{seat} ({'Team A' if seat % 2 == 0 else 'Team B'})")

    while (player := state.turn_player) is not None:
        if player == seat:
            display_game_state(state, seat)
            card = get_user_card(state, seat)
            try:
                play_card(state, seat, card)
            except EngineError as e:
                logger.error(str(e))
                continue
        else:
            card = first_card(state, player)
            play_card(state, player, card)
            click.echo(f"P{player} plays {card}")

        if isinstance(state.trick, NoTrick):
            click.echo("-- trick complete --")

    click.echo()
    click.echo("=" * 80)
    click.echo("\nHand Over!")
    click.echo(generate_match_log(state))


if __name__ == "__main__":
    cli()
