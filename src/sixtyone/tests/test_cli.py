from click.testing import CliRunner

from sixtyone.cli import cli
from sixtyone.engine import init_match, play_hand
from sixtyone.utils import generate_match_log

QUIET = ["--log-level", "WARNING"]


def test_simulate_explicit_seed() -> None:
    result = CliRunner().invoke(cli, [*QUIET, "simulate", "--seed", "cli-seed"])
    assert result.exit_code == 0, result.output
    expected = generate_match_log(play_hand(init_match("cli-seed")))
    assert result.output == expected + "\n"


def test_simulate_seed_prefix() -> None:
    result = CliRunner().invoke(cli, [*QUIET, "simulate", "--count", "2", "--seed-prefix", "p-"])
    assert result.exit_code == 0, result.output
    assert "Seed: p-0" in result.output
    assert "Seed: p-1" in result.output
    assert "Seed: p-2" not in result.output
    assert result.output.count("Move 36:") == 2


def test_replay_command() -> None:
    played = play_hand(init_match("cli-replay"))
    moves = [f"{entry.player}:{entry.card}" for entry in played.log]

    result = CliRunner().invoke(cli, [*QUIET, "replay", "cli-replay", *moves])
    assert result.exit_code == 0, result.output
    assert result.output == generate_match_log(played) + "\n"


def test_replay_command_partial_hand_shows_table() -> None:
    result = CliRunner().invoke(cli, [*QUIET, "replay", "cli-replay"])
    assert result.exit_code == 0, result.output
    assert "Hands:" in result.output


def test_replay_command_rejects_out_of_turn_move() -> None:
    state = init_match("cli-replay")
    card = state.hands[1][0]
    result = CliRunner().invoke(cli, [*QUIET, "replay", "cli-replay", f"1:{card}"])
    assert result.exit_code == 1
    assert "not player 1's turn" in result.output


def test_replay_command_bad_move_syntax() -> None:
    result = CliRunner().invoke(cli, [*QUIET, "replay", "cli-replay", "0:zz"])
    assert result.exit_code == 2
    assert "Could not parse move" in result.output


def test_play_command_autoplays_other_seats() -> None:
    result = CliRunner().invoke(
        cli, [*QUIET, "play", "--seed", "cli-play", "--seat", "2"], input="0\n" * 40
    )
    assert result.exit_code == 0, result.output
    assert "Welcome to 61!" in result.output
    assert "Your hand (P2):" in result.output
    assert "Hand Over!" in result.output
    assert "Move 36:" in result.output


def test_play_command_reprompts_on_bad_choice() -> None:
    result = CliRunner().invoke(
        cli,
        [*QUIET, "play", "--seed", "cli-play", "--seat", "0"],
        input="9\nzz\n" + "0\n" * 40,
    )
    assert result.exit_code == 0, result.output
    assert "Invalid choice. Please try again." in result.output
    assert "Could not parse card 'zz'. Please try again." in result.output
    assert "Hand Over!" in result.output
