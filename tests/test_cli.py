"""CLI and console presenter tests."""

from typer.testing import CliRunner

from taki.agent.protocol import Event
from taki.cli import app
from taki.display import ConsolePresenter, format_player_view
from taki.engine import Card, CardType, Color, PlayerView, init_game
from taki.engine.rules import update_player

runner = CliRunner()


def test_simulate_runs_to_the_end() -> None:
    result = runner.invoke(app, ["simulate", "--players", "3", "--seed", "7"])
    assert result.exit_code == 0
    assert "Winner:" in result.output
    assert "Turns:" in result.output


def test_simulate_reads_players_from_env() -> None:
    result = runner.invoke(app, ["simulate", "--seed", "3"], env={"TAKI_PLAYERS": "1"})
    assert result.exit_code != 0


def test_play_rejects_wrong_number_of_names() -> None:
    result = runner.invoke(app, ["play", "--players", "3", "--names", "Dana,Omer"])
    assert result.exit_code == 2


def test_play_aborts_on_closed_input() -> None:
    result = runner.invoke(app, ["play", "--players", "2", "--seed", "1"], input="")
    assert result.exit_code == 1


def test_console_presenter_prints_turn_and_events(capsys) -> None:
    state = init_game(["Dana", "Omer"], seed=2)
    presenter = ConsolePresenter()
    presenter.notify(
        Event.TURN_STARTED,
        {"message": "Dana's turn", "view": PlayerView.from_state(state, "Dana")},
    )
    presenter.notify(Event.CARD_PLAYED, {"message": "Dana played red_5", "card": Card(Color.RED, CardType.NUMBER, 5)})
    out = capsys.readouterr().out
    assert "--- Dana's turn ---" in out
    assert "=== Dana's hand ===" in out
    assert "Dana played red_5" in out


def test_table_view_lists_skipped_players() -> None:
    state = init_game(["Dana", "Omer", "Noa"], seed=2)
    assert "Losing next turn" not in format_player_view(PlayerView.from_state(state, "Dana"))

    state = update_player(state, 1, skipped=True)
    text = format_player_view(PlayerView.from_state(state, "Dana"))
    assert "=== Losing next turn ===\nOmer" in text
