"""Unit tests for game history logging."""

from dataclasses import replace

from taki.engine import Card, CardType, Color, PlayerView, init_game

RED_5 = Card(Color.RED, CardType.NUMBER, 5)
RED_3 = Card(Color.RED, CardType.NUMBER, 3)
BLUE_9 = Card(Color.BLUE, CardType.NUMBER, 9)


def test_history_initialization():
    state = init_game(["p1", "p2"])
    assert len(state.history) == 0


def test_history_records_play(make_state, make_runner):
    state = make_state([[RED_3, BLUE_9], [BLUE_9]], RED_5)
    runner, _, _ = make_runner(state, [0])
    state = runner.play_turn(state)

    assert state.history[0] == "p1's turn"
    assert "p1 played red_3" in state.history


def test_history_records_draw(make_state, make_runner):
    state = make_state([[BLUE_9], [BLUE_9]], RED_5)
    runner, _, _ = make_runner(state, [])
    state = runner.play_turn(state)

    assert state.history[-1] == "p1 drew 1 card"


def test_history_persists_across_turns(make_state, make_runner):
    state = make_state([[RED_3, BLUE_9], [BLUE_9]], RED_5)
    runner, _, _ = make_runner(state, [0])

    # Turn 1: p1 plays, turn 2: p2 has nothing on red_3 and draws
    state = runner.play_turn(state)
    state = runner.play_turn(state)

    assert state.history == (
        "p1's turn",
        "p1 played red_3",
        "p2's turn",
        "p2 drew 1 card",
    )


def test_invalid_answers_stay_out_of_history(make_state, make_runner):
    state = make_state([[RED_3, BLUE_9], [BLUE_9]], RED_5)
    runner, _, _ = make_runner(state, [9, 0])
    state = runner.play_turn(state)
    assert not any("Invalid" in line for line in state.history)


def test_player_view_shows_recent_history(make_state):
    state = make_state([[RED_3, BLUE_9], [BLUE_9, BLUE_9]], RED_5)
    state = replace(state, history=tuple(f"event {i}" for i in range(15)))
    view = PlayerView.from_state(state, "p2")

    assert view.my_hand == [BLUE_9, BLUE_9]
    assert view.num_cards_per_player == {"p1": 2, "p2": 2}
    assert view.history == [f"event {i}" for i in range(5, 15)]
