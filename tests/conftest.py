"""Shared fixtures: hand-built game states and a scripted agent."""

from typing import Any, Optional

import pytest

from taki.agent.protocol import Event
from taki.engine import Card, CardType, Color, Deck, GameState, Player
from taki.orchestration.game_runner import GameRunner

FILLER = Card(Color.GREEN, CardType.NUMBER, 9)


class ScriptedAgent:
    """Answers every request from a fixed list, in order.

    Running out of answers fails the test, which also catches an engine that
    asks more questions than expected.
    """

    def __init__(self, answers: list[Any], name: str = "scripted"):
        self._answers = list(answers)
        self._name = name
        self.prompts: list[str] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def remaining(self) -> list[Any]:
        return list(self._answers)

    def _next(self, prompt: str) -> Any:
        self.prompts.append(prompt)
        if not self._answers:
            raise AssertionError(f"No scripted answer left for: {prompt}")
        return self._answers.pop(0)

    def choose_number(self, prompt: str, min_value: int, max_value: int) -> Any:
        return self._next(prompt)

    def choose_yes_no(self, prompt: str) -> Any:
        return self._next(prompt)

    def choose_card(self, prompt: str, options: list[Card], allow_close: bool) -> Optional[int]:
        return self._next(prompt)


class RecordingPresenter:
    def __init__(self) -> None:
        self.events: list[tuple[Event, dict[str, Any]]] = []

    def notify(self, event: Event, payload: dict[str, Any]) -> None:
        self.events.append((event, payload))

    def kinds(self) -> list[Event]:
        return [e for e, _ in self.events]


def build_state(
    hands: list[list[Card]],
    top: Card,
    draw_pile: Optional[list[Card]] = None,
    discard: Optional[list[Card]] = None,
    current: int = 0,
    direction: int = 1,
    last_color: Optional[Color] = None,
) -> GameState:
    if draw_pile is None:
        draw_pile = [FILLER] * 30
    if last_color is None:
        last_color = top.color if top.color != Color.NONE else Color.RED
    players = tuple(Player(name=f"p{i}", hand=tuple(hand)) for i, hand in enumerate(hands, start=1))
    return GameState(
        players=players,
        deck=Deck(cards=tuple(draw_pile), discard=tuple(discard or ())),
        top_card=top,
        current_index=current,
        direction=direction,
        last_color=last_color,
    )


@pytest.fixture
def make_state():
    return build_state


@pytest.fixture
def make_runner():
    """Build a runner where one scripted agent answers for every seat."""

    def _make(state: GameState, answers: list[Any]) -> tuple[GameRunner, ScriptedAgent, RecordingPresenter]:
        agent = ScriptedAgent(answers)
        presenter = RecordingPresenter()
        runner = GameRunner({p.name: agent for p in state.players}, presenter=presenter, seed=0)
        return runner, agent, presenter

    return _make
