"""Agent and presenter protocols - the interfaces the game runner talks to."""

from enum import Enum
from typing import Any, Optional, Protocol

from taki.engine import Card


class AgentProtocol(Protocol):
    """Interface for whoever answers a seat's decisions."""

    @property
    def name(self) -> str:
        """Display name for the agent."""
        ...

    def choose_number(self, prompt: str, min_value: int, max_value: int) -> int:
        """Pick an integer in [min_value, max_value]."""
        ...

    def choose_yes_no(self, prompt: str) -> bool:
        ...

    def choose_card(
        self,
        prompt: str,
        options: list[Card],
        allow_close: bool,
    ) -> Optional[int]:
        """Choose a card from the options.

        Args:
            prompt: What the choice is for.
            options: Cards to choose from.
            allow_close: Whether None ("close" / "don't play") is accepted.

        Returns:
            Index into options, or None to close when allow_close is set.
        """
        ...


class Event(str, Enum):
    """Kinds of notifications sent to the presenter."""

    GAME_STARTED = "game_started"
    TURN_STARTED = "turn_started"
    TURN_SKIPPED = "turn_skipped"
    CARD_PLAYED = "card_played"
    CARDS_DRAWN = "cards_drawn"
    DECK_EXHAUSTED = "deck_exhausted"
    DIRECTION_CHANGED = "direction_changed"
    EXTRA_TURN = "extra_turn"
    STACK_PENDING = "stack_pending"
    RUN_STARTED = "run_started"
    RUN_ENDED = "run_ended"
    COLOR_CHOSEN = "color_chosen"
    BLOCK_OFFERED = "block_offered"
    MASS_DRAW_BLOCKED = "mass_draw_blocked"
    INVALID_CHOICE = "invalid_choice"
    GAME_WON = "game_won"


class Presenter(Protocol):
    """One-way sink for game events. Must not raise or block.

    The runner does not catch errors from `notify`; they end the game.
    """

    def notify(self, event: Event, payload: dict[str, Any]) -> None:
        ...
