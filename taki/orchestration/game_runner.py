"""Single game runner: the turn loop, card effects and chain protocols."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

from taki.agent.protocol import Event
from taki.engine import Card, CardType, Color, GameState, PlayerView, REAL_COLORS
from taki.engine import rules

if TYPE_CHECKING:
    from taki.agent.protocol import AgentProtocol, Presenter

STACK_STEP = 2
MASS_DRAW_COUNT = 3

# Last card of a run whose effect is not applied again
NO_RUN_RETRIGGER = frozenset({
    CardType.TAKI,
    CardType.SUPER_TAKI,
    CardType.KING,
    CardType.BREAK_PLUS_3,
})


@dataclass
class GameResult:
    """Result of a completed game."""

    winner: Optional[str]
    num_turns: int
    player_ids: tuple[str, ...]


class GameRunner:
    """Runs a single Taki game to completion.

    `agents` maps each player name to the agent answering for that seat.
    The same agent object may sit in several seats (hot seat).
    """

    def __init__(
        self,
        agents: dict[str, "AgentProtocol"],
        presenter: Optional["Presenter"] = None,
        seed: Optional[int] = None,
        max_turns: Optional[int] = None,
    ):
        self._agents = agents
        self._presenter = presenter
        self._seed = seed
        self._rng = random.Random(seed)
        self._max_turns = max_turns
        self.state: Optional[GameState] = None

    def run(self, state: Optional[GameState] = None) -> GameResult:
        """Run the game and return the result."""
        if state is None:
            state = rules.init_game(list(self._agents.keys()), seed=self._seed)
        state = self._emit(
            state,
            Event.GAME_STARTED,
            f"Game starts! First card on the table: {state.top_card}",
            top_card=state.top_card,
        )
        num_turns = 0

        while state.winner is None:
            if self._max_turns is not None and num_turns >= self._max_turns:
                break
            state = self.play_turn(state)
            num_turns += 1

        self.state = state
        return GameResult(
            winner=state.winner,
            num_turns=num_turns,
            player_ids=tuple(p.name for p in state.players),
        )

    def play_turn(self, state: GameState) -> GameState:
        """Resolve one turn of the current player, including every chain it triggers."""
        index = state.current_index
        player = state.players[index]
        state = self._emit(
            state,
            Event.TURN_STARTED,
            f"{player.name}'s turn",
            player=player.name,
            view=PlayerView.from_state(state, player.name),
        )

        if player.skipped:
            state = rules.update_player(state, index, skipped=False)
            state = self._emit(state, Event.TURN_SKIPPED, f"{player.name} is skipped", player=player.name)
            return rules.advance(state)

        playable = rules.playable_cards(player.hand, state.top_card)
        if not playable:
            state = self._draw(state, index, 1)
            state = rules.update_player(state, index, extra_turn=False)
            return rules.advance(state)

        card = self._ask_card(state, index, f"{player.name}, choose a card to play", playable, allow_close=False)
        state = self._play(state, index, card)
        if state.winner is None:
            state = self._apply_effect(state, index, card)

        if state.winner is not None:
            return self._emit(state, Event.GAME_WON, f"{state.winner} wins the game!", player=state.winner)
        return rules.advance(state)

    # ------------------------------------------------------------------
    # Card effects

    def _apply_effect(self, state: GameState, index: int, card: Card) -> GameState:
        """Apply the effect of a card that was just placed on the table."""
        name = state.players[index].name
        t = card.type
        if t == CardType.NUMBER:
            return state
        elif t == CardType.STOP:
            target = rules.next_index(state, index)
            state = rules.update_player(state, target, skipped=True)
            skipped = state.players[target].name
            return self._emit(state, Event.TURN_SKIPPED, f"{skipped} will lose their next turn", player=skipped)
        elif t == CardType.PLUS_2:
            return self._stacking_draw(state, index)
        elif t == CardType.SWITCH_DIRECTION:
            state = rules.toggle_direction(state)
            direction = "forward" if state.direction == 1 else "reversed"
            return self._emit(
                state, Event.DIRECTION_CHANGED, f"Direction is now {direction}", direction=state.direction
            )
        elif t == CardType.SWITCH_COLOR:
            return self._select_color(state, index)
        elif t == CardType.TAKI:
            return self._run_sequence(state, index, card.color)
        elif t == CardType.SUPER_TAKI:
            color = rules.resolved_color(state)
            return self._run_sequence(state, index, color)
        elif t == CardType.PLUS:
            state = rules.update_player(state, index, extra_turn=True)
            return self._emit(state, Event.EXTRA_TURN, f"{name} gets one extra turn!", player=name)
        elif t == CardType.PLUS_3:
            state = self._mass_draw(state, index)
            if state.winner is not None:
                return state
            return self._select_color(state, index)
        elif t == CardType.BREAK_PLUS_3:
            state = self._draw(state, rules.break_target(state, index), MASS_DRAW_COUNT)
            return rules.settle_plus_3(state)
        elif t == CardType.KING:
            state = rules.update_player(state, index, extra_turn=True)
            return self._emit(
                state, Event.EXTRA_TURN, f"{name} played KING: any card may follow", player=name
            )
        raise AssertionError(f"Unhandled card type: {t}")

    def _stacking_draw(self, state: GameState, index: int) -> GameState:
        """Chain of Plus Two cards; the first player who does not stack pays for all."""
        count = STACK_STEP
        target = rules.next_index(state, index)
        while True:
            player = state.players[target]
            state = self._emit(
                state,
                Event.STACK_PENDING,
                f"{player.name} must draw {count} cards or play a plus_2",
                player=player.name,
                count=count,
            )
            stack = player.cards_of_type(CardType.PLUS_2)
            card = None
            if stack and self._ask_yes_no(state, target, f"{player.name}, play a plus_2 instead of drawing {count}?"):
                card = self._ask_card(state, target, "Choose which plus_2 to play", stack, allow_close=True)
            if card is None:
                state = self._draw(state, target, count)
                return rules.set_current(state, target)

            state = self._play(state, target, card)
            if state.winner is not None:
                return state
            count += STACK_STEP
            target = rules.next_index(state, target)

    def _run_sequence(self, state: GameState, index: int, color: Color) -> GameState:
        """Let the player lay down a run of the active color, then apply the last card's effect."""
        name = state.players[index].name
        last_number: Optional[int] = None
        last_played: Optional[Card] = None
        state = self._emit(state, Event.RUN_STARTED, f"{name}'s TAKI (color: {color.value})", player=name, color=color)

        while True:
            options = rules.run_playable_cards(state.players[index].hand, color, last_number)
            if not options:
                reason = f"{name} has no more cards for the TAKI"
                break
            card = self._ask_card(state, index, f"{name}, play a card or close the TAKI", options, allow_close=True)
            if card is None:
                reason = f"{name} closed the TAKI"
                break
            state = self._play(state, index, card)
            if state.winner is not None:
                return state
            last_played = card
            if card.color != Color.NONE:
                color = card.color
            last_number = card.value if card.type == CardType.NUMBER else None

        state = self._emit(state, Event.RUN_ENDED, reason, player=name, last_card=last_played)
        if last_played is not None and last_played.type not in NO_RUN_RETRIGGER:
            state = self._apply_effect(state, index, last_played)
        return state

    def _select_color(self, state: GameState, index: int) -> GameState:
        """The next player picks the color the wild stands for."""
        chooser = rules.next_index(state, index)
        name = state.players[chooser].name
        lines = [f"{name}, choose a color:"]
        lines += [f"  {i}: {c.value}" for i, c in enumerate(REAL_COLORS, start=1)]
        choice = self._ask_number(state, chooser, "\n".join(lines), 1, len(REAL_COLORS))
        color = REAL_COLORS[choice - 1]
        state = rules.choose_color(state, color)
        return self._emit(state, Event.COLOR_CHOSEN, f"Color changed to {color.value}", player=name, color=color)

    def _mass_draw(self, state: GameState, index: int) -> GameState:
        """Everybody else draws 3, unless the first holder of a break_plus_3 blocks it."""
        others = rules.seats_after(state, index)
        blocker = next((i for i in others if state.players[i].has_type(CardType.BREAK_PLUS_3)), None)

        if blocker is not None:
            blocker_name = state.players[blocker].name
            state = self._emit(
                state, Event.BLOCK_OFFERED, f"{blocker_name} has a break_plus_3!", player=blocker_name
            )
            if self._ask_yes_no(state, blocker, f"{blocker_name}, use break_plus_3 to block drawing 3 cards?"):
                card = state.players[blocker].cards_of_type(CardType.BREAK_PLUS_3)[0]
                state = rules.discard_from_hand(state, blocker, card)
                state = self._emit(
                    state,
                    Event.MASS_DRAW_BLOCKED,
                    f"{blocker_name} blocked the plus_3",
                    player=blocker_name,
                    initiator=state.players[index].name,
                )
                if state.winner is not None:
                    return state
                return self._draw(state, index, MASS_DRAW_COUNT)

        for i in others:
            state = self._draw(state, i, MASS_DRAW_COUNT)
        return state

    # ------------------------------------------------------------------
    # Helpers

    def _play(self, state: GameState, index: int, card: Card) -> GameState:
        name = state.players[index].name
        state = rules.place_card(state, index, card)
        return self._emit(state, Event.CARD_PLAYED, f"{name} played {card}", player=name, card=card)

    def _draw(self, state: GameState, index: int, count: int) -> GameState:
        name = state.players[index].name
        state, drawn = rules.draw_cards(state, index, count, self._rng)
        if drawn < count:
            state = self._emit(
                state,
                Event.DECK_EXHAUSTED,
                f"{name} tried to draw, but the deck is empty",
                player=name,
                requested=count,
                drawn=drawn,
            )
        noun = "card" if drawn == 1 else "cards"
        return self._emit(state, Event.CARDS_DRAWN, f"{name} drew {drawn} {noun}", player=name, count=drawn)

    def _emit(self, state: GameState, event: Event, message: str, **payload: Any) -> GameState:
        if self._presenter is not None:
            self._presenter.notify(event, {"message": message, **payload})
        return rules.add_history(state, message)

    def _agent(self, state: GameState, index: int) -> "AgentProtocol":
        return self._agents[state.players[index].name]

    def _invalid(self, state: GameState, index: int, answer: Any) -> None:
        # History is not touched so that re-prompts stay out of the game log
        if self._presenter is not None:
            self._presenter.notify(
                Event.INVALID_CHOICE,
                {"message": f"Invalid choice: {answer!r}. Try again.", "player": state.players[index].name},
            )

    def _ask_card(
        self,
        state: GameState,
        index: int,
        prompt: str,
        options: list[Card],
        allow_close: bool,
    ) -> Optional[Card]:
        agent = self._agent(state, index)
        while True:
            answer = agent.choose_card(prompt, options, allow_close)
            if answer is None and allow_close:
                return None
            if isinstance(answer, int) and not isinstance(answer, bool) and 0 <= answer < len(options):
                return options[answer]
            self._invalid(state, index, answer)

    def _ask_number(self, state: GameState, index: int, prompt: str, min_value: int, max_value: int) -> int:
        agent = self._agent(state, index)
        while True:
            answer = agent.choose_number(prompt, min_value, max_value)
            if isinstance(answer, int) and not isinstance(answer, bool) and min_value <= answer <= max_value:
                return answer
            self._invalid(state, index, answer)

    def _ask_yes_no(self, state: GameState, index: int, prompt: str) -> bool:
        agent = self._agent(state, index)
        while True:
            answer = agent.choose_yes_no(prompt)
            if isinstance(answer, bool):
                return answer
            self._invalid(state, index, answer)
