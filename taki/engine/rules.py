"""Taki rules: legality, turn order and state transitions.

Every function here is pure: it takes a GameState and returns a new one.
Decisions that need a player's input live in the game runner.
"""

import random
from dataclasses import replace
from typing import Iterable, List, Optional

from taki.engine.card import Card, CardType, Color
from taki.engine.deck import Deck
from taki.engine.game_state import GameState
from taki.engine.player import Player

HAND_SIZE = 8
MIN_PLAYERS = 2
MAX_PLAYERS = 10


def init_game(
    player_names: List[str],
    seed: Optional[int] = None,
    hand_size: int = HAND_SIZE,
) -> GameState:
    """Create initial game state: deal 8 cards each, a number card on top."""
    if not MIN_PLAYERS <= len(player_names) <= MAX_PLAYERS:
        raise ValueError(f"Taki needs {MIN_PLAYERS}-{MAX_PLAYERS} players, got {len(player_names)}")
    if len(set(player_names)) != len(player_names):
        raise ValueError("Player names must be unique")

    rng = random.Random(seed)
    deck = Deck.shuffled(seed=seed)
    hands: list[list[Card]] = [[] for _ in player_names]
    for _ in range(hand_size):
        for hand in hands:
            card, deck = deck.draw(rng)
            if card is not None:
                hand.append(card)

    card, deck = _starting_card(deck, rng)
    players = tuple(Player(name=name, hand=tuple(hand)) for name, hand in zip(player_names, hands))
    return GameState(
        players=players,
        deck=deck,
        top_card=card,
        last_colored_card=card,
        last_color=card.color,
    )


def _starting_card(deck: Deck, rng: random.Random) -> tuple[Card, Deck]:
    """Draw until a plain number card turns up; anything else goes back in."""
    if not any(c.type == CardType.NUMBER for c in deck.cards):
        raise ValueError("No number card left in the deck to start the game")
    while True:
        card, deck = deck.draw(rng)
        if card.type == CardType.NUMBER:
            return card, deck
        deck = deck.return_card(card, rng)


def is_playable(card: Card, top: Card) -> bool:
    """Check if a card can be played on the current top card."""
    # After a King anything goes
    if top.type == CardType.KING:
        return True
    if card.type == CardType.BREAK_PLUS_3:
        return top.type == CardType.PLUS_3
    if card.type == CardType.NUMBER:
        if card.color == top.color or card.value == top.value:
            return True
    elif card.color == top.color or card.type == top.type:
        return True
    # Wild can always be played
    return card.color == Color.NONE


def playable_cards(hand: Iterable[Card], top: Card) -> List[Card]:
    return [c for c in hand if is_playable(c, top)]


def run_playable_cards(
    hand: Iterable[Card],
    color: Color,
    last_number: Optional[int],
) -> List[Card]:
    """Cards that may continue a Taki run: the run color, or the last number again."""
    return [
        c for c in hand
        if c.color == color
        or (last_number is not None and c.type == CardType.NUMBER and c.value == last_number)
    ]


def next_index(state: GameState, index: Optional[int] = None) -> int:
    """Seat after `index` (default: current) in the current direction."""
    if index is None:
        index = state.current_index
    return (index + state.direction) % len(state.players)


def previous_index(state: GameState, index: Optional[int] = None) -> int:
    """Seat before `index` (default: current) in the current direction."""
    if index is None:
        index = state.current_index
    return (index - state.direction) % len(state.players)


def seats_after(state: GameState, index: int) -> List[int]:
    """All other seats in table order, starting right after `index`."""
    n = len(state.players)
    return [(index + k) % n for k in range(1, n)]


def update_player(state: GameState, index: int, **changes) -> GameState:
    players = list(state.players)
    players[index] = replace(players[index], **changes)
    return replace(state, players=tuple(players))


def _set_player(state: GameState, index: int, player: Player) -> GameState:
    players = list(state.players)
    players[index] = player
    winner = state.winner
    if winner is None and player.has_won:
        winner = player.name
    return replace(state, players=tuple(players), winner=winner)


def advance(state: GameState) -> GameState:
    """Move the turn on, unless the current player holds an extra turn."""
    if state.current_player.extra_turn:
        return update_player(state, state.current_index, extra_turn=False)
    return replace(state, current_index=next_index(state))


def set_current(state: GameState, index: int) -> GameState:
    return replace(state, current_index=index)


def toggle_direction(state: GameState) -> GameState:
    return replace(state, direction=-state.direction)


def place_card(state: GameState, index: int, card: Card) -> GameState:
    """Move a card from a hand onto the table.

    The old top card goes to the discard pool. A plus_3 remembers who laid it
    until a card other than a break_plus_3 covers it. Records the winner if
    the hand is now empty.
    """
    player = state.players[index].without_card(card)
    player = replace(player, extra_turn=False)
    state = _set_player(state, index, player)
    last_colored, last_color = state.last_colored_card, state.last_color
    plus_3_by = None
    if card.type == CardType.PLUS_3:
        plus_3_by = index
    elif card.type == CardType.BREAK_PLUS_3:
        plus_3_by = state.plus_3_by
    if card.color != Color.NONE:
        last_colored, last_color = card, card.color
    return replace(
        state,
        deck=state.deck.discard_card(state.top_card),
        top_card=card,
        last_colored_card=last_colored,
        last_color=last_color,
        plus_3_by=plus_3_by,
    )


def discard_from_hand(state: GameState, index: int, card: Card) -> GameState:
    """Move a card from a hand straight to the discard pool."""
    player = state.players[index].without_card(card)
    state = _set_player(state, index, player)
    return replace(state, deck=state.deck.discard_card(card))


def draw_cards(
    state: GameState,
    index: int,
    count: int,
    rng: Optional[random.Random] = None,
) -> tuple[GameState, int]:
    """Draw up to `count` cards for a player. Returns the new state and how many were drawn."""
    deck = state.deck
    player = state.players[index]
    drawn = 0
    for _ in range(count):
        card, deck = deck.draw(rng)
        if card is None:
            break
        player = player.with_card(card)
        drawn += 1
    state = _set_player(state, index, player)
    return replace(state, deck=deck), drawn


def break_target(state: GameState, index: int) -> int:
    """Seat that draws for a break_plus_3 played from `index`.

    The player who laid the pending plus_3, or the previous player when the
    break was played under a King.
    """
    if state.plus_3_by is not None:
        return state.plus_3_by
    return previous_index(state, index)


def settle_plus_3(state: GameState) -> GameState:
    return replace(state, plus_3_by=None)


def choose_color(state: GameState, color: Color) -> GameState:
    """Leave a colored stand-in for the wild on top of the table."""
    if color == Color.NONE:
        raise ValueError("A real color must be chosen")
    return replace(state, top_card=state.top_card.with_color(color), last_color=color)


def resolved_color(state: GameState) -> Color:
    """Color in effect: the top card's own color, or the last real color."""
    if state.top_card.color != Color.NONE:
        return state.top_card.color
    return state.last_color


def add_history(state: GameState, line: str) -> GameState:
    return replace(state, history=state.history + (line,))
