"""Game engine for Taki."""

from taki.engine.card import Card, CardType, Color, REAL_COLORS
from taki.engine.deck import Deck, create_deck
from taki.engine.game_state import GameState, PlayerView
from taki.engine.player import Player
from taki.engine.rules import (
    advance,
    draw_cards,
    init_game,
    is_playable,
    next_index,
    place_card,
    playable_cards,
    previous_index,
)

__all__ = [
    "Card",
    "CardType",
    "Color",
    "REAL_COLORS",
    "Deck",
    "create_deck",
    "GameState",
    "PlayerView",
    "Player",
    "advance",
    "draw_cards",
    "init_game",
    "is_playable",
    "next_index",
    "place_card",
    "playable_cards",
    "previous_index",
]
