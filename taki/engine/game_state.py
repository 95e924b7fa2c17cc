"""Game state for Taki."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from taki.engine.card import Card, Color
from taki.engine.deck import Deck
from taki.engine.player import Player


@dataclass(frozen=True)
class GameState:
    """Immutable Taki round state."""

    players: tuple[Player, ...]
    deck: Deck
    top_card: Card
    current_index: int = 0
    direction: int = 1  # 1 = forward, -1 = reversed
    last_colored_card: Optional[Card] = None
    last_color: Color = Color.NONE  # resolved color when the top card is colorless
    plus_3_by: Optional[int] = None  # seat whose plus_3 a break_plus_3 would charge
    winner: Optional[str] = None
    history: tuple[str, ...] = field(default_factory=tuple)  # Log of events

    @property
    def current_player(self) -> Player:
        return self.players[self.current_index]

    def index_of(self, name: str) -> int:
        for i, player in enumerate(self.players):
            if player.name == name:
                return i
        raise ValueError(f"Unknown player: {name}")


@dataclass
class PlayerView:
    """What is shown at the table for one player's turn.

    Contains only that player's hand and public info.
    """

    player: str
    my_hand: List[Card]
    top_card: Card
    direction: int
    last_color: Color
    num_cards_per_player: Dict[str, int]  # player name -> count
    skipped_players: List[str]
    history: List[str]  # Recent game events

    @classmethod
    def from_state(cls, state: GameState, player_name: str) -> "PlayerView":
        """Create a player view from full game state, hiding other players' hands."""
        player = state.players[state.index_of(player_name)]
        return cls(
            player=player_name,
            my_hand=list(player.hand),
            top_card=state.top_card,
            direction=state.direction,
            last_color=state.last_color,
            num_cards_per_player={p.name: len(p.hand) for p in state.players},
            skipped_players=[p.name for p in state.players if p.skipped],
            history=list(state.history[-10:]),  # Last 10 events
        )
