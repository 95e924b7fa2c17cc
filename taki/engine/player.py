"""A seat at the table."""

from dataclasses import dataclass, replace
from typing import List

from taki.engine.card import Card, CardType


@dataclass(frozen=True)
class Player:
    """Immutable player: hand plus the skip and extra-turn flags."""

    name: str
    hand: tuple[Card, ...] = ()
    skipped: bool = False
    extra_turn: bool = False

    def with_card(self, card: Card) -> "Player":
        return replace(self, hand=self.hand + (card,))

    def without_card(self, card: Card) -> "Player":
        """Remove the first card equal to `card`."""
        hand = list(self.hand)
        for i, c in enumerate(hand):
            if c == card:
                hand.pop(i)
                return replace(self, hand=tuple(hand))
        raise ValueError(f"Card {card} not in {self.name}'s hand")

    def cards_of_type(self, card_type: CardType) -> List[Card]:
        return [c for c in self.hand if c.type == card_type]

    def has_type(self, card_type: CardType) -> bool:
        return any(c.type == card_type for c in self.hand)

    @property
    def has_won(self) -> bool:
        return len(self.hand) == 0
