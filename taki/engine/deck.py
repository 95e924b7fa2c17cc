"""Deck creation, shuffling and drawing."""

import random
from dataclasses import dataclass
from typing import List, Optional

from taki.engine.card import Card, CardType, Color, NUMBER_VALUES, REAL_COLORS

ACTION_TYPES = (
    CardType.STOP,
    CardType.SWITCH_DIRECTION,
    CardType.PLUS,
    CardType.TAKI,
)

WILD_CARDS = (
    CardType.SWITCH_COLOR,
    CardType.SWITCH_COLOR,
    CardType.SUPER_TAKI,
    CardType.KING,
    CardType.PLUS_3,
    CardType.BREAK_PLUS_3,
)

DECK_SIZE = 116


def full_card_set() -> List[Card]:
    """Return the 116 cards of a Taki deck in a fixed order.

    - 4 colors × (1, 3-9, Plus Two): 36 cards
    - 4 colors × (Stop, Switch Direction, Plus, Taki): 16 cards
    - 2 Switch Color, Super Taki, King, Plus Three, Break Plus Three: 6 cards
    - Everything twice: 116 cards
    """
    cards: List[Card] = []

    for color in REAL_COLORS:
        for value in NUMBER_VALUES:
            cards.append(Card(color=color, type=CardType.NUMBER, value=value))
        cards.append(Card(color=color, type=CardType.PLUS_2))

    for color in REAL_COLORS:
        for card_type in ACTION_TYPES:
            cards.append(Card(color=color, type=card_type))

    for card_type in WILD_CARDS:
        cards.append(Card(color=Color.NONE, type=card_type))

    return cards + list(cards)


def create_deck(seed: int | None = None) -> List[Card]:
    """Create a shuffled 116-card deck."""
    cards = full_card_set()
    if seed is not None:
        rng = random.Random(seed)
        rng.shuffle(cards)
    else:
        random.shuffle(cards)
    return cards


@dataclass(frozen=True)
class Deck:
    """Immutable draw pile (top is last) plus discard pool."""

    cards: tuple[Card, ...]
    discard: tuple[Card, ...] = ()

    @classmethod
    def shuffled(cls, seed: int | None = None) -> "Deck":
        return cls(cards=tuple(create_deck(seed=seed)))

    def __len__(self) -> int:
        return len(self.cards)

    def draw(self, rng: Optional[random.Random] = None) -> tuple[Optional[Card], "Deck"]:
        """Draw the top card.

        When the draw pile is empty the discard pool is shuffled back in.
        Returns (None, self) when both are empty.
        """
        cards = list(self.cards)
        discard = list(self.discard)
        if not cards and discard:
            cards, discard = discard, []
            (rng or random).shuffle(cards)
        if not cards:
            return None, self
        card = cards.pop()
        return card, Deck(cards=tuple(cards), discard=tuple(discard))

    def discard_card(self, card: Card) -> "Deck":
        """Put a card on the discard pool (synthetic cards go back as printed)."""
        return Deck(cards=self.cards, discard=self.discard + (card.printed(),))

    def return_card(self, card: Card, rng: Optional[random.Random] = None) -> "Deck":
        """Put a card back into the draw pile and reshuffle it."""
        cards = list(self.cards) + [card]
        (rng or random).shuffle(cards)
        return Deck(cards=tuple(cards), discard=self.discard)
