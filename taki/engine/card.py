"""Card, Color and CardType for Taki."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Color(str, Enum):
    """Card colors. NONE marks the colorless wild cards."""

    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    NONE = "none"


REAL_COLORS = (Color.RED, Color.BLUE, Color.GREEN, Color.YELLOW)


class CardType(str, Enum):
    """Closed set of card types."""

    NUMBER = "number"
    STOP = "stop"  # next player loses their turn
    PLUS_2 = "plus_2"  # next player draws 2, stackable
    SWITCH_DIRECTION = "switch_direction"
    SWITCH_COLOR = "switch_color"  # wild: next player picks the color
    TAKI = "taki"  # lay down a run of one color
    SUPER_TAKI = "super_taki"  # wild taki in the resolved color
    PLUS = "plus"  # one extra turn
    PLUS_3 = "plus_3"  # everybody else draws 3
    BREAK_PLUS_3 = "break_plus_3"  # blocks a plus_3
    KING = "king"  # extra turn, anything goes on top of it


WILD_TYPES = frozenset({
    CardType.SWITCH_COLOR,
    CardType.SUPER_TAKI,
    CardType.KING,
    CardType.PLUS_3,
    CardType.BREAK_PLUS_3,
})

# Wild types that may sit on the table in a chosen color after color selection
COLOR_CHOICE_TYPES = frozenset({CardType.SWITCH_COLOR, CardType.PLUS_3})

# "2" is replaced by PLUS_2
NUMBER_VALUES = (1, 3, 4, 5, 6, 7, 8, 9)


@dataclass(frozen=True)
class Card:
    """A Taki card.

    Number cards carry a color and a value from NUMBER_VALUES. Action cards
    carry a color and no value. Wild cards have color NONE, except the
    synthetic top card left by color selection, which is a SWITCH_COLOR or
    PLUS_3 in the chosen color.
    """

    color: Color
    type: CardType
    value: Optional[int] = None

    def __post_init__(self) -> None:
        if self.type == CardType.NUMBER:
            if self.value not in NUMBER_VALUES:
                raise ValueError(f"Invalid number card value: {self.value}")
        elif self.value is not None:
            raise ValueError(f"Only number cards have a value, got {self.type.value}={self.value}")
        if self.type in WILD_TYPES:
            if self.color != Color.NONE and self.type not in COLOR_CHOICE_TYPES:
                raise ValueError(f"{self.type.value} must be colorless")
        elif self.color == Color.NONE:
            raise ValueError(f"{self.type.value} cards must have a color")

    @property
    def is_wild(self) -> bool:
        return self.type in WILD_TYPES

    @property
    def is_synthetic(self) -> bool:
        """True for a wild card that was given a color by color selection."""
        return self.is_wild and self.color != Color.NONE

    def with_color(self, color: Color) -> "Card":
        """Return the colored stand-in used as top card after color selection."""
        return Card(color=color, type=self.type)

    def printed(self) -> "Card":
        """Return the physical card as it exists in the deck."""
        if self.is_synthetic:
            return Card(color=Color.NONE, type=self.type)
        return self

    def __str__(self) -> str:
        if self.is_synthetic:
            return f"{self.type.value}({self.color.value})"
        if self.color == Color.NONE:
            return self.type.value
        if self.type == CardType.NUMBER:
            return f"{self.color.value}_{self.value}"
        return f"{self.color.value}_{self.type.value}"
