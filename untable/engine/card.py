"""Card, Color and CardType types."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Color(str, Enum):
    """Card colors. Wild cards carry no color (None)."""

    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class CardType(str, Enum):
    """Card types."""

    NUMBER = "number"
    SKIP = "skip"
    REVERSE = "reverse"
    DRAW_TWO = "draw_two"
    WILD = "wild"
    DRAW_FOUR = "draw_four"


WILD_TYPES = (CardType.WILD, CardType.DRAW_FOUR)
ACTION_TYPES = (CardType.SKIP, CardType.REVERSE, CardType.DRAW_TWO)

# Types whose play makes the next player lose (part of) their turn
EFFECT_TYPES = (CardType.SKIP, CardType.DRAW_TWO, CardType.DRAW_FOUR)

_TYPE_LABELS = {
    CardType.SKIP: "Skip",
    CardType.REVERSE: "Reverse",
    CardType.DRAW_TWO: "DrawTwo",
}


@dataclass(frozen=True)
class Card:
    """A single card.

    For number cards: color is set, rank is 0-9.
    For skip/reverse/draw_two: color is set, rank is None.
    For wild/draw_four: color and rank are None.

    uid tells apart two structurally identical cards (e.g. the two Red 7s);
    the deck builder numbers every card it creates.
    """

    type: CardType
    color: Optional[Color] = None
    rank: Optional[int] = None
    uid: int = 0

    def __post_init__(self) -> None:
        if self.type in WILD_TYPES and self.color is not None:
            raise ValueError("Wild cards must have color=None")
        if self.type not in WILD_TYPES and self.color is None:
            raise ValueError("Non-wild cards must have a color")
        if self.type == CardType.NUMBER:
            if self.rank is None or not 0 <= self.rank <= 9:
                raise ValueError(f"Invalid rank for number card: {self.rank}")
        elif self.rank is not None:
            raise ValueError("Only number cards have a rank")

    @property
    def is_wild(self) -> bool:
        return self.type in WILD_TYPES

    def __str__(self) -> str:
        if self.type == CardType.WILD:
            return "Wild"
        if self.type == CardType.DRAW_FOUR:
            return "Wild DrawFour"
        if self.type == CardType.NUMBER:
            return f"{self.color.label} {self.rank}"
        return f"{self.color.label} {_TYPE_LABELS[self.type]}"
