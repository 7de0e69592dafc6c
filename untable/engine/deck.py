"""Deck creation, shuffling and drawing."""

import random
from typing import List, Optional, Sequence

from untable.engine.card import Card, CardType, Color

DECK_SIZE = 108

ACTION_TYPES_STANDARD = (CardType.SKIP, CardType.REVERSE, CardType.DRAW_TWO)


def build_cards() -> List[Card]:
    """Create the standard 108 cards in a fixed order.

    - 4 colors × (one 0, two each of 1-9, Skip, Reverse, Draw Two): 100 cards
    - 4 Wild, 4 Wild Draw Four: 8 cards
    - Total: 108 cards, numbered 0-107 through Card.uid
    """
    layout: list[tuple[CardType, Optional[Color], Optional[int]]] = []

    for color in Color:
        # One zero per color
        layout.append((CardType.NUMBER, color, 0))
        # Two of each 1-9 and action cards per color
        for rank in range(1, 10):
            layout.append((CardType.NUMBER, color, rank))
            layout.append((CardType.NUMBER, color, rank))
        for card_type in ACTION_TYPES_STANDARD:
            layout.append((card_type, color, None))
            layout.append((card_type, color, None))

    for _ in range(4):
        layout.append((CardType.WILD, None, None))
        layout.append((CardType.DRAW_FOUR, None, None))

    return [
        Card(type=card_type, color=color, rank=rank, uid=uid)
        for uid, (card_type, color, rank) in enumerate(layout)
    ]


class Deck:
    """Draw pile. The last element of the list is the top of the deck."""

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        cards: Optional[Sequence[Card]] = None,
    ):
        if cards is not None:
            # Stacked deck: used as given, no shuffle
            self._cards = list(cards)
            return
        self._cards = build_cards()
        (rng or random.Random(seed)).shuffle(self._cards)

    def draw(self) -> Optional[Card]:
        """Remove and return the top card, or None when the deck is empty."""
        if not self._cards:
            return None
        return self._cards.pop()

    @property
    def count(self) -> int:
        return len(self._cards)

    @property
    def cards(self) -> tuple[Card, ...]:
        return tuple(self._cards)

    def __len__(self) -> int:
        return len(self._cards)
