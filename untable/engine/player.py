"""Player identity and hand."""

from dataclasses import dataclass, field
from typing import List

from untable.engine.card import Card


@dataclass
class Player:
    """A seat at the table. Player 1 is the human player."""

    number: int
    name: str
    is_human: bool = False
    hand: List[Card] = field(default_factory=list)

    @property
    def card_count(self) -> int:
        return len(self.hand)

    @property
    def has_won(self) -> bool:
        return not self.hand

    def add_card(self, card: Card) -> None:
        self.hand.append(card)

    def has_card(self, card: Card) -> bool:
        return card in self.hand

    def remove_card(self, card: Card) -> bool:
        """Remove this exact card (matched by uid, not just color and rank).

        Returns False when the card is not in the hand.
        """
        for i, c in enumerate(self.hand):
            if c == card:
                del self.hand[i]
                return True
        return False

    def clear_hand(self) -> None:
        self.hand.clear()
