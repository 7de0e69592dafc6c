"""Scripted opponent - the computer players at the table."""

import random
from collections import Counter
from typing import Iterable, Optional

from untable.engine import Action, Card, Color, DrawCard, PlayCard, PlayerView


def choose_color_by_hand(hand: Iterable[Card]) -> Color:
    """Color with the most non-wild cards in hand. Ties go Red, Blue, Green, Yellow."""
    counts = Counter(c.color for c in hand if c.color is not None)
    best = Color.RED
    for color in Color:
        if counts[color] > counts[best]:
            best = color
    return best


class ScriptedAgent:
    """Plays the first legal card in hand; otherwise draws.

    Holding a legal card it just drew, it plays it half of the time and
    passes otherwise.
    """

    def __init__(self, name: str = "computer", seed: Optional[int] = None, rng: Optional[random.Random] = None):
        self._name = name
        self._rng = rng or random.Random(seed)

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    def get_action(
        self,
        player_view: PlayerView,
        legal_actions: list[Action],
        player_number: int,
    ) -> Action | None:
        if not legal_actions:
            return None

        plays = [a for a in legal_actions if isinstance(a, PlayCard)]
        if player_view.just_drawn_card is not None:
            if plays and self._rng.randrange(2) == 0:
                return plays[0]
            return DrawCard()

        # Legal plays come in hand order
        return plays[0] if plays else DrawCard()

    def choose_color(self, player_view: PlayerView) -> Color:
        return choose_color_by_hand(player_view.my_hand)
