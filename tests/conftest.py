"""Shared fixtures: stacked decks and rigged games."""

import pytest

from untable.engine import CardType, Color, Deck, GameEngine, build_cards, can_play
from untable.engine.game_state import PLAYER_NUMBERS

RED_7 = (CardType.NUMBER, Color.RED, 7)


def _take(pool, card_type, color=None, rank=None):
    for i, c in enumerate(pool):
        if c.type == card_type and c.color == color and c.rank == rank:
            return pool.pop(i)
    raise LookupError(f"No {card_type} {color} {rank} left")


def _stack(hands=None, top=RED_7, draws=()):
    """Build a deck that deals the given hands, flips top, then yields draws.

    Hands are topped up to 7 with cards that cannot be played on top.
    Cards are described as (CardType, Color | None, rank | None) tuples.
    """
    hands = hands or {}
    pool = build_cards()
    dealt = {n: [_take(pool, *desc) for desc in hands.get(n, [])] for n in PLAYER_NUMBERS}
    top_card = _take(pool, *top)
    upcoming = [_take(pool, *desc) for desc in draws]

    # Filler: cards that are illegal on the starting card come first
    pool.sort(key=lambda c: can_play(c, top_card, None))
    for n in PLAYER_NUMBERS:
        while len(dealt[n]) < 7:
            dealt[n].append(pool.pop(0))

    sequence = [dealt[n][r] for r in range(7) for n in PLAYER_NUMBERS]
    sequence += [top_card, *upcoming, *pool]
    # Deck draws from the end of its list
    return Deck(cards=list(reversed(sequence)))


@pytest.fixture
def stacked_deck():
    return _stack


@pytest.fixture
def rigged():
    """Factory for an engine whose new game was dealt from a stacked deck."""

    def make(hands=None, top=RED_7, draws=(), chooser=None, seed=0):
        engine = GameEngine(seed=seed)
        engine.new_game(color_chooser=chooser, deck=_stack(hands, top, draws))
        return engine

    return make


@pytest.fixture
def trim_hand():
    """Cut a player's hand down to its first `keep` cards.

    The removed cards go under the discard pile so the 108-card total holds.
    """

    def trim(engine, player_number, keep):
        hand = engine.state.get_player_hand(player_number)
        extra = hand[keep:]
        del hand[keep:]
        engine.state.discard_pile[0:0] = extra
        return hand

    return trim
