"""Unit tests for the legal-play validator and legal actions."""

import pytest

from untable.engine import (
    Card,
    CardType,
    Color,
    DrawCard,
    PlayCard,
    can_play,
    effect_of,
    get_legal_actions,
    next_player,
)
from untable.engine.errors import InvalidPlayerError

R = Color.RED
B = Color.BLUE
G = Color.GREEN


def num(color: Color, rank: int) -> Card:
    return Card(CardType.NUMBER, color, rank)


WILD = Card(CardType.WILD)
DRAW_FOUR = Card(CardType.DRAW_FOUR)


@pytest.mark.parametrize(
    "candidate, top, chosen, expected",
    [
        # Wilds always
        (WILD, num(R, 7), None, True),
        (DRAW_FOUR, Card(CardType.SKIP, B), None, True),
        (DRAW_FOUR, WILD, G, True),
        # Wild on top with a chosen color
        (num(G, 3), WILD, G, True),
        (Card(CardType.SKIP, G), DRAW_FOUR, G, True),
        (num(R, 3), WILD, G, False),
        # Color
        (num(R, 2), num(R, 9), None, True),
        (Card(CardType.REVERSE, R), num(R, 9), None, True),
        # Rank
        (num(B, 9), num(R, 9), None, True),
        (num(B, 8), num(R, 9), None, False),
        # Action type
        (Card(CardType.SKIP, B), Card(CardType.SKIP, R), None, True),
        (Card(CardType.REVERSE, B), Card(CardType.REVERSE, R), None, True),
        (Card(CardType.DRAW_TWO, B), Card(CardType.DRAW_TWO, R), None, True),
        (Card(CardType.SKIP, B), Card(CardType.REVERSE, R), None, False),
        (Card(CardType.SKIP, B), num(R, 1), None, False),
    ],
)
def test_can_play(candidate: Card, top: Card, chosen, expected: bool) -> None:
    assert can_play(candidate, top, chosen) is expected


def test_chosen_color_only_applies_to_wild_top() -> None:
    # A stale chosen color never overrides a colored top
    assert can_play(num(G, 1), num(R, 5), G) is False
    assert can_play(num(R, 1), num(R, 5), G) is True


def test_wild_top_without_chosen_color_falls_through() -> None:
    # No negotiated color: nothing colored matches a colorless wild
    assert can_play(num(R, 1), WILD, None) is False
    assert can_play(WILD, WILD, None) is True


def test_can_play_is_pure() -> None:
    candidate, top = num(B, 4), num(R, 4)
    before = (candidate, top)
    results = {can_play(candidate, top, None) for _ in range(5)}
    assert results == {True}
    assert (candidate, top) == before


def test_effect_of() -> None:
    assert effect_of(Card(CardType.SKIP, R)) == CardType.SKIP
    assert effect_of(Card(CardType.DRAW_TWO, R)) == CardType.DRAW_TWO
    assert effect_of(DRAW_FOUR) == CardType.DRAW_FOUR
    assert effect_of(Card(CardType.REVERSE, R)) is None
    assert effect_of(WILD) is None
    assert effect_of(num(R, 1)) is None


@pytest.mark.parametrize("clockwise", [True, False])
@pytest.mark.parametrize("start", [1, 2, 3, 4])
def test_turn_ring_closes_after_four_steps(start: int, clockwise: bool) -> None:
    seen = []
    current = start
    for _ in range(4):
        current = next_player(current, clockwise)
        seen.append(current)
    assert current == start
    assert sorted(seen) == [1, 2, 3, 4]


def test_ring_adjacency() -> None:
    assert [next_player(p, True) for p in (1, 4, 2, 3)] == [4, 2, 3, 1]
    assert [next_player(p, False) for p in (1, 3, 2, 4)] == [3, 2, 4, 1]


def test_next_player_rejects_unknown_seat() -> None:
    with pytest.raises(InvalidPlayerError):
        next_player(5, True)


def test_get_legal_actions(rigged) -> None:
    engine = rigged(hands={1: [(CardType.NUMBER, B, 7), (CardType.NUMBER, R, 2), (CardType.WILD, None, None)]})
    hand = engine.state.get_player_hand(1)
    actions = get_legal_actions(engine.state, 1)
    assert actions == [PlayCard(hand[0]), PlayCard(hand[1]), PlayCard(hand[2]), DrawCard()]
    assert get_legal_actions(engine.state, 2) == []


def test_get_legal_actions_with_drawn_card(rigged) -> None:
    engine = rigged(
        hands={1: [(CardType.NUMBER, R, 2)]},
        draws=[(CardType.NUMBER, R, 3)],
    )
    engine.draw(1)
    drawn = engine.state.just_drawn_card
    assert get_legal_actions(engine.state, 1) == [PlayCard(drawn), DrawCard()]


def test_get_legal_actions_after_game_over(rigged) -> None:
    engine = rigged()
    engine.state.game_over = True
    assert get_legal_actions(engine.state, 1) == []
