"""Rules: legal-play validation and legal actions."""

from dataclasses import dataclass
from typing import Callable, List, Optional, Union

from untable.engine.card import ACTION_TYPES, EFFECT_TYPES, Card, CardType, Color
from untable.engine.game_state import GameState

ColorChooser = Callable[[], Color]


@dataclass(frozen=True)
class PlayCard:
    """Action: play a card from hand."""

    card: Card


@dataclass(frozen=True)
class DrawCard:
    """Action: draw a card, or pass when a drawn card is already held."""

    pass


Action = Union[PlayCard, DrawCard]


def can_play(card: Card, top: Card, chosen_wild_color: Optional[Color]) -> bool:
    """Check if card may be placed on top. Pure: depends only on its arguments."""
    # Wild can always be played
    if card.is_wild:
        return True
    # A wild on top with a negotiated color only accepts that color
    if top.is_wild and chosen_wild_color is not None:
        return card.color == chosen_wild_color
    # Match by color
    if card.color == top.color:
        return True
    # Number cards match by rank
    if card.type == CardType.NUMBER and top.type == CardType.NUMBER:
        return card.rank == top.rank
    # Action cards match by type (Skip on Skip, etc.)
    return card.type == top.type and card.type in ACTION_TYPES


def effect_of(card: Card) -> Optional[CardType]:
    """Turn effect the card has on the next player, if any."""
    return card.type if card.type in EFFECT_TYPES else None


def playable_cards(state: GameState, player_number: int) -> List[Card]:
    """Cards in the player's hand that are legal on the current top."""
    hand = state.get_player_hand(player_number)
    top = state.top_discard()
    if top is None:
        return list(hand)
    return [c for c in hand if can_play(c, top, state.chosen_wild_color)]


def get_legal_actions(state: GameState, player_number: int) -> List[Action]:
    """Return all legal actions for the player."""
    state.get_player(player_number)
    if state.game_over or state.current_player != player_number:
        return []

    locked = state.just_drawn_card
    if locked is not None:
        # After drawing, only the drawn card may be played; DrawCard passes
        top = state.top_discard()
        if top is None or can_play(locked, top, state.chosen_wild_color):
            return [PlayCard(card=locked), DrawCard()]
        return [DrawCard()]

    actions: List[Action] = [PlayCard(card=c) for c in playable_cards(state, player_number)]
    # Can always draw if we have no play or choose to
    actions.append(DrawCard())
    return actions
