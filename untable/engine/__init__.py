"""Game engine for the four-player shedding card game."""

from untable.engine.card import Card, CardType, Color
from untable.engine.deck import DECK_SIZE, Deck, build_cards
from untable.engine.engine import DrawResult, GameEngine
from untable.engine.errors import InvalidPlayerError, UntableError
from untable.engine.events import EventKind, EventLog, GameEvent
from untable.engine.game_state import GameState, PlayerView, next_player
from untable.engine.player import Player
from untable.engine.rules import (
    Action,
    ColorChooser,
    DrawCard,
    PlayCard,
    can_play,
    effect_of,
    get_legal_actions,
    playable_cards,
)

__all__ = [
    "Card",
    "CardType",
    "Color",
    "DECK_SIZE",
    "Deck",
    "build_cards",
    "DrawResult",
    "GameEngine",
    "InvalidPlayerError",
    "UntableError",
    "EventKind",
    "EventLog",
    "GameEvent",
    "GameState",
    "PlayerView",
    "next_player",
    "Player",
    "Action",
    "ColorChooser",
    "DrawCard",
    "PlayCard",
    "can_play",
    "effect_of",
    "get_legal_actions",
    "playable_cards",
]
