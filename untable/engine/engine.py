"""Game engine: deals, validates and commits plays, advances turns."""

import logging
import random
from enum import Enum
from typing import List, Optional, Sequence

from untable.engine.card import Card, CardType, Color
from untable.engine.deck import Deck
from untable.engine.events import EventKind, EventLog, GameEvent
from untable.engine.game_state import (
    DEFAULT_NAMES,
    HUMAN_PLAYER,
    GameState,
    PlayerView,
    make_players,
)
from untable.engine.rules import ColorChooser, can_play, effect_of

logger = logging.getLogger(__name__)

HAND_SIZE = 7
FORCED_DRAWS = {CardType.DRAW_TWO: 2, CardType.DRAW_FOUR: 4}


class DrawResult(str, Enum):
    """Outcome of a draw request."""

    IGNORED = "ignored"  # game over or not this player's turn
    EMPTY_DECK = "empty_deck"  # nothing to draw, state unchanged
    PASSED = "passed"  # a drawn card was already held, turn passed
    PLAYABLE = "playable"  # drawn card is legal, turn stays open
    UNPLAYABLE = "unplayable"  # drawn card is illegal, turn passed


class GameEngine:
    """Central game coordinator. Owns the GameState, the Deck and the EventLog.

    Not safe for concurrent use: the host serializes every call.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        names: Sequence[str] = DEFAULT_NAMES,
        human_players: Sequence[int] = (HUMAN_PLAYER,),
    ):
        self._rng = random.Random(seed)
        self._names = tuple(names)
        self._human_players = tuple(human_players)
        self._generation = 0
        self.log = EventLog()
        self.deck = Deck(rng=self._rng)
        self.state = GameState(players=make_players(self._names, self._human_players))

    @property
    def deck_count(self) -> int:
        return self.deck.count

    @property
    def generation(self) -> int:
        return self.state.generation

    def is_current(self, generation: int) -> bool:
        """False once a newer game has replaced the one generation refers to."""
        return self.state.generation == generation

    def new_game(
        self,
        color_chooser: Optional[ColorChooser] = None,
        deck: Optional[Deck] = None,
    ) -> GameState:
        """Replace the state wholesale, deal 7 cards each and flip a starting card.

        If the starting card is wild, color_chooser (the human's) picks its color.
        """
        self._generation += 1
        self.deck = deck if deck is not None else Deck(rng=self._rng)
        self.state = GameState(
            players=make_players(self._names, self._human_players),
            generation=self._generation,
        )
        self.log.clear()

        first_card = self.deal_new_game()
        if first_card is not None:
            self.state.discard_pile.append(first_card)
            if first_card.is_wild:
                self._resolve_color(
                    HUMAN_PLAYER, self._choose(color_chooser), detail="for the starting card"
                )

        logger.info(
            "New game %d: starting card %s, %d cards left in deck",
            self._generation,
            first_card,
            self.deck_count,
        )
        return self.state

    def draw_card(self) -> Optional[Card]:
        """Draw a card from the deck, or None if it is empty."""
        return self.deck.draw()

    def deal_new_game(self) -> Optional[Card]:
        """Deal 7 cards to each player and return the card for the discard pile."""
        for _ in range(HAND_SIZE):
            for player in self.state.players:
                card = self.draw_card()
                if card is not None:
                    player.add_card(card)
        return self.draw_card()

    def can_play_card(self, card: Card, top: Card) -> bool:
        return can_play(card, top, self.state.chosen_wild_color)

    def try_play_card(
        self,
        player_number: int,
        card: Card,
        color_chooser: Optional[ColorChooser] = None,
    ) -> bool:
        """Validate and commit a play. Returns False (state untouched) if not allowed.

        Turn advancement is left to the caller (see play_turn).
        """
        player = self.state.get_player(player_number)
        if not player.has_card(card):
            logger.debug("Player %d does not hold %s", player_number, card)
            return False

        top = self.state.top_discard()
        # No discard pile card yet: any card is accepted
        if top is not None and not self.can_play_card(card, top):
            logger.debug("Player %d cannot play %s on %s", player_number, card, top)
            return False

        # Ask for the color before touching state so a failing chooser leaves nothing half-done
        color = self._choose(color_chooser) if card.is_wild else None

        player.remove_card(card)
        self.state.discard_pile.append(card)
        self._emit(EventKind.PLAYED, player_number, card=card)

        if player.card_count == 1:
            self._emit(EventKind.UN_DECLARED, player_number)

        if card.is_wild:
            self._resolve_color(player_number, color)
        else:
            self.state.chosen_wild_color = None

        if card.type == CardType.REVERSE:
            self.state.clockwise = not self.state.clockwise

        logger.debug("Player %d played %s", player_number, card)
        return True

    def advance_turn(self, effect: Optional[CardType] = None) -> None:
        """Move to the next player, then apply the effect of the card just played.

        DrawTwo/DrawFour: the next player draws and is skipped.
        Skip: the next player is skipped. Any other value: plain advance.
        """
        if self.state.game_over:
            return

        self.state.just_drawn_card = None
        self.state.advance_to_next_player()
        target = self.state.current_player

        if effect in FORCED_DRAWS:
            drawn = self._give_cards(target, FORCED_DRAWS[effect])
            self._emit(
                EventKind.DREW_MULTIPLE,
                target,
                cards=tuple(drawn),
                count=len(drawn),
                detail="and was skipped",
            )
            self.state.advance_to_next_player()
        elif effect == CardType.SKIP:
            self._emit(EventKind.SKIPPED, target)
            self.state.advance_to_next_player()

    def draw(self, player_number: int) -> DrawResult:
        """Handle a draw request from the current player."""
        player = self.state.get_player(player_number)
        if self.state.game_over or self.state.current_player != player_number:
            return DrawResult.IGNORED

        # Drawing again after a draw passes the turn
        if self.state.just_drawn_card is not None:
            self.pass_turn(player_number)
            return DrawResult.PASSED

        card = self.draw_card()
        if card is None:
            logger.debug("Deck empty, player %d draws nothing", player_number)
            return DrawResult.EMPTY_DECK

        player.add_card(card)
        self.state.just_drawn_card = card
        self._emit(EventKind.DREW, player_number, cards=(card,), count=1)

        top = self.state.top_discard()
        if top is not None and not self.can_play_card(card, top):
            # Nothing the player could do with it: pass automatically
            self.state.just_drawn_card = None
            self.advance_turn()
            return DrawResult.UNPLAYABLE
        return DrawResult.PLAYABLE

    def pass_turn(self, player_number: int) -> bool:
        """End the current player's turn without playing."""
        self.state.get_player(player_number)
        if self.state.game_over or self.state.current_player != player_number:
            return False
        self.state.just_drawn_card = None
        self.advance_turn()
        return True

    def play_turn(
        self,
        player_number: int,
        card: Card,
        color_chooser: Optional[ColorChooser] = None,
    ) -> bool:
        """Play a card as the current player and finish the turn.

        Enforces the drawn-card lock, detects the winner and advances the
        turn with the card's effect. Returns False if the play was rejected.
        """
        player = self.state.get_player(player_number)
        if self.state.game_over or self.state.current_player != player_number:
            return False

        locked = self.state.just_drawn_card
        if locked is not None and card != locked:
            return False

        if not self.try_play_card(player_number, card, color_chooser):
            return False

        self.state.just_drawn_card = None
        if not player.hand:
            self.check_for_winner()
            return True

        self.advance_turn(effect_of(card))
        return True

    def check_for_winner(self) -> Optional[int]:
        """Return the winning player number and end the game, or None."""
        if not self.state.is_game_in_progress():
            return None
        winner = self.state.check_for_winner()
        if winner is not None and not self.state.game_over:
            self.state.game_over = True
            self.state.winner = winner
            self._emit(EventKind.WON, winner)
            logger.info("Player %d won game %d", winner, self.state.generation)
        return winner

    def view_for(self, player_number: int) -> PlayerView:
        return PlayerView.from_state(
            self.state,
            player_number,
            deck_count=self.deck_count,
            history=[str(e) for e in self.log.recent(10)],
        )

    def total_cards(self) -> int:
        """Cards in deck, hands and discard pile. Always 108."""
        return self.deck_count + self.state.cards_in_play()

    def _choose(self, color_chooser: Optional[ColorChooser]) -> Color:
        if color_chooser is None:
            logger.warning("No color chooser supplied, defaulting to red")
            return Color.RED
        color = color_chooser()
        return Color(color) if color is not None else Color.RED

    def _resolve_color(self, player_number: int, color: Color, detail: str = "") -> None:
        self.state.chosen_wild_color = color
        self._emit(EventKind.COLOR_CHOSEN, player_number, color=color, detail=detail)

    def _give_cards(self, player_number: int, count: int) -> List[Card]:
        player = self.state.get_player(player_number)
        drawn = []
        for _ in range(count):
            card = self.draw_card()
            if card is not None:
                player.add_card(card)
                drawn.append(card)
        return drawn

    def _emit(self, kind: EventKind, player_number: int, **fields) -> None:
        self.log.append(GameEvent(kind=kind, player=player_number, **fields))
