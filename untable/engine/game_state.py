"""Game state for the four-seat table."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from untable.engine.card import Card, Color
from untable.engine.errors import InvalidPlayerError
from untable.engine.player import Player

PLAYER_NUMBERS = (1, 2, 3, 4)
DEFAULT_NAMES = ("You", "Alice", "Bob", "Charlie")
HUMAN_PLAYER = 1

# Seating around the table: 1 bottom, 4 right, 2 top, 3 left
CLOCKWISE_NEXT = {1: 4, 4: 2, 2: 3, 3: 1}
COUNTER_CLOCKWISE_NEXT = {1: 3, 3: 2, 2: 4, 4: 1}


def next_player(current: int, clockwise: bool) -> int:
    """Return the seat after current in the given direction."""
    ring = CLOCKWISE_NEXT if clockwise else COUNTER_CLOCKWISE_NEXT
    try:
        return ring[current]
    except KeyError:
        raise InvalidPlayerError(current) from None


def make_players(names=DEFAULT_NAMES, human_players=(HUMAN_PLAYER,)) -> List[Player]:
    if len(names) != len(PLAYER_NUMBERS):
        raise ValueError(f"Exactly {len(PLAYER_NUMBERS)} names required, got {len(names)}")
    return [
        Player(number=n, name=name, is_human=n in human_players)
        for n, name in zip(PLAYER_NUMBERS, names)
    ]


@dataclass
class GameState:
    """Authoritative table state. Mutated only by GameEngine."""

    players: List[Player] = field(default_factory=make_players)
    discard_pile: List[Card] = field(default_factory=list)  # top is last
    current_player: int = 1
    clockwise: bool = True
    chosen_wild_color: Optional[Color] = None
    just_drawn_card: Optional[Card] = None  # only card playable after a draw
    game_over: bool = False
    winner: Optional[int] = None
    generation: int = 0  # bumped per new game; stale continuations compare against it

    def get_player(self, player_number: int) -> Player:
        if player_number not in PLAYER_NUMBERS:
            raise InvalidPlayerError(player_number)
        return self.players[player_number - 1]

    def get_player_hand(self, player_number: int) -> List[Card]:
        return self.get_player(player_number).hand

    def get_player_name(self, player_number: int) -> str:
        return self.get_player(player_number).name

    def top_discard(self) -> Optional[Card]:
        """Return the top card on the discard pile."""
        return self.discard_pile[-1] if self.discard_pile else None

    def check_for_winner(self) -> Optional[int]:
        """Return the first player (1-4 order) with an empty hand, if any."""
        for player in self.players:
            if player.has_won:
                return player.number
        return None

    def is_game_in_progress(self) -> bool:
        return any(p.hand for p in self.players) or bool(self.discard_pile)

    def advance_to_next_player(self) -> None:
        self.current_player = next_player(self.current_player, self.clockwise)

    def cards_in_play(self) -> int:
        """Cards held in hands plus the discard pile."""
        return sum(p.card_count for p in self.players) + len(self.discard_pile)


@dataclass
class PlayerView:
    """Filtered game state visible to a single player.

    Contains only that player's hand and public info.
    """

    player_number: int
    my_hand: List[Card]
    top_discard: Optional[Card]
    chosen_wild_color: Optional[Color]
    current_player: int
    clockwise: bool
    deck_count: int
    just_drawn_card: Optional[Card]
    game_over: bool
    winner: Optional[int]
    names: Dict[int, str]
    num_cards_per_player: Dict[int, int]  # player number -> count
    history: List[str]  # Recent game events

    @classmethod
    def from_state(
        cls,
        state: GameState,
        player_number: int,
        deck_count: int = 0,
        history: Optional[List[str]] = None,
    ) -> "PlayerView":
        """Create a player view from full game state, hiding other players' hands."""
        player = state.get_player(player_number)
        return cls(
            player_number=player_number,
            my_hand=list(player.hand),
            top_discard=state.top_discard(),
            chosen_wild_color=state.chosen_wild_color,
            current_player=state.current_player,
            clockwise=state.clockwise,
            deck_count=deck_count,
            just_drawn_card=(
                state.just_drawn_card if state.current_player == player_number else None
            ),
            game_over=state.game_over,
            winner=state.winner,
            names={p.number: p.name for p in state.players},
            num_cards_per_player={p.number: p.card_count for p in state.players},
            history=list(history or []),
        )
