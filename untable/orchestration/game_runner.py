"""Single game runner."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Mapping, Optional

from untable.engine import (
    Color,
    DrawCard,
    DrawResult,
    GameEngine,
    GameEvent,
    PlayCard,
    get_legal_actions,
)
from untable.engine.game_state import DEFAULT_NAMES, HUMAN_PLAYER, PLAYER_NUMBERS
from untable.notifications import NotificationHooks

if TYPE_CHECKING:
    from untable.agent.protocol import AgentProtocol

logger = logging.getLogger(__name__)


@dataclass
class GameResult:
    """Result of a completed game."""

    winner: Optional[int]
    winner_name: Optional[str]
    num_turns: int
    player_names: tuple[str, ...]


class GameRunner:
    """Runs a single game to completion.

    One turn is in flight at a time. Opponent turns may wait ai_delay seconds
    first; a turn whose game was replaced in the meantime is abandoned.
    """

    def __init__(
        self,
        agents: Mapping[int, "AgentProtocol"],
        seed: Optional[int] = None,
        names: tuple[str, ...] = DEFAULT_NAMES,
        hooks: Optional[NotificationHooks] = None,
        on_event: Optional[Callable[[GameEvent], None]] = None,
        ai_delay: float = 0.0,
        max_turns: int = 1000,
        sleep: Callable[[float], None] = time.sleep,
    ):
        missing = [n for n in PLAYER_NUMBERS if n not in agents]
        if missing:
            raise ValueError(f"No agent for player(s) {missing}")
        self._agents = dict(agents)
        humans = tuple(n for n, a in self._agents.items() if a.is_human)
        self._engine = GameEngine(seed=seed, names=names, human_players=humans)
        self._hooks = hooks or NotificationHooks()
        self._hooks.attach(self._engine.log)
        if on_event is not None:
            self._engine.log.subscribe(on_event)
        self._ai_delay = ai_delay
        self._max_turns = max_turns
        self._sleep = sleep

    @property
    def engine(self) -> GameEngine:
        return self._engine

    def _chooser_for(self, player_number: int) -> Callable[[], Color]:
        agent = self._agents[player_number]
        return lambda: agent.choose_color(self._engine.view_for(player_number))

    def start(self) -> None:
        """Start a fresh game. Any turn still pending for the old game goes stale."""
        self._engine.new_game(color_chooser=self._chooser_for(HUMAN_PLAYER))

    def run(self) -> GameResult:
        """Run the game and return the result."""
        self.start()
        num_turns = 0

        # Re-read the state each turn: start() may replace the game mid-run
        while not self._engine.state.game_over and num_turns < self._max_turns:
            self.take_turn(self._engine.state.current_player)
            num_turns += 1

        state = self._engine.state
        if not state.game_over:
            logger.warning("Game stopped after %d turns without a winner", num_turns)

        names = tuple(p.name for p in state.players)
        return GameResult(
            winner=state.winner,
            winner_name=names[state.winner - 1] if state.winner else None,
            num_turns=num_turns,
            player_names=names,
        )

    def take_turn(self, player_number: int) -> None:
        """Let the agent in this seat act until the turn passes to someone else."""
        engine = self._engine
        agent = self._agents[player_number]
        generation = engine.generation
        chooser = self._chooser_for(player_number)

        while True:
            state = engine.state
            if (
                not engine.is_current(generation)
                or state.game_over
                or state.current_player != player_number
            ):
                return

            if not agent.is_human and self._ai_delay > 0:
                self._sleep(self._ai_delay)
                if not engine.is_current(generation):
                    logger.info("Dropping turn for player %d: game was replaced", player_number)
                    return

            legal = get_legal_actions(state, player_number)
            action = agent.get_action(engine.view_for(player_number), legal, player_number)
            if action is None:
                action = DrawCard()

            if isinstance(action, PlayCard):
                if engine.play_turn(player_number, action.card, chooser):
                    continue
                self._hooks.play_rejected()
                if agent.is_human:
                    continue
                logger.warning("%s made an illegal play (%s), drawing instead", agent.name, action.card)

            if engine.draw(player_number) == DrawResult.EMPTY_DECK:
                # Nothing to draw: the turn passes
                engine.pass_turn(player_number)
