"""Agent protocol - interface that human, scripted and LLM agents implement."""

from typing import Protocol

from untable.engine import Action, Color, PlayerView


class AgentProtocol(Protocol):
    """Interface for agents occupying a seat."""

    @property
    def name(self) -> str:
        """Display name for the agent."""
        ...

    @property
    def is_human(self) -> bool:
        """Whether a person is behind this agent (gets the interactive host treatment)."""
        ...

    def get_action(
        self,
        player_view: PlayerView,
        legal_actions: list[Action],
        player_number: int,
    ) -> Action | None:
        """Choose an action given the player view and legal actions.

        Args:
            player_view: Filtered view with only this player's hand and public info.
            legal_actions: List of valid actions to choose from.
            player_number: This agent's seat (1-4).

        Returns:
            An action, or None to draw. Human agents may return a play that
            is not in legal_actions; the engine rejects it.
        """
        ...

    def choose_color(self, player_view: PlayerView) -> Color:
        """Pick the color for a wild card this agent just played."""
        ...
