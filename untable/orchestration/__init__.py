"""Game orchestration."""

from untable.orchestration.game_runner import GameResult, GameRunner
from untable.orchestration.tournament import run_tournament

__all__ = ["GameResult", "GameRunner", "run_tournament"]
