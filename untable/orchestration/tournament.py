"""Tournament - run many games and aggregate results."""

import random
from collections import defaultdict
from typing import Any, Mapping

from untable.orchestration.game_runner import GameRunner


def run_tournament(
    agents: Mapping[int, Any],
    num_games: int = 100,
    seed: int | None = None,
    max_turns: int = 1000,
) -> dict[int, int]:
    """Run num_games games between the same four agents.

    Seating is mirrored every other game so no agent keeps the same
    neighbours throughout. Games that hit max_turns count for nobody.

    Returns:
        Dict mapping each agent's home seat to number of wins.
    """
    seats = sorted(agents)
    wins: dict[int, int] = defaultdict(int)

    rng = random.Random(seed)
    for g in range(num_games):
        order = seats if g % 2 == 0 else list(reversed(seats))
        # seat -> home seat of the agent sitting there
        seating = dict(zip(seats, order))
        runner = GameRunner(
            {seat: agents[origin] for seat, origin in seating.items()},
            seed=rng.randint(0, 2**31 - 1),
            max_turns=max_turns,
        )
        result = runner.run()
        if result.winner:
            wins[seating[result.winner]] += 1

    return dict(wins)
