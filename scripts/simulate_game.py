"""Simulate a game between four scripted players and print the transcript."""

from untable.agents.scripted_agent import ScriptedAgent
from untable.orchestration.game_runner import GameRunner
from untable.transcript import Transcript


def main():
    names = ("Dana", "Alice", "Bob", "Charlie")
    agents = {seat: ScriptedAgent(name, seed=seat) for seat, name in enumerate(names, start=1)}
    transcript = Transcript(dict(enumerate(names, start=1)), viewer=1)

    runner = GameRunner(
        agents,
        seed=42,
        names=names,
        on_event=lambda event: print(f"> {transcript.describe(event)}"),
    )
    result = runner.run()

    print(f"Game finished! Winner: {result.winner_name}")
    print(f"Turns: {result.num_turns}")
    print(f"Cards left in deck: {runner.engine.deck_count}")


if __name__ == "__main__":
    main()
