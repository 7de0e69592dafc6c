"""CLI entry point."""

from __future__ import annotations

from typing import Optional

import typer

from untable.config import load_settings

settings = load_settings()

app = typer.Typer(help="Four-player shedding card game: you against three computer opponents")

OPPONENT_NAMES = ("Alice", "Bob", "Charlie")


def _make_opponents(
    kind: str,
    llm_provider: str,
    llm_model: str,
    seed: Optional[int],
) -> dict[int, "AgentProtocol"]:
    from untable.agent.protocol import AgentProtocol
    from untable.agents.llm_agent import LLMAgent
    from untable.agents.scripted_agent import ScriptedAgent

    kind = kind.strip().lower()
    opponents: dict[int, AgentProtocol] = {}
    for seat, name in zip((2, 3, 4), OPPONENT_NAMES):
        agent_seed = None if seed is None else seed + seat
        if kind == "scripted":
            opponents[seat] = ScriptedAgent(name=name, seed=agent_seed)
        elif kind == "llm":
            try:
                opponents[seat] = LLMAgent(provider=llm_provider, model=llm_model, seed=agent_seed)
            except ValueError as e:
                raise typer.BadParameter(str(e)) from e
        else:
            raise typer.BadParameter(f"Unknown opponent type: {kind}. Use 'scripted' or 'llm'.")
    return opponents


@app.command()
def play(
    opponents: str = typer.Option(
        "scripted",
        "--opponents",
        "-o",
        help="Opponent type: scripted or llm",
    ),
    llm_provider: str = typer.Option(
        settings.llm_provider,
        "--llm-provider",
        "-p",
        help="LLM provider for llm opponents: openrouter, groq, ollama or huggingface",
    ),
    llm_model: str = typer.Option(
        settings.llm_model,
        "--llm-model",
        "-m",
        help="Model name (e.g. openai/gpt-4o-mini, meta-llama/llama-3-8b-instruct)",
    ),
    seed: Optional[int] = typer.Option(settings.seed, "--seed", "-s", help="Random seed"),
    delay: float = typer.Option(
        settings.ai_delay, "--delay", "-d", help="Seconds an opponent waits before acting"
    ),
    sound: bool = typer.Option(True, "--sound/--no-sound", help="Ring the terminal bell on skips and rejected plays"),
    log_level: str = typer.Option(settings.log_level, "--log-level", help="Logging level"),
) -> None:
    """Play a game against three computer opponents."""
    from untable.agents.human_agent import HumanAgent
    from untable.logging_config import setup_logging
    from untable.notifications import terminal_hooks
    from untable.orchestration.game_runner import GameRunner
    from untable.transcript import PLAYER_COLORS, Transcript

    setup_logging(log_level, settings.log_format)

    agents = {1: HumanAgent(name="You"), **_make_opponents(opponents, llm_provider, llm_model, seed)}
    transcript = Transcript({1: "You", 2: "Alice", 3: "Bob", 4: "Charlie"}, viewer=1)

    def echo_event(event) -> None:
        typer.secho(transcript.describe(event), fg=PLAYER_COLORS.get(event.player))

    runner = GameRunner(
        agents,
        seed=seed,
        hooks=terminal_hooks(sound),
        on_event=echo_event,
        ai_delay=delay,
    )
    result = runner.run()
    if result.winner is None:
        typer.echo(f"No winner after {result.num_turns} turns.")
    typer.echo(f"Turns: {result.num_turns}")


@app.command()
def simulate(
    games: int = typer.Option(100, "--games", "-g", help="Number of games"),
    seed: Optional[int] = typer.Option(settings.seed, "--seed", "-s", help="Random seed"),
    max_turns: int = typer.Option(1000, "--max-turns", help="Give up on a game after this many turns"),
    log_level: str = typer.Option(settings.log_level, "--log-level", help="Logging level"),
) -> None:
    """Run games between four scripted players and report wins per seat."""
    from untable.agents.scripted_agent import ScriptedAgent
    from untable.logging_config import setup_logging
    from untable.orchestration.tournament import run_tournament

    setup_logging(log_level, settings.log_format)

    agents = {
        seat: ScriptedAgent(name=f"Seat {seat}", seed=None if seed is None else seed + seat)
        for seat in (1, 2, 3, 4)
    }
    wins = run_tournament(agents, num_games=games, seed=seed, max_turns=max_turns)
    typer.echo("Simulation results:")
    for seat in sorted(agents):
        typer.echo(f"  Seat {seat}: {wins.get(seat, 0)} wins")
    typer.echo(f"  No winner: {games - sum(wins.values())}")


if __name__ == "__main__":
    app()
