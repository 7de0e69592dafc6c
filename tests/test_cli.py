"""Tests for the CLI and configuration."""

import io
import json
import logging

from typer.testing import CliRunner

from untable.cli import app
from untable.config import Settings, load_settings
from untable.logging_config import JSONFormatter, setup_logging

runner = CliRunner()


def test_simulate_command() -> None:
    result = runner.invoke(app, ["simulate", "--games", "2", "--seed", "3", "--max-turns", "300"])
    assert result.exit_code == 0, result.output
    assert "Simulation results:" in result.output
    assert "Seat 1:" in result.output


def test_play_rejects_unknown_opponents() -> None:
    result = runner.invoke(app, ["play", "--opponents", "robots", "--delay", "0"])
    assert result.exit_code != 0


def test_play_with_closed_stdin_finishes() -> None:
    # No input: the human always draws or passes, the game still runs to the end
    result = runner.invoke(app, ["play", "--seed", "1", "--delay", "0", "--no-sound"], input="")
    assert result.exit_code == 0, result.output
    assert "Turns:" in result.output


def test_settings_from_env(monkeypatch) -> None:
    monkeypatch.setenv("UNTABLE_SEED", "12")
    monkeypatch.setenv("UNTABLE_AI_DELAY", "0.1")
    monkeypatch.setenv("UNTABLE_LOG_LEVEL", "debug")
    monkeypatch.setenv("UNTABLE_LLM_MODEL", "llama3")
    settings = Settings.from_env()
    assert settings.seed == 12
    assert settings.ai_delay == 0.1
    assert settings.log_level == "DEBUG"
    assert settings.llm_model == "llama3"


def test_settings_defaults_on_bad_values(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("UNTABLE_SEED", "")
    monkeypatch.setenv("UNTABLE_AI_DELAY", "soon")
    settings = load_settings(str(tmp_path / "missing.env"))
    assert settings.seed is None
    assert settings.ai_delay == 0.8


def test_json_logging() -> None:
    stream = io.StringIO()
    setup_logging("INFO", "json", stream=stream)
    logging.getLogger("untable.test").info("dealt %d cards", 28)
    record = json.loads(stream.getvalue().strip())
    assert record["message"] == "dealt 28 cards"
    assert record["level"] == "INFO"
    assert isinstance(logging.getLogger().handlers[0].formatter, JSONFormatter)
