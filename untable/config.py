"""
Configuration for the untable host.

Loaded from (in order of precedence):
1. Environment variables
2. .env file (if present)
3. Default values

Usage:
    from untable.config import load_settings
    settings = load_settings()
    print(settings.ai_delay)
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


def get_env(key: str, default: str = "") -> str:
    """Get environment variable with default."""
    return os.environ.get(key, default)


def get_env_float(key: str, default: float = 0.0) -> float:
    """Get float environment variable."""
    try:
        return float(os.environ.get(key, str(default)))
    except ValueError:
        return default


def get_env_optional_int(key: str) -> Optional[int]:
    """Get integer environment variable, None if unset or invalid."""
    try:
        return int(os.environ[key])
    except (KeyError, ValueError):
        return None


@dataclass
class Settings:
    """Host settings. The engine itself takes no configuration."""

    seed: Optional[int] = None
    ai_delay: float = 0.8  # seconds before an opponent acts
    log_level: str = "WARNING"
    log_format: str = "text"  # "text" or "json"
    llm_provider: str = "openrouter"
    llm_model: str = "openai/gpt-4o-mini"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            seed=get_env_optional_int("UNTABLE_SEED"),
            ai_delay=get_env_float("UNTABLE_AI_DELAY", 0.8),
            log_level=get_env("UNTABLE_LOG_LEVEL", "WARNING").upper(),
            log_format=get_env("UNTABLE_LOG_FORMAT", "text").lower(),
            llm_provider=get_env("UNTABLE_LLM_PROVIDER", "openrouter"),
            llm_model=get_env("UNTABLE_LLM_MODEL", "openai/gpt-4o-mini"),
        )


def load_settings(dotenv_path: Optional[str] = None) -> Settings:
    """Load .env (without overriding the real environment) and read settings."""
    load_dotenv(dotenv_path)
    return Settings.from_env()
