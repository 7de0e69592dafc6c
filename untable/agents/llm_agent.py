"""LLM opponent using the OpenAI library with OpenRouter, Groq, Ollama or Hugging Face."""

import json
import logging
import os
import re
import time
from typing import Any, Optional

from openai import OpenAI

from untable.agents.scripted_agent import ScriptedAgent
from untable.engine import Action, Color, DrawCard, PlayCard, PlayerView

logger = logging.getLogger(__name__)

OPENROUTER_BASE = "https://openrouter.ai/api/v1"
GROQ_BASE = "https://api.groq.com/openai/v1"
OLLAMA_BASE = "http://localhost:11434/v1"
HUGGINGFACE_BASE = "https://router.huggingface.co/v1"

MAX_ATTEMPTS = 3


def _format_player_view(pv: PlayerView) -> str:
    """Format player view as text for the LLM."""
    top = pv.top_discard
    lines = [
        "=== Your hand ===",
        ", ".join(str(c) for c in pv.my_hand),
        "",
        "=== Top card on discard ===",
        str(top) if top else "None",
        "",
        "=== Current color to match ===",
    ]
    if top is None:
        lines.append("any")
    elif top.is_wild:
        lines.append(pv.chosen_wild_color.label if pv.chosen_wild_color else "any")
    else:
        lines.append(top.color.label)
    lines.extend(["", "=== Other players' card counts ==="])
    for number, count in pv.num_cards_per_player.items():
        if number != pv.player_number:
            lines.append(f"  {pv.names[number]} (player {number}): {count} cards")
    lines.extend([
        "",
        "=== Direction ===",
        "clockwise" if pv.clockwise else "counter-clockwise",
        "",
        "=== Cards left in deck ===",
        str(pv.deck_count),
        "",
        "=== Game History (last 10 events) ===",
    ])
    if pv.history:
        lines.extend(f"- {h}" for h in pv.history)
    else:
        lines.append("No history yet.")
    return "\n".join(lines)


def _format_legal_actions(actions: list[Action]) -> str:
    """Format legal actions as text."""
    options = []
    for i, a in enumerate(actions):
        if isinstance(a, DrawCard):
            options.append(f"{i}: DRAW")
        else:
            options.append(f"{i}: PLAY {a.card}")
    return "\n".join(options)


def _pick(idx: int, actions: list[Action]) -> Action | None:
    if 0 <= idx < len(actions):
        return actions[idx]
    logger.debug("Index %d out of range (0-%d)", idx, len(actions) - 1)
    return None


def _parse_action_response(response: str, actions: list[Action]) -> Action | None:
    """Parse LLM response into an Action."""
    # 1. A JSON object, strict first, then with single quotes swapped
    json_match = re.search(r"(\{.*?\})", response, re.DOTALL)
    if json_match:
        json_str = json_match.group(1)
        for candidate in (json_str, json_str.replace("'", '"')):
            try:
                data = json.loads(candidate)
            except ValueError:
                continue
            if isinstance(data, dict) and isinstance(data.get("action_index"), int):
                action = _pick(data["action_index"], actions)
                if action is not None:
                    return action
            break

    # 2. "action_index": N with any quoting
    match = re.search(r"[\"']?action_index[\"']?\s*:\s*(\d+)", response, re.IGNORECASE)
    if match:
        action = _pick(int(match.group(1)), actions)
        if action is not None:
            return action

    # 3. "DRAW" literally
    if "DRAW" in response.upper():
        for a in actions:
            if isinstance(a, DrawCard):
                return a

    # 4. Last resort: a standalone number
    cleaned_response = re.sub(r"[{}\[\]\"'.,:]", " ", response)
    for word in cleaned_response.split():
        if word.isdigit():
            action = _pick(int(word), actions)
            if action is not None:
                return action

    return None


def _resolve_provider(provider: str, api_key: Optional[str]) -> tuple[str, Optional[str]]:
    if provider == "openrouter":
        return OPENROUTER_BASE, api_key or os.environ.get("OPENROUTER_API_KEY")
    if provider == "groq":
        return GROQ_BASE, api_key or os.environ.get("GROQ_API_KEY")
    if provider == "ollama":
        return os.environ.get("OLLAMA_BASE_URL", OLLAMA_BASE), "ollama"
    if provider == "huggingface":
        return HUGGINGFACE_BASE, api_key or os.environ.get("HUGGINGFACE_API_KEY")
    raise ValueError(f"Unknown provider: {provider}")


class LLMAgent:
    """Opponent that asks an LLM which card to play.

    Wild colors and the keep-or-play decision on a drawn card stay scripted.
    """

    def __init__(
        self,
        provider: str = "openrouter",
        model: str = "openai/gpt-4o-mini",
        api_key: Optional[str] = None,
        timeout: float = 30.0,
        rate_limit: Optional[float] = None,
        seed: Optional[int] = None,
        client: Any = None,
    ):
        if client is None:
            base_url, key = _resolve_provider(provider, api_key)
            if not key:
                raise ValueError(
                    f"API key required for {provider}. Set {provider.upper()}_API_KEY or pass api_key."
                )
            client = OpenAI(api_key=key, base_url=base_url)
            logger.info("%s: provider=%s base_url=%s timeout=%ss", model, provider, base_url, timeout)

        self._client = client
        self._model = model
        self._timeout = timeout
        self._provider = provider
        self._rate_limit = rate_limit  # Requests per minute
        self._request_history: list[float] = []
        self._fallback = ScriptedAgent(name=self.name, seed=seed)

    @property
    def name(self) -> str:
        return f"llm-{self._model}"

    @property
    def is_human(self) -> bool:
        return False

    def _wait_for_rate_limit(self) -> None:
        """Block if rate limit is exceeded."""
        if not self._rate_limit:
            return

        now = time.time()
        self._request_history = [t for t in self._request_history if now - t < 60.0]

        if len(self._request_history) >= self._rate_limit:
            # Wait until the oldest request in the window expires
            wait_time = 60.0 - (now - self._request_history[0])
            if wait_time > 0:
                logger.info("%s: rate limit reached, waiting %.2fs", self.name, wait_time)
                time.sleep(wait_time)

        self._request_history.append(time.time())

    def get_action(
        self,
        player_view: PlayerView,
        legal_actions: list[Action],
        player_number: int,
    ) -> Action | None:
        if not legal_actions:
            return None
        plays = [a for a in legal_actions if isinstance(a, PlayCard)]
        if not plays or player_view.just_drawn_card is not None:
            return self._fallback.get_action(player_view, legal_actions, player_number)

        prompt = f"""You are playing a shedding card game with three opponents.
Objective: be the first to empty your hand. Match the top discard card by color (Red, Blue, Green, Yellow), number, or action (Skip, Reverse, DrawTwo). Wild cards can be played on anything.

{_format_player_view(player_view)}

=== Legal actions ===
{_format_legal_actions(legal_actions)}

INSTRUCTIONS:
Select the best action to win the game.
Respond with a JSON object containing the index of your chosen action.
Example: {{"action_index": 0}}
"""

        for attempt in range(1, MAX_ATTEMPTS + 1):
            start_time = time.time()
            try:
                self._wait_for_rate_limit()

                kwargs: dict[str, Any] = {
                    "model": self._model,
                    "messages": [{"role": "user", "content": prompt}],
                    "timeout": self._timeout,
                }
                # Only ask for JSON mode where the provider is known to support it
                if "gpt-4" in self._model or "gpt-3.5" in self._model or self._provider == "groq":
                    kwargs["response_format"] = {"type": "json_object"}

                resp = self._client.chat.completions.create(**kwargs)
                content = resp.choices[0].message.content or ""
                logger.debug("%s: response in %.2fs", self.name, time.time() - start_time)

                action = _parse_action_response(content, legal_actions)
                if action is not None:
                    return action
                logger.warning("%s: could not parse action from response: %r", self.name, content)
            except Exception as e:
                logger.warning(
                    "%s: attempt %d failed after %.2fs: %s: %s",
                    self.name,
                    attempt,
                    time.time() - start_time,
                    type(e).__name__,
                    e,
                )

        logger.warning("%s: all retries failed, using scripted choice", self.name)
        return self._fallback.get_action(player_view, legal_actions, player_number)

    def choose_color(self, player_view: PlayerView) -> Color:
        return self._fallback.choose_color(player_view)
