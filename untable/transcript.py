"""Human-readable game transcript built from engine events."""

import random
from typing import Mapping, Optional

from untable.engine import EventKind, GameEvent

# Second person for "You", third person for everyone else
UN_PHRASES_YOU = (
    "shout UN at the top of your lungs!",
    "scream UN like your life depends on it!",
    "bellow UN with the fury of a thousand suns!",
    "yell UN so loud the neighbors complain!",
    "triumphantly declare UN with a fist pump!",
    "whisper UN... just kidding, SCREAM IT!",
    "howl UN like a wolf at the moon!",
    "proclaim UN with dramatic flair!",
    "shriek UN and do a little victory dance!",
    "announce UN as if winning an Oscar!",
)
UN_PHRASES_OTHER = (
    "shouts UN at the top of their lungs!",
    "screams UN like their life depends on it!",
    "bellows UN with the fury of a thousand suns!",
    "yells UN so loud the neighbors complain!",
    "triumphantly declares UN with a fist pump!",
    "whispers UN... just kidding, SCREAMS IT!",
    "howls UN like a wolf at the moon!",
    "proclaims UN with dramatic flair!",
    "shrieks UN and does a little victory dance!",
    "announces UN as if winning an Oscar!",
)

# Terminal colors per seat
PLAYER_COLORS = {1: "blue", 2: "red", 3: "green", 4: "magenta"}


class Transcript:
    """Formats events into log lines.

    Cards drawn by the viewer are shown; opponents' draws are hidden.
    """

    def __init__(self, names: Mapping[int, str], viewer: int = 1, rng: Optional[random.Random] = None):
        self._names = dict(names)
        self._viewer = viewer
        self._rng = rng or random.Random()

    def _is_you(self, player: int) -> bool:
        return self._names.get(player, "").lower() == "you"

    def describe(self, event: GameEvent) -> str:
        name = self._names.get(event.player, f"Player {event.player}")
        you = self._is_you(event.player)
        shown = event.player == self._viewer

        if event.kind == EventKind.PLAYED:
            return f"{name} played {event.card}"
        if event.kind == EventKind.DREW:
            if shown and event.cards:
                return f"{name} drew {event.cards[0]}"
            return f"{name} drew a card"
        if event.kind == EventKind.DREW_MULTIPLE:
            plural = "s" if event.count != 1 else ""
            text = f"{name} drew {event.count} card{plural}"
            if shown and event.cards:
                text += " (" + ", ".join(str(c) for c in event.cards) + ")"
            if event.detail:
                verb = "were" if you else "was"
                text += " " + event.detail.replace("was", verb, 1) + "!"
            return text
        if event.kind == EventKind.COLOR_CHOSEN:
            text = f"{name} chose {event.color.label}"
            return f"{text} {event.detail}" if event.detail else text
        if event.kind == EventKind.UN_DECLARED:
            phrases = UN_PHRASES_YOU if you else UN_PHRASES_OTHER
            return f"{name} {self._rng.choice(phrases)}"
        if event.kind == EventKind.SKIPPED:
            return f"{name} {'were' if you else 'was'} skipped!"
        return f"🎉 {name} won the game! 🎉"
