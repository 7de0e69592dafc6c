"""Sound/notification hooks driven by game events.

Hooks are best effort: a hook that raises is logged and ignored so it can
never affect game state or control flow.
"""

import logging
import sys
from typing import Callable, Optional

from untable.engine import EventKind, EventLog, GameEvent

logger = logging.getLogger(__name__)

Hook = Callable[[], None]


class NotificationHooks:
    """Fires one hook per successful play, illegal-play rejection and skip."""

    def __init__(
        self,
        on_card_played: Optional[Hook] = None,
        on_play_rejected: Optional[Hook] = None,
        on_skipped: Optional[Hook] = None,
    ):
        self._hooks = {
            "card_played": on_card_played,
            "play_rejected": on_play_rejected,
            "skipped": on_skipped,
        }

    def attach(self, log: EventLog) -> Callable[[], None]:
        """Subscribe to the event log. Returns the unsubscribe function."""
        return log.subscribe(self.handle_event)

    def handle_event(self, event: GameEvent) -> None:
        if event.kind == EventKind.PLAYED:
            self.card_played()
        elif event.kind == EventKind.SKIPPED:
            self.skipped()

    def card_played(self) -> None:
        self._fire("card_played")

    def play_rejected(self) -> None:
        # Rejections leave no event behind, so the host calls this directly
        self._fire("play_rejected")

    def skipped(self) -> None:
        self._fire("skipped")

    def _fire(self, name: str) -> None:
        hook = self._hooks[name]
        if hook is None:
            return
        try:
            hook()
        except Exception:
            logger.warning("Notification hook %s failed", name, exc_info=True)


def terminal_bell(stream=None) -> Hook:
    """Hook that rings the terminal bell."""

    def ring() -> None:
        out = stream or sys.stdout
        out.write("\a")
        out.flush()

    return ring


def terminal_hooks(enabled: bool = True) -> NotificationHooks:
    """Bell on rejected plays and skips; silent plays. Disabled means no hooks at all."""
    if not enabled:
        return NotificationHooks()
    return NotificationHooks(on_play_rejected=terminal_bell(), on_skipped=terminal_bell())
