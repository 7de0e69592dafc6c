"""Append-only log of game events."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, List, Optional

from untable.engine.card import Card, Color

logger = logging.getLogger(__name__)


class EventKind(str, Enum):
    PLAYED = "played"
    DREW = "drew"
    DREW_MULTIPLE = "drew_multiple"
    COLOR_CHOSEN = "color_chosen"
    UN_DECLARED = "un_declared"
    SKIPPED = "skipped"
    WON = "won"


@dataclass(frozen=True)
class GameEvent:
    """A single semantic game event.

    card is set for PLAYED, cards/count for DREW and DREW_MULTIPLE,
    color for COLOR_CHOSEN. detail carries a short qualifier such as
    "for the starting card".
    """

    kind: EventKind
    player: int
    card: Optional[Card] = None
    cards: tuple[Card, ...] = ()
    count: int = 0
    color: Optional[Color] = None
    detail: str = ""

    def __str__(self) -> str:
        who = f"Player {self.player}"
        if self.kind == EventKind.PLAYED:
            return f"{who} played {self.card}"
        if self.kind == EventKind.DREW:
            return f"{who} drew a card"
        if self.kind == EventKind.DREW_MULTIPLE:
            return f"{who} drew {self.count} cards and was skipped"
        if self.kind == EventKind.COLOR_CHOSEN:
            text = f"{who} chose {self.color.label}"
            return f"{text} {self.detail}" if self.detail else text
        if self.kind == EventKind.UN_DECLARED:
            return f"{who} declared UN"
        if self.kind == EventKind.SKIPPED:
            return f"{who} was skipped"
        return f"{who} won the game"


EventListener = Callable[[GameEvent], None]


class EventLog:
    """Ordered record of events, written by the engine and read by consumers.

    Listeners are called synchronously on every append. A failing listener is
    logged and never interrupts the engine.
    """

    def __init__(self) -> None:
        self._events: List[GameEvent] = []
        self._listeners: List[EventListener] = []

    def append(self, event: GameEvent) -> None:
        self._events.append(event)
        logger.debug("event: %s", event)
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("Event listener %r failed on %s", listener, event.kind.value)

    def subscribe(self, listener: EventListener) -> Callable[[], None]:
        """Register a listener. Returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def clear(self) -> None:
        """Drop all recorded events (new game). Listeners stay registered."""
        self._events.clear()

    @property
    def entries(self) -> tuple[GameEvent, ...]:
        return tuple(self._events)

    def recent(self, n: int = 10) -> List[GameEvent]:
        if n <= 0:
            return []
        return self._events[-n:]

    def __iter__(self) -> Iterator[GameEvent]:
        return iter(list(self._events))

    def __len__(self) -> int:
        return len(self._events)
