"""Unit tests for the event log, transcript and notification hooks."""

import random

from untable.engine import Card, CardType, Color, EventKind, EventLog, GameEvent
from untable.notifications import NotificationHooks
from untable.transcript import UN_PHRASES_OTHER, UN_PHRASES_YOU, Transcript

NAMES = {1: "You", 2: "Alice", 3: "Bob", 4: "Charlie"}


def test_log_initialization(rigged) -> None:
    engine = rigged()
    assert len(engine.log) == 0


def test_log_records_in_order(rigged) -> None:
    engine = rigged(hands={1: [(CardType.SKIP, Color.RED, None)]})
    card = engine.state.get_player_hand(1)[0]
    engine.play_turn(1, card)
    events = engine.log.entries
    assert [(e.kind, e.player) for e in events] == [
        (EventKind.PLAYED, 1),
        (EventKind.SKIPPED, 4),
    ]
    assert events[0].card == card
    assert "Player 1 played Red Skip" in engine.view_for(2).history


def test_log_cleared_on_new_game(rigged) -> None:
    engine = rigged(draws=[(CardType.NUMBER, Color.BLUE, 1)])
    engine.draw(1)
    assert len(engine.log) == 1
    engine.new_game()
    assert all(e.kind == EventKind.COLOR_CHOSEN for e in engine.log)


def test_recent_returns_last_n_events() -> None:
    log = EventLog()
    for player in (1, 4, 2):
        log.append(GameEvent(EventKind.DREW, player))
    assert [e.player for e in log.recent(2)] == [4, 2]
    assert len(log.recent(10)) == 3
    assert log.recent(0) == []
    assert log.recent(-1) == []


def test_listeners_are_called_and_can_unsubscribe() -> None:
    log = EventLog()
    seen = []
    unsubscribe = log.subscribe(seen.append)
    event = GameEvent(kind=EventKind.SKIPPED, player=3)
    log.append(event)
    unsubscribe()
    log.append(GameEvent(kind=EventKind.SKIPPED, player=2))
    assert seen == [event]
    assert len(log) == 2


def test_failing_listener_does_not_break_log() -> None:
    log = EventLog()
    seen = []

    def broken(event):
        raise OSError("speaker unplugged")

    log.subscribe(broken)
    log.subscribe(seen.append)
    log.append(GameEvent(kind=EventKind.WON, player=1))
    assert len(seen) == 1
    assert len(log) == 1


def test_hooks_follow_events(rigged) -> None:
    calls = []
    hooks = NotificationHooks(
        on_card_played=lambda: calls.append("played"),
        on_play_rejected=lambda: calls.append("rejected"),
        on_skipped=lambda: calls.append("skipped"),
    )
    engine = rigged(hands={1: [(CardType.SKIP, Color.RED, None)]})
    hooks.attach(engine.log)
    engine.play_turn(1, engine.state.get_player_hand(1)[0])
    hooks.play_rejected()
    assert calls == ["played", "skipped", "rejected"]


def test_failing_hook_is_ignored() -> None:
    def broken():
        raise RuntimeError("no audio device")

    hooks = NotificationHooks(on_card_played=broken)
    hooks.card_played()
    hooks.skipped()


def test_transcript_lines() -> None:
    transcript = Transcript(NAMES, viewer=1, rng=random.Random(0))
    red_seven = Card(CardType.NUMBER, Color.RED, 7)
    blue_skip = Card(CardType.SKIP, Color.BLUE)

    def line(**kw):
        return transcript.describe(GameEvent(**kw))

    assert line(kind=EventKind.PLAYED, player=2, card=blue_skip) == "Alice played Blue Skip"
    assert line(kind=EventKind.DREW, player=1, cards=(red_seven,), count=1) == "You drew Red 7"
    assert line(kind=EventKind.DREW, player=3, cards=(red_seven,), count=1) == "Bob drew a card"
    assert (
        line(kind=EventKind.DREW_MULTIPLE, player=4, cards=(red_seven, blue_skip), count=2, detail="and was skipped")
        == "Charlie drew 2 cards and was skipped!"
    )
    assert (
        line(kind=EventKind.DREW_MULTIPLE, player=1, cards=(red_seven, blue_skip), count=2, detail="and was skipped")
        == "You drew 2 cards (Red 7, Blue Skip) and were skipped!"
    )
    assert line(kind=EventKind.COLOR_CHOSEN, player=2, color=Color.GREEN) == "Alice chose Green"
    assert (
        line(kind=EventKind.COLOR_CHOSEN, player=1, color=Color.RED, detail="for the starting card")
        == "You chose Red for the starting card"
    )
    assert line(kind=EventKind.SKIPPED, player=1) == "You were skipped!"
    assert line(kind=EventKind.SKIPPED, player=2) == "Alice was skipped!"
    assert line(kind=EventKind.WON, player=3) == "🎉 Bob won the game! 🎉"


def test_transcript_un_phrases() -> None:
    transcript = Transcript(NAMES, rng=random.Random(5))
    you = transcript.describe(GameEvent(kind=EventKind.UN_DECLARED, player=1))
    alice = transcript.describe(GameEvent(kind=EventKind.UN_DECLARED, player=2))
    assert you.startswith("You ") and you[len("You "):] in UN_PHRASES_YOU
    assert alice.startswith("Alice ") and alice[len("Alice "):] in UN_PHRASES_OTHER
