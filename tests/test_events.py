"""Unit tests for the EventBus."""
from __future__ import annotations

from neonflap.core.events import (
    Event,
    EventBus,
    EventType,
    activate_event,
    quit_event,
    sound_event,
    toggle_theme_event,
)


def test_subscribe_and_emit():
    """Handlers run synchronously on emit."""
    bus = EventBus()
    received = []
    bus.subscribe(EventType.ACTIVATE, received.append)

    event = activate_event(source="test")
    bus.emit(event)

    assert received == [event]
    assert event.source == "test"


def test_handlers_only_get_their_type():
    bus = EventBus()
    activates = []
    toggles = []
    bus.subscribe(EventType.ACTIVATE, activates.append)
    bus.subscribe(EventType.TOGGLE_THEME, toggles.append)

    bus.emit(toggle_theme_event())

    assert activates == []
    assert len(toggles) == 1


def test_unsubscribe():
    """The returned callable detaches the handler."""
    bus = EventBus()
    received = []
    unsubscribe = bus.subscribe(EventType.SCORED, received.append)

    bus.emit(Event(EventType.SCORED, data={"value": 1}))
    unsubscribe()
    unsubscribe()  # idempotent
    bus.emit(Event(EventType.SCORED, data={"value": 2}))

    assert [e.data["value"] for e in received] == [1]


def test_subscribe_all():
    bus = EventBus()
    received = []
    bus.subscribe_all(received.append)

    bus.emit(activate_event())
    bus.emit(sound_event("jump"))

    assert [e.type for e in received] == [EventType.ACTIVATE, EventType.SOUND_PLAY]


def test_failing_handler_is_isolated():
    """A raising handler does not stop the others."""
    bus = EventBus()
    received = []

    def broken(event: Event) -> None:
        raise ValueError("bad handler")

    bus.subscribe(EventType.SCORED, broken)
    bus.subscribe(EventType.SCORED, received.append)

    bus.emit(Event(EventType.SCORED, data={"value": 1}))

    assert len(received) == 1


def test_history_is_bounded():
    bus = EventBus(history_limit=5)
    for value in range(10):
        bus.emit(Event(EventType.SCORED, data={"value": value}))

    history = bus.get_history(limit=100)
    assert len(history) == 5
    assert [e.data["value"] for e in history] == [5, 6, 7, 8, 9]


def test_history_filter_and_clear():
    bus = EventBus()
    bus.emit(sound_event("jump"))
    bus.emit(quit_event(source="keyboard"))
    bus.emit(sound_event("crash"))

    sounds = bus.get_history(EventType.SOUND_PLAY)
    assert [e.data["cue"] for e in sounds] == ["jump", "crash"]

    bus.clear_history()
    assert bus.get_history() == []
