"""
Event bus for NEON FLAP.

Synchronous pub/sub between the input layer, the game controller
and the audio engine. Everything runs inside a single frame, so
handlers are called immediately in subscription order.
"""

from dataclasses import dataclass, field
from typing import Any, Callable
from enum import Enum, auto
from collections import defaultdict
import logging
import time

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Built-in event types."""
    # Input events
    ACTIVATE = auto()
    TOGGLE_THEME = auto()
    QUIT = auto()

    # Game events
    STATE_CHANGED = auto()
    SCORED = auto()
    NEW_BEST = auto()
    THEME_CHANGED = auto()

    # Audio events
    SOUND_PLAY = auto()


@dataclass
class Event:
    """
    Event data container.

    Attributes:
        type: Event type
        data: Event payload
        source: Component that emitted the event
        timestamp: When event was created
    """
    type: EventType
    data: dict[str, Any] = field(default_factory=dict)
    source: str = "system"
    timestamp: float = field(default_factory=time.monotonic)


Handler = Callable[[Event], None]


class EventBus:
    """
    Central event bus for component communication.

    A failing handler is logged and skipped so one bad subscriber
    cannot stop the frame loop.
    """

    def __init__(self, history_limit: int = 100) -> None:
        self._handlers: dict[EventType, list[Handler]] = defaultdict(list)
        self._global_handlers: list[Handler] = []
        self._event_history: list[Event] = []
        self._history_limit = history_limit

    def subscribe(self, event_type: EventType, handler: Handler) -> Callable[[], None]:
        """
        Subscribe to an event type.

        Args:
            event_type: Type of event to listen for
            handler: Callback function

        Returns:
            Unsubscribe function
        """
        self._handlers[event_type].append(handler)
        logger.debug(f"Handler subscribed to {event_type.name}")

        def unsubscribe() -> None:
            if handler in self._handlers[event_type]:
                self._handlers[event_type].remove(handler)
                logger.debug(f"Handler unsubscribed from {event_type.name}")

        return unsubscribe

    def subscribe_all(self, handler: Handler) -> Callable[[], None]:
        """Subscribe to all events."""
        self._global_handlers.append(handler)

        def unsubscribe() -> None:
            if handler in self._global_handlers:
                self._global_handlers.remove(handler)

        return unsubscribe

    def emit(self, event: Event) -> None:
        """Emit an event to every matching handler immediately."""
        self._add_to_history(event)

        handlers = self._handlers.get(event.type, []) + self._global_handlers
        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Error in event handler for {event.type.name}: {e}")

    def _add_to_history(self, event: Event) -> None:
        """Add event to history, maintaining limit."""
        self._event_history.append(event)
        if len(self._event_history) > self._history_limit:
            self._event_history.pop(0)

    def get_history(
        self,
        event_type: EventType | None = None,
        limit: int = 10
    ) -> list[Event]:
        """Get recent events from history."""
        history = self._event_history
        if event_type is not None:
            history = [e for e in history if e.type == event_type]
        return history[-limit:]

    def clear_history(self) -> None:
        """Clear event history."""
        self._event_history.clear()


# Convenience functions for creating common events
def activate_event(source: str = "input") -> Event:
    """Create an activate (flap / start / restart) event."""
    return Event(EventType.ACTIVATE, source=source)


def toggle_theme_event(source: str = "input") -> Event:
    """Create a theme toggle event."""
    return Event(EventType.TOGGLE_THEME, source=source)


def sound_event(cue: str, source: str = "game") -> Event:
    """Create a sound cue event."""
    return Event(EventType.SOUND_PLAY, data={"cue": cue}, source=source)


def quit_event(source: str = "input") -> Event:
    """Create a request to close the game."""
    return Event(EventType.QUIT, source=source)
