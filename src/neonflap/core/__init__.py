"""Core framework components for NEON FLAP."""

from .state import GameState, StateMachine
from .events import EventBus, Event, EventType
from .clock import FrameClock

__all__ = ["GameState", "StateMachine", "EventBus", "Event", "EventType", "FrameClock"]
