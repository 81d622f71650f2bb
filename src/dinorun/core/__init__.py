"""Core framework components for DINORUN."""

from .state import GameState, StateMachine
from .events import EventBus, Event, EventType
from .timer import PeriodicTimer

__all__ = ["GameState", "StateMachine", "EventBus", "Event", "EventType", "PeriodicTimer"]
