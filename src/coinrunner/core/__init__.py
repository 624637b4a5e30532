"""Core framework components for Coin Runner."""

from .state import State, StateMachine
from .events import EventBus, Event
from .clock import FrameDriver

__all__ = ["State", "StateMachine", "EventBus", "Event", "FrameDriver"]
