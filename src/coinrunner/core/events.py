"""
Event bus for Coin Runner.

Carries input intents from the window to the active mode, plus
shutdown requests. Frame ticks bypass the bus so their errors propagate.
"""

from dataclasses import dataclass, field
from typing import Any, Callable
from enum import Enum, auto
import logging
import time
from collections import defaultdict

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Built-in event types."""
    # Input events
    BUTTON_PRESS = auto()

    # Window events
    RESIZE = auto()

    # System events
    SHUTDOWN = auto()


@dataclass
class Event:
    """
    Event data container.

    Attributes:
        type: Event type (EventType enum or custom string)
        data: Event payload
        source: Component that emitted the event
        timestamp: When event was created
    """
    type: EventType | str
    data: dict[str, Any] = field(default_factory=dict)
    source: str = "system"
    timestamp: float = field(default_factory=time.monotonic)


Handler = Callable[[Event], None]


class EventBus:
    """
    Central event bus for component communication.

    emit() dispatches synchronously so input applies within the
    current frame.
    """

    def __init__(self) -> None:
        self._handlers: dict[EventType | str, list[Handler]] = defaultdict(list)

    def subscribe(
        self,
        event_type: EventType | str,
        handler: Handler
    ) -> Callable[[], None]:
        """
        Subscribe to an event type.

        Returns:
            Unsubscribe function
        """
        self._handlers[event_type].append(handler)
        logger.debug(f"Handler subscribed to {event_type}")

        def unsubscribe() -> None:
            if handler in self._handlers[event_type]:
                self._handlers[event_type].remove(handler)
                logger.debug(f"Handler unsubscribed from {event_type}")

        return unsubscribe

    def emit(self, event: Event) -> None:
        """Emit an event to its handlers immediately."""
        self._dispatch_sync(event)

    def _dispatch_sync(self, event: Event) -> None:
        """Dispatch event to subscribed handlers."""
        for handler in list(self._handlers.get(event.type, [])):
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Error in event handler: {e}")


def button_press_event(source: str = "button") -> Event:
    """Create a button press event."""
    return Event(EventType.BUTTON_PRESS, source=source)


def resize_event(width: int, height: int) -> Event:
    """Create a window resize event."""
    return Event(EventType.RESIZE, data={"width": width, "height": height}, source="window")

