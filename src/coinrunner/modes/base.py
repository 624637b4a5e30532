"""Base class for game modes in Coin Runner."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, List, Optional
import logging

from coinrunner.audio.engine import AudioEngine
from coinrunner.config.settings import Settings
from coinrunner.core.clock import monotonic_ms
from coinrunner.core.events import Event, EventBus

logger = logging.getLogger(__name__)


@dataclass
class ModeContext:
    """Shared context passed to modes."""

    event_bus: EventBus
    settings: Settings
    audio: Optional[AudioEngine] = None
    clock: Callable[[], float] = monotonic_ms

    @property
    def width(self) -> int:
        return self.settings.display.width

    @property
    def height(self) -> int:
        return self.settings.display.height


class BaseMode(ABC):
    """Abstract base class for game modes.

    Lifecycle:
        1. on_enter() - Initialize mode state
        2. on_update(now_ms) - Per-frame logic while active
        3. on_input(event) - Handle user input
        4. on_exit() - Cleanup
    """

    # Mode metadata (override in subclasses)
    name: str = "base"
    display_name: str = "Base Mode"

    def __init__(self, context: ModeContext):
        self.context = context
        self._active = False

        logger.debug(f"Mode created: {self.name}")

    @property
    def is_active(self) -> bool:
        """Check if mode is currently active."""
        return self._active

    def enter(self) -> None:
        """Called when mode becomes active."""
        self._active = True
        logger.info(f"Entering mode: {self.name}")
        self.on_enter()

    def exit(self) -> None:
        """Called when mode is deactivated."""
        logger.info(f"Exiting mode: {self.name}")
        self.on_exit()
        self._active = False

    def update(self, now_ms: float) -> None:
        """Update mode state each frame.

        Args:
            now_ms: Monotonic frame time in milliseconds
        """
        if not self._active:
            return

        self.on_update(now_ms)

    def handle_input(self, event: Event) -> bool:
        """Process input event.

        Returns:
            True if event was handled
        """
        if not self._active:
            return False

        return self.on_input(event)

    @abstractmethod
    def on_enter(self) -> None:
        """Initialize mode state."""
        pass

    @abstractmethod
    def on_update(self, now_ms: float) -> None:
        """Per-frame update logic."""
        pass

    @abstractmethod
    def on_input(self, event: Event) -> bool:
        """Handle user input. Return True if handled."""
        pass

    def on_exit(self) -> None:
        """Cleanup mode state. Override if needed."""
        pass

    def render_main(self, buffer) -> None:
        """Render the playfield. Override for custom rendering."""
        pass

    def get_hud_lines(self) -> List[str]:
        """Text lines drawn over the playfield. Override for dynamic text."""
        return [self.display_name]
