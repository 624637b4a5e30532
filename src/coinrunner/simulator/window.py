"""
Game window using pygame.

Owns the display surface, turns keyboard, mouse and touch input into
bus events and drives frames through a FrameDriver.
"""

import pygame
import asyncio
import logging
from typing import Callable, List

from coinrunner.config.settings import DisplaySettings
from coinrunner.core.clock import FrameDriver
from coinrunner.core.events import (
    Event,
    EventBus,
    EventType,
    button_press_event,
    resize_event,
)
from coinrunner.simulator.display import PlayfieldDisplay

logger = logging.getLogger(__name__)

TEXT_COLOR = (40, 40, 60)
JUMP_KEYS = (pygame.K_SPACE, pygame.K_RETURN, pygame.K_UP)


class GameWindow:
    """
    Main game window.

    Keyboard Mapping:
        SPACE / RETURN / UP: Button (start, jump, restart)
        M: Toggle mute
        ESC / Q: Quit

    Left mouse click and finger touch also press the button.
    """

    def __init__(
        self,
        config: DisplaySettings,
        event_bus: EventBus,
        update_fn: Callable[[float], None],
        render_fn: Callable[[object], None],
        hud_fn: Callable[[], List[str]],
        on_mute: Callable[[], None] | None = None,
    ) -> None:
        self.config = config
        self.event_bus = event_bus
        self._update_fn = update_fn
        self._render_fn = render_fn
        self._hud_fn = hud_fn
        self._on_mute = on_mute

        self._screen: pygame.Surface | None = None
        self._font: pygame.font.Font | None = None
        self._big_font: pygame.font.Font | None = None
        self._running = False
        self._frame_count = 0

        self.display = PlayfieldDisplay(config.width, config.height)
        self._driver = FrameDriver(self._frame, fps=config.fps)

        logger.info("GameWindow created")

    def _init_pygame(self) -> None:
        """Initialize pygame and create window."""
        pygame.init()
        pygame.display.set_caption(self.config.title)

        flags = pygame.DOUBLEBUF | pygame.RESIZABLE
        if self.config.fullscreen:
            flags = pygame.FULLSCREEN | pygame.DOUBLEBUF

        self._screen = pygame.display.set_mode((self.config.width, self.config.height), flags)

        pygame.font.init()
        self._font = pygame.font.SysFont(None, 32)
        self._big_font = pygame.font.SysFont(None, 64)

        # Fullscreen may not honour the requested size
        width, height = self._screen.get_size()
        self._resize(width, height)

        logger.info(f"Pygame initialized: {width}x{height}")

    def _handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.stop()

            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event)

            elif event.type == pygame.MOUSEBUTTONDOWN:
                # Touch also produces synthetic mouse events; FINGERDOWN covers it
                if event.button == 1 and not getattr(event, "touch", False):
                    self.event_bus.emit(button_press_event(source="mouse"))

            elif event.type == pygame.FINGERDOWN:
                self.event_bus.emit(button_press_event(source="touch"))

            elif event.type == pygame.VIDEORESIZE:
                self._resize(event.w, event.h)

    def _handle_keydown(self, event: pygame.event.Event) -> None:
        """Handle key press."""
        key = event.key

        if key == pygame.K_ESCAPE or key == pygame.K_q:
            self.stop()
        elif key == pygame.K_m:
            if self._on_mute:
                self._on_mute()
        elif key in JUMP_KEYS:
            self.event_bus.emit(button_press_event(source="keyboard"))

    def _resize(self, width: int, height: int) -> None:
        self.display.resize(width, height)
        self.event_bus.emit(resize_event(width, height))

    def _frame(self, now_ms: float) -> None:
        """One frame: input, update, render."""
        self._handle_events()
        if not self._running:
            return

        # Not routed through the bus: tick errors must reach the driver
        self._update_fn(now_ms)
        self._render()
        self._frame_count += 1

    def _render(self) -> None:
        """Render playfield and HUD."""
        if not self._screen:
            return

        self._render_fn(self.display.buffer)
        self._screen.blit(self.display.render(), (0, 0))
        self._render_hud()

        pygame.display.flip()

    def _render_hud(self) -> None:
        lines = self._hud_fn()
        if not lines or not self._font:
            return

        # A single line is the in-game score, top left
        if len(lines) == 1:
            surface = self._font.render(lines[0], True, TEXT_COLOR)
            self._screen.blit(surface, (20, 20))
            return

        # Otherwise a centered screen: big title, smaller lines below
        width, height = self._screen.get_size()
        y = height // 3
        for i, line in enumerate(lines):
            font = self._big_font if i == 0 else self._font
            surface = font.render(line, True, TEXT_COLOR)
            self._screen.blit(surface, surface.get_rect(center=(width // 2, y)))
            y += surface.get_height() + 12

    async def run(self) -> None:
        """Main window loop."""
        self._init_pygame()
        self._running = True
        self._driver.start()

        logger.info("Window started")

        try:
            # Frames run from the driver; just wait until something stops us
            while self._running and self._driver.is_running:
                await asyncio.sleep(0.05)
        finally:
            self._driver.stop()
            self._cleanup()

        # A frame raised and stopped the driver
        if self._driver.error is not None:
            raise RuntimeError("Frame loop stopped after an error") from self._driver.error

    def _cleanup(self) -> None:
        """Clean up pygame resources."""
        self.event_bus.emit(Event(EventType.SHUTDOWN, source="window"))
        pygame.quit()
        logger.info(f"Window stopped after {self._frame_count} frames")

    def stop(self) -> None:
        """Stop the window loop."""
        self._running = False
        self._driver.stop()
