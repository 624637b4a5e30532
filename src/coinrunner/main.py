"""
Main entry point for Coin Runner.

Loads settings, wires the runner mode to the window and audio,
and runs the game until the window closes.
"""

import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

from coinrunner.audio.engine import AudioEngine, get_audio_engine
from coinrunner.config.settings import Settings, get_settings
from coinrunner.core.events import Event, EventBus, EventType
from coinrunner.modes.base import ModeContext
from coinrunner.modes.runner import RunnerMode


def setup_logging(debug: bool = False, log_file: Optional[Path] = None) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file is not None:
        # Truncate on each run for fresh logs
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=handlers,
    )


def create_audio(settings: Settings) -> Optional[AudioEngine]:
    """Start the audio engine, or None when disabled or unavailable."""
    if not settings.audio.enabled:
        return None

    audio = get_audio_engine(volume=settings.audio.volume)
    if not audio.init():
        logging.getLogger(__name__).warning("Running without sound")
        return None
    return audio


async def run_game(settings: Settings) -> None:
    """Run the desktop game."""
    from coinrunner.simulator.window import GameWindow

    event_bus = EventBus()
    audio = create_audio(settings)

    mode = RunnerMode(ModeContext(event_bus=event_bus, settings=settings, audio=audio))
    mode.enter()

    def on_shutdown(event: Event) -> None:
        mode.exit()
        if audio:
            audio.cleanup()

    event_bus.subscribe(EventType.BUTTON_PRESS, mode.handle_input)
    event_bus.subscribe(EventType.RESIZE, mode.handle_input)
    event_bus.subscribe(EventType.SHUTDOWN, on_shutdown)

    window = GameWindow(
        config=settings.display,
        event_bus=event_bus,
        update_fn=mode.update,
        render_fn=mode.render_main,
        hud_fn=mode.get_hud_lines,
        on_mute=audio.toggle_mute if audio else None,
    )

    await window.run()


def main() -> None:
    """Main entry point."""
    from dotenv import load_dotenv

    # Load environment variables
    load_dotenv()

    settings = get_settings()
    setup_logging(settings.debug, settings.log_file)

    logger = logging.getLogger(__name__)
    logger.info("Coin Runner starting...")

    try:
        asyncio.run(run_game(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)

    logger.info("Coin Runner stopped")


if __name__ == "__main__":
    main()
