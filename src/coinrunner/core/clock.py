"""
Frame driver on the asyncio event loop.

Calls a frame callback at a target rate with the current monotonic
time in milliseconds. The pending callback handle is kept so stop()
guarantees no further frames run. A callback exception stops the
driver and is kept in `error` for the owner to raise.
"""

import asyncio
import logging
import time
from typing import Callable

logger = logging.getLogger(__name__)

FrameCallback = Callable[[float], None]


def monotonic_ms() -> float:
    """Current monotonic time in milliseconds."""
    return time.monotonic() * 1000.0


class FrameDriver:
    """Schedules a per-frame callback, one frame at a time."""

    def __init__(
        self,
        callback: FrameCallback,
        fps: int = 60,
        clock: Callable[[], float] = monotonic_ms,
    ) -> None:
        self._callback = callback
        self._clock = clock
        self._interval = 1.0 / max(1, fps)

        self._running = False
        self._handle: asyncio.TimerHandle | None = None
        self._frame_count = 0
        self._error: Exception | None = None

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def frame_count(self) -> int:
        return self._frame_count

    @property
    def error(self) -> Exception | None:
        """The exception that stopped the driver, if any."""
        return self._error

    def start(self) -> None:
        """Start ticking. Must be called from a running event loop."""
        if self._running:
            return
        loop = asyncio.get_running_loop()
        self._running = True
        self._error = None
        self._handle = loop.call_later(self._interval, self._tick)
        logger.debug(f"FrameDriver started at {1.0 / self._interval:.0f} fps")

    def stop(self) -> None:
        """Stop ticking and cancel the pending frame, if any."""
        self._running = False
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        logger.debug(f"FrameDriver stopped after {self._frame_count} frames")

    def _schedule_next(self) -> None:
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self._interval, self._tick)

    def _tick(self) -> None:
        self._handle = None
        if not self._running:
            return

        try:
            self._callback(self._clock())
        except Exception as e:
            # Stop on the first failure; the owner re-raises error
            self._error = e
            self.stop()
            return

        self._frame_count += 1

        # The callback may have stopped us
        if self._running:
            self._schedule_next()
