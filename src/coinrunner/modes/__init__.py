"""Game modes for Coin Runner."""

from .base import BaseMode, ModeContext
from .runner import RunnerMode

__all__ = ["BaseMode", "ModeContext", "RunnerMode"]
