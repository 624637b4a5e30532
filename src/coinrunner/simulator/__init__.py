"""Desktop pygame frontend for Coin Runner."""

from .window import GameWindow

__all__ = ["GameWindow"]
