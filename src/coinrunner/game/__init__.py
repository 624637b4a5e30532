"""Runner simulation: entities, physics, collisions, spawning and sessions."""

from .session import GameSession, SessionHooks
from .entities import Player, Obstacle, Coin, PlayArea

__all__ = ["GameSession", "SessionHooks", "Player", "Obstacle", "Coin", "PlayArea"]
