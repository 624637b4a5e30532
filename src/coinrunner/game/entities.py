"""Entity records for the runner: the player, obstacles and coins."""

from dataclasses import dataclass
from enum import Enum


class EntityKind(Enum):
    """Tag for the two kinds of scrolling entities."""
    OBSTACLE = "obstacle"
    COIN = "coin"


@dataclass
class Player:
    # Physics constants - tuned per 60Hz tick, not per second
    x: float = 80.0
    y: float = 0.0
    width: float = 40.0
    height: float = 40.0
    velocity_y: float = 0.0
    gravity: float = 0.6
    jump_power: float = -14.0  # negative = upward
    on_ground: bool = False

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)


@dataclass
class Obstacle:
    x: float
    y: float
    width: float
    height: float
    speed: float
    kind: EntityKind = EntityKind.OBSTACLE


@dataclass
class Coin:
    x: float
    y: float  # center
    speed: float
    radius: float = 15.0
    collected: bool = False
    kind: EntityKind = EntityKind.COIN


Entity = Obstacle | Coin


@dataclass
class PlayArea:
    """Playfield dimensions. The ground band is a fixed height at the bottom."""
    width: float
    height: float
    ground_height: float = 100.0

    @property
    def ground_y(self) -> float:
        return self.height - self.ground_height

    @property
    def is_playable(self) -> bool:
        """False for degenerate sizes where nothing can spawn."""
        return self.width > 0 and self.ground_y > 0


def advance(entity: Entity) -> None:
    """Scroll an entity left by its own speed."""
    entity.x -= entity.speed


def right_edge(entity: Entity) -> float:
    """Rightmost x of an entity, used for off-screen pruning."""
    if entity.kind is EntityKind.OBSTACLE:
        return entity.x + entity.width
    return entity.x + entity.radius


def is_off_screen(entity: Entity) -> bool:
    """True once the entity has fully left the play area on the left."""
    return right_edge(entity) < 0
