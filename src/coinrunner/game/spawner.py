"""
Obstacle and coin spawning.

Two spawn policies exist:
    timed: randomized per-kind intervals, a minimum gap between
        obstacles and a 70% chance for a due coin to actually appear
    probability: an independent per-tick roll for each kind

Only one policy drives a session. Speed of a spawned entity is fixed
at creation from the score at that moment.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Protocol, Sequence
import logging

from coinrunner.game.entities import Coin, Obstacle, PlayArea

logger = logging.getLogger(__name__)

# Difficulty ramp
BASE_SPEED = 4.0
SPEED_PER_POINT = 0.03
MAX_SPEED_BONUS = 6.0

# Obstacle shape: low + random() * span
OBSTACLE_WIDTH = (30.0, 25.0)
OBSTACLE_HEIGHT = (40.0, 40.0)

# Coin placement above the ground line
COIN_BASE_OFFSET = 100.0
COIN_EXTRA_HEIGHT = 150.0

MIN_OBSTACLE_GAP = 250.0


class RandomSource(Protocol):
    def random(self) -> float:  # returns in [0.0, 1.0)
        ...


def speed_for_score(score: int) -> float:
    """Scroll speed for newly spawned entities, capped at BASE_SPEED + MAX_SPEED_BONUS."""
    return BASE_SPEED + min(score * SPEED_PER_POINT, MAX_SPEED_BONUS)


def make_obstacle(area: PlayArea, score: int, rng: RandomSource) -> Obstacle:
    """Build an obstacle resting on the ground at the right edge."""
    width = OBSTACLE_WIDTH[0] + rng.random() * OBSTACLE_WIDTH[1]
    height = OBSTACLE_HEIGHT[0] + rng.random() * OBSTACLE_HEIGHT[1]
    return Obstacle(
        x=area.width,
        y=area.ground_y - height,
        width=width,
        height=height,
        speed=speed_for_score(score),
    )


def make_coin(area: PlayArea, score: int, rng: RandomSource) -> Coin:
    """Build a coin at the right edge, floating at jump height."""
    y = area.ground_y - COIN_BASE_OFFSET - rng.random() * COIN_EXTRA_HEIGHT
    return Coin(x=area.width, y=y, speed=speed_for_score(score))


@dataclass
class Spawned:
    """What a policy produced on one tick."""
    obstacle: Obstacle | None = None
    coin: Coin | None = None


@dataclass
class SpawnTimer:
    """Last spawn time plus the randomized interval until the next one."""
    initial_interval: float
    interval_low: float
    interval_span: float
    last_time: float = 0.0
    interval: float = 0.0

    def __post_init__(self) -> None:
        self.interval = self.initial_interval

    def reset(self, now_ms: float) -> None:
        self.last_time = now_ms
        self.interval = self.initial_interval

    def is_due(self, now_ms: float) -> bool:
        return now_ms - self.last_time > self.interval

    def rearm(self, now_ms: float, rng: RandomSource) -> None:
        self.last_time = now_ms
        self.interval = self.interval_low + rng.random() * self.interval_span


class SpawnPolicy(ABC):
    """Decides each tick whether new entities appear."""

    name: str = "base"

    def __init__(self, rng: RandomSource):
        self.rng = rng

    def reset(self, now_ms: float) -> None:
        """Called at session start."""
        pass

    @abstractmethod
    def update(
        self,
        now_ms: float,
        area: PlayArea,
        score: int,
        obstacles: Sequence[Obstacle],
    ) -> Spawned:
        """Return the entities to add this tick."""
        pass


class TimedIntervalPolicy(SpawnPolicy):
    """Interval-driven spawning with a minimum horizontal obstacle gap."""

    name = "timed"

    COIN_CHANCE = 0.7

    def __init__(self, rng: RandomSource):
        super().__init__(rng)
        self.obstacle_timer = SpawnTimer(initial_interval=1500.0, interval_low=1300.0, interval_span=1200.0)
        self.coin_timer = SpawnTimer(initial_interval=1200.0, interval_low=1000.0, interval_span=1500.0)

    def reset(self, now_ms: float) -> None:
        self.obstacle_timer.reset(now_ms)
        self.coin_timer.reset(now_ms)

    def update(
        self,
        now_ms: float,
        area: PlayArea,
        score: int,
        obstacles: Sequence[Obstacle],
    ) -> Spawned:
        spawned = Spawned()
        if not area.is_playable:
            return spawned

        if self.obstacle_timer.is_due(now_ms):
            last = obstacles[-1] if obstacles else None
            # Gap not cleared yet: leave the timer alone and retry next tick
            if last is None or last.x < area.width - MIN_OBSTACLE_GAP:
                spawned.obstacle = make_obstacle(area, score, self.rng)
                self.obstacle_timer.rearm(now_ms, self.rng)

        if self.coin_timer.is_due(now_ms):
            if self.rng.random() < self.COIN_CHANCE:
                spawned.coin = make_coin(area, score, self.rng)
            self.coin_timer.rearm(now_ms, self.rng)

        return spawned


class ProbabilityPolicy(SpawnPolicy):
    """Independent per-tick spawn rolls. No timers, no gap check."""

    name = "probability"

    OBSTACLE_CHANCE = 0.02
    COIN_CHANCE = 0.015

    def update(
        self,
        now_ms: float,
        area: PlayArea,
        score: int,
        obstacles: Sequence[Obstacle],
    ) -> Spawned:
        spawned = Spawned()
        if not area.is_playable:
            return spawned

        if self.rng.random() < self.OBSTACLE_CHANCE:
            spawned.obstacle = make_obstacle(area, score, self.rng)
        if self.rng.random() < self.COIN_CHANCE:
            spawned.coin = make_coin(area, score, self.rng)

        return spawned


SPAWN_POLICIES: dict[str, type[SpawnPolicy]] = {
    TimedIntervalPolicy.name: TimedIntervalPolicy,
    ProbabilityPolicy.name: ProbabilityPolicy,
}


def make_spawn_policy(name: str, rng: RandomSource) -> SpawnPolicy:
    """Build a spawn policy by name ("timed" or "probability")."""
    try:
        policy_cls = SPAWN_POLICIES[name]
    except KeyError:
        raise ValueError(f"Unknown spawn policy: {name}") from None

    logger.debug(f"Using spawn policy: {name}")
    return policy_cls(rng)
