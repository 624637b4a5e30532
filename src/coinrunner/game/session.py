"""
Game session: owns the player, the live entities, score and run state.

Per-tick order while PLAYING:
    1. decorative cloud offset
    2. player physics
    3. spawning
    4. obstacles: advance, collide (ends the run at once), prune
    5. coins: advance, collect or prune

Outside PLAYING, step() and request_jump() do nothing.
"""

import logging
import random
from dataclasses import dataclass
from typing import Callable, Optional

from coinrunner.core.state import State, StateMachine
from coinrunner.game.collision import coin_hits, obstacle_hits
from coinrunner.game.entities import Coin, Obstacle, PlayArea, Player, advance, is_off_screen
from coinrunner.game.physics import jump, reset_player, update_player
from coinrunner.game.spawner import RandomSource, SpawnPolicy, TimedIntervalPolicy

logger = logging.getLogger(__name__)

COIN_VALUE = 10


@dataclass
class SessionHooks:
    """Callbacks fired by the session. All optional."""
    on_score_changed: Optional[Callable[[int], None]] = None
    on_game_over: Optional[Callable[[int], None]] = None
    on_jump_performed: Optional[Callable[[], None]] = None
    on_game_started: Optional[Callable[[], None]] = None


class GameSession:
    """One runner game, reusable across start/restart cycles."""

    def __init__(
        self,
        area: PlayArea,
        spawn_policy: SpawnPolicy | None = None,
        hooks: SessionHooks | None = None,
        rng: RandomSource | None = None,
    ) -> None:
        self.area = area
        self.spawn_policy = spawn_policy or TimedIntervalPolicy(rng or random.Random())
        self.hooks = hooks or SessionHooks()
        self.state_machine = StateMachine()

        self.player = Player()
        reset_player(self.player, area.ground_y)
        self.obstacles: list[Obstacle] = []
        self.coins: list[Coin] = []

        self.score = 0
        self.final_score = 0
        self.best_score = 0
        self.cloud_offset = 0

    @property
    def state(self) -> State:
        return self.state_machine.state

    @property
    def is_playing(self) -> bool:
        return self.state is State.PLAYING

    # Intents from the adapters

    def start(self, now_ms: float) -> bool:
        """Begin the first run from IDLE."""
        if self.state is not State.IDLE:
            logger.debug(f"Ignored start in {self.state.name}")
            return False
        return self._begin(now_ms)

    def restart(self, now_ms: float) -> bool:
        """Begin a new run after game over."""
        if self.state is not State.OVER:
            logger.debug(f"Ignored restart in {self.state.name}")
            return False
        return self._begin(now_ms)

    def request_jump(self) -> bool:
        """Jump now if playing and on the ground."""
        if not self.is_playing:
            logger.debug(f"Ignored jump in {self.state.name}")
            return False
        if not jump(self.player):
            return False

        if self.hooks.on_jump_performed:
            self.hooks.on_jump_performed()
        return True

    def resize(self, width: float, height: float) -> None:
        """Change the playfield size. Only new spawns use the new edge.

        Outside a run the player is put back on the new ground line.
        """
        self.area.width = width
        self.area.height = height
        if not self.is_playing:
            reset_player(self.player, self.area.ground_y)
        logger.debug(f"Play area resized to {width}x{height}")

    # Simulation

    def step(self, now_ms: float) -> None:
        """Advance the simulation by one tick."""
        if not self.is_playing:
            return

        self.cloud_offset += 1

        update_player(self.player, self.area.ground_y)
        assert self.player.y + self.player.height <= self.area.ground_y

        spawned = self.spawn_policy.update(now_ms, self.area, self.score, self.obstacles)
        if spawned.obstacle is not None:
            self.obstacles.append(spawned.obstacle)
            logger.debug(f"Spawned obstacle {spawned.obstacle.width:.0f}x{spawned.obstacle.height:.0f}")
        if spawned.coin is not None:
            self.coins.append(spawned.coin)
            logger.debug(f"Spawned coin at y={spawned.coin.y:.0f}")

        if not self._update_obstacles():
            return
        self._update_coins()

    def _update_obstacles(self) -> bool:
        """Move and prune obstacles. Returns False if the run ended."""
        survivors: list[Obstacle] = []
        for obs in self.obstacles:
            advance(obs)
            if obstacle_hits(self.player, obs):
                self._game_over()
                return False
            if not is_off_screen(obs):
                survivors.append(obs)
        self.obstacles = survivors
        return True

    def _update_coins(self) -> None:
        survivors: list[Coin] = []
        for coin in self.coins:
            advance(coin)
            if coin_hits(self.player, coin):
                self._collect(coin)
            elif not is_off_screen(coin):
                survivors.append(coin)
        self.coins = survivors

    def _collect(self, coin: Coin) -> None:
        assert not coin.collected, "coin collected twice"
        coin.collected = True
        self.score += COIN_VALUE

        if self.hooks.on_score_changed:
            self.hooks.on_score_changed(self.score)

    # Lifecycle

    def _begin(self, now_ms: float) -> bool:
        self.score = 0
        self.obstacles = []
        self.coins = []
        reset_player(self.player, self.area.ground_y)
        self.cloud_offset = 0
        self.spawn_policy.reset(now_ms)

        if not self.state_machine.transition(State.PLAYING):
            return False

        logger.info("Run started")
        if self.hooks.on_game_started:
            self.hooks.on_game_started()
        return True

    def _game_over(self) -> None:
        self.state_machine.transition(State.OVER)
        self.final_score = self.score
        self.best_score = max(self.best_score, self.final_score)
        self.obstacles = []
        self.coins = []

        logger.info(f"Game over! Score: {self.final_score} (best {self.best_score})")
        if self.hooks.on_game_over:
            self.hooks.on_game_over(self.final_score)
