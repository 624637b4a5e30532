from typing import Sequence

import pytest

from coinrunner.game.entities import PlayArea
from coinrunner.game.session import GameSession, SessionHooks
from coinrunner.game.spawner import SpawnPolicy, Spawned


class ScriptedRandom:
    """Random source that replays fixed values, then a default."""

    def __init__(self, values: Sequence[float] = (), default: float = 0.5):
        self.values = list(values)
        self.default = default
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        if self.values:
            return self.values.pop(0)
        return self.default


class NoSpawnPolicy(SpawnPolicy):
    """Never spawns; tests place entities by hand."""

    name = "none"

    def update(self, now_ms, area, score, obstacles) -> Spawned:
        return Spawned()


class HookRecorder:
    def __init__(self):
        self.scores: list[int] = []
        self.game_overs: list[int] = []
        self.jumps = 0
        self.starts = 0

    def hooks(self) -> SessionHooks:
        return SessionHooks(
            on_score_changed=self.scores.append,
            on_game_over=self.game_overs.append,
            on_jump_performed=self._jump,
            on_game_started=self._start,
        )

    def _jump(self) -> None:
        self.jumps += 1

    def _start(self) -> None:
        self.starts += 1


@pytest.fixture
def area() -> PlayArea:
    # ground_y = 660
    return PlayArea(width=800, height=760)


@pytest.fixture
def recorder() -> HookRecorder:
    return HookRecorder()


@pytest.fixture
def session(area, recorder) -> GameSession:
    return GameSession(area=area, spawn_policy=NoSpawnPolicy(ScriptedRandom()), hooks=recorder.hooks())
