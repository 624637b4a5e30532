import random

import pytest

from conftest import HookRecorder, ScriptedRandom
from coinrunner.core.state import State
from coinrunner.game.entities import Coin, Obstacle, PlayArea
from coinrunner.game.session import COIN_VALUE, GameSession
from coinrunner.game.spawner import ProbabilityPolicy, TimedIntervalPolicy

# Player box with the default area: x 80..120, y 620..660, center (100, 640)


def coin_on_player(speed: float = 4.0) -> Coin:
    """A coin that lands on the player's center after one advance."""
    return Coin(x=100.0 + speed, y=640.0, speed=speed)


def obstacle_on_player() -> Obstacle:
    return Obstacle(x=84.0, y=600.0, width=30.0, height=60.0, speed=4.0)


class TestLifecycle:
    def test_starts_idle(self, session):
        assert session.state is State.IDLE
        assert session.player.on_ground is True

    def test_start_begins_playing(self, session, recorder):
        assert session.start(0) is True

        assert session.state is State.PLAYING
        assert session.score == 0
        assert recorder.starts == 1

    def test_start_is_ignored_once_playing(self, session, recorder):
        session.start(0)

        assert session.start(100) is False
        assert recorder.starts == 1

    def test_restart_is_ignored_before_game_over(self, session):
        assert session.restart(0) is False
        assert session.state is State.IDLE

        session.start(0)
        assert session.restart(0) is False
        assert session.state is State.PLAYING

    def test_step_does_nothing_when_idle(self, session):
        session.obstacles.append(Obstacle(x=500, y=600, width=30, height=60, speed=4))

        session.step(16)

        assert session.cloud_offset == 0
        assert session.obstacles[0].x == 500

    def test_step_advances_cloud_offset(self, session):
        session.start(0)
        for i in range(5):
            session.step(16 * i)
        assert session.cloud_offset == 5


class TestCoins:
    def test_collecting_coin_scores_and_removes_it(self, session, recorder):
        session.start(0)
        coin = coin_on_player()
        session.coins.append(coin)

        session.step(16)

        assert session.score == COIN_VALUE
        assert recorder.scores == [10]
        assert session.coins == []
        assert coin.collected is True
        assert session.state is State.PLAYING

    def test_each_coin_fires_score_once(self, session, recorder):
        session.start(0)
        session.coins.append(coin_on_player())
        session.step(16)
        session.coins.append(coin_on_player())
        session.step(32)
        session.step(48)

        assert recorder.scores == [10, 20]

    def test_out_of_reach_coin_is_kept(self, session, recorder):
        session.start(0)
        session.coins.append(Coin(x=400.0, y=300.0, speed=4.0))

        session.step(16)

        assert session.coins[0].x == 396.0
        assert recorder.scores == []

    def test_coin_pruned_only_after_leaving_screen(self, session):
        session.start(0)
        coin = Coin(x=-11.0, y=100.0, speed=4.0, radius=15.0)
        session.coins.append(coin)

        session.step(16)
        assert session.coins == [coin]  # right edge exactly 0

        session.step(32)
        assert session.coins == []


class TestObstacles:
    def test_collision_ends_the_run(self, session, recorder):
        session.start(0)
        session.coins.append(coin_on_player())
        session.step(16)
        assert session.score == 10

        session.obstacles.append(obstacle_on_player())
        session.step(32)

        assert session.state is State.OVER
        assert recorder.game_overs == [10]
        assert session.final_score == 10
        assert session.best_score == 10
        assert session.obstacles == []
        assert session.coins == []

    def test_collision_skips_remaining_entities(self, session, recorder):
        session.start(0)
        later = Obstacle(x=600.0, y=600.0, width=30.0, height=60.0, speed=4.0)
        session.obstacles.extend([obstacle_on_player(), later])
        session.coins.append(coin_on_player())

        session.step(16)

        assert later.x == 600.0
        assert recorder.scores == []
        assert session.score == 0

    def test_steps_after_game_over_are_ignored(self, session, recorder):
        session.start(0)
        session.obstacles.append(obstacle_on_player())
        session.step(16)
        offset = session.cloud_offset

        for t in range(32, 500, 16):
            session.step(t)

        assert session.cloud_offset == offset
        assert recorder.game_overs == [0]
        assert session.request_jump() is False

    def test_restart_resets_run_and_keeps_best(self, session, recorder):
        session.start(0)
        session.coins.append(coin_on_player())
        session.step(16)
        session.obstacles.append(obstacle_on_player())
        session.step(32)

        assert session.restart(1000) is True

        assert session.state is State.PLAYING
        assert session.score == 0
        assert session.best_score == 10
        assert session.cloud_offset == 0
        assert session.player.y == 620.0
        assert session.player.velocity_y == 0.0
        assert recorder.starts == 2

    def test_best_score_never_drops(self, session):
        session.start(0)
        session.coins.append(coin_on_player())
        session.step(16)
        session.obstacles.append(obstacle_on_player())
        session.step(32)

        session.restart(100)
        session.obstacles.append(obstacle_on_player())
        session.step(116)

        assert session.final_score == 0
        assert session.best_score == 10

    def test_obstacle_pruned_only_after_leaving_screen(self, session):
        session.start(0)
        obs = Obstacle(x=-26.0, y=600.0, width=30.0, height=60.0, speed=4.0)
        session.obstacles.append(obs)

        session.step(16)
        assert session.obstacles == [obs]  # right edge exactly 0

        session.step(32)
        assert session.obstacles == []


class TestJump:
    def test_jump_ignored_when_idle(self, session, recorder):
        assert session.request_jump() is False
        assert session.player.velocity_y == 0.0
        assert recorder.jumps == 0

    def test_jump_applies_immediately(self, session, recorder):
        session.start(0)

        assert session.request_jump() is True
        assert session.player.velocity_y == -14.0
        assert recorder.jumps == 1

        session.step(16)
        assert session.player.y < 620.0

    def test_no_double_jump(self, session, recorder):
        session.start(0)
        session.request_jump()
        session.step(16)

        assert session.request_jump() is False
        assert recorder.jumps == 1

    def test_jump_clears_obstacle(self, session):
        session.start(0)
        # Reaches the player after ~40 ticks, while the player is airborne
        session.obstacles.append(Obstacle(x=300.0, y=620.0, width=30.0, height=40.0, speed=5.0))

        for tick in range(120):
            if tick == 25:
                session.request_jump()
            session.step(tick * 16)

        assert session.state is State.PLAYING
        assert session.obstacles == []


def test_player_never_penetrates_ground(session):
    session.start(0)
    for tick in range(600):
        if tick % 37 == 0:
            session.request_jump()
        session.step(tick * 16)
        assert session.player.y + session.player.height <= session.area.ground_y


def test_resize_moves_ground_and_spawn_edge(session):
    session.resize(1200, 900)

    assert session.area.width == 1200
    assert session.area.ground_y == 800


def test_resize_regrounds_player_outside_a_run(session):
    session.resize(1200, 900)
    assert session.player.y == 760.0
    assert session.player.on_ground is True

    session.start(0)
    session.obstacles.append(Obstacle(x=84.0, y=740.0, width=30.0, height=60.0, speed=4.0))
    session.step(16)
    assert session.state is State.OVER

    session.resize(800, 500)
    assert session.player.y + session.player.height == session.area.ground_y


def test_resize_during_run_leaves_player_to_physics(session):
    session.start(0)
    session.request_jump()
    session.step(16)
    airborne_y = session.player.y

    session.resize(800, 900)

    assert session.player.y == airborne_y
    assert session.player.on_ground is False


def test_collecting_a_collected_coin_is_an_invariant_violation(session):
    session.start(0)
    session.coins.append(Coin(x=104.0, y=640.0, speed=4.0, collected=True))

    with pytest.raises(AssertionError, match="collected twice"):
        session.step(16)


def test_spawned_entities_join_live_sets(area, recorder):
    # obstacle width, height, interval; coin chance, y, interval
    rng = ScriptedRandom([0.0, 0.0, 0.5, 0.0, 0.0, 0.5])
    session = GameSession(area=area, spawn_policy=TimedIntervalPolicy(rng), hooks=recorder.hooks())
    session.start(0)

    session.step(1501)

    assert len(session.obstacles) == 1
    assert session.obstacles[0].x == 796.0  # spawned at the edge, then advanced
    assert len(session.coins) == 1


@pytest.mark.parametrize("policy_cls", [TimedIntervalPolicy, ProbabilityPolicy])
def test_long_run_score_invariants(policy_cls):
    recorder = HookRecorder()
    session = GameSession(
        area=PlayArea(width=960, height=540),
        spawn_policy=policy_cls(random.Random(1234)),
        hooks=recorder.hooks(),
    )
    session.start(0)

    last_score = 0
    for tick in range(5000):
        now = tick * 1000 / 60
        if session.state is State.OVER:
            break
        if tick % 45 == 0:
            session.request_jump()
        session.step(now)

        assert session.score >= last_score
        assert session.score % COIN_VALUE == 0
        last_score = session.score

        for obs in session.obstacles:
            assert obs.x + obs.width >= 0
        for coin in session.coins:
            assert coin.collected is False

    assert recorder.scores == list(range(10, last_score + 1, 10))
    assert len(recorder.game_overs) == (1 if session.state is State.OVER else 0)
