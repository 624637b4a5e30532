"""Runner mode - one button: start, jump, restart."""

import random
import logging
from typing import List

import numpy as np
from numpy.typing import NDArray

from coinrunner.core.events import Event, EventType
from coinrunner.core.state import State
from coinrunner.game.entities import PlayArea
from coinrunner.game.session import GameSession, SessionHooks
from coinrunner.game.spawner import make_spawn_policy
from coinrunner.graphics.scene import render_session
from coinrunner.modes.base import BaseMode, ModeContext

logger = logging.getLogger(__name__)


class RunnerMode(BaseMode):
    name = "runner"
    display_name = "COIN RUNNER"

    def __init__(self, context: ModeContext, rng: random.Random | None = None):
        super().__init__(context)
        rng = rng or random.Random()
        self.session = GameSession(
            area=PlayArea(width=context.width, height=context.height),
            spawn_policy=make_spawn_policy(context.settings.spawn_policy, rng),
            hooks=SessionHooks(
                on_score_changed=self._on_score_changed,
                on_game_over=self._on_game_over,
                on_jump_performed=self._on_jump_performed,
                on_game_started=self._on_game_started,
            ),
        )

    def on_enter(self) -> None:
        pass

    def on_update(self, now_ms: float) -> None:
        self.session.step(now_ms)

    def on_input(self, event: Event) -> bool:
        if event.type == EventType.BUTTON_PRESS:
            return self._press()

        if event.type == EventType.RESIZE:
            self.session.resize(event.data["width"], event.data["height"])
            return True

        return False

    def _press(self) -> bool:
        state = self.session.state
        if state is State.IDLE:
            return self.session.start(self.context.clock())
        if state is State.PLAYING:
            return self.session.request_jump()
        return self.session.restart(self.context.clock())

    # Session hooks

    def _on_score_changed(self, score: int) -> None:
        if self.context.audio:
            self.context.audio.play_coin()

    def _on_game_over(self, final_score: int) -> None:
        if self.context.audio:
            self.context.audio.play_game_over()

    def _on_jump_performed(self) -> None:
        if self.context.audio:
            self.context.audio.play_jump()

    def _on_game_started(self) -> None:
        logger.debug(f"Runner started with {self.session.spawn_policy.name} spawning")

    # Output

    def render_main(self, buffer: NDArray[np.uint8]) -> None:
        render_session(buffer, self.session)

    def get_hud_lines(self) -> List[str]:
        state = self.session.state
        if state is State.IDLE:
            return [self.display_name, "Press SPACE or tap to play"]
        if state is State.PLAYING:
            return [f"Score: {self.session.score}"]
        return [
            "GAME OVER",
            f"Score: {self.session.final_score}",
            f"Best: {self.session.best_score}",
            "Press SPACE or tap to restart",
        ]
