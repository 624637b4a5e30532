"""
Run state machine for a game session.

States:
    IDLE: Title screen, waiting for the first start
    PLAYING: Simulation is stepping, jump input is live
    OVER: Simulation stopped, waiting for restart
"""

from enum import Enum, auto
import logging

logger = logging.getLogger(__name__)


class State(Enum):
    """Session run states."""
    IDLE = auto()
    PLAYING = auto()
    OVER = auto()


class StateMachine:
    """
    Tracks the session run state and validates transitions.

    Requests for transitions outside VALID_TRANSITIONS are ignored
    rather than raised, so stray input can never corrupt a run.
    """

    VALID_TRANSITIONS: list[tuple[State, State]] = [
        (State.IDLE, State.PLAYING),   # Start
        (State.PLAYING, State.OVER),   # Fatal collision
        (State.OVER, State.PLAYING),   # Restart
    ]

    def __init__(self, initial_state: State = State.IDLE) -> None:
        self._state = initial_state
        self._valid_transitions = set(self.VALID_TRANSITIONS)
        logger.debug(f"StateMachine initialized with state: {initial_state.name}")

    @property
    def state(self) -> State:
        """Get current state."""
        return self._state

    def can_transition(self, to_state: State) -> bool:
        """Check if transition to given state is valid."""
        return (self._state, to_state) in self._valid_transitions

    def transition(self, to_state: State) -> bool:
        """
        Attempt to transition to a new state.

        Args:
            to_state: Target state

        Returns:
            True if transition successful, False if it was ignored
        """
        if not self.can_transition(to_state):
            logger.debug(
                f"Ignored transition: {self._state.name} -> {to_state.name}"
            )
            return False

        old_state = self._state
        self._state = to_state

        logger.info(f"State transition: {old_state.name} -> {to_state.name}")

        return True

