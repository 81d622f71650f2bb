"""
State machine for a DINORUN session.

States:
    READY: Fresh board, waiting for the opening jump
    PLAYING: Game loop running, score and speed advancing
    GAME_OVER: Actor hit an obstacle, waiting for a restart
"""

from enum import Enum, auto
from typing import Callable
import logging

logger = logging.getLogger(__name__)


class GameState(Enum):
    """Session states."""
    READY = auto()
    PLAYING = auto()
    GAME_OVER = auto()


StateListener = Callable[[GameState, GameState], None]


class StateMachine:
    """
    Tracks the session state and validates transitions.

    Exactly one state is active at a time. Listeners are notified
    after every successful transition with (old_state, new_state).
    """

    VALID_TRANSITIONS: list[tuple[GameState, GameState]] = [
        # Opening jump
        (GameState.READY, GameState.PLAYING),

        # Collision
        (GameState.PLAYING, GameState.GAME_OVER),

        # Restart after a full reset
        (GameState.GAME_OVER, GameState.READY),
    ]

    def __init__(self, initial_state: GameState = GameState.READY) -> None:
        self._state = initial_state
        self._listeners: list[StateListener] = []
        self._valid_transitions = set(self.VALID_TRANSITIONS)
        logger.debug(f"StateMachine initialized with state: {initial_state.name}")

    @property
    def state(self) -> GameState:
        """Get current state."""
        return self._state

    def can_transition(self, to_state: GameState) -> bool:
        """Check if transition to given state is valid."""
        return (self._state, to_state) in self._valid_transitions

    def transition(self, to_state: GameState) -> bool:
        """
        Attempt to transition to a new state.

        Args:
            to_state: Target state

        Returns:
            True if transition successful, False otherwise
        """
        if not self.can_transition(to_state):
            logger.warning(
                f"Invalid transition: {self._state.name} -> {to_state.name}"
            )
            return False

        old_state = self._state
        self._state = to_state

        logger.info(f"State transition: {old_state.name} -> {to_state.name}")

        for listener in list(self._listeners):
            try:
                listener(old_state, to_state)
            except Exception as e:
                logger.error(f"Error in state listener: {e}")

        return True

    def add_listener(self, callback: StateListener) -> None:
        """Add a state change listener."""
        self._listeners.append(callback)

    def remove_listener(self, callback: StateListener) -> None:
        """Remove a state change listener."""
        if callback in self._listeners:
            self._listeners.remove(callback)
