# Area: Game Loop
"""
guessing_game.state_machine — Game State Machine
================================================

Tracks whether the game is still being played or has been won.
Transitions are driven by discrete events emitted by the game loop.
"""

import logging

from .enums import GameState, GameEvent

logger = logging.getLogger("guessing_game.state_machine")


# Valid state transitions: {current_state: {event: next_state}}
TRANSITIONS = {
    GameState.PLAYING: {
        GameEvent.LINE_READ: GameState.PLAYING,
        GameEvent.PARSE_OK: GameState.PLAYING,
        GameEvent.PARSE_FAIL: GameState.PLAYING,
        GameEvent.GUESS_LESS: GameState.PLAYING,
        GameEvent.GUESS_GREATER: GameState.PLAYING,
        GameEvent.GUESS_EQUAL: GameState.WON,
    },
    GameState.WON: {},
}


class GameStateMachine:
    """
    State machine for the game loop.

    Attributes:
        current_state: The current state of the state machine
    """

    def __init__(self):
        """Initialize state machine in PLAYING."""
        self.current_state = GameState.PLAYING

    @property
    def is_finished(self) -> bool:
        return self.current_state == GameState.WON

    def can_transition(self, event: GameEvent) -> bool:
        """
        Check if a transition is valid from current state.

        Args:
            event: The event to check

        Returns:
            True if the transition is valid, False otherwise
        """
        valid_transitions = TRANSITIONS.get(self.current_state, {})
        return event in valid_transitions

    def transition(self, event: GameEvent) -> GameState:
        """
        Execute a state transition.

        Args:
            event: The event triggering the transition

        Returns:
            The new state after transition

        Raises:
            ValueError: If the transition is not valid
        """
        if not self.can_transition(event):
            raise ValueError(
                f"Invalid transition: {event.value} from {self.current_state.value}"
            )

        next_state = TRANSITIONS[self.current_state][event]
        if next_state != self.current_state:
            logger.debug(
                f"State: {self.current_state.value} → {next_state.value} ({event.value})"
            )
        self.current_state = next_state
        return next_state
