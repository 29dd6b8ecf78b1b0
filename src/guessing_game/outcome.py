# Area: Game Loop
"""
guessing_game.outcome — Comparison result
=========================================

The three possible results of comparing a guess with the secret.
"""

from enum import Enum

from .enums import GameEvent


class Outcome(Enum):
    """Result of comparing a parsed guess against the secret value."""
    LESS = "LESS"
    GREATER = "GREATER"
    EQUAL = "EQUAL"

    @property
    def message(self) -> str:
        return OUTCOME_MESSAGES[self]

    @property
    def event(self) -> GameEvent:
        return OUTCOME_EVENTS[self]


OUTCOME_MESSAGES = {
    Outcome.LESS: "Too small!",
    Outcome.GREATER: "Too big!",
    Outcome.EQUAL: "You win!",
}

OUTCOME_EVENTS = {
    Outcome.LESS: GameEvent.GUESS_LESS,
    Outcome.GREATER: GameEvent.GUESS_GREATER,
    Outcome.EQUAL: GameEvent.GUESS_EQUAL,
}


def compare(guess: int, secret: int) -> Outcome:
    """Classify ``guess`` relative to ``secret``."""
    if guess < secret:
        return Outcome.LESS
    if guess > secret:
        return Outcome.GREATER
    return Outcome.EQUAL
