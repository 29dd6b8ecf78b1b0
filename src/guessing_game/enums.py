# Area: Game Loop
"""
guessing_game.enums — Game State Machine Enums
==============================================

Defines the states and events for the game loop state machine.
"""

from enum import Enum


class GameState(Enum):
    """
    States of the game loop state machine.

    State transitions:
    PLAYING -> PLAYING (on LINE_READ, PARSE_OK, PARSE_FAIL)
    PLAYING -> PLAYING (on GUESS_LESS or GUESS_GREATER)
    PLAYING -> WON (on GUESS_EQUAL)
    WON is terminal.
    """
    PLAYING = "PLAYING"
    WON = "WON"


class GameEvent(Enum):
    """
    Events that drive the game loop state machine.

    Events are triggered by:
    - LINE_READ: a line was read from the input stream
    - PARSE_OK: the line parsed into a guess
    - PARSE_FAIL: the line was rejected (recoverable)
    - GUESS_LESS: guess compared below the secret
    - GUESS_GREATER: guess compared above the secret
    - GUESS_EQUAL: guess matched the secret
    """
    LINE_READ = "LINE_READ"
    PARSE_OK = "PARSE_OK"
    PARSE_FAIL = "PARSE_FAIL"
    GUESS_LESS = "GUESS_LESS"
    GUESS_GREATER = "GUESS_GREATER"
    GUESS_EQUAL = "GUESS_EQUAL"
