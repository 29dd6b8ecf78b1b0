"""
guessing_game — Guess the Number
================================

An interactive command-line game: a secret number between 1 and 100
is drawn, the player types guesses on stdin and is told whether each
one is too small, too big or correct.

Quick Start:
    from guessing_game import GameLoop
    GameLoop().run()

Deterministic play (tests, demos):
    import io, random
    from guessing_game import GameLoop
    game = GameLoop(rng=random.Random(7), stdin=io.StringIO("50\\n"))
    game.step("50\\n")

Command line:
    python -m guessing_game --help
"""

from .game_loop import GameLoop
from .outcome import Outcome, compare
from .parsing import parse_guess, GUESS_MAX
from .console import read_guess
from .secret import initialize, SECRET_MIN, SECRET_MAX
from .enums import GameState, GameEvent
from .state_machine import GameStateMachine
from .config import GameConfig
from .errors import (
    GuessingGameError,
    FatalGameError,
    InitializationError,
    InputStreamError,
    ParseError,
)

__version__ = "1.0.0"

__all__ = [
    "GameLoop",
    "Outcome",
    "compare",
    "parse_guess",
    "GUESS_MAX",
    "read_guess",
    "initialize",
    "SECRET_MIN",
    "SECRET_MAX",
    "GameState",
    "GameEvent",
    "GameStateMachine",
    "GameConfig",
    "GuessingGameError",
    "FatalGameError",
    "InitializationError",
    "InputStreamError",
    "ParseError",
]
