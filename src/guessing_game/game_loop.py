# Area: Game Loop
"""
guessing_game.game_loop — Main game loop
========================================

The GameLoop owns the secret value and drives the read, parse,
compare and respond cycle until the player guesses correctly.

Input and output streams and the randomness source are injected, so
the loop can be run against in-memory streams and a fixed secret.
"""

from __future__ import annotations
import logging
import sys
from typing import Any, Optional, TextIO

from .console import read_guess
from .enums import GameEvent, GameState
from .errors import ParseError
from .outcome import Outcome, compare
from .parsing import parse_guess
from .secret import initialize, make_rng
from .state_machine import GameStateMachine

logger = logging.getLogger("guessing_game.game_loop")

BANNER = "Guess the number!"
PROMPT = "Please input your guess."


class GameLoop:
    """
    One game of guess-the-number.

    Usage
    -----
        from guessing_game import GameLoop

        GameLoop().run()

    Parameters
    ----------
    rng : object, optional
        Randomness source with a ``randint(a, b)`` method. Defaults to
        an OS-seeded ``random.Random``.
    stdin, stdout : TextIO, optional
        Streams to read guesses from and write game text to. Default to
        ``sys.stdin`` and ``sys.stdout``.
    reveal_secret : bool
        Print the secret right after the banner (debugging aid).
    """

    def __init__(
        self,
        rng: Any = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        reveal_secret: bool = False,
    ):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.reveal_secret = reveal_secret
        self.state_machine = GameStateMachine()
        self._secret = initialize(rng if rng is not None else make_rng())

    @property
    def secret(self) -> int:
        return self._secret

    @property
    def state(self) -> GameState:
        return self.state_machine.current_state

    # ── Main loop ─────────────────────────────────────────────

    def run(self) -> GameState:
        """
        Play until the secret is guessed. Blocks on input.

        Raises:
            InputStreamError: If the input stream fails or ends first
        """
        self._write(BANNER)
        if self.reveal_secret:
            self._write(f"The secret number is: {self._secret}")

        while not self.state_machine.is_finished:
            self._write(PROMPT)
            raw_line = read_guess(self.stdin)
            self.step(raw_line)

        logger.info("Game won")
        return self.state

    def step(self, raw_line: str) -> Optional[Outcome]:
        """
        Process one line of input.

        Returns the outcome, or None if the line was rejected. Rejected
        lines produce no output.
        """
        self.state_machine.transition(GameEvent.LINE_READ)
        try:
            guess = parse_guess(raw_line)
        except ParseError as e:
            logger.debug(str(e))
            self.state_machine.transition(GameEvent.PARSE_FAIL)
            return None
        self.state_machine.transition(GameEvent.PARSE_OK)

        self._write(f"You guessed: {guess}")
        outcome = compare(guess, self._secret)
        logger.info(f"Guess {guess}: {outcome.value}")
        self.respond(outcome)
        return outcome

    def respond(self, outcome: Outcome) -> None:
        """Write the outcome line and advance the state machine."""
        self._write(outcome.message)
        self.state_machine.transition(outcome.event)

    def _write(self, text: str) -> None:
        print(text, file=self.stdout, flush=True)
