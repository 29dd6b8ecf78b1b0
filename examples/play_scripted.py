"""
play_scripted.py — Play a game WITHOUT a keyboard
==================================================

Feeds a fixed list of guesses to the game loop through in-memory
streams and prints the transcript. A bisecting player always wins
within seven guesses.

Run with:  python play_scripted.py
"""

import io
import random

from guessing_game import GameLoop, Outcome, SECRET_MIN, SECRET_MAX


def bisect_guesses(secret: int) -> list:
    """Guesses a binary-searching player would make."""
    low, high = SECRET_MIN, SECRET_MAX
    guesses = []
    while True:
        guess = (low + high) // 2
        guesses.append(guess)
        if guess < secret:
            low = guess + 1
        elif guess > secret:
            high = guess - 1
        else:
            return guesses


def main():
    secret = random.randint(SECRET_MIN, SECRET_MAX)

    class KnownSecret:
        def randint(self, a, b):
            return secret

    lines = ["not a number\n"] + [f"{g}\n" for g in bisect_guesses(secret)]
    stdout = io.StringIO()
    game = GameLoop(rng=KnownSecret(), stdin=io.StringIO("".join(lines)), stdout=stdout)
    game.run()

    print(stdout.getvalue(), end="")
    print(f"-- won in {len(lines) - 1} guesses ({Outcome.EQUAL.message})")


if __name__ == "__main__":
    main()
