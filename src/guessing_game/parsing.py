# Area: Game Loop
"""
guessing_game.parsing — Guess parsing
=====================================

Turns a raw input line into a guess. Accepted input is an unsigned
base-10 integer that fits in 32 bits, optionally prefixed by a single
``+``, surrounded by any amount of whitespace.
"""

import re

from .errors import ParseError

GUESS_MAX = 2**32 - 1

# ASCII digits only; int() alone would also take "1_000" and "٤٢".
_UNSIGNED_RE = re.compile(r"\+?[0-9]+")

# Unicode White_Space. str.strip() would also drop U+001C..U+001F.
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def parse_guess(raw_line: str) -> int:
    """
    Parse a raw line into a guess.

    Args:
        raw_line: The line as read, line terminator included

    Returns:
        The guess as a non-negative int

    Raises:
        ParseError: If the trimmed line is empty, not an unsigned
            integer literal, or larger than GUESS_MAX
    """
    text = raw_line.strip(WHITESPACE)
    if not text:
        raise ParseError(raw_line, "empty input")
    if not _UNSIGNED_RE.fullmatch(text):
        raise ParseError(raw_line, "invalid digit")

    value = int(text)
    if value > GUESS_MAX:
        raise ParseError(raw_line, f"number too large (max {GUESS_MAX})")
    return value
