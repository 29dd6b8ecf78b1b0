# Area: Game Loop
"""Line input from the player's stream."""

from typing import TextIO

from .errors import InputStreamError


def read_guess(stream: TextIO) -> str:
    """
    Read exactly one line from ``stream``.

    The line terminator is kept. End of input and I/O failures are
    fatal and raise InputStreamError.
    """
    try:
        line = stream.readline()
    except (OSError, ValueError) as e:
        # ValueError: I/O operation on closed file
        raise InputStreamError("Failed to read line", cause=e) from e

    if not line:
        raise InputStreamError("Failed to read line: end of input")
    return line
