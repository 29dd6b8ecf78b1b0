# Area: Game Loop
"""
guessing_game.secret — Secret value selection
=============================================

Draws the secret number from an injected randomness source. Any
object with a ``randint(a, b)`` method works; ``random.Random`` is the
default and is seeded by the operating system unless a seed is given.
"""

import logging
import random
from typing import Any, Optional

from .errors import InitializationError

logger = logging.getLogger("guessing_game.secret")

SECRET_MIN = 1
SECRET_MAX = 100


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Create the default randomness source."""
    return random.Random(seed)


def initialize(rng: Any) -> int:
    """
    Draw the secret value uniformly from [SECRET_MIN, SECRET_MAX].

    Raises:
        InitializationError: If the source fails or returns a value
            outside the range
    """
    try:
        value = rng.randint(SECRET_MIN, SECRET_MAX)
    except Exception as e:
        raise InitializationError(
            "Randomness source unavailable", cause=e
        ) from e

    if not isinstance(value, int) or not SECRET_MIN <= value <= SECRET_MAX:
        raise InitializationError(
            f"Randomness source returned {value!r}, "
            f"expected an int in [{SECRET_MIN}, {SECRET_MAX}]"
        )

    logger.debug(f"Secret drawn: {value}")
    return value
