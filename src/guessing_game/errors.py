"""
guessing_game.errors — Custom exception classes
================================================

Defines the exception hierarchy for the game loop.

Two kinds of failure exist:
- fatal errors (InitializationError, InputStreamError) end the process
  and know how to render themselves as a structured error block;
- ParseError is recoverable and is swallowed at the loop boundary.
"""

from __future__ import annotations
from typing import Optional

from .error_formatter import format_error_block


class GuessingGameError(Exception):
    """Base exception for all guessing_game errors."""
    pass


class FatalGameError(GuessingGameError):
    """Base for errors that terminate the process."""

    error_type = "FATAL"
    operation = "unknown"

    def __init__(self, detail: str, cause: Optional[BaseException] = None):
        self.detail = detail
        self.cause = cause
        super().__init__(detail)

    def format_error_log(self) -> str:
        return format_error_block(
            error_type=self.error_type,
            operation=self.operation,
            detail=self.detail,
            cause=self.cause,
        )


class InitializationError(FatalGameError):
    """Raised when the secret value cannot be drawn."""

    error_type = "INITIALIZATION_ERROR"
    operation = "initialize"


class InputStreamError(FatalGameError):
    """Raised when no line can be read from the input stream."""

    error_type = "INPUT_STREAM_ERROR"
    operation = "read_guess"


class ParseError(GuessingGameError):
    """Raised when a line is not a valid unsigned 32-bit integer."""

    def __init__(self, raw_line: str, reason: str):
        self.raw_line = raw_line
        self.reason = reason
        super().__init__(f"Cannot parse guess {raw_line!r}: {reason}")
