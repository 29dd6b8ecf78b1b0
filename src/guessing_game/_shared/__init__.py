# Area: Shared
"""
Shared utilities used across the package.

This package contains:
- Logging configuration
- Fatal error logging and termination
"""

from .logging_config import (
    setup_logging,
    log_and_terminate,
    log_fatal_error,
)

__all__ = [
    "setup_logging",
    "log_and_terminate",
    "log_fatal_error",
]
