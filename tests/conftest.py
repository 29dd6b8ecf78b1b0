# Area: Test Fixtures
"""Shared fixtures for guessing_game tests."""

import logging

import pytest


class FixedRng:
    """Randomness source that always returns the same value."""

    def __init__(self, value):
        self.value = value
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        return self.value


@pytest.fixture
def fixed_rng():
    """Factory for FixedRng instances."""
    return FixedRng


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by setup_logging so they don't leak across tests."""
    yield
    pkg_logger = logging.getLogger("guessing_game")
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()
    pkg_logger.setLevel(logging.NOTSET)
    pkg_logger.propagate = True


GAME_ENV_KEYS = (
    "GUESSING_GAME_LOG_LEVEL",
    "GUESSING_GAME_LOG_FILE",
    "GUESSING_GAME_SEED",
    "GUESSING_GAME_REVEAL_SECRET",
)


@pytest.fixture
def game_env(monkeypatch):
    """Remove GUESSING_GAME_* variables; anything set during the test is undone."""
    for key in GAME_ENV_KEYS:
        # setenv first so teardown deletes values a .env file adds later
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    return monkeypatch


@pytest.fixture
def clean_env(game_env):
    """Remove GUESSING_GAME_* variables and stop .env loading."""
    game_env.setattr("guessing_game.config.load_dotenv", lambda *args, **kwargs: False)
    return game_env
