# Area: Shared
"""
guessing_game.cli — Command-line interface
==========================================

Provides the CLI entry point for playing the game.

Usage:
    python -m guessing_game                         # Play
    python -m guessing_game --log-level DEBUG       # Play with diagnostics
    python -m guessing_game --config config.json    # Settings from file

Settings can also come from environment variables (or a .env file):
    GUESSING_GAME_LOG_LEVEL, GUESSING_GAME_LOG_FILE,
    GUESSING_GAME_SEED, GUESSING_GAME_REVEAL_SECRET

Exit codes:
    0    the player won
    1    fatal error (randomness or input stream unavailable)
    2    invalid arguments or configuration
    130  interrupted
"""

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from .config import LOG_LEVELS, GameConfig, build_config
from .errors import FatalGameError
from .game_loop import GameLoop
from .secret import make_rng
from ._shared.logging_config import setup_logging, log_and_terminate

logger = logging.getLogger("guessing_game.cli")

EXIT_OK = 0
EXIT_CONFIG_ERROR = 2
EXIT_INTERRUPTED = 130


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="guessing-game",
        description="Guess the number between 1 and 100.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m guessing_game
  python -m guessing_game --seed 7 --reveal-secret
  GUESSING_GAME_LOG_LEVEL=INFO python -m guessing_game
        """,
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to JSON config file",
    )

    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Diagnostic log level on stderr (default: WARNING)",
    )

    parser.add_argument(
        "--log-file",
        type=str,
        help="Also write JSON log records to this file",
    )

    parser.add_argument(
        "--seed",
        type=int,
        help="Seed the random number generator for a reproducible game",
    )

    parser.add_argument(
        "--reveal-secret",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Print the secret number at the start (debugging); --no-reveal-secret turns it off",
    )

    return parser.parse_args(argv)


def load_config(args: argparse.Namespace) -> GameConfig:
    """Build the config from file, environment and CLI flags."""
    return build_config(
        config_path=args.config,
        overrides={
            "log_level": args.log_level,
            "log_file": args.log_file,
            "seed": args.seed,
            "reveal_secret": args.reveal_secret,
        },
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)

    try:
        config = load_config(args)
    except (OSError, ValueError, ValidationError) as e:
        print(f"Error: Invalid configuration: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    setup_logging(log_file_path=config.log_file, level=config.logging_level)
    logger.debug(f"Config: {config.model_dump()}")

    try:
        game = GameLoop(
            rng=make_rng(config.seed),
            reveal_secret=config.reveal_secret,
        )
        game.run()
    except FatalGameError as e:
        log_and_terminate(e)
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return EXIT_INTERRUPTED

    return EXIT_OK


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
