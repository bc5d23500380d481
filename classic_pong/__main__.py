"""
Command line entry point: python -m classic_pong
"""

import argparse
import logging
import sys

from pydantic import ValidationError

from classic_pong.gui.game_app import main as run_game
from classic_pong.utils.config import KEYBOARD_LAYOUTS, load_config_from_file
from classic_pong.utils.logging_config import setup_logging

logger = logging.getLogger("classic_pong")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Two-player Pong")
    parser.add_argument("--seed", type=int, default=None, help="Seed for ball directions")
    parser.add_argument("--config", type=str, default=None, help="JSON configuration file")
    parser.add_argument(
        "--layout",
        type=str,
        default=None,
        choices=sorted(KEYBOARD_LAYOUTS),
        help="Keyboard layout for the left player",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    parser.add_argument("--log-file", type=str, default=None, help="Also write logs to this file")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    if args.config:
        try:
            load_config_from_file(args.config)
        except (FileNotFoundError, ValueError, ValidationError) as e:
            logger.error("Invalid configuration: %s", e)
            return 1

    return run_game(seed=args.seed, layout_name=args.layout)


if __name__ == "__main__":
    sys.exit(main())
