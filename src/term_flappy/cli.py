"""
cli.py: Command line entry point.
"""

import argparse
import logging
import random
import sys
from typing import List, Optional

from .config import GameConfig
from .constants import SCREEN_WIDTH, SCREEN_HEIGHT, TICK_RATE
from .exceptions import ConfigError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="term-flappy",
        description="Side-scrolling jump-over-the-blocks game for the terminal.")
    parser.add_argument("--frontend", choices=("terminal", "window"), default="terminal",
                        help="draw in this terminal (curses) or in a pygame window")
    parser.add_argument("--width", type=int, default=SCREEN_WIDTH,
                        help="grid columns for the window front end")
    parser.add_argument("--height", type=int, default=SCREEN_HEIGHT,
                        help="grid rows for the window front end")
    parser.add_argument("--tick-rate", type=int, default=TICK_RATE,
                        help="frames per second")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for obstacle generation")
    parser.add_argument("--log-level", default="WARNING",
                        choices=("DEBUG", "INFO", "WARNING", "ERROR"))
    parser.add_argument("--log-file", default=None,
                        help="write log records here instead of stderr")
    return parser


def configure_logging(level: str, log_file: Optional[str], frontend: str):
    fmt = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    if log_file:
        logging.basicConfig(level=level, format=fmt, filename=log_file)
    elif frontend == "terminal":
        # Anything written to stderr would land on top of the curses screen
        logging.getLogger().addHandler(logging.NullHandler())
    else:
        logging.basicConfig(level=level, format=fmt)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, args.log_file, args.frontend)

    config = GameConfig(screen_width=args.width, screen_height=args.height,
                        tick_rate=args.tick_rate)
    rng = random.Random(args.seed)

    try:
        if args.frontend == "window":
            from .game_engine import GameEngine
            from .window_client import WindowClient
            WindowClient(GameEngine(config=config, rng=rng)).run()
        else:
            from .terminal_client import run_terminal
            run_terminal(config, rng)
    except ConfigError as e:
        logger.error("Cannot start: %s", e)
        print(f"term-flappy: {e}", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
