"""Command-line entry point that starts the game."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from errorreboot.main_loop import MainLoop
from errorreboot.render import PygameSurface

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="errorreboot", description="Error: Reboot")
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="ERROR",
        help="lowest level of messages written to standard output",
    )
    return parser


def _configure_logging(level: str) -> None:
    logging.basicConfig(stream=sys.stdout, level=level, force=True)
    logging.getLogger("errorreboot.render").setLevel(logging.INFO)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the game and return once its window has closed."""
    args = _build_parser().parse_args(argv)
    _configure_logging(args.log_level)
    MainLoop().run(PygameSurface)
    return 0


if __name__ == "__main__":
    sys.exit(main())