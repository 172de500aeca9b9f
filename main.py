#!/usr/bin/env python3
"""Entry point for the console adventure game."""

from __future__ import annotations

import argparse
import logging
import sys

from audio import SoundPlayer
from game import FAREWELL_TEXT, Game
from settings import Settings
from ui import ConsoleUI
from validate import problems, summary
from world import build_default_world


LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: int = logging.WARNING) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Console adventure game")
    parser.add_argument(
        "--mute",
        action="store_true",
        help="Never open the audio device.",
    )
    parser.add_argument(
        "--volume",
        type=float,
        default=None,
        help="Tone volume between 0.0 and 1.0 (default 0.8).",
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Do not clear the terminal between locations.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level for stderr diagnostics (default WARNING).",
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Print a report on the location graph and exit.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    settings = Settings.from_args(args)
    configure_logging(settings.log_level_value)

    world, start = build_default_world()
    if args.validate:
        print(summary(world, start))
        return 1 if problems(world, start) else 0

    sounds = SoundPlayer(
        volume=settings.volume,
        enabled=not settings.muted,
        sample_rate=settings.sample_rate,
    )
    game = Game(world, start, sounds, ConsoleUI(clear_screen=settings.clear_screen))
    try:
        game.start()
    except KeyboardInterrupt:
        print(f"\n{FAREWELL_TEXT}")
        sounds.cleanup()
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
