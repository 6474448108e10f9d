"""Executable entrypoint for Le Pong."""

from __future__ import annotations

from pathlib import Path
import argparse
import logging
import sys
import pygame

from .audio import AssetLoadError
from .game import PongGame

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="lepong", description="Two-player local Pong.")
    parser.add_argument("--fullscreen", action="store_true", help="start in fullscreen mode")
    parser.add_argument("--no-fps", action="store_true", help="hide the FPS overlay")
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Launch the game."""
    args = parse_args(argv)
    setup_logging(args.debug)
    root = Path(__file__).resolve().parents[2]

    try:
        game = PongGame(
            root=root,
            fullscreen=True if args.fullscreen else None,
            show_fps=False if args.no_fps else None,
        )
        game.run()
    except (pygame.error, AssetLoadError):
        logger.exception("Fatal error")
        pygame.quit()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
