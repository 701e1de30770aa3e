#!/usr/bin/env python3
"""Brick Break - Standalone Entry Point.

Usage:
    python -m brickbreak
    python -m brickbreak --scale 3
    python -m brickbreak --layout layouts/checkers.yaml --log-level DEBUG

Controls:
    Left/Right arrows move the paddle, P pauses, R restarts, ESC quits.
"""

import argparse
import sys
from typing import List, Optional

import pygame

from brickbreak import config
from brickbreak.game_mode import BrickBreakMode
from brickbreak.game.layout_loader import LayoutLoadError
from brickbreak.input import KeyAction
from brickbreak.input.sources import KeyboardInputSource
from brickbreak.logging import configure_logging, get_logger

log = get_logger('main')


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI parser from display options plus the game's ARGUMENTS."""
    parser = argparse.ArgumentParser(description=f"{BrickBreakMode.NAME} - {BrickBreakMode.DESCRIPTION}")

    # Display options
    parser.add_argument('--width', type=int, default=config.SCREEN_WIDTH,
                        help='Logical screen width')
    parser.add_argument('--height', type=int, default=config.SCREEN_HEIGHT,
                        help='Logical screen height')
    parser.add_argument('--scale', type=int, default=config.WINDOW_SCALE,
                        help='Window size multiplier')
    parser.add_argument('--tps', type=int, default=config.TICKS_PER_SECOND,
                        help='Ticks per second')
    parser.add_argument('--log-level', type=str, default=None,
                        choices=['TRACE', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'OFF'],
                        help='Log level for all modules')

    for arg in BrickBreakMode.ARGUMENTS:
        spec = dict(arg)
        name = spec.pop('name')
        parser.add_argument(name, **spec)

    return parser


def run(game: BrickBreakMode, window: pygame.Surface, tps: int) -> None:
    """Run the frame loop until the player quits.

    The game draws on a surface at the logical size, which is scaled
    to the window each frame.
    """
    screen = pygame.Surface(game.screen_size)
    input_source = KeyboardInputSource()
    clock = pygame.time.Clock()

    while True:
        dt = min(clock.tick(tps) / 1000.0, config.MAX_FRAME_DT)

        input_source.update(dt)
        input_state = input_source.poll_state()
        if input_state.has_action(KeyAction.QUIT):
            return

        game.handle_input(input_state)
        game.update(dt)

        game.render(screen)
        pygame.transform.scale(screen, window.get_size(), window)
        pygame.display.flip()


def main(argv: Optional[List[str]] = None) -> int:
    """Run Brick Break standalone."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.width < config.MIN_SCREEN_SIZE or args.height < config.MIN_SCREEN_SIZE:
        parser.error(f"--width and --height must be at least {config.MIN_SCREEN_SIZE}")
    if args.scale < 1:
        parser.error("--scale must be at least 1")
    if args.tps < 1:
        parser.error("--tps must be at least 1")

    if args.log_level:
        configure_logging(level=args.log_level)

    try:
        game = BrickBreakMode(
            width=args.width,
            height=args.height,
            tps=args.tps,
            layout=args.layout,
            skin=args.skin,
            monochrome=args.monochrome,
        )
    except LayoutLoadError as e:
        log.error("%s", e)
        return 1

    pygame.init()
    try:
        window = pygame.display.set_mode((args.width * args.scale, args.height * args.scale))
        pygame.display.set_caption(config.WINDOW_TITLE)
        run(game, window, args.tps)
    finally:
        pygame.quit()

    return 0


if __name__ == "__main__":
    sys.exit(main())
