"""Brick Break - paddle, ball and a wall of bricks.

Per frame, while playing:
1. Move the paddle from held keys, locked to the screen edges
2. Move the ball and reflect it off the four walls
3. Reflect the ball off the paddle
4. Destroy at most one brick the ball touches, reflecting the ball
5. Mark the game won once the wall is cleared
"""

from pathlib import Path
from typing import Dict, List, Optional, Union

import pygame

from brickbreak.base_game import BaseGame
from brickbreak.game_state import GameState
from brickbreak.input import InputState, KeyAction
from brickbreak.logging import get_logger

from .config import (
    SCREEN_WIDTH, SCREEN_HEIGHT, TICKS_PER_SECOND, BACKGROUND_COLOR,
    default_paddle_config, default_ball_config, default_grid_config,
)
from .game.entities import Paddle, Ball, Brick
from .game.physics import (
    bounce_off_walls,
    check_paddle_collision,
    resolve_paddle_collision,
    get_collision_direction,
    resolve_brick_collision,
)
from .game.skins import BrickBreakSkin, GeometricSkin
from .game.layout_loader import BrickLayoutLoader, build_brick_grid

log = get_logger('game_mode')

# Values reported by last_bounce
BOUNCE_WALL = "wall"
BOUNCE_PADDLE = "paddle"
BOUNCE_BRICK = "brick"


class BrickBreakMode(BaseGame):
    """Brick Break game mode."""

    NAME = "Brick Break"
    DESCRIPTION = "Keep the ball in play with the paddle and clear the wall."

    ARGUMENTS = [
        {
            'name': '--layout',
            'type': str,
            'default': None,
            'help': 'YAML brick layout (default: full tiled wall)'
        },
        {
            'name': '--skin',
            'type': str,
            'default': 'geometric',
            'choices': ['geometric'],
            'help': 'Visual skin'
        },
        {
            'name': '--monochrome',
            'action': 'store_true',
            'default': False,
            'help': 'Draw every brick in the entity color'
        },
    ]

    SKINS: Dict[str, type] = {
        'geometric': GeometricSkin,
    }

    def __init__(
        self,
        width: int = SCREEN_WIDTH,
        height: int = SCREEN_HEIGHT,
        tps: int = TICKS_PER_SECOND,
        layout: Optional[Union[str, Path]] = None,
        skin: str = 'geometric',
        monochrome: bool = False,
        **kwargs,
    ):
        """Initialize Brick Break.

        Args:
            width: Logical screen width
            height: Logical screen height
            tps: Ticks per second the per-tick speeds are scaled by
            layout: Optional YAML layout file for the brick wall
            skin: Visual skin to use
            monochrome: Draw bricks in the entity color
            **kwargs: Base game args

        Raises:
            LayoutLoadError: The layout file is missing or invalid
        """
        super().__init__(**kwargs)
        self._screen_width = width
        self._screen_height = height

        self._paddle_config = default_paddle_config(width, height, tps)
        self._ball_config = default_ball_config(width, height, tps)
        self._grid_config = default_grid_config(width, height)

        skin_class = self.SKINS.get(skin, GeometricSkin)
        self._skin: BrickBreakSkin = skin_class(colored_bricks=not monochrome)

        if layout is not None:
            loader = BrickLayoutLoader(self._grid_config, width, height)
            self._initial_bricks = loader.load(layout)
        else:
            self._initial_bricks = build_brick_grid(self._grid_config, width)

        self._internal_state = GameState.PLAYING
        self._left_pressed = False
        self._right_pressed = False
        self._last_bounce: Optional[str] = None

        self._paddle = Paddle(self._paddle_config, width, height)
        self._ball = Ball.centered(self._ball_config, width, height)
        self._bricks: List[Brick] = list(self._initial_bricks)

        log.info("Started with %d bricks on a %dx%d screen",
                 len(self._bricks), width, height)

    @property
    def paddle(self) -> Paddle:
        return self._paddle

    @property
    def ball(self) -> Ball:
        return self._ball

    @property
    def bricks(self) -> List[Brick]:
        """Bricks still in play."""
        return list(self._bricks)

    @property
    def screen_size(self) -> tuple:
        return (self._screen_width, self._screen_height)

    @property
    def last_bounce(self) -> Optional[str]:
        """What the ball bounced off during the last update, if anything."""
        return self._last_bounce

    def _get_internal_state(self) -> GameState:
        return self._internal_state

    def handle_input(self, input_state: InputState) -> None:
        """Record held keys and apply pause / reset actions.

        Args:
            input_state: Input for this frame
        """
        self._left_pressed = input_state.left_pressed
        self._right_pressed = input_state.right_pressed

        for action in input_state.actions:
            if action == KeyAction.RESET:
                self.reset()
            elif action == KeyAction.PAUSE and self._internal_state == GameState.PLAYING:
                self.toggle_pause()

    def update(self, dt: float) -> None:
        """Advance the game by one frame.

        Args:
            dt: Delta time in seconds
        """
        self._last_bounce = None
        if self.state != GameState.PLAYING:
            return

        self._paddle.update(dt, self._left_pressed, self._right_pressed)

        self._ball, hit_wall = bounce_off_walls(
            self._ball.update(dt),
            self._screen_width,
            self._screen_height,
        )
        if hit_wall:
            self._last_bounce = BOUNCE_WALL

        if check_paddle_collision(self._ball, self._paddle):
            self._ball = resolve_paddle_collision(self._ball, self._paddle)
            self._last_bounce = BOUNCE_PADDLE
            log.trace("Paddle bounce at x=%.1f", self._ball.x)

        self._handle_brick_collisions()

        if self._initial_bricks and not self._bricks:
            self._internal_state = GameState.WON
            log.info("Wall cleared")

    def _handle_brick_collisions(self) -> None:
        """Hit the first brick the ball overlaps, removing it once destroyed."""
        for i, brick in enumerate(self._bricks):
            direction = get_collision_direction(self._ball, brick)
            if direction is None:
                continue

            self._ball = resolve_brick_collision(self._ball, direction)
            self._last_bounce = BOUNCE_BRICK

            hit_brick = brick.hit()
            if hit_brick.is_destroyed:
                del self._bricks[i]
                log.debug("Brick %s destroyed from %s, %d left",
                          brick.grid_position, direction, len(self._bricks))
            else:
                self._bricks[i] = hit_brick

            # Only handle one brick collision per frame
            break

    def render(self, screen: pygame.Surface) -> None:
        """Render the game.

        Args:
            screen: Pygame surface at the logical screen size
        """
        screen.fill(BACKGROUND_COLOR)

        for brick in self._bricks:
            self._skin.render_brick(brick, screen)

        self._skin.render_paddle(self._paddle, screen)
        self._skin.render_ball(self._ball, screen)

        if self.state == GameState.PAUSED:
            self._skin.render_overlay(screen, "PAUSED")
        elif self.state == GameState.WON:
            self._skin.render_overlay(screen, "CLEARED!")

    def reset(self) -> None:
        """Restore paddle, ball and the full wall."""
        super().reset()
        self._internal_state = GameState.PLAYING
        self._last_bounce = None
        self._paddle.reset()
        self._ball = Ball.centered(self._ball_config, self._screen_width, self._screen_height)
        self._bricks = list(self._initial_bricks)
        log.info("Game reset")
