"""Base class for Brick Break skins.

Skins handle ALL rendering - the game only manages state.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import pygame

if TYPE_CHECKING:
    from ..entities.paddle import Paddle
    from ..entities.ball import Ball
    from ..entities.brick import Brick


class BrickBreakSkin(ABC):
    """Base class for game skins."""

    NAME: str = "base"
    DESCRIPTION: str = "Base skin"

    @abstractmethod
    def render_paddle(self, paddle: 'Paddle', screen: pygame.Surface) -> None:
        """Render the paddle.

        Args:
            paddle: Paddle to render
            screen: Pygame surface to draw on
        """
        pass

    @abstractmethod
    def render_ball(self, ball: 'Ball', screen: pygame.Surface) -> None:
        """Render the ball.

        Args:
            ball: Ball to render
            screen: Pygame surface to draw on
        """
        pass

    @abstractmethod
    def render_brick(self, brick: 'Brick', screen: pygame.Surface) -> None:
        """Render a brick.

        Args:
            brick: Brick to render
            screen: Pygame surface to draw on
        """
        pass

    def render_overlay(self, screen: pygame.Surface, message: str) -> None:
        """Render a centered status message (paused, cleared).

        Args:
            screen: Pygame surface to draw on
            message: Text to show
        """
        pass
