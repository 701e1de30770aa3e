"""Geometric skin - plain filled rectangles."""

from typing import TYPE_CHECKING, Optional, Tuple

import pygame

from .base import BrickBreakSkin
from ...config import BRICK_COLORS, ENTITY_COLOR

if TYPE_CHECKING:
    from ..entities.paddle import Paddle
    from ..entities.ball import Ball
    from ..entities.brick import Brick


class GeometricSkin(BrickBreakSkin):
    """Renders the game as filled rectangles.

    - Paddle and ball: solid rectangles in the entity color
    - Bricks: rectangles in their named color, darkened when damaged,
      or all in the entity color when colored_bricks is off
    """

    NAME = "geometric"
    DESCRIPTION = "Filled rectangles"

    OVERLAY_COLOR = (255, 255, 255)
    BRICK_OUTLINE = (0, 0, 0)

    def __init__(self, colored_bricks: bool = True, entity_color: Tuple[int, int, int] = ENTITY_COLOR):
        """Initialize geometric skin.

        Args:
            colored_bricks: Use brick color names; otherwise draw every
                brick in the entity color
            entity_color: Paddle and ball color
        """
        self._colored_bricks = colored_bricks
        self._entity_color = entity_color
        self._font: Optional[pygame.font.Font] = None

    def _ensure_font(self, size: int) -> pygame.font.Font:
        if self._font is None:
            pygame.font.init()
            self._font = pygame.font.Font(None, size)
        return self._font

    def get_brick_color(self, brick: 'Brick') -> Tuple[int, int, int]:
        """Get color for brick, darkened based on damage."""
        if not self._colored_bricks:
            return self._entity_color

        base_color = BRICK_COLORS.get(brick.color, self._entity_color)
        if brick.hits > 1:
            damage_pct = 1 - (brick.hits_remaining / brick.hits)
            darkening = 1 - (damage_pct * 0.5)
            return tuple(int(c * darkening) for c in base_color)  # type: ignore
        return base_color

    def render_paddle(self, paddle: 'Paddle', screen: pygame.Surface) -> None:
        pygame.draw.rect(screen, self._entity_color, paddle.rect.as_tuple())

    def render_ball(self, ball: 'Ball', screen: pygame.Surface) -> None:
        pygame.draw.rect(screen, self._entity_color, ball.rect.as_tuple())

    def render_brick(self, brick: 'Brick', screen: pygame.Surface) -> None:
        """Render brick as a filled rectangle with a thin outline."""
        if not brick.is_active:
            return

        rect = brick.rect.as_tuple()
        pygame.draw.rect(screen, self.get_brick_color(brick), rect)
        pygame.draw.rect(screen, self.BRICK_OUTLINE, rect, 1)

    def render_overlay(self, screen: pygame.Surface, message: str) -> None:
        font = self._ensure_font(max(16, screen.get_height() // 8))
        text = font.render(message, True, self.OVERLAY_COLOR)
        rect = text.get_rect(center=(screen.get_width() // 2, screen.get_height() // 2))
        screen.blit(text, rect)
