"""Brick Break physics and collision detection."""

from .collision import (
    bounce_off_walls,
    check_paddle_collision,
    resolve_paddle_collision,
    check_brick_collision,
    get_collision_direction,
    resolve_brick_collision,
)

__all__ = [
    'bounce_off_walls',
    'check_paddle_collision',
    'resolve_paddle_collision',
    'check_brick_collision',
    'get_collision_direction',
    'resolve_brick_collision',
]
