"""Brick Break game entities."""

from .paddle import Paddle
from .ball import Ball
from .brick import Brick, BrickState

__all__ = [
    'Paddle',
    'Ball',
    'Brick', 'BrickState',
]
