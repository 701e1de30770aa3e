"""Brick Break skins for rendering."""

from .base import BrickBreakSkin
from .geometric import GeometricSkin

__all__ = [
    'BrickBreakSkin',
    'GeometricSkin',
]
