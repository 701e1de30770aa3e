"""
Models library for Brick Break.

Pydantic data models shared across the game:
- Primitives: Basic geometric types (Point2D, Vector2D, Rectangle)

Usage:
    >>> from models import Rectangle, Vector2D
"""

from .primitives import (
    Point2D,
    Vector2D,  # Alias for Point2D
    Rectangle,
)

__all__ = [
    'Point2D',
    'Vector2D',
    'Rectangle',
]
