"""Brick Break - a minimal brick-breaker built on pygame."""

__version__ = "1.0.0"
