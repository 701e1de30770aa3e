"""Input sources."""

from brickbreak.input.sources.base import InputSource
from brickbreak.input.sources.keyboard import KeyboardInputSource

__all__ = ['InputSource', 'KeyboardInputSource']
