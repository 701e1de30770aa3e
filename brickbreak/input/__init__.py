"""
Input abstraction layer for Brick Break.

Input sources turn engine events into one InputState per frame.
"""

from brickbreak.input.input_event import InputState, KeyAction

__all__ = ['InputState', 'KeyAction']
