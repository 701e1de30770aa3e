"""
Input State - Held keys and key actions for a single frame.

Uses frozen dataclasses so a frame's input cannot change after polling.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class KeyAction(Enum):
    """One-shot actions triggered by a key press."""

    PAUSE = "pause"
    RESET = "reset"
    QUIT = "quit"


@dataclass(frozen=True)
class InputState:
    """Immutable snapshot of player input for one frame.

    Attributes:
        left_pressed: Move-left key held this frame
        right_pressed: Move-right key held this frame
        actions: Key actions triggered since the previous frame, in order
    """
    left_pressed: bool = False
    right_pressed: bool = False
    actions: Tuple[KeyAction, ...] = ()

    def has_action(self, action: KeyAction) -> bool:
        return action in self.actions

    def __str__(self) -> str:
        """String representation for debugging."""
        names = ','.join(a.value for a in self.actions) or '-'
        return (f"InputState(left={self.left_pressed}, right={self.right_pressed}, "
                f"actions={names})")
