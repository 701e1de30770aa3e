"""
Base Input Source - Abstract interface for input backends.
"""
from abc import ABC, abstractmethod

from brickbreak.input.input_event import InputState


class InputSource(ABC):
    """Abstract base class for input sources."""

    @abstractmethod
    def poll_state(self) -> InputState:
        """Get input for the current frame.

        Returns:
            InputState with held keys and actions collected since last poll.
        """
        pass

    @abstractmethod
    def update(self, dt: float) -> None:
        """Update the input source, collecting events.

        Args:
            dt: Delta time in seconds since last update.
        """
        pass
