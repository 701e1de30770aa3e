"""Base class for Brick Break game modes.

Game metadata (NAME, DESCRIPTION) and CLI arguments (ARGUMENTS) are
declared as class attributes, so the entry point can build its argument
parser from the game class.

Pause handling lives here: a paused game reports GameState.PAUSED
regardless of its internal state, and subclasses skip their update
while paused.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List

import pygame

from brickbreak.game_state import GameState
from brickbreak.input import InputState
from brickbreak.logging import get_logger

log = get_logger('base_game')


class BaseGame(ABC):
    """Abstract base class for game modes.

    Class Attributes (metadata):
        NAME: Display name for the game
        DESCRIPTION: Short description of gameplay
        ARGUMENTS: List of CLI argument definitions for argparse

    Subclasses must implement:
        - _get_internal_state() -> GameState: Map internal state to standard state
        - handle_input(state): Process held keys and key actions
        - update(dt): Update game logic
        - render(screen): Draw the game

    Optional overrides:
        - reset(): Reset game to initial state
    """

    NAME: str = "Unnamed Game"
    DESCRIPTION: str = "No description"

    # CLI argument definitions for argparse
    # Each entry is a dict with keys: name, type, default, help, choices (optional)
    ARGUMENTS: List[Dict[str, Any]] = []

    def __init__(self, **kwargs):
        if kwargs:
            log.debug("Ignoring unknown game options: %s", sorted(kwargs))
        self._paused = False

    @property
    def state(self) -> GameState:
        """Current game state.

        Games should not override this - override _get_internal_state instead.
        """
        if self._paused:
            return GameState.PAUSED
        return self._get_internal_state()

    def toggle_pause(self) -> bool:
        """Pause or resume the game.

        Returns:
            True if the game is now paused
        """
        self._paused = not self._paused
        log.info("Game %s", "paused" if self._paused else "resumed")
        return self._paused

    @abstractmethod
    def _get_internal_state(self) -> GameState:
        """Map internal game state to standard GameState."""
        pass

    @abstractmethod
    def handle_input(self, input_state: InputState) -> None:
        """Process one frame of input.

        Args:
            input_state: Held keys and key actions for this frame
        """
        pass

    @abstractmethod
    def update(self, dt: float) -> None:
        """Update game logic.

        Args:
            dt: Delta time in seconds since last frame
        """
        pass

    @abstractmethod
    def render(self, screen: pygame.Surface) -> None:
        """Render the game.

        Args:
            screen: Pygame surface to draw on
        """
        pass

    def reset(self) -> None:
        """Reset game to initial state.

        Override this to implement game-specific reset logic.
        """
        self._paused = False
