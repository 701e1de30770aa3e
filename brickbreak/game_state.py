"""GameState enum for Brick Break.

The game mode reports one of these states via its `state` property.
"""
from enum import Enum


class GameState(Enum):
    """Game states.

    States:
        PLAYING: Ball in motion, paddle responds to input
        PAUSED: Update loop frozen, rendering continues
        WON: Every brick in the wall has been destroyed
    """
    PLAYING = "playing"
    PAUSED = "paused"
    WON = "won"
