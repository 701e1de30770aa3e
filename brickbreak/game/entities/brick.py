"""Brick entity.

Bricks are static rectangles. A hit removes one point of durability;
at zero the brick is destroyed and drops out of the wall.
"""

from enum import Enum
from typing import Tuple

from models import Rectangle


class BrickState(Enum):
    """Brick lifecycle states."""

    ACTIVE = "active"         # Can be hit
    DESTROYED = "destroyed"   # Removed from play


class Brick:
    """A brick in the wall, positioned by its top-left corner."""

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        color: str = "white",
        hits: int = 1,
        grid_position: Tuple[int, int] = (0, 0),
    ):
        """Initialize brick.

        Args:
            x: Left edge X position
            y: Top edge Y position
            width: Brick width
            height: Brick height
            color: Color name for the skin
            hits: Hits required to destroy
            grid_position: (row, col) position in grid
        """
        if hits < 1:
            raise ValueError(f"Brick needs at least one hit, got {hits}")
        self._rect = Rectangle(x=x, y=y, width=width, height=height)
        self._color = color
        self._hits = hits
        self._hits_remaining = hits
        self._grid_position = grid_position
        self._state = BrickState.ACTIVE

    @property
    def x(self) -> float:
        return self._rect.x

    @property
    def y(self) -> float:
        return self._rect.y

    @property
    def width(self) -> float:
        return self._rect.width

    @property
    def height(self) -> float:
        return self._rect.height

    @property
    def center_x(self) -> float:
        return self._rect.x + self._rect.width / 2

    @property
    def center_y(self) -> float:
        return self._rect.y + self._rect.height / 2

    @property
    def rect(self) -> Rectangle:
        """Get brick bounds."""
        return self._rect

    @property
    def color(self) -> str:
        return self._color

    @property
    def hits(self) -> int:
        """Get hits required to destroy a fresh brick."""
        return self._hits

    @property
    def hits_remaining(self) -> int:
        return self._hits_remaining

    @property
    def grid_position(self) -> Tuple[int, int]:
        """Get grid position (row, col)."""
        return self._grid_position

    @property
    def state(self) -> BrickState:
        return self._state

    @property
    def is_active(self) -> bool:
        """Check if brick is active (can be hit)."""
        return self._state == BrickState.ACTIVE

    @property
    def is_destroyed(self) -> bool:
        return self._state == BrickState.DESTROYED

    def hit(self) -> 'Brick':
        """Apply a hit to the brick.

        Returns:
            New Brick with one fewer hit remaining, destroyed at zero
        """
        if not self.is_active:
            return self

        new_brick = Brick(
            self.x, self.y, self.width, self.height,
            self._color, self._hits, self._grid_position,
        )
        new_brick._hits_remaining = self._hits_remaining - 1
        if new_brick._hits_remaining <= 0:
            new_brick._state = BrickState.DESTROYED
        return new_brick

    def __repr__(self) -> str:
        return (f"Brick(grid={self._grid_position}, color={self._color!r}, "
                f"hits_remaining={self._hits_remaining}, state={self._state.value})")
