"""Paddle entity driven by held left/right keys.

The paddle starts in the bottom-left corner and slides horizontally,
locking against the screen edges instead of leaving the screen.
"""

from models import Rectangle

from ...config import PaddleConfig


class Paddle:
    """Horizontally moving paddle, positioned by its top-left corner."""

    def __init__(
        self,
        config: PaddleConfig,
        screen_width: float,
        screen_height: float,
    ):
        """Initialize paddle at the bottom-left of the screen.

        Args:
            config: Paddle size and speed
            screen_width: Screen width in pixels
            screen_height: Screen height in pixels
        """
        self._config = config
        self._screen_width = screen_width
        self._screen_height = screen_height
        self._x = 0.0
        self._y = screen_height - config.height

    @property
    def x(self) -> float:
        """Get left edge X."""
        return self._x

    @property
    def y(self) -> float:
        """Get top edge Y."""
        return self._y

    @property
    def width(self) -> float:
        return self._config.width

    @property
    def height(self) -> float:
        return self._config.height

    @property
    def speed(self) -> float:
        return self._config.speed

    @property
    def max_x(self) -> float:
        """Rightmost allowed left edge."""
        return self._screen_width - self._config.width

    @property
    def rect(self) -> Rectangle:
        """Get paddle bounds."""
        return Rectangle(
            x=self._x,
            y=self._y,
            width=self._config.width,
            height=self._config.height,
        )

    def update(self, dt: float, left_pressed: bool, right_pressed: bool) -> None:
        """Move paddle according to held keys.

        Holding both keys, or neither, leaves the paddle where it is.

        Args:
            dt: Delta time in seconds
            left_pressed: Move-left key held
            right_pressed: Move-right key held
        """
        if left_pressed == right_pressed:
            return

        step = self._config.speed * dt
        if left_pressed:
            # Lock to the left edge
            self._x = max(0.0, self._x - step)
        else:
            self._x = min(self.max_x, self._x + step)

    def reset(self) -> None:
        """Return paddle to the bottom-left corner."""
        self._x = 0.0
        self._y = self._screen_height - self._config.height
