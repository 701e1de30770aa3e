"""Ball entity with velocity-based movement.

The ball is an axis-aligned box positioned by its top-left corner.
All operations return a new Ball; physics code replaces the game's
ball with the result.
"""

from models import Rectangle

from ...config import BallConfig


class Ball:
    """Ball with constant-speed movement and reflection."""

    def __init__(
        self,
        width: float,
        height: float,
        x: float,
        y: float,
        vx: float = 0.0,
        vy: float = 0.0,
    ):
        """Initialize ball.

        Args:
            width: Ball width
            height: Ball height
            x: Left edge X position
            y: Top edge Y position
            vx: X velocity (pixels/second)
            vy: Y velocity (pixels/second)
        """
        self._width = width
        self._height = height
        self._x = x
        self._y = y
        self._vx = vx
        self._vy = vy

    @classmethod
    def centered(cls, config: BallConfig, screen_width: float, screen_height: float) -> 'Ball':
        """Create a ball at the screen center moving down and to the right."""
        return cls(
            config.width,
            config.height,
            screen_width / 2,
            screen_height / 2,
            config.speed_x,
            config.speed_y,
        )

    @property
    def x(self) -> float:
        """Get left edge X."""
        return self._x

    @property
    def y(self) -> float:
        """Get top edge Y."""
        return self._y

    @property
    def vx(self) -> float:
        """Get X velocity."""
        return self._vx

    @property
    def vy(self) -> float:
        """Get Y velocity."""
        return self._vy

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def center_x(self) -> float:
        return self._x + self._width / 2

    @property
    def center_y(self) -> float:
        return self._y + self._height / 2

    @property
    def rect(self) -> Rectangle:
        """Get ball bounds."""
        return Rectangle(x=self._x, y=self._y, width=self._width, height=self._height)

    def update(self, dt: float) -> 'Ball':
        """Move ball by its velocity.

        Args:
            dt: Delta time in seconds

        Returns:
            New Ball with updated position
        """
        return self.set_position(self._x + self._vx * dt, self._y + self._vy * dt)

    def set_position(self, x: float, y: float) -> 'Ball':
        """Return a ball at (x, y) with the same velocity."""
        return Ball(self._width, self._height, x, y, self._vx, self._vy)

    def with_velocity(self, vx: float, vy: float) -> 'Ball':
        """Return a ball at the same position with a new velocity."""
        return Ball(self._width, self._height, self._x, self._y, vx, vy)

    def bounce_horizontal(self) -> 'Ball':
        """Bounce off vertical surface (reverse X velocity)."""
        return self.with_velocity(-self._vx, self._vy)

    def bounce_vertical(self) -> 'Ball':
        """Bounce off horizontal surface (reverse Y velocity)."""
        return self.with_velocity(self._vx, -self._vy)

    def __repr__(self) -> str:
        return (f"Ball(x={self._x:.1f}, y={self._y:.1f}, "
                f"vx={self._vx:.1f}, vy={self._vy:.1f})")
