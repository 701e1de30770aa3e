"""
Shared primitive data types for the game.

This module provides the basic geometric types used by entities,
collision checks, and the layout loader.
"""

from pydantic import BaseModel, ConfigDict, computed_field, field_validator


class Point2D(BaseModel):
    """Immutable 2D point/vector for positions, velocities, and coordinates.

    Attributes:
        x: X coordinate (horizontal)
        y: Y coordinate (vertical)

    Examples:
        >>> pos = Point2D(x=100.0, y=200.0)
        >>> vel = Point2D(x=-50.0, y=25.0)  # Moving left and down
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Point2D(x={self.x:.2f}, y={self.y:.2f})"


Vector2D = Point2D


class Rectangle(BaseModel):
    """Immutable axis-aligned rectangle defined by position and dimensions.

    Used for entity bounds and collision detection.
    Position is at top-left corner (pygame convention).

    Attributes:
        x: X coordinate of top-left corner
        y: Y coordinate of top-left corner
        width: Width of rectangle (must be positive)
        height: Height of rectangle (must be positive)

    Examples:
        >>> rect = Rectangle(x=0.0, y=0.0, width=16.0, height=8.0)
        >>> rect.right
        16.0
        >>> rect.contains_point(Point2D(x=4.0, y=4.0))
        True
    """
    x: float
    y: float
    width: float
    height: float

    @field_validator('width', 'height')
    @classmethod
    def validate_positive_dimensions(cls, v: float) -> float:
        """Validate dimensions are positive."""
        if v <= 0:
            raise ValueError(f'Rectangle dimensions must be positive, got {v}')
        return v

    @computed_field
    @property
    def center(self) -> Point2D:
        """Center point of the rectangle."""
        return Point2D(
            x=self.x + self.width / 2,
            y=self.y + self.height / 2
        )

    @computed_field
    @property
    def left(self) -> float:
        """Get left edge x coordinate."""
        return self.x

    @computed_field
    @property
    def right(self) -> float:
        """Get right edge x coordinate."""
        return self.x + self.width

    @computed_field
    @property
    def top(self) -> float:
        """Get top edge y coordinate."""
        return self.y

    @computed_field
    @property
    def bottom(self) -> float:
        """Get bottom edge y coordinate."""
        return self.y + self.height

    def contains_point(self, point: Point2D) -> bool:
        """Check if a point is inside the rectangle.

        Args:
            point: The point to check

        Returns:
            True if point is inside or on the boundary of the rectangle
        """
        return (self.left <= point.x <= self.right and
                self.top <= point.y <= self.bottom)

    def intersects(self, other: 'Rectangle') -> bool:
        """Check if this rectangle overlaps another (AABB test).

        Rectangles sharing an edge count as intersecting.

        Args:
            other: Another rectangle to check intersection with

        Returns:
            True if rectangles overlap or touch

        Examples:
            >>> a = Rectangle(x=0.0, y=0.0, width=10.0, height=10.0)
            >>> b = Rectangle(x=5.0, y=5.0, width=10.0, height=10.0)
            >>> a.intersects(b)
            True
        """
        return not (self.right < other.left or
                    self.left > other.right or
                    self.bottom < other.top or
                    self.top > other.bottom)

    def as_tuple(self) -> tuple:
        """Return (x, y, width, height) for pygame draw calls."""
        return (self.x, self.y, self.width, self.height)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Rectangle(x={self.x:.2f}, y={self.y:.2f}, w={self.width:.2f}, h={self.height:.2f})"
