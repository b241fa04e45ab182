"""
Shared primitive data types for the wire game.

This module provides the basic geometric and color types used by level
generation, collision testing and rendering.
"""

from pydantic import BaseModel, Field, field_validator, ConfigDict
from typing import Tuple


class Point2D(BaseModel):
    """Immutable 2D point in canvas coordinates.

    The canvas origin is the top-left corner; y grows downwards.

    Attributes:
        x: X coordinate (horizontal)
        y: Y coordinate (vertical)

    Examples:
        >>> start = Point2D(x=50.0, y=300.0)
        >>> start.distance_to(Point2D(x=53.0, y=304.0))
        5.0
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True)

    def distance_to(self, other: 'Point2D') -> float:
        """Euclidean distance to another point."""
        return ((self.x - other.x) ** 2 + (self.y - other.y) ** 2) ** 0.5

    def offset(self, dx: float, dy: float) -> 'Point2D':
        """Return a new point displaced by (dx, dy)."""
        return Point2D(x=self.x + dx, y=self.y + dy)

    def __str__(self) -> str:
        return f"Point2D(x={self.x:.2f}, y={self.y:.2f})"


class Resolution(BaseModel):
    """Canvas dimensions in pixels.

    Examples:
        >>> str(Resolution(width=800, height=600))
        'Resolution(800x600)'
    """
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"Resolution({self.width}x{self.height})"


class Color(BaseModel):
    """Immutable RGBA color with validation.

    All color components must be in the range [0, 255] inclusive.
    """
    r: int
    g: int
    b: int
    a: int = 255  # Default to fully opaque

    @field_validator('r', 'g', 'b', 'a')
    @classmethod
    def validate_color_range(cls, v: int) -> int:
        """Validate color components are in valid range [0, 255]."""
        if not 0 <= v <= 255:
            raise ValueError(f'Color component must be in range [0, 255], got {v}')
        return v

    @property
    def as_rgb_tuple(self) -> Tuple[int, int, int]:
        """Return color as RGB tuple for pygame."""
        return (self.r, self.g, self.b)

    model_config = ConfigDict(frozen=True)


class Rectangle(BaseModel):
    """Immutable axis-aligned rectangle.

    Used for wall segments, the goal hit-box and the character bounds.
    Position is at the top-left corner (pygame convention).

    Attributes:
        x: X coordinate of top-left corner
        y: Y coordinate of top-left corner
        width: Width of rectangle (must be positive)
        height: Height of rectangle (must be positive)

    Examples:
        >>> wall = Rectangle(x=100.0, y=100.0, width=20.0, height=20.0)
        >>> wall.intersects(Rectangle(x=110.0, y=110.0, width=10.0, height=10.0))
        True
        >>> wall.intersects(Rectangle(x=120.0, y=100.0, width=10.0, height=10.0))
        False
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

    @classmethod
    def centered_on(cls, point: Point2D, size: float) -> 'Rectangle':
        """Build a size x size square centered on a point."""
        return cls(x=point.x - size / 2, y=point.y - size / 2, width=size, height=size)

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Point2D:
        """Center point of the rectangle."""
        return Point2D(x=self.x + self.width / 2, y=self.y + self.height / 2)

    def distance_to_point(self, point: Point2D) -> float:
        """Distance from a point to the nearest part of the rectangle.

        Zero when the point is inside or on the boundary.
        """
        dx = max(self.left - point.x, 0.0, point.x - self.right)
        dy = max(self.top - point.y, 0.0, point.y - self.bottom)
        return (dx * dx + dy * dy) ** 0.5

    def intersects(self, other: 'Rectangle') -> bool:
        """Check if this rectangle overlaps another.

        Overlap is strict: rectangles that only share an edge do not
        intersect.
        """
        return (self.left < other.right and
                self.right > other.left and
                self.top < other.bottom and
                self.bottom > other.top)

    def as_tuple(self) -> Tuple[float, float, float, float]:
        """Return (x, y, width, height) for pygame.Rect."""
        return (self.x, self.y, self.width, self.height)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"Rectangle(x={self.x:.2f}, y={self.y:.2f}, w={self.width:.2f}, h={self.height:.2f})"
