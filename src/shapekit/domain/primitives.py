"""Point and rectangle value types.

- Point: An immutable 2D point
- Rectangle: An axis-aligned rectangle, also usable as a shape outline
"""

import math
from dataclasses import dataclass

from shapekit.core.iterators import RectangleIterator
from shapekit.core.segments import SegmentStream
from shapekit.core.transform import AffineTransform
from shapekit.domain.base import OutlineMixin


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def distance_sq(self, other: "Point") -> float:
        dx = other.x - self.x
        dy = other.y - self.y
        return dx * dx + dy * dy

    def distance(self, other: "Point") -> float:
        return math.sqrt(self.distance_sq(other))

    def transformed(self, transform: AffineTransform) -> "Point":
        return Point(*transform.transform_point(self.x, self.y))


@dataclass
class Rectangle(OutlineMixin):
    """An axis-aligned rectangle.

    The rectangle spans ``[x, x + width]`` by ``[y, y + height]``. It is empty
    when either dimension is zero or negative.

    Attributes:
        x: Smallest x coordinate
        y: Smallest y coordinate
        width: Extent along x
        height: Extent along y
    """

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @classmethod
    def from_points(cls, x1: float, y1: float, x2: float, y2: float) -> "Rectangle":
        """Smallest rectangle spanning two corner points."""
        return cls(min(x1, x2), min(y1, y2), abs(x2 - x1), abs(y2 - y1))

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2.0, self.y + self.height / 2.0)

    @property
    def is_empty(self) -> bool:
        return self.width <= 0.0 or self.height <= 0.0

    def set_bounds(self, x: float, y: float, width: float, height: float) -> "Rectangle":
        """Replace all four fields; returns self for chaining."""
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        return self

    def add(self, px: float, py: float) -> "Rectangle":
        """Grow to include the point; returns self for chaining."""
        x1 = min(self.x, px)
        y1 = min(self.y, py)
        x2 = max(self.max_x, px)
        y2 = max(self.max_y, py)
        return self.set_bounds(x1, y1, x2 - x1, y2 - y1)

    def union(self, other: "Rectangle") -> "Rectangle":
        """Smallest rectangle containing both rectangles."""
        x1 = min(self.x, other.x)
        y1 = min(self.y, other.y)
        x2 = max(self.max_x, other.max_x)
        y2 = max(self.max_y, other.max_y)
        return Rectangle(x1, y1, x2 - x1, y2 - y1)

    def intersection(self, other: "Rectangle") -> "Rectangle":
        """Overlap of both rectangles; empty (possibly negative size) if disjoint."""
        x1 = max(self.x, other.x)
        y1 = max(self.y, other.y)
        x2 = min(self.max_x, other.max_x)
        y2 = min(self.max_y, other.max_y)
        return Rectangle(x1, y1, x2 - x1, y2 - y1)

    def contains(self, px: float, py: float) -> bool:
        """Half-open containment: the left and top edges are inside."""
        if self.is_empty:
            return False
        return self.x <= px < self.max_x and self.y <= py < self.max_y

    def contains_rect(self, x: float, y: float, width: float, height: float) -> bool:
        if self.is_empty or width <= 0.0 or height <= 0.0:
            return False
        return (
            x >= self.x
            and y >= self.y
            and x + width <= self.max_x
            and y + height <= self.max_y
        )

    def intersects_rect(self, x: float, y: float, width: float, height: float) -> bool:
        if self.is_empty or width <= 0.0 or height <= 0.0:
            return False
        return (
            x + width > self.x
            and y + height > self.y
            and x < self.max_x
            and y < self.max_y
        )

    def bounds(self) -> "Rectangle":
        return Rectangle(self.x, self.y, self.width, self.height)

    def segment_stream(self, transform: AffineTransform | None = None) -> SegmentStream:
        return RectangleIterator(self.x, self.y, self.width, self.height, transform)
