"""Ellipses and circles.

Both answer containment analytically; their outlines are four cubic
quarter arcs produced by the ellipse iterator.
"""

from dataclasses import dataclass

from shapekit.core.iterators import EllipseIterator
from shapekit.core.segments import SegmentStream
from shapekit.core.transform import AffineTransform
from shapekit.domain.base import OutlineMixin
from shapekit.domain.primitives import Point, Rectangle


@dataclass
class Ellipse(OutlineMixin):
    """An ellipse inscribed in the rectangle (x, y, width, height)."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2.0, self.y + self.height / 2.0)

    @property
    def is_empty(self) -> bool:
        return self.width <= 0.0 or self.height <= 0.0

    def contains(self, px: float, py: float) -> bool:
        """Open containment using the normalised ellipse equation."""
        if self.is_empty:
            return False
        a = (px - self.x) / self.width - 0.5
        b = (py - self.y) / self.height - 0.5
        return a * a + b * b < 0.25

    def contains_rect(self, x: float, y: float, width: float, height: float) -> bool:
        """True if all four corners of the rectangle are inside.

        An ellipse is convex, so its corners being inside is sufficient.
        """
        if self.is_empty or width <= 0.0 or height <= 0.0:
            return False
        x2 = x + width
        y2 = y + height
        return (
            self.contains(x, y)
            and self.contains(x2, y)
            and self.contains(x2, y2)
            and self.contains(x, y2)
        )

    def intersects_rect(self, x: float, y: float, width: float, height: float) -> bool:
        """Tests the rectangle point nearest to the ellipse centre."""
        if self.is_empty or width <= 0.0 or height <= 0.0:
            return False
        cx = self.x + self.width / 2.0
        cy = self.y + self.height / 2.0
        nx = min(max(cx, x), x + width)
        ny = min(max(cy, y), y + height)
        return self.contains(nx, ny)

    def bounds(self) -> Rectangle:
        return Rectangle(self.x, self.y, self.width, self.height)

    def segment_stream(self, transform: AffineTransform | None = None) -> SegmentStream:
        return EllipseIterator(self.x, self.y, self.width, self.height, transform)


@dataclass
class Circle(OutlineMixin):
    """A circle with centre (x, y)."""

    x: float = 0.0
    y: float = 0.0
    radius: float = 0.0

    @classmethod
    def around(cls, center: Point, radius: float) -> "Circle":
        return cls(center.x, center.y, radius)

    @property
    def center(self) -> Point:
        return Point(self.x, self.y)

    @property
    def is_empty(self) -> bool:
        return self.radius <= 0.0

    def to_ellipse(self) -> Ellipse:
        diameter = 2.0 * self.radius
        return Ellipse(self.x - self.radius, self.y - self.radius, diameter, diameter)

    def contains(self, px: float, py: float) -> bool:
        dx = px - self.x
        dy = py - self.y
        return dx * dx + dy * dy < self.radius * self.radius

    def contains_rect(self, x: float, y: float, width: float, height: float) -> bool:
        return self.to_ellipse().contains_rect(x, y, width, height)

    def intersects_rect(self, x: float, y: float, width: float, height: float) -> bool:
        return self.to_ellipse().intersects_rect(x, y, width, height)

    def intersects_circle(self, other: "Circle") -> bool:
        """True if the two discs overlap."""
        dx = other.x - self.x
        dy = other.y - self.y
        max_dist = self.radius + other.radius
        return dx * dx + dy * dy < max_dist * max_dist

    def offset(self, dx: float, dy: float) -> "Circle":
        """Translated copy."""
        return Circle(self.x + dx, self.y + dy, self.radius)

    def bounds(self) -> Rectangle:
        return self.to_ellipse().bounds()

    def segment_stream(self, transform: AffineTransform | None = None) -> SegmentStream:
        return self.to_ellipse().segment_stream(transform)
