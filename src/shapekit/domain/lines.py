"""Line segments and Bezier curves.

Lines enclose no area, so their containment queries are always false.
Curves are treated as closed by their chord for containment and use the
even-odd rule, matching the crossing engine's implicit subpath closing.
"""

import math
from dataclasses import dataclass

from shapekit.core import crossing
from shapekit.core.curves import (
    cubic_flatness_sq,
    cubic_point,
    line_intersects_rect,
    point_line_dist,
    point_line_dist_sq,
    point_seg_dist,
    point_seg_dist_sq,
    quad_flatness_sq,
    quad_point,
    relative_ccw,
    subdivide_cubic,
    subdivide_quad,
)
from shapekit.core.iterators import CubicCurveIterator, LineIterator, QuadCurveIterator
from shapekit.core.segments import SegmentStream, WindingRule
from shapekit.core.transform import AffineTransform
from shapekit.domain.base import OutlineMixin
from shapekit.domain.primitives import Point, Rectangle


def _bounds_of(xs: list[float], ys: list[float]) -> Rectangle:
    return Rectangle.from_points(min(xs), min(ys), max(xs), max(ys))


@dataclass
class Line(OutlineMixin):
    """A line segment from (x1, y1) to (x2, y2)."""

    x1: float = 0.0
    y1: float = 0.0
    x2: float = 0.0
    y2: float = 0.0

    @classmethod
    def between(cls, p1: Point, p2: Point) -> "Line":
        return cls(p1.x, p1.y, p2.x, p2.y)

    def set_line(self, x1: float, y1: float, x2: float, y2: float) -> "Line":
        self.x1 = x1
        self.y1 = y1
        self.x2 = x2
        self.y2 = y2
        return self

    def p1(self) -> Point:
        return Point(self.x1, self.y1)

    def p2(self) -> Point:
        return Point(self.x2, self.y2)

    @property
    def length(self) -> float:
        return math.hypot(self.x2 - self.x1, self.y2 - self.y1)

    @property
    def is_empty(self) -> bool:
        return False

    def point_seg_dist_sq(self, px: float, py: float) -> float:
        return point_seg_dist_sq(px, py, self.x1, self.y1, self.x2, self.y2)

    def point_seg_dist(self, px: float, py: float) -> float:
        return point_seg_dist(px, py, self.x1, self.y1, self.x2, self.y2)

    def point_line_dist_sq(self, px: float, py: float) -> float:
        return point_line_dist_sq(px, py, self.x1, self.y1, self.x2, self.y2)

    def point_line_dist(self, px: float, py: float) -> float:
        return point_line_dist(px, py, self.x1, self.y1, self.x2, self.y2)

    def relative_ccw(self, px: float, py: float) -> int:
        return relative_ccw(px, py, self.x1, self.y1, self.x2, self.y2)

    def contains(self, px: float, py: float) -> bool:
        return False

    def contains_rect(self, x: float, y: float, width: float, height: float) -> bool:
        return False

    def intersects_rect(self, x: float, y: float, width: float, height: float) -> bool:
        return line_intersects_rect(self.x1, self.y1, self.x2, self.y2, x, y, width, height)

    def bounds(self) -> Rectangle:
        return Rectangle.from_points(self.x1, self.y1, self.x2, self.y2)

    def segment_stream(self, transform: AffineTransform | None = None) -> SegmentStream:
        return LineIterator(self.x1, self.y1, self.x2, self.y2, transform)


@dataclass
class QuadCurve(OutlineMixin):
    """A quadratic Bezier curve from (x1, y1) to (x2, y2)."""

    x1: float = 0.0
    y1: float = 0.0
    ctrl_x: float = 0.0
    ctrl_y: float = 0.0
    x2: float = 0.0
    y2: float = 0.0

    def coords(self) -> list[float]:
        """Control points as a flat list."""
        return [self.x1, self.y1, self.ctrl_x, self.ctrl_y, self.x2, self.y2]

    def p1(self) -> Point:
        return Point(self.x1, self.y1)

    def ctrl_p(self) -> Point:
        return Point(self.ctrl_x, self.ctrl_y)

    def p2(self) -> Point:
        return Point(self.x2, self.y2)

    @property
    def is_empty(self) -> bool:
        # Curves have no interior of their own
        return True

    def flatness_sq(self) -> float:
        return quad_flatness_sq(self.coords())

    def flatness(self) -> float:
        return math.sqrt(self.flatness_sq())

    def point_at(self, t: float) -> Point:
        return Point(*quad_point(self.coords(), t))

    def subdivide(self) -> tuple["QuadCurve", "QuadCurve"]:
        """Split at t = 0.5 into left and right halves."""
        left = [0.0] * 6
        right = [0.0] * 6
        subdivide_quad(self.coords(), 0, left, 0, right, 0)
        return QuadCurve(*left), QuadCurve(*right)

    def contains(self, px: float, py: float) -> bool:
        return crossing.shape_contains_point(self, px, py, WindingRule.EVEN_ODD)

    def contains_rect(self, x: float, y: float, width: float, height: float) -> bool:
        return crossing.shape_contains_rect(self, x, y, width, height, WindingRule.EVEN_ODD)

    def intersects_rect(self, x: float, y: float, width: float, height: float) -> bool:
        return crossing.shape_intersects_rect(self, x, y, width, height, WindingRule.EVEN_ODD)

    def bounds(self) -> Rectangle:
        """Bounds of the control polygon, which enclose the curve."""
        return _bounds_of([self.x1, self.ctrl_x, self.x2], [self.y1, self.ctrl_y, self.y2])

    def segment_stream(self, transform: AffineTransform | None = None) -> SegmentStream:
        return QuadCurveIterator(*self.coords(), transform=transform)


@dataclass
class CubicCurve(OutlineMixin):
    """A cubic Bezier curve from (x1, y1) to (x2, y2)."""

    x1: float = 0.0
    y1: float = 0.0
    ctrl1_x: float = 0.0
    ctrl1_y: float = 0.0
    ctrl2_x: float = 0.0
    ctrl2_y: float = 0.0
    x2: float = 0.0
    y2: float = 0.0

    def coords(self) -> list[float]:
        """Control points as a flat list."""
        return [
            self.x1, self.y1,
            self.ctrl1_x, self.ctrl1_y,
            self.ctrl2_x, self.ctrl2_y,
            self.x2, self.y2,
        ]

    def p1(self) -> Point:
        return Point(self.x1, self.y1)

    def ctrl1_p(self) -> Point:
        return Point(self.ctrl1_x, self.ctrl1_y)

    def ctrl2_p(self) -> Point:
        return Point(self.ctrl2_x, self.ctrl2_y)

    def p2(self) -> Point:
        return Point(self.x2, self.y2)

    @property
    def is_empty(self) -> bool:
        return True

    def flatness_sq(self) -> float:
        return cubic_flatness_sq(self.coords())

    def flatness(self) -> float:
        return math.sqrt(self.flatness_sq())

    def point_at(self, t: float) -> Point:
        return Point(*cubic_point(self.coords(), t))

    def subdivide(self) -> tuple["CubicCurve", "CubicCurve"]:
        """Split at t = 0.5 into left and right halves."""
        left = [0.0] * 8
        right = [0.0] * 8
        subdivide_cubic(self.coords(), 0, left, 0, right, 0)
        return CubicCurve(*left), CubicCurve(*right)

    def contains(self, px: float, py: float) -> bool:
        return crossing.shape_contains_point(self, px, py, WindingRule.EVEN_ODD)

    def contains_rect(self, x: float, y: float, width: float, height: float) -> bool:
        return crossing.shape_contains_rect(self, x, y, width, height, WindingRule.EVEN_ODD)

    def intersects_rect(self, x: float, y: float, width: float, height: float) -> bool:
        return crossing.shape_intersects_rect(self, x, y, width, height, WindingRule.EVEN_ODD)

    def bounds(self) -> Rectangle:
        """Bounds of the control polygon, which enclose the curve."""
        return _bounds_of(
            [self.x1, self.ctrl1_x, self.ctrl2_x, self.x2],
            [self.y1, self.ctrl1_y, self.ctrl2_y, self.y2],
        )

    def segment_stream(self, transform: AffineTransform | None = None) -> SegmentStream:
        return CubicCurveIterator(*self.coords(), transform=transform)
