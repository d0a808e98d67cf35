"""Segment streams for the built-in shape kinds.

Each iterator is a small state machine: an integer index selects which of
the shape's finitely many segments is current, ``advance`` increments it
and the stream is exhausted once the index runs past the last segment.
Coordinates are captured when the iterator is created, so every call to a
shape's ``segment_stream`` yields an independent traversal.
"""

import math
from collections.abc import Sequence

from shapekit.core.segments import SegmentStream, SegmentType, WindingRule
from shapekit.core.transform import AffineTransform
from shapekit.exceptions import StreamExhaustedError


class ShapeIterator(SegmentStream):
    """Base for index-driven iterators over a fixed number of segments."""

    def __init__(
        self,
        segment_count: int,
        transform: AffineTransform | None = None,
        winding_rule: WindingRule = WindingRule.NON_ZERO,
    ) -> None:
        self._count = segment_count
        self._transform = transform
        self._rule = winding_rule
        self._index = 0

    def winding_rule(self) -> WindingRule:
        return self._rule

    @property
    def is_exhausted(self) -> bool:
        return self._index >= self._count

    def advance(self) -> None:
        self._index += 1

    def current_segment(self, coords: list[float]) -> SegmentType:
        if self.is_exhausted:
            raise StreamExhaustedError(type(self).__name__)
        kind = self._segment(self._index, coords)
        if self._transform is not None and kind.point_count:
            self._transform.apply(coords, 0, coords, 0, kind.point_count)
        return kind

    def _segment(self, index: int, coords: list[float]) -> SegmentType:
        """Write untransformed coordinates of segment ``index``."""
        raise NotImplementedError


class LineIterator(ShapeIterator):
    """MoveTo the start point, LineTo the end point."""

    def __init__(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        transform: AffineTransform | None = None,
    ) -> None:
        super().__init__(2, transform)
        self._points = (x1, y1, x2, y2)

    def _segment(self, index: int, coords: list[float]) -> SegmentType:
        if index == 0:
            coords[0:2] = self._points[0:2]
            return SegmentType.MOVE_TO
        coords[0:2] = self._points[2:4]
        return SegmentType.LINE_TO


class QuadCurveIterator(ShapeIterator):
    """MoveTo the start point, then a single QuadTo."""

    def __init__(
        self,
        x1: float,
        y1: float,
        ctrl_x: float,
        ctrl_y: float,
        x2: float,
        y2: float,
        transform: AffineTransform | None = None,
    ) -> None:
        super().__init__(2, transform)
        self._points = (x1, y1, ctrl_x, ctrl_y, x2, y2)

    def _segment(self, index: int, coords: list[float]) -> SegmentType:
        if index == 0:
            coords[0:2] = self._points[0:2]
            return SegmentType.MOVE_TO
        coords[0:4] = self._points[2:6]
        return SegmentType.QUAD_TO


class CubicCurveIterator(ShapeIterator):
    """MoveTo the start point, then a single CubicTo."""

    def __init__(
        self,
        x1: float,
        y1: float,
        ctrl1_x: float,
        ctrl1_y: float,
        ctrl2_x: float,
        ctrl2_y: float,
        x2: float,
        y2: float,
        transform: AffineTransform | None = None,
    ) -> None:
        super().__init__(2, transform)
        self._points = (x1, y1, ctrl1_x, ctrl1_y, ctrl2_x, ctrl2_y, x2, y2)

    def _segment(self, index: int, coords: list[float]) -> SegmentType:
        if index == 0:
            coords[0:2] = self._points[0:2]
            return SegmentType.MOVE_TO
        coords[0:6] = self._points[2:8]
        return SegmentType.CUBIC_TO


class RectangleIterator(ShapeIterator):
    """Rectangle outline as a closed polygon.

    Emits MoveTo the origin corner, LineTo the three other corners, LineTo
    back to the origin, then Close. A rectangle with negative width or height
    produces no segments at all.
    """

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        transform: AffineTransform | None = None,
    ) -> None:
        empty = width < 0.0 or height < 0.0
        super().__init__(0 if empty else 6, transform)
        self._corners = (
            (x, y),
            (x + width, y),
            (x + width, y + height),
            (x, y + height),
            (x, y),
        )

    def _segment(self, index: int, coords: list[float]) -> SegmentType:
        if index == 5:
            return SegmentType.CLOSE
        coords[0:2] = self._corners[index]
        return SegmentType.MOVE_TO if index == 0 else SegmentType.LINE_TO


# An ellipse is split into four quarters by its axes and each quarter is
# approximated by one cubic. For the unit quarter from (1, 0) to (0, 1) the
# controls are (1, k) and (k, 1), with k chosen so the curve passes through
# the true arc at t = 0.5.
ELLIPSE_CONTROL_RATIO = 2.0 / 3.0 * (math.sqrt(2.0) - 1.0)

_U = ELLIPSE_CONTROL_RATIO

# Per quadrant: ctrl1, ctrl2, end point as fractions of the bounding box.
_ELLIPSE_POINTS = (
    (1.0, 0.5 + _U, 0.5 + _U, 1.0, 0.5, 1.0),
    (0.5 - _U, 1.0, 0.0, 0.5 + _U, 0.0, 0.5),
    (0.0, 0.5 - _U, 0.5 - _U, 0.0, 0.5, 0.0),
    (0.5 + _U, 0.0, 1.0, 0.5 - _U, 1.0, 0.5),
)


class EllipseIterator(ShapeIterator):
    """Ellipse outline as four cubic quarter arcs.

    Starts at the middle of the bounding box's right edge, emits one CubicTo
    per quadrant and finishes with Close. An ellipse with negative width or
    height produces no segments at all.
    """

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        transform: AffineTransform | None = None,
    ) -> None:
        empty = width < 0.0 or height < 0.0
        super().__init__(0 if empty else 6, transform)
        self._x = x
        self._y = y
        self._width = width
        self._height = height

    def _segment(self, index: int, coords: list[float]) -> SegmentType:
        if index == 5:
            return SegmentType.CLOSE
        if index == 0:
            p = _ELLIPSE_POINTS[3]
            coords[0] = self._x + p[4] * self._width
            coords[1] = self._y + p[5] * self._height
            return SegmentType.MOVE_TO
        p = _ELLIPSE_POINTS[index - 1]
        for j in range(0, 6, 2):
            coords[j] = self._x + p[j] * self._width
            coords[j + 1] = self._y + p[j + 1] * self._height
        return SegmentType.CUBIC_TO


class PathSegmentIterator(ShapeIterator):
    """Replays the segments recorded by a path.

    Args:
        types: Segment tags in order
        coords: Flat coordinates for all segments, consumed in tag order
        winding_rule: The path's winding rule
        transform: Optional transform applied to emitted coordinates
    """

    def __init__(
        self,
        types: Sequence[SegmentType],
        coords: Sequence[float],
        winding_rule: WindingRule,
        transform: AffineTransform | None = None,
    ) -> None:
        super().__init__(len(types), transform, winding_rule)
        self._types = types
        self._coords = coords
        self._offset = 0

    def advance(self) -> None:
        if not self.is_exhausted:
            self._offset += 2 * self._types[self._index].point_count
        super().advance()

    def _segment(self, index: int, coords: list[float]) -> SegmentType:
        kind = self._types[index]
        n = 2 * kind.point_count
        coords[0:n] = self._coords[self._offset : self._offset + n]
        return kind
