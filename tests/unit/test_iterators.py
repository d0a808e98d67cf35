"""Unit tests for per-shape segment iterators.

Tests cover:
- Segment sequences for each built-in shape kind
- Transforms applied to emitted coordinates
- Exhaustion and degenerate shapes
"""

import math

import pytest

from shapekit.core.curves import cubic_point
from shapekit.core.iterators import (
    ELLIPSE_CONTROL_RATIO,
    CubicCurveIterator,
    EllipseIterator,
    LineIterator,
    PathSegmentIterator,
    QuadCurveIterator,
    RectangleIterator,
)
from shapekit.core.segments import SegmentType, WindingRule, iter_segments
from shapekit.core.transform import AffineTransform
from shapekit.exceptions import StreamExhaustedError


def _kinds(stream) -> list[SegmentType]:
    return [segment.type for segment in iter_segments(stream)]


class TestLineIterator:
    """Tests for line streams."""

    def test_two_segments(self):
        """A line is a MOVE_TO followed by one LINE_TO."""
        segments = list(iter_segments(LineIterator(1.0, 2.0, 3.0, 4.0)))
        assert [s.type for s in segments] == [SegmentType.MOVE_TO, SegmentType.LINE_TO]
        assert segments[0].coords == (1.0, 2.0)
        assert segments[1].coords == (3.0, 4.0)

    def test_non_zero_winding(self):
        """Lines report the non-zero rule."""
        assert LineIterator(0, 0, 1, 1).winding_rule() is WindingRule.NON_ZERO

    def test_transform_applied(self):
        """Both end points are transformed."""
        stream = LineIterator(1.0, 2.0, 3.0, 4.0, AffineTransform.translation(10.0, 20.0))
        segments = list(iter_segments(stream))
        assert segments[0].coords == (11.0, 22.0)
        assert segments[1].coords == (13.0, 24.0)

    def test_current_segment_after_exhaustion_raises(self):
        """Reading an exhausted line stream raises."""
        stream = LineIterator(0.0, 0.0, 1.0, 1.0)
        stream.advance()
        stream.advance()
        assert stream.is_exhausted
        with pytest.raises(StreamExhaustedError):
            stream.current_segment([0.0] * 6)

    def test_independent_streams(self):
        """Each stream keeps its own cursor."""
        first = LineIterator(0.0, 0.0, 1.0, 1.0)
        first.advance()
        second = LineIterator(0.0, 0.0, 1.0, 1.0)
        coords = [0.0] * 6
        assert first.current_segment(coords) is SegmentType.LINE_TO
        assert second.current_segment(coords) is SegmentType.MOVE_TO


class TestCurveIterators:
    """Tests for quadratic and cubic curve streams."""

    def test_quad(self):
        """A quad curve emits its control and end point in one QUAD_TO."""
        segments = list(iter_segments(QuadCurveIterator(0.0, 0.0, 1.0, 1.0, 2.0, 0.0)))
        assert [s.type for s in segments] == [SegmentType.MOVE_TO, SegmentType.QUAD_TO]
        assert segments[1].coords == (1.0, 1.0, 2.0, 0.0)

    def test_cubic(self):
        """A cubic curve emits both controls and the end point in one CUBIC_TO."""
        stream = CubicCurveIterator(0.0, 0.0, 0.0, 1.0, 1.0, 1.0, 1.0, 0.0)
        segments = list(iter_segments(stream))
        assert [s.type for s in segments] == [SegmentType.MOVE_TO, SegmentType.CUBIC_TO]
        assert segments[1].coords == (0.0, 1.0, 1.0, 1.0, 1.0, 0.0)

    def test_transform_moves_control_points(self):
        """Control points are transformed with the end points."""
        stream = QuadCurveIterator(
            0.0, 0.0, 1.0, 1.0, 2.0, 0.0, transform=AffineTransform.scaling(2.0)
        )
        segments = list(iter_segments(stream))
        assert segments[1].coords == (2.0, 2.0, 4.0, 0.0)


class TestRectangleIterator:
    """Tests for rectangle streams."""

    def test_closed_polygon(self):
        """A rectangle is four edges back to its origin, then CLOSE."""
        segments = list(iter_segments(RectangleIterator(1.0, 2.0, 3.0, 4.0)))
        assert [s.type for s in segments] == [
            SegmentType.MOVE_TO,
            SegmentType.LINE_TO,
            SegmentType.LINE_TO,
            SegmentType.LINE_TO,
            SegmentType.LINE_TO,
            SegmentType.CLOSE,
        ]
        assert [s.end_point for s in segments[:5]] == [
            (1.0, 2.0),
            (4.0, 2.0),
            (4.0, 6.0),
            (1.0, 6.0),
            (1.0, 2.0),
        ]

    def test_negative_size_is_empty(self):
        """A rectangle with negative width emits nothing."""
        stream = RectangleIterator(0.0, 0.0, -1.0, 1.0)
        assert stream.is_exhausted
        assert _kinds(stream) == []


class TestEllipseIterator:
    """Tests for ellipse streams."""

    def test_segment_sequence(self):
        """An ellipse is four cubic quarters and a CLOSE."""
        assert _kinds(EllipseIterator(0.0, 0.0, 4.0, 2.0)) == [
            SegmentType.MOVE_TO,
            SegmentType.CUBIC_TO,
            SegmentType.CUBIC_TO,
            SegmentType.CUBIC_TO,
            SegmentType.CUBIC_TO,
            SegmentType.CLOSE,
        ]

    def test_starts_at_right_middle(self):
        """The outline starts at the middle of the right side."""
        segments = list(iter_segments(EllipseIterator(0.0, 0.0, 4.0, 2.0)))
        assert segments[0].coords == (4.0, 1.0)

    def test_quarter_end_points(self):
        """The quarters end at top, left, bottom and right middles."""
        segments = list(iter_segments(EllipseIterator(0.0, 0.0, 4.0, 2.0)))
        ends = [s.end_point for s in segments[1:5]]
        assert ends == [(2.0, 2.0), (0.0, 1.0), (2.0, 0.0), (4.0, 1.0)]

    def test_first_quarter_controls(self):
        """Control points sit at the circle ratio along each axis."""
        segments = list(iter_segments(EllipseIterator(0.0, 0.0, 4.0, 2.0)))
        u = ELLIPSE_CONTROL_RATIO
        assert segments[1].coords[:4] == pytest.approx((4.0, 1.0 + 2 * u, 2.0 + 4 * u, 2.0))

    def test_control_ratio(self):
        """The control ratio is 2/3 (sqrt 2 - 1)."""
        assert ELLIPSE_CONTROL_RATIO == pytest.approx(2.0 / 3.0 * (math.sqrt(2.0) - 1.0))

    def test_arc_midpoints_lie_on_circle(self):
        """Each quarter passes through the true arc at t = 0.5."""
        segments = list(iter_segments(EllipseIterator(-1.0, -1.0, 2.0, 2.0)))
        start = segments[0].coords
        for segment in segments[1:5]:
            coords = list(start) + list(segment.coords)
            x, y = cubic_point(coords, 0.5)
            assert math.hypot(x, y) == pytest.approx(1.0, abs=1e-9)
            start = segment.coords[4:6]

    @pytest.mark.parametrize("width,height", [(-1.0, 2.0), (2.0, -1.0)])
    def test_negative_size_emits_nothing(self, width: float, height: float):
        """Ellipses with a negative size are exhausted immediately."""
        stream = EllipseIterator(0.0, 0.0, width, height)
        assert stream.is_exhausted
        with pytest.raises(StreamExhaustedError):
            stream.current_segment([0.0] * 6)

    def test_transform_does_not_change_types(self):
        """Transforms move coordinates but keep segment types."""
        plain = _kinds(EllipseIterator(0.0, 0.0, 2.0, 2.0))
        moved = EllipseIterator(0.0, 0.0, 2.0, 2.0, AffineTransform.translation(10.0, 0.0))
        segments = list(iter_segments(moved))
        assert [s.type for s in segments] == plain
        assert segments[0].coords == (12.0, 1.0)


class TestPathSegmentIterator:
    """Tests for replaying recorded segments."""

    def test_replays_types_and_coords(self):
        """Recorded tags and coordinates come back in order."""
        types = [SegmentType.MOVE_TO, SegmentType.QUAD_TO, SegmentType.LINE_TO, SegmentType.CLOSE]
        coords = [0.0, 0.0, 1.0, 1.0, 2.0, 0.0, 2.0, -1.0]
        segments = list(iter_segments(PathSegmentIterator(types, coords, WindingRule.EVEN_ODD)))
        assert [s.type for s in segments] == types
        assert segments[1].coords == (1.0, 1.0, 2.0, 0.0)
        assert segments[2].coords == (2.0, -1.0)
        assert segments[3].coords == ()

    def test_reports_path_winding_rule(self):
        """The path's winding rule is reported, even when empty."""
        stream = PathSegmentIterator([], [], WindingRule.EVEN_ODD)
        assert stream.winding_rule() is WindingRule.EVEN_ODD
        assert stream.is_exhausted
