"""Unit tests for crossing-number hit testing.

Tests cover:
- Single-segment crossing contributions
- Point containment and its tie-break on edges and vertices
- Three-way rectangle classification and the boundary outcome
- Winding rules on nested outlines
"""

import pytest

from shapekit.config import CrossingConfig
from shapekit.core.crossing import (
    BOUNDARY_CROSSING,
    Containment,
    CrossingResult,
    classify_rect,
    cross_line,
    cross_stream,
    intersect_line,
    intersect_stream,
    shape_contains_point,
    shape_contains_rect,
    shape_intersects_rect,
    stream_bounds,
)
from shapekit.core.iterators import EllipseIterator, LineIterator, RectangleIterator
from shapekit.core.segments import WindingRule
from shapekit.domain import Path, Rectangle
from shapekit.exceptions import AmbiguousGeometryError


def _unit_square() -> Rectangle:
    return Rectangle(0.0, 0.0, 1.0, 1.0)


def _nested_squares(reverse_inner: bool = False, rule: WindingRule = WindingRule.NON_ZERO) -> Path:
    path = Path(rule)
    path.move_to(0, 0).line_to(4, 0).line_to(4, 4).line_to(0, 4).close_path()
    if reverse_inner:
        path.move_to(1, 1).line_to(1, 3).line_to(3, 3).line_to(3, 1).close_path()
    else:
        path.move_to(1, 1).line_to(3, 1).line_to(3, 3).line_to(1, 3).close_path()
    return path


class TestCrossLine:
    """Tests for a single segment against a +y ray."""

    def test_rightward_segment_above(self):
        """A rightward edge above the point counts +1."""
        assert cross_line(0, 1, 2, 1, 1, 0) == 1

    def test_leftward_segment_above(self):
        """A leftward edge above the point counts -1."""
        assert cross_line(2, 1, 0, 1, 1, 0) == -1

    def test_segment_below_point(self):
        """An edge below the point never crosses the ray."""
        assert cross_line(0, 1, 2, 1, 1, 5) == 0

    def test_vertical_segment(self):
        """Vertical edges contribute nothing."""
        assert cross_line(1, 1, 1, 3, 1, 0) == 0

    def test_outside_x_extent(self):
        """An edge that ends left of the point does not count."""
        assert cross_line(0, 1, 2, 1, 3, 0) == 0

    def test_half_open_x_extent(self):
        """A ray through the shared vertex of two edges counts once."""
        total = cross_line(0, 1, 1, 1, 1, 0) + cross_line(1, 1, 2, 1, 1, 0)
        assert total == 1

    @pytest.mark.parametrize(
        "x1,x2,x,expected",
        [
            (0, 2, 0, 0),
            (0, 2, 2, 1),
            (2, 0, 0, 0),
            (2, 0, 2, -1),
        ],
    )
    def test_extent_endpoints(self, x1: float, x2: float, x: float, expected: int):
        """The left end of an edge's x extent is excluded and the right end included."""
        assert cross_line(x1, 1, x2, 1, x, 0) == expected

    def test_sloped_segment_straddling_point(self):
        """A sloped edge counts only where it passes above the point."""
        assert cross_line(0, 0, 2, 2, 1, 0.5) == 1
        assert cross_line(0, 0, 2, 2, 1, 1.5) == 0


class TestIntersectLine:
    """Tests for a single segment against a rectangle."""

    def test_segment_above_rect(self):
        """An edge entirely above the rectangle crosses its rays."""
        assert intersect_line(0, 5, 2, 5, 1, 0, 2, 1) == 1

    def test_segment_through_rect(self):
        """An edge cutting through the rectangle reports the boundary."""
        assert intersect_line(0, 0.5, 3, 0.5, 1, 0, 2, 1) is None

    def test_segment_touching_corner(self):
        """An edge touching a rectangle corner reports the boundary."""
        assert intersect_line(0, 2, 1, 1, 1, 0, 2, 1) is None

    def test_segment_beside_rect(self):
        """An edge right of the rectangle does not count."""
        assert intersect_line(5, 0, 6, 5, 1, 0, 2, 1) == 0

    def test_segment_below_rect(self):
        """An edge below the rectangle does not count."""
        assert intersect_line(0, -1, 3, -1, 1, 0, 2, 1) == 0


class TestCrossingResult:
    """Tests for accumulating crossing results."""

    def test_counts_add(self):
        """Plain counts add as integers."""
        assert CrossingResult(1) + CrossingResult(-3) == CrossingResult(-2)

    def test_boundary_absorbs(self):
        """The boundary marker absorbs any count on either side."""
        assert CrossingResult(2) + BOUNDARY_CROSSING == BOUNDARY_CROSSING
        assert BOUNDARY_CROSSING + CrossingResult(2) == BOUNDARY_CROSSING

    def test_sum(self):
        """Results work with the builtin sum."""
        assert sum([CrossingResult(1), CrossingResult(1)]) == CrossingResult(2)
        assert sum([CrossingResult(1), BOUNDARY_CROSSING]).boundary

    @pytest.mark.parametrize(
        "count,rule,expected",
        [
            (0, WindingRule.NON_ZERO, Containment.OUTSIDE),
            (-2, WindingRule.NON_ZERO, Containment.INSIDE),
            (-2, WindingRule.EVEN_ODD, Containment.OUTSIDE),
            (3, WindingRule.EVEN_ODD, Containment.INSIDE),
        ],
    )
    def test_classify(self, count: int, rule: WindingRule, expected: Containment):
        """Counts map to inside or outside under the given rule."""
        assert CrossingResult(count).classify(rule) is expected

    def test_classify_boundary(self):
        """The boundary marker classifies as BOUNDARY under any rule."""
        assert BOUNDARY_CROSSING.classify(WindingRule.EVEN_ODD) is Containment.BOUNDARY


class TestContainment:
    """Tests for the three-way outcome."""

    @pytest.mark.parametrize("outcome", list(Containment))
    def test_not_usable_as_bool(self, outcome: Containment):
        """Every outcome refuses implicit truth testing."""
        with pytest.raises(AmbiguousGeometryError) as exc_info:
            bool(outcome)
        assert outcome.name in str(exc_info.value)


class TestPointContainment:
    """Tests for point queries against a unit square."""

    def test_center_count(self):
        """The unit square's walk gives -1 at its centre."""
        assert cross_stream(RectangleIterator(0, 0, 1, 1), 0.5, 0.5) == -1

    def test_center_inside(self):
        """The centre of the unit square is inside."""
        assert shape_contains_point(_unit_square(), 0.5, 0.5)

    def test_right_of_square_outside(self):
        """A point right of the square is outside."""
        assert not shape_contains_point(_unit_square(), 1.5, 0.5)

    @pytest.mark.parametrize("x,y", [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)])
    def test_vertices_outside(self, x: float, y: float):
        """Points on a vertex are outside with a zero count."""
        assert cross_stream(RectangleIterator(0, 0, 1, 1), x, y) == 0
        assert not shape_contains_point(_unit_square(), x, y)

    @pytest.mark.parametrize(
        "x,y,expected",
        [
            (0.5, 0.0, True),
            (1.0, 0.5, True),
            (0.5, 1.0, False),
            (0.0, 0.5, False),
        ],
    )
    def test_edge_tie_break(self, x: float, y: float, expected: bool):
        """Bottom and right edges are inside, top and left are outside."""
        assert shape_contains_point(_unit_square(), x, y) is expected

    def test_open_outline_closed_implicitly(self):
        """An unclosed subpath is closed by a straight edge."""
        path = Path().move_to(0, 0).line_to(2, 0).line_to(2, 2).line_to(0, 2)
        assert shape_contains_point(path, 1, 1)

    def test_line_has_no_interior(self):
        """A single line encloses nothing."""
        assert cross_stream(LineIterator(0, 0, 2, 2), 1, 0.5) == 0

    def test_ellipse_with_internal_flattening(self):
        """Curved outlines are flattened before counting."""
        config = CrossingConfig(internal_flatness=0.001)
        assert cross_stream(EllipseIterator(0, 0, 4, 2), 2, 1, config) != 0
        assert cross_stream(EllipseIterator(0, 0, 4, 2), 0.1, 0.1, config) == 0


class TestWindingRules:
    """Tests for nested outlines under both winding rules."""

    def test_same_direction_count(self):
        """Nested squares wound the same way add their counts."""
        assert cross_stream(_nested_squares().segment_stream(), 2, 2) == -2

    def test_same_direction_non_zero(self):
        """Same-direction nesting fills the inner square under non-zero."""
        assert shape_contains_point(_nested_squares(), 2, 2)

    def test_same_direction_even_odd(self):
        """Same-direction nesting leaves a hole under even-odd."""
        assert not shape_contains_point(_nested_squares(rule=WindingRule.EVEN_ODD), 2, 2)

    def test_rule_override(self):
        """An explicit rule replaces the outline's own rule."""
        assert not shape_contains_point(_nested_squares(), 2, 2, rule=WindingRule.EVEN_ODD)

    @pytest.mark.parametrize("rule", list(WindingRule))
    def test_reversed_inner_is_hole(self, rule: WindingRule):
        """A reversed inner square is a hole under both rules."""
        assert not shape_contains_point(_nested_squares(True, rule), 2, 2)

    @pytest.mark.parametrize("rule", list(WindingRule))
    def test_ring_is_inside(self, rule: WindingRule):
        """The ring between the squares is inside under both rules."""
        assert shape_contains_point(_nested_squares(True, rule), 0.5, 2)


class TestRectangleClassification:
    """Tests for rectangle queries against a unit square."""

    @pytest.mark.parametrize(
        "rect,expected",
        [
            ((0.25, 0.25, 0.5, 0.5), Containment.INSIDE),
            ((0.5, 0.5, 1.0, 1.0), Containment.BOUNDARY),
            ((-1.0, -1.0, 3.0, 3.0), Containment.BOUNDARY),
            ((0.5, 0.0, 0.2, 0.2), Containment.BOUNDARY),
            ((1.0, 0.25, 0.5, 0.5), Containment.BOUNDARY),
            ((2.0, 2.0, 1.0, 1.0), Containment.OUTSIDE),
        ],
    )
    def test_classify(self, rect: tuple[float, ...], expected: Containment):
        """Rectangles are classified inside, outside or on the boundary."""
        assert classify_rect(_unit_square(), *rect) is expected

    def test_contains_rect(self):
        """Only fully interior rectangles are contained."""
        assert shape_contains_rect(_unit_square(), 0.25, 0.25, 0.5, 0.5)
        assert not shape_contains_rect(_unit_square(), 0.5, 0.5, 1.0, 1.0)
        assert not shape_contains_rect(_unit_square(), 2.0, 2.0, 1.0, 1.0)

    def test_intersects_rect(self):
        """Interior and boundary rectangles both intersect."""
        assert shape_intersects_rect(_unit_square(), 0.25, 0.25, 0.5, 0.5)
        assert shape_intersects_rect(_unit_square(), 0.5, 0.5, 1.0, 1.0)
        assert not shape_intersects_rect(_unit_square(), 2.0, 2.0, 1.0, 1.0)

    @pytest.mark.parametrize("width,height", [(0.0, 0.5), (0.5, 0.0), (-1.0, 0.5)])
    def test_non_positive_rect(self, width: float, height: float):
        """Empty rectangles are neither contained nor intersecting."""
        assert not shape_contains_rect(_unit_square(), 0.25, 0.25, width, height)
        assert not shape_intersects_rect(_unit_square(), 0.25, 0.25, width, height)

    @pytest.mark.parametrize(
        "width,height", [(0.0, 0.5), (0.5, 0.0), (-1.0, 0.5), (0.5, -0.25), (-1.0, -1.0)]
    )
    def test_classify_non_positive_rect(self, width: float, height: float):
        """An empty or inverted query rectangle is outside even over the interior."""
        assert classify_rect(_unit_square(), 0.25, 0.25, width, height) is Containment.OUTSIDE
        assert classify_rect(_unit_square(), 0.75, 0.75, width, height) is Containment.OUTSIDE

    def test_boundary_short_circuits(self):
        """The walk returns the boundary marker itself once an edge hits."""
        result = intersect_stream(RectangleIterator(0, 0, 1, 1), 0.5, 0.5, 1.0, 1.0)
        assert result is BOUNDARY_CROSSING

    def test_rect_in_hole(self):
        """Rectangles in a hole are outside, rectangles in the ring inside."""
        path = _nested_squares(reverse_inner=True)
        assert classify_rect(path, 1.5, 1.5, 1.0, 1.0) is Containment.OUTSIDE
        assert classify_rect(path, 0.25, 1.5, 0.5, 1.0) is Containment.INSIDE

    def test_empty_outline_is_outside(self):
        """A path without segments contains nothing."""
        assert classify_rect(Path(), 0, 0, 1, 1) is Containment.OUTSIDE


class TestStreamBounds:
    """Tests for the bounding box of a stream's coordinates."""

    def test_rectangle(self):
        """A rectangle's bounds are its corners."""
        assert stream_bounds(RectangleIterator(1, 2, 3, 4)) == (1, 2, 4, 6)

    def test_includes_control_points(self):
        """Bounds cover curve control points."""
        assert stream_bounds(EllipseIterator(0, 0, 4, 2)) == (0, 0, 4, 2)

    def test_empty(self):
        """An empty outline has no bounds."""
        assert stream_bounds(RectangleIterator(0, 0, -1, -1)) is None
