"""Crossing-number hit testing over segment streams.

Containment and intersection are derived from a shape's segment stream
alone, so every shape kind shares the same predicates.

Point queries cast a ray from the query point towards +y and sum the signed
crossings of the outline with it: +1 for segments running towards +x, -1
for segments running towards -x. Vertical segments never count, and each
segment's x extent is treated as half-open so a ray through a shared vertex
is counted once.

Tie-break for points exactly on the outline: a point equal to a vertex is
outside, and a point on an edge gets no contribution from that edge. On an
axis-aligned square this puts the bottom and right edges inside and the
top and left edges outside.

Rectangle queries run the same sum along the rectangle's left edge, but
any segment that enters or touches the rectangle short-circuits the walk
with the boundary outcome. That outcome is neither inside nor outside and
callers must decide explicitly what it means for them.

Curves are flattened before crossings are computed. Coordinates are not
sanitised: the result for NaN or infinite input is undefined.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from shapekit.config import CrossingConfig
from shapekit.core.flattening import FlatteningIterator
from shapekit.core.segments import SegmentSource, SegmentStream, SegmentType, WindingRule
from shapekit.exceptions import AmbiguousGeometryError

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = CrossingConfig()


class Containment(Enum):
    """Three-way classification of a query against a shape.

    Members refuse to act as booleans so that BOUNDARY can never silently
    become True or False.
    """

    INSIDE = "inside"
    OUTSIDE = "outside"
    BOUNDARY = "boundary"

    def __bool__(self) -> bool:
        raise AmbiguousGeometryError(self.name)


@dataclass(frozen=True, slots=True)
class CrossingResult:
    """Signed crossing count, or the boundary marker.

    Attributes:
        count: Accumulated signed crossings (0 when ``boundary`` is set)
        boundary: True if the query touched the outline
    """

    count: int = 0
    boundary: bool = False

    def __add__(self, other: "CrossingResult") -> "CrossingResult":
        if not isinstance(other, CrossingResult):
            return NotImplemented
        if self.boundary or other.boundary:
            return BOUNDARY_CROSSING
        return CrossingResult(self.count + other.count)

    def __radd__(self, other: object) -> "CrossingResult":
        # Lets sum() start from 0
        if other == 0:
            return self
        return NotImplemented

    def classify(self, rule: WindingRule) -> Containment:
        """Turn the count into a containment outcome under ``rule``."""
        if self.boundary:
            return Containment.BOUNDARY
        if rule.is_inside(self.count):
            return Containment.INSIDE
        return Containment.OUTSIDE


BOUNDARY_CROSSING = CrossingResult(0, boundary=True)


def cross_line(
    x1: float, y1: float, x2: float, y2: float, x: float, y: float
) -> int:
    """Signed crossing of segment (x1, y1)-(x2, y2) with the +y ray from (x, y)."""
    # Out of the x extent, entirely on the -y side, or vertical
    if (x < x1 and x < x2) or (x > x1 and x > x2) or (y > y1 and y > y2) or x1 == x2:
        return 0

    # Straddles the point in y: count only if the segment passes on the +y side
    if not (y < y1 and y < y2):
        if (y2 - y1) * (x - x1) / (x2 - x1) <= y - y1:
            return 0

    if x == x1:
        return 0 if x1 < x2 else -1
    if x == x2:
        return 1 if x1 < x2 else 0
    return 1 if x1 < x2 else -1


def intersect_line(
    x1: float, y1: float, x2: float, y2: float,
    rx1: float, ry1: float, rx2: float, ry2: float,
) -> int | None:
    """Signed crossing of a segment against the rectangle [rx1, rx2] x [ry1, ry2].

    Returns:
        The segment's crossing with the +y ray from the rectangle's left
        edge, or None if the segment enters or touches the rectangle
    """
    # Left of, right of, or entirely on the -y side of the rectangle
    if (rx2 < x1 and rx2 < x2) or (rx1 > x1 and rx1 > x2) or (ry1 > y1 and ry1 > y2):
        return 0

    if not (ry2 < y1 and ry2 < y2):
        if x1 == x2:
            return None

        # Clip the segment to the rectangle's x extent
        if x1 < x2:
            bx1 = rx1 if x1 < rx1 else x1
            bx2 = x2 if x2 < rx2 else rx2
        else:
            bx1 = rx1 if x2 < rx1 else x2
            bx2 = x1 if x1 < rx2 else rx2
        k = (y2 - y1) / (x2 - x1)
        by1 = k * (bx1 - x1) + y1
        by2 = k * (bx2 - x1) + y1

        if by1 < ry1 and by2 < ry1:
            return 0
        if not (by1 > ry2 and by2 > ry2):
            return None

    if x1 == x2:
        return 0
    if rx1 == x1:
        return 0 if x1 < x2 else -1
    if rx1 == x2:
        return 1 if x1 < x2 else 0
    if x1 < x2:
        return 1 if x1 < rx1 < x2 else 0
    return -1 if x2 < rx1 < x1 else 0


def _flattened(stream: SegmentStream, config: CrossingConfig) -> FlatteningIterator:
    return FlatteningIterator(
        stream, config.internal_flatness, config.internal_subdivision_limit
    )


def cross_stream(
    stream: SegmentStream,
    x: float,
    y: float,
    config: CrossingConfig | None = None,
) -> int:
    """Signed crossing count of an outline around the point (x, y).

    Args:
        stream: Outline to walk; consumed by the call
        x: Query x coordinate
        y: Query y coordinate
        config: Internal flattening settings for curved segments

    Returns:
        Signed crossing count, 0 when the point is a vertex of the outline
    """
    flat = _flattened(stream, config or _DEFAULT_CONFIG)
    coords = [0.0] * 6
    cross = 0
    mx = my = cx = cy = 0.0

    while not flat.is_exhausted:
        kind = flat.current_segment(coords)
        if kind is SegmentType.MOVE_TO:
            if cx != mx or cy != my:
                cross += cross_line(cx, cy, mx, my, x, y)
            mx = cx = coords[0]
            my = cy = coords[1]
        elif kind is SegmentType.LINE_TO:
            cross += cross_line(cx, cy, coords[0], coords[1], x, y)
            cx = coords[0]
            cy = coords[1]
        elif kind is SegmentType.CLOSE:
            if cx != mx or cy != my:
                cross += cross_line(cx, cy, mx, my, x, y)
            cx = mx
            cy = my

        if x == cx and y == cy:
            return 0
        flat.advance()

    if cx != mx or cy != my:
        cross += cross_line(cx, cy, mx, my, x, y)
    return cross


def intersect_stream(
    stream: SegmentStream,
    x: float,
    y: float,
    width: float,
    height: float,
    config: CrossingConfig | None = None,
) -> CrossingResult:
    """Crossing result of an outline against a rectangle.

    Open subpaths are closed implicitly, as for point queries.

    Args:
        stream: Outline to walk; consumed by the call
        x: Rectangle left edge
        y: Rectangle top edge (smallest y)
        width: Rectangle width
        height: Rectangle height
        config: Internal flattening settings for curved segments

    Returns:
        The accumulated count, or BOUNDARY_CROSSING as soon as a segment
        enters or touches the rectangle
    """
    flat = _flattened(stream, config or _DEFAULT_CONFIG)
    rx1 = x
    ry1 = y
    rx2 = x + width
    ry2 = y + height
    coords = [0.0] * 6
    cross = 0
    mx = my = cx = cy = 0.0

    while not flat.is_exhausted:
        count: int | None = 0
        kind = flat.current_segment(coords)
        if kind is SegmentType.MOVE_TO:
            if cx != mx or cy != my:
                count = intersect_line(cx, cy, mx, my, rx1, ry1, rx2, ry2)
            mx = cx = coords[0]
            my = cy = coords[1]
        elif kind is SegmentType.LINE_TO:
            count = intersect_line(cx, cy, coords[0], coords[1], rx1, ry1, rx2, ry2)
            cx = coords[0]
            cy = coords[1]
        elif kind is SegmentType.CLOSE:
            if cx != mx or cy != my:
                count = intersect_line(cx, cy, mx, my, rx1, ry1, rx2, ry2)
            cx = mx
            cy = my

        if count is None:
            logger.debug("Outline touches query rectangle (%g, %g, %g, %g)", x, y, width, height)
            return BOUNDARY_CROSSING
        cross += count
        flat.advance()

    if cx != mx or cy != my:
        count = intersect_line(cx, cy, mx, my, rx1, ry1, rx2, ry2)
        if count is None:
            logger.debug("Outline touches query rectangle (%g, %g, %g, %g)", x, y, width, height)
            return BOUNDARY_CROSSING
        cross += count
    return CrossingResult(cross)


def stream_bounds(stream: SegmentStream) -> tuple[float, float, float, float] | None:
    """Bounding box of every coordinate a stream emits, control points included.

    Args:
        stream: Stream to walk; consumed by the call

    Returns:
        Tuple of (min_x, min_y, max_x, max_y), or None for an empty stream
    """
    coords = [0.0] * 6
    xs: list[float] = []
    ys: list[float] = []
    while not stream.is_exhausted:
        kind = stream.current_segment(coords)
        n = 2 * kind.point_count
        xs.extend(coords[0:n:2])
        ys.extend(coords[1:n:2])
        stream.advance()
    if not xs:
        return None
    return (min(xs), min(ys), max(xs), max(ys))


def shape_contains_point(
    shape: SegmentSource,
    x: float,
    y: float,
    rule: WindingRule | None = None,
    config: CrossingConfig | None = None,
) -> bool:
    """Point containment derived from the shape's outline.

    Args:
        shape: Shape to test
        x: Query x coordinate
        y: Query y coordinate
        rule: Winding rule override; defaults to the stream's own rule
        config: Internal flattening settings

    Returns:
        True if the point is inside under the winding rule
    """
    stream = shape.segment_stream()
    rule = rule or stream.winding_rule()
    return rule.is_inside(cross_stream(stream, x, y, config))


def classify_rect(
    shape: SegmentSource,
    x: float,
    y: float,
    width: float,
    height: float,
    rule: WindingRule | None = None,
    config: CrossingConfig | None = None,
) -> Containment:
    """Three-way classification of a rectangle against the shape's outline.

    Rectangles with a non-positive width or height, and rectangles that miss
    the outline's bounding box, are classified OUTSIDE without walking the
    outline.
    """
    if width <= 0.0 or height <= 0.0:
        return Containment.OUTSIDE
    bounds = stream_bounds(shape.segment_stream())
    if bounds is None:
        return Containment.OUTSIDE
    min_x, min_y, max_x, max_y = bounds
    if x > max_x or y > max_y or x + width < min_x or y + height < min_y:
        return Containment.OUTSIDE

    stream = shape.segment_stream()
    rule = rule or stream.winding_rule()
    return intersect_stream(stream, x, y, width, height, config).classify(rule)


def shape_contains_rect(
    shape: SegmentSource,
    x: float,
    y: float,
    width: float,
    height: float,
    rule: WindingRule | None = None,
    config: CrossingConfig | None = None,
) -> bool:
    """True if the rectangle lies wholly inside the shape.

    A rectangle touching the outline is not contained. Rectangles with a
    non-positive width or height are never contained.
    """
    outcome = classify_rect(shape, x, y, width, height, rule, config)
    return outcome is Containment.INSIDE


def shape_intersects_rect(
    shape: SegmentSource,
    x: float,
    y: float,
    width: float,
    height: float,
    rule: WindingRule | None = None,
    config: CrossingConfig | None = None,
) -> bool:
    """True if the rectangle overlaps the shape's interior or outline.

    Rectangles with a non-positive width or height never intersect.
    """
    outcome = classify_rect(shape, x, y, width, height, rule, config)
    return outcome is Containment.INSIDE or outcome is Containment.BOUNDARY
