"""Core algorithms for shapekit.

This module contains the shape-iteration and hit-testing kernel:

- Segment stream contract (segment tags, winding rules, draining helpers)
- Affine transforms applied to coordinate batches
- Per-shape iterators (line, curves, rectangle, ellipse, recorded paths)
- Adaptive flattening of curves with an explicit subdivision stack
- Crossing-number containment and intersection for any outline

All services are:
- Synchronous and free of shared state
- Owned by the caller for the duration of one traversal or query

Key functions:
- iter_segments: Drain a stream into Segment values
- flatten: Flattened stream over a shape's outline
- cross_stream: Signed crossing count around a point
- intersect_stream: Crossing result against a rectangle
- stream_bounds: Bounding box of a stream's coordinates

Key classes:
- SegmentStream: Forward-only cursor over an outline
- AffineTransform: 2x3 affine matrix
- FlatteningIterator: Curve-flattening stream wrapper
- CrossingResult / Containment: Crossing counts and their classification
"""

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
from shapekit.core.flattening import FlatteningIterator, flatten
from shapekit.core.iterators import (
    CubicCurveIterator,
    EllipseIterator,
    LineIterator,
    PathSegmentIterator,
    QuadCurveIterator,
    RectangleIterator,
)
from shapekit.core.segments import (
    Segment,
    SegmentSource,
    SegmentStream,
    SegmentType,
    WindingRule,
    iter_segments,
)
from shapekit.core.transform import AffineTransform

__all__ = [
    "BOUNDARY_CROSSING",
    "AffineTransform",
    "Containment",
    "CrossingResult",
    "CubicCurveIterator",
    "EllipseIterator",
    "FlatteningIterator",
    "LineIterator",
    "PathSegmentIterator",
    "QuadCurveIterator",
    "RectangleIterator",
    "Segment",
    "SegmentSource",
    "SegmentStream",
    "SegmentType",
    "WindingRule",
    "classify_rect",
    "cross_line",
    "cross_stream",
    "flatten",
    "intersect_line",
    "intersect_stream",
    "iter_segments",
    "shape_contains_point",
    "shape_contains_rect",
    "shape_intersects_rect",
    "stream_bounds",
]
