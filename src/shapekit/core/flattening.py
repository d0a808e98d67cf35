"""Adaptive flattening of curved segment streams.

The flattening iterator wraps any segment stream and re-emits it using only
MoveTo, LineTo and Close. Each QuadTo or CubicTo is subdivided at its
midpoint until every piece is flat enough, then emitted as one LineTo per
piece.

Pending pieces live in a flat list of floats used as a stack that grows
towards index 0. Neighbouring pieces share their joint point, so the live
region of the buffer is a chain of control points running from the current
piece to the source segment's end point:

    [ ...free... | x1 y1 c.. x y | c.. x y | ... | c.. xN yN ]
                   ^ index                              ^ size

Splitting the top piece writes its left half just below ``index`` and its
right half in place, and popping a piece moves ``index`` past it. The
source segment is finished once only its end point remains. Every pending
piece records its subdivision depth; depth starts at zero for each source
curve, and pieces at the limit are emitted without further splits.
"""

import logging
from collections.abc import Callable, MutableSequence, Sequence

from shapekit.config import FlatteningConfig
from shapekit.core.curves import (
    cubic_flatness_sq,
    quad_flatness_sq,
    subdivide_cubic,
    subdivide_quad,
)
from shapekit.core.segments import SegmentSource, SegmentStream, SegmentType, WindingRule
from shapekit.core.transform import AffineTransform
from shapekit.exceptions import InvalidConfigurationError, StreamExhaustedError

logger = logging.getLogger(__name__)

DEFAULT_BUFFER_CAPACITY = 16
DEFAULT_SUBDIVISION_LIMIT = 16
DEFAULT_GROWTH_INCREMENT = 16

_FlatnessFn = Callable[[Sequence[float], int], float]
_SubdivideFn = Callable[
    [Sequence[float], int, MutableSequence[float], int, MutableSequence[float], int],
    None,
]

# Per curve type: floats added per piece, flatness measure, splitter
_CURVES: dict[SegmentType, tuple[int, _FlatnessFn, _SubdivideFn]] = {
    SegmentType.QUAD_TO: (4, quad_flatness_sq, subdivide_quad),
    SegmentType.CUBIC_TO: (6, cubic_flatness_sq, subdivide_cubic),
}


class FlatteningIterator(SegmentStream):
    """Segment stream that replaces curves with line segments.

    Args:
        source: Stream to flatten; consumed as this iterator advances
        flatness: Maximum squared-distance tolerance, given as a distance
        subdivision_limit: Maximum subdivision depth for any piece of a curve
        buffer_capacity: Initial size of the subdivision buffer in floats
        growth_increment: Floats added whenever the buffer runs out of room

    Raises:
        InvalidConfigurationError: If any numeric argument is out of range
    """

    def __init__(
        self,
        source: SegmentStream,
        flatness: float,
        subdivision_limit: int = DEFAULT_SUBDIVISION_LIMIT,
        buffer_capacity: int = DEFAULT_BUFFER_CAPACITY,
        growth_increment: int = DEFAULT_GROWTH_INCREMENT,
    ) -> None:
        if flatness < 0:
            raise InvalidConfigurationError("flatness", flatness, "must not be negative")
        if subdivision_limit < 0:
            raise InvalidConfigurationError(
                "subdivision_limit", subdivision_limit, "must not be negative"
            )
        if buffer_capacity <= 0:
            raise InvalidConfigurationError(
                "buffer_capacity", buffer_capacity, "must be positive"
            )
        if growth_increment <= 0:
            raise InvalidConfigurationError(
                "growth_increment", growth_increment, "must be positive"
            )

        self._source = source
        self._flatness = flatness
        self._flatness_sq = flatness * flatness
        self._limit = subdivision_limit
        self._growth = growth_increment

        self._buf: list[float] = [0.0] * buffer_capacity
        self._index = buffer_capacity
        self._buf_empty = True
        self._buf_type = SegmentType.MOVE_TO
        # Subdivision depth of each pending piece, top of stack last
        self._levels: list[int] = []

        # Source coordinates of the segment being flattened
        self._coords = [0.0] * 6
        # Current output point and the start of the current subpath
        self._px = 0.0
        self._py = 0.0
        self._mx = 0.0
        self._my = 0.0
        # Whether the current output segment has been computed
        self._ready = False

    @classmethod
    def from_config(
        cls, source: SegmentStream, config: FlatteningConfig
    ) -> "FlatteningIterator":
        """Build an iterator from validated settings."""
        return cls(
            source,
            config.flatness,
            config.subdivision_limit,
            config.buffer_initial_capacity,
            config.buffer_growth_increment,
        )

    @property
    def flatness(self) -> float:
        return self._flatness

    @property
    def subdivision_limit(self) -> int:
        return self._limit

    @property
    def buffer_size(self) -> int:
        """Current size of the subdivision buffer in floats."""
        return len(self._buf)

    def winding_rule(self) -> WindingRule:
        return self._source.winding_rule()

    @property
    def is_exhausted(self) -> bool:
        return self._buf_empty and self._source.is_exhausted

    def advance(self) -> None:
        if not self._ready:
            self._evaluate()
        self._ready = False
        if self._buf_empty:
            self._source.advance()

    def current_segment(self, coords: list[float]) -> SegmentType:
        if self.is_exhausted:
            raise StreamExhaustedError(type(self).__name__)
        if not self._ready:
            self._evaluate()
            self._ready = True

        kind = self._buf_type
        if kind is SegmentType.CLOSE:
            return kind
        coords[0] = self._px
        coords[1] = self._py
        if kind is SegmentType.MOVE_TO:
            return kind
        return SegmentType.LINE_TO

    def _evaluate(self) -> None:
        """Compute the next output point for the current source segment.

        Lines and moves pass through unchanged. Curves are loaded into the
        buffer on first visit, then the top piece is split until it is flat
        or has reached the subdivision limit, and popped.
        """
        if self._buf_empty:
            self._buf_type = self._source.current_segment(self._coords)

        kind = self._buf_type
        if kind is SegmentType.MOVE_TO:
            self._px = self._mx = self._coords[0]
            self._py = self._my = self._coords[1]
            return
        if kind is SegmentType.LINE_TO:
            self._px = self._coords[0]
            self._py = self._coords[1]
            return
        if kind is SegmentType.CLOSE:
            self._px = self._mx
            self._py = self._my
            return

        step, flatness_sq, subdivide = _CURVES[kind]

        if self._buf_empty:
            self._reserve(step + 2)
            self._index -= step + 2
            self._buf[self._index] = self._px
            self._buf[self._index + 1] = self._py
            self._buf[self._index + 2 : self._index + 2 + step] = self._coords[0:step]
            self._buf_empty = False
            self._levels = [0]

        level = self._levels[-1]
        while level < self._limit:
            if flatness_sq(self._buf, self._index) < self._flatness_sq:
                break
            self._reserve(step)
            subdivide(
                self._buf, self._index, self._buf, self._index - step, self._buf, self._index
            )
            self._index -= step
            level += 1
            self._levels[-1] = level
            self._levels.append(level)

        self._levels.pop()
        self._index += step
        self._px = self._buf[self._index]
        self._py = self._buf[self._index + 1]

        if not self._levels:
            self._buf_empty = True
            self._index = len(self._buf)

    def _reserve(self, needed: int) -> None:
        """Grow the buffer until ``needed`` floats are free below the index."""
        if self._index >= needed:
            return
        grow = self._growth
        while self._index + grow < needed:
            grow += self._growth
        self._buf[0:0] = [0.0] * grow
        self._index += grow
        logger.debug(
            "Grew flattening buffer to %d floats at depth %d",
            len(self._buf),
            self._levels[-1] if self._levels else 0,
        )


def flatten(
    shape: SegmentSource,
    flatness: float,
    subdivision_limit: int = DEFAULT_SUBDIVISION_LIMIT,
    transform: AffineTransform | None = None,
) -> FlatteningIterator:
    """Flattened stream over a shape's outline.

    Args:
        shape: Shape whose outline to flatten
        flatness: Maximum distance between curve and polyline
        subdivision_limit: Maximum subdivision depth for any piece of a curve
        transform: Optional transform applied to the outline first

    Returns:
        A fresh flattening iterator
    """
    return FlatteningIterator(shape.segment_stream(transform), flatness, subdivision_limit)
