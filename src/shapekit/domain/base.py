"""Outline helpers shared by every shape."""

from shapekit.core.flattening import DEFAULT_SUBDIVISION_LIMIT, flatten
from shapekit.core.segments import Segment, SegmentStream, iter_segments
from shapekit.core.transform import AffineTransform


class OutlineMixin:
    """Derived views over a shape's ``segment_stream``.

    Shapes only implement ``segment_stream(transform)``; the flattened stream
    and the detached segment lists are built on top of it.
    """

    def segment_stream(self, transform: AffineTransform | None = None) -> SegmentStream:
        raise NotImplementedError

    def flattened_stream(
        self, flatness: float, subdivision_limit: int = DEFAULT_SUBDIVISION_LIMIT
    ) -> SegmentStream:
        """Outline with curves replaced by line segments."""
        return flatten(self, flatness, subdivision_limit)

    def flattened_segments(
        self, flatness: float, subdivision_limit: int = DEFAULT_SUBDIVISION_LIMIT
    ) -> list[Segment]:
        return list(iter_segments(self.flattened_stream(flatness, subdivision_limit)))

    def segments(self, transform: AffineTransform | None = None) -> list[Segment]:
        return list(iter_segments(self.segment_stream(transform)))
