"""General paths built from recorded segments."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from shapekit.core import crossing
from shapekit.core.crossing import Containment
from shapekit.core.iterators import PathSegmentIterator
from shapekit.core.segments import (
    Segment,
    SegmentStream,
    SegmentType,
    WindingRule,
    iter_segments,
)
from shapekit.core.transform import AffineTransform
from shapekit.domain.base import OutlineMixin
from shapekit.domain.primitives import Point, Rectangle
from shapekit.exceptions import PathStateError


@dataclass
class Path(OutlineMixin):
    """A shape made of any number of subpaths.

    Segments are stored as a list of tags plus one flat list of coordinates
    consumed in tag order. Containment follows the path's winding rule.

    Attributes:
        winding_rule: Rule for deciding the interior
        types: Segment tags in drawing order
        coords: Flat coordinates of all segments
    """

    winding_rule: WindingRule = WindingRule.NON_ZERO
    types: list[SegmentType] = field(default_factory=list)
    coords: list[float] = field(default_factory=list)

    @classmethod
    def from_segments(
        cls,
        segments: Iterable[Segment],
        winding_rule: WindingRule = WindingRule.NON_ZERO,
    ) -> "Path":
        path = cls(winding_rule)
        for segment in segments:
            path._append(segment.type, segment.coords)
        return path

    @classmethod
    def from_stream(cls, stream: SegmentStream) -> "Path":
        """Record every segment of a stream, keeping its winding rule."""
        return cls.from_segments(iter_segments(stream), stream.winding_rule())

    @property
    def is_empty(self) -> bool:
        return not self.types

    @property
    def current_point(self) -> Point | None:
        """Pen position after the last segment, None for an empty path."""
        if not self.types:
            return None
        if self.types[-1] is SegmentType.CLOSE:
            return self._last_move_point()
        return Point(self.coords[-2], self.coords[-1])

    def _last_move_point(self) -> Point:
        offset = len(self.coords)
        for kind in reversed(self.types):
            offset -= 2 * kind.point_count
            if kind is SegmentType.MOVE_TO:
                return Point(self.coords[offset], self.coords[offset + 1])
        raise PathStateError("Path has no MOVE_TO segment")

    def _append(self, kind: SegmentType, values: Iterable[float]) -> None:
        values = list(values)
        if len(values) != 2 * kind.point_count:
            raise PathStateError(
                f"{kind.name} takes {2 * kind.point_count} coordinates, got {len(values)}"
            )
        if kind is SegmentType.MOVE_TO:
            if self.types and self.types[-1] is SegmentType.MOVE_TO:
                # Consecutive moves collapse into the last one
                self.coords[-2:] = values
                return
        elif not self.types:
            raise PathStateError(f"Path must start with MOVE_TO, not {kind.name}")
        elif kind is SegmentType.CLOSE and self.types[-1] is SegmentType.CLOSE:
            return
        self.types.append(kind)
        self.coords.extend(values)

    def move_to(self, x: float, y: float) -> "Path":
        self._append(SegmentType.MOVE_TO, (x, y))
        return self

    def line_to(self, x: float, y: float) -> "Path":
        self._append(SegmentType.LINE_TO, (x, y))
        return self

    def quad_to(self, ctrl_x: float, ctrl_y: float, x: float, y: float) -> "Path":
        self._append(SegmentType.QUAD_TO, (ctrl_x, ctrl_y, x, y))
        return self

    def curve_to(
        self,
        ctrl1_x: float,
        ctrl1_y: float,
        ctrl2_x: float,
        ctrl2_y: float,
        x: float,
        y: float,
    ) -> "Path":
        self._append(SegmentType.CUBIC_TO, (ctrl1_x, ctrl1_y, ctrl2_x, ctrl2_y, x, y))
        return self

    def close_path(self) -> "Path":
        self._append(SegmentType.CLOSE, ())
        return self

    def append(self, stream: SegmentStream, connect: bool = False) -> "Path":
        """Record every segment of another outline.

        Args:
            stream: Outline to copy; consumed by the call
            connect: Turn the stream's leading MOVE_TO into a LINE_TO when this
                path has an open subpath

        Returns:
            self, for chaining
        """
        first = True
        for segment in iter_segments(stream):
            kind = segment.type
            if (
                first
                and connect
                and kind is SegmentType.MOVE_TO
                and self.types
                and self.types[-1] is not SegmentType.CLOSE
            ):
                kind = SegmentType.LINE_TO
            self._append(kind, segment.coords)
            first = False
        return self

    def transform(self, transform: AffineTransform) -> "Path":
        """Transform all coordinates in place; returns self."""
        transform.apply(self.coords, 0, self.coords, 0, len(self.coords) // 2)
        return self

    def contains(self, px: float, py: float) -> bool:
        return crossing.shape_contains_point(self, px, py)

    def classify_rect(self, x: float, y: float, width: float, height: float) -> Containment:
        """Three-way classification of a rectangle against this path."""
        return crossing.classify_rect(self, x, y, width, height)

    def contains_rect(self, x: float, y: float, width: float, height: float) -> bool:
        return crossing.shape_contains_rect(self, x, y, width, height)

    def intersects_rect(self, x: float, y: float, width: float, height: float) -> bool:
        return crossing.shape_intersects_rect(self, x, y, width, height)

    def bounds(self) -> Rectangle:
        """Bounds of all points, control points included."""
        box = crossing.stream_bounds(self.segment_stream())
        if box is None:
            return Rectangle()
        return Rectangle.from_points(*box)

    def segment_stream(self, transform: AffineTransform | None = None) -> SegmentStream:
        return PathSegmentIterator(self.types, self.coords, self.winding_rule, transform)
