"""Segment stream contract shared by every shape outline.

A segment stream walks the outline of a shape one drawing instruction at a
time. The caller owns the stream, advances it, and reads the current
segment's coordinates into a buffer of at least six floats:

    coords = [0.0] * 6
    while not stream.is_exhausted:
        kind = stream.current_segment(coords)
        ...
        stream.advance()

Streams never rewind. To walk an outline again, ask the shape for a new
stream.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from shapekit.core.transform import AffineTransform


class SegmentType(IntEnum):
    """Drawing instruction tag. The integer codes are stable."""

    MOVE_TO = 0
    LINE_TO = 1
    QUAD_TO = 2
    CUBIC_TO = 3
    CLOSE = 4

    @property
    def point_count(self) -> int:
        """Number of (x, y) pairs carried by a segment of this type."""
        return _POINT_COUNTS[self]


_POINT_COUNTS = {
    SegmentType.MOVE_TO: 1,
    SegmentType.LINE_TO: 1,
    SegmentType.QUAD_TO: 2,
    SegmentType.CUBIC_TO: 3,
    SegmentType.CLOSE: 0,
}


class WindingRule(Enum):
    """Rule for turning a signed crossing count into inside/outside."""

    NON_ZERO = "non_zero"
    EVEN_ODD = "even_odd"

    def is_inside(self, crossings: int) -> bool:
        """Apply the rule to a signed crossing count."""
        if self is WindingRule.NON_ZERO:
            return crossings != 0
        return crossings % 2 != 0


@dataclass(frozen=True, slots=True)
class Segment:
    """A single drawing instruction detached from its stream.

    Attributes:
        type: Segment tag
        coords: Flat coordinates, two per point (empty for CLOSE)
    """

    type: SegmentType
    coords: tuple[float, ...] = ()

    @property
    def points(self) -> list[tuple[float, float]]:
        """Coordinates grouped as (x, y) pairs."""
        return [(self.coords[i], self.coords[i + 1]) for i in range(0, len(self.coords), 2)]

    @property
    def end_point(self) -> tuple[float, float] | None:
        """Last point of the segment, None for CLOSE."""
        if not self.coords:
            return None
        return (self.coords[-2], self.coords[-1])

    def __str__(self) -> str:
        if not self.coords:
            return self.type.name
        body = ", ".join(f"{c:g}" for c in self.coords)
        return f"{self.type.name}({body})"


class SegmentStream(ABC):
    """A forward-only cursor over the segments of a shape outline."""

    @abstractmethod
    def winding_rule(self) -> WindingRule:
        """Winding rule of the outline being walked."""

    @property
    @abstractmethod
    def is_exhausted(self) -> bool:
        """True once there is no current segment."""

    @abstractmethod
    def advance(self) -> None:
        """Move to the next segment.

        Must not be called on an exhausted stream. Implementations may treat
        that as a no-op but callers cannot rely on it.
        """

    @abstractmethod
    def current_segment(self, coords: list[float]) -> SegmentType:
        """Write the current segment's coordinates into ``coords``.

        Args:
            coords: Output buffer with room for at least six floats

        Returns:
            Tag of the current segment

        Raises:
            StreamExhaustedError: If the stream is exhausted
        """

    def __iter__(self) -> Iterator[Segment]:
        return iter_segments(self)


def iter_segments(stream: SegmentStream) -> Iterator[Segment]:
    """Drain a stream, yielding each segment as a detached value.

    Args:
        stream: Stream to consume; it is exhausted afterwards

    Yields:
        Segment values in stream order
    """
    coords = [0.0] * 6
    while not stream.is_exhausted:
        kind = stream.current_segment(coords)
        yield Segment(kind, tuple(coords[: 2 * kind.point_count]))
        stream.advance()


class SegmentSource(Protocol):
    """Anything that can produce a fresh stream over its outline."""

    def segment_stream(self, transform: "AffineTransform | None" = None) -> SegmentStream:
        ...
