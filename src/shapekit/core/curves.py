"""Closed-form helpers for line segments and Bezier curves.

Curve functions work on flat coordinate sequences so the flattening engine
can run them directly against its subdivision buffer:

- quadratic curves occupy six floats: ``x1, y1, ctrlx, ctrly, x2, y2``
- cubic curves occupy eight floats:
  ``x1, y1, ctrl1x, ctrl1y, ctrl2x, ctrl2y, x2, y2``

All functions are pure and allocation-free apart from their return values.
"""

import math
from collections.abc import MutableSequence, Sequence


def point_seg_dist_sq(
    px: float, py: float, x1: float, y1: float, x2: float, y2: float
) -> float:
    """Squared distance from a point to the segment (x1, y1)-(x2, y2)."""
    x2 -= x1
    y2 -= y1
    px -= x1
    py -= y1
    dot = px * x2 + py * y2
    if dot <= 0.0:
        proj_len_sq = 0.0
    else:
        px = x2 - px
        py = y2 - py
        dot = px * x2 + py * y2
        if dot <= 0.0:
            proj_len_sq = 0.0
        else:
            proj_len_sq = dot * dot / (x2 * x2 + y2 * y2)
    return max(px * px + py * py - proj_len_sq, 0.0)


def point_seg_dist(
    px: float, py: float, x1: float, y1: float, x2: float, y2: float
) -> float:
    """Distance from a point to the segment (x1, y1)-(x2, y2)."""
    return math.sqrt(point_seg_dist_sq(px, py, x1, y1, x2, y2))


def point_line_dist_sq(
    px: float, py: float, x1: float, y1: float, x2: float, y2: float
) -> float:
    """Squared distance from a point to the infinite line through two points."""
    x2 -= x1
    y2 -= y1
    px -= x1
    py -= y1
    len_sq = x2 * x2 + y2 * y2
    if len_sq == 0.0:
        return px * px + py * py
    dot = px * x2 + py * y2
    return max(px * px + py * py - dot * dot / len_sq, 0.0)


def point_line_dist(
    px: float, py: float, x1: float, y1: float, x2: float, y2: float
) -> float:
    """Distance from a point to the infinite line through two points."""
    return math.sqrt(point_line_dist_sq(px, py, x1, y1, x2, y2))


def relative_ccw(
    px: float, py: float, x1: float, y1: float, x2: float, y2: float
) -> int:
    """Side of the segment (x1, y1)-(x2, y2) on which a point lies.

    Returns:
        1 for counter-clockwise, -1 for clockwise and 0 when the point lies
        on the segment. Collinear points beyond either end report the sign of
        the extension they lie on.
    """
    x2 -= x1
    y2 -= y1
    px -= x1
    py -= y1
    ccw = px * y2 - py * x2
    if ccw == 0.0:
        ccw = px * x2 + py * y2
        if ccw > 0.0:
            px -= x2
            py -= y2
            ccw = px * x2 + py * y2
            if ccw < 0.0:
                ccw = 0.0
    if ccw < 0.0:
        return -1
    if ccw > 0.0:
        return 1
    return 0


def lines_intersect(
    x1: float, y1: float, x2: float, y2: float,
    x3: float, y3: float, x4: float, y4: float,
) -> bool:
    """True if segment (x1, y1)-(x2, y2) meets segment (x3, y3)-(x4, y4)."""
    return (
        relative_ccw(x3, y3, x1, y1, x2, y2) * relative_ccw(x4, y4, x1, y1, x2, y2) <= 0
        and relative_ccw(x1, y1, x3, y3, x4, y4) * relative_ccw(x2, y2, x3, y3, x4, y4) <= 0
    )


def line_intersects_rect(
    x1: float, y1: float, x2: float, y2: float,
    rx: float, ry: float, rw: float, rh: float,
) -> bool:
    """True if a segment touches the rectangle (rx, ry, rw, rh).

    A segment intersects when either endpoint lies in the closed rectangle or
    when it crosses one of the rectangle's diagonals.
    """
    rr = rx + rw
    rb = ry + rh
    return (
        (rx <= x1 <= rr and ry <= y1 <= rb)
        or (rx <= x2 <= rr and ry <= y2 <= rb)
        or lines_intersect(rx, ry, rr, rb, x1, y1, x2, y2)
        or lines_intersect(rr, ry, rx, rb, x1, y1, x2, y2)
    )


def quad_flatness_sq(coords: Sequence[float], offset: int = 0) -> float:
    """Squared distance from a quadratic's control point to its chord."""
    return point_seg_dist_sq(
        coords[offset + 2], coords[offset + 3],
        coords[offset + 0], coords[offset + 1],
        coords[offset + 4], coords[offset + 5],
    )


def cubic_flatness_sq(coords: Sequence[float], offset: int = 0) -> float:
    """Squared distance from the farther cubic control point to the chord."""
    x1 = coords[offset + 0]
    y1 = coords[offset + 1]
    x2 = coords[offset + 6]
    y2 = coords[offset + 7]
    return max(
        point_seg_dist_sq(coords[offset + 2], coords[offset + 3], x1, y1, x2, y2),
        point_seg_dist_sq(coords[offset + 4], coords[offset + 5], x1, y1, x2, y2),
    )


def subdivide_quad(
    src: Sequence[float],
    src_offset: int,
    left: MutableSequence[float] | None,
    left_offset: int,
    right: MutableSequence[float] | None,
    right_offset: int,
) -> None:
    """Split a quadratic at t = 0.5.

    The output halves may overlap the source and each other: all source
    values are read before anything is written, and the halves share their
    common midpoint.
    """
    x1 = src[src_offset + 0]
    y1 = src[src_offset + 1]
    cx = src[src_offset + 2]
    cy = src[src_offset + 3]
    x2 = src[src_offset + 4]
    y2 = src[src_offset + 5]

    lcx = (x1 + cx) / 2.0
    lcy = (y1 + cy) / 2.0
    rcx = (x2 + cx) / 2.0
    rcy = (y2 + cy) / 2.0
    mx = (lcx + rcx) / 2.0
    my = (lcy + rcy) / 2.0

    if left is not None:
        left[left_offset : left_offset + 6] = [x1, y1, lcx, lcy, mx, my]
    if right is not None:
        right[right_offset : right_offset + 6] = [mx, my, rcx, rcy, x2, y2]


def subdivide_cubic(
    src: Sequence[float],
    src_offset: int,
    left: MutableSequence[float] | None,
    left_offset: int,
    right: MutableSequence[float] | None,
    right_offset: int,
) -> None:
    """Split a cubic at t = 0.5 using De Casteljau's construction.

    Same aliasing rules as :func:`subdivide_quad`.
    """
    x1 = src[src_offset + 0]
    y1 = src[src_offset + 1]
    c1x = src[src_offset + 2]
    c1y = src[src_offset + 3]
    c2x = src[src_offset + 4]
    c2y = src[src_offset + 5]
    x2 = src[src_offset + 6]
    y2 = src[src_offset + 7]

    # First level
    ax = (x1 + c1x) / 2.0
    ay = (y1 + c1y) / 2.0
    bx = (c1x + c2x) / 2.0
    by = (c1y + c2y) / 2.0
    cx = (c2x + x2) / 2.0
    cy = (c2y + y2) / 2.0

    # Second level
    dx = (ax + bx) / 2.0
    dy = (ay + by) / 2.0
    ex = (bx + cx) / 2.0
    ey = (by + cy) / 2.0

    # Curve midpoint
    mx = (dx + ex) / 2.0
    my = (dy + ey) / 2.0

    if left is not None:
        left[left_offset : left_offset + 8] = [x1, y1, ax, ay, dx, dy, mx, my]
    if right is not None:
        right[right_offset : right_offset + 8] = [mx, my, ex, ey, cx, cy, x2, y2]


def quad_point(coords: Sequence[float], t: float, offset: int = 0) -> tuple[float, float]:
    """Evaluate a quadratic Bezier at parameter ``t``."""
    u = 1.0 - t
    a = u * u
    b = 2.0 * u * t
    c = t * t
    return (
        a * coords[offset + 0] + b * coords[offset + 2] + c * coords[offset + 4],
        a * coords[offset + 1] + b * coords[offset + 3] + c * coords[offset + 5],
    )


def cubic_point(coords: Sequence[float], t: float, offset: int = 0) -> tuple[float, float]:
    """Evaluate a cubic Bezier at parameter ``t``."""
    u = 1.0 - t
    a = u * u * u
    b = 3.0 * u * u * t
    c = 3.0 * u * t * t
    d = t * t * t
    return (
        a * coords[offset + 0] + b * coords[offset + 2]
        + c * coords[offset + 4] + d * coords[offset + 6],
        a * coords[offset + 1] + b * coords[offset + 3]
        + c * coords[offset + 5] + d * coords[offset + 7],
    )
