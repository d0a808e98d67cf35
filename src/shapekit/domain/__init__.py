"""Domain models for shapekit.

This module contains the shape types whose outlines feed the segment
stream, flattening and crossing engines:

- Point: An immutable 2D point
- Rectangle: Axis-aligned rectangle
- Line: A line segment
- QuadCurve / CubicCurve: Quadratic and cubic Bezier curves
- Ellipse / Circle: Conic shapes approximated by four cubic arcs
- Path: A general shape recorded segment by segment
"""

from shapekit.domain.ellipse import Circle, Ellipse
from shapekit.domain.lines import CubicCurve, Line, QuadCurve
from shapekit.domain.path import Path
from shapekit.domain.primitives import Point, Rectangle

__all__: list[str] = [
    "Circle",
    "CubicCurve",
    "Ellipse",
    "Line",
    "Path",
    "Point",
    "QuadCurve",
    "Rectangle",
]
