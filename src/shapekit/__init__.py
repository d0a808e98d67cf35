"""Shapekit - 2D geometry primitives with segment streams and hit testing.

Shapekit models lines, rectangles, ellipses, circles, quadratic and cubic
Bezier curves and general paths. Every shape exposes its outline as a lazy
stream of drawing segments which can be flattened into polylines or fed to
the crossing-number engine for containment and intersection queries.

Example:
    >>> from shapekit.domain import Ellipse
    >>> Ellipse(0, 0, 4, 2).contains(2, 1)
    True
"""

__version__ = "0.1.0"
__author__ = "Shapekit Authors"

__all__ = ["__author__", "__version__"]
