"""Affine transforms applied to batches of coordinate pairs."""

import math
from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass

from shapekit.exceptions import GeometryError


@dataclass(frozen=True, slots=True)
class AffineTransform:
    """A 2x3 affine matrix.

    Maps ``(x, y)`` to ``(m00*x + m01*y + tx, m10*x + m11*y + ty)``.
    Instances are immutable; composition returns a new transform.
    """

    m00: float = 1.0
    m01: float = 0.0
    m10: float = 0.0
    m11: float = 1.0
    tx: float = 0.0
    ty: float = 0.0

    @classmethod
    def identity(cls) -> "AffineTransform":
        return cls()

    @classmethod
    def translation(cls, tx: float, ty: float) -> "AffineTransform":
        return cls(tx=tx, ty=ty)

    @classmethod
    def scaling(cls, sx: float, sy: float | None = None) -> "AffineTransform":
        return cls(m00=sx, m11=sx if sy is None else sy)

    @classmethod
    def rotation(cls, angle: float) -> "AffineTransform":
        """Counter-clockwise rotation by ``angle`` radians about the origin."""
        sina = math.sin(angle)
        cosa = math.cos(angle)
        return cls(m00=cosa, m01=-sina, m10=sina, m11=cosa)

    @classmethod
    def from_components(
        cls,
        scale_x: float,
        scale_y: float,
        rotation: float,
        tx: float = 0.0,
        ty: float = 0.0,
    ) -> "AffineTransform":
        """Rotate, then scale each axis, then translate.

        Args:
            scale_x: Scale applied to the rotated x coordinate
            scale_y: Scale applied to the rotated y coordinate
            rotation: Rotation angle in radians
            tx: Translation along x
            ty: Translation along y

        Returns:
            The combined transform
        """
        sina = math.sin(rotation)
        cosa = math.cos(rotation)
        return cls(
            m00=cosa * scale_x,
            m01=-sina * scale_x,
            m10=sina * scale_y,
            m11=cosa * scale_y,
            tx=tx,
            ty=ty,
        )

    @property
    def determinant(self) -> float:
        return self.m00 * self.m11 - self.m01 * self.m10

    @property
    def is_identity(self) -> bool:
        return self == _IDENTITY

    def then(self, other: "AffineTransform") -> "AffineTransform":
        """Transform that applies ``self`` first and ``other`` second."""
        return AffineTransform(
            m00=other.m00 * self.m00 + other.m01 * self.m10,
            m01=other.m00 * self.m01 + other.m01 * self.m11,
            m10=other.m10 * self.m00 + other.m11 * self.m10,
            m11=other.m10 * self.m01 + other.m11 * self.m11,
            tx=other.m00 * self.tx + other.m01 * self.ty + other.tx,
            ty=other.m10 * self.tx + other.m11 * self.ty + other.ty,
        )

    def inverted(self) -> "AffineTransform":
        """Inverse transform.

        Raises:
            GeometryError: If the matrix is singular
        """
        det = self.determinant
        if det == 0.0:
            raise GeometryError(f"Transform is not invertible: {self}")
        m00 = self.m11 / det
        m01 = -self.m01 / det
        m10 = -self.m10 / det
        m11 = self.m00 / det
        return AffineTransform(
            m00=m00,
            m01=m01,
            m10=m10,
            m11=m11,
            tx=-(m00 * self.tx + m01 * self.ty),
            ty=-(m10 * self.tx + m11 * self.ty),
        )

    def transform_point(self, x: float, y: float) -> tuple[float, float]:
        return (
            self.m00 * x + self.m01 * y + self.tx,
            self.m10 * x + self.m11 * y + self.ty,
        )

    def inverse_transform_point(self, x: float, y: float) -> tuple[float, float]:
        return self.inverted().transform_point(x, y)

    def apply(
        self,
        src: Sequence[float],
        src_offset: int,
        dst: MutableSequence[float],
        dst_offset: int,
        count: int,
    ) -> None:
        """Transform ``count`` (x, y) pairs from ``src`` into ``dst``.

        ``src`` and ``dst`` may be the same buffer with overlapping ranges;
        all input pairs are read before any output is written.

        Args:
            src: Source coordinates
            src_offset: Index of the first source x coordinate
            dst: Destination buffer
            dst_offset: Index of the first destination x coordinate
            count: Number of points to transform
        """
        pending = list(src[src_offset : src_offset + 2 * count])
        for i in range(0, 2 * count, 2):
            x = pending[i]
            y = pending[i + 1]
            dst[dst_offset + i] = self.m00 * x + self.m01 * y + self.tx
            dst[dst_offset + i + 1] = self.m10 * x + self.m11 * y + self.ty


_IDENTITY = AffineTransform()
