from __future__ import annotations
import math
from typing import Optional

import numpy as np

from .point import Point


class Matrix:
    """2D affine transform backed by a 3x3 numpy array.

    Parameters follow the canvas convention ``(a, c, b, d, tx, ty)`` where a
    point maps to ``(a*x + b*y + tx, c*x + d*y + ty)``.
    """

    __slots__ = ("_m",)

    def __init__(
        self,
        a: float = 1.0,
        c: float = 0.0,
        b: float = 0.0,
        d: float = 1.0,
        tx: float = 0.0,
        ty: float = 0.0,
    ) -> None:
        self._m = np.array([
            [a, b, tx],
            [c, d, ty],
            [0.0, 0.0, 1.0],
        ], dtype=np.float64)

    @property
    def values(self) -> np.ndarray:
        """Return a copy of the underlying 3x3 array."""
        return self._m.copy()

    def concatenate(self, other: "Matrix") -> "Matrix":
        """Apply ``other`` before this transform, in place."""
        self._m = self._m @ other._m
        return self

    def translate(self, dx: float, dy: float) -> "Matrix":
        return self.concatenate(Matrix(tx=dx, ty=dy))

    def scale(self, sx: float, sy: Optional[float] = None) -> "Matrix":
        return self.concatenate(Matrix(a=sx, d=sx if sy is None else sy))

    def rotate(self, degrees: float) -> "Matrix":
        rad = math.radians(degrees)
        cos, sin = math.cos(rad), math.sin(rad)
        return self.concatenate(Matrix(a=cos, c=sin, b=-sin, d=cos))

    def transform_point(self, src: Point, dst: Optional[Point] = None) -> Point:
        """
        Transform ``src`` and write the result into ``dst``.

        ``dst`` may be ``src`` itself to transform in place; when omitted a
        new point is returned.
        """
        x, y, _ = self._m @ np.array([src.x, src.y, 1.0])
        if dst is None:
            return Point(x, y)
        dst.x = float(x)
        dst.y = float(y)
        return dst

    def is_identity(self) -> bool:
        return bool(np.allclose(self._m, np.eye(3)))

    def __repr__(self) -> str:
        a, b, tx = (float(v) for v in self._m[0])
        c, d, ty = (float(v) for v in self._m[1])
        return f"Matrix({a!r}, {c!r}, {b!r}, {d!r}, {tx!r}, {ty!r})"
