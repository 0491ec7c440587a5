"""Reference point and matrix types used for gradient anchors."""

from .point import Point
from .matrix import Matrix

__all__ = ["Point", "Matrix"]
