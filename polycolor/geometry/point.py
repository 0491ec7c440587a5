from __future__ import annotations
import math
from collections.abc import Mapping, Sequence
from typing import Any, Optional, Union

import numpy as np

from ..utils.formatter import format_number

PointInput = Union["Point", Sequence[float], np.ndarray, Mapping, None]


class Point:
    """A mutable 2D point, also used as a vector.

    Arithmetic helpers return new points; only ``set`` and attribute
    assignment mutate.
    """

    __slots__ = ("x", "y")

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x = float(x)
        self.y = float(y)

    @classmethod
    def read(cls, value: PointInput, clone: bool = True) -> Optional["Point"]:
        """
        Build a point from a point-like value.

        Accepts a Point (cloned unless ``clone`` is False), an ``(x, y)``
        pair, a mapping with ``x``/``y`` keys, any object exposing ``x`` and
        ``y`` attributes, or None (returned as None).

        Raises:
            TypeError: if the value cannot describe a point.
        """
        if value is None:
            return None
        if isinstance(value, Point):
            return value.clone() if clone else value
        if isinstance(value, Mapping):
            return cls(value.get("x", 0.0), value.get("y", 0.0))
        if isinstance(value, (Sequence, np.ndarray)) and not isinstance(value, str) and len(value) == 2:
            return cls(value[0], value[1])
        if hasattr(value, "x") and hasattr(value, "y"):
            return cls(value.x, value.y)
        raise TypeError(f"Cannot read a point from {value!r}")

    def set(self, x: float, y: float) -> "Point":
        self.x = float(x)
        self.y = float(y)
        return self

    def clone(self) -> "Point":
        return Point(self.x, self.y)

    def add(self, other: Any) -> "Point":
        other = Point.read(other, clone=False)
        return Point(self.x + other.x, self.y + other.y)

    def subtract(self, other: Any) -> "Point":
        other = Point.read(other, clone=False)
        return Point(self.x - other.x, self.y - other.y)

    def multiply(self, factor: float) -> "Point":
        return Point(self.x * factor, self.y * factor)

    def get_length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalize(self, length: float = 1.0) -> "Point":
        """Return a vector with the same direction and the given length."""
        current = self.get_length()
        scale = length / current if current != 0 else 0.0
        return Point(self.x * scale, self.y * scale)

    def get_distance(self, other: Any) -> float:
        other = Point.read(other, clone=False)
        return math.hypot(other.x - self.x, other.y - self.y)

    __add__ = add
    __sub__ = subtract

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Point):
            return self.x == other.x and self.y == other.y
        return NotImplemented

    __hash__ = None  # mutable

    def __iter__(self):
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        return f"Point({self.x!r}, {self.y!r})"

    def __str__(self) -> str:
        return f"{{ x: {format_number(self.x)}, y: {format_number(self.y)} }}"
