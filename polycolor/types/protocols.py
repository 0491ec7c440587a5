"""Structural interfaces for the collaborators a Color talks to."""

from __future__ import annotations
from typing import TYPE_CHECKING, Any, List, Optional, Protocol, Sequence, runtime_checkable

if TYPE_CHECKING:
    from ..colors.color import Color


@runtime_checkable
class StyleOwner(Protocol):
    def notify_style_changed(self) -> None: ...


@runtime_checkable
class PointLike(Protocol):
    x: float
    y: float

    def clone(self) -> "PointLike": ...
    def add(self, other: Any) -> "PointLike": ...
    def subtract(self, other: Any) -> "PointLike": ...
    def get_length(self) -> float: ...
    def normalize(self, length: float = 1.0) -> "PointLike": ...
    def get_distance(self, other: Any) -> float: ...


@runtime_checkable
class MatrixLike(Protocol):
    def transform_point(self, src: PointLike, dst: Optional[PointLike] = None) -> PointLike: ...


class GradientStopLike(Protocol):
    offset: float
    color: "Color"


@runtime_checkable
class GradientLike(Protocol):
    radial: bool

    @property
    def stops(self) -> Sequence[GradientStopLike]: ...

    def add_owner(self, color: "Color") -> None: ...


class PaintStyle(Protocol):
    def add_color_stop(self, offset: float, css: str) -> None: ...


@runtime_checkable
class DrawingSurface(Protocol):
    def resolve_named_color(self, name: str) -> List[float]: ...

    def create_linear_paint_style(self, x0: float, y0: float, x1: float, y1: float) -> PaintStyle: ...

    def create_radial_paint_style(
        self, fx: float, fy: float, r0: float, cx: float, cy: float, r1: float
    ) -> PaintStyle: ...
