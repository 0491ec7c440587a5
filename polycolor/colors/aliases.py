"""Representation-specific constructors kept for callers that name the type up front."""

from typing import Any, Callable

from ..types.color_types import Representation
from .color import Color
from .parser import _is_sequence


def _typed_constructor(rep: Representation) -> Callable[..., Color]:
    def constructor(*args: Any, **kwargs: Any) -> Color:
        if len(args) == 1 and isinstance(args[0], str):
            return Color(args[0], **kwargs)
        if args and _is_sequence(args[0]):
            return Color(rep.value, args[0], **kwargs)
        return Color(rep.value, *args, **kwargs)

    name = rep.value.capitalize() + "Color"
    constructor.__name__ = constructor.__qualname__ = name
    constructor.__doc__ = f"Build a {rep.value} Color from components, or parse a color string."
    return constructor


GrayColor = _typed_constructor(Representation.GRAY)
RgbColor = _typed_constructor(Representation.RGB)
HsbColor = _typed_constructor(Representation.HSB)
HslColor = _typed_constructor(Representation.HSL)
GradientColor = _typed_constructor(Representation.GRADIENT)

RGBColor = RgbColor
HSBColor = HsbColor
HSLColor = HslColor

__all__ = [
    "GrayColor",
    "RgbColor",
    "HsbColor",
    "HslColor",
    "GradientColor",
    "RGBColor",
    "HSBColor",
    "HSLColor",
]
