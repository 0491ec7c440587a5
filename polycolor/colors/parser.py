"""
Argument parsing for the Color constructor.

``parse_color_args`` normalizes every supported argument shape to a
``ParsedColor(type, components, alpha)``. Values are not clamped here; the
Color runs each component through its setter afterwards.
"""

from __future__ import annotations
import re
import warnings
from collections.abc import Mapping
from numbers import Real
from typing import Any, List, NamedTuple, Optional, Sequence

import numpy as np

from ..exceptions import ColorParseWarning
from ..geometry import Point
from ..types.color_types import (
    REPRESENTATIONS,
    ComponentKind,
    ComponentSpec,
    Representation,
    is_representation_name,
    to_representation,
)
from ..types.protocols import DrawingSurface, GradientLike
from .named import named_colors

HEX_PATTERN = re.compile(r"^#([0-9a-f]+)$", re.IGNORECASE)


class ParsedColor(NamedTuple):
    type: Representation
    components: List[Any]
    alpha: Optional[float]


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple, np.ndarray))


def hex_to_rgb(string: str) -> Optional[List[float]]:
    """
    Decode ``#rgb``, ``#rgba``, ``#rrggbb`` or ``#rrggbbaa``.

    Returns:
        ``[r, g, b]`` or ``[r, g, b, alpha]`` in [0, 1], or None when the
        string is not a hex color of one of these lengths.
    """
    match = HEX_PATTERN.match(string)
    if match is None:
        return None
    digits = match.group(1)
    if len(digits) in (3, 4):
        digits = "".join(d * 2 for d in digits)
    elif len(digits) not in (6, 8):
        return None
    return [int(digits[i:i + 2], 16) / 255 for i in range(0, len(digits), 2)]


def _parse_string(string: str, surface: Optional[DrawingSurface]) -> ParsedColor:
    string = string.strip()
    if string.startswith("#"):
        values = hex_to_rgb(string)
        if values is None:
            warnings.warn(
                f"Malformed hex color {string!r}, falling back to black",
                ColorParseWarning,
                stacklevel=4,
            )
            return ParsedColor(Representation.RGB, [0.0, 0.0, 0.0], None)
        alpha = values[3] if len(values) == 4 else None
        return ParsedColor(Representation.RGB, values[:3], alpha)
    return ParsedColor(Representation.RGB, named_colors.resolve(string, surface), None)


def _infer_type(bag: Mapping) -> Representation:
    if "lightness" in bag:
        return Representation.HSL
    if "hue" in bag:
        return Representation.HSB
    if "gradient" in bag:
        return Representation.GRADIENT
    if "gray" in bag:
        return Representation.GRAY
    return Representation.RGB


def _default_component(spec: ComponentSpec) -> Any:
    if spec.kind is ComponentKind.GRADIENT or spec.name == "hilite":
        return None
    if spec.kind is ComponentKind.POINT:
        return Point(0, 0)
    return 0.0


def _parse_bag(bag: Mapping) -> ParsedColor:
    rep = _infer_type(bag)
    components: List[Any] = []
    for spec in REPRESENTATIONS[rep]:
        value = bag.get(spec.name)
        components.append(_default_component(spec) if value is None else value)
    return ParsedColor(rep, components, bag.get("alpha"))


def _parse_components(values: Sequence[Any], rep: Optional[Representation]) -> ParsedColor:
    if rep is None:
        rep = Representation.RGB if len(values) >= 3 else Representation.GRAY
    length = len(REPRESENTATIONS[rep])
    alpha = values[length] if len(values) > length else None
    values = list(values[:length])
    values += [None] * (length - len(values))
    components = [
        _default_component(spec) if value is None else value
        for spec, value in zip(REPRESENTATIONS[rep], values)
    ]
    return ParsedColor(rep, components, alpha)


def parse_color_args(args: Sequence[Any], surface: Optional[DrawingSurface] = None) -> ParsedColor:
    """
    Normalize Color constructor arguments.

    Supported shapes, in priority order:

    - a list/tuple as first argument replaces the argument list
    - a leading representation name (``"hsb"``, ...) is a type hint
    - numbers: components, rgb for three or more values, else gray; one
      extra trailing value is alpha
    - a string: hex (``#f00``, ``#ff000080``) or a named color
    - a Color: copied
    - a gradient: gradient type, following arguments are anchor points
    - a mapping or attribute bag, typed by its keys
    - nothing: rgb black

    Args:
        args: Positional constructor arguments
        surface: Surface used to resolve named colors, defaults to the
            configured one

    Raises:
        TypeError: for argument types that cannot describe a color.
    """
    from .color import Color  # local import to avoid cycles

    args = list(args)
    if args and _is_sequence(args[0]):
        args = list(args[0])

    rep: Optional[Representation] = None
    if args and is_representation_name(args[0]):
        rep = to_representation(args.pop(0))
        if args and _is_sequence(args[0]):
            args = list(args[0])

    if not args or args[0] is None:
        rep = rep or Representation.RGB
        return _parse_components([], rep)

    arg = args[0]
    if _is_number(arg) or (rep is Representation.GRADIENT and isinstance(arg, GradientLike)):
        return _parse_components(args, rep)
    if isinstance(arg, str):
        return _parse_string(arg, surface)
    if isinstance(arg, Color):
        return ParsedColor(arg.type, arg.components, arg._alpha)
    if isinstance(arg, GradientLike):
        return _parse_components(args, Representation.GRADIENT)
    if isinstance(arg, Mapping):
        return _parse_bag(arg)
    if hasattr(arg, "__dict__") and not isinstance(arg, type):
        return _parse_bag(vars(arg))
    raise TypeError(f"Cannot build a color from {type(arg).__name__}: {arg!r}")
