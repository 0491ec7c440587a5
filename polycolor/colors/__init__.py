from .color import Color
from .aliases import (
    GrayColor,
    RgbColor,
    HsbColor,
    HslColor,
    GradientColor,
    RGBColor,
    HSBColor,
    HSLColor,
)
from .named import NamedColorCache, named_colors
from .parser import ParsedColor, parse_color_args, hex_to_rgb

__all__ = [
    "Color",
    "GrayColor",
    "RgbColor",
    "HsbColor",
    "HslColor",
    "GradientColor",
    "RGBColor",
    "HSBColor",
    "HSLColor",
    "NamedColorCache",
    "named_colors",
    "ParsedColor",
    "parse_color_args",
    "hex_to_rgb",
]
