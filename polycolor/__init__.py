"""polycolor: a polymorphic color value for vector graphics."""

__version__ = "0.1.0"

from .colors.color import Color
from .colors.aliases import (
    GrayColor,
    RgbColor,
    HsbColor,
    HslColor,
    GradientColor,
    RGBColor,
    HSBColor,
    HSLColor,
)
from .colors.named import named_colors
from .colors.parser import parse_color_args

from .types import Representation, ComponentKind, ComponentSpec, REPRESENTATIONS
from .exceptions import UnsupportedConversionError, ColorParseWarning

from .conversions import (
    rgb_to_hsb,
    rgb_to_hsl,
    rgb_to_gray,
    hsb_to_rgb,
    hsl_to_rgb,
    gray_to_rgb,
    np_rgb_to_hsb,
    np_rgb_to_hsl,
    np_rgb_to_gray,
    np_hsb_to_rgb,
    np_hsl_to_rgb,
    np_gray_to_rgb,
    convert,
    np_convert,
)

from .geometry import Point, Matrix
from .gradients import Gradient, GradientStop
from .surface import PillowSurface, get_default_surface, set_default_surface

__all__ = [
    "__version__",
    # color value
    "Color",
    "GrayColor",
    "RgbColor",
    "HsbColor",
    "HslColor",
    "GradientColor",
    "RGBColor",
    "HSBColor",
    "HSLColor",
    "named_colors",
    "parse_color_args",
    # types and errors
    "Representation",
    "ComponentKind",
    "ComponentSpec",
    "REPRESENTATIONS",
    "UnsupportedConversionError",
    "ColorParseWarning",
    # conversions
    "rgb_to_hsb",
    "rgb_to_hsl",
    "rgb_to_gray",
    "hsb_to_rgb",
    "hsl_to_rgb",
    "gray_to_rgb",
    "np_rgb_to_hsb",
    "np_rgb_to_hsl",
    "np_rgb_to_gray",
    "np_hsb_to_rgb",
    "np_hsl_to_rgb",
    "np_gray_to_rgb",
    "convert",
    "np_convert",
    # collaborators
    "Point",
    "Matrix",
    "Gradient",
    "GradientStop",
    "PillowSurface",
    "get_default_surface",
    "set_default_surface",
]
