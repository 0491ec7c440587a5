"""
polycolor Representation Conversions
====================================

Pure functions mapping component tuples between the gray, RGB, HSB and HSL
representations, with scalar and vectorized (numpy) implementations.

Conversion Functions
-------------------

RGB → HSB / HSL / gray:
    rgb_to_hsb(r, g, b), np_rgb_to_hsb(r, g, b)
    rgb_to_hsl(r, g, b), np_rgb_to_hsl(r, g, b)
    rgb_to_gray(r, g, b), np_rgb_to_gray(r, g, b)

HSB / HSL / gray → RGB:
    hsb_to_rgb(h, s, b), np_hsb_to_rgb(h, s, b)
    hsl_to_rgb(h, s, l), np_hsl_to_rgb(h, s, l)
    gray_to_rgb(g), np_gray_to_rgb(g)

gray → HSB / HSL:
    gray_to_hsb(g), gray_to_hsl(g) and their np_ variants

High-Level API
-------------
    convert(components, from_space, to_space)
        Direct converter if one exists, otherwise routed through rgb.
    np_convert(color, from_space, to_space)
        Same lookup over arrays of shape (..., n).

Gradient colors have no scalar channels; converting them to or from any
other representation raises UnsupportedConversionError.

Examples
--------
>>> from polycolor.conversions import convert
>>> convert([1.0, 0.0, 0.0], "rgb", "hsb")
[0.0, 1.0, 1.0]
>>> convert([0.5], "gray", "rgb")
[0.5, 0.5, 0.5]
"""

from .to_hsb import rgb_to_hsb, gray_to_hsb, np_rgb_to_hsb, np_gray_to_hsb
from .to_hsl import rgb_to_hsl, gray_to_hsl, np_rgb_to_hsl, np_gray_to_hsl
from .to_rgb import (
    hsb_to_rgb,
    hsl_to_rgb,
    gray_to_rgb,
    np_hsb_to_rgb,
    np_hsl_to_rgb,
    np_gray_to_rgb,
)
from .to_gray import rgb_to_gray, np_rgb_to_gray

from .wrapper import convert, np_convert, CONVERTERS, CONVERT_NUMPY

from ..exceptions import UnsupportedConversionError

__all__ = [
    'rgb_to_hsb',
    'gray_to_hsb',
    'np_rgb_to_hsb',
    'np_gray_to_hsb',

    'rgb_to_hsl',
    'gray_to_hsl',
    'np_rgb_to_hsl',
    'np_gray_to_hsl',

    'hsb_to_rgb',
    'hsl_to_rgb',
    'gray_to_rgb',
    'np_hsb_to_rgb',
    'np_hsl_to_rgb',
    'np_gray_to_rgb',

    'rgb_to_gray',
    'np_rgb_to_gray',

    'convert',
    'np_convert',
    'CONVERTERS',
    'CONVERT_NUMPY',

    'UnsupportedConversionError',
]
