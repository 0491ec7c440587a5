import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple
from .to_hsb import _hue, np_hue

## RGB to HSL conversions

def rgb_to_hsl(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert RGB to HSL.
    Based on: http://mjijackson.com/2008/02/rgb-to-hsl-and-rgb-to-hsv-color-model-conversion-algorithms-in-javascript

    Args:
        r, g, b: Channels in [0, 1]

    Returns:
        (hue, saturation, lightness) with hue in [0, 360)
    """
    mx = max(r, g, b)
    mn = min(r, g, b)
    delta = mx - mn
    l = (mx + mn) / 2
    if delta == 0:
        s = 0.0
    elif l < 0.5:
        s = delta / (mx + mn)
    else:
        s = delta / (2 - mx - mn)
    return _hue(r, g, b, mx, delta), s, l


def gray_to_hsl(g: float) -> Tuple[float, float, float]:
    return 0.0, 0.0, g


def np_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSL.

    Returns:
        array of shape (..., 3): (hue, saturation, lightness)
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    mx = np.maximum(np.maximum(r, g), b)
    mn = np.minimum(np.minimum(r, g), b)
    delta = mx - mn
    l = (mx + mn) / 2

    low = mx + mn
    high = 2 - mx - mn
    s = np.where(
        delta == 0,
        0.0,
        np.where(
            l < 0.5,
            delta / np.where(low == 0, 1.0, low),
            delta / np.where(high == 0, 1.0, high),
        ),
    )
    return np.stack([np_hue(r, g, b, mx, delta), s, l], axis=-1)


def np_gray_to_hsl(g: NDArray) -> NDArray:
    g = np.asarray(g, dtype=float)
    zeros = np.zeros_like(g)
    return np.stack([zeros, zeros, g], axis=-1)
