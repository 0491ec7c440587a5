import math
import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple

# For hsb -> rgb: which of (b, p, q, t) lands in (r, g, b), one row per 60° sector
HSB_SECTORS = (
    (0, 3, 1),
    (2, 0, 1),
    (1, 0, 3),
    (1, 2, 0),
    (3, 1, 0),
    (0, 1, 2),
)
_HSB_SECTORS_NP = np.array(HSB_SECTORS, dtype=np.intp)

## HSB to RGB conversions

def hsb_to_rgb(h: float, s: float, b: float) -> Tuple[float, float, float]:
    """
    Convert HSB to RGB.

    Args:
        h: Hue in degrees [0, 360)
        s: Saturation in [0, 1]
        b: Brightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    h = (h / 60) % 6
    i = int(math.floor(h))
    f = h - i
    v = (
        b,
        b * (1 - s),
        b * (1 - s * f),
        b * (1 - s * (1 - f)),
    )
    # float modulo can land exactly on 6 for tiny negative hues
    sector = HSB_SECTORS[i % 6]
    return v[sector[0]], v[sector[1]], v[sector[2]]


def np_hsb_to_rgb(h: NDArray, s: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert HSB to RGB.

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    b = np.asarray(b, dtype=float)

    h, s, b = np.broadcast_arrays(h, s, b)
    hp = (h / 60) % 6
    i = np.floor(hp).astype(np.intp)
    f = hp - i
    v = np.stack([
        b,
        b * (1 - s),
        b * (1 - s * f),
        b * (1 - s * (1 - f)),
    ], axis=-1)
    return np.take_along_axis(v, _HSB_SECTORS_NP[i % 6], axis=-1)


## HSL to RGB conversions

def _hsl_channel(t1: float, t2: float, t3: float) -> float:
    if t3 < 0:
        t3 += 1
    if t3 > 1:
        t3 -= 1
    if 6 * t3 < 1:
        return t1 + (t2 - t1) * 6 * t3
    if 2 * t3 < 1:
        return t2
    if 3 * t3 < 2:
        return t1 + (t2 - t1) * ((2 / 3) - t3) * 6
    return t1


def hsl_to_rgb(h: float, s: float, l: float) -> Tuple[float, float, float]:
    """
    Convert HSL to RGB.

    Args:
        h: Hue in degrees [0, 360)
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    if s == 0:
        return l, l, l
    h /= 360
    t2 = l * (1 + s) if l < 0.5 else l + s - l * s
    t1 = 2 * l - t2
    return (
        _hsl_channel(t1, t2, h + 1 / 3),
        _hsl_channel(t1, t2, h),
        _hsl_channel(t1, t2, h - 1 / 3),
    )


def np_hsl_to_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB.

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)

    h, s, l = np.broadcast_arrays(h / 360, s, l)
    t3 = np.stack([h + 1 / 3, h, h - 1 / 3], axis=-1)
    t3 = np.where(t3 < 0, t3 + 1, t3)
    t3 = np.where(t3 > 1, t3 - 1, t3)

    t2 = np.where(l < 0.5, l * (1 + s), l + s - l * s)[..., None] * np.ones_like(t3)
    t1 = 2 * l[..., None] - t2

    channels = np.select(
        [6 * t3 < 1, 2 * t3 < 1, 3 * t3 < 2],
        [t1 + (t2 - t1) * 6 * t3, t2, t1 + (t2 - t1) * ((2 / 3) - t3) * 6],
        default=t1,
    )
    achromatic = (s == 0)[..., None]
    return np.where(achromatic, l[..., None], channels)


## Gray to RGB conversions

def gray_to_rgb(g: float) -> Tuple[float, float, float]:
    return g, g, g


def np_gray_to_rgb(g: NDArray) -> NDArray:
    g = np.asarray(g, dtype=float)
    return np.stack([g, g, g], axis=-1)
