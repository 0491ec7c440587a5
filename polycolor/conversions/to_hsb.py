import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple


def _hue(r: float, g: float, b: float, mx: float, delta: float) -> float:
    """Hue in degrees shared by the HSB and HSL models."""
    if delta == 0:
        return 0.0
    if mx == r:
        return ((g - b) / delta + (6 if g < b else 0)) * 60
    if mx == g:
        return ((b - r) / delta + 2) * 60
    return ((r - g) / delta + 4) * 60


def rgb_to_hsb(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert RGB to HSB.

    Args:
        r, g, b: Channels in [0, 1]

    Returns:
        (hue, saturation, brightness) with hue in [0, 360)
    """
    mx = max(r, g, b)
    mn = min(r, g, b)
    delta = mx - mn
    return _hue(r, g, b, mx, delta), (0.0 if mx == 0 else delta / mx), mx


def gray_to_hsb(g: float) -> Tuple[float, float, float]:
    return 0.0, 0.0, g


def np_hue(r: NDArray, g: NDArray, b: NDArray, mx: NDArray, delta: NDArray) -> NDArray:
    """Vectorized: hue in degrees shared by the HSB and HSL models."""
    safe = np.where(delta == 0, 1.0, delta)
    h = np.where(
        mx == r,
        (g - b) / safe + np.where(g < b, 6.0, 0.0),
        np.where(
            mx == g,
            (b - r) / safe + 2.0,
            (r - g) / safe + 4.0,
        ),
    ) * 60
    return np.where(delta == 0, 0.0, h)


def np_rgb_to_hsb(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSB.

    Returns:
        array of shape (..., 3): (hue, saturation, brightness)
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    mx = np.maximum(np.maximum(r, g), b)
    mn = np.minimum(np.minimum(r, g), b)
    delta = mx - mn

    h = np_hue(r, g, b, mx, delta)
    s = np.where(mx == 0, 0.0, delta / np.where(mx == 0, 1.0, mx))
    return np.stack([h, s, mx], axis=-1)


def np_gray_to_hsb(g: NDArray) -> NDArray:
    g = np.asarray(g, dtype=float)
    zeros = np.zeros_like(g)
    return np.stack([zeros, zeros, g], axis=-1)
