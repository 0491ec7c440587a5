import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple
from ..types.constants import GRAY_WEIGHTS


def rgb_to_gray(r: float, g: float, b: float) -> Tuple[float]:
    """
    Convert RGB to gray using the NTSC luminance formula.
    See: http://www.mathworks.com/support/solutions/en/data/1-1ASCU/index.html?solution=1-1ASCU
    """
    wr, wg, wb = GRAY_WEIGHTS
    return (r * wr + g * wg + b * wb,)


def np_rgb_to_gray(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to gray.

    Returns:
        array of shape (..., 1)
    """
    wr, wg, wb = GRAY_WEIGHTS
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)
    return (r * wr + g * wg + b * wb)[..., None]
