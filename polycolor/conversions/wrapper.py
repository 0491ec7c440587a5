import numpy as np
from typing import Any, Callable, Dict, List, Sequence, Tuple

from ..exceptions import UnsupportedConversionError
from ..types.color_types import Representation, RepresentationLike, to_representation

from .to_rgb import hsb_to_rgb, hsl_to_rgb, gray_to_rgb, np_hsb_to_rgb, np_hsl_to_rgb, np_gray_to_rgb
from .to_hsb import rgb_to_hsb, gray_to_hsb, np_rgb_to_hsb, np_gray_to_hsb
from .to_hsl import rgb_to_hsl, gray_to_hsl, np_rgb_to_hsl, np_gray_to_hsl
from .to_gray import rgb_to_gray, np_rgb_to_gray

GRAY = Representation.GRAY
RGB = Representation.RGB
HSB = Representation.HSB
HSL = Representation.HSL

# Every scalar representation converts to and from rgb; other pairs go through rgb
# unless a direct converter is listed here.
CONVERTERS: Dict[Tuple[Representation, Representation], Callable[..., Tuple[float, ...]]] = {
    (RGB, HSB): rgb_to_hsb,
    (HSB, RGB): hsb_to_rgb,
    (RGB, HSL): rgb_to_hsl,
    (HSL, RGB): hsl_to_rgb,
    (RGB, GRAY): rgb_to_gray,
    (GRAY, RGB): gray_to_rgb,
    (GRAY, HSB): gray_to_hsb,
    (GRAY, HSL): gray_to_hsl,
}

CONVERT_NUMPY: Dict[Tuple[Representation, Representation], Callable[..., np.ndarray]] = {
    (RGB, HSB): np_rgb_to_hsb,
    (HSB, RGB): np_hsb_to_rgb,
    (RGB, HSL): np_rgb_to_hsl,
    (HSL, RGB): np_hsl_to_rgb,
    (RGB, GRAY): np_rgb_to_gray,
    (GRAY, RGB): np_gray_to_rgb,
    (GRAY, HSB): np_gray_to_hsb,
    (GRAY, HSL): np_gray_to_hsl,
}


def _route(from_space: Representation, to_space: Representation, table: Dict) -> List[Callable]:
    """Return the converter chain for a pair, direct or via rgb."""
    key = (from_space, to_space)
    if key in table:
        return [table[key]]
    to_hub = table.get((from_space, RGB))
    from_hub = table.get((RGB, to_space))
    if to_hub is None or from_hub is None:
        raise UnsupportedConversionError(from_space.value, to_space.value)
    return [to_hub, from_hub]


def convert(
    components: Sequence[Any],
    from_space: RepresentationLike,
    to_space: RepresentationLike,
) -> List[Any]:
    """
    Convert a component list between representations.

    Alpha is not part of ``components``; conversions never change it.

    Args:
        components: Components in ``from_space`` order
        from_space: Source representation
        to_space: Target representation

    Returns:
        New list of components in ``to_space`` order. A same-space request
        returns a copy.

    Raises:
        UnsupportedConversionError: if no converter path exists (gradient).
    """
    fs = to_representation(from_space)
    ts = to_representation(to_space)
    if fs == ts:
        return list(components)
    values: Tuple[Any, ...] = tuple(components)
    for step in _route(fs, ts, CONVERTERS):
        values = step(*values)
    return list(values)


def np_convert(
    color: np.ndarray,
    from_space: RepresentationLike,
    to_space: RepresentationLike,
) -> np.ndarray:
    """
    Vectorized ``convert`` over arrays of shape (..., n).

    Returns:
        Array of shape (..., m) where m is the component count of ``to_space``.
    """
    fs = to_representation(from_space)
    ts = to_representation(to_space)
    color = np.asarray(color, dtype=float)
    if fs == ts:
        return color.copy()
    for step in _route(fs, ts, CONVERT_NUMPY):
        color = step(*(color[..., i] for i in range(color.shape[-1])))
    return color
