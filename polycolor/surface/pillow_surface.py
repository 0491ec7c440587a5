"""
Pillow-backed drawing surface.

Resolves color names the way a canvas does (fill one pixel, read it back)
and builds gradient paint styles that can rasterize themselves with numpy.
"""

from __future__ import annotations
import warnings
from typing import List, Optional, Tuple

import numpy as np
from PIL import Image, ImageColor, ImageDraw

from ..exceptions import ColorParseWarning


class GradientPaintStyle:
    """Base for canvas-like gradient fills: an ordered list of color stops
    plus a per-pixel gradient parameter."""

    def __init__(self) -> None:
        self.stops: List[Tuple[float, str]] = []

    def add_color_stop(self, offset: float, css: str) -> None:
        if not 0.0 <= offset <= 1.0:
            raise ValueError(f"Color stop offset must be within [0, 1], got {offset}")
        self.stops.append((float(offset), css))

    def _parameter(self, xs: np.ndarray, ys: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """Return the gradient parameter per pixel and a mask of painted pixels."""
        raise NotImplementedError

    def render(self, width: int, height: int) -> np.ndarray:
        """
        Rasterize the gradient.

        Returns:
            uint8 array of shape (height, width, 4), RGBA. Pixels outside the
            gradient, or every pixel when there are no stops, are transparent.
        """
        out = np.zeros((height, width, 4), dtype=np.uint8)
        if not self.stops:
            return out
        ys, xs = np.mgrid[0:height, 0:width].astype(np.float64) + 0.5
        t, painted = self._parameter(xs, ys)

        # stable sort keeps insertion order for equal offsets
        stops = sorted(self.stops, key=lambda stop: stop[0])
        offsets = np.array([offset for offset, _ in stops])
        colors = np.array([ImageColor.getcolor(css, "RGBA") for _, css in stops], dtype=np.float64)

        for channel in range(4):
            values = np.interp(t, offsets, colors[:, channel])
            out[..., channel] = np.where(painted, np.round(values), 0).astype(np.uint8)
        return out

    def to_image(self, width: int, height: int) -> Image.Image:
        return Image.fromarray(self.render(width, height))


class LinearPaintStyle(GradientPaintStyle):
    def __init__(self, x0: float, y0: float, x1: float, y1: float) -> None:
        super().__init__()
        self.start = (float(x0), float(y0))
        self.end = (float(x1), float(y1))

    def _parameter(self, xs, ys):
        dx = self.end[0] - self.start[0]
        dy = self.end[1] - self.start[1]
        length_sq = dx * dx + dy * dy
        if length_sq == 0:
            # degenerate gradients paint nothing
            return np.zeros_like(xs), np.zeros(xs.shape, dtype=bool)
        t = ((xs - self.start[0]) * dx + (ys - self.start[1]) * dy) / length_sq
        return t, np.ones(xs.shape, dtype=bool)

    def __repr__(self) -> str:
        return f"LinearPaintStyle(start={self.start}, end={self.end}, stops={self.stops})"


class RadialPaintStyle(GradientPaintStyle):
    """Two-circle radial gradient from (fx, fy, r0) to (cx, cy, r1)."""

    def __init__(self, fx: float, fy: float, r0: float, cx: float, cy: float, r1: float) -> None:
        super().__init__()
        if r0 < 0 or r1 < 0:
            raise ValueError(f"Radial gradient radii must be non-negative, got {r0}, {r1}")
        self.focus = (float(fx), float(fy))
        self.r0 = float(r0)
        self.center = (float(cx), float(cy))
        self.r1 = float(r1)

    def _parameter(self, xs, ys):
        # Largest w with radius r0 + w*dr >= 0 such that the pixel lies on the
        # circle centered at focus + w*(center - focus).
        dcx = self.center[0] - self.focus[0]
        dcy = self.center[1] - self.focus[1]
        dr = self.r1 - self.r0
        qx = xs - self.focus[0]
        qy = ys - self.focus[1]

        a = dcx * dcx + dcy * dcy - dr * dr
        b = qx * dcx + qy * dcy + self.r0 * dr
        c = qx * qx + qy * qy - self.r0 * self.r0

        with np.errstate(divide="ignore", invalid="ignore"):
            if a == 0:
                w = np.where(b != 0, c / (2 * b), np.nan)
                valid = np.isfinite(w) & (self.r0 + w * dr >= 0)
                return np.where(valid, w, 0.0), valid
            disc = b * b - a * c
            root = np.sqrt(np.where(disc >= 0, disc, 0.0))
            w_hi = np.maximum((b + root) / a, (b - root) / a)
            w_lo = np.minimum((b + root) / a, (b - root) / a)
        hi_ok = (disc >= 0) & (self.r0 + w_hi * dr >= 0)
        lo_ok = (disc >= 0) & (self.r0 + w_lo * dr >= 0)
        w = np.where(hi_ok, w_hi, w_lo)
        valid = hi_ok | lo_ok
        return np.where(valid, w, 0.0), valid

    def __repr__(self) -> str:
        return (
            f"RadialPaintStyle(focus={self.focus}, r0={self.r0}, "
            f"center={self.center}, r1={self.r1}, stops={self.stops})"
        )


class PillowSurface:
    """Drawing surface built on a 1x1 Pillow image."""

    def __init__(self) -> None:
        self._image: Optional[Image.Image] = None

    def _probe(self) -> Image.Image:
        if self._image is None:
            self._image = Image.new("RGBA", (1, 1))
        return self._image

    def resolve_named_color(self, name: str) -> List[float]:
        """
        Fill the probe pixel with ``name`` and read back its RGB channels.

        The pixel is reset to transparent black first, so a name Pillow does
        not understand resolves to ``[0, 0, 0]`` with a ColorParseWarning.
        """
        image = self._probe()
        image.putpixel((0, 0), (0, 0, 0, 0))
        try:
            ImageDraw.Draw(image).rectangle((0, 0, 0, 0), fill=name)
        except ValueError:
            warnings.warn(
                f"Unknown color name {name!r}, falling back to transparent black",
                ColorParseWarning,
                stacklevel=2,
            )
        r, g, b, _ = image.getpixel((0, 0))
        return [r / 255, g / 255, b / 255]

    def create_linear_paint_style(self, x0: float, y0: float, x1: float, y1: float) -> LinearPaintStyle:
        return LinearPaintStyle(x0, y0, x1, y1)

    def create_radial_paint_style(
        self, fx: float, fy: float, r0: float, cx: float, cy: float, r1: float
    ) -> RadialPaintStyle:
        return RadialPaintStyle(fx, fy, r0, cx, cy, r1)
