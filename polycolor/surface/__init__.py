"""Drawing-surface collaborators and the process-wide default surface."""

from typing import Optional

from ..types.protocols import DrawingSurface
from .pillow_surface import PillowSurface, GradientPaintStyle, LinearPaintStyle, RadialPaintStyle

_default_surface: Optional[DrawingSurface] = None


def get_default_surface() -> DrawingSurface:
    """Return the configured surface, creating a PillowSurface on first use."""
    global _default_surface
    if _default_surface is None:
        _default_surface = PillowSurface()
    return _default_surface


def set_default_surface(surface: Optional[DrawingSurface]) -> None:
    """Replace the default surface; ``None`` restores the lazy PillowSurface."""
    global _default_surface
    _default_surface = surface


__all__ = [
    "PillowSurface",
    "GradientPaintStyle",
    "LinearPaintStyle",
    "RadialPaintStyle",
    "get_default_surface",
    "set_default_surface",
]
