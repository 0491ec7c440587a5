from __future__ import annotations
import itertools
import math
import weakref
from typing import Any, List, Optional, Tuple, Union

import numpy as np
from boundednumbers import clamp01
from boundednumbers.functions import cyclic_wrap_float

from ..conversions import convert
from ..geometry import Point
from ..surface import get_default_surface
from ..types.color_types import (
    COMPONENT_OWNERS,
    HUE_SPACES,
    OVERLAPPING_COMPONENTS,
    REPRESENTATIONS,
    ComponentKind,
    ComponentSpec,
    Representation,
    RepresentationLike,
    component_names,
    to_representation,
)
from ..types.constants import CSS_ALPHA_PRECISION, HILITE_INSET, HUE_360
from ..types.protocols import DrawingSurface, MatrixLike, PaintStyle, StyleOwner
from ..utils.formatter import format_number
from ._descriptors import install_component_descriptors
from .parser import parse_color_args

# Process-wide ids for gradient colors
_gradient_ids = itertools.count(1)


def _normalize_component(spec: ComponentSpec, value: Any) -> Any:
    """Clamp, wrap or clone a component value according to its kind."""
    if value is None or spec.kind is ComponentKind.GRADIENT:
        return value
    if spec.kind is ComponentKind.POINT:
        return Point.read(value)
    if spec.kind is ComponentKind.HUE:
        hue = cyclic_wrap_float(float(value), 0.0, HUE_360)
        # -1e-20 % 360 rounds up to 360.0
        return 0.0 if hue >= HUE_360 else hue
    return clamp01(float(value))


class Color:
    """
    A color stored in one of five representations: gray, rgb, hsb, hsl or
    gradient.

    Components are reachable by name on every color (``red``, ``hue``,
    ``lightness``, ``origin``, ...). Reading a component of another
    representation converts on the fly; writing one converts the color in
    place. ``hue`` and ``saturation`` are shared by hsb and hsl and never
    force a conversion between the two.

    Examples
    --------
    >>> Color(1, 0, 0).to_css()
    'rgb(255, 0, 0)'
    >>> Color("#0f0").green
    1.0
    >>> c = Color({"hue": 120, "saturation": 0.5, "brightness": 0.5})
    >>> c.type, c.hue
    (<Representation.HSB: 'hsb'>, 120.0)
    """

    def __init__(self, *args: Any, surface: Optional[DrawingSurface] = None) -> None:
        parsed = parse_color_args(args, surface)
        self._setup(parsed.type, list(parsed.components), None)
        # Run every component through its setter for clamping, cloning and
        # gradient owner registration.
        for spec, value in zip(REPRESENTATIONS[self._type], parsed.components):
            self.set_component(spec.name, value)
        if parsed.alpha is not None:
            self._alpha = clamp01(float(parsed.alpha))

    def _setup(self, rep: Representation, components: List[Any], alpha: Optional[float]) -> None:
        self._type = rep
        self._components = components
        self._alpha = alpha
        self._id = next(_gradient_ids) if rep is Representation.GRADIENT else None
        self._owner: Optional[weakref.ref] = None
        self._css: Optional[str] = None
        self._paint_style: Optional[Union[str, PaintStyle]] = None

    @classmethod
    def create(cls, rep: RepresentationLike, components: List[Any], alpha: Optional[float] = None) -> "Color":
        """
        Build a color directly from already normalized components.

        Bypasses argument parsing. Gradient colors get a fresh id, cloned
        anchor points and are registered with their gradient.
        """
        rep = to_representation(rep)
        color = cls.__new__(cls)
        color._setup(rep, components, alpha)
        if rep is Representation.GRADIENT:
            for i in range(1, len(components)):
                if components[i] is not None:
                    components[i] = components[i].clone()
            if components[0] is not None:
                components[0].add_owner(color)
        return color

    @classmethod
    def random(cls, rng: Optional[np.random.Generator] = None) -> "Color":
        """Return an rgb color with uniformly random channels."""
        rng = rng if rng is not None else np.random.default_rng()
        r, g, b = rng.random(3)
        return cls(float(r), float(g), float(b))

    # ------------------ REPRESENTATION ------------------
    @property
    def type(self) -> Representation:
        return self._type

    @type.setter
    def type(self, rep: RepresentationLike) -> None:
        rep = to_representation(rep)
        if rep is not self._type:
            self._components = self._convert(rep)
            self._type = rep
            self._invalidate()

    @property
    def id(self) -> Optional[int]:
        """Process-unique id of a gradient color, None for other types."""
        return self._id

    @property
    def components(self) -> List[Any]:
        """A copy of the stored components, alpha excluded."""
        return list(self._components)

    @property
    def alpha(self) -> float:
        """Alpha in [0, 1]; 1 when no alpha has been set."""
        return self._alpha if self._alpha is not None else 1.0

    @alpha.setter
    def alpha(self, alpha: Optional[float]) -> None:
        self._alpha = None if alpha is None else clamp01(float(alpha))
        self._invalidate()

    def has_alpha(self) -> bool:
        return self._alpha is not None

    @property
    def owner(self) -> Optional[StyleOwner]:
        return self._owner() if self._owner is not None else None

    @owner.setter
    def owner(self, owner: Optional[StyleOwner]) -> None:
        self._owner = weakref.ref(owner) if owner is not None else None

    # ------------------ COMPONENT ACCESS ------------------
    def _locate(self, name: str) -> Tuple[Representation, int, ComponentSpec]:
        """Return the representation, index and ComponentSpec a component is read from."""
        try:
            rep, index, spec = COMPONENT_OWNERS[name]
        except KeyError:
            raise AttributeError(f"Color has no component {name!r}") from None
        if rep is not self._type and name in OVERLAPPING_COMPONENTS and self._type in HUE_SPACES:
            rep = self._type
            index = component_names(rep).index(name)
        return rep, index, spec

    def _convert(self, rep: Representation) -> List[Any]:
        return convert(self._components, self._type, rep)

    def get_component(self, name: str) -> Any:
        rep, index, _ = self._locate(name)
        if rep is self._type:
            return self._components[index]
        return self._convert(rep)[index]

    def set_component(self, name: str, value: Any) -> None:
        """
        Set a component by name, converting this color to the component's
        representation first if necessary.

        A None value still performs the conversion but writes nothing.
        """
        rep, index, spec = self._locate(name)
        converted = rep is not self._type
        if converted:
            self._components = self._convert(rep)
            self._type = rep
        value = _normalize_component(spec, value)
        if value is not None:
            self._components[index] = value
            if spec.kind is ComponentKind.GRADIENT:
                value.add_owner(self)
        if converted or value is not None:
            self._invalidate()

    def _invalidate(self) -> None:
        """Drop derived caches and tell the owner its style changed."""
        self._css = None
        self._paint_style = None
        owner = self.owner
        if owner is not None:
            owner.notify_style_changed()

    # ------------------ COPIES & CONVERSION ------------------
    def convert(self, rep: RepresentationLike) -> "Color":
        """Return a new color in ``rep``; this color is left untouched."""
        rep = to_representation(rep)
        return Color.create(rep, self._convert(rep), self._alpha)

    def clone(self) -> "Color":
        """Return an equal copy that keeps the gradient id and reference."""
        copy = Color.create(self._type, list(self._components), self._alpha)
        copy._id = self._id
        return copy

    # ------------------ COMPARISON ------------------
    def equals(self, other: Any) -> bool:
        return (
            isinstance(other, Color)
            and self._type is other._type
            and self._alpha == other._alpha
            and self._components == other._components
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # mutable

    # ------------------ OUTPUT ------------------
    def to_display_string(self) -> str:
        is_gradient = self._type is Representation.GRADIENT
        parts = []
        for spec, value in zip(REPRESENTATIONS[self._type], self._components):
            if value is not None:
                parts.append(f"{spec.name}: {value if is_gradient else format_number(value)}")
        if self._alpha is not None:
            parts.append(f"alpha: {format_number(self._alpha)}")
        return "{ " + ", ".join(parts) + " }"

    __str__ = to_display_string

    def __repr__(self) -> str:
        alpha = f", alpha={self._alpha!r}" if self._alpha is not None else ""
        return f"Color({self._type.value!r}, {self._components!r}{alpha})"

    def to_css(self, omit_alpha: bool = False) -> str:
        """
        Return ``rgb(r, g, b)`` or, when alpha is below 1, ``rgba(r, g, b, a)``.

        Only alpha-aware results are cached, so an ``omit_alpha`` render never
        leaks into later alpha-aware calls.
        """
        css = self._css
        if css is None or omit_alpha:
            channels = [int(math.floor(c * 255 + 0.5)) for c in self._convert(Representation.RGB)]
            alpha = 1.0 if omit_alpha or self._alpha is None else self._alpha
            if alpha < 1:
                css = "rgba({}, {}, {}, {})".format(*channels, format_number(alpha, CSS_ALPHA_PRECISION))
            else:
                css = "rgb({}, {}, {})".format(*channels)
            if not omit_alpha:
                self._css = css
        return css

    def to_paint_style(self, surface: Optional[DrawingSurface] = None) -> Union[str, PaintStyle]:
        """
        Return what a canvas fill or stroke should use for this color.

        Non-gradient colors return their CSS string. Gradient colors build a
        linear or radial paint style through ``surface`` (the configured
        default when omitted) and cache it until the color changes.
        """
        if self._type is not Representation.GRADIENT:
            return self.to_css()
        if self._paint_style is not None:
            return self._paint_style
        surface = surface if surface is not None else get_default_surface()
        gradient, origin, destination, hilite = self._components
        if gradient is None:
            raise ValueError("Gradient color has no gradient to paint")
        if gradient.radial:
            radius = destination.get_distance(origin)
            if hilite is not None:
                vector = hilite.subtract(origin)
                if vector.get_length() > radius:
                    hilite = origin.add(vector.normalize(radius - HILITE_INSET))
            start = hilite if hilite is not None else origin
            style = surface.create_radial_paint_style(start.x, start.y, 0, origin.x, origin.y, radius)
        else:
            style = surface.create_linear_paint_style(origin.x, origin.y, destination.x, destination.y)
        for stop in gradient.stops:
            style.add_color_stop(stop.offset, stop.color.to_css(omit_alpha=True))
        self._paint_style = style
        return style

    def transform_gradient(self, matrix: MatrixLike) -> None:
        """Transform the anchor points of a gradient color in place."""
        if self._type is not Representation.GRADIENT:
            return
        for point in self._components[1:]:
            if point is not None:
                matrix.transform_point(point, point)
        self._paint_style = None

    def serialize(self) -> List[Any]:
        """
        Compact list form: bare components for gray and rgb, otherwise the
        type name followed by the components. ``Color(color.serialize())``
        rebuilds an equal color (alpha aside).
        """
        components = list(self._components)
        while components and components[-1] is None:
            components.pop()
        if self._type in (Representation.GRAY, Representation.RGB):
            return components
        return [self._type.value, *components]


install_component_descriptors(Color)
