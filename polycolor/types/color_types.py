from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple, Union


class Representation(str, Enum):
    GRAY = "gray"
    RGB = "rgb"
    HSB = "hsb"
    HSL = "hsl"
    GRADIENT = "gradient"


class ComponentKind(str, Enum):
    SCALAR = "scalar"
    HUE = "hue"
    POINT = "point"
    GRADIENT = "gradient"


@dataclass(frozen=True)
class ComponentSpec:
    name: str
    kind: ComponentKind = ComponentKind.SCALAR


RepresentationLike = Union[Representation, str]

# Order matters: when several rows declare the same name, the last row owns it.
REPRESENTATIONS: Dict[Representation, Tuple[ComponentSpec, ...]] = {
    Representation.GRAY: (
        ComponentSpec("gray"),
    ),
    Representation.RGB: (
        ComponentSpec("red"),
        ComponentSpec("green"),
        ComponentSpec("blue"),
    ),
    Representation.HSB: (
        ComponentSpec("hue", ComponentKind.HUE),
        ComponentSpec("saturation"),
        ComponentSpec("brightness"),
    ),
    Representation.HSL: (
        ComponentSpec("hue", ComponentKind.HUE),
        ComponentSpec("saturation"),
        ComponentSpec("lightness"),
    ),
    Representation.GRADIENT: (
        ComponentSpec("gradient", ComponentKind.GRADIENT),
        ComponentSpec("origin", ComponentKind.POINT),
        ComponentSpec("destination", ComponentKind.POINT),
        ComponentSpec("hilite", ComponentKind.POINT),
    ),
}

HUE_SPACES = {Representation.HSB, Representation.HSL}
# Component names shared by hsb and hsl that never force a conversion between them
OVERLAPPING_COMPONENTS = {"hue", "saturation"}


def _build_owners() -> Dict[str, Tuple[Representation, int, ComponentSpec]]:
    owners: Dict[str, Tuple[Representation, int, ComponentSpec]] = {}
    for rep, specs in REPRESENTATIONS.items():
        for index, spec in enumerate(specs):
            owners[spec.name] = (rep, index, spec)
    return owners


COMPONENT_OWNERS = _build_owners()


def to_representation(value: RepresentationLike) -> Representation:
    """
    Coerce a string or enum member to a Representation.

    Raises:
        ValueError: if the name is not a known representation.
    """
    if isinstance(value, Representation):
        return value
    try:
        return Representation(str(value).lower())
    except ValueError:
        raise ValueError(f"Unknown color representation: {value!r}") from None


def is_representation_name(value: object) -> bool:
    """Check whether ``value`` is a string naming a representation."""
    if not isinstance(value, str):
        return False
    return value.lower() in Representation._value2member_map_


def component_names(rep: RepresentationLike) -> List[str]:
    return [spec.name for spec in REPRESENTATIONS[to_representation(rep)]]

