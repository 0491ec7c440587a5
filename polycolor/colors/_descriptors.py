# polycolor/colors/_descriptors.py
"""Component descriptors generated from the representation table."""

from __future__ import annotations
from typing import TYPE_CHECKING, Any, Optional

from ..types.color_types import COMPONENT_OWNERS

if TYPE_CHECKING:
    from .color import Color


class ComponentDescriptor:
    """Descriptor for one named color component.

    Reading returns the component in its owning representation, converting
    on the fly when needed. Writing may convert the color in place, and then
    invalidates its caches; both paths go through ``Color.get_component`` /
    ``Color.set_component``.

    Example:
        color = Color(1, 0, 0)
        color.hue           # 0.0, color stays rgb
        color.hue = 120     # color is now hsl
    """

    def __init__(self, name: str) -> None:
        self.name = name

    def __get__(self, obj: Optional["Color"], objtype: type | None = None) -> Any:
        if obj is None:
            return self
        return obj.get_component(self.name)

    def __set__(self, obj: "Color", value: Any) -> None:
        obj.set_component(self.name, value)

    def __repr__(self) -> str:
        rep = COMPONENT_OWNERS[self.name][0]
        return f"ComponentDescriptor({self.name!r}, owner={rep.value!r})"


def install_component_descriptors(cls: type) -> type:
    """Attach a ComponentDescriptor to ``cls`` for every component name."""
    for name in COMPONENT_OWNERS:
        setattr(cls, name, ComponentDescriptor(name))
    return cls
