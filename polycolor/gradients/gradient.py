from __future__ import annotations
import weakref
from typing import TYPE_CHECKING, Any, Iterable, List, Optional

if TYPE_CHECKING:
    from ..colors.color import Color


class GradientStop:
    """A color placed at an offset in [0, 1] along a gradient."""

    def __init__(self, color: Any = None, offset: Optional[float] = None) -> None:
        from ..colors.color import Color  # local import to avoid cycles

        self.color: "Color" = color if isinstance(color, Color) else Color(color)
        self.offset = offset

    def __repr__(self) -> str:
        return f"GradientStop({self.color.to_css()!r}, {self.offset!r})"


class Gradient:
    """
    Minimal gradient definition: ordered stops plus a radial flag.

    Colors that reference this gradient register themselves through
    ``add_owner`` and are invalidated by ``changed()``.

    Stops may be given as GradientStop instances, ``(color, offset)`` pairs or
    bare color arguments. Stops without an offset are spread evenly.
    """

    def __init__(self, stops: Iterable[Any] = (), radial: bool = False) -> None:
        self.radial = bool(radial)
        # Keyed by id: colors are unhashable
        self._owners: "weakref.WeakValueDictionary[int, Color]" = weakref.WeakValueDictionary()
        self._stops: List[GradientStop] = []
        self.stops = list(stops)

    @property
    def stops(self) -> List[GradientStop]:
        return self._stops

    @stops.setter
    def stops(self, stops: Iterable[Any]) -> None:
        parsed = [self._read_stop(stop) for stop in stops]
        count = len(parsed)
        for index, stop in enumerate(parsed):
            if stop.offset is None:
                stop.offset = index / (count - 1) if count > 1 else 0.0
        self._stops = parsed
        self.changed()

    @staticmethod
    def _read_stop(stop: Any) -> GradientStop:
        if isinstance(stop, GradientStop):
            return stop
        if isinstance(stop, tuple) and len(stop) == 2 and isinstance(stop[1], (int, float)):
            return GradientStop(stop[0], stop[1])
        return GradientStop(stop)

    def add_owner(self, color: "Color") -> None:
        self._owners[id(color)] = color

    def remove_owner(self, color: "Color") -> None:
        self._owners.pop(id(color), None)

    @property
    def owners(self) -> List["Color"]:
        return list(self._owners.values())

    def changed(self) -> None:
        """Invalidate every color that references this gradient."""
        for color in list(self._owners.values()):
            color._invalidate()

    def __repr__(self) -> str:
        kind = "radial" if self.radial else "linear"
        return f"Gradient({kind}, stops={self._stops!r})"
