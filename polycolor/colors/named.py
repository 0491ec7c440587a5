"""Process-wide cache of named colors resolved through a drawing surface."""

from __future__ import annotations
import threading
from typing import Dict, List, Optional

from ..surface import get_default_surface
from ..types.protocols import DrawingSurface


class NamedColorCache:
    """
    Map color names to RGB triples, resolving each name at most once.

    Entries are written once and never evicted. First-write-per-key is
    guarded by a lock; reads of existing entries take no lock.
    """

    def __init__(self) -> None:
        self._cache: Dict[str, List[float]] = {}
        self._lock = threading.Lock()

    def resolve(self, name: str, surface: Optional[DrawingSurface] = None) -> List[float]:
        """
        Return the RGB components for ``name`` as a new list.

        Args:
            name: Color name understood by the surface
            surface: Surface used on a cache miss, defaults to the configured one
        """
        cached = self._cache.get(name)
        if cached is None:
            with self._lock:
                cached = self._cache.get(name)
                if cached is None:
                    if surface is None:
                        surface = get_default_surface()
                    cached = [float(c) for c in surface.resolve_named_color(name)]
                    self._cache[name] = cached
        return list(cached)

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._cache

    def __len__(self) -> int:
        return len(self._cache)


named_colors = NamedColorCache()
