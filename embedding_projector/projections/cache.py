from __future__ import annotations

from collections import OrderedDict

import numpy as np

AxisKey = tuple[str, str]


class DirectionCache:
    """Unit directions keyed by the ordered pair ``(left, right)``.

    Unbounded unless ``max_size`` is given, in which case the least recently
    used entry is evicted. Entries are frozen copies returned as-is, so a
    hit hands back the identical array object.
    """

    def __init__(self, max_size: int | None = None) -> None:
        self._entries: OrderedDict[AxisKey, np.ndarray] = OrderedDict()
        self._max_size = max_size
        self._hits = 0
        self._misses = 0

    def get(self, key: AxisKey) -> np.ndarray | None:
        direction = self._entries.get(key)
        if direction is None:
            self._misses += 1
            return None
        self._hits += 1
        self._entries.move_to_end(key)
        return direction

    def set(self, key: AxisKey, direction: np.ndarray) -> np.ndarray:
        """Store a frozen copy of ``direction`` and return it."""
        direction = np.array(direction, copy=True)
        direction.setflags(write=False)
        self._entries[key] = direction
        self._entries.move_to_end(key)
        if self._max_size is not None:
            while len(self._entries) > self._max_size:
                self._entries.popitem(last=False)
        return direction

    def stats(self) -> dict:
        total = self._hits + self._misses
        return {
            "size": len(self._entries),
            "hits": self._hits,
            "misses": self._misses,
            "hit_rate": round(self._hits / total * 100, 1) if total > 0 else 0.0,
        }

    def clear(self) -> None:
        self._entries.clear()
        self._hits = 0
        self._misses = 0

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
