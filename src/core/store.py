"""Thread-safe key -> CacheEntry table.

A plain dict guarded by its own lock, so point lookups, inserts and
removals are safe from any thread. The cache facade layers its own lock
on top to keep this table and the recency order consistent.
"""

from __future__ import annotations

import threading
from typing import Dict, Generic, Hashable, List, Optional, Tuple, TypeVar

from core.models import CacheEntry

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class Store(Generic[K, V]):
    def __init__(self) -> None:
        self._data: Dict[K, CacheEntry[V]] = {}
        self._lock = threading.Lock()

    def put(self, key: K, entry: CacheEntry[V]) -> None:
        with self._lock:
            self._data[key] = entry

    def get(self, key: K) -> Optional[CacheEntry[V]]:
        with self._lock:
            return self._data.get(key)

    def remove(self, key: K) -> None:
        # Removing an absent key is a no-op
        with self._lock:
            self._data.pop(key, None)

    def size(self) -> int:
        with self._lock:
            return len(self._data)

    def keys(self) -> List[K]:
        with self._lock:
            return list(self._data)

    def items(self) -> List[Tuple[K, CacheEntry[V]]]:
        with self._lock:
            return list(self._data.items())

    def __len__(self) -> int:
        return self.size()
