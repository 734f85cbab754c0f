"""Thread-safe in-memory TTL cache with LRU eviction.

Store values with an absolute (optionally jittered) expiration instant and
evict the least recently used entries when capacity is exceeded. Expiration
is lazy: a stale entry is dropped on its next access, on a sweep, or when it
falls off the LRU end, so size() may count stale entries. Memory stays
bounded by capacity regardless.
"""

from __future__ import annotations

import logging
import random
import threading
from typing import Generic, Hashable, List, Optional, TypeVar

from core.errors import CacheConsistencyError
from core.expiration import Clock, ExpirationPolicy
from core.models import CacheConfig, CacheEntry
from core.recency import RecencyIndex
from core.store import Store

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class TTLCache(Generic[K, V]):
    """Bounded, time-aware cache safe for concurrent get/put.

    Purpose:
      - put(key, value) -> None
      - get(key) -> value or None
      - size() -> int

    Key behavior:
      - One lock per instance covers the entry table, the recency order and
        the eviction decision, so every call is atomic over both structures.
      - The clock is read and the jitter drawn outside the lock.
      - A miss is None, never an exception.
    """

    def __init__(
        self,
        *,
        capacity: int,
        ttl_ms: float,
        offset: float = 0.0,
        rng: Optional[random.Random] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self._config = CacheConfig(capacity=capacity, ttl_ms=ttl_ms, offset=offset)
        self._capacity = capacity
        self._policy = ExpirationPolicy(ttl_ms=ttl_ms, offset=offset, rng=rng, clock=clock)
        self._store: Store[K, V] = Store()
        self._recency: RecencyIndex[K] = RecencyIndex()
        self._lock = threading.Lock()

    @classmethod
    def from_config(
        cls,
        config: CacheConfig,
        *,
        rng: Optional[random.Random] = None,
        clock: Optional[Clock] = None,
    ) -> "TTLCache[K, V]":
        return cls(
            capacity=config.capacity,
            ttl_ms=config.ttl_ms,
            offset=config.offset,
            rng=rng,
            clock=clock,
        )

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def config(self) -> CacheConfig:
        return self._config

    def get(self, key: K) -> Optional[V]:
        now = self._policy.now()
        with self._lock:
            entry = self._store.get(key)
            if entry is None:
                return None

            if self._policy.is_expired(entry, now):
                self._store.remove(key)
                self._recency.remove(key)
                return None

            self._recency.touch(key)
            return entry.value

    def put(self, key: K, value: V) -> None:
        entry = CacheEntry(value=value, expires_at=self._policy.compute_expires_at(self._policy.now()))
        with self._lock:
            self._store.put(key, entry)
            self._recency.touch(key)

            # Evict oldest entries while over capacity (LRU policy)
            while self._store.size() > self._capacity:
                oldest = self._recency.evict_oldest()
                if oldest is None:
                    break
                self._store.remove(oldest)
                logger.debug("Evicted least recently used key %r", oldest)

    def size(self) -> int:
        # Under the cache lock so a put's transient overshoot is never observed
        with self._lock:
            return self._store.size()

    def __len__(self) -> int:
        return self.size()

    def keys(self) -> List[K]:
        """Snapshot of keys, most recently used first."""
        with self._lock:
            return self._recency.keys()

    def sweep_expired(self, *, batch_size: int = 256) -> int:
        """Drop every stale entry and return how many were removed.

        The table is snapshotted first and purged in batches of batch_size,
        taking the cache lock once per batch so concurrent get/put calls are
        never held up for a whole-table scan.
        """
        if batch_size <= 0:
            raise ValueError("batch_size must be positive")
        now = self._policy.now()
        stale = [key for key, entry in self._store.items() if self._policy.is_expired(entry, now)]
        removed = 0
        for start in range(0, len(stale), batch_size):
            with self._lock:
                for key in stale[start:start + batch_size]:
                    # Re-check: the key may have been re-put since the snapshot
                    entry = self._store.get(key)
                    if entry is None or not self._policy.is_expired(entry, now):
                        continue
                    self._store.remove(key)
                    self._recency.remove(key)
                    removed += 1
        return removed

    def check_consistency(self) -> None:
        """Raise CacheConsistencyError if the table and recency order disagree."""
        with self._lock:
            ordered = self._recency.keys()
            indexed = len(self._recency)
            stored = self._store.keys()

        if len(ordered) != len(set(ordered)):
            raise CacheConsistencyError("Recency order holds duplicate keys")
        if indexed != len(ordered):
            raise CacheConsistencyError(
                f"Recency index tracks {indexed} keys but its order links {len(ordered)}"
            )
        if set(ordered) != set(stored):
            raise CacheConsistencyError(
                f"Recency order has {len(ordered)} keys but the table has {len(stored)}"
            )
        if len(stored) > self._capacity:
            raise CacheConsistencyError(
                f"Cache holds {len(stored)} entries, capacity is {self._capacity}"
            )
