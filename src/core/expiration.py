"""Expiration policy: jittered TTL at insert, staleness check at access.

Instants are milliseconds on a monotonic clock so that wall-clock changes
never expire or revive entries. Jitter spreads the expirations of keys
written together over [ttl * (1 - offset), ttl * (1 + offset)].
"""

from __future__ import annotations

import random
import time
from typing import Callable, Optional

from core.models import CacheEntry, validate_ttl

Clock = Callable[[], float]


def monotonic_ms() -> float:
    return time.monotonic() * 1000.0


def compute_expires_at(now: float, ttl_base_ms: float, offset: float, rng: random.Random) -> float:
    if offset == 0:
        # Deterministic TTL; leave the random source untouched
        return now + ttl_base_ms
    low = ttl_base_ms * (1.0 - offset)
    high = ttl_base_ms * (1.0 + offset)
    return now + rng.uniform(low, high)


def is_expired(entry: CacheEntry[object], now: float) -> bool:
    return now >= entry.expires_at


class ExpirationPolicy:
    def __init__(
        self,
        *,
        ttl_ms: float,
        offset: float = 0.0,
        rng: Optional[random.Random] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        validate_ttl(ttl_ms, offset)
        self._ttl_ms = float(ttl_ms)
        self._offset = float(offset)
        # Own generator per policy; never the module-global one
        self._rng = rng if rng is not None else random.Random()
        self._clock = clock if clock is not None else monotonic_ms

    @property
    def ttl_ms(self) -> float:
        return self._ttl_ms

    @property
    def offset(self) -> float:
        return self._offset

    def now(self) -> float:
        return self._clock()

    def compute_expires_at(self, now: float) -> float:
        return compute_expires_at(now, self._ttl_ms, self._offset, self._rng)

    def is_expired(self, entry: CacheEntry[object], now: float) -> bool:
        return is_expired(entry, now)
