"""Immutable dataclasses shared by the cache components.

Includes the stored entry (value + absolute expiration instant) and the
explicit configuration object a cache is built from (CacheConfig), so
each logical cache is constructed with its own capacity and TTL.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from core.errors import ConfigurationError

V = TypeVar("V")


@dataclass(frozen=True, slots=True)
class CacheEntry(Generic[V]):
    # Value + absolute expiration instant in milliseconds on the cache clock
    value: V
    expires_at: float


def validate_ttl(ttl_ms: float, offset: float) -> None:
    if isinstance(ttl_ms, bool) or not isinstance(ttl_ms, (int, float)):
        raise ConfigurationError(f"ttl_ms must be a number, got {ttl_ms!r}")
    if not ttl_ms > 0:
        raise ConfigurationError(f"ttl_ms must be positive, got {ttl_ms!r}")
    if isinstance(offset, bool) or not isinstance(offset, (int, float)):
        raise ConfigurationError(f"offset must be a number, got {offset!r}")
    # NaN fails both comparisons
    if not 0.0 <= offset <= 1.0:
        raise ConfigurationError(f"offset must be within [0, 1], got {offset!r}")


def validate_capacity(capacity: int) -> None:
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise ConfigurationError(f"capacity must be an integer, got {capacity!r}")
    if capacity <= 0:
        raise ConfigurationError(f"capacity must be positive, got {capacity!r}")


@dataclass(frozen=True)
class CacheConfig:
    """Configuration for one cache instance.

    Fields:
    - capacity: maximum number of stored entries
    - ttl_ms: base time-to-live in milliseconds
    - offset: symmetric jitter fraction; effective TTL is drawn uniformly
      from [ttl_ms * (1 - offset), ttl_ms * (1 + offset)]

    Invalid values raise ConfigurationError, so a config that exists is
    always usable.
    """

    capacity: int
    ttl_ms: float
    offset: float = 0.0

    def __post_init__(self) -> None:
        validate_capacity(self.capacity)
        validate_ttl(self.ttl_ms, self.offset)
