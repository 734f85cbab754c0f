"""Configuration and environment helpers for the project.

Provides small helpers to read typed environment variables and exposes
the settings the hosting server builds its cache from (CACHE_CAPACITY,
CACHE_TTL_MS, CACHE_TTL_OFFSET, CACHE_SWEEP_INTERVAL). The cache core
never reads the environment; it only receives a CacheConfig.
"""

from __future__ import annotations

import os

from core.models import CacheConfig


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return float(raw.strip())
    except ValueError:
        return default


# Cache sizing / expiry
CACHE_CAPACITY = _env_int("CACHE_CAPACITY", 1000)
CACHE_TTL_MS = _env_int("CACHE_TTL_MS", 60_000)
CACHE_TTL_OFFSET = _env_float("CACHE_TTL_OFFSET", 0.0)

# Background sweep interval in seconds; 0 disables the sweeper
CACHE_SWEEP_INTERVAL = _env_float("CACHE_SWEEP_INTERVAL", 0.0)


def load_cache_config() -> CacheConfig:
    # Raises ConfigurationError on out-of-range values
    return CacheConfig(
        capacity=CACHE_CAPACITY,
        ttl_ms=CACHE_TTL_MS,
        offset=CACHE_TTL_OFFSET,
    )
