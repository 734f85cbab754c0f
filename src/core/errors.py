from __future__ import annotations


class CacheError(Exception):
    """Base error for the cache package."""


class ConfigurationError(CacheError, ValueError):
    """Raised when a cache or sweeper is constructed with invalid parameters."""


class ValidationError(CacheError):
    """Raised when tool input is invalid."""


class CacheConsistencyError(CacheError):
    """Raised when the entry table and the recency order disagree."""
