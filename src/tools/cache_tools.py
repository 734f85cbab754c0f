"""MCP tools exposing a shared cache.

Registers 'cache_put', 'cache_get' and 'cache_size', which validate inputs
and delegate to an injected TTLCache instance.
"""

from __future__ import annotations

from typing import Optional

from mcp.server.fastmcp import FastMCP

from core.cache import TTLCache
from core.errors import ValidationError


def _require_key(key: str) -> str:
    if not key or not key.strip():
        raise ValidationError("Missing cache key")
    return key


def register(mcp: FastMCP, *, cache: TTLCache) -> None:
    @mcp.tool(name="cache_put")
    async def cache_put(key: str = "", value: str = "") -> str:
        """Store a value under a key, replacing any existing entry.

        Parameters:
          - key: cache key (required, non-blank).
          - value: string value to store.

        Returns:
          "ok". The entry expires after the configured TTL and may be
          evicted earlier if the cache is full.

        Raises:
          ValidationError when the key is missing or blank.
        """
        cache.put(_require_key(key), value)
        return "ok"

    @mcp.tool(name="cache_get")
    async def cache_get(key: str = "") -> Optional[str]:
        """Return the cached value for a key, or null on a miss or expiry."""
        return cache.get(_require_key(key))

    @mcp.tool(name="cache_size")
    async def cache_size() -> int:
        """Return the number of stored entries, including not yet removed stale ones."""
        return cache.size()
