"""Server bootstrap for the TTL cache MCP service.

Creates the FastMCP instance, builds the shared cache from environment
config, wires the cache tools, and starts the MCP server (stdio transport).
"""

import logging
from typing import Optional

from mcp.server.fastmcp import FastMCP

from config import CACHE_SWEEP_INTERVAL, load_cache_config
from core.cache import TTLCache
from core.sweeper import ExpirySweeper

from tools.cache_tools import register as register_cache_tools

logger = logging.getLogger(__name__)

mcp = FastMCP("ttl-cache-mcp")

cache: Optional[TTLCache] = None
sweeper: Optional[ExpirySweeper] = None


def register_tools() -> None:
    global cache, sweeper
    config = load_cache_config()
    cache = TTLCache.from_config(config)
    if CACHE_SWEEP_INTERVAL > 0:
        sweeper = ExpirySweeper(cache, interval_seconds=CACHE_SWEEP_INTERVAL)

    register_cache_tools(mcp, cache=cache)
    logger.info(
        "Cache ready (capacity=%d, ttl_ms=%s, offset=%s)",
        config.capacity,
        config.ttl_ms,
        config.offset,
    )


def register_all() -> None:
    register_tools()


register_all()


def main() -> None:
    # stdout carries the stdio transport; logs go to stderr
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    if sweeper is not None:
        sweeper.start()
    try:
        mcp.run(transport="stdio")
    finally:
        if sweeper is not None:
            sweeper.stop(timeout=1.0)


if __name__ == "__main__":
    main()
