import pytest

from core.cache import TTLCache
from core.errors import ValidationError
from tools import cache_tools


@pytest.fixture
def cache(clock):
    return TTLCache(capacity=2, ttl_ms=1000, clock=clock)


def test_register_adds_all_tools(dummy_mcp, cache):
    cache_tools.register(dummy_mcp, cache=cache)

    assert set(dummy_mcp.tools) == {"cache_put", "cache_get", "cache_size"}


@pytest.mark.asyncio
async def test_put_get_and_size_delegate_to_cache(dummy_mcp, cache):
    cache_tools.register(dummy_mcp, cache=cache)
    put = dummy_mcp.tools["cache_put"]
    get = dummy_mcp.tools["cache_get"]
    size = dummy_mcp.tools["cache_size"]

    assert await put(key="a", value="1") == "ok"
    assert await put(key="b", value="2") == "ok"
    assert await get(key="a") == "1"
    assert await size() == 2

    await put(key="c", value="3")

    assert await get(key="b") is None
    assert await size() == 2
    assert cache.get("c") == "3"


@pytest.mark.asyncio
async def test_get_after_expiry_is_a_miss(dummy_mcp, cache, clock):
    cache_tools.register(dummy_mcp, cache=cache)
    await dummy_mcp.tools["cache_put"](key="a", value="1")

    clock.now = 1000.0

    assert await dummy_mcp.tools["cache_get"](key="a") is None
    assert await dummy_mcp.tools["cache_get"](key="missing") is None


@pytest.mark.asyncio
@pytest.mark.parametrize("tool", ["cache_put", "cache_get"])
async def test_blank_key_is_rejected(dummy_mcp, cache, tool):
    cache_tools.register(dummy_mcp, cache=cache)

    with pytest.raises(ValidationError):
        await dummy_mcp.tools[tool](key="   ")

    assert cache.size() == 0
