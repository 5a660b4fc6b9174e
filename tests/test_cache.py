from unittest.mock import AsyncMock

import pytest

from oauth2_identity import MemoryCacheLayer, RedisCacheLayer
from oauth2_identity.core.cache import CONSUME_KEY_SCRIPT


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


class TestMemoryCacheLayer:
    @pytest.mark.asyncio
    async def test_entries_expire(self):
        clock = FakeClock()
        cache = MemoryCacheLayer(clock=clock)
        await cache.set("state", "abc", ttl=600)

        clock.now += 599
        assert await cache.get("state") == "abc"

        clock.now += 1
        assert await cache.get("state") is None
        assert len(cache) == 0

    @pytest.mark.asyncio
    async def test_pop_removes_entry(self):
        cache = MemoryCacheLayer()
        await cache.set("state", "abc", ttl=600)

        assert await cache.pop("state") == "abc"
        assert await cache.pop("state") is None

    @pytest.mark.asyncio
    async def test_delete_missing_key(self):
        cache = MemoryCacheLayer()

        await cache.delete("nothing")

        assert len(cache) == 0


class TestRedisCacheLayer:
    @pytest.fixture
    def redis(self):
        return AsyncMock()

    @pytest.mark.asyncio
    async def test_set_uses_setex_with_prefix(self, redis):
        cache = RedisCacheLayer(redis)

        await cache.set("oauth2_state:facebook:s1", "abc", ttl=600)

        redis.setex.assert_awaited_once_with("oauth2:oauth2_state:facebook:s1", 600, "abc")

    @pytest.mark.asyncio
    async def test_get_decodes_bytes(self, redis):
        redis.get.return_value = b"abc"
        cache = RedisCacheLayer(redis, key_prefix="app:")

        assert await cache.get("key") == "abc"
        redis.get.assert_awaited_once_with("app:key")

    @pytest.mark.asyncio
    async def test_get_missing(self, redis):
        redis.get.return_value = None

        assert await RedisCacheLayer(redis).get("key") is None

    @pytest.mark.asyncio
    async def test_pop_is_a_single_script_call(self, redis):
        redis.eval.return_value = b"abc"
        cache = RedisCacheLayer(redis)

        assert await cache.pop("key") == "abc"
        redis.eval.assert_awaited_once_with(CONSUME_KEY_SCRIPT, 1, "oauth2:key")
        redis.get.assert_not_called()
        redis.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete(self, redis):
        await RedisCacheLayer(redis).delete("key")

        redis.delete.assert_awaited_once_with("oauth2:key")
