"""Cache layer for short-lived OAuth2 state values and PKCE verifiers."""

import time
from abc import ABC, abstractmethod
from typing import Awaitable, Callable, Dict, Optional, Tuple, cast

from redis.asyncio import Redis


CONSUME_KEY_SCRIPT = r"""
local value = redis.call("GET", KEYS[1])
if value then
    redis.call("DEL", KEYS[1])
end
return value
"""


class CacheLayer(ABC):
    """Keyed store with per-entry expiry."""

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    async def set(self, key: str, value: str, ttl: int) -> None:
        pass

    @abstractmethod
    async def delete(self, key: str) -> None:
        pass

    async def pop(self, key: str) -> Optional[str]:
        """Return the value for ``key`` and remove it."""
        value = await self.get(key)
        if value is not None:
            await self.delete(key)
        return value


class MemoryCacheLayer(CacheLayer):
    """In-process cache, suitable for a single worker and for tests."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._entries: Dict[str, Tuple[str, float]] = {}

    async def get(self, key: str) -> Optional[str]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self._clock() >= expires_at:
            del self._entries[key]
            return None
        return value

    async def set(self, key: str, value: str, ttl: int) -> None:
        self._entries[key] = (value, self._clock() + ttl)

    async def delete(self, key: str) -> None:
        self._entries.pop(key, None)

    async def pop(self, key: str) -> Optional[str]:
        value = await self.get(key)
        self._entries.pop(key, None)
        return value

    def __len__(self) -> int:
        return len(self._entries)


class RedisCacheLayer(CacheLayer):
    """Cache backed by ``redis.asyncio``; ``pop`` is atomic across workers."""

    def __init__(self, redis: Redis, key_prefix: str = "oauth2:"):
        self._redis = redis
        self._key_prefix = key_prefix

    def _key(self, key: str) -> str:
        return f"{self._key_prefix}{key}"

    async def get(self, key: str) -> Optional[str]:
        raw = await self._redis.get(self._key(key))
        return _decode(raw)

    async def set(self, key: str, value: str, ttl: int) -> None:
        await self._redis.setex(self._key(key), ttl, value)

    async def delete(self, key: str) -> None:
        await self._redis.delete(self._key(key))

    async def pop(self, key: str) -> Optional[str]:
        # redis-py types eval as sync/async union; this client is always async.
        raw = await cast(
            Awaitable[Optional[bytes]],
            self._redis.eval(CONSUME_KEY_SCRIPT, 1, self._key(key)),
        )
        return _decode(raw)


def _decode(raw) -> Optional[str]:
    if raw is None:
        return None
    if isinstance(raw, bytes):
        return raw.decode("utf-8")
    return str(raw)
