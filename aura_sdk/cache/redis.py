"""Redis cache backend built on ``redis.asyncio``."""
from __future__ import annotations

import logging

import redis.asyncio as aioredis

from ..config import RedisConfig

logger = logging.getLogger(__name__)


class RedisCache:
    """Store cached responses in Redis; expiry is enforced by the server."""

    def __init__(self, client: aioredis.Redis, key_prefix: str = "aura:") -> None:
        self._client = client
        self._key_prefix = key_prefix

    @classmethod
    def from_config(cls, config: RedisConfig) -> RedisCache:
        client = aioredis.from_url(config.url, decode_responses=True)
        logger.info("Redis cache configured at %s", config.url)
        return cls(client, key_prefix=config.key_prefix)

    def _key(self, key: str) -> str:
        return f"{self._key_prefix}{key}"

    async def get(self, key: str) -> str | None:
        value = await self._client.get(self._key(key))
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    async def set(self, key: str, value: str, ttl: int | None = None) -> None:
        if ttl:
            await self._client.set(self._key(key), value, ex=ttl)
        else:
            await self._client.set(self._key(key), value)

    async def delete(self, key: str) -> None:
        await self._client.delete(self._key(key))

    async def close(self) -> None:
        await self._client.aclose()
