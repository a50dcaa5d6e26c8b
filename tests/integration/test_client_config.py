"""Integration tests for building a client from configuration."""
from __future__ import annotations

from dataclasses import replace
from unittest.mock import AsyncMock, patch

import pytest

from aura_sdk.cache.memory import MemoryCache
from aura_sdk.cache.redis import RedisCache
from aura_sdk.client import AuraClient
from aura_sdk.config import AuraConfig, CacheConfig
from aura_sdk.transport import AiohttpTransport


class TestFromConfig:
    def test_memory_backend(self, sample_config: AuraConfig) -> None:
        client = AuraClient.from_config(sample_config)
        assert isinstance(client.cache_provider, MemoryCache)
        assert client.cache_ttl == 120
        assert client.base_url == "https://aura.example.com"
        assert isinstance(client.transport, AiohttpTransport)
        assert client.transport.timeout == 10

    def test_no_cache_backend(self, sample_config: AuraConfig) -> None:
        config = replace(sample_config, cache=CacheConfig(backend="none"))
        client = AuraClient.from_config(config)
        assert client.cache_provider is None

    @pytest.mark.asyncio
    async def test_redis_backend(self, sample_config: AuraConfig) -> None:
        config = replace(
            sample_config, cache=replace(sample_config.cache, backend="redis")
        )
        redis_client = AsyncMock()
        with patch("aura_sdk.cache.redis.aioredis.from_url", return_value=redis_client):
            client = AuraClient.from_config(config)

        assert isinstance(client.cache_provider, RedisCache)
        await client.close()
        redis_client.aclose.assert_awaited_once()

    def test_default_transport(self) -> None:
        client = AuraClient("k")
        assert isinstance(client.transport, AiohttpTransport)
        assert client.cache_provider is None


class ClosableCache:
    """Third-party style backend exposing its own close()."""

    def __init__(self) -> None:
        self.closed = False

    async def get(self, key: str) -> str | None:
        return None

    async def set(self, key: str, value: str, ttl: int | None = None) -> None:
        return None

    async def delete(self, key: str) -> None:
        return None

    async def close(self) -> None:
        self.closed = True


class TestClose:
    @pytest.mark.asyncio
    async def test_closes_any_backend_with_close(self) -> None:
        cache = ClosableCache()
        client = AuraClient("k", cache_provider=cache)

        await client.close()

        assert cache.closed

    @pytest.mark.asyncio
    async def test_backend_without_close(self) -> None:
        client = AuraClient("k", cache_provider=MemoryCache())
        await client.close()

    @pytest.mark.asyncio
    async def test_no_cache(self) -> None:
        await AuraClient("k").close()
