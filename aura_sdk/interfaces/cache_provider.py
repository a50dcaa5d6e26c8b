"""Cache provider protocol — key/value store with optional TTL."""
from typing import Protocol


class CacheProvider(Protocol):
    """Abstract interface for response cache backends.

    ``set`` without a ttl (or with ttl 0) stores the value with no expiry.
    An expired entry reads back as ``None``, exactly like a missing key.
    """

    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str, ttl: int | None = None) -> None: ...

    async def delete(self, key: str) -> None: ...
