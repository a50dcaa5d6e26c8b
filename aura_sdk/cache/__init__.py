"""Cache backends."""
from .memory import MemoryCache
from .redis import RedisCache

__all__ = ["MemoryCache", "RedisCache"]
