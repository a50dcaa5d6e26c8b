"""Async Python client for the Aura digital asset API."""
from .cache import MemoryCache, RedisCache
from .client import AuraClient
from .errors import ERROR_CODES, ERROR_MESSAGES, AuraError, TransportError, is_aura_error_response
from .interfaces import CacheProvider, Transport, TransportResponse
from .pagination import paginate, short_page, total_exhausted
from .result import Err, Ok, Result, is_error

__all__ = [
    "AuraClient",
    "AuraError",
    "CacheProvider",
    "ERROR_CODES",
    "ERROR_MESSAGES",
    "Err",
    "MemoryCache",
    "Ok",
    "RedisCache",
    "Result",
    "Transport",
    "TransportError",
    "TransportResponse",
    "is_aura_error_response",
    "is_error",
    "paginate",
    "short_page",
    "total_exhausted",
]
