"""Protocol interfaces for pluggable collaborators."""
from .cache_provider import CacheProvider
from .transport import Transport, TransportResponse

__all__ = ["CacheProvider", "Transport", "TransportResponse"]
