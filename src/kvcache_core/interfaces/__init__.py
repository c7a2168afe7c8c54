"""Public interface re-exports for kvcache_core."""

from kvcache_core.interfaces.cache import CacheClient, CacheValue

__all__ = [
    "CacheClient",
    "CacheValue",
]
