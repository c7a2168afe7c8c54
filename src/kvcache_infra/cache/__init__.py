"""Redis cache accessor and its shared instance."""

from kvcache_infra.cache.client import get_cache_client, reset_cache_client
from kvcache_infra.cache.redis_cache import RedisCacheClient, to_wire_value

__all__ = [
    "RedisCacheClient",
    "get_cache_client",
    "reset_cache_client",
    "to_wire_value",
]
