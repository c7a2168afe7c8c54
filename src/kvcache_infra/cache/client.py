"""Process-wide shared cache client."""

from __future__ import annotations

from functools import lru_cache

from kvcache_core.config.settings import Settings
from kvcache_infra.cache.redis_cache import RedisCacheClient


@lru_cache(maxsize=1)
def get_cache_client() -> RedisCacheClient:
    """Return the shared RedisCacheClient, creating it on first use.

    Entry points call this once and hand the instance to the components
    that need it.
    """
    return RedisCacheClient.from_settings(Settings())


def reset_cache_client() -> None:
    """Forget the shared instance so the next call builds a fresh one."""
    get_cache_client.cache_clear()
