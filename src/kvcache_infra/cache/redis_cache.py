"""Redis-backed implementation of CacheClient."""

from __future__ import annotations

from collections.abc import Awaitable
from typing import TYPE_CHECKING, TypeVar

import structlog
from redis.asyncio import Redis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import TimeoutError as RedisTimeoutError

from kvcache_core.constants import BOOL_FALSE, BOOL_TRUE
from kvcache_core.exceptions import UnsupportedValueError
from kvcache_infra.observability.logging import ensure_logging

if TYPE_CHECKING:
    from kvcache_core.config.settings import Settings
    from kvcache_core.interfaces.cache import CacheValue

logger = structlog.get_logger()

T = TypeVar("T")

_CONNECTION_ERRORS = (RedisConnectionError, RedisTimeoutError)


def to_wire_value(value: CacheValue) -> str:
    """Convert a scalar to the string form written to the store.

    Booleans are checked before numbers since ``bool`` is an ``int``.
    Integral floats are written without the fraction, so ``1.0`` is ``"1"``.
    """
    if isinstance(value, bool):
        return BOOL_TRUE if value else BOOL_FALSE
    if isinstance(value, str):
        return value
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, int | float):
        return str(value)
    msg = f"Unsupported cache value type: {type(value).__name__}"
    raise UnsupportedValueError(msg)


class RedisCacheClient:
    """Shared cache accessor backed by one redis-py asyncio handle.

    ``is_alive()`` is a best-effort flag driven by connection events: it
    starts out True, drops to False when a connection error is observed and
    goes back to True on the next successful round trip. Operations never
    consult it.
    """

    def __init__(self, redis: Redis) -> None:  # type: ignore[type-arg]
        """Initialize with a redis-py asyncio client."""
        ensure_logging()
        self._redis = redis
        self._is_connected = True

    @classmethod
    def from_settings(cls, settings: Settings) -> RedisCacheClient:
        """Build a client from the configured Redis URL."""
        return cls(Redis.from_url(settings.redis_url, decode_responses=True))

    # --- connection events ---

    def on_error(self, exc: BaseException) -> None:
        """Record a connection failure. Logs only; never raises."""
        logger.error(
            "Redis client failed to connect",
            error=str(exc) or repr(exc),
        )
        self._is_connected = False

    def on_connect(self) -> None:
        """Record a successful connection."""
        if not self._is_connected:
            logger.info("Redis client connected")
        self._is_connected = True

    async def connect(self) -> None:
        """Ping the store once so the liveness flag reflects reality.

        Connection errors are logged and swallowed.
        """
        try:
            await self._redis.ping()
        except _CONNECTION_ERRORS as exc:
            self.on_error(exc)
            return
        self.on_connect()

    async def aclose(self) -> None:
        """Close the underlying connection handle."""
        await self._redis.aclose()

    # --- operations ---

    def is_alive(self) -> bool:
        """Return True if the last observed connection event was a success."""
        return self._is_connected

    async def get(self, key: str) -> str | None:
        """Retrieve a value by key."""
        value = await self._call(self._redis.get(key))
        if value is None:
            return None
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return str(value)

    async def set(self, key: str, value: CacheValue, duration_seconds: int) -> None:
        """Store a value that the server expires after ``duration_seconds``."""
        wire_value = to_wire_value(value)
        await self._call(self._redis.setex(key, duration_seconds, wire_value))

    async def delete(self, key: str) -> None:
        """Delete a key from the cache. Missing keys are not an error."""
        await self._call(self._redis.delete(key))

    async def _call(self, command: Awaitable[T]) -> T:
        """Await a store command, feeding its outcome to the event handlers."""
        try:
            result = await command
        except _CONNECTION_ERRORS as exc:
            self.on_error(exc)
            raise
        self.on_connect()
        return result
