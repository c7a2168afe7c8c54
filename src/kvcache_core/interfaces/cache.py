"""Abstract cache interface."""

from __future__ import annotations

from typing import Protocol, TypeAlias, runtime_checkable

CacheValue: TypeAlias = str | int | float | bool


@runtime_checkable
class CacheClient(Protocol):
    """Async key-value cache with expiry and a liveness flag."""

    def is_alive(self) -> bool:
        """Return the last observed connection state."""
        ...

    async def get(self, key: str) -> str | None:
        """Retrieve a value by key, or None if not found."""
        ...

    async def set(self, key: str, value: CacheValue, duration_seconds: int) -> None:
        """Store a value that expires after ``duration_seconds``."""
        ...

    async def delete(self, key: str) -> None:
        """Delete a key from the cache."""
        ...
