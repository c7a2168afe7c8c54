"""Custom exception hierarchy for kv-cache-accessor."""

from __future__ import annotations


class KVCacheError(Exception):
    """Base exception for all kv-cache-accessor errors."""


class UnsupportedValueError(KVCacheError, TypeError):
    """Raised when a value is not a str, int, float or bool."""
