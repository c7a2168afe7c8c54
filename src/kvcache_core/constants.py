"""Shared constants for kv-cache-accessor."""

from __future__ import annotations

DEFAULT_REDIS_URL = "redis://localhost:6379/0"
DEFAULT_TTL_SECONDS = 3600

# String forms written for booleans, matching what other store clients write
BOOL_TRUE = "true"
BOOL_FALSE = "false"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
