"""Observability: structured logging."""

from kvcache_infra.observability.logging import (
    bind_context,
    clear_context,
    configure_logging,
    ensure_logging,
)

__all__ = [
    "bind_context",
    "clear_context",
    "configure_logging",
    "ensure_logging",
]
