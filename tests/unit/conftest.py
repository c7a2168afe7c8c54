"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from unittest.mock import MagicMock

import pytest
import structlog

from kvcache_infra.cache.client import reset_cache_client
from tests.mocks.mock_redis import make_mock_redis


@pytest.fixture
def mock_redis() -> MagicMock:
    """Return a mock redis.asyncio.Redis with async command methods."""
    return make_mock_redis()


@pytest.fixture(autouse=True)
def _reset_shared_client() -> Generator[None, None, None]:
    """Drop the memoised shared client between tests."""
    reset_cache_client()
    yield
    reset_cache_client()


@pytest.fixture(autouse=True)
def _reset_logging() -> Generator[None, None, None]:
    """Save and restore root logger handlers.

    configure_logging() replaces root handlers; stale StreamHandlers would
    otherwise write to streams pytest has already closed.
    """
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers = original_handlers
    root.level = original_level


@pytest.fixture(autouse=True)
def _reset_structlog() -> Generator[None, None, None]:
    """Start and end every test with structlog unconfigured and no bound context."""
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()

