"""CLI entrypoint using typer."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

import structlog
import typer
from pydantic import ValidationError
from redis.exceptions import RedisError
from rich.console import Console

from kvcache_core.config.settings import Settings
from kvcache_core.exceptions import KVCacheError
from kvcache_infra.cache.redis_cache import RedisCacheClient
from kvcache_infra.observability import bind_context, configure_logging

app = typer.Typer(
    name="kv-cache",
    help="Read, write and delete keys in the shared Redis cache",
)
console = Console()
logger = structlog.get_logger()

T = TypeVar("T")


def _load_settings(verbose: bool, command: str, **context: object) -> Settings:
    """Load settings, configure logging and bind the command to the log context.

    A bad KVC_* value is reported and exits 1.
    """
    try:
        settings = Settings()
    except ValidationError as exc:
        console.print("[red]Invalid configuration:[/red]")
        console.print(str(exc), markup=False, highlight=False)
        raise typer.Exit(code=1) from exc
    if verbose:
        settings.log_level = "DEBUG"
    configure_logging(settings)
    bind_context(command=command, **context)
    return settings


async def _with_client(
    settings: Settings,
    action: Callable[[RedisCacheClient], Awaitable[T]],
) -> T:
    """Run one action against a fresh client and close it afterwards."""
    client = RedisCacheClient.from_settings(settings)
    try:
        return await action(client)
    finally:
        await client.aclose()


def _run(settings: Settings, action: Callable[[RedisCacheClient], Awaitable[T]]) -> T:
    """Run an action, turning store errors into exit code 1."""
    try:
        return asyncio.run(_with_client(settings, action))
    except (RedisError, KVCacheError) as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc


@app.command()
def ping(
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Check whether the store is reachable."""
    settings = _load_settings(verbose, "ping")

    async def _ping(client: RedisCacheClient) -> bool:
        await client.connect()
        return client.is_alive()

    alive = _run(settings, _ping)
    if not alive:
        console.print(f"[red]unreachable[/red] {settings.redis_url}")
        raise typer.Exit(code=1)
    console.print(f"[bold green]alive[/bold green] {settings.redis_url}")


@app.command()
def get(
    key: str = typer.Argument(..., help="Key to read"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Print the value stored under KEY."""
    settings = _load_settings(verbose, "get", key=key)
    value = _run(settings, lambda client: client.get(key))
    if value is None:
        console.print("[dim](nil)[/dim]")
        return
    console.print(value, markup=False, highlight=False)


@app.command("set")
def set_(
    key: str = typer.Argument(..., help="Key to write"),
    value: str = typer.Argument(..., help="Value to store"),
    ttl: int | None = typer.Option(
        None, "--ttl", help="Expiry in seconds (defaults to KVC_DEFAULT_TTL_SECONDS)"
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Store VALUE under KEY with an expiry."""
    settings = _load_settings(verbose, "set", key=key)
    duration = ttl if ttl is not None else settings.default_ttl_seconds
    _run(settings, lambda client: client.set(key, value, duration))
    logger.debug("Key stored", ttl_seconds=duration)
    console.print(f"[green]OK[/green] {key} (ttl {duration}s)")


@app.command("del")
def delete(
    key: str = typer.Argument(..., help="Key to delete"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Delete KEY. Deleting a missing key succeeds."""
    settings = _load_settings(verbose, "del", key=key)
    _run(settings, lambda client: client.delete(key))
    console.print(f"[green]OK[/green] {key}")


@app.command()
def version() -> None:
    """Show version."""
    console.print("kv-cache-accessor v0.1.0")


if __name__ == "__main__":
    app()
