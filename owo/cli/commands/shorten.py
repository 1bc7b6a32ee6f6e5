"""
Shorten Command.

Turns a long URL into a whats-th.is redirect.
"""

import asyncio

import typer

from owo.cli.client import get_api_client, get_config
from owo.cli.display import fail
from owo.core.config import ClientConfig
from owo.core.exceptions import OwoError


def shorten(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="URL to shorten"),
) -> None:
    """
    Shorten a URL.

    Examples:
        owo shorten https://example.com/some/long/path
    """
    asyncio.run(_shorten(get_config(ctx), url))


async def _shorten(config: ClientConfig, url: str) -> None:
    """Async implementation of shorten command."""
    try:
        async with get_api_client(config) as client:
            result = await client.shorten(url)
    except OwoError as e:
        fail(f"Failed to shorten! {e.message}")

    typer.echo(result)
