"""
Object Commands.

List and delete objects associated with the account behind the token.
"""

import asyncio
from typing import Optional

import typer

from owo.cli.client import get_api_client, get_config
from owo.cli.display import fail, format_deletion, format_listing
from owo.core.config import ClientConfig
from owo.core.exceptions import OwoError


def list_files(
    ctx: typer.Context,
    entries: Optional[int] = typer.Option(None, "--entries", "-e", min=1, help="Number of entries to show (default 8)", show_default=False),
    offset: Optional[int] = typer.Option(None, "--offset", "-o", min=0, help="Number of entries to skip (default 0)", show_default=False),
) -> None:
    """
    List associated files, redirects and tombstones.

    Shows one page; use --offset to page further.

    Examples:
        owo list-files
        owo list-files -e 20 -o 40
    """
    config = get_config(ctx)
    if entries is None:
        entries = config.default_entries
    if offset is None:
        offset = config.default_offset
    asyncio.run(_list_files(config, entries, offset))


async def _list_files(config: ClientConfig, entries: int, offset: int) -> None:
    """Async implementation of list-files command."""
    try:
        async with get_api_client(config) as client:
            result = await client.list_files(entries, offset)
    except OwoError as e:
        fail(f"Failed to list files! {e.message}")

    typer.echo(format_listing(result, entries, offset))


def delete(
    ctx: typer.Context,
    object_key: str = typer.Argument(..., metavar="OBJECT", help="Object key, without domain (e.g. abc123.png)"),
) -> None:
    """
    Delete an object from OwO.

    Only uploads made with --associated can be deleted.

    Examples:
        owo delete abc123.png
    """
    asyncio.run(_delete(get_config(ctx), object_key))


async def _delete(config: ClientConfig, object_key: str) -> None:
    """Async implementation of delete command."""
    try:
        async with get_api_client(config) as client:
            result = await client.delete_file(object_key)
    except OwoError as e:
        fail(f"Failed to delete! {e.message}")

    typer.echo(format_deletion(result))
