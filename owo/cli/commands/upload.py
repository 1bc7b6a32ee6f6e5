"""
Upload Command.

Uploads a file, or standard input, and prints its public URL.
"""

import asyncio
from contextlib import ExitStack
from pathlib import Path
from typing import BinaryIO, Optional

import click
import typer

from owo.cli.client import get_api_client, get_config
from owo.cli.display import fail
from owo.core.config import ClientConfig
from owo.core.exceptions import OwoError
from owo.core.logging import get_logger, log_with_source
from owo.core.sniff import ContentKind, sniff
from owo.core.stream import PeekableStream

logger = get_logger(__name__)


def upload(
    ctx: typer.Context,
    file: Optional[Path] = typer.Argument(
        None,
        help="File to upload. Reads standard input when omitted.",
        show_default=False,
    ),
    associated: bool = typer.Option(
        False,
        "--associated",
        "-a",
        help="Associate the upload with your account (env: OWO_ASSOCIATED).",
    ),
    result_domain: Optional[str] = typer.Option(
        None,
        "--result-domain",
        "-r",
        help="Domain used to display the uploaded file (env: OWO_RESULT_DOMAIN).",
        show_default=False,
    ),
) -> None:
    """
    Upload a file.

    The content type is sniffed from the first bytes of the input.

    Examples:
        owo upload picture.png
        owo upload -a -r i.example.com report.pdf
        cat notes.txt | owo upload
    """
    config = get_config(ctx)
    associated = associated or config.associated
    result_domain = result_domain or config.result_domain

    with ExitStack() as stack:
        try:
            source = _open_input(stack, file)
        except OSError as e:
            fail(f"Failed to open file: {e}")

        stream = PeekableStream(source, config.sniff_bytes)
        kind = sniff(stream.prefix, config.default_name)
        log_with_source(
            logger,
            "cli",
            "debug",
            "Sniffed upload",
            mime_type=kind.mime_type,
            file_name=kind.file_name,
            prefix_length=len(stream.prefix),
        )

        asyncio.run(_upload(config, stream, kind, associated, result_domain))


def _open_input(stack: ExitStack, path: Path | None) -> BinaryIO:
    """Open `path` for binary reading, or return standard input."""
    if path is None:
        return click.get_binary_stream("stdin")
    return stack.enter_context(open(path, "rb"))


async def _upload(
    config: ClientConfig,
    stream: PeekableStream,
    kind: ContentKind,
    associated: bool,
    result_domain: str,
) -> None:
    """Async implementation of upload command."""
    try:
        async with get_api_client(config) as client:
            url = await client.upload_url(
                stream,
                kind.mime_type,
                kind.file_name,
                result_domain,
                associated=associated,
            )
    except OwoError as e:
        fail(f"Failed to upload! {e.message}")

    typer.echo(url)
