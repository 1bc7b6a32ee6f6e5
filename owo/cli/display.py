"""
Output formatting for CLI commands.

Formatters return plain strings so commands can print them to stdout
unchanged and tests can assert on them directly.
"""

from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from owo.api.schemas import (
    DeleteResponse,
    FileListResponse,
    FileObject,
    ObjectRecord,
    RedirectObject,
    TombstoneObject,
)

err_console = Console(stderr=True)


def fail(message: str) -> NoReturn:
    """Print an error to stderr and exit with status 1."""
    err_console.print(f"[red]Error: {escape(message)}[/red]", soft_wrap=True)
    raise typer.Exit(1)


def format_object(record: ObjectRecord) -> str:
    """Render one stored object as a labelled block."""
    if isinstance(record, FileObject):
        lines = [
            "Type: File",
            f"Key: {record.key}",
            f"Creation Date: {record.created_at}",
            f"MIME Type: {record.content_type}",
            f"File Length: {record.content_length}",
            f"MD5 Hash: {record.md5_hash}",
        ]
    elif isinstance(record, RedirectObject):
        lines = [
            "Type: Redirect",
            f"Key: {record.key}",
            f"Redirect URL: {record.dest_url}",
            f"Creation Date: {record.created_at}",
        ]
    elif isinstance(record, TombstoneObject):
        lines = [
            "Type: Tombstone",
            f"Key: {record.key}",
            f"Creation Date: {record.created_at}",
            f"Deletion Date: {record.deleted_at}",
            f"Reason For Deletion: {record.delete_reason}",
        ]
    else:
        raise TypeError(f"Unsupported object record: {type(record).__name__}")
    return "\n".join(lines)


def format_listing(response: FileListResponse, entries: int, offset: int) -> str:
    """Render a page of objects: header, two blank lines, then one block per object."""
    text = f"Showing {entries} entries, from offset {offset}\n"
    for record in response.data:
        text += "\n\n" + format_object(record)
    return text


def format_deletion(response: DeleteResponse) -> str:
    """Render the confirmation line for a deleted object."""
    record = response.data
    if isinstance(record, TombstoneObject):
        return f"Success! Object {record.key} deleted at {record.deleted_at}"
    return f"Success! Object {record.key} deleted."
