"""
Content-type sniffing.

Guesses MIME type and file extension from the leading bytes of an upload
using the `filetype` signature tables.
"""

from typing import NamedTuple

import filetype

DEFAULT_MIME_TYPE = "application/octet-stream"
DEFAULT_FILE_NAME = "owo"


class ContentKind(NamedTuple):
    """MIME type and upload file name derived from a byte prefix."""

    mime_type: str
    file_name: str


def sniff(prefix: bytes, default_name: str = DEFAULT_FILE_NAME) -> ContentKind:
    """
    Infer the content type of an upload from its first bytes.

    Args:
        prefix: Leading bytes of the input (may be empty)
        default_name: Base file name; the detected extension is appended

    Returns:
        ContentKind with the detected MIME type and "<default_name>.<ext>",
        or application/octet-stream and the bare default name if nothing matched.
    """
    kind = filetype.guess(prefix) if prefix else None
    if kind is None:
        return ContentKind(DEFAULT_MIME_TYPE, default_name)
    return ContentKind(kind.mime, f"{default_name}.{kind.extension}")
