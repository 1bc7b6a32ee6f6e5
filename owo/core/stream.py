"""
Peekable input stream.

Standard input cannot be rewound, so the bytes consumed for content sniffing
have to be replayed in front of the rest of the input. PeekableStream does
that behind a single read interface.
"""

import io
from typing import BinaryIO

DEFAULT_PEEK_SIZE = 1024


def read_up_to(source: BinaryIO, size: int) -> bytes:
    """Read until `size` bytes are collected or the source is exhausted."""
    chunks: list[bytes] = []
    remaining = size
    while remaining > 0:
        chunk = source.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


class PeekableStream(io.RawIOBase):
    """
    Binary stream yielding a buffered prefix followed by the source remainder.

    The prefix is read eagerly on construction and exposed as `prefix`.
    Only the bytes actually read are replayed, so short inputs are never
    padded. The stream is not seekable, and closing it leaves the source
    open; whoever opened the source closes it.

    Usage:
        stream = PeekableStream(sys.stdin.buffer)
        kind = sniff(stream.prefix)
        data = stream.read()  # full, unmodified input
    """

    def __init__(self, source: BinaryIO, peek_size: int = DEFAULT_PEEK_SIZE) -> None:
        super().__init__()
        if peek_size < 0:
            raise ValueError("peek_size must be non-negative")
        self._source = source
        self._prefix = read_up_to(source, peek_size)
        self._offset = 0

    @property
    def prefix(self) -> bytes:
        """The first bytes of the input, at most peek_size long."""
        return self._prefix

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:
        view = memoryview(buffer).cast("B")
        if not len(view):
            return 0

        if self._offset < len(self._prefix):
            count = min(len(view), len(self._prefix) - self._offset)
            view[:count] = self._prefix[self._offset:self._offset + count]
            self._offset += count
            return count

        data = self._source.read(len(view))
        if not data:
            return 0
        view[:len(data)] = data
        return len(data)
