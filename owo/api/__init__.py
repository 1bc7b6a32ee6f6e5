# whats-th.is API client package
from owo.api.client import OwoClient, display_url
from owo.api.schemas import (
    DeleteResponse,
    File,
    FileListResponse,
    FileObject,
    ObjectRecord,
    RedirectObject,
    TombstoneObject,
    UploadResponse,
)

__all__ = [
    "DeleteResponse",
    "File",
    "FileListResponse",
    "FileObject",
    "ObjectRecord",
    "OwoClient",
    "RedirectObject",
    "TombstoneObject",
    "UploadResponse",
    "display_url",
]
