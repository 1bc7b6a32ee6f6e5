"""
API Response Schemas.

Pydantic models mirroring the JSON returned by the whats-th.is API.

Stored objects come in three kinds, told apart by the integer `type` tag.
Each kind is its own model carrying only the fields that kind guarantees,
so a record can never be read half-populated: a missing field fails
validation instead.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class File(BaseModel):
    """One uploaded file inside an UploadResponse."""

    success: bool
    hash: str
    name: str
    url: str = Field(description="Path relative to the result domain")
    size: int | None = None


class UploadResponse(BaseModel):
    """Response of POST /upload/pomf[/associated]."""

    success: bool
    files: list[File]


class _ObjectBase(BaseModel):
    """Fields shared by every stored object kind."""

    bucket: str
    key: str
    dir: str
    created_at: str
    associated_with_current_user: bool | None = None


class FileObject(_ObjectBase):
    """Stored file (type 0)."""

    type: Literal[0]
    content_type: str
    content_length: int
    md5_hash: str
    sha256_hash: str | None = None


class RedirectObject(_ObjectBase):
    """Shortened link (type 1)."""

    type: Literal[1]
    dest_url: str


class TombstoneObject(_ObjectBase):
    """Deleted object kept for history (type 2)."""

    type: Literal[2]
    deleted_at: str
    delete_reason: str


ObjectRecord = Annotated[
    Union[FileObject, RedirectObject, TombstoneObject],
    Field(discriminator="type"),
]


class FileListResponse(BaseModel):
    """Response of GET /objects."""

    success: bool
    total_objects: int
    data: list[ObjectRecord]


class DeleteResponse(BaseModel):
    """Response of DELETE /objects/{key}."""

    success: bool
    data: ObjectRecord
