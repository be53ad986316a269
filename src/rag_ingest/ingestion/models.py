"""Domain models passed between the HTTP layer and the ingestion pipeline."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class UploadedFile(BaseModel):
    """A file received over HTTP, already read into memory.

    Attributes
    ----------
    filename:
        Name the client gave the upload; used as ``source`` metadata and as
        the blob name when archiving.
    content:
        Raw bytes of the upload.
    size:
        Byte size of the upload as reported by the HTTP layer.
    """

    filename: str
    content: bytes = Field(repr=False)
    size: int


class IngestionResult(BaseModel):
    """Summary of one completed ingestion, used for logging and tests."""

    filename: str
    char_count: int
    chunk_count: int
    backend: Literal["cloud", "local"]
    archived: bool = False
