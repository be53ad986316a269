"""Exceptions raised by the ingestion pipeline."""

from __future__ import annotations

from typing import Any


class IngestionError(Exception):
    """Base class for errors raised while ingesting a document."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


class DocumentExtractionError(IngestionError):
    """The uploaded bytes could not be parsed as a PDF."""

    def __init__(self, filename: str, cause: Exception) -> None:
        super().__init__(
            f"Failed to extract text from {filename!r}: {cause}",
            details={"filename": filename, "error_type": type(cause).__name__},
        )


class ConfigurationError(IngestionError):
    """A selected backend is missing a setting it cannot run without."""
