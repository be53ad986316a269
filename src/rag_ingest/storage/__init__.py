"""Storage — optional archival of the original uploaded files."""

from rag_ingest.storage.blob import BlobArchive, resolve_archive

__all__ = ["BlobArchive", "resolve_archive"]
