"""Document ingestion pipeline — extract, chunk, embed + store, archive.

Usage::

    from rag_ingest.ingestion.pipeline import DocumentIngestionPipeline
    from rag_ingest.stores import LocalBackend

    pipeline = DocumentIngestionPipeline(backend=LocalBackend())
    result = pipeline.run(UploadedFile(filename="guide.pdf", content=data, size=len(data)))

Every step runs sequentially and any exception propagates to the caller.
There is no compensation: if archival fails after the store write, the
chunks stay searchable and the caller still sees the error.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rag_ingest.constants import CHUNK_OVERLAP, CHUNK_SIZE
from rag_ingest.ingestion.chunker import chunk_documents
from rag_ingest.ingestion.loader import load_pdf_bytes
from rag_ingest.ingestion.models import IngestionResult, UploadedFile

if TYPE_CHECKING:
    from rag_ingest.storage.blob import BlobArchive
    from rag_ingest.stores.base import VectorStoreBackend

logger = logging.getLogger(__name__)


class DocumentIngestionPipeline:
    """Turns one uploaded PDF into stored chunk embeddings.

    Parameters
    ----------
    backend:
        Vector-store backend for this request.
    archive:
        Blob archive for the original file, or *None* to skip archival.
    chunk_size / chunk_overlap:
        Splitter parameters in characters.
    """

    def __init__(
        self,
        backend: VectorStoreBackend,
        archive: BlobArchive | None = None,
        *,
        chunk_size: int = CHUNK_SIZE,
        chunk_overlap: int = CHUNK_OVERLAP,
    ) -> None:
        self.backend = backend
        self.archive = archive
        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap

    def run(self, upload: UploadedFile) -> IngestionResult:
        logger.info("Processing file: %s, size: %d", upload.filename, upload.size)

        logger.info("Starting PDF text extraction")
        raw_document = load_pdf_bytes(upload.content, upload.filename)
        char_count = len(raw_document.page_content)
        logger.info("Extracted %d characters from PDF", char_count)

        logger.info("Starting text splitting")
        chunks = chunk_documents(
            [raw_document],
            chunk_size=self.chunk_size,
            chunk_overlap=self.chunk_overlap,
        )
        logger.info("Split into %d chunks", len(chunks))

        if chunks:
            self.backend.add_documents(chunks)
        else:
            logger.warning("No text extracted from %s, skipping vector store write", upload.filename)

        archived = False
        if self.archive is not None:
            self.archive.upload_pdf(upload.filename, upload.content)
            archived = True
        else:
            logger.info("No Azure Blob Storage configured, skipping upload")

        return IngestionResult(
            filename=upload.filename,
            char_count=char_count,
            chunk_count=len(chunks),
            backend=self.backend.name,
            archived=archived,
        )
