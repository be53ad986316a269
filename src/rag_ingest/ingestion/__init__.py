"""
Ingestion — PDF extraction, chunking, and the end-to-end pipeline.

This module converts one uploaded PDF into embedded chunks stored in
whichever vector store the request resolved to.
"""

from rag_ingest.ingestion.models import IngestionResult, UploadedFile
from rag_ingest.ingestion.pipeline import DocumentIngestionPipeline

__all__ = ["DocumentIngestionPipeline", "IngestionResult", "UploadedFile"]
