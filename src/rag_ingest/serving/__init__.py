"""
Serving — FastAPI application for the document ingestion endpoint.

Run locally with ``rag-ingest`` or ``python -m rag_ingest.serving.app``.
"""
