"""FastAPI application exposing document ingestion over HTTP."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from starlette.datastructures import UploadFile

from rag_ingest.config import Settings, get_settings
from rag_ingest.ingestion.models import UploadedFile
from rag_ingest.ingestion.pipeline import DocumentIngestionPipeline
from rag_ingest.storage.blob import resolve_archive
from rag_ingest.stores.factory import resolve_backend

logger = logging.getLogger(__name__)

app = FastAPI(
    title="RAG Document Ingestion API",
    version="0.1.0",
    description="Uploads PDFs into the vector store backing the chat assistant.",
)

FILE_FIELD = "file"
SUCCESS_MESSAGE = "PDF file uploaded successfully."
MISSING_FILE_MESSAGE = '"file" field not found in form data.'

PipelineFactory = Callable[[Settings], DocumentIngestionPipeline]


# ── Response envelopes ────────────────────────────────────────────────
def ok(body: dict[str, Any]) -> JSONResponse:
    return JSONResponse(status_code=200, content=body)


def bad_request(message: str) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": message})


def service_unavailable(message: str) -> JSONResponse:
    return JSONResponse(status_code=503, content={"error": message})


# ── Dependencies ──────────────────────────────────────────────────────
def build_pipeline(settings: Settings) -> DocumentIngestionPipeline:
    """Resolve the backend and optional archive for one request."""
    return DocumentIngestionPipeline(
        backend=resolve_backend(settings),
        archive=resolve_archive(settings),
    )


def get_pipeline_factory() -> PipelineFactory:
    """Return the pipeline factory; overridden in tests."""
    return build_pipeline


# ── Routes ────────────────────────────────────────────────────────────
@app.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok"}


@app.post("/documents")
async def post_documents(
    request: Request,
    settings: Settings = Depends(get_settings),
    pipeline_factory: PipelineFactory = Depends(get_pipeline_factory),
) -> JSONResponse:
    """Ingest the PDF sent as the ``file`` field of a multipart form."""
    logger.info("Starting document upload process")
    try:
        form = await request.form()
        upload = form.get(FILE_FIELD)
        if not isinstance(upload, UploadFile):
            logger.info("No file found in form data")
            return bad_request(MISSING_FILE_MESSAGE)

        content = await upload.read()
        uploaded = UploadedFile(
            filename=upload.filename or "",
            content=content,
            size=upload.size if upload.size is not None else len(content),
        )

        pipeline = pipeline_factory(settings)
        result = await run_in_threadpool(pipeline.run, uploaded)
    except Exception as exc:
        logger.exception("Error when processing document-post request: %s", exc)
        return service_unavailable(f"Service temporarily unavailable. Error: {exc}")

    logger.info(
        "Ingested %s: %d chunks via %s backend, archived=%s",
        result.filename,
        result.chunk_count,
        result.backend,
        result.archived,
    )
    return ok({"message": SUCCESS_MESSAGE})


def main() -> None:
    """Run the API under uvicorn using host, port and log level from settings."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
