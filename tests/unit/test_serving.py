"""Unit tests for the serving layer."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from rag_ingest.config import Settings, get_settings
from rag_ingest.exceptions import ConfigurationError
from rag_ingest.ingestion.models import IngestionResult
from rag_ingest.ingestion.pipeline import DocumentIngestionPipeline
from rag_ingest.serving.app import app, build_pipeline, get_pipeline_factory
from rag_ingest.stores.faiss_store import LocalBackend


@pytest.fixture()
def factory() -> MagicMock:
    pipeline = MagicMock(spec=DocumentIngestionPipeline)
    pipeline.run.return_value = IngestionResult(
        filename="guide.pdf", char_count=10, chunk_count=1, backend="local"
    )
    return MagicMock(return_value=pipeline)


@pytest.fixture()
def client(factory: MagicMock) -> Iterator[TestClient]:
    app.dependency_overrides[get_settings] = lambda: Settings(_env_file=None)
    app.dependency_overrides[get_pipeline_factory] = lambda: factory
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health_endpoint() -> None:
    """GET /health should return 200 with status ok."""
    client = TestClient(app)
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_missing_file_field_is_bad_request(client: TestClient, factory: MagicMock) -> None:
    response = client.post("/documents", data={"other": "value"})
    assert response.status_code == 400
    assert response.json() == {"error": '"file" field not found in form data.'}
    factory.assert_not_called()


def test_text_file_field_counts_as_missing(client: TestClient, factory: MagicMock) -> None:
    response = client.post("/documents", data={"file": "not an upload"})
    assert response.status_code == 400
    factory.assert_not_called()


def test_empty_body_is_bad_request(client: TestClient, factory: MagicMock) -> None:
    response = client.post("/documents")
    assert response.status_code == 400
    factory.assert_not_called()


def test_upload_success(client: TestClient, factory: MagicMock) -> None:
    response = client.post(
        "/documents",
        files={"file": ("guide.pdf", b"%PDF-1.4 bytes", "application/pdf")},
    )
    assert response.status_code == 200
    assert response.json() == {"message": "PDF file uploaded successfully."}

    pipeline = factory.return_value
    [uploaded] = pipeline.run.call_args.args
    assert uploaded.filename == "guide.pdf"
    assert uploaded.content == b"%PDF-1.4 bytes"
    assert uploaded.size == len(b"%PDF-1.4 bytes")


def test_pipeline_error_is_service_unavailable(client: TestClient, factory: MagicMock) -> None:
    factory.return_value.run.side_effect = RuntimeError("embedding endpoint timed out")
    response = client.post("/documents", files={"file": ("guide.pdf", b"x", "application/pdf")})
    assert response.status_code == 503
    assert response.json() == {
        "error": "Service temporarily unavailable. Error: embedding endpoint timed out"
    }


def test_backend_resolution_error_is_service_unavailable(client: TestClient, factory: MagicMock) -> None:
    factory.side_effect = ConfigurationError("AZURE_COSMOSDB_NOSQL_ENDPOINT must be set")
    response = client.post("/documents", files={"file": ("guide.pdf", b"x", "application/pdf")})
    assert response.status_code == 503
    assert "AZURE_COSMOSDB_NOSQL_ENDPOINT must be set" in response.json()["error"]


def test_corrupt_pdf_end_to_end(tmp_path: Path, fake_embeddings) -> None:
    """A real pipeline on bad bytes reports the parser error and writes nothing."""
    folder = tmp_path / ".faiss"
    app.dependency_overrides[get_settings] = lambda: Settings(_env_file=None)
    app.dependency_overrides[get_pipeline_factory] = lambda: (
        lambda settings: DocumentIngestionPipeline(LocalBackend(folder, embeddings=fake_embeddings))
    )
    try:
        response = TestClient(app).post(
            "/documents", files={"file": ("corrupt.pdf", b"garbage", "application/pdf")}
        )
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 503
    error = response.json()["error"]
    assert error.startswith("Service temporarily unavailable. Error: Failed to extract text from 'corrupt.pdf'")
    assert not folder.exists()


def test_valid_pdf_end_to_end(tmp_path: Path, fake_embeddings, two_page_pdf: bytes) -> None:
    folder = tmp_path / ".faiss"
    app.dependency_overrides[get_settings] = lambda: Settings(_env_file=None)
    app.dependency_overrides[get_pipeline_factory] = lambda: (
        lambda settings: DocumentIngestionPipeline(LocalBackend(folder, embeddings=fake_embeddings))
    )
    try:
        response = TestClient(app).post(
            "/documents", files={"file": ("guide.pdf", two_page_pdf, "application/pdf")}
        )
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 200
    assert (folder / "index.faiss").exists()


def test_build_pipeline_local_without_archive() -> None:
    pipeline = build_pipeline(Settings(_env_file=None))
    assert isinstance(pipeline.backend, LocalBackend)
    assert pipeline.archive is None
