"""Shared pytest configuration and fixtures."""

from __future__ import annotations

from collections.abc import Callable

import pytest
from langchain_core.embeddings import DeterministicFakeEmbedding


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: marks tests requiring external services")


def _escape(line: str) -> str:
    return line.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def build_pdf(pages: list[list[str]]) -> bytes:
    """Return a minimal, valid PDF with one text line per entry on each page."""
    page_ids = [4 + 2 * i for i in range(len(pages))]
    kids = " ".join(f"{pid} 0 R" for pid in page_ids)
    objects: list[bytes] = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        f"<< /Type /Pages /Kids [{kids}] /Count {len(pages)} >>".encode(),
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    for pid, lines in zip(page_ids, pages):
        ops = ["BT", "/F1 10 Tf", "40 760 Td", "12 TL"]
        ops += [f"({_escape(line)}) Tj T*" for line in lines]
        ops.append("ET")
        stream = "\n".join(ops).encode("latin-1")
        objects.append(
            (
                "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
                f"/Resources << /Font << /F1 3 0 R >> >> /Contents {pid + 1} 0 R >>"
            ).encode()
        )
        objects.append(b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream")

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for num, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % num + body + b"\nendobj\n"
    xref_offset = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\n" % (len(objects) + 1)
    out += b"startxref\n%d\n%%%%EOF\n" % xref_offset
    return bytes(out)


def sentence_lines(count: int, start: int = 0) -> list[str]:
    """Distinct ~80 character lines so chunk boundaries are unambiguous."""
    return [
        f"Line {i:04d} of the field guide describes how the ingestion service stores text."
        for i in range(start, start + count)
    ]


@pytest.fixture()
def make_pdf() -> Callable[[list[list[str]]], bytes]:
    return build_pdf


@pytest.fixture()
def two_page_pdf() -> bytes:
    """A two-page PDF with roughly 5 600 characters of text."""
    return build_pdf([sentence_lines(35), sentence_lines(35, start=35)])


@pytest.fixture()
def fake_embeddings() -> DeterministicFakeEmbedding:
    return DeterministicFakeEmbedding(size=32)


@pytest.fixture()
def make_lines() -> Callable[..., list[str]]:
    return sentence_lines


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep Azure settings from the developer's shell out of the tests."""
    for name in (
        "AZURE_OPENAI_API_ENDPOINT",
        "AZURE_COSMOSDB_NOSQL_ENDPOINT",
        "AZURE_STORAGE_URL",
        "AZURE_STORAGE_CONTAINER_NAME",
    ):
        monkeypatch.delenv(name, raising=False)
