"""PDF extraction — a thin wrapper around LangChain's ``PyPDFParser``."""

from __future__ import annotations

import logging

from langchain_community.document_loaders.parsers import PyPDFParser
from langchain_core.documents import Document
from langchain_core.documents.base import Blob

from rag_ingest.constants import PDF_CONTENT_TYPE
from rag_ingest.exceptions import DocumentExtractionError

logger = logging.getLogger(__name__)

PAGE_SEPARATOR = "\n\n"


def load_pdf_bytes(content: bytes, filename: str) -> Document:
    """Extract the text of every page in *content* as a single document.

    Pages are not kept as separate documents: their text is joined with a
    blank line so the splitter can treat page breaks as paragraph breaks.

    Parameters
    ----------
    content:
        Raw PDF bytes.
    filename:
        Original file name, stored as ``source`` in the metadata.

    Returns
    -------
    Document
        One document with ``source`` and ``total_pages`` metadata.

    Raises
    ------
    DocumentExtractionError
        When the bytes cannot be parsed as a PDF.
    """
    blob = Blob.from_data(content, path=filename, mime_type=PDF_CONTENT_TYPE)
    try:
        pages = list(PyPDFParser().lazy_parse(blob))
    except Exception as exc:
        raise DocumentExtractionError(filename, exc) from exc

    text = PAGE_SEPARATOR.join(page.page_content for page in pages)
    logger.debug("Parsed %d pages from %s", len(pages), filename)
    return Document(
        page_content=text,
        metadata={"source": filename, "total_pages": len(pages)},
    )
