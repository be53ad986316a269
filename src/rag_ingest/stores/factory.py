"""Backend selection between Cosmos DB (cloud) and FAISS (local).

The only signal is whether ``AZURE_OPENAI_API_ENDPOINT`` is set.  Vectors
written by one backend are never readable by the other: they come from
different embedding models.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rag_ingest.config import Settings
from rag_ingest.stores.base import VectorStoreBackend
from rag_ingest.stores.faiss_store import LocalBackend

if TYPE_CHECKING:
    from azure.core.credentials import TokenCredential

logger = logging.getLogger(__name__)


def resolve_backend(
    settings: Settings,
    credential: TokenCredential | None = None,
) -> VectorStoreBackend:
    """Return the backend a request should write through.

    Parameters
    ----------
    settings:
        Settings for the current request.
    credential:
        Azure identity for the cloud backend. Falls back to the shared
        ``DefaultAzureCredential`` when *None*. Ignored for the local
        backend.
    """
    logger.info(
        "Azure OpenAI endpoint: %s",
        "configured" if settings.use_cloud_backend else "not configured",
    )
    if settings.use_cloud_backend:
        from rag_ingest.security import get_credentials
        from rag_ingest.stores.cosmos_store import CloudBackend

        logger.info("Using Azure OpenAI for embeddings")
        return CloudBackend(settings, credential or get_credentials())

    logger.info("No Azure OpenAI endpoint set, using local embeddings and FAISS index")
    return LocalBackend()
