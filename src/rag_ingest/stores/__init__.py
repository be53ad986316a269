"""
Stores — where chunk embeddings end up.

Public surface
--------------
- :class:`VectorStoreBackend` — abstract write interface.
- :class:`LocalBackend` — FAISS folder + local embeddings.
- :class:`CloudBackend` — Cosmos DB + Azure OpenAI embeddings.
- :func:`open_local_index` — scoped open-or-create of a FAISS folder.
- :func:`resolve_backend` — pick the backend for a request.
"""

from rag_ingest.stores.base import VectorStoreBackend
from rag_ingest.stores.factory import resolve_backend
from rag_ingest.stores.faiss_store import LocalBackend, open_local_index

__all__ = [
    "CloudBackend",
    "LocalBackend",
    "VectorStoreBackend",
    "open_local_index",
    "resolve_backend",
]


def __getattr__(name: str):  # noqa: ANN001
    """Lazy-import CloudBackend to avoid pulling in azure-cosmos at import time."""
    if name == "CloudBackend":
        from rag_ingest.stores.cosmos_store import CloudBackend

        return CloudBackend
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
