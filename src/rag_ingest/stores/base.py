"""Abstract base class for vector-store backends.

A request writes through exactly one backend, chosen by
:func:`rag_ingest.stores.factory.resolve_backend`.  The two concrete
subclasses form a closed set:

* :class:`~rag_ingest.stores.cosmos_store.CloudBackend` — Azure OpenAI
  embeddings + Azure Cosmos DB for NoSQL.
* :class:`~rag_ingest.stores.faiss_store.LocalBackend` — local
  sentence-transformer + FAISS index folder.

The pipeline only depends on this interface, so tests can inject either
backend with fake embeddings.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar, Literal

if TYPE_CHECKING:
    from langchain_core.documents import Document


class VectorStoreBackend(ABC):
    """Backend-agnostic write interface for chunk embeddings."""

    name: ClassVar[Literal["cloud", "local"]]

    @abstractmethod
    def add_documents(self, documents: list[Document]) -> None:
        """Embed *documents* and persist them in the backing store.

        Must raise on any provider or store failure; callers rely on a
        normal return meaning every chunk was written.
        """
        ...
