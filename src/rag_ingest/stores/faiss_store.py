"""Local FAISS index used when no cloud endpoint is configured.

The index lives in a folder (``index.faiss`` + ``index.pkl``) that is
rewritten in full on every save.  The load → append → save sequence is
**not atomic**:

* two concurrent requests can both load the same snapshot and the last
  save wins, dropping the other request's chunks;
* a crash during ``save_local`` can leave a half-written folder.

Both are accepted for the local development path.  Writing to a sibling
folder and renaming it into place would fix the second one.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Literal

from langchain_community.vectorstores import FAISS

from rag_ingest.constants import FAISS_STORE_FOLDER
from rag_ingest.stores.base import VectorStoreBackend

if TYPE_CHECKING:
    from langchain_core.documents import Document
    from langchain_core.embeddings import Embeddings

logger = logging.getLogger(__name__)


class LocalIndex:
    """In-memory handle on a FAISS index folder.

    Obtain one through :func:`open_local_index`; it is only flushed to disk
    when the ``with`` block exits cleanly.
    """

    def __init__(self, folder: Path, embeddings: Embeddings, store: FAISS | None = None) -> None:
        self.folder = folder
        self.embeddings = embeddings
        self.store = store
        self.created = store is None

    def __len__(self) -> int:
        return self.store.index.ntotal if self.store is not None else 0

    def add_documents(self, documents: list[Document]) -> None:
        if not documents:
            return
        if self.store is None:
            self.store = FAISS.from_documents(documents, self.embeddings)
        else:
            self.store.add_documents(documents)

    def save(self) -> None:
        if self.store is None:
            logger.info("FAISS index at %s is empty, nothing to save", self.folder)
            return
        self.store.save_local(str(self.folder))
        logger.info("Saved FAISS index with %d vectors to %s", len(self), self.folder)


@contextmanager
def open_local_index(folder: str | Path, embeddings: Embeddings) -> Iterator[LocalIndex]:
    """Open the FAISS index at *folder*, or prepare a new one if absent.

    The index is saved back to *folder* only if the body completes without
    raising, so a failed embedding call leaves the on-disk index untouched.
    """
    folder = Path(folder)
    exists = folder.is_dir()
    logger.info("FAISS folder %s exists: %s", folder, exists)

    store = None
    if exists:
        # The pickle is only ever written by this process.
        store = FAISS.load_local(str(folder), embeddings, allow_dangerous_deserialization=True)
        logger.info("Loaded FAISS index with %d vectors", store.index.ntotal)

    index = LocalIndex(folder, embeddings, store)
    yield index
    index.save()


class LocalBackend(VectorStoreBackend):
    """Local sentence-transformer embeddings + FAISS index folder.

    Parameters
    ----------
    folder:
        Index folder. Defaults to the fixed ``.faiss`` path.
    embeddings:
        Embedding function. When *None*, the local HuggingFace model is
        loaded on first use.
    """

    name: ClassVar[Literal["local"]] = "local"

    def __init__(
        self,
        folder: str | Path = FAISS_STORE_FOLDER,
        *,
        embeddings: Embeddings | None = None,
    ) -> None:
        self.folder = Path(folder)
        self._embeddings = embeddings

    @property
    def embeddings(self) -> Embeddings:
        if self._embeddings is None:
            from rag_ingest.ingestion.embedder import get_local_embeddings

            self._embeddings = get_local_embeddings()
        return self._embeddings

    def add_documents(self, documents: list[Document]) -> None:
        with open_local_index(self.folder, self.embeddings) as index:
            if index.created:
                logger.info("Creating new FAISS index")
            index.add_documents(documents)
