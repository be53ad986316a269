"""Azure Cosmos DB for NoSQL backend, used when Azure OpenAI is configured."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, ClassVar, Literal

from azure.cosmos import CosmosClient, PartitionKey
from langchain_community.vectorstores import AzureCosmosDBNoSqlVectorSearch

from rag_ingest.config import Settings
from rag_ingest.exceptions import ConfigurationError
from rag_ingest.ingestion.embedder import get_azure_embeddings
from rag_ingest.security import get_azure_openai_token_provider
from rag_ingest.stores.base import VectorStoreBackend

if TYPE_CHECKING:
    from azure.core.credentials import TokenCredential
    from langchain_core.documents import Document
    from langchain_core.embeddings import Embeddings

logger = logging.getLogger(__name__)

EMBEDDING_FIELD = "embedding"
TEXT_FIELD = "text"


def _vector_embedding_policy(dimensions: int) -> dict[str, Any]:
    return {
        "vectorEmbeddings": [
            {
                "path": f"/{EMBEDDING_FIELD}",
                "dataType": "float32",
                "distanceFunction": "cosine",
                "dimensions": dimensions,
            }
        ]
    }


def _indexing_policy() -> dict[str, Any]:
    return {
        "indexingMode": "consistent",
        "includedPaths": [{"path": "/*"}],
        "excludedPaths": [{"path": '/"_etag"/?'}],
        "vectorIndexes": [{"path": f"/{EMBEDDING_FIELD}", "type": "quantizedFlat"}],
    }


class CloudBackend(VectorStoreBackend):
    """Azure OpenAI embeddings written in bulk to Cosmos DB vector search.

    Parameters
    ----------
    settings:
        Resolved settings; must carry the Azure OpenAI and Cosmos DB
        endpoints.
    credential:
        Ambient Azure identity used both for the embedding token provider
        and for the Cosmos DB client.
    embeddings:
        Optional embedding function override. When *None*, Azure OpenAI
        embeddings bound to *credential* are built on first use.
    """

    name: ClassVar[Literal["cloud"]] = "cloud"

    def __init__(
        self,
        settings: Settings,
        credential: TokenCredential,
        *,
        embeddings: Embeddings | None = None,
    ) -> None:
        self.settings = settings
        self.credential = credential
        self._embeddings = embeddings

    @property
    def embeddings(self) -> Embeddings:
        if self._embeddings is None:
            token_provider = get_azure_openai_token_provider(self.credential)
            self._embeddings = get_azure_embeddings(self.settings, token_provider)
        return self._embeddings

    def add_documents(self, documents: list[Document]) -> None:
        endpoint = self.settings.azure_cosmosdb_nosql_endpoint
        if not endpoint:
            raise ConfigurationError(
                "AZURE_COSMOSDB_NOSQL_ENDPOINT must be set when AZURE_OPENAI_API_ENDPOINT is configured."
            )

        logger.info(
            "Storing %d documents in Azure Cosmos DB %s/%s",
            len(documents),
            self.settings.azure_cosmosdb_nosql_database,
            self.settings.azure_cosmosdb_nosql_container,
        )
        client = CosmosClient(endpoint, credential=self.credential)
        AzureCosmosDBNoSqlVectorSearch.from_documents(
            documents,
            self.embeddings,
            cosmos_client=client,
            database_name=self.settings.azure_cosmosdb_nosql_database,
            container_name=self.settings.azure_cosmosdb_nosql_container,
            vector_embedding_policy=_vector_embedding_policy(self.settings.azure_embedding_dimensions),
            indexing_policy=_indexing_policy(),
            cosmos_container_properties={"partition_key": PartitionKey(path="/id")},
            cosmos_database_properties={},
            text_key=TEXT_FIELD,
            embedding_key=EMBEDDING_FIELD,
        )
