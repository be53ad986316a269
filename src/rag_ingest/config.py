"""Shared configuration loaded from environment / ``.env``."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application-wide settings, populated from env vars or .env file.

    Only the presence of ``azure_openai_api_endpoint`` decides which
    vector-store backend a request uses; see
    :func:`rag_ingest.stores.factory.resolve_backend`.
    """

    # Azure OpenAI embeddings (cloud backend)
    azure_openai_api_endpoint: str = Field(
        default="",
        description=(
            "Azure OpenAI endpoint, e.g. 'https://<name>.openai.azure.com/'. "
            "Leave empty to use the local embedding model and FAISS index."
        ),
    )
    azure_openai_api_embeddings_deployment_name: str = "text-embedding-ada-002"
    azure_openai_api_version: str = "2024-02-01"

    # Azure Cosmos DB for NoSQL (cloud vector store)
    azure_cosmosdb_nosql_endpoint: str = Field(default="", description="Cosmos DB account URL")
    azure_cosmosdb_nosql_database: str = "vectorSearchDB"
    azure_cosmosdb_nosql_container: str = "vectorSearchContainer"
    azure_embedding_dimensions: int = 1536

    # Azure Blob Storage (optional archival)
    azure_storage_url: str = Field(default="", description="Blob service account URL")
    azure_storage_container_name: str = ""

    # Serving
    host: str = "0.0.0.0"
    port: int = 7071
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def use_cloud_backend(self) -> bool:
        return bool(self.azure_openai_api_endpoint)

    @property
    def archive_enabled(self) -> bool:
        return bool(self.azure_storage_url and self.azure_storage_container_name)


def get_settings() -> Settings:
    """Read settings from the environment.

    Not cached: each request sees the environment as it is at that moment.
    Used as a FastAPI dependency so tests can override it.
    """
    return Settings()
