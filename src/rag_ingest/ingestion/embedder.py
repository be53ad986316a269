"""Embedding clients for the two deployment modes.

1. **Azure OpenAI** — used whenever ``AZURE_OPENAI_API_ENDPOINT`` is set.
   Authenticates with an Entra ID bearer-token provider, never an API key.
2. **Local sentence-transformer** — used otherwise. The model id is fixed
   so that the local FAISS folder is always read and written in the same
   embedding space.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from langchain_huggingface import HuggingFaceEmbeddings
from langchain_openai import AzureOpenAIEmbeddings

from rag_ingest.config import Settings
from rag_ingest.constants import LOCAL_EMBEDDINGS_MODEL

logger = logging.getLogger(__name__)


def get_local_embeddings() -> HuggingFaceEmbeddings:
    """Return the local sentence-transformer embedding function."""
    logger.info("Using local embedding model: %s", LOCAL_EMBEDDINGS_MODEL)
    return HuggingFaceEmbeddings(model_name=LOCAL_EMBEDDINGS_MODEL)


def get_azure_embeddings(
    settings: Settings,
    token_provider: Callable[[], str],
) -> AzureOpenAIEmbeddings:
    """Return Azure OpenAI embeddings authenticated through *token_provider*."""
    logger.info(
        "Using Azure OpenAI embeddings: deployment=%s",
        settings.azure_openai_api_embeddings_deployment_name,
    )
    return AzureOpenAIEmbeddings(
        azure_endpoint=settings.azure_openai_api_endpoint,
        azure_deployment=settings.azure_openai_api_embeddings_deployment_name,
        api_version=settings.azure_openai_api_version,
        azure_ad_token_provider=token_provider,
    )
