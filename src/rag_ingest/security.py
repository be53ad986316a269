"""Ambient Azure identity shared by the cloud store and the blob archive."""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import lru_cache
from typing import TYPE_CHECKING

from azure.identity import DefaultAzureCredential, get_bearer_token_provider

from rag_ingest.constants import AZURE_COGNITIVE_SERVICES_SCOPE

if TYPE_CHECKING:
    from azure.core.credentials import TokenCredential

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_credentials() -> DefaultAzureCredential:
    """Return the process-wide ``DefaultAzureCredential``.

    Constructing the credential performs no network I/O; tokens are only
    requested when a client first uses it.
    """
    logger.info("Initialising DefaultAzureCredential")
    return DefaultAzureCredential()


def get_azure_openai_token_provider(credential: TokenCredential) -> Callable[[], str]:
    """Return a bearer-token callable bound to *credential* for Azure OpenAI."""
    return get_bearer_token_provider(credential, AZURE_COGNITIVE_SERVICES_SCOPE)
