"""
Azure Blob Storage archive for uploaded PDFs.

Only enabled when both ``AZURE_STORAGE_URL`` and
``AZURE_STORAGE_CONTAINER_NAME`` are set.  Blobs are keyed by the
original filename and silently overwritten on re-upload.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from azure.storage.blob import BlobServiceClient, ContentSettings

from rag_ingest.config import Settings
from rag_ingest.constants import PDF_CONTENT_TYPE

if TYPE_CHECKING:
    from azure.core.credentials import TokenCredential

logger = logging.getLogger(__name__)


class BlobArchive:
    """Uploads original documents to one blob container.

    Parameters
    ----------
    account_url:
        Blob service URL, e.g. ``https://<account>.blob.core.windows.net``.
    container_name:
        Target container; must already exist.
    credential:
        Azure identity used to authenticate uploads.
    """

    def __init__(self, account_url: str, container_name: str, credential: TokenCredential) -> None:
        self.account_url = account_url
        self.container_name = container_name
        self._service = BlobServiceClient(account_url, credential=credential)

    def upload_pdf(self, filename: str, content: bytes) -> None:
        """Upload *content* as ``<container>/<filename>``, overwriting any existing blob.

        Parameters
        ----------
        filename:
            Blob name, taken verbatim from the upload.
        content:
            Raw file bytes.

        Raises
        ------
        azure.core.exceptions.AzureError
            When the upload fails.
        """
        logger.info('Uploading file to blob storage: "%s/%s"', self.container_name, filename)
        container = self._service.get_container_client(self.container_name)
        container.upload_blob(
            name=filename,
            data=content,
            length=len(content),
            overwrite=True,
            content_settings=ContentSettings(content_type=PDF_CONTENT_TYPE),
        )
        logger.info("File uploaded to blob storage successfully")


def resolve_archive(
    settings: Settings,
    credential: TokenCredential | None = None,
) -> BlobArchive | None:
    """Return a :class:`BlobArchive` when storage is configured, else *None*."""
    logger.info(
        "Storage URL: %s, Container: %s",
        "configured" if settings.azure_storage_url else "not configured",
        settings.azure_storage_container_name or "not configured",
    )
    if not settings.archive_enabled:
        return None

    if credential is None:
        from rag_ingest.security import get_credentials

        credential = get_credentials()
    return BlobArchive(settings.azure_storage_url, settings.azure_storage_container_name, credential)
