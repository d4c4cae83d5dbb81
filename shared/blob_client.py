"""
Azure Blob Storage client singleton for hero document storage.
"""

import logging
from typing import Optional
from azure.core.credentials import AzureNamedKeyCredential
from azure.storage.blob import BlobServiceClient, ContainerClient
from .config import get_account_name, get_account_key, get_blob_endpoint, HEROES_CONTAINER

logger = logging.getLogger(__name__)

# Singleton instance
_blob_service_client: Optional[BlobServiceClient] = None


def get_blob_service_client() -> BlobServiceClient:
    """
    Get the BlobServiceClient singleton.
    Authenticates with the storage account's shared key.

    Returns:
        BlobServiceClient instance
    """
    global _blob_service_client

    if _blob_service_client is None:
        credential = AzureNamedKeyCredential(get_account_name(), get_account_key())
        _blob_service_client = BlobServiceClient(
            account_url=get_blob_endpoint(),
            credential=credential
        )
        logger.info("Blob service client initialized")

    return _blob_service_client


def get_heroes_container_client() -> ContainerClient:
    """Get a client bound to the heroes container."""
    return get_blob_service_client().get_container_client(HEROES_CONTAINER)

