"""
Blob storage gateway for hero documents.

The gateway is a thin key/bytes facade over one blob container. It knows
nothing about heroes; callers pick the keys and encode the payloads.
"""

import logging
from typing import Any, List, Optional, Protocol
from azure.core.exceptions import AzureError, ResourceExistsError, ResourceNotFoundError
from azure.storage.blob import ContainerClient
from .blob_client import get_heroes_container_client
from .errors import BlobExistsError, BlobNotFoundError, StorageUnavailableError

logger = logging.getLogger(__name__)


class StorageGateway(Protocol):
    """Key/value access to raw blob payloads."""

    def list_keys(self) -> List[Any]:
        """Return blob descriptors; each exposes at least a `name`."""
        ...

    def read_bytes(self, key: str) -> bytes:
        ...

    def write_bytes(self, key: str, payload: bytes, overwrite: bool) -> None:
        ...

    def delete_key(self, key: str) -> None:
        ...


class BlobStorageGateway:
    """StorageGateway backed by an Azure Blob Storage container."""

    def __init__(self, container: Optional[ContainerClient] = None):
        self.container = container or get_heroes_container_client()

    def list_keys(self) -> List[Any]:
        """
        List every blob in the container.

        The service pages lazily, so the listing is materialized here to
        surface paging failures as StorageUnavailableError.
        """
        try:
            return list(self.container.list_blobs())
        except AzureError as e:
            logger.error(f"Error listing blobs: {str(e)}")
            raise StorageUnavailableError(f"Failed to list blobs: {str(e)}") from e

    def read_bytes(self, key: str) -> bytes:
        """
        Download a blob's full content.

        Raises:
            BlobNotFoundError: If the key does not exist
            StorageUnavailableError: On any other storage failure
        """
        try:
            return self.container.download_blob(key).readall()
        except ResourceNotFoundError as e:
            raise BlobNotFoundError(key) from e
        except AzureError as e:
            logger.error(f"Error reading blob {key}: {str(e)}")
            raise StorageUnavailableError(f"Failed to read blob '{key}': {str(e)}") from e

    def write_bytes(self, key: str, payload: bytes, overwrite: bool) -> None:
        """
        Upload a blob.

        Raises:
            BlobExistsError: If overwrite is False and the key already exists
            StorageUnavailableError: On any other storage failure
        """
        try:
            self.container.upload_blob(key, payload, overwrite=overwrite)
        except ResourceExistsError as e:
            raise BlobExistsError(key) from e
        except AzureError as e:
            logger.error(f"Error writing blob {key}: {str(e)}")
            raise StorageUnavailableError(f"Failed to write blob '{key}': {str(e)}") from e

    def delete_key(self, key: str) -> None:
        """
        Delete a blob.

        Raises:
            BlobNotFoundError: If the key does not exist
            StorageUnavailableError: On any other storage failure
        """
        try:
            self.container.delete_blob(key)
        except ResourceNotFoundError as e:
            raise BlobNotFoundError(key) from e
        except AzureError as e:
            logger.error(f"Error deleting blob {key}: {str(e)}")
            raise StorageUnavailableError(f"Failed to delete blob '{key}': {str(e)}") from e
