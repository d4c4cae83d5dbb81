# Shared utilities for the Heroes backend
from .blob_client import get_blob_service_client, get_heroes_container_client
from .storage import StorageGateway, BlobStorageGateway
from .responses import success_response, error_response, preflight_response
from .errors import (
    NotFoundError,
    DuplicateNameError,
    SerializationError,
    StorageError,
    StorageUnavailableError,
    BlobNotFoundError,
    BlobExistsError,
)

__all__ = [
    "get_blob_service_client",
    "get_heroes_container_client",
    "StorageGateway",
    "BlobStorageGateway",
    "success_response",
    "error_response",
    "preflight_response",
    "NotFoundError",
    "DuplicateNameError",
    "SerializationError",
    "StorageError",
    "StorageUnavailableError",
    "BlobNotFoundError",
    "BlobExistsError",
]
