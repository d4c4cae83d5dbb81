"""
Error types shared by the storage gateway, hero service and routes.
"""


class NotFoundError(Exception):
    """Raised when a hero is not found."""
    pass


class DuplicateNameError(Exception):
    """Raised when creating a hero whose name is already stored."""

    def __init__(self, name: str):
        super().__init__(f"Hero '{name}' was already in the database.")
        self.name = name


class SerializationError(Exception):
    """Raised when a hero document cannot be decoded or encoded."""
    pass


class StorageError(Exception):
    """Base class for blob storage failures."""
    pass


class StorageUnavailableError(StorageError):
    """Raised when the blob storage backend call fails."""
    pass


class BlobNotFoundError(StorageError):
    """Raised when a blob key does not exist."""

    def __init__(self, key: str):
        super().__init__(f"Blob '{key}' does not exist")
        self.key = key


class BlobExistsError(StorageError):
    """Raised when writing a blob that already exists without overwrite."""

    def __init__(self, key: str):
        super().__init__(f"Blob '{key}' already exists")
        self.key = key
