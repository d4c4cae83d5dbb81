"""
Environment configuration for the Heroes backend.
"""

import os

HEROES_CONTAINER = "heroes"
BLOB_URL = "https://{account}.blob.core.windows.net"

_TRUTHY = {"1", "true", "yes", "on"}


def get_account_name() -> str:
    """Get the storage account name from environment variables."""
    name = os.environ.get("PRIMARY_STORAGE_ACCOUNT_NAME")
    if not name:
        raise ValueError("PRIMARY_STORAGE_ACCOUNT_NAME environment variable not set")
    return name


def get_account_key() -> str:
    """Get the storage account key from environment variables."""
    key = os.environ.get("PRIMARY_STORAGE_ACCOUNT_KEY")
    if not key:
        raise ValueError("PRIMARY_STORAGE_ACCOUNT_KEY environment variable not set")
    return key


def get_blob_endpoint() -> str:
    """Build the blob service endpoint for the configured account."""
    return BLOB_URL.format(account=get_account_name())


def use_strict_status_codes() -> bool:
    """
    Whether hero routes report failures with conventional status codes.

    When off (the default), create failures answer 200 and lookup failures
    answer 418, as existing clients expect.
    """
    value = os.environ.get("HEROES_STRICT_STATUS_CODES", "")
    return value.strip().lower() in _TRUTHY


def get_environment() -> str:
    return os.environ.get("AZURE_FUNCTIONS_ENVIRONMENT", "Development")
