"""Pluggable storage backends for project documents."""

from .azure_blob import AzureBlobStorage
from .base import StorageProvider
from .factory import StorageProviderFactory
from .local import LocalFileSystemStorage

__all__ = [
    "AzureBlobStorage",
    "LocalFileSystemStorage",
    "StorageProvider",
    "StorageProviderFactory",
]
