from collections.abc import Callable
from pathlib import Path
from typing import Any

from labelkit.errors import StorageConfigError, UnsupportedStorageProviderError
from labelkit.models import Connection

from .azure_blob import AzureBlobStorage
from .base import StorageProvider
from .local import LocalFileSystemStorage

ProviderBuilder = Callable[[dict[str, Any], float], StorageProvider]


def _require_option(options: dict[str, Any], name: str, provider_type: str) -> str:
    value = options.get(name)
    if not value or not isinstance(value, str):
        raise StorageConfigError(f"Connection of type {provider_type!r} requires {name!r}")
    return value


def _build_local(options: dict[str, Any], timeout: float) -> StorageProvider:
    return LocalFileSystemStorage(
        folder_path=Path(_require_option(options, "folderPath", "localFileSystemProxy"))
    )


def _build_azure_blob(options: dict[str, Any], timeout: float) -> StorageProvider:
    return AzureBlobStorage(
        sas_url=_require_option(options, "sasUrl", "azureBlobStorage"),
        timeout_seconds=timeout,
    )


class StorageProviderFactory:
    """Builds storage providers from connection descriptors."""

    default_builders: dict[str, ProviderBuilder] = {
        "localFileSystemProxy": _build_local,
        "azureBlobStorage": _build_azure_blob,
    }

    def __init__(self, timeout_seconds: float = 30.0):
        self.timeout_seconds = timeout_seconds
        self._builders = dict(self.default_builders)

    def register(self, provider_type: str, builder: ProviderBuilder) -> None:
        """Add a provider type to this factory only."""
        self._builders[provider_type] = builder

    def provider_types(self) -> list[str]:
        return sorted(self._builders)

    def create_from_connection(self, connection: Connection) -> StorageProvider:
        """Build a provider for a decrypted connection.

        Raises:
            StorageConfigError: If options are still encrypted or incomplete.
            UnsupportedStorageProviderError: If the provider type is unknown.
        """
        if connection.is_encrypted:
            raise StorageConfigError(
                f"Connection {connection.name!r} must be decrypted before use"
            )
        builder = self._builders.get(connection.provider_type)
        if builder is None:
            raise UnsupportedStorageProviderError(
                f"Unsupported storage provider {connection.provider_type!r} "
                f"for connection {connection.name!r}"
            )
        return builder(connection.provider_options, self.timeout_seconds)
