"""Azure Blob Storage provider.

Reads blobs from a single container addressed by a container SAS URL, e.g.
``https://account.blob.core.windows.net/container?sv=...&sig=...``.
"""

from dataclasses import dataclass
from urllib.parse import quote

import httpx

from labelkit.errors import (
    ResourceNotFoundError,
    StorageAuthError,
    StorageConfigError,
    StorageIOError,
)
from labelkit.logging_config import get_logger

from .base import StorageProvider

logger = get_logger(__name__)


@dataclass
class AzureBlobStorage(StorageProvider):
    """Provider for one blob container."""

    sas_url: str
    timeout_seconds: float = 30.0

    def __post_init__(self):
        url = httpx.URL(self.sas_url)
        if url.scheme not in ("http", "https") or not url.host:
            raise StorageConfigError("Container SAS URL must be an absolute http(s) URL")
        self._container_url = url

    @property
    def container_name(self) -> str:
        return self._container_url.path.strip("/").split("/")[-1]

    def blob_url(self, path: str) -> httpx.URL:
        """Blob URL for ``path``, keeping the container's SAS query string."""
        container_path = self._container_url.path.rstrip("/")
        blob_name = quote(path.lstrip("/"), safe="/")
        return self._container_url.copy_with(path=f"{container_path}/{blob_name}")

    async def read_text(self, path: str) -> str:
        try:
            url = self.blob_url(path)
        except httpx.InvalidURL as e:
            raise StorageConfigError(f"Invalid blob path {path!r}: {e}", path=path) from e

        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
                resp = await client.get(url)
        except httpx.HTTPError as e:
            logger.warning(
                "blob_read_transport_error",
                container=self.container_name,
                path=path,
                error=str(e),
            )
            raise StorageIOError(f"Cannot reach blob storage: {e}", path=path) from e

        if resp.status_code == httpx.codes.NOT_FOUND:
            raise ResourceNotFoundError(
                f"Blob {path!r} not found in container {self.container_name!r}", path=path
            )
        if resp.status_code in (httpx.codes.UNAUTHORIZED, httpx.codes.FORBIDDEN):
            raise StorageAuthError(
                f"Access to container {self.container_name!r} denied "
                f"(HTTP {resp.status_code})",
                path=path,
            )
        if resp.is_error:
            raise StorageIOError(
                f"Blob storage returned HTTP {resp.status_code} for {path!r}", path=path
            )

        logger.debug("blob_read", container=self.container_name, path=path)
        return resp.text
