import asyncio
from dataclasses import dataclass
from pathlib import Path

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
class LocalFileSystemStorage(StorageProvider):
    """Provider for a project folder on the local file system."""

    folder_path: Path

    def _resolve(self, path: str) -> Path:
        root = self.folder_path.expanduser().resolve()
        target = (root / path).resolve()
        if not target.is_relative_to(root):
            raise StorageConfigError(f"Path {path!r} escapes folder {root}", path=path)
        return target

    async def read_text(self, path: str) -> str:
        target = self._resolve(path)
        try:
            text = await asyncio.to_thread(target.read_text, encoding="utf-8")
        except FileNotFoundError as e:
            raise ResourceNotFoundError(f"File not found: {target}", path=path) from e
        except PermissionError as e:
            raise StorageAuthError(f"Permission denied: {target}", path=path) from e
        except (OSError, UnicodeDecodeError) as e:
            raise StorageIOError(f"Cannot read {target}: {e}", path=path) from e

        logger.debug("local_file_read", path=str(target), size=len(text))
        return text
