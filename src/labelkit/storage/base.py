from typing import Protocol


class StorageProvider(Protocol):
    """Protocol for storage backends holding project documents."""

    async def read_text(self, path: str) -> str:
        """Read a UTF-8 text resource by path relative to the storage root.

        Raises:
            ResourceNotFoundError: If nothing exists at ``path``.
            StorageError: For any other failure (auth, network, I/O).
        """
        ...
