"""Base storage interface."""

from abc import ABC, abstractmethod
from typing import BinaryIO


class StorageError(Exception):
    """Raised when a storage backend fails to persist an upload."""

    pass


class StorageCapability(ABC):
    """Abstract base class for upload storage backends."""

    @abstractmethod
    async def store(self, name: str, content: BinaryIO) -> str:
        """
        Persist a named stream and return its identifier.

        Args:
            name: Original filename supplied by the client
            content: Binary stream positioned at the start of the file

        Returns:
            Opaque identifier for the stored file

        Raises:
            StorageError: If the file cannot be stored
        """
        pass
