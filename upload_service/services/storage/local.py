"""Local disk storage backend with streaming writes."""

import os
import uuid
from pathlib import Path, PurePath
from typing import BinaryIO

import aiofiles
import structlog
from starlette.concurrency import run_in_threadpool

from upload_service.services.storage.base import StorageCapability, StorageError

logger = structlog.get_logger()

CHUNK_SIZE = 8192


class LocalDiskStorage(StorageCapability):
    """Stores uploads as files in a single directory, one UUID per file."""

    def __init__(self, upload_dir: str | Path):
        """Initialize storage and make sure the upload directory exists."""
        self.upload_dir = Path(upload_dir)
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        os.chmod(self.upload_dir, 0o700)

    async def store(self, name: str, content: BinaryIO) -> str:
        """
        Stream content to disk under a freshly generated identifier.

        The stored filename is the identifier plus the original suffix, so
        concurrent uploads with the same name never collide.

        Args:
            name: Original filename
            content: Binary stream to copy

        Returns:
            Identifier of the stored file

        Raises:
            StorageError: If writing to disk fails
        """
        identifier = str(uuid.uuid4())
        target_path = self.path_for(identifier, name)

        bytes_written = 0
        try:
            async with aiofiles.open(target_path, "wb") as f:
                # Spooled uploads may live on disk; keep reads off the event loop
                while chunk := await run_in_threadpool(content.read, CHUNK_SIZE):
                    await f.write(chunk)
                    bytes_written += len(chunk)
            os.chmod(target_path, 0o600)
        except OSError as e:
            logger.error("file_store_failed", filename=name, path=str(target_path), error=str(e))
            target_path.unlink(missing_ok=True)
            raise StorageError(f"Failed to store {name!r}") from e

        logger.info(
            "file_stored",
            identifier=identifier,
            filename=name,
            size=bytes_written,
            path=str(target_path),
        )
        return identifier

    def path_for(self, identifier: str, name: str) -> Path:
        """Path a file with this identifier and original name is stored at."""
        # Only the suffix of the client-supplied name is kept.
        suffix = PurePath(name).suffix.lower()
        return self.upload_dir / f"{identifier}{suffix}"
