"""
File stores for cached thumbnails.

The resolver only needs three operations (exists, prepare_directory, save),
so both the plain filesystem and Django's storage API can back it.
"""

import logging
import os
from typing import Optional, Protocol

from django.core.files.base import ContentFile
from django.core.files.storage import Storage, default_storage

from .config import ResolverConfig

logger = logging.getLogger(__name__)


class FileStore(Protocol):
    """Capability used by the resolver for thumbnail files."""

    def exists(self, path: str) -> bool: ...

    def prepare_directory(self, path: str) -> None: ...

    def save(self, path: str, data: bytes) -> str: ...


class LocalFileStore:
    """Stores thumbnails directly on the local filesystem."""

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def prepare_directory(self, path: str) -> None:
        """Create the parent directory of path if it is missing."""
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

    def save(self, path: str, data: bytes) -> str:
        """Write data to path, replacing any existing file."""
        with open(path, "wb") as handle:
            handle.write(data)
        logger.debug(f"Saved {len(data)} bytes to {path}")
        return path


class DjangoStorageFileStore:
    """Stores thumbnails through a Django storage backend."""

    def __init__(self, storage: Optional[Storage] = None):
        self.storage = storage or default_storage

    def exists(self, path: str) -> bool:
        return self.storage.exists(path)

    def prepare_directory(self, path: str) -> None:
        # Storage backends create directories on save
        pass

    def save(self, path: str, data: bytes) -> str:
        """
        Save data under path, replacing any existing file.

        Django storages pick an alternative name when the target exists, so
        the old file is deleted first to keep the path deterministic.

        Returns:
            Name the storage actually used
        """
        if self.storage.exists(path):
            self.storage.delete(path)
        name = self.storage.save(path, ContentFile(data))
        logger.debug(f"Saved {len(data)} bytes to storage as {name}")
        return name


def get_file_store(config: ResolverConfig) -> FileStore:
    """Return the file store selected by the configuration."""
    if config.use_default_storage:
        return DjangoStorageFileStore()
    return LocalFileStore()
