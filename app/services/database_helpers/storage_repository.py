# /app/services/database_helpers/storage_repository.py

import os
import tempfile
from abc import ABC, abstractmethod
from typing import Optional


class BaseStorageRepository(ABC):
    """
    A durable key-value slot store. Reads and writes are synchronous from the
    caller's point of view; a write replaces the whole value for its key.
    """

    @abstractmethod
    def read(self, key: str) -> Optional[str]:
        """Returns the stored value, or None if the key has never been written."""

    @abstractmethod
    def write(self, key: str, value: str) -> None:
        """Overwrites the value stored under `key`."""


class FileStorageRepository(BaseStorageRepository):
    """Stores each key as `<data_dir>/<key>.json`. Used for local development."""

    def __init__(self, data_dir: str):
        self.data_dir = data_dir

    def _path_for(self, key: str) -> str:
        return os.path.join(self.data_dir, f"{key}.json")

    def read(self, key: str) -> Optional[str]:
        path = self._path_for(key)
        if not os.path.exists(path):
            return None
        with open(path, "r", encoding="utf-8") as f:
            return f.read()

    def write(self, key: str, value: str) -> None:
        os.makedirs(self.data_dir, exist_ok=True)
        # Write to a sibling temp file first so a crash never leaves half a file.
        fd, temp_path = tempfile.mkstemp(dir=self.data_dir, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(temp_path, self._path_for(key))
        except BaseException:
            if os.path.exists(temp_path):
                os.unlink(temp_path)
            raise
