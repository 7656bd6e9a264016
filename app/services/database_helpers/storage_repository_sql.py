# /app/services/database_helpers/storage_repository_sql.py

from typing import Callable, Optional
from sqlalchemy.orm import Session

from app.db.models.storage_models import StorageEntry
from .storage_repository import BaseStorageRepository


class StorageRepositorySQL(BaseStorageRepository):
    """Key-value slots kept in the `storage_entries` table, one session per call."""

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def read(self, key: str) -> Optional[str]:
        with self.session_factory() as db:
            record = db.get(StorageEntry, key)
            return record.value if record else None

    def write(self, key: str, value: str) -> None:
        with self.session_factory() as db:
            record = db.get(StorageEntry, key)
            if record:
                record.value = value
            else:
                db.add(StorageEntry(key=key, value=value))
            db.commit()
