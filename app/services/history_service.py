# /app/services/history_service.py

import json
import logging
from datetime import datetime, timezone
from typing import List, Optional

from pydantic import ValidationError

from .database_helpers.storage_repository import BaseStorageRepository
from ..models.history_model import HistoryEntry
from ..models.note_model import GeneratedContent

logger = logging.getLogger(__name__)

HISTORY_STORAGE_KEY = "intellinote-ai-history"


# --- HELPER FUNCTION ---
def create_entry(label: str, content: GeneratedContent, now: Optional[datetime] = None) -> HistoryEntry:
    """
    Builds a history entry whose id is the creation time in epoch milliseconds.
    Two entries created in the same millisecond would collide; that is accepted.
    """
    created_at = now or datetime.now(timezone.utc)
    return HistoryEntry(
        id=str(int(created_at.timestamp() * 1000)),
        label=label,
        content=content,
        created_at=created_at,
    )


class HistoryStore:
    """
    The ordered, most-recent-first list of past generations. Every mutation
    overwrites the full list in storage. Storage failures are logged and never
    reach the caller.
    """

    def __init__(self, storage: BaseStorageRepository, key: str = HISTORY_STORAGE_KEY):
        self.storage = storage
        self.key = key
        self._entries: List[HistoryEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> List[HistoryEntry]:
        return list(self._entries)

    def get(self, entry_id: str) -> Optional[HistoryEntry]:
        return next((entry for entry in self._entries if entry.id == entry_id), None)

    def load(self) -> List[HistoryEntry]:
        """Reads the persisted list. Missing or corrupt storage yields an empty list."""
        try:
            raw = self.storage.read(self.key)
            records = json.loads(raw) if raw else []
            if not isinstance(records, list):
                raise ValueError(f"expected a JSON array, got {type(records).__name__}")
        except Exception as e:
            logger.error("Failed to load history from storage: %s", e)
            self._entries = []
            return self.entries

        loaded = []
        for record in records:
            try:
                loaded.append(HistoryEntry.model_validate(record))
            except ValidationError as e:
                record_id = record.get("id", "N/A") if isinstance(record, dict) else "N/A"
                logger.warning("Skipping corrupted history record: %s. Error: %s", record_id, e)
        self._entries = loaded
        return self.entries

    def insert(self, entry: HistoryEntry) -> None:
        self._entries = [entry, *self._entries]
        self._persist()

    def remove(self, entry_id: str) -> bool:
        """Removes every entry with this id. An unknown id is a no-op."""
        remaining = [entry for entry in self._entries if entry.id != entry_id]
        was_removed = len(remaining) != len(self._entries)
        self._entries = remaining
        self._persist()
        return was_removed

    def clear(self) -> None:
        self._entries = []
        self._persist()

    def _persist(self) -> None:
        try:
            serialized = json.dumps([entry.model_dump(mode="json") for entry in self._entries])
            self.storage.write(self.key, serialized)
        except Exception as e:
            logger.error("Failed to save history to storage: %s", e)
