# /tests/conftest.py

import pytest
from unittest.mock import AsyncMock, MagicMock

from app.models.note_model import GeneratedContent
from app.services.database_helpers.storage_repository import FileStorageRepository
from app.services.history_service import HistoryStore


@pytest.fixture
def sample_content():
    """A complete, well-formed generation result."""
    return GeneratedContent.model_validate({
        "notes": {"summary": "## Photosynthesis\n- Plants turn light into sugar."},
        "questions": [
            {
                "question": "What do plants produce?",
                "options": ["Sugar", "Salt", "Iron", "Oil"],
                "answer": "Sugar",
            }
        ],
        "flashcards": [{"front": "Chlorophyll", "back": "The green pigment that absorbs light."}],
    })


@pytest.fixture
def file_storage(tmp_path):
    """A file-backed storage repository isolated in a temporary directory."""
    return FileStorageRepository(str(tmp_path / "data"))


@pytest.fixture
def history_store(file_storage):
    store = HistoryStore(file_storage)
    store.load()
    return store


@pytest.fixture
def make_upload():
    """Builds a stand-in for a FastAPI UploadFile with an async read()."""
    def _make(filename, content_type, data=b""):
        upload = MagicMock()
        upload.filename = filename
        upload.content_type = content_type
        upload.read = AsyncMock(return_value=data)
        return upload
    return _make
