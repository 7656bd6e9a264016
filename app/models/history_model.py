# /app/models/history_model.py

from pydantic import BaseModel, Field
from typing import List
from datetime import datetime

from .note_model import GeneratedContent


class HistoryEntry(BaseModel):
    """
    A single persisted generation. `label` is derived from the input's name
    ("Text Input" or the uploaded filename).
    """
    id: str
    label: str
    content: GeneratedContent
    created_at: datetime


class HistoryResponse(BaseModel):
    """
    Defines the data contract for the GET /api/history response.
    """
    results: List[HistoryEntry] = Field(default_factory=list)
    total: int
