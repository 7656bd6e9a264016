# /app/services/session_service.py

import logging
from typing import Awaitable, Callable, Optional, Union

from fastapi import Request, UploadFile

from ..models.note_model import GeneratedContent, InputPayload, RawText
from ..models.session_model import SessionState
from . import file_normalizer, gemini_service, history_service
from .errors import EmptyResponseError, HistoryEntryNotFoundError
from .history_service import HistoryStore

logger = logging.getLogger(__name__)

EMPTY_RESULT_MESSAGE = "Failed to generate content. The API returned an empty result."
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred."

NoteGenerator = Callable[[InputPayload], Awaitable[Optional[GeneratedContent]]]


class SessionController:
    """
    Orchestrates one generation at a time and owns the single session state.
    Resubmission while a generation is in flight is not coordinated here.
    """

    def __init__(self, history: HistoryStore, generator: Optional[NoteGenerator] = None):
        self.history = history
        self.generator = generator or gemini_service.generate_notes
        self._state = SessionState.idle()

    @property
    def state(self) -> SessionState:
        return self._state

    async def submit(self, source: Union[RawText, UploadFile, None]) -> SessionState:
        # Prior output and error are cleared before the first await.
        self._state = SessionState.generating()

        try:
            payload = await file_normalizer.normalize(source)
            content = await self.generator(payload)
        except Exception as e:
            logger.error("ERROR during note generation: %s", e)
            self._state = SessionState.failed(str(e) or UNKNOWN_ERROR_MESSAGE, type(e).__name__)
            return self._state

        if content is None:
            self._state = SessionState.failed(EMPTY_RESULT_MESSAGE, EmptyResponseError.__name__)
            return self._state

        entry = history_service.create_entry(label=payload.name, content=content)
        self.history.insert(entry)
        self._state = SessionState.displaying(content, selected_id=entry.id)
        logger.info("Generated notes for '%s' (history id %s).", payload.name, entry.id)
        return self._state

    def select_history(self, entry_id: str) -> SessionState:
        entry = self.history.get(entry_id)
        if entry is None:
            raise HistoryEntryNotFoundError(f"History entry with ID {entry_id} not found.")
        self._state = SessionState.displaying(entry.content, selected_id=entry.id)
        return self._state

    def delete_history(self, entry_id: str) -> SessionState:
        self.history.remove(entry_id)
        if self._state.selected_id == entry_id:
            self._state = SessionState.idle()
        return self._state

    def clear_history(self) -> SessionState:
        self.history.clear()
        return self._state


# --- DEPENDENCY PROVIDER ---
def get_session_controller(request: Request) -> SessionController:
    """FastAPI dependency returning the controller created at application start-up."""
    return request.app.state.session_controller
