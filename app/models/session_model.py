# /app/models/session_model.py

from pydantic import BaseModel, model_validator
from typing import Optional
from enum import Enum

from .note_model import GeneratedContent


class SessionStatus(str, Enum):
    IDLE = "idle"
    GENERATING = "generating"
    DISPLAYING = "displaying"
    FAILED = "failed"


class SessionState(BaseModel):
    """
    The one state value owned by the SessionController. Use the classmethod
    constructors; the validator rejects combinations such as an error while
    displaying, or content while generating.
    """
    status: SessionStatus = SessionStatus.IDLE
    content: Optional[GeneratedContent] = None
    selected_id: Optional[str] = None
    error: Optional[str] = None
    error_code: Optional[str] = None

    @model_validator(mode="after")
    def _check_consistency(self) -> "SessionState":
        if self.status == SessionStatus.FAILED:
            if not self.error:
                raise ValueError("A failed session must carry an error message.")
        elif self.error is not None or self.error_code is not None:
            raise ValueError(f"A '{self.status.value}' session cannot carry an error.")

        if self.status == SessionStatus.DISPLAYING:
            if self.content is None:
                raise ValueError("A displaying session must carry content.")
        elif self.content is not None or self.selected_id is not None:
            raise ValueError(f"A '{self.status.value}' session cannot carry content.")
        return self

    @classmethod
    def idle(cls) -> "SessionState":
        return cls(status=SessionStatus.IDLE)

    @classmethod
    def generating(cls) -> "SessionState":
        return cls(status=SessionStatus.GENERATING)

    @classmethod
    def displaying(cls, content: GeneratedContent, selected_id: Optional[str] = None) -> "SessionState":
        return cls(status=SessionStatus.DISPLAYING, content=content, selected_id=selected_id)

    @classmethod
    def failed(cls, error: str, error_code: Optional[str] = None) -> "SessionState":
        return cls(status=SessionStatus.FAILED, error=error, error_code=error_code)
