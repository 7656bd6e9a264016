# /app/models/note_model.py

# --- Core Imports ---
from pydantic import BaseModel, Field, ConfigDict, model_validator
from typing import List, Optional
from enum import Enum


# --- Enumerations ---
class InputKind(str, Enum):
    TEXT = "text"
    IMAGE = "image"
    AUDIO = "audio"
    PDF = "pdf"
    SLIDESHOW = "slideshow"


# --- Input Models ---
class RawText(BaseModel):
    """Request body for text-based generation."""
    text: str = Field(..., description="Free text pasted by the user.")


class InputPayload(BaseModel):
    """
    The normalized, transmission-ready form of a user's input.
    For `text` the content is the raw text; for every other kind it is the
    base64 encoding of the file's bytes and `media_type` is required.
    """
    name: str
    kind: InputKind
    content: str
    media_type: Optional[str] = None

    @model_validator(mode="after")
    def _check_media_type(self) -> "InputPayload":
        if not self.content:
            raise ValueError("InputPayload content must not be empty.")
        if self.kind == InputKind.TEXT and self.media_type is not None:
            raise ValueError("Text payloads must not carry a media type.")
        if self.kind != InputKind.TEXT and not self.media_type:
            raise ValueError(f"A media type is required for '{self.kind.value}' payloads.")
        return self


# --- Generated Content Models ---
# Every field is optional: the model is asked for a strict schema, but what
# comes back is passed through permissively and consumers handle gaps.
class GeneratedNotes(BaseModel):
    model_config = ConfigDict(extra="allow")

    summary: Optional[str] = None


class GeneratedQuestion(BaseModel):
    model_config = ConfigDict(extra="allow")

    question: Optional[str] = None
    options: List[str] = Field(default_factory=list)
    answer: Optional[str] = None


class GeneratedFlashcard(BaseModel):
    model_config = ConfigDict(extra="allow")

    front: Optional[str] = None
    back: Optional[str] = None


class GeneratedContent(BaseModel):
    """The structured study material produced by one generation."""
    model_config = ConfigDict(extra="allow")

    notes: Optional[GeneratedNotes] = None
    questions: List[GeneratedQuestion] = Field(default_factory=list)
    flashcards: List[GeneratedFlashcard] = Field(default_factory=list)
