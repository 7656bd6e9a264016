# /app/services/file_normalizer.py

import base64
import logging
from typing import Optional, Union

from fastapi import UploadFile

from ..models.note_model import InputKind, InputPayload, RawText
from .errors import EmptyInputError, UnsupportedMediaError

logger = logging.getLogger(__name__)

TEXT_INPUT_NAME = "Text Input"
DEFAULT_FILE_NAME = "Uploaded File"

ALLOWED_MIME_TYPES = frozenset({
    "text/plain",
    "text/markdown",
    "image/png",
    "image/jpeg",
    "audio/mpeg",
    "audio/wav",
    "audio/mp3",
    "application/pdf",
    "application/vnd.ms-powerpoint",  # .ppt
    "application/vnd.openxmlformats-officedocument.presentationml.presentation",  # .pptx
})


# --- HELPER FUNCTIONS ---

def _clean_media_type(content_type: Optional[str]) -> str:
    """Drops parameters such as '; charset=utf-8' and lower-cases the type."""
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


def resolve_kind(media_type: str) -> InputKind:
    """Maps an accepted media type onto the kind of content it carries."""
    if media_type.startswith("image/"):
        return InputKind.IMAGE
    if media_type.startswith("audio/"):
        return InputKind.AUDIO
    if media_type == "application/pdf":
        return InputKind.PDF
    if "powerpoint" in media_type or "presentation" in media_type:
        return InputKind.SLIDESHOW
    return InputKind.TEXT


# --- PUBLIC NORMALIZERS ---

def normalize_text(text: Optional[str]) -> InputPayload:
    stripped = (text or "").strip()
    if not stripped:
        raise EmptyInputError("Please provide text or upload a file.")
    return InputPayload(name=TEXT_INPUT_NAME, kind=InputKind.TEXT, content=stripped)


async def normalize_file(source_file: UploadFile) -> InputPayload:
    """
    Validates the upload's media type before touching its body, then reads the
    bytes. Plain-text and markdown files become inline text; everything else is
    base64-encoded and keeps its media type.
    """
    name = source_file.filename or DEFAULT_FILE_NAME
    media_type = _clean_media_type(source_file.content_type)
    if media_type not in ALLOWED_MIME_TYPES:
        raise UnsupportedMediaError(
            f"Unsupported file type '{media_type or 'unknown'}'. "
            "Please use text, png, jpg, audio, pdf, or ppt."
        )

    file_bytes = await source_file.read()
    if not file_bytes:
        raise EmptyInputError(f"The uploaded file '{name}' is empty.")

    kind = resolve_kind(media_type)
    if kind == InputKind.TEXT:
        text = file_bytes.decode("utf-8", errors="replace").strip()
        if not text:
            raise EmptyInputError(f"The uploaded file '{name}' contains no text.")
        return InputPayload(name=name, kind=kind, content=text)

    logger.info("Normalized upload '%s' as %s (%d bytes).", name, kind.value, len(file_bytes))
    return InputPayload(
        name=name,
        kind=kind,
        content=base64.b64encode(file_bytes).decode("ascii"),
        media_type=media_type,
    )


async def normalize(source: Union[RawText, UploadFile, None]) -> InputPayload:
    """Converts raw text or an uploaded file into a canonical InputPayload."""
    if source is None:
        raise EmptyInputError("Please provide text or upload a file.")
    if isinstance(source, RawText):
        return normalize_text(source.text)
    return await normalize_file(source)
