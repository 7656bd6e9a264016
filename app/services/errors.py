# /app/services/errors.py

"""
The error taxonomy shared by the normalizer, the Gemini client and the
session controller. Every error carries a user-facing message; the controller
surfaces `str(exc)` verbatim.
"""


class NoteGenerationError(Exception):
    """Base class for every error raised by the note-generation pipeline."""


# --- Input errors (recoverable, the user fixes the input) ---

class UnsupportedMediaError(NoteGenerationError):
    """An uploaded file's media type is not in the accepted set."""


class EmptyInputError(NoteGenerationError):
    """No text and no file, or the supplied content is empty."""


# --- Generation errors ---

class ConfigurationError(NoteGenerationError):
    """The API credential is missing. Requires operator action."""


class EmptyResponseError(NoteGenerationError):
    """The model answered successfully but produced no text."""


class InvalidCredentialError(NoteGenerationError):
    """The remote service rejected the API credential."""


class UpstreamError(NoteGenerationError):
    """Any other remote failure. The original exception is chained as __cause__."""


# --- History errors ---

class HistoryEntryNotFoundError(NoteGenerationError):
    """No history entry exists with the requested id."""
