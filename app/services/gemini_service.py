# /app/services/gemini_service.py

import os
import json
import base64
import logging
from typing import Any, List, Optional

from dotenv import load_dotenv
from pydantic import ValidationError
import google.generativeai as genai
from google.generativeai.types import GenerationConfig
from google.api_core import exceptions as google_exceptions

# --- Local Imports ---
from ..models.note_model import GeneratedContent, InputKind, InputPayload
from . import prompt_library
from .errors import ConfigurationError, InvalidCredentialError, UpstreamError

logger = logging.getLogger(__name__)

# --- CONFIGURATION ---
# The key is read on every call, never at import, so a missing key fails the
# generation that needs it rather than the server start-up.
load_dotenv()
API_KEY_ENV_VAR = "GOOGLE_API_KEY"
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")

MISSING_API_KEY_MESSAGE = (
    f"{API_KEY_ENV_VAR} is not configured. FIX: add a variable named '{API_KEY_ENV_VAR}' "
    "to the .env file in the project root (or export it in the server environment), "
    "then restart the server."
)
INVALID_API_KEY_MESSAGE = (
    f"Failed to process content: The provided API Key is not valid. Please check {API_KEY_ENV_VAR}."
)
UPSTREAM_FAILURE_MESSAGE = (
    "Failed to process content with the Gemini API. Please check your network and API configuration."
)


# --- HELPER FUNCTIONS ---

def _require_api_key() -> str:
    api_key = (os.getenv(API_KEY_ENV_VAR) or "").strip()
    if not api_key:
        raise ConfigurationError(MISSING_API_KEY_MESSAGE)
    return api_key


def build_request_parts(payload: InputPayload) -> List[Any]:
    """
    Builds the two request parts: the content (inline text, or a tagged blob
    for files) followed by the kind-specific instructions.
    """
    prompt = prompt_library.build_note_prompt(payload.kind)
    if payload.kind == InputKind.TEXT:
        return [payload.content, prompt]
    blob = {
        "mime_type": payload.media_type,
        "data": base64.b64decode(payload.content),
    }
    return [blob, prompt]


def _extract_text(response: Any) -> Optional[str]:
    """Returns the response text, or None when the model produced nothing."""
    try:
        if not response.parts:
            return None
        text = response.text
    except ValueError:
        # Raised by the SDK's quick accessors when there is no candidate.
        return None
    text = (text or "").strip()
    return text or None


def _is_invalid_key_error(error: Exception) -> bool:
    if isinstance(error, (google_exceptions.Unauthenticated, google_exceptions.PermissionDenied)):
        return True
    return "API key not valid" in str(error)


def parse_generated_content(json_text: str) -> GeneratedContent:
    """
    Parses the model's JSON into GeneratedContent. Only the shape is coerced;
    answers are not checked against options and list lengths are not enforced.
    """
    try:
        data = json.loads(json_text)
    except json.JSONDecodeError as e:
        logger.error("ERROR parsing Gemini response as JSON: %s", e)
        raise UpstreamError(f"The AI returned a response that is not valid JSON. Error: {e}") from e
    try:
        return GeneratedContent.model_validate(data)
    except ValidationError as e:
        logger.error("ERROR coercing Gemini response into GeneratedContent: %s", e)
        raise UpstreamError("The AI returned JSON that does not match the expected structure.") from e


# --- CORE GENERATIVE FUNCTION ---

async def generate_notes(payload: InputPayload) -> Optional[GeneratedContent]:
    """
    Sends one structured-output request to Gemini for the given payload.

    Returns:
        The parsed GeneratedContent, or None if the model returned an empty
        response. No retries, no streaming.

    Raises:
        ConfigurationError: the API key is missing (checked before any network call).
        InvalidCredentialError: Gemini rejected the API key.
        UpstreamError: any other failure, including unparseable output.
    """
    api_key = _require_api_key()
    genai.configure(api_key=api_key)

    try:
        model = genai.GenerativeModel(GEMINI_MODEL)
        config = GenerationConfig(
            response_mime_type="application/json",
            response_schema=prompt_library.RESPONSE_SCHEMA,
        )
        response = await model.generate_content_async(
            build_request_parts(payload),
            generation_config=config,
        )
        json_text = _extract_text(response)
    except Exception as e:
        logger.error("ERROR in generate_notes with Gemini API: %s", e)
        if _is_invalid_key_error(e):
            raise InvalidCredentialError(INVALID_API_KEY_MESSAGE) from e
        raise UpstreamError(UPSTREAM_FAILURE_MESSAGE) from e

    if json_text is None:
        logger.warning("Gemini returned an empty response for '%s'.", payload.name)
        return None
    return parse_generated_content(json_text)
