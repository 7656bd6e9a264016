# /tests/test_gemini_service.py

import base64
import json
import pytest
from unittest.mock import AsyncMock, MagicMock
from google.api_core import exceptions as google_exceptions

from app.models.note_model import GeneratedContent, InputKind, InputPayload
from app.services import gemini_service, prompt_library
from app.services.errors import ConfigurationError, InvalidCredentialError, UpstreamError


# --- Test Data Fixtures ---

@pytest.fixture
def text_payload():
    return InputPayload(name="Text Input", kind=InputKind.TEXT, content="The mitochondria is the powerhouse of the cell.")


@pytest.fixture
def pdf_payload():
    return InputPayload(
        name="lecture.pdf",
        kind=InputKind.PDF,
        content=base64.b64encode(b"%PDF-1.7 fake").decode("ascii"),
        media_type="application/pdf",
    )


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setenv("GOOGLE_API_KEY", "test-key")


def _response(text, parts=None):
    response = MagicMock()
    response.parts = parts if parts is not None else [MagicMock()]
    response.text = text
    return response


@pytest.fixture
def mock_model(mocker, api_key):
    """Patches the Gemini SDK so no network call is made."""
    mocker.patch("app.services.gemini_service.genai.configure")
    model = MagicMock()
    model.generate_content_async = AsyncMock()
    mocker.patch("app.services.gemini_service.genai.GenerativeModel", return_value=model)
    return model


# --- Prompt & Request Construction ---

def test_each_kind_has_its_own_prompt():
    prompts = {kind: prompt_library.build_note_prompt(kind) for kind in InputKind}
    assert len(set(prompts.values())) == len(InputKind)
    assert "perform OCR" in prompts[InputKind.IMAGE]
    assert "PDF document" in prompts[InputKind.PDF]
    for prompt in prompts.values():
        assert "exactly 4 options" in prompt


def test_text_request_parts_are_inline(text_payload):
    parts = gemini_service.build_request_parts(text_payload)
    assert parts[0] == text_payload.content
    assert parts[1] == prompt_library.build_note_prompt(InputKind.TEXT)


def test_file_request_parts_carry_a_tagged_blob(pdf_payload):
    blob, prompt = gemini_service.build_request_parts(pdf_payload)
    assert blob == {"mime_type": "application/pdf", "data": b"%PDF-1.7 fake"}
    assert prompt == prompt_library.build_note_prompt(InputKind.PDF)


def test_response_schema_requires_all_three_sections():
    schema = prompt_library.RESPONSE_SCHEMA
    assert schema["required"] == ["notes", "questions", "flashcards"]
    assert schema["properties"]["notes"]["required"] == ["summary"]
    assert schema["properties"]["questions"]["items"]["required"] == ["question", "options", "answer"]
    assert schema["properties"]["flashcards"]["items"]["required"] == ["front", "back"]


# --- generate_notes ---

@pytest.mark.asyncio
async def test_missing_api_key_fails_before_any_network_call(mocker, monkeypatch, text_payload):
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    model_cls = mocker.patch("app.services.gemini_service.genai.GenerativeModel")

    with pytest.raises(ConfigurationError, match="GOOGLE_API_KEY"):
        await gemini_service.generate_notes(text_payload)

    model_cls.assert_not_called()


@pytest.mark.asyncio
async def test_successful_generation_is_parsed(mock_model, text_payload):
    body = {
        "notes": {"summary": "Cells have organelles."},
        "questions": [{"question": "Powerhouse?", "options": ["A", "B", "C", "D"], "answer": "A"}],
        "flashcards": [{"front": "Mitochondria", "back": "Powerhouse"}],
    }
    mock_model.generate_content_async.return_value = _response(json.dumps(body))

    result = await gemini_service.generate_notes(text_payload)

    assert isinstance(result, GeneratedContent)
    assert result.notes.summary == "Cells have organelles."
    assert result.questions[0].options == ["A", "B", "C", "D"]
    assert result.flashcards[0].back == "Powerhouse"

    args, kwargs = mock_model.generate_content_async.call_args
    assert args[0][0] == text_payload.content
    config = kwargs["generation_config"]
    assert config.response_mime_type == "application/json"
    assert config.response_schema is prompt_library.RESPONSE_SCHEMA


@pytest.mark.asyncio
async def test_partial_json_is_passed_through(mock_model, text_payload):
    """A question without an answer and a missing flashcards list are tolerated."""
    body = {"notes": {"summary": "S"}, "questions": [{"question": "Q?", "options": ["x", "y"]}]}
    mock_model.generate_content_async.return_value = _response(json.dumps(body))

    result = await gemini_service.generate_notes(text_payload)

    assert result.questions[0].answer is None
    assert result.flashcards == []


@pytest.mark.asyncio
@pytest.mark.parametrize("response", [
    _response("", parts=[]),
    _response("   \n "),
])
async def test_empty_response_returns_none(mock_model, text_payload, response):
    mock_model.generate_content_async.return_value = response
    assert await gemini_service.generate_notes(text_payload) is None


@pytest.mark.asyncio
async def test_response_without_candidates_returns_none(mock_model, text_payload):
    class NoCandidates:
        @property
        def parts(self):
            raise ValueError("response.candidates is empty")

    mock_model.generate_content_async.return_value = NoCandidates()
    assert await gemini_service.generate_notes(text_payload) is None


@pytest.mark.asyncio
@pytest.mark.parametrize("error", [
    google_exceptions.InvalidArgument("API key not valid. Please pass a valid API key."),
    google_exceptions.PermissionDenied("Permission denied."),
    google_exceptions.Unauthenticated("Request had invalid authentication credentials."),
])
async def test_rejected_key_raises_invalid_credential(mock_model, text_payload, error):
    mock_model.generate_content_async.side_effect = error

    with pytest.raises(InvalidCredentialError) as exc_info:
        await gemini_service.generate_notes(text_payload)

    assert exc_info.value.__cause__ is error


@pytest.mark.asyncio
async def test_other_failures_raise_upstream_error(mock_model, text_payload):
    error = google_exceptions.ResourceExhausted("Quota exceeded.")
    mock_model.generate_content_async.side_effect = error

    with pytest.raises(UpstreamError) as exc_info:
        await gemini_service.generate_notes(text_payload)

    assert exc_info.value.__cause__ is error


@pytest.mark.asyncio
@pytest.mark.parametrize("text", ["not json at all", '{"questions": "oops"}', "[1, 2, 3]"])
async def test_unusable_json_raises_upstream_error(mock_model, text_payload, text):
    mock_model.generate_content_async.return_value = _response(text)

    with pytest.raises(UpstreamError):
        await gemini_service.generate_notes(text_payload)


@pytest.mark.asyncio
async def test_unexpected_accessor_error_raises_upstream_error(mock_model, text_payload):
    class BrokenResponse:
        @property
        def parts(self):
            raise RuntimeError("malformed candidate")

    mock_model.generate_content_async.return_value = BrokenResponse()

    with pytest.raises(UpstreamError) as exc_info:
        await gemini_service.generate_notes(text_payload)

    assert isinstance(exc_info.value.__cause__, RuntimeError)
