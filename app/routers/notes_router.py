# /app/routers/notes_router.py

from fastapi import APIRouter, Depends, HTTPException, status, UploadFile, File

from ..models import note_model, session_model
from ..services import errors
from ..services.session_service import SessionController, get_session_controller

router = APIRouter()

# Failed generations are reported with the status their error type implies.
FAILURE_STATUS_CODES = {
    errors.UnsupportedMediaError.__name__: status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
    errors.EmptyInputError.__name__: 422,
    errors.ConfigurationError.__name__: status.HTTP_500_INTERNAL_SERVER_ERROR,
    errors.EmptyResponseError.__name__: status.HTTP_502_BAD_GATEWAY,
    errors.InvalidCredentialError.__name__: status.HTTP_502_BAD_GATEWAY,
    errors.UpstreamError.__name__: status.HTTP_502_BAD_GATEWAY,
}


def _ensure_not_generating(session: SessionController) -> None:
    """Only one generation may be in flight; overlapping submissions are refused."""
    if session.state.status == session_model.SessionStatus.GENERATING:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="A generation is already in progress. Please wait for it to finish.",
        )


def _raise_for_failure(state: session_model.SessionState) -> session_model.SessionState:
    if state.status == session_model.SessionStatus.FAILED:
        status_code = FAILURE_STATUS_CODES.get(state.error_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        raise HTTPException(status_code=status_code, detail=state.error)
    return state


@router.post(
    "/generate/text",
    response_model=session_model.SessionState,
    summary="Generate Notes from Text",
    description="Generates notes, questions and flashcards from pasted text."
)
async def generate_notes_from_text(
    request: note_model.RawText,
    session: SessionController = Depends(get_session_controller)
):
    _ensure_not_generating(session)
    state = await session.submit(request)
    return _raise_for_failure(state)


@router.post(
    "/generate/upload",
    response_model=session_model.SessionState,
    summary="Generate Notes from an Uploaded File",
    description="Accepts text, markdown, PNG, JPEG, audio, PDF and PowerPoint uploads."
)
async def generate_notes_from_upload(
    source_file: UploadFile = File(...),
    session: SessionController = Depends(get_session_controller)
):
    _ensure_not_generating(session)
    state = await session.submit(source_file)
    return _raise_for_failure(state)


@router.get(
    "/session",
    response_model=session_model.SessionState,
    summary="Get the Current Session State"
)
def get_session_state(session: SessionController = Depends(get_session_controller)):
    return session.state
