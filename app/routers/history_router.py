# /app/routers/history_router.py

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse

from ..models import history_model, session_model
from ..services import export_service
from ..services.errors import HistoryEntryNotFoundError
from ..services.session_service import SessionController, get_session_controller

router = APIRouter()


@router.get(
    "", # Maps to /api/history
    response_model=history_model.HistoryResponse,
    summary="Get Generation History"
)
def get_history(session: SessionController = Depends(get_session_controller)):
    """Returns every saved generation, most recent first."""
    entries = session.history.entries
    return history_model.HistoryResponse(results=entries, total=len(entries))


@router.delete(
    "",
    response_model=session_model.SessionState,
    summary="Clear the Generation History",
    description="Removes every history entry. The currently displayed content is left as it is."
)
def clear_history(session: SessionController = Depends(get_session_controller)):
    return session.clear_history()


@router.post(
    "/{entry_id}/select",
    response_model=session_model.SessionState,
    summary="Display a Past Generation",
    responses={404: {"description": "History entry not found"}}
)
def select_history_entry(
    entry_id: str,
    session: SessionController = Depends(get_session_controller)
):
    try:
        return session.select_history(entry_id)
    except HistoryEntryNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete(
    "/{entry_id}",
    response_model=session_model.SessionState,
    summary="Delete a Generation Record",
    description="Deletes one history entry. Deleting an unknown ID is a no-op."
)
def delete_history_entry(
    entry_id: str,
    session: SessionController = Depends(get_session_controller)
):
    return session.delete_history(entry_id)


@router.get(
    "/{entry_id}/export",
    response_class=PlainTextResponse,
    summary="Export a Generation as Markdown",
    responses={404: {"description": "History entry not found"}}
)
def export_history_entry(
    entry_id: str,
    session: SessionController = Depends(get_session_controller)
):
    entry = session.history.get(entry_id)
    if entry is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"History entry with ID {entry_id} not found.",
        )
    markdown = export_service.render_markdown(entry.content, title=entry.label)
    return PlainTextResponse(markdown, media_type="text/markdown")


@router.get(
    "/{entry_id}/questions/{question_number}",
    response_class=PlainTextResponse,
    summary="Copy a Single Question",
    description="Returns one question (numbered from 1) as the plain-text block used for copying.",
    responses={404: {"description": "History entry or question not found"}}
)
def copy_history_question(
    entry_id: str,
    question_number: int,
    session: SessionController = Depends(get_session_controller)
):
    entry = session.history.get(entry_id)
    if entry is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"History entry with ID {entry_id} not found.",
        )
    if not 1 <= question_number <= len(entry.content.questions):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Question {question_number} not found in history entry {entry_id}.",
        )
    question = entry.content.questions[question_number - 1]
    return PlainTextResponse(export_service.format_question(question))
