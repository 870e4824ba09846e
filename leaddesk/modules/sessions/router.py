"""
Sessions Router - create and edit records through validated, confirmed form sessions.
"""

from fastapi import APIRouter

from .service import SessionsService
from .schemas import ConfirmDto, OpenSessionDto, SessionResponse, UpdateFieldsDto

router = APIRouter(tags=["sessions"])


@router.post("/stores/{store_key}/sessions", response_model=SessionResponse, status_code=201)
def open_session(store_key: str, dto: OpenSessionDto):
    """
    Open a form session.

    Pass editing_id to edit an existing record; omit it to create a new one.
    Profile stores always open on their stored object.
    """
    return SessionsService.open(store_key, dto)


@router.get("/sessions/{session_id}", response_model=SessionResponse)
def get_session(session_id: str):
    return SessionsService.find_one(session_id)


@router.patch("/sessions/{session_id}/fields", response_model=SessionResponse)
def update_fields(session_id: str, dto: UpdateFieldsDto):
    """Set draft fields and return the per-field errors"""
    return SessionsService.update_fields(session_id, dto.values)


@router.post("/sessions/{session_id}/submit", response_model=SessionResponse)
def submit_session(session_id: str):
    """
    Validate the draft.

    Returns 422 with the field errors when invalid, otherwise the session
    awaiting confirmation together with the prompt to show the operator.
    """
    return SessionsService.submit(session_id)


@router.post("/sessions/{session_id}/confirm", response_model=SessionResponse)
def confirm_session(session_id: str, dto: ConfirmDto):
    """Answer the confirmation prompt; accepting saves the record"""
    return SessionsService.confirm(session_id, dto.accept)


@router.delete("/sessions/{session_id}")
def cancel_session(session_id: str):
    """Discard the draft without touching the store"""
    SessionsService.cancel(session_id)
    return {"message": "Session cancelled"}
