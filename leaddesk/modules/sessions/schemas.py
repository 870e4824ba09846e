"""
Form session DTOs
"""

from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional

from leaddesk.core.records.session import SessionState
from leaddesk.modules.records.schemas import AcknowledgmentResponse


class OpenSessionDto(BaseModel):
    """DTO for opening a create or edit session"""

    editing_id: Optional[str] = Field(None, description="Id of the record to edit; omit to create")
    verify_exists: bool = Field(False, description="Refuse to commit if the edited record was deleted meanwhile")


class UpdateFieldsDto(BaseModel):
    values: Dict[str, Any] = Field(..., description="Field name to new value")


class ConfirmDto(BaseModel):
    accept: bool


class SessionResponse(BaseModel):
    session_id: str
    store_key: str
    state: SessionState
    editing_id: Optional[str] = None
    values: Dict[str, Any]
    touched: List[str]
    errors: Dict[str, str]
    record: Optional[Dict[str, Any]] = None
    prompt: Optional[str] = None
    acknowledgments: List[AcknowledgmentResponse] = []
