"""
Record listing DTOs
"""

from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional

from leaddesk.core.records.registry import StoreKind


class StoreResponse(BaseModel):
    """One registered store"""

    key: str
    label: str
    kind: StoreKind
    fields: List[str]
    required_fields: List[str]


class FilterRecordsDto(BaseModel):
    """DTO for filtering a store listing"""

    search: Optional[str] = Field(None, description="Case-insensitive text search")
    status: Optional[str] = Field(None, description="Exact match on the status field")
    page: int = Field(1, ge=1)
    page_size: int = Field(25, ge=1, le=200)


class PaginatedRecordsResponse(BaseModel):
    items: List[Dict[str, Any]]
    total: int
    page: int
    page_size: int
    total_pages: int
    has_more: bool


class AcknowledgmentResponse(BaseModel):
    level: str
    title: str
    message: str


class DeleteRecordResponse(BaseModel):
    deleted: bool
    acknowledgments: List[AcknowledgmentResponse] = []
