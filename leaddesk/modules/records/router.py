"""
Records Router - browse registered stores and delete records.
"""

from typing import Any, Dict, List, Optional
from fastapi import APIRouter, Depends, Query

from .service import RecordsService
from .schemas import DeleteRecordResponse, FilterRecordsDto, PaginatedRecordsResponse, StoreResponse

router = APIRouter(prefix="/stores", tags=["records"])


@router.get("", response_model=List[StoreResponse])
def get_all_stores():
    """List every registered store with its fields"""
    return RecordsService.list_stores()


@router.get("/{store_key}/records", response_model=PaginatedRecordsResponse)
def get_records(
    store_key: str,
    filters: FilterRecordsDto = Depends(),
):
    """
    List a store's records.

    Query parameters:
    - search: Case-insensitive text search over the store's fields
    - status: Exact match on the record's status
    - page, page_size: Pagination

    Examples:
    - GET /stores/billProfiles/records?search=acme
    - GET /stores/taskProfiles/records?status=Completed&page=2
    """
    return RecordsService.find_all(store_key, filters)


@router.get("/{store_key}/records/{record_id}", response_model=Dict[str, Any])
def get_record(store_key: str, record_id: str):
    """Get one record by id"""
    return RecordsService.find_one(store_key, record_id)


@router.delete("/{store_key}/records/{record_id}", response_model=DeleteRecordResponse)
def delete_record(
    store_key: str,
    record_id: str,
    confirm: bool = Query(False, description="Operator's answer to the delete prompt"),
):
    """Delete a record; nothing changes unless confirm=true"""
    return RecordsService.remove(store_key, record_id, confirm)


@router.get("/{store_key}/profile", response_model=Optional[Dict[str, Any]])
def get_profile(store_key: str):
    """Get the stored object of a profile store, or null when never saved"""
    return RecordsService.get_profile(store_key)
