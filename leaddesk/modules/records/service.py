"""
RecordsService - listing, lookup and confirmed deletion of stored records.
"""

import asyncio
from dataclasses import asdict
from typing import List, Optional

from leaddesk.core.config import config
from leaddesk.core.exceptions import ConflictError, NotFoundError
from leaddesk.core.records import (
    MemoryNotifier,
    ProfileStore,
    RecordStore,
    StaticConfirmationGate,
    StoreDefinition,
    StoreKind,
    ViewProjection,
    delete_record,
)
from leaddesk.core.records.store import Record
from leaddesk.core.storage import get_storage
from leaddesk.modules.stores import registry
from .schemas import DeleteRecordResponse, FilterRecordsDto, StoreResponse


def get_record_store() -> RecordStore:
    return RecordStore(get_storage(), config.id_strategy)


def get_profile_store() -> ProfileStore:
    return ProfileStore(get_storage())


def get_list_definition(store_key: str) -> StoreDefinition:
    """
    Raises:
        NotFoundError: If the store is not registered
        ConflictError: If the store holds a single profile, not a record list
    """
    definition = registry.get(store_key)
    if definition.kind != StoreKind.LIST:
        raise ConflictError(f"Store '{store_key}' holds a single profile, not records")
    return definition


class RecordsService:
    """Read paths and deletes over the registered stores."""

    @staticmethod
    def list_stores() -> List[StoreResponse]:
        stores = []
        for definition in registry.all():
            fields = definition.schema.model_fields
            stores.append(
                StoreResponse(
                    key=definition.key,
                    label=definition.label,
                    kind=definition.kind,
                    fields=[field.alias or name for name, field in fields.items()],
                    required_fields=[field.alias or name for name, field in fields.items() if field.is_required()],
                )
            )
        return stores

    @staticmethod
    def find_all(store_key: str, filters: Optional[FilterRecordsDto] = None) -> dict:
        """
        List a store's records, filtered and paginated.
        Always re-read from the medium.
        """
        definition = get_list_definition(store_key)
        filters = filters or FilterRecordsDto()
        return ViewProjection(get_record_store()).query(
            store_key,
            search=filters.search,
            status=filters.status,
            page=filters.page,
            page_size=filters.page_size,
            search_fields=definition.search_fields,
        )

    @staticmethod
    def find_one(store_key: str, record_id: str) -> Record:
        """
        Raises:
            NotFoundError: If no record has record_id
        """
        get_list_definition(store_key)
        record = get_record_store().get(store_key, record_id)
        if record is None:
            raise NotFoundError("Record", record_id)
        return record

    @staticmethod
    def get_profile(store_key: str) -> Optional[Record]:
        definition = registry.get(store_key)
        if definition.kind != StoreKind.PROFILE:
            raise ConflictError(f"Store '{store_key}' holds records, not a single profile")
        return get_profile_store().load(store_key)

    @staticmethod
    def remove(store_key: str, record_id: str, confirm: bool) -> DeleteRecordResponse:
        """
        Delete a record once the operator has confirmed.

        Deleting an id that does not exist succeeds without changing the store.
        Runs in a worker thread (no running event loop), where the answer is
        already known from the request.
        """
        definition = get_list_definition(store_key)
        notifier = MemoryNotifier()
        deleted = asyncio.run(delete_record(
            get_record_store(),
            definition,
            record_id,
            StaticConfirmationGate(confirm),
            notifier,
        ))
        return DeleteRecordResponse(deleted=deleted, acknowledgments=[asdict(ack) for ack in notifier.drain()])
