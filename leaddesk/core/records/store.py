"""
Record stores over the key-value medium.

RecordStore keeps a list of records as one JSON array per store key.
ProfileStore keeps a single JSON object per key for one-off detail forms.
Both take the store key on every call, so one instance serves every store.
"""

import json
import logging
from typing import Any, Dict, List, Optional, Sequence

from leaddesk.core.storage import StorageBackend
from leaddesk.core.utils import unique_record_id

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


def _has_valid_id(record: Record) -> bool:
    record_id = record.get("id")
    return isinstance(record_id, str) and bool(record_id)


class RecordStore:
    """
    Synchronous CRUD over named record collections.

    Every record carries a string "id" unique within its store. load() never
    raises for bad stored data; save_all() always surfaces write failures.
    """

    def __init__(self, storage: StorageBackend, id_strategy: Optional[str] = None):
        self.storage = storage
        self.id_strategy = id_strategy

    def load(self, store_key: str) -> List[Record]:
        """
        Read the full collection.

        Returns an empty list when the key is absent, the value is not valid
        JSON, or it is not a JSON array. Array entries that are not objects,
        or whose id is not a non-empty string, are dropped.
        """
        raw = self.storage.get_item(store_key)
        if raw is None:
            return []

        try:
            data = json.loads(raw)
        except (json.JSONDecodeError, TypeError) as e:
            logger.warning(f"Discarding unparseable data in store '{store_key}': {e}")
            return []

        if not isinstance(data, list):
            logger.warning(f"Store '{store_key}' does not hold a JSON array, treating as empty")
            return []

        records = [item for item in data if isinstance(item, dict) and _has_valid_id(item)]
        if len(records) != len(data):
            logger.warning(
                f"Dropped {len(data) - len(records)} malformed entries from store '{store_key}'"
            )
        return records

    def save_all(self, store_key: str, records: Sequence[Record]) -> None:
        """
        Replace the stored collection.

        Raises:
            StorageError: If the medium rejects the write
        """
        self.storage.set_item(store_key, json.dumps(list(records), ensure_ascii=False))

    def get(self, store_key: str, record_id: str) -> Optional[Record]:
        for record in self.load(store_key):
            if record.get("id") == record_id:
                return record
        return None

    def upsert(
        self,
        store_key: str,
        record: Record,
        match_id: Optional[str] = None,
    ) -> List[Record]:
        """
        Insert or replace a record and return the resulting collection.

        With match_id set and present, the matching record is replaced in
        place (same position, id forced to match_id). Otherwise the record is
        appended: it keeps match_id as its id when one was given, keeps its
        own id when that id is free, and gets a fresh id in every other case.
        The caller persists the result with save_all().
        """
        records = self.load(store_key)
        existing_ids = {item.get("id") for item in records}

        if match_id is not None and match_id in existing_ids:
            replacement = {**record, "id": match_id}
            return [replacement if item.get("id") == match_id else item for item in records]

        if match_id is not None:
            record_id = match_id
        elif _has_valid_id(record) and record["id"] not in existing_ids:
            record_id = record["id"]
        else:
            record_id = unique_record_id(existing_ids, self.id_strategy)

        return records + [{**record, "id": record_id}]

    def remove_by_id(self, store_key: str, record_id: str) -> List[Record]:
        """Return the collection without record_id; unchanged if it is absent."""
        return [item for item in self.load(store_key) if item.get("id") != record_id]


class ProfileStore:
    """Single-object stores (applicant details, lead details, ...)."""

    def __init__(self, storage: StorageBackend):
        self.storage = storage

    def load(self, store_key: str) -> Optional[Record]:
        """Stored object, or None when absent, unparseable or not an object."""
        raw = self.storage.get_item(store_key)
        if raw is None:
            return None

        try:
            data = json.loads(raw)
        except (json.JSONDecodeError, TypeError) as e:
            logger.warning(f"Discarding unparseable profile '{store_key}': {e}")
            return None

        return data if isinstance(data, dict) else None

    def save(self, store_key: str, profile: Record) -> None:
        """
        Raises:
            StorageError: If the medium rejects the write
        """
        self.storage.set_item(store_key, json.dumps(profile, ensure_ascii=False))
