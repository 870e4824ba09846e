"""
Key-value storage medium for the record stores.

Every store key maps to one opaque string, the same contract browser local
storage offers: get, set (replace), remove, list keys. Two backends:

1. SqlStorage: durable, one row per key in the local_storage table
2. MemoryStorage: process-local dict with an optional byte quota
"""

import logging
from typing import Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from leaddesk.core.config import config
from leaddesk.core.db.base import StorageEntry
from leaddesk.core.db.engine import get_session_factory, init_db
from leaddesk.core.exceptions import StorageError

logger = logging.getLogger(__name__)


def _encoded_size(key: str, value: str) -> int:
    return len(key.encode("utf-8")) + len(value.encode("utf-8"))


class StorageBackend:
    """
    Interface of the durable medium.

    Reads never raise for missing keys (they return None). Writes either
    succeed completely or raise StorageError; no partial write is retried.
    """

    def get_item(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set_item(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove_item(self, key: str) -> None:
        raise NotImplementedError

    def keys(self) -> List[str]:
        raise NotImplementedError


class SqlStorage(StorageBackend):
    """Medium backed by the local_storage table through SQLAlchemy."""

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def get_item(self, key: str) -> Optional[str]:
        with self._session_factory() as db:
            entry = db.get(StorageEntry, key)
            return entry.value if entry else None

    def set_item(self, key: str, value: str) -> None:
        """
        Insert or replace the value stored under key.

        Raises:
            StorageError: If the database rejects the write
        """
        try:
            with self._session_factory.begin() as db:
                entry = db.get(StorageEntry, key)
                if entry:
                    entry.value = value
                else:
                    db.add(StorageEntry(key=key, value=value))
        except SQLAlchemyError as e:
            logger.error(f"Failed to write storage key '{key}': {e}")
            raise StorageError(f"Failed to write '{key}'") from e

    def remove_item(self, key: str) -> None:
        try:
            with self._session_factory.begin() as db:
                entry = db.get(StorageEntry, key)
                if entry:
                    db.delete(entry)
        except SQLAlchemyError as e:
            logger.error(f"Failed to remove storage key '{key}': {e}")
            raise StorageError(f"Failed to remove '{key}'") from e

    def keys(self) -> List[str]:
        with self._session_factory() as db:
            result = db.execute(select(StorageEntry.key).order_by(StorageEntry.key))
            return list(result.scalars().all())


class MemoryStorage(StorageBackend):
    """
    Process-local medium.

    quota_bytes bounds the UTF-8 encoded size of keys plus values, mirroring the
    quota a browser enforces on local storage.
    """

    def __init__(self, quota_bytes: Optional[int] = None):
        self._items: Dict[str, str] = {}
        self.quota_bytes = quota_bytes

    def _size_with(self, key: str, value: str) -> int:
        size = _encoded_size(key, value)
        for existing_key, existing_value in self._items.items():
            if existing_key != key:
                size += _encoded_size(existing_key, existing_value)
        return size

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        """
        Raises:
            StorageError: If the write would exceed quota_bytes
        """
        if self.quota_bytes is not None and self._size_with(key, value) > self.quota_bytes:
            logger.error(f"Storage quota exceeded writing '{key}'")
            raise StorageError("Storage quota exceeded")
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def keys(self) -> List[str]:
        return sorted(self._items)


_storage: Optional[StorageBackend] = None


def get_storage() -> StorageBackend:
    """
    Application-wide medium selected by STORAGE_BACKEND.
    Usage: RecordStore(get_storage())
    """
    global _storage
    if _storage is None:
        if config.storage_backend == "memory":
            _storage = MemoryStorage()
        else:
            init_db()
            _storage = SqlStorage(get_session_factory())
        logger.info(f"Using {type(_storage).__name__} as record medium")
    return _storage


def set_storage(storage: Optional[StorageBackend]) -> None:
    """Replace the application-wide medium (tests, alternate backends)."""
    global _storage
    _storage = storage
