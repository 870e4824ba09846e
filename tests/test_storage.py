import pytest

from leaddesk.core.db.engine import build_engine, build_session_factory, check_database_connection, init_db
from leaddesk.core.exceptions import StorageError
from leaddesk.core.records import RecordStore
from leaddesk.core.storage import MemoryStorage, SqlStorage


def test_set_get_remove(storage):
    assert storage.get_item("k") is None
    storage.set_item("k", "v1")
    storage.set_item("k", "v2")
    assert storage.get_item("k") == "v2"
    storage.remove_item("k")
    assert storage.get_item("k") is None
    storage.remove_item("k")


def test_keys(storage):
    storage.set_item("b", "1")
    storage.set_item("a", "2")
    assert storage.keys() == ["a", "b"]


def test_sql_medium_survives_restart(tmp_path):
    url = f"sqlite:///{tmp_path / 'nested' / 'leaddesk.db'}"

    engine = build_engine(url)
    init_db(engine)
    RecordStore(SqlStorage(build_session_factory(engine))).save_all("billProfiles", [{"id": "1"}])
    engine.dispose()

    engine = build_engine(url)
    try:
        assert RecordStore(SqlStorage(build_session_factory(engine))).load("billProfiles") == [{"id": "1"}]
        assert check_database_connection(engine) is True
    finally:
        engine.dispose()


def test_sql_write_failure_raises_storage_error(tmp_path):
    # No init_db: the local_storage table is missing
    engine = build_engine(f"sqlite:///{tmp_path / 'leaddesk.db'}")
    try:
        with pytest.raises(StorageError):
            SqlStorage(build_session_factory(engine)).set_item("k", "v")
    finally:
        engine.dispose()


def test_memory_quota():
    storage = MemoryStorage(quota_bytes=10)
    storage.set_item("k", "12345")
    with pytest.raises(StorageError):
        storage.set_item("k2", "123456789")
    assert storage.get_item("k2") is None
    storage.set_item("k", "123456789")


def test_memory_quota_counts_encoded_bytes():
    storage = MemoryStorage(quota_bytes=3)
    with pytest.raises(StorageError):
        storage.set_item("k", "₹")
    storage.set_item("k", "ab")
    assert storage.get_item("k") == "ab"
