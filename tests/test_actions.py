import asyncio

import pytest

from leaddesk.core.exceptions import StorageError
from leaddesk.core.records import RecordStore, StaticConfirmationGate, ViewProjection, delete_record
from leaddesk.core.storage import MemoryStorage
from leaddesk.modules.stores import registry


def test_confirmed_delete_removes_record(store, bills, accept, notifier):
    store.save_all("billProfiles", [{"id": "1"}, {"id": "2"}])

    assert asyncio.run(delete_record(store, bills, "1", accept, notifier)) is True

    assert ViewProjection(store).list("billProfiles") == [{"id": "2"}]
    assert accept.prompts == ["You will not be able to recover this entry!"]
    ack = notifier.acknowledgments[0]
    assert (ack.level, ack.title, ack.message) == ("success", "Deleted!", "Bill entry has been deleted.")


def test_declined_delete_leaves_store_untouched(store, bills, decline, notifier):
    store.save_all("billProfiles", [{"id": "1"}])

    assert asyncio.run(delete_record(store, bills, "1", decline, notifier)) is False

    assert store.load("billProfiles") == [{"id": "1"}]
    assert notifier.acknowledgments == []


def test_delete_twice_is_idempotent(store, bills, accept, notifier):
    store.save_all("billProfiles", [{"id": "1"}, {"id": "2"}])

    asyncio.run(delete_record(store, bills, "1", accept, notifier))
    asyncio.run(delete_record(store, bills, "1", accept, notifier))

    assert store.load("billProfiles") == [{"id": "2"}]


def test_lookup_delete_prompt(notifier):
    gate = StaticConfirmationGate(False)
    asyncio.run(delete_record(RecordStore(MemoryStorage()), registry.get("bankTypes"), "x", gate, notifier))
    assert gate.prompts == ["You won't be able to revert this!"]


def test_delete_write_failure_is_reported(bills, notifier):
    storage = MemoryStorage()
    store = RecordStore(storage)
    store.save_all("billProfiles", [{"id": "1"}, {"id": "2"}])
    storage.quota_bytes = 1

    with pytest.raises(StorageError):
        asyncio.run(delete_record(store, bills, "1", StaticConfirmationGate(True), notifier))

    assert notifier.acknowledgments[0].level == "error"
    assert len(store.load("billProfiles")) == 2
