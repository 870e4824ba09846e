"""Shared fixtures: both storage media, stores and a valid bill factory."""

import pytest

from leaddesk.core.db.engine import build_engine, build_session_factory, init_db
from leaddesk.core.records import MemoryNotifier, ProfileStore, RecordStore, StaticConfirmationGate
from leaddesk.core.storage import MemoryStorage, SqlStorage
from leaddesk.modules.stores import registry


@pytest.fixture
def memory_storage():
    return MemoryStorage()


@pytest.fixture
def sql_storage(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'leaddesk.db'}")
    init_db(engine)
    yield SqlStorage(build_session_factory(engine))
    engine.dispose()


@pytest.fixture(params=["memory", "sql"])
def storage(request):
    """Runs a test once per medium."""
    return request.getfixturevalue(f"{request.param}_storage")


@pytest.fixture
def store(storage):
    return RecordStore(storage)


@pytest.fixture
def profile_store(storage):
    return ProfileStore(storage)


@pytest.fixture
def bills():
    return registry.get("billProfiles")


@pytest.fixture
def notifier():
    return MemoryNotifier()


@pytest.fixture
def accept():
    return StaticConfirmationGate(True)


@pytest.fixture
def decline():
    return StaticConfirmationGate(False)


@pytest.fixture
def bill_values():
    """Factory for bill form input that passes validation."""

    def make(**overrides):
        values = {
            "billName": "Acme Settlement",
            "ownerEmail": "owner@example.com",
            "billsOwner": "Priya",
            "status": "Pending",
            "modeOfPayment": "NEFT",
            "subTotal": "1000",
            "tax": "180",
            "grandTotal": "1180",
        }
        values.update(overrides)
        return values

    return make
