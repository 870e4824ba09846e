from leaddesk.core.records.actions import delete_record
from leaddesk.core.records.gates import (
    ConfirmationGate,
    LoggingNotifier,
    MemoryNotifier,
    Notifier,
    StaticConfirmationGate,
)
from leaddesk.core.records.projection import ViewProjection
from leaddesk.core.records.registry import StoreDefinition, StoreKind, StoreRegistry
from leaddesk.core.records.session import Draft, FormSession, ProfileSession, SessionState
from leaddesk.core.records.store import ProfileStore, RecordStore

__all__ = [
    "ConfirmationGate",
    "Draft",
    "FormSession",
    "LoggingNotifier",
    "MemoryNotifier",
    "Notifier",
    "ProfileSession",
    "ProfileStore",
    "RecordStore",
    "SessionState",
    "StaticConfirmationGate",
    "StoreDefinition",
    "StoreKind",
    "StoreRegistry",
    "ViewProjection",
    "delete_record",
]
