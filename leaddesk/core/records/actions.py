"""Confirmation-gated destructive actions."""

import logging

from leaddesk.core.exceptions import StorageError
from leaddesk.core.records.gates import ConfirmationGate, Notifier
from leaddesk.core.records.registry import StoreDefinition
from leaddesk.core.records.store import RecordStore

logger = logging.getLogger(__name__)


async def delete_record(
    store: RecordStore,
    definition: StoreDefinition,
    record_id: str,
    gate: ConfirmationGate,
    notifier: Notifier,
) -> bool:
    """
    Ask for confirmation, then remove record_id and persist the store.

    Returns True when the operator confirmed. A record that does not exist
    is a no-op: the store is rewritten unchanged.

    Raises:
        StorageError: If persisting the reduced collection fails
    """
    if not await gate.confirm(definition.delete_message):
        logger.info(f"Delete of '{record_id}' in '{definition.key}' declined")
        return False

    records = store.remove_by_id(definition.key, record_id)
    try:
        store.save_all(definition.key, records)
    except StorageError as e:
        notifier.error("Error!", f"{definition.label} could not be deleted: {e.detail}")
        raise

    logger.info(f"Deleted record '{record_id}' from '{definition.key}'")
    notifier.success("Deleted!", f"{definition.label} entry has been deleted.")
    return True
