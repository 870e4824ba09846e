"""
Form sessions: one create-or-edit cycle against a store schema.

    EDITING --begin_submit--> SUBMITTING --valid--> AWAITING_CONFIRMATION
       ^                          |                     |        |
       +-------- invalid ---------+                reject|  accept|
       +-------------------------------------------------+        v
                                                             COMMITTED

cancel() ends the session from any non-terminal state without touching the
store. Validation always runs before the confirmation prompt.
"""

import enum
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Set, Tuple

from pydantic import BaseModel
from pydantic import ValidationError as SchemaValidationError

from leaddesk.core.exceptions import ConflictError, StorageError
from leaddesk.core.records.gates import ConfirmationGate, LoggingNotifier, Notifier
from leaddesk.core.records.registry import StoreDefinition
from leaddesk.core.records.store import ProfileStore, Record, RecordStore

logger = logging.getLogger(__name__)

FORM_ERROR_KEY = "__form__"


class SessionState(str, enum.Enum):
    EDITING = "editing"
    SUBMITTING = "submitting"
    AWAITING_CONFIRMATION = "awaiting_confirmation"
    COMMITTED = "committed"
    CANCELLED = "cancelled"


@dataclass
class Draft:
    """Unsaved field values plus per-field touched/error bookkeeping."""

    values: Dict[str, Any] = field(default_factory=dict)
    touched: Set[str] = field(default_factory=set)
    errors: Dict[str, str] = field(default_factory=dict)


class FormSession:
    """
    Orchestrates one create (editing_id None) or edit session for a list store.

    Usage:
        session = FormSession.for_create(store, definition, gate=gate)
        session.set_values({"billName": "Acme", ...})
        record = await session.submit()
    """

    def __init__(
        self,
        store: RecordStore,
        definition: StoreDefinition,
        values: Optional[Mapping[str, Any]] = None,
        editing_id: Optional[str] = None,
        gate: Optional[ConfirmationGate] = None,
        notifier: Optional[Notifier] = None,
        verify_exists: bool = False,
    ):
        self.store = store
        self.definition = definition
        self.editing_id = editing_id
        self.gate = gate
        self.notifier = notifier or LoggingNotifier()
        self.verify_exists = verify_exists
        self.state = SessionState.EDITING
        self.draft = Draft(values=dict(values) if values is not None else definition.default_values())
        self.record: Optional[Record] = None

    @classmethod
    def for_create(cls, store: RecordStore, definition: StoreDefinition, **kwargs) -> "FormSession":
        return cls(store, definition, **kwargs)

    @classmethod
    def for_edit(
        cls,
        store: RecordStore,
        definition: StoreDefinition,
        record_id: str,
        **kwargs,
    ) -> Optional["FormSession"]:
        """
        Open an edit session pre-populated from the stored record.

        Returns None when the record does not exist.
        """
        record = store.get(definition.key, record_id)
        if record is None:
            logger.info(f"Edit requested for missing record '{record_id}' in '{definition.key}'")
            return None

        values = definition.default_values()
        values.update({key: value for key, value in record.items() if key != "id"})
        return cls(store, definition, values=values, editing_id=record_id, **kwargs)

    @property
    def store_key(self) -> str:
        return self.definition.key

    @property
    def is_open(self) -> bool:
        return self.state not in (SessionState.COMMITTED, SessionState.CANCELLED)

    def _require_state(self, *states: SessionState) -> None:
        if self.state not in states:
            raise ConflictError(f"Session is {self.state.value}, expected {', '.join(s.value for s in states)}")

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------

    def set_field(self, name: str, value: Any) -> Optional[str]:
        """
        Change one field and re-validate it.

        Returns the field's error message, or None when it is valid. The
        error is advisory; the session stays in EDITING either way.
        """
        self._require_state(SessionState.EDITING)
        self.draft.values[name] = value
        self.draft.touched.add(name)

        _, errors = self._run_schema(self.draft.values)
        if name in errors:
            self.draft.errors[name] = errors[name]
        else:
            self.draft.errors.pop(name, None)
        return self.draft.errors.get(name)

    def set_values(self, values: Mapping[str, Any]) -> Dict[str, str]:
        """Apply several field changes; returns the errors of the changed fields."""
        changed = {}
        for name, value in values.items():
            error = self.set_field(name, value)
            if error:
                changed[name] = error
        return changed

    def validate(self) -> Dict[str, str]:
        """Validate the whole draft against the schema and return the error map."""
        _, errors = self._run_schema(self.draft.values)
        return errors

    def _run_schema(self, values: Mapping[str, Any]) -> Tuple[Optional[BaseModel], Dict[str, str]]:
        try:
            return self.definition.schema.model_validate(dict(values)), {}
        except SchemaValidationError as exc:
            return None, self._error_map(exc, values)

    def _error_map(self, exc: SchemaValidationError, values: Mapping[str, Any]) -> Dict[str, str]:
        errors: Dict[str, str] = {}
        for error in exc.errors():
            loc = error.get("loc") or ()
            name = str(loc[0]) if loc else FORM_ERROR_KEY
            if name in errors:
                continue

            value = values.get(name)
            blank = value is None or (isinstance(value, str) and not value.strip())
            if error["type"] == "missing" or (name != FORM_ERROR_KEY and blank):
                errors[name] = f"{self.definition.field_title(name)} is required"
            else:
                message = error["msg"]
                if message.startswith("Value error, "):
                    message = message[len("Value error, "):]
                errors[name] = message
        return errors

    # ------------------------------------------------------------------
    # Submission
    # ------------------------------------------------------------------

    def begin_submit(self) -> bool:
        """
        Validate everything and move to AWAITING_CONFIRMATION.

        Returns False, with the full error map on the draft and the session
        back in EDITING, when any field fails.
        """
        self._require_state(SessionState.EDITING)
        self.state = SessionState.SUBMITTING

        errors = self.validate()
        self.draft.touched.update(self.draft.values)
        self.draft.errors = errors
        if errors:
            self.state = SessionState.EDITING
            return False

        self.state = SessionState.AWAITING_CONFIRMATION
        return True

    def resolve(self, accepted: bool) -> Optional[Record]:
        """
        Apply the operator's answer to the pending confirmation.

        Rejected: back to EDITING with the draft intact, returns None.
        Accepted: persists and returns the committed record.

        Raises:
            StorageError: If persisting fails (session returns to EDITING)
            ConflictError: If verify_exists is set and the edited record is gone
        """
        self._require_state(SessionState.AWAITING_CONFIRMATION)
        if not accepted:
            self.state = SessionState.EDITING
            return None
        return self._commit()

    async def submit(self, gate: Optional[ConfirmationGate] = None) -> Optional[Record]:
        """
        Validate, ask the gate, and commit when it accepts.

        Returns the committed record, or None when validation failed or the
        operator declined.
        """
        gate = gate or self.gate
        if gate is None:
            raise ValueError("A confirmation gate is required to submit")

        if not self.begin_submit():
            return None

        accepted = await gate.confirm(self.definition.confirm_message)
        return self.resolve(accepted)

    def cancel(self) -> None:
        if not self.is_open:
            return
        self.draft = Draft()
        self.state = SessionState.CANCELLED

    def _commit(self) -> Optional[Record]:
        model, errors = self._run_schema(self.draft.values)
        if model is None:
            # Draft can only change in EDITING, so this means the schema itself changed
            self.draft.errors = errors
            self.state = SessionState.EDITING
            return None

        payload = model.model_dump(mode="json", by_alias=True)
        payload.pop("id", None)

        try:
            record = self._persist(payload)
        except StorageError as e:
            self.notifier.error("Error!", f"{self.definition.label} details could not be saved: {e.detail}")
            self.state = SessionState.EDITING
            raise

        self.record = record
        self.draft = Draft()
        self.state = SessionState.COMMITTED
        self.notifier.success("Success!", self.definition.success_message)
        return record

    def _persist(self, payload: Record) -> Record:
        if self.verify_exists and self.editing_id is not None:
            if self.store.get(self.store_key, self.editing_id) is None:
                self.state = SessionState.EDITING
                raise ConflictError(f"{self.definition.label} '{self.editing_id}' no longer exists")

        records = self.store.upsert(self.store_key, payload, self.editing_id)
        self.store.save_all(self.store_key, records)

        if self.editing_id is not None:
            record = next(item for item in records if item.get("id") == self.editing_id)
        else:
            record = records[-1]

        logger.info(
            f"{'Updated' if self.editing_id else 'Created'} record '{record['id']}' in '{self.store_key}'"
        )
        return record

    def snapshot(self) -> Dict[str, Any]:
        return {
            "store_key": self.store_key,
            "state": self.state.value,
            "editing_id": self.editing_id,
            "values": dict(self.draft.values),
            "touched": sorted(self.draft.touched),
            "errors": dict(self.draft.errors),
            "record": self.record,
        }


class ProfileSession(FormSession):
    """Edit session for a single-object store; commit replaces the stored object."""

    def __init__(self, store: ProfileStore, definition: StoreDefinition, **kwargs):
        super().__init__(store, definition, **kwargs)

    @classmethod
    def for_profile(cls, store: ProfileStore, definition: StoreDefinition, **kwargs) -> "ProfileSession":
        values = definition.default_values()
        stored = store.load(definition.key)
        if stored:
            values.update(stored)
        return cls(store, definition, values=values, **kwargs)

    def _persist(self, payload: Record) -> Record:
        self.store.save(self.store_key, payload)
        logger.info(f"Saved profile '{self.store_key}'")
        return payload
