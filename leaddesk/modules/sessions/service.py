"""
SessionsService - drives form sessions across HTTP requests.

A session opened by one request is submitted and confirmed by later ones, so
the open sessions live in a process-local SessionManager keyed by a random id.
The confirmation prompt is answered by the confirm request itself: submit
validates and parks the session in AWAITING_CONFIRMATION, confirm resolves it.
"""

import logging
import threading
import uuid
from collections import OrderedDict
from dataclasses import asdict, dataclass, field
from typing import Dict, Optional

from leaddesk.core.config import config
from leaddesk.core.exceptions import NotFoundError, StorageError, ValidationError
from leaddesk.core.records import FormSession, MemoryNotifier, ProfileSession, SessionState, StoreKind
from leaddesk.modules.records.service import get_profile_store, get_record_store
from leaddesk.modules.stores import registry
from .schemas import OpenSessionDto, SessionResponse

logger = logging.getLogger(__name__)


@dataclass
class OpenSession:
    session: FormSession
    notifier: MemoryNotifier
    lock: threading.Lock = field(default_factory=threading.Lock)


class SessionManager:
    """
    Open sessions by id; the least recently used one is dropped past the limit.

    Route handlers run in the worker thread pool, so the registry is guarded by
    a lock and each session carries its own lock for the duration of a request.
    """

    def __init__(self, limit: Optional[int] = None):
        self.limit = limit if limit is not None else config.session_limit
        self.sessions: "OrderedDict[str, OpenSession]" = OrderedDict()
        self._lock = threading.Lock()

    def add(self, session: FormSession, notifier: MemoryNotifier) -> str:
        session_id = uuid.uuid4().hex
        with self._lock:
            self.sessions[session_id] = OpenSession(session=session, notifier=notifier)

            while len(self.sessions) > self.limit:
                dropped_id, dropped = self.sessions.popitem(last=False)
                dropped.session.cancel()
                logger.info(f"Dropped idle session {dropped_id} for '{dropped.session.store_key}'")
        return session_id

    def get(self, session_id: str) -> OpenSession:
        """
        Raises:
            NotFoundError: If the session is unknown, finished or was dropped
        """
        with self._lock:
            entry = self.sessions.get(session_id)
            if entry is None:
                raise NotFoundError("Session", session_id)
            self.sessions.move_to_end(session_id)
            return entry

    def end(self, session_id: str) -> None:
        with self._lock:
            ended = self.sessions.pop(session_id, None) is not None
        if ended:
            logger.info(f"Session ended {session_id}")

    def clear(self) -> None:
        with self._lock:
            self.sessions.clear()


session_manager = SessionManager()


def _to_response(session_id: str, entry: OpenSession, prompt: Optional[str] = None) -> SessionResponse:
    return SessionResponse(
        session_id=session_id,
        prompt=prompt,
        acknowledgments=[asdict(ack) for ack in entry.notifier.drain()],
        **entry.session.snapshot(),
    )


class SessionsService:
    """Create, edit and submit records through form sessions."""

    @staticmethod
    def open(store_key: str, dto: OpenSessionDto) -> SessionResponse:
        """
        Open a session for a store.

        Profile stores always edit their single stored object; editing_id
        applies to list stores only.

        Raises:
            NotFoundError: If the store or the record to edit does not exist
        """
        definition = registry.get(store_key)
        notifier = MemoryNotifier()

        if definition.kind == StoreKind.PROFILE:
            session = ProfileSession.for_profile(get_profile_store(), definition, notifier=notifier)
        elif dto.editing_id is not None:
            session = FormSession.for_edit(
                get_record_store(),
                definition,
                dto.editing_id,
                notifier=notifier,
                verify_exists=dto.verify_exists,
            )
            if session is None:
                raise NotFoundError("Record", dto.editing_id)
        else:
            session = FormSession.for_create(get_record_store(), definition, notifier=notifier)

        session_id = session_manager.add(session, notifier)
        logger.info(f"Opened session {session_id} for '{store_key}'")
        return _to_response(session_id, session_manager.get(session_id))

    @staticmethod
    def find_one(session_id: str) -> SessionResponse:
        entry = session_manager.get(session_id)
        with entry.lock:
            return _to_response(session_id, entry)

    @staticmethod
    def update_fields(session_id: str, values: Dict) -> SessionResponse:
        """Change draft fields; per-field errors come back in the response and never block."""
        entry = session_manager.get(session_id)
        with entry.lock:
            entry.session.set_values(values)
            return _to_response(session_id, entry)

    @staticmethod
    def submit(session_id: str) -> SessionResponse:
        """
        Validate the whole draft and ask for confirmation.

        Raises:
            ValidationError: If any field fails; the session stays open for editing
            ConflictError: If the session is not being edited
        """
        entry = session_manager.get(session_id)
        with entry.lock:
            if not entry.session.begin_submit():
                raise ValidationError(
                    "Please correct the highlighted fields", errors=dict(entry.session.draft.errors)
                )
            return _to_response(session_id, entry, prompt=entry.session.definition.confirm_message)

    @staticmethod
    def confirm(session_id: str, accept: bool) -> SessionResponse:
        """
        Answer the confirmation prompt.

        Accepting commits the record and ends the session; declining returns it
        to editing with the draft intact.

        Raises:
            ConflictError: If no confirmation is pending, or the edited record is gone
            StorageError: If the write fails; the error acknowledgment travels with
                it and the session stays open for a retry
        """
        entry = session_manager.get(session_id)
        with entry.lock:
            try:
                entry.session.resolve(accept)
            except StorageError as e:
                acknowledgments = [asdict(ack) for ack in entry.notifier.drain()]
                raise StorageError(e.detail, acknowledgments=acknowledgments) from e

            response = _to_response(session_id, entry)

        if entry.session.state == SessionState.COMMITTED:
            session_manager.end(session_id)
        return response

    @staticmethod
    def cancel(session_id: str) -> None:
        entry = session_manager.get(session_id)
        with entry.lock:
            entry.session.cancel()
        session_manager.end(session_id)
