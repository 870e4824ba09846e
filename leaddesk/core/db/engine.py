"""
SQLite database engine for the key-value medium.

Configured for:
- WAL mode so a listing can read while a commit writes
- busy_timeout instead of immediate "database is locked" failures
- Short, synchronous transactions (one per storage call)
"""

import logging
from pathlib import Path
from typing import Optional
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from leaddesk.core.config import config as settings
from leaddesk.core.db.base import Base

logger = logging.getLogger(__name__)


def _get_engine_options(database_url: str) -> dict:
    """
    Get engine options based on database type.
    In-memory SQLite must share a single connection across sessions.
    """
    options = {"echo": False, "future": True}

    if database_url.startswith("sqlite"):
        options["connect_args"] = {"check_same_thread": False}
        if ":memory:" in database_url:
            options["poolclass"] = StaticPool

    return options


def _configure_sqlite_connection(dbapi_connection, connection_record):
    """
    Configure SQLite connection on every new connection.

    Settings:
    - WAL mode: readers don't block the writer
    - busy_timeout: wait up to 30s for locks
    - synchronous=NORMAL: safe with WAL and faster than FULL
    """
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA busy_timeout=30000")
    cursor.execute("PRAGMA synchronous=NORMAL")
    cursor.close()


def build_engine(database_url: str) -> Engine:
    """Create an engine for the given URL with the SQLite pragmas registered."""
    if database_url.startswith("sqlite") and ":memory:" not in database_url:
        _, _, path = database_url.partition(":///")
        if path:
            Path(path).parent.mkdir(parents=True, exist_ok=True)

    db_engine = create_engine(database_url, **_get_engine_options(database_url))

    if database_url.startswith("sqlite"):

        @event.listens_for(db_engine, "connect")
        def set_sqlite_pragma(dbapi_connection, connection_record):
            _configure_sqlite_connection(dbapi_connection, connection_record)

    return db_engine


def build_session_factory(db_engine: Engine) -> sessionmaker:
    return sessionmaker(
        db_engine,
        class_=Session,
        expire_on_commit=False,
        autoflush=False,
    )


_engine: Optional[Engine] = None
_session_factory: Optional[sessionmaker] = None


def get_engine() -> Engine:
    """Lazily create the application engine from DB_URL."""
    global _engine
    if _engine is None:
        _engine = build_engine(settings.database_url)
    return _engine


def get_session_factory() -> sessionmaker:
    global _session_factory
    if _session_factory is None:
        _session_factory = build_session_factory(get_engine())
    return _session_factory


def init_db(db_engine: Optional[Engine] = None) -> None:
    """Create the local_storage table if it does not exist yet."""
    Base.metadata.create_all(db_engine or get_engine())


def check_database_connection(db_engine: Optional[Engine] = None) -> bool:
    """
    Verify the medium is reachable.
    Used by the health endpoint.
    """
    try:
        with (db_engine or get_engine()).connect() as connection:
            return connection.execute(text("SELECT 1")).scalar() == 1
    except SQLAlchemyError as e:
        logger.warning(f"Database health check failed: {e}")
        return False
