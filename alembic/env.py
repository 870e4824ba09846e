"""
Alembic environment configuration for the local_storage medium.

Key features:
- Batch mode for SQLite (required for ALTER TABLE operations)
- Database URL taken from DB_URL, falling back to the app's SQLite file
- Same connection pragmas as the running app
"""

import os
from logging.config import fileConfig
from sqlalchemy import create_engine, pool, event
from sqlalchemy.engine import Connection
from alembic import context
from dotenv import load_dotenv

# Import your models here so Alembic can detect them
from leaddesk.core.db.base import Base, StorageEntry  # noqa: F401
from leaddesk.core.db.engine import _configure_sqlite_connection

# Load environment variables from .env file
load_dotenv()

# this is the Alembic Config object
config = context.config

# Get database URL from environment
db_url = os.getenv("DB_URL")

# If no DB_URL, use SQLite default
if not db_url:
    from pathlib import Path
    project_root = Path(__file__).resolve().parent.parent
    db_url = f"sqlite:///{project_root}/data/leaddesk.db"
    # Ensure data directory exists
    (project_root / "data").mkdir(parents=True, exist_ok=True)

config.set_main_option("sqlalchemy.url", db_url)

# Determine if we're using SQLite
is_sqlite = db_url.startswith("sqlite")

# Interpret the config file for Python logging.
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    """
    Run migrations in 'offline' mode.

    This generates SQL without connecting to the database.
    """
    url = config.get_main_option("sqlalchemy.url")

    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
        render_as_batch=is_sqlite,
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        compare_type=True,
        compare_server_default=True,
        render_as_batch=is_sqlite,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations in 'online' mode."""
    connectable = create_engine(
        config.get_main_option("sqlalchemy.url"),
        poolclass=pool.NullPool,
    )

    if is_sqlite:
        event.listen(connectable, "connect", _configure_sqlite_connection)

    with connectable.connect() as connection:
        do_run_migrations(connection)

    connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
