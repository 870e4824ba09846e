# Import all models here so metadata.create_all and Alembic see them together

from leaddesk.core.db.base import Base, StorageEntry

# Export for easy importing
__all__ = [
    "Base",
    "StorageEntry",
]
