from datetime import datetime
from sqlalchemy import DateTime, String, Text, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all database models"""

    pass


class StorageEntry(Base):
    """
    One key of the durable key-value medium.
    The value is an opaque string; record stores keep a JSON document here.
    """

    __tablename__ = "local_storage"

    key: Mapped[str] = mapped_column(String(255), primary_key=True)

    value: Mapped[str] = mapped_column(Text, nullable=False)

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=False),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    def __repr__(self) -> str:
        return f"<StorageEntry(key='{self.key}', size={len(self.value)})>"
