"""
SQLAlchemy models for the key-value store.
"""

import datetime
from sqlalchemy import Column, String, Text, DateTime

from thumbstudio.db.database import Base


def _utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


class StoreEntry(Base):
    """One key with its JSON-encoded value."""
    __tablename__ = "store_entries"

    key = Column(String(100), primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow)

    def __repr__(self):
        return f"<StoreEntry(key='{self.key}')>"
