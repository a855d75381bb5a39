"""
SQLAlchemy ORM Models for the Blob Store

A single key-value table holds the serialized card collection and the
progress ledger.
"""

from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class StoredBlob(Base):
    """
    One persisted blob (e.g. "flashcards" or "user_progress").
    """
    __tablename__ = 'stored_blob'

    key = Column(String(255), primary_key=True, nullable=False)
    value = Column(Text, nullable=False)  # JSON document
    updated_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<StoredBlob({self.key}, {len(self.value or '')} chars)>"
