"""
SQLAlchemy model for Presentation documents.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import JSON, Column, DateTime, String, Text
from sqlalchemy.types import TypeDecorator

from presentation_service.data.models.base import Base


class UTCDateTime(TypeDecorator):
    """Timezone-aware UTC datetime on every backend.

    SQLite drops tzinfo on the way out; values are stored in UTC and read
    back with tzinfo set to UTC.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return value
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    def process_result_value(self, value, dialect):
        if value is None:
            return value
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PresentationModel(Base):
    __tablename__ = "presentations"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    # The unique index is the only guard against duplicate titles
    title = Column(Text, nullable=False, unique=True, index=True)
    authors = Column(JSON, nullable=False, default=list)
    slides = Column(JSON, nullable=False, default=list)
    created_at = Column(UTCDateTime(), nullable=False)
    updated_at = Column(UTCDateTime(), onupdate=_utcnow)
