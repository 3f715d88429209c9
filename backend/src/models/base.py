"""Base SQLAlchemy declarative base and shared column helpers for all models"""

from datetime import datetime, timezone

from sqlalchemy import Column, JSON, TIMESTAMP, TypeDecorator
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import declarative_base


def utcnow() -> datetime:
    """Timezone-aware current UTC time used for all audit timestamps."""
    return datetime.now(timezone.utc)


class PortableJSONB(TypeDecorator):
    """JSON type that works with both PostgreSQL (JSONB) and SQLite (JSON).

    Uses JSONB on PostgreSQL, falls back to JSON on SQLite for testing.
    """
    impl = JSON
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == 'postgresql':
            return dialect.type_descriptor(JSONB())
        return dialect.type_descriptor(JSON())


class TimestampMixin:
    """created_at / updated_at columns maintained on the Python side.

    Defaults are computed in Python rather than with server_default NOW()
    so the same models run on SQLite in tests.
    """
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)


Base = declarative_base()
