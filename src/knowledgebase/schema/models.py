"""SQLAlchemy ORM model for stored object type documents.

Each object type is stored whole, as one JSON document keyed by its name.
There is no attribute-level storage.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from sqlalchemy import JSON, DateTime, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

OBJECT_TYPE_TABLE = "kb_object_types"


def utc_now() -> datetime:
    """Get current UTC timestamp."""
    return datetime.now(UTC)


class Base(DeclarativeBase):
    """Base class for all knowledge base models."""

    pass


class ObjectTypeDocument(Base):
    """One stored object type: ``{name, attributes, id_parts}``."""

    __tablename__ = OBJECT_TYPE_TABLE

    name: Mapped[str] = mapped_column(String(255), primary_key=True)
    document: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, onupdate=utc_now
    )

