"""
Shared column helpers for inventory models.
"""
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TimestampMixin:
    """Integer primary key plus creation/update timestamps."""

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
