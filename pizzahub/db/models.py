"""SQLAlchemy models mirroring the flat JSON document."""
from __future__ import annotations

from sqlalchemy import Column, DateTime, Integer, String, Text, JSON, func

from .session import Base


class Record(Base):
    """One record of one collection; ``data`` holds the record exactly as served."""

    __tablename__ = "records"

    collection = Column(String(32), primary_key=True)
    position = Column(Integer, primary_key=True)
    record_id = Column(Text, nullable=True)
    data = Column(JSON, nullable=False, default=dict)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
