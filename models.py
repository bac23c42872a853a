from __future__ import annotations

from datetime import UTC, datetime

import sqlalchemy as sa
from sqlalchemy import JSON, Boolean, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from db import Base


def _utcnow() -> datetime:
    return datetime.now(UTC)


class WorksheetProgressRecord(Base):
    __tablename__ = "worksheet_progress"
    worksheet_id: Mapped[str] = mapped_column(String(128), primary_key=True)
    # serialized WorksheetProgress, stored as-is
    payload: Mapped[dict] = mapped_column(JSON)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow
    )


class Submission(Base):
    __tablename__ = "submissions"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, index=True
    )
    problem_id: Mapped[str] = mapped_column(String(128))
    method: Mapped[str] = mapped_column(String(32), index=True)
    operands: Mapped[list] = mapped_column(JSON)
    is_correct: Mapped[bool] = mapped_column(Boolean)
    error_count: Mapped[int] = mapped_column(Integer)
    errors: Mapped[list] = mapped_column(JSON, nullable=True)  # per-field errors
    duration_ms: Mapped[int] = mapped_column(sa.Integer, nullable=True)
