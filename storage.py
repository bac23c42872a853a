# storage.py
"""
Worksheet progress persistence.

Progress is a convenience for the student, so failures here are logged and
reported as None/False instead of breaking the request that triggered them.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from db import SessionLocal
from mathcat.progress import initialize_worksheet_progress
from models import WorksheetProgressRecord
from schemas.worksheets import WorksheetProgress

logger = logging.getLogger(__name__)

# Retries after losing the race to create a worksheet's first record
MAX_WRITE_ATTEMPTS = 3


def load_worksheet_progress(worksheet_id: str) -> Optional[WorksheetProgress]:
    try:
        with SessionLocal() as db:
            rec = db.get(WorksheetProgressRecord, worksheet_id)
            if rec is None:
                return None
            return WorksheetProgress.model_validate(rec.payload)
    except (SQLAlchemyError, ValidationError):
        logger.exception("Failed to load worksheet progress for %s", worksheet_id)
        return None


def save_worksheet_progress(progress: WorksheetProgress) -> bool:
    payload = progress.model_dump(mode="json")
    try:
        with SessionLocal() as db:
            rec = db.get(WorksheetProgressRecord, progress.worksheet_id)
            if rec is None:
                db.add(WorksheetProgressRecord(worksheet_id=progress.worksheet_id, payload=payload))
            else:
                rec.payload = payload
            db.commit()
        return True
    except SQLAlchemyError:
        logger.exception("Failed to save worksheet progress for %s", progress.worksheet_id)
        return False


def clear_worksheet_progress(worksheet_id: str) -> bool:
    """Returns True when a stored record was removed."""
    try:
        with SessionLocal() as db:
            rec = db.get(WorksheetProgressRecord, worksheet_id)
            if rec is None:
                return False
            db.delete(rec)
            db.commit()
        return True
    except SQLAlchemyError:
        logger.exception("Failed to clear worksheet progress for %s", worksheet_id)
        return False


def update_worksheet_progress(
    worksheet_id: str, apply: Callable[[WorksheetProgress], WorksheetProgress]
) -> Optional[WorksheetProgress]:
    """
    Load, transform and store a worksheet's progress in one transaction.

    The row is locked for the duration (SELECT ... FOR UPDATE on Postgres,
    BEGIN IMMEDIATE on SQLite), so concurrent updates to the same worksheet
    are applied one after another instead of overwriting each other.
    Returns the stored progress, or None when it could not be saved.
    """
    for attempt in range(1, MAX_WRITE_ATTEMPTS + 1):
        try:
            with SessionLocal() as db, db.begin():
                rec = db.execute(
                    select(WorksheetProgressRecord)
                    .where(WorksheetProgressRecord.worksheet_id == worksheet_id)
                    .with_for_update()
                ).scalar_one_or_none()
                if rec is None:
                    current = initialize_worksheet_progress(worksheet_id)
                else:
                    current = WorksheetProgress.model_validate(rec.payload)

                updated = apply(current)
                payload = updated.model_dump(mode="json")
                if rec is None:
                    db.add(WorksheetProgressRecord(worksheet_id=worksheet_id, payload=payload))
                else:
                    rec.payload = payload
            return updated
        except IntegrityError:
            # another request inserted the first record; retry against it
            logger.info(
                "Progress record for %s created concurrently (attempt %s)", worksheet_id, attempt
            )
        except (SQLAlchemyError, ValidationError):
            logger.exception("Failed to update worksheet progress for %s", worksheet_id)
            return None

    logger.error(
        "Gave up updating worksheet progress for %s after %s attempts",
        worksheet_id,
        MAX_WRITE_ATTEMPTS,
    )
    return None
