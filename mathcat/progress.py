# mathcat/progress.py
"""
Worksheet progress bookkeeping.

Every function here returns a new ``WorksheetProgress`` (or a plain value) and
leaves its inputs untouched, so callers can apply updates from any request
handler without coordination.
"""

from __future__ import annotations

import math
from datetime import UTC, datetime
from typing import Iterable, List, Optional

from schemas.worksheets import (
    ProblemState,
    SectionProgress,
    WorksheetProgress,
    WorksheetSection,
    WorksheetSettings,
)


def _now() -> datetime:
    return datetime.now(UTC)


def _is_done(state: Optional[ProblemState]) -> bool:
    return state is not None and state.is_complete and state.is_correct is True


def initialize_worksheet_progress(worksheet_id: str) -> WorksheetProgress:
    return WorksheetProgress(
        worksheet_id=worksheet_id,
        problem_states={},
        current_problem_id=None,
        started_at=_now(),
        section_progress={},
    )


def calculate_section_progress(
    progress: WorksheetProgress, section_id: str, problem_ids: List[str]
) -> SectionProgress:
    completed = sum(1 for pid in problem_ids if _is_done(progress.problem_states.get(pid)))
    total = len(problem_ids)

    previous = progress.section_progress.get(section_id)
    completed_at = previous.completed_at if previous is not None else None
    if completed_at is None and completed == total:
        completed_at = _now()

    return SectionProgress(
        section_id=section_id, completed=completed, total=total, completed_at=completed_at
    )


def update_problem_state(
    progress: WorksheetProgress,
    problem_id: str,
    state: ProblemState,
    section_id: Optional[str] = None,
    section_problem_ids: Optional[List[str]] = None,
) -> WorksheetProgress:
    updated = progress.model_copy(
        update={"problem_states": {**progress.problem_states, problem_id: state}}
    )

    if section_id and section_problem_ids is not None:
        section = calculate_section_progress(updated, section_id, list(section_problem_ids))
        updated = updated.model_copy(
            update={"section_progress": {**updated.section_progress, section_id: section}}
        )

    return updated


def set_current_problem(progress: WorksheetProgress, problem_id: Optional[str]) -> WorksheetProgress:
    return progress.model_copy(update={"current_problem_id": problem_id})


def is_section_complete(progress: WorksheetProgress, problem_ids: Iterable[str]) -> bool:
    """True when every listed problem is both complete and correct."""
    return all(_is_done(progress.problem_states.get(pid)) for pid in problem_ids)


def calculate_worksheet_progress(progress: WorksheetProgress, total_problems: int) -> int:
    if total_problems <= 0:
        return 0
    completed = sum(1 for state in progress.problem_states.values() if _is_done(state))
    # half-up, not banker's rounding
    return math.floor(completed * 100 / total_problems + 0.5)


def merge_worksheet_settings(
    base: WorksheetSettings, section: Optional[WorksheetSection] = None
) -> WorksheetSettings:
    if section is None or section.settings is None:
        return base
    overrides = section.settings.model_dump(exclude_none=True)
    return base.model_copy(update=overrides)
