from __future__ import annotations

from fastapi import APIRouter, HTTPException

from mathcat.progress import (
    calculate_worksheet_progress,
    initialize_worksheet_progress,
    is_section_complete,
    set_current_problem,
    update_problem_state,
)
from schemas.worksheets import (
    ProgressResponse,
    RecordStateRequest,
    SectionStatusRequest,
    SectionStatusResponse,
    WorksheetProgress,
)
from storage import load_worksheet_progress, update_worksheet_progress

router = APIRouter(prefix="/progress", tags=["progress"])


def _load_or_init(worksheet_id: str) -> WorksheetProgress:
    return load_worksheet_progress(worksheet_id) or initialize_worksheet_progress(worksheet_id)


@router.get("/{worksheet_id}", response_model=WorksheetProgress)
def get_progress(worksheet_id: str):
    # Not persisted until the first recorded state
    return _load_or_init(worksheet_id)


@router.post("/{worksheet_id}/problems/{problem_id}", response_model=ProgressResponse)
def record_problem_state(worksheet_id: str, problem_id: str, req: RecordStateRequest):
    if req.state.problem_id != problem_id:
        raise HTTPException(
            status_code=422,
            detail=f"state.problem_id {req.state.problem_id!r} does not match path {problem_id!r}",
        )

    def apply(progress: WorksheetProgress) -> WorksheetProgress:
        progress = update_problem_state(
            progress,
            problem_id,
            req.state,
            section_id=req.section_id,
            section_problem_ids=req.section_problem_ids,
        )
        return set_current_problem(progress, problem_id)

    progress = update_worksheet_progress(worksheet_id, apply)
    saved = progress is not None
    if not saved:
        # still answer with the updated progress so the student sees their result
        progress = apply(_load_or_init(worksheet_id))

    percentage = None
    if req.total_problems is not None:
        percentage = calculate_worksheet_progress(progress, req.total_problems)

    return {"ok": True, "progress": progress, "percentage": percentage, "saved": saved}


@router.post("/{worksheet_id}/sections/status", response_model=SectionStatusResponse)
def section_status(worksheet_id: str, req: SectionStatusRequest):
    progress = _load_or_init(worksheet_id)
    completed = sum(
        1 for pid in req.problem_ids if is_section_complete(progress, [pid])
    )
    return {
        "complete": is_section_complete(progress, req.problem_ids),
        "completed": completed,
        "total": len(req.problem_ids),
    }
