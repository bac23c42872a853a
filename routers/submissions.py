# routers/submissions.py

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query

from db import SessionLocal
from deps.auth import require_client
from models import Submission
from schemas.submissions import SubmissionOut

router = APIRouter(prefix="/submissions", tags=["submissions"])


@router.get("/recent-list", dependencies=[Depends(require_client)])
def submissions_recent(
    limit: int = 20,
    method: Annotated[str | None, Query(description="Only this solving method")] = None,
):
    limit = max(1, min(limit, 100))

    with SessionLocal() as db:
        q = db.query(Submission)
        if method:
            q = q.filter(Submission.method == method)
        items = q.order_by(Submission.created_at.desc(), Submission.id.desc()).limit(limit).all()

    # Reuse schema; exclude per-field error lists
    rows = [SubmissionOut.model_validate(s).model_dump(exclude={"errors"}) for s in items]
    return {"ok": True, "items": rows, "count": len(rows)}


@router.get("/{submission_id}", response_model=SubmissionOut)
def get_submission(submission_id: int):
    # Public endpoint: no token required
    with SessionLocal() as db:
        s = db.get(Submission, submission_id)
        if not s:
            raise HTTPException(status_code=404, detail="Submission not found")
        return SubmissionOut.model_validate(s)
