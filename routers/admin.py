from __future__ import annotations

from fastapi import APIRouter, Depends

from deps.auth import require_admin
from storage import clear_worksheet_progress

router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)])


@router.delete("/progress/{worksheet_id}")
def clear_progress(worksheet_id: str):
    removed = clear_worksheet_progress(worksheet_id)
    return {"ok": True, "removed": removed}
