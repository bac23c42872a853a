from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict


class SubmissionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    created_at: datetime | None
    problem_id: str
    method: str
    operands: list[int]
    is_correct: bool
    error_count: int
    duration_ms: int | None = None
    # usually excluded in list views
    errors: list[Any] | None = None
