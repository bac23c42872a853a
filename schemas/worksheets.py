# schemas/worksheets.py
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from schemas.problems import DifficultyBatch, Problem, SolvingMethod

# ---------- Worksheets ----------


class WorksheetSettings(BaseModel):
    show_method_selector: bool = True
    allowed_methods: List[SolvingMethod] = Field(
        default_factory=lambda: ["partial-products", "area-model"]
    )
    show_hints: bool = False
    show_validation: bool = True
    show_all_cells: bool = False
    show_placeholder_zeros: bool = False
    time_limit: Optional[int] = None  # seconds


class SectionSettings(BaseModel):
    show_method_selector: Optional[bool] = None
    allowed_methods: Optional[List[SolvingMethod]] = None
    show_hints: Optional[bool] = None
    show_validation: Optional[bool] = None
    show_all_cells: Optional[bool] = None
    show_placeholder_zeros: Optional[bool] = None
    time_limit: Optional[int] = None


class WorksheetSection(BaseModel):
    id: str
    title: str
    problems: List[Problem] = Field(default_factory=list)
    settings: Optional[SectionSettings] = None


class Worksheet(BaseModel):
    id: str
    title: str
    description: Optional[str] = None
    sections: List[WorksheetSection] = Field(default_factory=list)
    problems: List[Problem]
    created_at: datetime
    settings: WorksheetSettings = Field(default_factory=WorksheetSettings)


# ---------- Progress ----------


class ProblemState(BaseModel):
    problem_id: str
    current_method: SolvingMethod
    user_inputs: Dict[str, Any] = Field(default_factory=dict)
    is_complete: bool = False
    is_correct: Optional[bool] = None


class SectionProgress(BaseModel):
    section_id: str
    completed: int
    total: int
    completed_at: Optional[datetime] = None


class WorksheetProgress(BaseModel):
    worksheet_id: str
    problem_states: Dict[str, ProblemState] = Field(default_factory=dict)
    current_problem_id: Optional[str] = None
    started_at: datetime
    section_progress: Dict[str, SectionProgress] = Field(default_factory=dict)


# ---------- HTTP ----------


class ImportCsvRequest(BaseModel):
    csv: str
    title: str
    description: Optional[str] = None


class GenerateWorksheetRequest(BaseModel):
    batches: List[DifficultyBatch]
    allow_zeros: bool = True
    settings: Optional[WorksheetSettings] = None
    section_settings: Optional[Dict[str, SectionSettings]] = None


class ShareRequest(BaseModel):
    worksheet: Worksheet
    base_url: Optional[str] = None


class ShareResponse(BaseModel):
    encoded: str
    url: str


class GeneratedWorksheetResponse(BaseModel):
    worksheet: Worksheet
    encoded: str


class RecordStateRequest(BaseModel):
    state: ProblemState
    section_id: Optional[str] = None
    section_problem_ids: Optional[List[str]] = None
    total_problems: Optional[int] = Field(default=None, ge=0)


class ProgressResponse(BaseModel):
    ok: bool
    progress: WorksheetProgress
    percentage: Optional[int] = None
    saved: bool = False


class SectionStatusRequest(BaseModel):
    problem_ids: List[str]


class SectionStatusResponse(BaseModel):
    complete: bool
    completed: int
    total: int
