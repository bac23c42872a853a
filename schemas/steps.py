# schemas/steps.py
"""
Expected intermediate steps, user inputs and validation results for the
multiplication solving methods.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from schemas.problems import Problem

# ---------- Results ----------


class FieldError(BaseModel):
    field: str
    expected: Any = None
    actual: Any = None
    message: str


class ValidationResult(BaseModel):
    is_correct: bool
    # None when correct, never an empty list
    errors: Optional[List[FieldError]] = None


# ---------- Partial products ----------


class PartialProduct(BaseModel):
    value: int
    label: str


class PartialProductsExpected(BaseModel):
    partials: List[PartialProduct]
    sum: int


class PartialProductsInputs(BaseModel):
    partials: List[Optional[int]] = Field(default_factory=list)
    sum: Optional[int] = None


# ---------- Area model ----------


class AreaModelCell(BaseModel):
    row: int
    col: int
    row_value: int  # multiplier part
    col_value: int  # multiplicand part
    expected: int


class AreaModelExpected(BaseModel):
    cells: List[AreaModelCell]
    multiplicand_parts: List[int]
    multiplier_parts: List[int]
    sum: int


class AreaModelInputs(BaseModel):
    # keyed by "row-col"
    cells: Dict[str, Optional[int]] = Field(default_factory=dict)
    sum: Optional[int] = None


# ---------- Classic algorithm ----------


class ClassicAlgorithmExpected(BaseModel):
    partials: List[int]
    sum: int


class ClassicAlgorithmInputs(BaseModel):
    partials: List[Optional[int]] = Field(default_factory=list)
    sum: Optional[int] = None
    # accepted for round-tripping UI state; not validated
    partial_carries: Optional[List[Optional[List[int]]]] = None
    sum_carries: Optional[List[int]] = None


# ---------- HTTP ----------


class ExpectedRequest(BaseModel):
    problem: Problem


class PartialProductsValidateRequest(BaseModel):
    problem: Problem
    inputs: PartialProductsInputs


class AreaModelValidateRequest(BaseModel):
    problem: Problem
    inputs: AreaModelInputs


class ClassicAlgorithmValidateRequest(BaseModel):
    problem: Problem
    inputs: ClassicAlgorithmInputs


class MethodValidationResponse(ValidationResult):
    is_complete: bool
    submission_id: Optional[int] = None
