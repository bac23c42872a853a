from __future__ import annotations

import logging
import time
from types import ModuleType
from typing import Any, Optional

from fastapi import APIRouter, HTTPException
from sqlalchemy.exc import SQLAlchemyError

from db import SessionLocal
from mathcat.validators import area_model, classic_algorithm, partial_products
from mathcat.validators.common import UnsupportedOperationError
from models import Submission
from schemas.problems import Problem
from schemas.steps import (
    AreaModelExpected,
    AreaModelValidateRequest,
    ClassicAlgorithmExpected,
    ClassicAlgorithmValidateRequest,
    ExpectedRequest,
    MethodValidationResponse,
    PartialProductsExpected,
    PartialProductsValidateRequest,
    ValidationResult,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/methods", tags=["methods"])


# --- Helpers ----------------------------------------------------------------------


def _expected(validator: ModuleType, problem: Problem):
    try:
        return validator.calculate_expected(problem)
    except UnsupportedOperationError as e:
        raise HTTPException(status_code=400, detail=str(e))


def _record_submission(
    problem: Problem, method: str, result: ValidationResult, duration_ms: int
) -> Optional[int]:
    errors = [e.model_dump(mode="json") for e in result.errors or []]
    try:
        with SessionLocal() as db:
            sub = Submission(
                problem_id=problem.id,
                method=method,
                operands=list(problem.operands),
                is_correct=result.is_correct,
                error_count=len(errors),
                errors=errors or None,
                duration_ms=duration_ms,
            )
            db.add(sub)
            db.commit()
            db.refresh(sub)
            return sub.id
    except SQLAlchemyError:
        logger.exception("Failed to record %s submission for %s", method, problem.id)
        return None


def _validate(validator: ModuleType, method: str, problem: Problem, inputs: Any):
    t0 = time.perf_counter()
    result = validator.validate(problem, inputs)
    complete = problem.operation == "multiplication" and validator.is_complete(problem, inputs)
    duration_ms = int(round((time.perf_counter() - t0) * 1000))

    return MethodValidationResponse(
        is_correct=result.is_correct,
        errors=result.errors,
        is_complete=complete,
        submission_id=_record_submission(problem, method, result, duration_ms),
    )


# --- Endpoints --------------------------------------------------------------------


@router.post("/partial-products/expected", response_model=PartialProductsExpected)
def partial_products_expected(req: ExpectedRequest):
    return _expected(partial_products, req.problem)


@router.post("/partial-products/validate", response_model=MethodValidationResponse)
def partial_products_validate(req: PartialProductsValidateRequest):
    return _validate(partial_products, "partial-products", req.problem, req.inputs)


@router.post("/area-model/expected", response_model=AreaModelExpected)
def area_model_expected(req: ExpectedRequest):
    return _expected(area_model, req.problem)


@router.post("/area-model/validate", response_model=MethodValidationResponse)
def area_model_validate(req: AreaModelValidateRequest):
    return _validate(area_model, "area-model", req.problem, req.inputs)


@router.post("/classic-algorithm/expected", response_model=ClassicAlgorithmExpected)
def classic_algorithm_expected(req: ExpectedRequest):
    return _expected(classic_algorithm, req.problem)


@router.post("/classic-algorithm/validate", response_model=MethodValidationResponse)
def classic_algorithm_validate(req: ClassicAlgorithmValidateRequest):
    return _validate(classic_algorithm, "classic-algorithm", req.problem, req.inputs)
