from __future__ import annotations

from typing import Callable, List

from fastapi import APIRouter, HTTPException

from mathcat.generator import GeneratorExhaustedError, ProblemGenerator
from schemas.problems import GenerateMixedRequest, GenerateRequest, Problem

router = APIRouter(prefix="/problems", tags=["problems"])


def _generate(produce: Callable[[], List[Problem]]) -> List[Problem]:
    try:
        return produce()
    except NotImplementedError as e:
        raise HTTPException(status_code=501, detail=str(e))
    except GeneratorExhaustedError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/generate", response_model=List[Problem])
def generate(req: GenerateRequest):
    gen = ProblemGenerator()
    return _generate(
        lambda: [gen.problem(req.operation, req.difficulty, req.config) for _ in range(req.count)]
    )


@router.post("/generate-mixed", response_model=List[Problem])
def generate_mixed(req: GenerateMixedRequest):
    gen = ProblemGenerator()
    return _generate(lambda: gen.mixed(req.operation, req.batches, req.config))
