# schemas/problems.py
from __future__ import annotations

from typing import Any, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, model_validator

Operation = Literal["multiplication", "division", "fraction-decimal", "decimal-fraction"]
Difficulty = Literal["easy", "medium", "hard", "bonkers"]
SolvingMethod = Literal[
    "classic-algorithm",
    "partial-products",
    "area-model",
    "long-division",
    "short-division",
]

DIFFICULTIES: Tuple[Difficulty, ...] = ("easy", "medium", "hard", "bonkers")


class Problem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    operation: Operation = "multiplication"
    operands: Tuple[PositiveInt, PositiveInt]
    difficulty: Difficulty = "medium"
    correct_answer: Optional[Union[int, str]] = None

    @model_validator(mode="before")
    @classmethod
    def _fill_correct_answer(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        if data.get("operation", "multiplication") != "multiplication":
            return data
        if data.get("correct_answer") is None:
            operands = data.get("operands")
            try:
                a, b = operands
                data = {**data, "correct_answer": int(a) * int(b)}
            except (TypeError, ValueError):
                # leave it to field validation to report the bad operands
                pass
        return data

    @model_validator(mode="after")
    def _check_correct_answer(self) -> "Problem":
        if self.operation == "multiplication":
            a, b = self.operands
            if self.correct_answer != a * b:
                raise ValueError(
                    f"correct_answer {self.correct_answer!r} does not match {a} × {b} = {a * b}"
                )
        return self

    @property
    def multiplicand(self) -> int:
        return self.operands[0]

    @property
    def multiplier(self) -> int:
        return self.operands[1]


# ---------- Generation ----------


class CustomRange(BaseModel):
    min: PositiveInt
    max: PositiveInt

    @model_validator(mode="after")
    def _check_bounds(self) -> "CustomRange":
        if self.min > self.max:
            raise ValueError(f"custom range min ({self.min}) is greater than max ({self.max})")
        return self


class GeneratorConfig(BaseModel):
    allow_zeros: bool = True
    # overrides the difficulty table when present
    custom_range: Optional[CustomRange] = None


class DifficultyBatch(BaseModel):
    difficulty: Difficulty
    count: int = Field(ge=0, le=100)


class GenerateRequest(BaseModel):
    operation: str = "multiplication"
    difficulty: Difficulty = "medium"
    count: int = Field(default=1, ge=1, le=100)
    config: GeneratorConfig = Field(default_factory=GeneratorConfig)


class GenerateMixedRequest(BaseModel):
    operation: str = "multiplication"
    batches: List[DifficultyBatch]
    config: GeneratorConfig = Field(default_factory=GeneratorConfig)
