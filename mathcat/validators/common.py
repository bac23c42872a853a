# mathcat/validators/common.py

from __future__ import annotations

from typing import List, Optional, Sequence

from schemas.problems import Problem
from schemas.steps import FieldError, ValidationResult


class UnsupportedOperationError(ValueError):
    def __init__(self, method_name: str, operation: str):
        super().__init__(f"{method_name} validator only supports multiplication")
        self.method_name = method_name
        self.operation = operation


def require_multiplication(problem: Problem, method_name: str) -> None:
    if problem.operation != "multiplication":
        raise UnsupportedOperationError(method_name, problem.operation)


def operation_error(problem: Problem, method_name: str) -> ValidationResult:
    return ValidationResult(
        is_correct=False,
        errors=[
            FieldError(
                field="operation",
                expected="multiplication",
                actual=problem.operation,
                message=f"{method_name} validator only supports multiplication",
            )
        ],
    )


def check_value(
    field: str, expected: int, actual: Optional[int], what: str
) -> Optional[FieldError]:
    """Return a missing/incorrect error for one field, or None when it matches."""
    if actual is None:
        return FieldError(
            field=field, expected=expected, actual=actual, message=f"{what} is missing"
        )
    if actual != expected:
        return FieldError(
            field=field, expected=expected, actual=actual, message=f"{what} is incorrect"
        )
    return None


def check_partials(
    expected: Sequence[int],
    actual: Sequence[Optional[int]],
    labels: Optional[Sequence[str]] = None,
) -> List[FieldError]:
    """
    Compare a row of partial products position by position.

    A length mismatch is reported once on ``partials`` and checking continues
    over the longer of the two rows: surplus inputs are "extra", absent ones
    "missing".
    """
    errors: List[FieldError] = []

    if len(actual) != len(expected):
        errors.append(
            FieldError(
                field="partials",
                expected=len(expected),
                actual=len(actual),
                message=f"Expected {len(expected)} partial products, got {len(actual)}",
            )
        )

    for i in range(max(len(actual), len(expected))):
        user_value = actual[i] if i < len(actual) else None
        if i >= len(expected):
            errors.append(
                FieldError(
                    field=f"partial-{i}",
                    expected="none",
                    actual=user_value,
                    message=f"Extra partial product at position {i + 1}",
                )
            )
            continue

        what = f"Partial product {i + 1}"
        if labels is not None:
            what += f" ({labels[i]})"
        err = check_value(f"partial-{i}", expected[i], user_value, what)
        if err:
            errors.append(err)

    return errors


def check_sum(expected: int, actual: Optional[int]) -> List[FieldError]:
    err = check_value("sum", expected, actual, "Sum")
    return [err] if err else []


def result_from(errors: List[FieldError]) -> ValidationResult:
    return ValidationResult(is_correct=not errors, errors=errors or None)


def all_filled(values: Sequence[Optional[int]]) -> bool:
    return all(v is not None for v in values)
