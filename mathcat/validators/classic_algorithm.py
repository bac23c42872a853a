# mathcat/validators/classic_algorithm.py
"""
Classic (long) multiplication: one partial product per multiplier digit,
right to left, each already shifted by its place.

    23 × 45  ->  23 × 5 = 115, 23 × 40 = 920, sum 1035

A zero digit still gets its row (value 0). UIs that show the trailing zeros
as fixed cells compare against ``unshift_partials`` instead.
"""

from __future__ import annotations

from typing import List, Sequence

from mathcat.place_value import digits_right_to_left
from mathcat.validators.common import (
    all_filled,
    check_partials,
    check_sum,
    operation_error,
    require_multiplication,
    result_from,
)
from schemas.problems import Problem
from schemas.steps import ClassicAlgorithmExpected, ClassicAlgorithmInputs, ValidationResult

METHOD_NAME = "Classic Algorithm"


def calculate_expected(problem: Problem) -> ClassicAlgorithmExpected:
    require_multiplication(problem, METHOD_NAME)
    multiplicand, multiplier = problem.operands

    partials = [
        multiplicand * digit * 10**place
        for place, digit in enumerate(digits_right_to_left(multiplier))
    ]
    return ClassicAlgorithmExpected(partials=partials, sum=multiplicand * multiplier)


def unshift_partials(partials: Sequence[int]) -> List[int]:
    return [value // 10**place for place, value in enumerate(partials)]


def validate(problem: Problem, inputs: ClassicAlgorithmInputs) -> ValidationResult:
    if problem.operation != "multiplication":
        return operation_error(problem, METHOD_NAME)

    expected = calculate_expected(problem)
    errors = check_partials(expected.partials, inputs.partials)
    errors.extend(check_sum(expected.sum, inputs.sum))
    return result_from(errors)


def is_complete(problem: Problem, inputs: ClassicAlgorithmInputs) -> bool:
    expected = calculate_expected(problem)
    return (
        len(inputs.partials) == len(expected.partials)
        and all_filled(inputs.partials)
        and inputs.sum is not None
    )
