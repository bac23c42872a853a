# mathcat/validators/partial_products.py
"""
Partial products: every nonzero digit of the multiplicand times every nonzero
digit of the multiplier, each at its place value.

    23 × 45  ->  3 × 5 = 15, 20 × 5 = 100, 3 × 40 = 120, 20 × 40 = 800
"""

from __future__ import annotations

from typing import List

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
from schemas.steps import (
    PartialProduct,
    PartialProductsExpected,
    PartialProductsInputs,
    ValidationResult,
)

METHOD_NAME = "Partial Products"


def calculate_expected(problem: Problem) -> PartialProductsExpected:
    require_multiplication(problem, METHOD_NAME)
    multiplicand, multiplier = problem.operands

    products: List[PartialProduct] = []
    for m_place, m_digit in enumerate(digits_right_to_left(multiplier)):
        if m_digit == 0:
            continue
        for c_place, c_digit in enumerate(digits_right_to_left(multiplicand)):
            if c_digit == 0:
                continue
            products.append(
                PartialProduct(
                    value=c_digit * m_digit * 10 ** (c_place + m_place),
                    label=f"{c_digit * 10**c_place} × {m_digit * 10**m_place}",
                )
            )

    # stable: equal values keep generation order
    products.sort(key=lambda p: p.value)
    return PartialProductsExpected(partials=products, sum=multiplicand * multiplier)


def validate(problem: Problem, inputs: PartialProductsInputs) -> ValidationResult:
    if problem.operation != "multiplication":
        return operation_error(problem, METHOD_NAME)

    expected = calculate_expected(problem)
    errors = check_partials(
        [p.value for p in expected.partials],
        inputs.partials,
        labels=[p.label for p in expected.partials],
    )
    errors.extend(check_sum(expected.sum, inputs.sum))
    return result_from(errors)


def is_complete(problem: Problem, inputs: PartialProductsInputs) -> bool:
    expected = calculate_expected(problem)
    return (
        len(inputs.partials) == len(expected.partials)
        and all_filled(inputs.partials)
        and inputs.sum is not None
    )
