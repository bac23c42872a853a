# mathcat/validators/area_model.py
"""
Area model: a grid with one row per place-value part of the multiplier and one
column per part of the multiplicand. Each cell holds row part × column part.

    23 × 45          20     3
               40   800   120
                5   100    15
"""

from __future__ import annotations

from typing import List

from mathcat.place_value import get_place_value_components
from mathcat.validators.common import (
    check_sum,
    check_value,
    operation_error,
    require_multiplication,
    result_from,
)
from schemas.problems import Problem
from schemas.steps import (
    AreaModelCell,
    AreaModelExpected,
    AreaModelInputs,
    FieldError,
    ValidationResult,
)

METHOD_NAME = "Area Model"


def cell_key(row: int, col: int) -> str:
    return f"{row}-{col}"


def calculate_expected(problem: Problem) -> AreaModelExpected:
    require_multiplication(problem, METHOD_NAME)
    multiplicand, multiplier = problem.operands

    multiplicand_parts = get_place_value_components(multiplicand)
    multiplier_parts = get_place_value_components(multiplier)

    cells = [
        AreaModelCell(
            row=row,
            col=col,
            row_value=row_value,
            col_value=col_value,
            expected=row_value * col_value,
        )
        for row, row_value in enumerate(multiplier_parts)
        for col, col_value in enumerate(multiplicand_parts)
    ]

    return AreaModelExpected(
        cells=cells,
        multiplicand_parts=multiplicand_parts,
        multiplier_parts=multiplier_parts,
        sum=multiplicand * multiplier,
    )


def validate(problem: Problem, inputs: AreaModelInputs) -> ValidationResult:
    if problem.operation != "multiplication":
        return operation_error(problem, METHOD_NAME)

    expected = calculate_expected(problem)
    errors: List[FieldError] = []

    # keys outside the grid are ignored
    for cell in expected.cells:
        key = cell_key(cell.row, cell.col)
        err = check_value(
            f"cell-{key}",
            cell.expected,
            inputs.cells.get(key),
            f"Cell ({cell.row_value} × {cell.col_value})",
        )
        if err:
            errors.append(err)

    errors.extend(check_sum(expected.sum, inputs.sum))
    return result_from(errors)


def is_complete(problem: Problem, inputs: AreaModelInputs) -> bool:
    expected = calculate_expected(problem)
    cells_filled = all(
        inputs.cells.get(cell_key(cell.row, cell.col)) is not None for cell in expected.cells
    )
    return cells_filled and inputs.sum is not None
