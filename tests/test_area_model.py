import random

import pytest

from mathcat.place_value import decompose
from mathcat.validators import area_model
from mathcat.validators.common import UnsupportedOperationError
from schemas.problems import Problem
from schemas.steps import AreaModelInputs


def _problem(a, b):
    return Problem(id=f"p-{a}-{b}", operands=(a, b))


def _cells(expected):
    return {f"{c.row}-{c.col}": c.expected for c in expected.cells}


def test_grid_for_23_times_45():
    expected = area_model.calculate_expected(_problem(23, 45))
    assert expected.multiplicand_parts == [20, 3]
    assert expected.multiplier_parts == [40, 5]
    assert len(expected.cells) == 4
    cells = {(c.row, c.col): c for c in expected.cells}
    assert cells[(0, 0)].expected == 800
    assert (cells[(0, 0)].row_value, cells[(0, 0)].col_value) == (40, 20)
    assert cells[(1, 1)].expected == 15
    assert cells[(0, 1)].expected == 120
    assert cells[(1, 0)].expected == 100
    assert expected.sum == 1035


def test_interior_zero_digit_has_no_part():
    expected = area_model.calculate_expected(_problem(305, 4))
    assert expected.multiplicand_parts == [300, 5]
    assert [c.expected for c in expected.cells] == [1200, 20]
    assert expected.sum == 1220


def test_calculation_is_repeatable():
    p = _problem(234, 56)
    assert area_model.calculate_expected(p) == area_model.calculate_expected(p)


def test_cell_count_and_sum_invariants():
    rng = random.Random(21)
    for _ in range(300):
        a, b = rng.randint(1, 9999), rng.randint(1, 999)
        expected = area_model.calculate_expected(_problem(a, b))
        assert len(expected.cells) == len(decompose(a)) * len(decompose(b))
        assert sum(c.expected for c in expected.cells) == a * b == expected.sum


def test_expected_values_validate_as_correct():
    rng = random.Random(22)
    for _ in range(100):
        p = _problem(rng.randint(10, 9999), rng.randint(1, 999))
        expected = area_model.calculate_expected(p)
        inputs = AreaModelInputs(cells=_cells(expected), sum=expected.sum)
        result = area_model.validate(p, inputs)
        assert result.is_correct is True
        assert result.errors is None
        assert area_model.is_complete(p, inputs)


def test_missing_and_incorrect_cells():
    p = _problem(23, 45)
    inputs = AreaModelInputs(cells={"0-0": 800, "0-1": 12, "1-0": None}, sum=1035)
    result = area_model.validate(p, inputs)
    fields = {e.field: e for e in result.errors}
    assert set(fields) == {"cell-0-1", "cell-1-0", "cell-1-1"}
    assert "incorrect" in fields["cell-0-1"].message
    assert fields["cell-0-1"].expected == 120
    assert fields["cell-0-1"].actual == 12
    assert "missing" in fields["cell-1-0"].message
    assert "missing" in fields["cell-1-1"].message
    assert fields["cell-1-1"].message == "Cell (5 × 3) is missing"


def test_extra_keys_are_ignored():
    p = _problem(23, 45)
    cells = {"0-0": 800, "0-1": 120, "1-0": 100, "1-1": 15, "7-7": 99}
    assert area_model.validate(p, AreaModelInputs(cells=cells, sum=1035)).is_correct


def test_missing_sum():
    p = _problem(12, 3)
    result = area_model.validate(p, AreaModelInputs(cells={"0-0": 30, "0-1": 6}))
    assert [e.field for e in result.errors] == ["sum"]
    assert "missing" in result.errors[0].message


def test_is_complete():
    p = _problem(23, 45)
    assert not area_model.is_complete(p, AreaModelInputs(cells={"0-0": 1}, sum=1))
    assert not area_model.is_complete(
        p, AreaModelInputs(cells={"0-0": 1, "0-1": 1, "1-0": 1, "1-1": 1})
    )
    assert area_model.is_complete(
        p, AreaModelInputs(cells={"0-0": 1, "0-1": 1, "1-0": 1, "1-1": 1}, sum=1)
    )


def test_non_multiplication():
    p = Problem(id="f1", operation="fraction-decimal", operands=(1, 4), correct_answer="0.25")
    with pytest.raises(UnsupportedOperationError):
        area_model.calculate_expected(p)
    result = area_model.validate(p, AreaModelInputs())
    assert result.is_correct is False
    assert [e.field for e in result.errors] == ["operation"]
