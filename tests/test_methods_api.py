from fastapi.testclient import TestClient

from main import app

client = TestClient(app)

PROBLEM = {"id": "q-23x45", "operands": [23, 45], "difficulty": "medium"}
DIVISION = {"id": "d-84/4", "operation": "division", "operands": [84, 4], "correct_answer": 21}


def test_partial_products_expected():
    r = client.post("/methods/partial-products/expected", json={"problem": PROBLEM})
    assert r.status_code == 200
    body = r.json()
    assert [p["value"] for p in body["partials"]] == [15, 100, 120, 800]
    assert body["sum"] == 1035


def test_partial_products_validate_one_wrong():
    r = client.post(
        "/methods/partial-products/validate",
        json={"problem": PROBLEM, "inputs": {"partials": [10, 100, 120, 800], "sum": 1035}},
    )
    assert r.status_code == 200
    body = r.json()
    assert body["is_correct"] is False
    assert body["is_complete"] is True
    assert [e["field"] for e in body["errors"]] == ["partial-0"]
    assert body["errors"][0]["expected"] == 15
    assert isinstance(body["submission_id"], int)


def test_area_model_roundtrip():
    r = client.post("/methods/area-model/expected", json={"problem": PROBLEM})
    cells = {f'{c["row"]}-{c["col"]}': c["expected"] for c in r.json()["cells"]}
    assert cells["0-0"] == 800 and cells["1-1"] == 15

    r2 = client.post(
        "/methods/area-model/validate",
        json={"problem": PROBLEM, "inputs": {"cells": cells, "sum": 1035}},
    )
    body = r2.json()
    assert body["is_correct"] is True
    assert body["errors"] is None
    assert body["is_complete"] is True


def test_classic_algorithm_partial_input():
    r = client.post(
        "/methods/classic-algorithm/validate",
        json={"problem": PROBLEM, "inputs": {"partials": [115, None]}},
    )
    body = r.json()
    assert body["is_correct"] is False
    assert body["is_complete"] is False
    fields = {e["field"]: e["message"] for e in body["errors"]}
    assert "missing" in fields["partial-1"]
    assert "missing" in fields["sum"]


def test_expected_rejects_division():
    r = client.post("/methods/classic-algorithm/expected", json={"problem": DIVISION})
    assert r.status_code == 400
    assert "only supports multiplication" in r.json()["detail"]


def test_validate_division_is_an_operation_error():
    r = client.post(
        "/methods/area-model/validate", json={"problem": DIVISION, "inputs": {"cells": {}}}
    )
    assert r.status_code == 200
    body = r.json()
    assert body["is_correct"] is False
    assert body["is_complete"] is False
    assert [e["field"] for e in body["errors"]] == ["operation"]


def test_inconsistent_answer_rejected():
    bad = {**PROBLEM, "correct_answer": 1000}
    r = client.post("/methods/partial-products/expected", json={"problem": bad})
    assert r.status_code == 422
