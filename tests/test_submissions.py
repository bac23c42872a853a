from fastapi.testclient import TestClient

from main import app

client = TestClient(app)

PROBLEM = {"id": "sub-12x3", "operands": [12, 3], "difficulty": "easy"}


def _submit(partials, total):
    r = client.post(
        "/methods/classic-algorithm/validate",
        json={"problem": PROBLEM, "inputs": {"partials": partials, "sum": total}},
    )
    assert r.status_code == 200
    return r.json()["submission_id"]


def test_get_submission_roundtrip():
    sid = _submit([36], 35)
    assert isinstance(sid, int)

    r = client.get(f"/submissions/{sid}")
    assert r.status_code == 200
    body = r.json()
    assert body["id"] == sid
    assert body["problem_id"] == "sub-12x3"
    assert body["method"] == "classic-algorithm"
    assert body["operands"] == [12, 3]
    assert body["is_correct"] is False
    assert body["error_count"] == 1
    assert body["errors"][0]["field"] == "sum"
    assert body["duration_ms"] >= 0
    assert "created_at" in body


def test_submission_404():
    r = client.get("/submissions/999999")
    assert r.status_code == 404


def test_recent_list_requires_key(monkeypatch):
    monkeypatch.setenv("MATHCAT_API_KEY", "k")
    r = client.get("/submissions/recent-list")
    assert r.status_code == 401


def test_recent_list_with_api_key(monkeypatch):
    monkeypatch.setenv("MATHCAT_API_KEY", "k")
    sid = _submit([36], 36)
    r = client.get(
        "/submissions/recent-list",
        params={"method": "classic-algorithm", "limit": 5},
        headers={"x-api-key": "k"},
    )
    assert r.status_code == 200
    body = r.json()
    assert body["ok"] is True
    assert 1 <= body["count"] <= 5
    assert body["items"][0]["id"] == sid
    assert "errors" not in body["items"][0]


def test_recent_list_with_admin_token(monkeypatch):
    monkeypatch.setenv("ADMIN_TOKEN", "secret")
    monkeypatch.delenv("MATHCAT_API_KEY", raising=False)
    r = client.get("/submissions/recent-list", headers={"x-admin-token": "secret"})
    assert r.status_code == 200
