from fastapi.testclient import TestClient

from main import app

client = TestClient(app)


def _seed(worksheet_id):
    r = client.post(
        f"/progress/{worksheet_id}/problems/p1",
        json={
            "state": {
                "problem_id": "p1",
                "current_method": "area-model",
                "is_complete": True,
                "is_correct": True,
            }
        },
    )
    assert r.json()["saved"] is True


def test_admin_clear_unauthorized(monkeypatch):
    monkeypatch.setenv("ADMIN_TOKEN", "secret")
    r = client.delete("/admin/progress/admin-ws")
    assert r.status_code == 401


def test_admin_clear_not_configured(monkeypatch):
    monkeypatch.delenv("ADMIN_TOKEN", raising=False)
    r = client.delete("/admin/progress/admin-ws", headers={"x-admin-token": "anything"})
    assert r.status_code == 500


def test_admin_clear_ok(monkeypatch):
    monkeypatch.setenv("ADMIN_TOKEN", "secret")
    _seed("admin-ws")

    r = client.delete("/admin/progress/admin-ws", headers={"x-admin-token": "secret"})
    assert r.status_code == 200 and r.json() == {"ok": True, "removed": True}

    again = client.delete("/admin/progress/admin-ws", headers={"x-admin-token": "secret"})
    assert again.json()["removed"] is False
    assert client.get("/progress/admin-ws").json()["problem_states"] == {}
