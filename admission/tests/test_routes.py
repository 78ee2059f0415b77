"""
API tests for the admission router, using FastAPI's TestClient against an
in-memory database with the AI advisor disabled.
"""

import pytest
from fastapi.testclient import TestClient

from main import create_app
from admission.ai.advisor import AIAdvisor
from admission.logic import AdmissionEngine
from admission.logic.constants import FALLBACK_NOTE


@pytest.fixture
def client():
    app = create_app(
        database_url="sqlite://",
        engine=AdmissionEngine(current_year=2026),
        advisor=AIAdvisor(enabled=False),
    )
    with TestClient(app) as test_client:
        yield test_client


def test_analyze_returns_result(client, strong_data):
    response = client.post("/admission/analyze", json={"form_data": strong_data, "user_id": 1})
    assert response.status_code == 200

    body = response.json()
    assert body["success"] is True
    assert body["request_id"]
    assert body["note"] == FALLBACK_NOTE

    result = body["result"]
    assert result["overall_grade"] == "A"
    assert result["is_fallback_mode"] is True
    assert [c["chance"] for c in result["college_chances"]] == ["Low (21%)", "Medium (60%)"]
    assert [c["color"] for c in result["college_chances"]] == ["red-500", "yellow-500"]
    assert len(result["improvement_plan"]) <= 10


def test_missing_major_is_rejected(client, strong_data):
    del strong_data["major"]
    response = client.post("/admission/analyze", json={"form_data": strong_data})

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "Validation error"
    assert "major" in [error["path"] for error in body["errors"]]


def test_missing_gpa_is_rejected(client, strong_data):
    strong_data["academics"]["gpa"] = ""
    response = client.post("/admission/analyze", json={"form_data": strong_data})

    assert response.status_code == 400
    assert "academics.gpa" in [error["path"] for error in response.json()["errors"]]


def test_stored_result_can_be_fetched(client, strong_data):
    posted = client.post("/admission/analyze", json={"form_data": strong_data}).json()

    response = client.get(f"/admission/results/{posted['request_id']}")
    assert response.status_code == 200
    assert response.json()["result"] == posted["result"]


def test_unknown_result_is_404(client):
    assert client.get("/admission/results/does-not-exist").status_code == 404


def test_user_results(client, strong_data):
    client.post("/admission/analyze", json={"form_data": strong_data, "user_id": 5})
    client.post("/admission/analyze", json={"form_data": strong_data, "user_id": 5})

    body = client.get("/admission/users/5/results").json()
    assert body["count"] == 2
    assert client.get("/admission/users/6/results").json()["count"] == 0


def test_health(client):
    body = client.get("/admission/health").json()
    assert body["status"] == "ok"
    assert body["ai_advisor_enabled"] is False


def test_missing_form_data_uses_validation_envelope(client):
    response = client.post("/admission/analyze", json={"user_id": 1})

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "Validation error"
    assert "form_data" in [error["path"] for error in body["errors"]]


def test_non_object_form_data_is_rejected(client):
    response = client.post("/admission/analyze", json={"form_data": ["not", "a", "form"]})

    assert response.status_code == 400
    assert response.json()["message"] == "Validation error"


def test_run_serves_app_with_uvicorn(monkeypatch):
    import main

    calls = []
    monkeypatch.setattr(main.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
    monkeypatch.setenv("PORT", "9001")
    monkeypatch.delenv("HOST", raising=False)
    main.run()

    assert calls == [(main.app, {"host": "0.0.0.0", "port": 9001})]
