# aia_assess/tests/test_api.py
import pytest
from fastapi.testclient import TestClient

from aia_assess.dependencies import get_catalog
from aia_assess.engine.catalog import QuestionCatalog
from aia_assess.main import app


@pytest.fixture
def client():
    # context manager runs the lifespan hook that loads the catalog
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def _post(client, path, payload):
    return client.post(path, json=payload)


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "healthy"


# -------------------------
# ANALYZE
# -------------------------
def test_analyze_auto_answers(client):
    r = _post(client, "/api/analyze", {
        "projectName": "Vendor tool",
        "projectDescription": "developed by a third-party vendor",
    })
    assert r.status_code == 200, r.text
    data = r.json()

    assert data["projectName"] == "Vendor tool"
    assert len(data["autoAnswered"]) == 1
    auto = data["autoAnswered"][0]
    assert auto["questionId"] == "system_002"
    assert auto["selectedOptionText"] == "Non-government third party"
    assert auto["confidence"] == "high"

    manual = data["needsManualInput"]
    assert len(manual) == 19
    assert {"questionId", "type", "options", "reasoning"} <= set(manual[0])

    partial = data["partialAssessment"]
    assert partial["completionPercentage"] == 5.0
    assert partial["impactLevel"] == "I"
    assert r.headers["X-Catalog-Version"] == "aia-sample-20"


def test_analyze_without_matches_omits_partial(client):
    r = _post(client, "/api/analyze", {
        "projectName": "Newsletter",
        "projectDescription": "Quarterly newsletter for the office.",
    })
    assert r.status_code == 200
    data = r.json()
    assert data["autoAnswered"] == []
    assert data["completionPercentage"] == 0
    assert "partialAssessment" not in data


@pytest.mark.parametrize(
    "payload",
    [
        {"projectDescription": "text"},
        {"projectName": "P"},
        {"projectName": "", "projectDescription": "text"},
    ],
)
def test_analyze_missing_fields(client, payload):
    r = _post(client, "/api/analyze", payload)
    assert r.status_code == 400
    assert r.json()["error"] == "VALIDATION_ERROR"


def test_analyze_echoes_names_verbatim(client):
    r = _post(client, "/api/analyze", {"projectName": "  Padded  ", "projectDescription": "Fully automated."})
    assert r.status_code == 200
    assert r.json()["projectName"] == "  Padded  "

    r = _post(client, "/api/analyze", {"projectName": "   ", "projectDescription": "text"})
    assert r.status_code == 200
    assert r.json()["projectName"] == "   "


# -------------------------
# ASSESS
# -------------------------
def test_assess_without_responses_prompts(client):
    r = _post(client, "/api/assess", {"projectName": "P", "projectDescription": "D"})
    assert r.status_code == 200
    data = r.json()
    assert data["message"].startswith("Please provide responses")
    assert len(data["questions"]) == 20
    assert data["questions"][0]["id"] == "project_001"
    first = data["questions"][0]
    assert set(first) == {"id", "category", "subcategory", "question", "type", "options"}
    assert "maxScore" not in first

    listed = client.get("/api/questions").json()
    assert listed[0]["maxScore"] == 4


def test_assess_with_responses(client):
    r = _post(client, "/api/assess", {
        "projectName": "Benefits",
        "projectDescription": "Eligibility triage",
        "responses": [
            {"questionId": "decision_001", "selectedOption": 3},
            {"questionId": "impact_001", "selectedOption": 3},
            {"questionId": "data_001", "selectedOption": 2},
        ],
    })
    assert r.status_code == 200, r.text
    data = r.json()
    assert data["rawImpactScore"] == 15
    assert data["scorePercentage"] == 30.61
    assert data["impactLevel"] == "II"
    assert data["impactLevelDescription"] == "Moderate impact"
    assert data["responses"][0] == {"questionId": "decision_001", "selectedOption": 3, "score": 8}
    assert "timestamp" in data


def test_assess_invalid_option(client):
    r = _post(client, "/api/assess", {
        "projectName": "P",
        "projectDescription": "D",
        "responses": [{"questionId": "project_003", "selectedOption": 99}],
    })
    assert r.status_code == 400
    assert r.json()["error"] == "INVALID_OPTION"


def test_assess_unknown_question(client):
    r = _post(client, "/api/assess", {
        "projectName": "P",
        "projectDescription": "D",
        "responses": [{"questionId": "ghost_001", "selectedOption": 0}],
    })
    assert r.status_code == 400
    assert r.json()["error"] == "UNKNOWN_QUESTION"


def test_broken_catalog_is_server_error(client):
    only_mitigation = QuestionCatalog.from_records([
        {
            "id": "m1",
            "category": "De-risking",
            "subcategory": "Test",
            "question": "Mitigated?",
            "type": "mitigation",
            "maxScore": 1,
            "options": [{"text": "No", "score": 0}, {"text": "Yes", "score": 1}],
        }
    ])
    app.dependency_overrides[get_catalog] = lambda: only_mitigation

    r = _post(client, "/api/assess", {
        "projectName": "P",
        "projectDescription": "D",
        "responses": [{"questionId": "m1", "selectedOption": 1}],
    })
    assert r.status_code == 500
    assert r.json()["error"] == "CONFIGURATION_ERROR"


# -------------------------
# QUESTIONS / DOCS
# -------------------------
def test_questions_filters(client):
    r = client.get("/api/questions", params={"category": "Data"})
    assert r.status_code == 200
    assert [q["id"] for q in r.json()] == ["data_001", "data_002", "data_003"]

    r = client.get("/api/questions", params={"type": "mitigation"})
    assert all(q["type"] == "mitigation" for q in r.json())
    assert len(r.json()) == 6

    r = client.get("/api/questions", params={"category": "Consultations", "type": "risk"})
    assert r.json() == []


def test_questions_unmatched_filter_is_empty(client):
    for params in ({"category": "Astrology"}, {"category": "data"}, {"type": "benefit"}):
        r = client.get("/api/questions", params=params)
        assert r.status_code == 200
        assert r.json() == []


def test_api_docs(client):
    r = client.get("/api/docs")
    assert r.status_code == 200
    assert "POST /api/analyze" in r.json()["endpoints"]


# -------------------------
# SERVER SCRIPT
# -------------------------
def test_run_server_starts_uvicorn(monkeypatch):
    from scripts import run_server

    monkeypatch.delenv("HOST", raising=False)
    calls = []
    monkeypatch.setattr(run_server.uvicorn, "run", lambda app, **kw: calls.append((app, kw)))
    run_server.main(["--port", "8123"])
    assert calls == [("aia_assess.main:app", {"host": "0.0.0.0", "port": 8123, "reload": False})]
