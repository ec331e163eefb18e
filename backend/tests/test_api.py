from fastapi.testclient import TestClient

from api.dependencies import get_settings
from config import Settings
from main import app

client = TestClient(app)

TALENT = {
    "id": "talent-1",
    "current_role_level": "L3",
    "current_store_tier": "T2",
    "divisions_expertise": ["fashion"],
    "years_in_luxury": 6,
    "current_location": "Paris",
    "onboarding_completed": True,
}

OPPORTUNITY = {
    "id": "opp-1",
    "role_level": "L3",
    "division": "fashion",
    "store": {"id": "s1", "tier": "T2", "city": "Paris", "region": "EMEA"},
}


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["assessment_version"] == "v1"
    assert data["match_engine_version"] == "v1.0"


def test_questions():
    response = client.get("/assessments/questions")
    assert response.status_code == 200
    questions = response.json()
    assert len(questions) == 12
    assert questions[0]["id"] == "se-1"


def test_score_full_assessment(max_answers):
    response = client.post("/assessments/score", json={"answers": max_answers})
    assert response.status_code == 200
    data = response.json()
    assert data["scores"]["clienteling"] == 100
    assert data["insights"]["overall_score"] == 100
    assert data["version"] == "v1"
    assert data["unanswered_dimensions"] == []


def test_partial_assessment_rejected():
    response = client.post("/assessments/score", json={"answers": {"se-1": "a"}})
    assert response.status_code == 422
    assert "clienteling" in response.json()["detail"]


def test_partial_assessment_allowed_when_configured():
    app.dependency_overrides[get_settings] = lambda: Settings(allow_partial_assessment=True)
    try:
        response = client.post("/assessments/score", json={"answers": {"se-1": "a"}})
    finally:
        app.dependency_overrides.clear()
    assert response.status_code == 200
    data = response.json()
    assert data["scores"]["service_excellence"] == 100
    assert data["scores"]["operations"] == 0
    assert "operations" in data["unanswered_dimensions"]


def test_projection():
    response = client.post(
        "/projections",
        json={
            "current_role_level": "L2",
            "years_in_luxury": 4,
            "assessment_summary": {
                "service_excellence": 80,
                "clienteling": 80,
                "operations": 80,
                "leadership_signals": 80,
            },
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["next_role"]["level"] == "L3"
    assert data["next_role"]["readiness"] == "ready_now"
    assert data["timeline_estimate"] == {"min_months": 9, "max_months": 18}


def test_projection_rejects_unknown_level():
    response = client.post("/projections", json={"current_role_level": "L9"})
    assert response.status_code == 422


def test_match_score():
    response = client.post("/matches/score", json={"talent": TALENT, "opportunity": OPPORTUNITY})
    assert response.status_code == 200
    data = response.json()
    assert data["score_breakdown"]["role_fit"] == 100
    assert data["score_breakdown"]["capability_fit"] == 40
    assert data["compensation_alignment"] == "unknown"
    assert data["meets_threshold"] is True
    assert data["engine_version"] == "v1.0"


def test_match_talent_batch():
    paused = dict(OPPORTUNITY, id="opp-2", status="paused")
    response = client.post(
        "/matches/talent", json={"talent": TALENT, "opportunities": [OPPORTUNITY, paused]}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["count"] == 1
    assert data["matches"][0]["opportunity_id"] == "opp-1"


def test_match_opportunity_batch_inactive():
    closed = dict(OPPORTUNITY, status="filled")
    response = client.post("/matches/opportunity", json={"opportunity": closed, "talents": [TALENT]})
    assert response.status_code == 200
    assert response.json()["message"] == "Opportunity not active"


def test_learning_recommendations():
    talent = dict(TALENT, assessment_summary={"clienteling": 35})
    module = {
        "id": "cl-101",
        "title": "Client Book Basics",
        "category": "clienteling",
        "difficulty": "beginner",
        "target_role_levels": ["L3"],
        "target_gaps": ["clienteling"],
    }
    response = client.post(
        "/learning/recommendations", json={"talent": talent, "modules": [module]}
    )
    assert response.status_code == 200
    recs = response.json()
    assert [r["module"]["id"] for r in recs] == ["cl-101"]
    assert recs[0]["priority"] == 25


def test_learning_recommendations_default_catalog():
    talent = dict(TALENT, current_role_level="L2", assessment_summary={"clienteling": 35})
    response = client.post("/learning/recommendations", json={"talent": talent})
    assert response.status_code == 200
    assert [r["module"]["id"] for r in response.json()] == [
        "cl-basics", "cl-advanced", "cl-digital"
    ]


def test_learning_modules():
    response = client.get("/learning/modules")
    assert response.status_code == 200
    assert len(response.json()) == 15
