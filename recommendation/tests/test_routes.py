"""
HTTP surface of the recommendation engine.
"""

import contextlib

import pytest
from fastapi.testclient import TestClient

from db import get_db
from main import app


@pytest.fixture
def client():
    # No database session: the runner falls back to the built-in catalog
    app.dependency_overrides[get_db] = lambda: contextlib.nullcontext(None)
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_recommendation_health(client):
    data = client.get("/recommendations/health").json()
    assert data["status"] == "ok"
    assert data["version"]


def test_recommendations(client, helping_answers):
    response = client.post("/recommendations", json={"student_profile": helping_answers})
    assert response.status_code == 200
    body = response.json()

    assert body["success"] is True
    assert "ai_explanation" not in body
    data = body["data"]
    assert [c["cluster_id"] for c in data["top_clusters"]][0] == "C2"
    assert set(data["career_recommendations"]) == {"best_fit", "good_fit", "stretch_options"}
    assert "grade_9" not in data["four_year_plan"]
    assert data["generated_at"]


def test_explain_without_provider_still_succeeds(client, helping_answers):
    response = client.post("/recommendations", json={"student_profile": helping_answers, "explain": True})
    assert response.status_code == 200
    assert "ai_explanation" not in response.json()


def test_structural_error_is_400(client, make_answers):
    response = client.post("/recommendations", json={"student_profile": make_answers(grade=8)})
    assert response.status_code == 400
    assert "Invalid student profile" in response.json()["detail"]


def test_unrecognized_answer_is_422(client, make_answers):
    response = client.post(
        "/recommendations",
        json={"student_profile": make_answers(riskTolerance="Totally unsure what risk means")},
    )
    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["field"] == "riskTolerance"
    assert detail["value"] == "Totally unsure what risk means"
    assert detail["message"]


def test_blank_required_answer_is_422(client, make_answers):
    response = client.post("/recommendations", json={"student_profile": make_answers(supportLevel="")})
    assert response.status_code == 422
    assert response.json()["detail"]["field"] == "supportLevel"


def test_explanations_round_trip(client, helping_answers):
    data = client.post("/recommendations", json={"student_profile": helping_answers}).json()["data"]

    response = client.post("/recommendations/explanations", json={"recommendations": data, "profile": helping_answers})
    assert response.status_code == 200
    explanations = response.json()["data"]

    assert "Healthcare & Life Sciences" in explanations["overview"]
    assert len(explanations["cluster_explanations"]) == 3
    assert set(explanations["career_explanations"]) == {"best_fit", "good_fit", "stretch_options"}
    assert explanations["plan_explanation"].startswith("Your four-year plan starts in grade 10")
    assert explanations["next_steps"][-1].startswith("Meet with your school counselor")


def test_explanations_require_recommendations(client):
    response = client.post("/recommendations/explanations", json={})
    assert response.status_code == 400


def test_list_clusters(client):
    data = client.get("/recommendations/clusters").json()["data"]
    assert [c["id"] for c in data] == [f"C{i}" for i in range(1, 11)]
    assert set(data[0]["value_profile"]) == {"income", "stability", "helping", "risk"}


def test_list_options(client):
    data = client.get("/recommendations/options").json()["data"]
    assert "Very important" in data["single_choice"]["helpingImportance"]
    assert "Helping people directly" in data["multi_select"]["workStyle"]
    assert data["aliases"]["constraints"]["earn-quickly"] == "Start earning money as soon as possible"
