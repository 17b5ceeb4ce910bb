"""
Tests for the FastAPI surface — integration tests over mock target services.
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from api_inspector.api.dependencies import get_analyzer
from api_inspector.core.analyzer import ApiAnalyzer
from api_inspector.core.catalog import DESIGN_RULES, RULE_SOURCES
from api_inspector.core.rule_engine import EvaluatorUnit, RuleEngine
from api_inspector.main import app


@pytest.fixture
def client(analyzer):
    app.dependency_overrides[get_analyzer] = lambda: analyzer
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health_check(client):
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["version"] == "1.0.0"
    assert data["rules"] == len(DESIGN_RULES)


def test_analyze_returns_report(client):
    response = client.post("/analyze", json={"serviceUrl": "http://api.test"})
    assert response.status_code == 200
    data = response.json()
    assert data["serviceName"] == "test"
    assert 0 <= data["overallScore"] <= 100
    assert data["violations"]
    violation = data["violations"][0]
    assert {"id", "ruleId", "ruleName", "severity", "sourceName"} <= set(violation)
    assert data["summary"]["totalRules"] == len(DESIGN_RULES)


def test_analyze_with_source_filter(client):
    response = client.post(
        "/analyze",
        json={"serviceUrl": "http://api.test", "sourceFilter": "owasp"},
    )
    assert response.status_code == 200
    owasp = next(s for s in RULE_SOURCES if s.id == "owasp")
    assert all(v["ruleId"] in owasp.rule_ids for v in response.json()["violations"])


def test_analyze_missing_url(client):
    response = client.post("/analyze", json={})
    assert response.status_code == 400
    assert response.json() == {"error": "Missing required parameter: serviceUrl"}


def test_analyze_invalid_url(client):
    response = client.post("/analyze", json={"serviceUrl": "example"})
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid URL format"}


def test_analyze_engine_failure(sample_transport):
    def explode(ctx):
        raise RuntimeError("boom")

    failing = ApiAnalyzer(
        transport=sample_transport,
        verify_host=False,
        engine=RuleEngine([EvaluatorUnit("explode", ("rest-001",), explode)]),
    )
    app.dependency_overrides[get_analyzer] = lambda: failing
    try:
        response = TestClient(app).post("/analyze", json={"serviceUrl": "http://api.test"})
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {
        "error": "Internal server error",
        "message": "Failed to analyze API: boom",
    }


def test_analyze_malformed_body_is_422(client):
    response = client.post("/analyze", json={"serviceUrl": "http://api.test", "auth": {"type": "magic"}})
    assert response.status_code == 422
    assert "detail" in response.json()


def test_openapi_generated(client):
    response = client.post("/openapi", json={"serviceUrl": "http://api.test"})
    assert response.status_code == 200
    data = response.json()
    assert data["openapi"] == "3.0.0"
    assert "/users" in data["paths"]


def test_openapi_missing_url(client):
    response = client.post("/openapi", json={})
    assert response.status_code == 400
    assert response.json() == {"error": "Missing required parameter: serviceUrl"}


def test_rules_listing(client):
    response = client.get("/rules", params={"source": "google"})
    assert response.status_code == 200
    data = response.json()
    assert data["source"] == "google"
    assert data["total"] == 9
    assert data["rules"][0]["id"] == "rest-001"
    assert "sourceName" in data["rules"][0]


def test_rules_default_lists_all(client):
    data = client.get("/rules").json()
    assert data["total"] == len(DESIGN_RULES)


def test_sources_listing(client):
    data = client.get("/sources").json()
    assert [s["id"] for s in data] == [s.id for s in RULE_SOURCES]
    google = next(s for s in data if s["id"] == "google")
    assert google["ruleIds"] == sorted(google["ruleIds"])
    assert "rest-001" in google["ruleIds"]
