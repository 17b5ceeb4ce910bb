"""
Test fixtures shared across all API Inspector tests.
"""

import httpx
import pytest

from api_inspector.core.analyzer import ApiAnalyzer
from api_inspector.core.evaluation import EvaluationContext
from api_inspector.core.rule_selector import select_rules
from api_inspector.models.probe_models import HttpMethod, ProbedEndpoint


USERS = [
    {
        "id": i,
        "name": f"User {i}",
        "email": f"user{i}@example.com",
        "createdAt": f"2024-01-0{i}T10:00:00Z",
    }
    for i in (1, 2, 3)
]

COMMON_HEADERS = {
    "cache-control": "max-age=60",
    "x-content-type-options": "nosniff",
}


def sample_api(request: httpx.Request) -> httpx.Response:
    """A small users API: /users collection and /users/{id} items, 404 elsewhere."""
    path = request.url.path
    method = request.method

    if path == "/users":
        if method in ("HEAD", "GET"):
            return httpx.Response(200, json=USERS, headers=COMMON_HEADERS)
        if method == "OPTIONS":
            return httpx.Response(204, headers={"access-control-allow-origin": "*"})
        if method == "POST":
            return httpx.Response(201, json={"id": 4})
        return httpx.Response(405)

    if path == "/users/1":
        if method in ("HEAD", "GET"):
            return httpx.Response(200, json=USERS[0], headers=COMMON_HEADERS)
        if method == "OPTIONS":
            return httpx.Response(204, headers={"access-control-allow-origin": "*"})
        if method in ("PUT", "PATCH"):
            return httpx.Response(200, json=USERS[0])
        if method == "DELETE":
            return httpx.Response(200, json={})
        return httpx.Response(405)

    return httpx.Response(404, json={"error": "Not found"})


@pytest.fixture
def sample_transport():
    """Mock transport serving the sample users API."""
    return httpx.MockTransport(sample_api)


@pytest.fixture
def unreachable_transport():
    """Mock transport where every request fails to connect."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    return httpx.MockTransport(handler)


@pytest.fixture
def analyzer(sample_transport):
    return ApiAnalyzer(transport=sample_transport, verify_host=False)


@pytest.fixture
def make_endpoint():
    """Factory for ProbedEndpoint with GET/HEAD support and every method probed by default."""

    def _make(path="/users", **kwargs):
        kwargs.setdefault("allowed_methods", frozenset({HttpMethod.HEAD, HttpMethod.GET}))
        kwargs.setdefault("status_by_method", {HttpMethod.HEAD: 200, HttpMethod.GET: 200})
        kwargs.setdefault("probed_methods", frozenset(HttpMethod))
        return ProbedEndpoint(path=path, url=f"https://api.example.com{path}", **kwargs)

    return _make


@pytest.fixture
def make_context():
    """Factory for EvaluationContext over the given endpoints."""

    def _make(endpoints, source="all", service_url="https://api.example.com", credentials=False):
        return EvaluationContext(
            service_url=service_url,
            endpoints=tuple(endpoints),
            rules=select_rules(source),
            credentials_supplied=credentials,
        )

    return _make
