"""
Tests for OpenAPI document retrieval and generation.
"""

import asyncio

import httpx
import pytest

from api_inspector.core.errors import InvalidServiceUrlError
from api_inspector.core.openapi import generate_document, get_openapi_document
from api_inspector.models.probe_models import HttpMethod


def _fetch(transport, url="http://api.test"):
    return asyncio.run(get_openapi_document(url, transport=transport, verify_host=False))


def test_published_document_preferred():
    published = {"openapi": "3.1.0", "info": {"title": "Published", "version": "2"}, "paths": {}}
    requested = []

    def handler(request):
        requested.append(request.url.path)
        if request.url.path == "/swagger.json":
            return httpx.Response(200, json=published)
        if request.url.path == "/openapi.json":
            # JSON, but not an OpenAPI document
            return httpx.Response(200, json={"hello": "world"})
        return httpx.Response(404)

    document = _fetch(httpx.MockTransport(handler))
    assert document == published
    assert requested == ["/openapi.json", "/swagger.json"]


def test_generated_from_discovery(sample_transport):
    document = _fetch(sample_transport)

    assert document["openapi"] == "3.0.0"
    assert document["info"]["title"] == "test API"
    assert document["servers"][0]["url"] == "http://api.test"

    users = document["paths"]["/users"]
    assert set(users) == {"get", "post", "options"}
    assert users["get"]["operationId"] == "get_users"
    assert users["get"]["tags"] == ["users"]
    assert users["get"]["summary"] == "Get users"
    example = users["get"]["responses"]["200"]["content"]["application/json"]["schema"]["example"]
    assert len(example) == 2
    assert [p["name"] for p in users["get"]["parameters"]] == ["limit", "offset"]
    assert users["post"]["responses"]["201"]["description"] == "Resource created successfully"
    assert set(users["post"]["responses"]) == {"201", "400", "404"}

    item = document["paths"]["/users/1"]
    assert item["delete"]["responses"]["200"]["description"] == "Resource deleted"
    assert "404" in item["delete"]["responses"]
    assert {"name": "users", "description": "users operations"} in document["tags"]


def test_placeholder_when_nothing_discovered():
    document = generate_document("https://api.example.com", [])
    root = document["paths"]["/"]["get"]
    assert root["summary"] == "Root endpoint"
    assert "No endpoints were discovered" in root["description"]
    assert document["info"]["title"] == "example API"
    assert document["tags"] == [{"name": "default", "description": "default operations"}]


def test_root_endpoint_documented_as_slash(make_endpoint):
    endpoint = make_endpoint(
        "",
        allowed_methods=frozenset({HttpMethod.HEAD, HttpMethod.GET}),
        status_by_method={HttpMethod.HEAD: 200, HttpMethod.GET: 200},
        body_sample={"status": "ok"},
    )
    document = generate_document("https://api.example.com", [endpoint])
    get = document["paths"]["/"]["get"]
    assert get["tags"] == ["default"]
    assert get["summary"] == "Get root"
    assert "parameters" not in get


def test_invalid_url_rejected(sample_transport):
    with pytest.raises(InvalidServiceUrlError):
        _fetch(sample_transport, url="nope")
