"""
OpenAPI Companion — Fetch a published OpenAPI document or synthesize one.

Well-known document locations are tried first, in order. When none of them
serves an OpenAPI/Swagger document, a 3.0.0 document is generated from the
endpoints the prober discovers.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from api_inspector.config import settings
from api_inspector.core.errors import InspectorError, InvalidServiceUrlError, OpenApiError
from api_inspector.core.prober import EndpointProber, validate_service_url
from api_inspector.core.report import extract_service_name
from api_inspector.models.probe_models import AuthConfig, HttpMethod, ProbedEndpoint

logger = logging.getLogger("api_inspector.openapi")

DOCUMENT_PATHS: tuple[str, ...] = (
    "/openapi.json",
    "/swagger.json",
    "/api-docs",
    "/v1/openapi.json",
    "/v2/openapi.json",
    "/v3/openapi.json",
    "/docs/openapi.json",
    "/api/openapi.json",
)

# Operation order inside a path item; HEAD is never documented
OPERATION_ORDER: tuple[HttpMethod, ...] = (
    HttpMethod.GET,
    HttpMethod.POST,
    HttpMethod.PUT,
    HttpMethod.PATCH,
    HttpMethod.DELETE,
    HttpMethod.OPTIONS,
)

EXAMPLE_ITEMS = 2

_NOT_FOUND = {"description": "Not Found - Resource does not exist"}
_BAD_REQUEST = {"description": "Bad Request - Invalid input"}


async def get_openapi_document(
    service_url: str | None,
    auth: AuthConfig | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    verify_host: bool | None = None,
) -> dict[str, Any]:
    """
    Return the service's own OpenAPI document, or a generated one.

    Raises:
        InvalidServiceUrlError: service_url is missing or malformed.
        OpenApiError: discovery failed while generating a document.
    """
    base_url = validate_service_url(service_url)
    auth = auth or AuthConfig()

    try:
        document = await fetch_existing_document(base_url, auth, transport)
        if document is not None:
            return document

        prober = EndpointProber(auth=auth, transport=transport, verify_host=verify_host)
        endpoints = await prober.discover(base_url)
    except InvalidServiceUrlError:
        raise
    except (InspectorError, httpx.HTTPError, OSError) as e:
        raise OpenApiError(str(e) or type(e).__name__) from e

    logger.info(f"Generated OpenAPI document for {base_url} from {len(endpoints)} endpoint(s)")
    return generate_document(base_url, endpoints)


async def fetch_existing_document(
    base_url: str,
    auth: AuthConfig,
    transport: httpx.AsyncBaseTransport | None = None,
) -> dict[str, Any] | None:
    headers = {"User-Agent": settings.user_agent, "Accept": "application/json", **auth.to_headers()}
    async with httpx.AsyncClient(
        timeout=settings.openapi_fetch_timeout_seconds,
        headers=headers,
        follow_redirects=True,
        transport=transport,
    ) as client:
        for path in DOCUMENT_PATHS:
            url = f"{base_url}{path}"
            try:
                response = await client.get(url)
                if not response.is_success:
                    continue
                document = response.json()
            except (httpx.HTTPError, ValueError) as e:
                logger.debug(f"No OpenAPI document at {url}: {type(e).__name__}")
                continue
            if isinstance(document, dict) and ("openapi" in document or "swagger" in document):
                logger.info(f"Found published OpenAPI document at {url}")
                return document
    return None


def generate_document(service_url: str, endpoints: list[ProbedEndpoint]) -> dict[str, Any]:
    paths: dict[str, dict[str, Any]] = {}
    for endpoint in endpoints:
        path_key = endpoint.path or "/"
        operations = {
            method.value.lower(): _operation(endpoint, path_key, method)
            for method in OPERATION_ORDER
            if endpoint.supports(method)
        }
        if operations:
            paths[path_key] = operations

    if not paths:
        paths["/"] = {
            "get": {
                "summary": "Root endpoint",
                "description": (
                    "No endpoints were discovered. The API may require authentication "
                    "or use non-standard paths."
                ),
                "responses": {"200": {"description": "Successful response"}},
                "tags": ["default"],
            }
        }

    tags: list[str] = []
    for operations in paths.values():
        for operation in operations.values():
            for tag in operation.get("tags", []):
                if tag not in tags:
                    tags.append(tag)

    service_name = extract_service_name(service_url)
    return {
        "openapi": "3.0.0",
        "info": {
            "title": f"{service_name} API",
            "version": "1.0.0",
            "description": (
                f"Auto-generated OpenAPI specification for {service_name}, based on "
                f"endpoint discovery against the live service."
            ),
        },
        "servers": [{"url": service_url, "description": "API Server"}],
        "paths": paths,
        "components": {"schemas": {}},
        "tags": [{"name": tag, "description": f"{tag} operations"} for tag in tags],
    }


def _operation(endpoint: ProbedEndpoint, path_key: str, method: HttpMethod) -> dict[str, Any]:
    name = method.value.lower()
    status = endpoint.status_by_method.get(method, 200)

    response: dict[str, Any] = {"description": response_description(method, status)}
    if method is HttpMethod.GET and endpoint.body_sample is not None:
        body = endpoint.body_sample
        response["content"] = {
            "application/json": {
                "schema": {
                    "type": "array" if isinstance(body, list) else "object",
                    "example": body[:EXAMPLE_ITEMS] if isinstance(body, list) else body,
                }
            }
        }

    responses: dict[str, Any] = {str(status): response}
    if method in (HttpMethod.POST, HttpMethod.PUT, HttpMethod.PATCH):
        responses.setdefault("400", _BAD_REQUEST)
        responses.setdefault("404", _NOT_FOUND)
    elif method is HttpMethod.DELETE:
        responses.setdefault("404", _NOT_FOUND)

    segments = endpoint.segments
    operation: dict[str, Any] = {
        "summary": summary(method, path_key),
        "description": description(method, path_key),
        "operationId": f"{name}{path_key.replace('/', '_')}",
        "tags": [segments[0] if segments else "default"],
        "responses": responses,
    }
    if isinstance(endpoint.body_sample, list) and endpoint.body_sample:
        operation["parameters"] = [
            {
                "name": "limit",
                "in": "query",
                "required": False,
                "schema": {"type": "integer", "default": 10},
                "description": "Maximum number of items to return",
            },
            {
                "name": "offset",
                "in": "query",
                "required": False,
                "schema": {"type": "integer", "default": 0},
                "description": "Number of items to skip",
            },
        ]
    return operation


def summary(method: HttpMethod, path: str) -> str:
    resource = path.lstrip("/") or "root"
    return {
        HttpMethod.GET: f"Get {resource}",
        HttpMethod.POST: f"Create {resource}",
        HttpMethod.PUT: f"Update {resource}",
        HttpMethod.PATCH: f"Partially update {resource}",
        HttpMethod.DELETE: f"Delete {resource}",
        HttpMethod.OPTIONS: f"Get options for {resource}",
    }.get(method, f"{method.value} {resource}")


def description(method: HttpMethod, path: str) -> str:
    return {
        HttpMethod.GET: f"Retrieve data from {path}",
        HttpMethod.POST: f"Create a new resource at {path}",
        HttpMethod.PUT: f"Replace resource at {path}",
        HttpMethod.PATCH: f"Partially update resource at {path}",
        HttpMethod.DELETE: f"Remove resource at {path}",
        HttpMethod.OPTIONS: f"Get communication options for {path}",
    }.get(method, f"Perform {method.value} operation on {path}")


def response_description(method: HttpMethod, status: int) -> str:
    if 200 <= status < 300:
        if method is HttpMethod.POST:
            return "Resource created successfully" if status == 201 else "Successful response"
        if method is HttpMethod.PUT:
            return "Resource updated successfully"
        if method is HttpMethod.PATCH:
            return "Resource partially updated successfully"
        if method is HttpMethod.DELETE:
            if status == 204:
                return "Resource deleted successfully (No Content)"
            return "Resource deleted"
        return "Successful response"
    if 400 <= status < 500:
        return "Client error"
    if status >= 500:
        return "Server error"
    return "Response"
