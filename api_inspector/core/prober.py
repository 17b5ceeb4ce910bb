"""
Endpoint Prober — Best-effort discovery of a live API.

Probes a fixed list of candidate paths under the service URL:
  1. HEAD: a transport failure here drops the path entirely
  2. GET with an Accept: application/json header. The body is streamed and
     abandoned once it passes max_body_bytes
  3. OPTIONS, POST, PUT, PATCH, DELETE: a method is supported unless it
     answers 405; a transport failure counts as unsupported. Their bodies
     are never read

Paths are probed concurrently (bounded by a semaphore) on one client per
discovery pass. Failed requests are never retried.
"""

from __future__ import annotations

import asyncio
import json
import logging
from urllib.parse import urlsplit

import httpx

from api_inspector.config import settings
from api_inspector.core.errors import InvalidServiceUrlError, ServiceUnreachableError
from api_inspector.core.json_body import truncate_sample
from api_inspector.models.probe_models import (
    EXPLORATORY_METHODS,
    WRITE_METHODS,
    AuthConfig,
    HttpMethod,
    ProbedEndpoint,
    ProbeOutcome,
)

logger = logging.getLogger("api_inspector.prober")

CANDIDATE_PATHS: tuple[str, ...] = (
    "",
    "/users",
    "/posts",
    "/comments",
    "/todos",
    "/products",
    "/items",
    "/data",
)

# Methods that get an empty JSON object as request body
_BODY_METHODS = {HttpMethod.POST, HttpMethod.PUT, HttpMethod.PATCH}


def validate_service_url(service_url: str | None) -> str:
    """
    Check that service_url is an absolute http(s) URL.

    Returns the URL without a trailing slash, ready for path joining.
    Raises InvalidServiceUrlError before any network activity.
    """
    if not service_url or not service_url.strip():
        raise InvalidServiceUrlError("Missing required parameter: serviceUrl")

    candidate = service_url.strip()
    try:
        parsed = urlsplit(candidate)
        parsed.port  # raises ValueError on a malformed port
    except ValueError as e:
        raise InvalidServiceUrlError("Invalid URL format") from e

    if parsed.scheme not in ("http", "https") or not parsed.hostname:
        raise InvalidServiceUrlError("Invalid URL format")

    return candidate.rstrip("/")


async def resolve_host(base_url: str) -> None:
    """Raise ServiceUnreachableError when the URL's host does not resolve."""
    parsed = urlsplit(base_url)
    port = parsed.port or (443 if parsed.scheme == "https" else 80)
    loop = asyncio.get_running_loop()
    try:
        await loop.getaddrinfo(parsed.hostname, port)
    except OSError as e:
        raise ServiceUnreachableError(f"Cannot resolve host '{parsed.hostname}'") from e


class EndpointProber:
    """Discovers endpoints of one service. Safe to reuse; holds no per-run state."""

    def __init__(
        self,
        *,
        auth: AuthConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float | None = None,
        concurrency: int | None = None,
        write_methods: bool | None = None,
        item_paths: bool | None = None,
        sample_items: int | None = None,
        max_body_bytes: int | None = None,
        verify_host: bool | None = None,
        candidate_paths: tuple[str, ...] = CANDIDATE_PATHS,
    ) -> None:
        self.auth = auth or AuthConfig()
        self.transport = transport
        self.timeout = timeout if timeout is not None else settings.probe_timeout_seconds
        self.concurrency = concurrency or settings.probe_concurrency
        self.write_methods = (
            write_methods if write_methods is not None else settings.probe_write_methods
        )
        self.item_paths = item_paths if item_paths is not None else settings.probe_item_paths
        self.sample_items = sample_items or settings.body_sample_items
        self.max_body_bytes = max_body_bytes or settings.max_body_bytes
        self.verify_host = verify_host if verify_host is not None else settings.verify_host_resolution
        self.candidate_paths = candidate_paths

    @property
    def methods(self) -> tuple[HttpMethod, ...]:
        if self.write_methods:
            return EXPLORATORY_METHODS
        return tuple(m for m in EXPLORATORY_METHODS if m not in WRITE_METHODS)

    def _client(self) -> httpx.AsyncClient:
        headers = {
            "User-Agent": settings.user_agent,
            "Accept": "application/json",
            **self.auth.to_headers(),
        }
        return httpx.AsyncClient(
            timeout=self.timeout,
            headers=headers,
            follow_redirects=True,
            transport=self.transport,
        )

    async def discover(self, service_url: str) -> list[ProbedEndpoint]:
        """
        Probe every candidate path and return the endpoints that answered HEAD.

        An empty list is a valid outcome for an unreachable API. Only an
        unresolvable host is raised.
        """
        base_url = validate_service_url(service_url)
        if self.verify_host:
            await resolve_host(base_url)

        semaphore = asyncio.Semaphore(self.concurrency)
        async with self._client() as client:
            results = await asyncio.gather(
                *(self._probe_path(client, semaphore, base_url, p) for p in self.candidate_paths)
            )
            endpoints = [e for e in results if e is not None]

            if self.item_paths:
                derived = [p for p in (_item_path(e) for e in endpoints) if p]
                if derived:
                    items = await asyncio.gather(
                        *(self._probe_path(client, semaphore, base_url, p) for p in derived)
                    )
                    endpoints.extend(e for e in items if e is not None)

        logger.info(
            f"Discovered {len(endpoints)} endpoint(s) at {base_url} "
            f"({len(self.candidate_paths)} candidate paths)"
        )
        return endpoints

    async def _probe_path(
        self,
        client: httpx.AsyncClient,
        semaphore: asyncio.Semaphore,
        base_url: str,
        path: str,
    ) -> ProbedEndpoint | None:
        url = f"{base_url}{path}"
        async with semaphore:
            head = await self._probe(client, HttpMethod.HEAD, url)
            if head is None:
                return None

            outcomes: list[ProbeOutcome] = [head]
            body_sample, item_count = None, None

            result = await self._send(client, HttpMethod.GET, url, read_body=True)
            if result is not None:
                outcome, (body_sample, item_count) = result
                outcomes.append(outcome)

            for method in self.methods:
                outcome = await self._probe(client, method, url)
                if outcome is not None:
                    outcomes.append(outcome)

        probed = frozenset({HttpMethod.HEAD, HttpMethod.GET, *self.methods})
        return _build_endpoint(path, url, outcomes, probed, body_sample, item_count)

    async def _probe(
        self, client: httpx.AsyncClient, method: HttpMethod, url: str
    ) -> ProbeOutcome | None:
        result = await self._send(client, method, url)
        if result is None:
            return None
        return result[0]

    async def _send(
        self,
        client: httpx.AsyncClient,
        method: HttpMethod,
        url: str,
        read_body: bool = False,
    ) -> tuple[ProbeOutcome, tuple[object, int | None]] | None:
        """
        Send one probe and capture status and headers.

        The body is streamed only when read_body is set, and never past
        max_body_bytes. Other probes leave the body unread.
        """
        kwargs = {"json": {}} if method in _BODY_METHODS else {}
        try:
            async with client.stream(method.value, url, **kwargs) as response:
                outcome = _outcome(method, response)
                body = await self._read_body(response) if read_body else (None, None)
        except httpx.HTTPError as e:
            logger.debug(f"{method.value} {url} failed: {type(e).__name__}: {e}")
            return None
        return outcome, body

    async def _read_body(self, response: httpx.Response) -> tuple[object, int | None]:
        content_type = response.headers.get("content-type", "")
        if not response.is_success or "application/json" not in content_type:
            return None, None

        declared = response.headers.get("content-length", "")
        if declared.isdigit() and int(declared) > self.max_body_bytes:
            logger.debug(f"Skipping oversized body from {response.url} ({declared} bytes)")
            return None, None

        content = bytearray()
        async for chunk in response.aiter_bytes():
            content.extend(chunk)
            if len(content) > self.max_body_bytes:
                logger.debug(f"Stopped reading oversized body from {response.url}")
                return None, None

        try:
            body = json.loads(bytes(content))
        except (json.JSONDecodeError, UnicodeDecodeError):
            return None, None
        return truncate_sample(body, self.sample_items)


def _outcome(method: HttpMethod, response: httpx.Response) -> ProbeOutcome:
    return ProbeOutcome(
        method=method,
        status=response.status_code,
        headers={k.lower(): v for k, v in response.headers.items()},
    )


def _build_endpoint(
    path: str,
    url: str,
    outcomes: list[ProbeOutcome],
    probed: frozenset[HttpMethod],
    body_sample: object,
    item_count: int | None,
) -> ProbedEndpoint:
    head = outcomes[0]
    return ProbedEndpoint(
        path=path,
        url=url,
        allowed_methods=frozenset(o.method for o in outcomes if o.supported),
        probed_methods=probed,
        status_by_method={o.method: o.status for o in outcomes},
        response_headers=head.headers,
        headers_by_method={o.method: o.headers for o in outcomes[1:] if o.ok},
        body_sample=body_sample,
        body_item_count=item_count,
    )


def _item_path(endpoint: ProbedEndpoint) -> str | None:
    """<collection>/<id> for a collection whose first item has a numeric id."""
    if not endpoint.is_collection or not isinstance(endpoint.body_sample, list):
        return None
    if not endpoint.body_sample or not isinstance(endpoint.body_sample[0], dict):
        return None
    item_id = endpoint.body_sample[0].get("id")
    if isinstance(item_id, bool):
        return None
    if isinstance(item_id, int) or (isinstance(item_id, str) and item_id.isdigit()):
        return f"{endpoint.path}/{item_id}"
    return None
