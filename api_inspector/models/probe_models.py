"""
Probe Data Models — Outcomes of discovery requests and probed endpoints.
"""

from __future__ import annotations

import base64
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class HttpMethod(str, Enum):
    HEAD = "HEAD"
    GET = "GET"
    OPTIONS = "OPTIONS"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


# Methods probed after HEAD/GET to find out what a path supports
EXPLORATORY_METHODS: tuple[HttpMethod, ...] = (
    HttpMethod.OPTIONS,
    HttpMethod.POST,
    HttpMethod.PUT,
    HttpMethod.PATCH,
    HttpMethod.DELETE,
)

WRITE_METHODS: frozenset[HttpMethod] = frozenset(
    {HttpMethod.POST, HttpMethod.PUT, HttpMethod.PATCH, HttpMethod.DELETE}
)


class ProbeOutcome(BaseModel):
    """Status and lower-cased headers of one successful probe request."""

    model_config = ConfigDict(frozen=True)

    method: HttpMethod
    status: int
    headers: dict[str, str] = Field(default_factory=dict)

    @property
    def supported(self) -> bool:
        return self.status != 405

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class ProbedEndpoint(BaseModel):
    """Everything discovery learned about one path of the target service."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    path: str
    url: str
    allowed_methods: frozenset[HttpMethod] = frozenset()
    probed_methods: frozenset[HttpMethod] = Field(
        default=frozenset(), description="Methods discovery actually sent to this path"
    )
    status_by_method: dict[HttpMethod, int] = Field(default_factory=dict)
    response_headers: dict[str, str] = Field(
        default_factory=dict, description="HEAD response headers, lower-cased keys"
    )
    headers_by_method: dict[HttpMethod, dict[str, str]] = Field(default_factory=dict)
    body_sample: Any = Field(default=None, description="Parsed JSON from GET, arrays truncated")
    body_item_count: int | None = Field(
        default=None, description="Length of the collection before truncation"
    )

    @property
    def segments(self) -> list[str]:
        return [s for s in self.path.split("/") if s]

    @property
    def is_item(self) -> bool:
        """Singular-resource shape: last segment is numeric."""
        segments = self.segments
        return bool(segments) and segments[-1].isdigit()

    @property
    def is_collection(self) -> bool:
        segments = self.segments
        return bool(segments) and not segments[-1].isdigit()

    def supports(self, method: HttpMethod) -> bool:
        return method in self.allowed_methods

    def rejects(self, method: HttpMethod) -> bool:
        """True only when the method was probed and found unsupported."""
        return method in self.probed_methods and method not in self.allowed_methods

    def has_header(self, *names: str) -> bool:
        """True if any probe of this endpoint returned one of the headers."""
        if any(self.response_headers.get(n) for n in names):
            return True
        return any(
            headers.get(n) for headers in self.headers_by_method.values() for n in names
        )

    def header(self, name: str) -> str | None:
        value = self.response_headers.get(name)
        if value:
            return value
        for headers in self.headers_by_method.values():
            if headers.get(name):
                return headers[name]
        return None


class AuthConfig(BaseModel):
    """Pre-supplied credentials attached to every probe."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    type: Literal["none", "api-key", "bearer", "basic", "oauth"] = "none"
    api_key: str | None = None
    api_key_header: str | None = None
    bearer_token: str | None = None
    username: str | None = None
    password: str | None = None
    oauth_token: str | None = None

    def to_headers(self) -> dict[str, str]:
        if self.type == "api-key" and self.api_key:
            return {self.api_key_header or "X-API-Key": self.api_key}
        if self.type == "bearer" and self.bearer_token:
            return {"Authorization": f"Bearer {self.bearer_token}"}
        if self.type == "oauth" and self.oauth_token:
            return {"Authorization": f"Bearer {self.oauth_token}"}
        if self.type == "basic" and self.username is not None:
            raw = f"{self.username}:{self.password or ''}".encode("utf-8")
            return {"Authorization": f"Basic {base64.b64encode(raw).decode('ascii')}"}
        return {}

    @property
    def supplied(self) -> bool:
        return bool(self.to_headers())
