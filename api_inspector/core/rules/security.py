"""
Security Rule — HTTPS, unauthenticated writes, rate limiting.
"""

from __future__ import annotations

from api_inspector.core.evaluation import EvaluationContext, Finding
from api_inspector.models.probe_models import HttpMethod


RULE_IDS = ("security-001", "security-002", "security-003")

RATE_LIMIT_HEADERS = ("x-ratelimit-limit", "x-rate-limit-limit", "ratelimit-limit")

_WRITES = (HttpMethod.POST, HttpMethod.PUT, HttpMethod.PATCH, HttpMethod.DELETE)


def check(ctx: EvaluationContext) -> list[Finding]:
    findings: list[Finding] = []

    if ctx.in_scope("security-001") and not ctx.service_url.lower().startswith("https://"):
        findings.append(
            Finding(
                rule_id="security-001",
                details=(
                    "API is not using HTTPS. All production APIs must use HTTPS to "
                    "encrypt data in transit."
                ),
            )
        )

    if ctx.in_scope("security-002") and not ctx.credentials_supplied:
        hit = _first_unauthenticated_write(ctx)
        if hit is not None:
            path, method, status = hit
            findings.append(
                Finding(
                    rule_id="security-002",
                    endpoint=path,
                    method=method.value,
                    details=(
                        f'{method.value} "{path or "/"}" answered {status} to a request '
                        f"without credentials. Write operations should require authentication."
                    ),
                )
            )

    if ctx.in_scope("security-003") and ctx.discovered:
        if not ctx.any_header(*RATE_LIMIT_HEADERS):
            findings.append(
                Finding(
                    rule_id="security-003",
                    details=(
                        "No rate limiting headers detected. APIs should implement rate "
                        "limiting to prevent abuse."
                    ),
                )
            )

    return findings


def _first_unauthenticated_write(ctx: EvaluationContext) -> tuple[str, HttpMethod, int] | None:
    for endpoint in ctx.endpoints:
        for method in _WRITES:
            status = endpoint.status_by_method.get(method)
            if status is not None and 200 <= status < 300:
                return endpoint.path, method, status
    return None
