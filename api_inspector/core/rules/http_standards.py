"""
HTTP Standards Rule — CORS headers and content negotiation.
"""

from __future__ import annotations

from api_inspector.core.evaluation import EvaluationContext, Finding
from api_inspector.models.probe_models import HttpMethod


RULE_IDS = ("http-002", "http-003")


def check(ctx: EvaluationContext) -> list[Finding]:
    findings: list[Finding] = []

    if ctx.in_scope("http-002") and ctx.discovered:
        if not ctx.any_header("access-control-allow-origin"):
            findings.append(
                Finding(
                    rule_id="http-002",
                    details="No CORS headers detected. Modern web applications require CORS support.",
                )
            )

    if ctx.in_scope("http-003"):
        for endpoint in ctx.endpoints:
            get_headers = endpoint.headers_by_method.get(HttpMethod.GET)
            if get_headers is None:
                continue
            content_type = get_headers.get("content-type", "")
            if "json" not in content_type:
                findings.append(
                    Finding(
                        rule_id="http-003",
                        endpoint=endpoint.path,
                        method="GET",
                        details=(
                            f'GET "{endpoint.path or "/"}" was requested with Accept: '
                            f'application/json but answered with "{content_type or "no content type"}".'
                        ),
                    )
                )

    return findings
