"""
Method Support Rule — Methods and status codes expected for each resource shape.

Per endpoint, from the exploratory probes:
  - collections (non-numeric last segment) should accept POST
  - items (numeric last segment) should accept PUT or PATCH, and DELETE
  - every endpoint should answer OPTIONS for CORS preflight
  - POST should create with 201, DELETE should answer 204

A method that was never sent (write probes disabled) is not reported as missing.
"""

from __future__ import annotations

from api_inspector.core.evaluation import EvaluationContext, Finding
from api_inspector.models.probe_models import HttpMethod, ProbedEndpoint


RULE_IDS = ("rest-002", "http-002", "http-001")


def check(ctx: EvaluationContext) -> list[Finding]:
    findings: list[Finding] = []
    for endpoint in ctx.endpoints:
        if ctx.in_scope("rest-002"):
            findings.extend(_method_findings(endpoint))
        if ctx.in_scope("http-002") and endpoint.rejects(HttpMethod.OPTIONS):
            findings.append(
                Finding(
                    rule_id="http-002",
                    endpoint=endpoint.path,
                    method="OPTIONS",
                    details=(
                        f'"{endpoint.path or "/"}" does not support OPTIONS, so browsers '
                        f"cannot complete CORS preflight requests."
                    ),
                )
            )
        if ctx.in_scope("http-001"):
            findings.extend(_status_findings(endpoint))
    return findings


def _method_findings(endpoint: ProbedEndpoint) -> list[Finding]:
    path = endpoint.path
    findings: list[Finding] = []

    if endpoint.is_collection and endpoint.rejects(HttpMethod.POST):
        findings.append(
            Finding(
                rule_id="rest-002",
                endpoint=path,
                method="POST",
                details=f'Collection "{path}" does not accept POST for creating new items.',
            )
        )

    if endpoint.is_item:
        updates = (HttpMethod.PUT, HttpMethod.PATCH)
        if any(m in endpoint.probed_methods for m in updates) and not any(
            endpoint.supports(m) for m in updates
        ):
            findings.append(
                Finding(
                    rule_id="rest-002",
                    endpoint=path,
                    method="PUT",
                    details=f'Resource "{path}" accepts neither PUT nor PATCH for updates.',
                )
            )
        if endpoint.rejects(HttpMethod.DELETE):
            findings.append(
                Finding(
                    rule_id="rest-002",
                    endpoint=path,
                    method="DELETE",
                    details=f'Resource "{path}" does not accept DELETE.',
                )
            )

    return findings


def _status_findings(endpoint: ProbedEndpoint) -> list[Finding]:
    path = endpoint.path or "/"
    findings: list[Finding] = []

    if endpoint.status_by_method.get(HttpMethod.POST) == 200:
        findings.append(
            Finding(
                rule_id="http-001",
                endpoint=endpoint.path,
                method="POST",
                details=f'POST "{path}" returned 200 instead of 201 Created.',
            )
        )
    if endpoint.status_by_method.get(HttpMethod.DELETE) == 200:
        findings.append(
            Finding(
                rule_id="http-001",
                endpoint=endpoint.path,
                method="DELETE",
                details=f'DELETE "{path}" returned 200 instead of 204 No Content.',
            )
        )

    return findings
