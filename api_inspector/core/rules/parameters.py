"""
Parameters Rule — Parameter and documentation reminders, response compression.
"""

from __future__ import annotations

from api_inspector.core.evaluation import EvaluationContext, Finding, advisory


RULE_IDS = (
    "parameters-001",
    "parameters-002",
    "parameters-003",
    "doc-001",
    "performance-003",
    "performance-006",
)

COMPRESSION_HEADERS = ("content-encoding", "accept-encoding")


def check(ctx: EvaluationContext) -> list[Finding]:
    findings: list[Finding] = []

    findings.extend(advisory(
        ctx,
        "parameters-001",
        "Use query parameters for optional filters and options, not URL path segments or "
        "request body for GET requests.",
    ))
    findings.extend(advisory(
        ctx,
        "parameters-002",
        "Document all parameter types, formats, constraints (min/max), and examples in "
        "OpenAPI specification or equivalent.",
    ))
    findings.extend(advisory(
        ctx,
        "parameters-003",
        "Provide sensible default values for optional parameters (e.g., limit=20, "
        "sort=created_at:desc) and document them.",
    ))
    findings.extend(advisory(
        ctx,
        "doc-001",
        "Publish complete API documentation (an OpenAPI document or equivalent) covering "
        "every endpoint, parameter and response.",
    ))

    if ctx.in_scope("performance-003") and ctx.discovered:
        if not ctx.any_header(*COMPRESSION_HEADERS):
            findings.append(
                Finding(
                    rule_id="performance-003",
                    details=(
                        "Enable gzip or brotli compression to reduce bandwidth usage. Add "
                        "Content-Encoding headers to responses."
                    ),
                )
            )

    findings.extend(advisory(
        ctx,
        "performance-006",
        "Implement maximum payload size limits (e.g., 1MB for requests, 10MB for responses) "
        "and return 413 for oversized requests.",
    ))

    return findings
