"""
Operations Rule — Reminders about operation design that probes cannot verify.
"""

from __future__ import annotations

from api_inspector.core.evaluation import EvaluationContext, Finding, advisory


RULE_IDS = (
    "operations-001",
    "operations-002",
    "operations-003",
    "response-003",
    "response-004",
    "idempotency-001",
)

_ADVICE = (
    (
        "operations-001",
        "Consider providing bulk operation endpoints (e.g., POST /users/bulk) for creating/"
        "updating multiple items efficiently.",
    ),
    (
        "operations-002",
        "Support PATCH method for partial updates, allowing clients to update specific "
        "fields without sending the entire resource.",
    ),
    (
        "operations-003",
        "For long-running operations, return 202 Accepted with a status endpoint for "
        "clients to poll progress.",
    ),
    (
        "response-003",
        "Return appropriate responses: POST → 201 + Location, DELETE → 204, GET → 200 + "
        "resource, PUT → 200 + updated resource.",
    ),
    (
        "response-004",
        "Include hypermedia links (_links) in responses to related resources and available "
        "actions for better discoverability.",
    ),
    (
        "idempotency-001",
        "Make GET, PUT and DELETE idempotent and accept an Idempotency-Key header on POST "
        "so clients can retry safely.",
    ),
)


def check(ctx: EvaluationContext) -> list[Finding]:
    findings: list[Finding] = []
    for rule_id, details in _ADVICE:
        findings.extend(advisory(ctx, rule_id, details))
    return findings
