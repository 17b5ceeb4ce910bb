"""
Schema Rule — Schema hygiene reminders plus body-sample checks.

Body checks, per endpoint:
  - schema-003: enum candidates (status/type/role/state) holding free-form
    strings instead of UPPER_SNAKE_CASE constants
  - nulls-001: a record where some, but not all, fields are null
  - objects-001: a record nested deeper than MAX_NESTING_DEPTH levels
"""

from __future__ import annotations

import re

from api_inspector.core.evaluation import EvaluationContext, Finding, advisory
from api_inspector.core.json_body import nesting_depth, sample_records


RULE_IDS = (
    "datatypes-003",
    "schema-001",
    "schema-002",
    "schema-003",
    "arrays-001",
    "nulls-001",
    "objects-001",
)

ENUM_FIELDS = {"status", "type", "role", "state"}
MAX_NESTING_DEPTH = 4

_ENUM_VALUE_RE = re.compile(r"^[A-Z][A-Z0-9]*(?:_[A-Z0-9]+)*$")


def check(ctx: EvaluationContext) -> list[Finding]:
    findings: list[Finding] = []

    findings.extend(advisory(
        ctx,
        "datatypes-003",
        "Provide JSON Schema or OpenAPI schema definitions for all request/response bodies "
        "to enable validation and code generation.",
    ))
    findings.extend(advisory(
        ctx,
        "schema-001",
        "Clearly distinguish optional fields (can be omitted) from nullable fields (can be "
        "null) in your schema definitions.",
    ))
    findings.extend(advisory(
        ctx,
        "schema-002",
        "Define min/max constraints: number ranges (min/max), string lengths (minLength/"
        "maxLength), array sizes (minItems/maxItems).",
    ))
    if ctx.in_scope("schema-003"):
        findings.extend(_enum_findings(ctx))
    findings.extend(advisory(
        ctx,
        "arrays-001",
        "Collection endpoints must always return arrays, even for empty collections or "
        "single items, for type consistency.",
    ))
    if ctx.in_scope("nulls-001"):
        findings.extend(_null_findings(ctx))
    if ctx.in_scope("objects-001"):
        findings.extend(_nesting_findings(ctx))

    return findings


def _enum_findings(ctx: EvaluationContext) -> list[Finding]:
    findings: list[Finding] = []
    for endpoint in ctx.bodies:
        reported: set[str] = set()
        for record in sample_records(endpoint.body_sample):
            for field, value in record.items():
                if field.lower() not in ENUM_FIELDS or field in reported:
                    continue
                if isinstance(value, str) and not _ENUM_VALUE_RE.match(value):
                    reported.add(field)
                    findings.append(
                        Finding(
                            rule_id="schema-003",
                            endpoint=endpoint.path,
                            method="GET",
                            details=(
                                f'Field "{field}" in "{endpoint.path or "/"}" holds the free-form '
                                f"value {value!r}. Use an enum of UPPER_SNAKE_CASE constants."
                            ),
                        )
                    )
    return findings


def _null_findings(ctx: EvaluationContext) -> list[Finding]:
    findings: list[Finding] = []
    for endpoint in ctx.bodies:
        for record in sample_records(endpoint.body_sample):
            nulls = [k for k, v in record.items() if v is None]
            if nulls and len(nulls) < len(record):
                findings.append(
                    Finding(
                        rule_id="nulls-001",
                        endpoint=endpoint.path,
                        method="GET",
                        details=(
                            f'Records from "{endpoint.path or "/"}" include null fields '
                            f"({', '.join(nulls[:5])}) next to populated ones. Either omit unset "
                            f"fields or document when null is returned."
                        ),
                    )
                )
                break
    return findings


def _nesting_findings(ctx: EvaluationContext) -> list[Finding]:
    findings: list[Finding] = []
    for endpoint in ctx.bodies:
        depth = max(
            (nesting_depth(r) for r in sample_records(endpoint.body_sample)), default=0
        )
        if depth > MAX_NESTING_DEPTH:
            findings.append(
                Finding(
                    rule_id="objects-001",
                    endpoint=endpoint.path,
                    method="GET",
                    details=(
                        f'Records from "{endpoint.path or "/"}" nest {depth} levels deep. '
                        f"Limit nesting to {MAX_NESTING_DEPTH} levels."
                    ),
                )
            )
    return findings
