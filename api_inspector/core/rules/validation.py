"""
Validation Rule — Input validation and bounded payload values.

  - validation-001: a POST with an empty JSON object was accepted (2xx)
  - validation-002: advisory, field-level validation errors
  - arrays-002: a collection returned more than LARGE_COLLECTION items at once
  - strings-001: body strings longer than MAX_STRING_LENGTH
  - strings-002: email and URL fields that do not look like emails or URLs
"""

from __future__ import annotations

import re

from api_inspector.core.evaluation import EvaluationContext, Finding, advisory
from api_inspector.core.json_body import field_tokens, sample_records
from api_inspector.models.probe_models import HttpMethod


RULE_IDS = ("validation-001", "validation-002", "arrays-002", "strings-001", "strings-002")

MAX_STRING_LENGTH = 10_000
LARGE_COLLECTION = 100

URL_WORDS = {"url", "uri", "website", "link", "href", "homepage"}

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
ABSOLUTE_URL_RE = re.compile(r"^https?://[^\s/$.?#][^\s]*$", re.IGNORECASE)


def check(ctx: EvaluationContext) -> list[Finding]:
    findings: list[Finding] = []

    if ctx.in_scope("validation-001"):
        for endpoint in ctx.endpoints:
            status = endpoint.status_by_method.get(HttpMethod.POST)
            if status is not None and 200 <= status < 300:
                findings.append(
                    Finding(
                        rule_id="validation-001",
                        endpoint=endpoint.path,
                        method="POST",
                        details=(
                            f'POST "{endpoint.path or "/"}" accepted an empty request body '
                            f"with status {status}. Required fields should be validated."
                        ),
                    )
                )

    findings.extend(
        advisory(
            ctx,
            "validation-002",
            "When validation fails, return specific field-level errors indicating which "
            "fields failed and why.",
        )
    )

    if ctx.in_scope("arrays-002"):
        for endpoint in ctx.bodies:
            count = endpoint.body_item_count
            if count is not None and count > LARGE_COLLECTION:
                findings.append(
                    Finding(
                        rule_id="arrays-002",
                        endpoint=endpoint.path,
                        method="GET",
                        details=(
                            f'"{endpoint.path or "/"}" returned {count} items in a single '
                            f"response. Cap collection sizes and paginate."
                        ),
                    )
                )

    for endpoint in ctx.bodies:
        findings.extend(_check_strings(ctx, endpoint.path, sample_records(endpoint.body_sample)))

    return findings


def _check_strings(ctx: EvaluationContext, path: str, records: list[dict]) -> list[Finding]:
    findings: list[Finding] = []
    reported: set[tuple[str, str]] = set()

    for record in records:
        for field, value in record.items():
            if not isinstance(value, str):
                continue

            key = ("strings-001", field)
            if ctx.in_scope("strings-001") and len(value) > MAX_STRING_LENGTH and key not in reported:
                reported.add(key)
                findings.append(
                    Finding(
                        rule_id="strings-001",
                        endpoint=path,
                        method="GET",
                        details=(
                            f'Field "{field}" in "{path or "/"}" holds a {len(value)}-character '
                            f"string. Define a maxLength for string fields."
                        ),
                    )
                )

            key = ("strings-002", field)
            if not ctx.in_scope("strings-002") or key in reported:
                continue
            expected = _expected_format(field)
            if expected == "email" and not EMAIL_RE.match(value):
                problem = "is not a valid email address"
            elif expected == "url" and not ABSOLUTE_URL_RE.match(value):
                problem = "is not an absolute http(s) URL"
            else:
                continue
            reported.add(key)
            findings.append(
                Finding(
                    rule_id="strings-002",
                    endpoint=path,
                    method="GET",
                    details=f'Field "{field}" in "{path or "/"}" holds {value[:80]!r}, which {problem}.',
                )
            )

    return findings


def _expected_format(field: str) -> str | None:
    tokens = field_tokens(field)
    if "email" in tokens:
        return "email"
    if any(t in URL_WORDS for t in tokens):
        return "url"
    return None
