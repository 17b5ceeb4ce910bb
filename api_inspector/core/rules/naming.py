"""
Resource Naming Rule — Plural nouns, no verbs, hyphenated words, shallow nesting.

Works purely on discovered paths:
  - rest-001: last non-numeric segment should be a plural noun
  - rest-003: no word of a resource segment should be an action verb
  - rest-004: multi-word segments should use hyphens, not underscores or camelCase
  - rest-005: no more than two resource levels
"""

from __future__ import annotations

import re

from api_inspector.core.evaluation import EvaluationContext, Finding
from api_inspector.core.json_body import field_tokens


RULE_IDS = ("rest-001", "rest-003", "rest-004", "rest-005")

COMMON_VERBS = ("get", "create", "update", "delete", "add", "remove", "fetch", "list")

MAX_RESOURCE_LEVELS = 2

_PLURAL_RE = re.compile(r"(s|ies)$")
_VERSION_RE = re.compile(r"^v\d+$")
_CAMEL_RE = re.compile(r"[a-z][A-Z]")


def check(ctx: EvaluationContext) -> list[Finding]:
    """Check each endpoint path against the resource naming conventions."""
    findings: list[Finding] = []

    for endpoint in ctx.endpoints:
        path = endpoint.path
        if not path or "?" in path:
            continue

        resources = _resource_segments(path)

        if ctx.in_scope("rest-001") and resources:
            last = resources[-1].lower()
            if not _PLURAL_RE.search(last):
                findings.append(
                    Finding(
                        rule_id="rest-001",
                        endpoint=path,
                        method="GET",
                        details=(
                            f'The endpoint "{path}" appears to use singular form "{last}" '
                            f"instead of plural."
                        ),
                    )
                )

        if ctx.in_scope("rest-003"):
            tokens = {t for segment in resources for t in field_tokens(segment)}
            for verb in COMMON_VERBS:
                if verb in tokens:
                    findings.append(
                        Finding(
                            rule_id="rest-003",
                            endpoint=path,
                            details=(
                                f'The endpoint "{path}" contains the verb "{verb}". '
                                f"Use HTTP methods instead."
                            ),
                        )
                    )

        if ctx.in_scope("rest-004") and ("_" in path or _CAMEL_RE.search(path)):
            findings.append(
                Finding(
                    rule_id="rest-004",
                    endpoint=path,
                    details=(
                        f'The endpoint "{path}" uses underscores or camelCase. '
                        f"Use hyphens instead."
                    ),
                )
            )

        if ctx.in_scope("rest-005") and len(resources) > MAX_RESOURCE_LEVELS:
            findings.append(
                Finding(
                    rule_id="rest-005",
                    endpoint=path,
                    details=(
                        f'The endpoint "{path}" nests {len(resources)} resource levels. '
                        f"Keep nesting to {MAX_RESOURCE_LEVELS} levels or fewer."
                    ),
                )
            )

    return findings


def _resource_segments(path: str) -> list[str]:
    """Path segments that name resources: not ids, not version markers."""
    return [
        s for s in path.split("/")
        if s and not s.isdigit() and not _VERSION_RE.match(s.lower())
    ]

