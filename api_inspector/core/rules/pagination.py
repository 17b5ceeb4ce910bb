"""
Pagination Rule — Collections should be paginated and carry navigation metadata.

pagination-001 cannot be verified from a single GET, so it is reported as an
advisory on the first collection endpoint. pagination-002 is evidence-based:
a collection served as a bare JSON array with no Link header has nowhere to
put paging metadata.
"""

from __future__ import annotations

import re

from api_inspector.core.evaluation import EvaluationContext, Finding
from api_inspector.core.json_body import is_bare_collection
from api_inspector.models.probe_models import ProbedEndpoint


RULE_IDS = ("pagination-001", "pagination-002")

_KNOWN_COLLECTIONS_RE = re.compile(r"/(users|posts|comments|products|items|orders|todos)$")


def check(ctx: EvaluationContext) -> list[Finding]:
    findings: list[Finding] = []
    collections = [e for e in ctx.endpoints if _is_collection(e)]

    if ctx.in_scope("pagination-001") and collections:
        first = collections[0]
        findings.append(
            Finding(
                rule_id="pagination-001",
                endpoint=first.path,
                details=(
                    f'Collection endpoints like "{first.path or "/"}" should implement pagination '
                    f"to handle large datasets efficiently."
                ),
            )
        )

    if ctx.in_scope("pagination-002"):
        for endpoint in collections:
            if is_bare_collection(endpoint.body_sample) and not endpoint.has_header("link"):
                findings.append(
                    Finding(
                        rule_id="pagination-002",
                        endpoint=endpoint.path,
                        method="GET",
                        details=(
                            f'"{endpoint.path or "/"}" returns a bare array without a Link header, '
                            f"so clients get no total count or next/previous links."
                        ),
                    )
                )

    return findings


def _is_collection(endpoint: ProbedEndpoint) -> bool:
    if endpoint.is_item:
        return False
    return is_bare_collection(endpoint.body_sample) or bool(
        _KNOWN_COLLECTIONS_RE.search(endpoint.path)
    )
