"""
Versioning Rule — The API should carry a version in its URL or headers.

Evaluated even when nothing was discovered: the service URL alone can
show a version marker.
"""

from __future__ import annotations

import re

from api_inspector.core.evaluation import EvaluationContext, Finding


RULE_IDS = ("version-001",)

VERSION_HEADERS = ("api-version", "version", "x-api-version")

_VERSION_PATH_RE = re.compile(r"/v\d+")


def check(ctx: EvaluationContext) -> list[Finding]:
    if not ctx.in_scope("version-001"):
        return []

    in_url = bool(_VERSION_PATH_RE.search(ctx.service_url)) or any(
        _VERSION_PATH_RE.search(e.path) for e in ctx.endpoints
    )
    in_headers = ctx.any_header(*VERSION_HEADERS)

    if in_url or in_headers:
        return []

    return [
        Finding(
            rule_id="version-001",
            details=(
                "No API versioning detected in URL or headers. This makes it difficult "
                "to introduce breaking changes."
            ),
        )
    ]
