"""
Caching Rule — Cacheable responses should carry Cache-Control or ETag.
"""

from __future__ import annotations

from api_inspector.core.evaluation import EvaluationContext, Finding


RULE_IDS = ("performance-002",)

CACHING_HEADERS = ("cache-control", "etag")


def check(ctx: EvaluationContext) -> list[Finding]:
    if not ctx.in_scope("performance-002") or not ctx.discovered:
        return []
    if ctx.any_header(*CACHING_HEADERS):
        return []
    return [
        Finding(
            rule_id="performance-002",
            details=(
                "No caching headers detected. Implement Cache-Control and ETag headers "
                "for better performance."
            ),
        )
    ]
