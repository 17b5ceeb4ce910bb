"""
Security Header Scan — Transport and browser hardening headers.

  - security-004: HTTPS service without Strict-Transport-Security
  - security-005: no X-Content-Type-Options: nosniff
  - security-006: Server / X-Powered-By headers that reveal a version
"""

from __future__ import annotations

import re

from api_inspector.core.evaluation import EvaluationContext, Finding


RULE_IDS = ("security-004", "security-005", "security-006")

BANNER_HEADERS = ("server", "x-powered-by")

_VERSION_RE = re.compile(r"\d+\.\d+")


def check(ctx: EvaluationContext) -> list[Finding]:
    if not ctx.discovered:
        return []

    findings: list[Finding] = []

    if (
        ctx.in_scope("security-004")
        and ctx.service_url.lower().startswith("https://")
        and not ctx.any_header("strict-transport-security")
    ):
        findings.append(
            Finding(
                rule_id="security-004",
                details=(
                    "No Strict-Transport-Security header detected. HTTPS APIs should send "
                    "HSTS so clients never fall back to plain HTTP."
                ),
            )
        )

    if ctx.in_scope("security-005") and not _has_nosniff(ctx):
        findings.append(
            Finding(
                rule_id="security-005",
                details=(
                    "No X-Content-Type-Options: nosniff header detected. Disable MIME type "
                    "sniffing on API responses."
                ),
            )
        )

    if ctx.in_scope("security-006"):
        seen: set[str] = set()
        for endpoint in ctx.endpoints:
            for name in BANNER_HEADERS:
                value = endpoint.header(name)
                if not value or value in seen or not _VERSION_RE.search(value):
                    continue
                seen.add(value)
                findings.append(
                    Finding(
                        rule_id="security-006",
                        endpoint=endpoint.path,
                        details=f'The "{name}" header discloses a software version: "{value}".',
                    )
                )

    return findings


def _has_nosniff(ctx: EvaluationContext) -> bool:
    return any(
        (e.header("x-content-type-options") or "").lower() == "nosniff"
        for e in ctx.endpoints
    )
