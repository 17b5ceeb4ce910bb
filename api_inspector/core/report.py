"""
Report Assembler — Builds the final AnalysisResult.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from datetime import datetime, timezone
from urllib.parse import urlsplit

from api_inspector.core.recommendations import generate_recommendations
from api_inspector.core.rule_selector import RuleSet
from api_inspector.core.scorer import calculate_score
from api_inspector.models.analysis_models import AnalysisResult, AnalysisSummary, Violation
from api_inspector.models.rule_models import Severity

UNKNOWN_SERVICE = "Unknown Service"

_HOST_PREFIX_RE = re.compile(r"^(www\.|api\.)")


def extract_service_name(service_url: str) -> str:
    """
    Derive a short display name from a service URL.

    https://api.example.com → "example"
    """
    try:
        hostname = urlsplit(service_url).hostname
    except ValueError:
        return UNKNOWN_SERVICE
    if not hostname:
        return UNKNOWN_SERVICE
    return _HOST_PREFIX_RE.sub("", hostname).split(".")[0] or UNKNOWN_SERVICE


def summarize(rules: RuleSet, violations: Sequence[Violation]) -> AnalysisSummary:
    total = len(rules)
    return AnalysisSummary(
        total_rules=total,
        passed_rules=total - len(violations),
        failed_rules=sum(1 for v in violations if v.severity == Severity.ERROR),
        warning_rules=sum(1 for v in violations if v.severity == Severity.WARNING),
    )


def assemble_report(
    service_url: str,
    rules: RuleSet,
    violations: Sequence[Violation],
) -> AnalysisResult:
    return AnalysisResult(
        service_name=extract_service_name(service_url),
        service_url=service_url,
        analyzed_at=datetime.now(timezone.utc),
        overall_score=calculate_score(violations),
        violations=list(violations),
        recommendations=generate_recommendations(violations),
        summary=summarize(rules, violations),
    )
