"""
API Inspector — Design score calculator.
"""

from __future__ import annotations

from collections.abc import Iterable

from api_inspector.models.analysis_models import Violation
from api_inspector.models.rule_models import SEVERITY_PENALTIES


def calculate_score(violations: Iterable[Violation]) -> int:
    """Compute a 0-100 design score from violations.

    100 → no violations
    each error costs 10, each warning 5, each info 2; floored at 0
    """
    penalty = sum(SEVERITY_PENALTIES[v.severity] for v in violations)
    return max(0, min(100, 100 - penalty))
