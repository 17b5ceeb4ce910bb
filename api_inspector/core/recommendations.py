"""
Recommendation Synthesizer — One prioritized recommendation per category.
"""

from __future__ import annotations

from collections.abc import Sequence

from api_inspector.models.analysis_models import Recommendation, Violation
from api_inspector.models.rule_models import Severity

MAX_ACTION_ITEMS = 3


def generate_recommendations(violations: Sequence[Violation]) -> list[Recommendation]:
    """
    Group violations by category, in order of first appearance.

    Priority is high when the category has an error, medium when it has a
    warning, low otherwise. Action items are the rule names of the first
    violations in the category.
    """
    by_category: dict[str, list[Violation]] = {}
    for violation in violations:
        by_category.setdefault(violation.category, []).append(violation)

    recommendations: list[Recommendation] = []
    for category, grouped in by_category.items():
        severities = {v.severity for v in grouped}
        if Severity.ERROR in severities:
            priority = "high"
        elif Severity.WARNING in severities:
            priority = "medium"
        else:
            priority = "low"

        recommendations.append(
            Recommendation(
                title=f"Improve {category}",
                description=(
                    f"Address {len(grouped)} issue(s) in the {category} category "
                    f"to improve API quality."
                ),
                priority=priority,
                category=category,
                action_items=[v.rule_name for v in grouped[:MAX_ACTION_ITEMS]],
            )
        )

    return recommendations
