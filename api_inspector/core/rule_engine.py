"""
Rule Engine — Orchestrates all rule evaluators.

Runs every registered evaluator against the probed endpoints of one analysis
run and turns their findings into catalog-backed Violations.
Evaluators are pure functions — no network, no randomness.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Sequence

from api_inspector.core.evaluation import EvaluationContext, Finding
from api_inspector.models.analysis_models import EvaluationResult, Violation
from api_inspector.models.rule_models import DesignRule

# Import all evaluator modules
from api_inspector.core.rules import (
    caching,
    data_types,
    http_standards,
    method_support,
    naming,
    operations,
    pagination,
    parameters,
    reminders,
    schemas,
    security,
    validation,
    versioning,
    vulnerability_scan,
)

# Type for an evaluator check function
CheckFn = Callable[[EvaluationContext], list[Finding]]


@dataclass(frozen=True)
class EvaluatorUnit:
    name: str
    rule_ids: tuple[str, ...]
    check: CheckFn


# Registry of all evaluators, in invocation order
EVALUATOR_REGISTRY: tuple[EvaluatorUnit, ...] = (
    EvaluatorUnit("naming", naming.RULE_IDS, naming.check),
    EvaluatorUnit("http_standards", http_standards.RULE_IDS, http_standards.check),
    EvaluatorUnit("versioning", versioning.RULE_IDS, versioning.check),
    EvaluatorUnit("security", security.RULE_IDS, security.check),
    EvaluatorUnit("pagination", pagination.RULE_IDS, pagination.check),
    EvaluatorUnit("error_format", reminders.ERROR_FORMAT_RULE_IDS, reminders.check_error_format),
    EvaluatorUnit(
        "response_consistency",
        reminders.RESPONSE_CONSISTENCY_RULE_IDS,
        reminders.check_response_consistency,
    ),
    EvaluatorUnit(
        "naming_consistency",
        reminders.NAMING_CONSISTENCY_RULE_IDS,
        reminders.check_naming_consistency,
    ),
    EvaluatorUnit("caching", caching.RULE_IDS, caching.check),
    EvaluatorUnit("data_types", data_types.RULE_IDS, data_types.check),
    EvaluatorUnit("validation", validation.RULE_IDS, validation.check),
    EvaluatorUnit("operations", operations.RULE_IDS, operations.check),
    EvaluatorUnit("schemas", schemas.RULE_IDS, schemas.check),
    EvaluatorUnit("parameters", parameters.RULE_IDS, parameters.check),
    EvaluatorUnit("vulnerability_scan", vulnerability_scan.RULE_IDS, vulnerability_scan.check),
    EvaluatorUnit("method_support", method_support.RULE_IDS, method_support.check),
)


class RuleEngine:
    """
    Deterministic rule engine.

    Evaluators run sequentially in registry order. An evaluator whose rules
    are all out of scope is skipped. Exceptions raised by an evaluator are
    not caught here: a failed evaluation fails the whole analysis.
    """

    def __init__(self, evaluators: Sequence[EvaluatorUnit] | None = None) -> None:
        self.evaluators = tuple(evaluators) if evaluators is not None else EVALUATOR_REGISTRY

    def run(self, ctx: EvaluationContext) -> EvaluationResult:
        """
        Run all evaluators against one evaluation context.

        Args:
            ctx: Probed endpoints plus the rules active for this run.

        Returns:
            EvaluationResult with violations in evaluator-invocation order.
        """
        start = time.monotonic()
        violations: list[Violation] = []
        executed: list[str] = []

        for unit in self.evaluators:
            if not ctx.rules.any_of(unit.rule_ids):
                continue
            executed.append(unit.name)
            for finding in unit.check(ctx):
                rule = ctx.rules.get(finding.rule_id)
                if rule is None:
                    continue
                violations.append(to_violation(finding, rule, ordinal=len(violations)))

        elapsed = (time.monotonic() - start) * 1000

        return EvaluationResult(
            violations=violations,
            evaluators_executed=executed,
            duration_ms=round(elapsed, 2),
        )


def to_violation(finding: Finding, rule: DesignRule, ordinal: int) -> Violation:
    """Attach catalog metadata to a finding."""
    return Violation(
        id=f"{rule.id}-{ordinal}",
        rule_id=rule.id,
        rule_name=rule.name,
        severity=rule.severity,
        category=rule.category,
        description=rule.description,
        endpoint=finding.endpoint,
        method=finding.method,
        details=finding.details or rule.description,
        recommendation=rule.rationale,
        impact=rule.impact or rule.rationale,
        examples=list(rule.examples.good),
        source_name=rule.source_name,
        source_url=rule.source_url,
    )
