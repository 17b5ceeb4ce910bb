"""
Evaluation inputs and outputs shared by all rule evaluators.

Evaluators are pure: they read an EvaluationContext and return Findings.
The rule engine turns Findings into Violations, dropping any finding whose
rule is not in scope for the run.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from api_inspector.core.rule_selector import RuleSet
from api_inspector.models.probe_models import ProbedEndpoint


@dataclass(frozen=True)
class Finding:
    """Raw evaluator output: which rule was broken, where, and how."""

    rule_id: str
    details: str = ""
    endpoint: str = ""
    method: str = ""


@dataclass(frozen=True)
class EvaluationContext:
    service_url: str
    endpoints: tuple[ProbedEndpoint, ...]
    rules: RuleSet
    credentials_supplied: bool = False
    # endpoints with a JSON body sample, in discovery order
    bodies: tuple[ProbedEndpoint, ...] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "bodies", tuple(e for e in self.endpoints if e.body_sample is not None)
        )

    def in_scope(self, rule_id: str) -> bool:
        return rule_id in self.rules

    @property
    def discovered(self) -> bool:
        return bool(self.endpoints)

    def any_header(self, *names: str) -> bool:
        return any(e.has_header(*names) for e in self.endpoints)


def advisory(ctx: EvaluationContext, rule_id: str, details: str, endpoint: str = "") -> list[Finding]:
    """
    A finding that cannot be verified from probe data.

    Emitted whenever the rule is in scope and something was discovered.
    """
    if not ctx.in_scope(rule_id) or not ctx.discovered:
        return []
    return [Finding(rule_id=rule_id, details=details, endpoint=endpoint)]
