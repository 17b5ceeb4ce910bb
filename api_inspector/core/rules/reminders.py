"""
Reminder Rules — Conventions that a HEAD/GET probe cannot verify.

Each check is reported as an advisory whenever its rule is in scope and at
least one endpoint was discovered. The naming reminder quotes mixed field
naming from body samples when there is some.
"""

from __future__ import annotations

from api_inspector.core.evaluation import EvaluationContext, Finding, advisory
from api_inspector.core.json_body import key_convention, sample_records


ERROR_FORMAT_RULE_IDS = ("error-001",)
RESPONSE_CONSISTENCY_RULE_IDS = ("response-001",)
NAMING_CONSISTENCY_RULE_IDS = ("naming-001",)


def check_error_format(ctx: EvaluationContext) -> list[Finding]:
    return advisory(
        ctx,
        "error-001",
        "Verify that error responses follow a consistent format with error codes, "
        "messages, and details.",
    )


def check_response_consistency(ctx: EvaluationContext) -> list[Finding]:
    return advisory(
        ctx,
        "response-001",
        "Ensure all API responses follow a consistent structure for better predictability.",
    )


def check_naming_consistency(ctx: EvaluationContext) -> list[Finding]:
    camel, snake = _field_conventions(ctx)
    if camel and snake:
        details = (
            "Field names mix camelCase and snake_case "
            f"(e.g. {', '.join(camel[:2])} vs. {', '.join(snake[:2])}). "
            "Pick one convention for all fields."
        )
    else:
        details = (
            "Verify that all field names follow a consistent naming convention "
            "(either camelCase or snake_case)."
        )
    return advisory(ctx, "naming-001", details)


def _field_conventions(ctx: EvaluationContext) -> tuple[list[str], list[str]]:
    camel: list[str] = []
    snake: list[str] = []
    for endpoint in ctx.bodies:
        for record in sample_records(endpoint.body_sample):
            for key in record:
                convention = key_convention(key)
                if convention == "camel" and key not in camel:
                    camel.append(key)
                elif convention == "snake" and key not in snake:
                    snake.append(key)
    return camel, snake
