"""
Data Types Rule — Inspects body samples for loosely typed fields.

For the first records of each JSON body:
  - datatypes-001: `id` values of different JSON kinds within one endpoint
  - datatypes-002: date-like fields that are not ISO 8601 strings
  - datatypes-004: currency-like fields holding fractional floats
  - datatypes-005: boolean-like fields holding "true"/"1"-style surrogates

Only shallow key/value pairs are scanned. One finding per endpoint and field.
"""

from __future__ import annotations

import re
from typing import Any

from api_inspector.core.evaluation import EvaluationContext, Finding
from api_inspector.core.json_body import JsonKind, field_tokens, kind_of, sample_records


RULE_IDS = ("datatypes-001", "datatypes-002", "datatypes-004", "datatypes-005")

ISO_8601_RE = re.compile(
    r"^\d{4}-\d{2}-\d{2}"
    r"(?:[T ]\d{2}:\d{2}(?::\d{2}(?:\.\d+)?)?(?:Z|[+-]\d{2}:?\d{2})?)?$"
)

DATE_WORDS = {"date", "time", "datetime", "timestamp"}
# tokens that make a "time" field a duration or zone rather than a point in time
NOT_DATE_WORDS = {
    "zone", "timeout", "duration", "elapsed", "latency",
    "ttl", "response", "processing", "uptime", "runtime",
}

CURRENCY_WORDS = {"price", "amount", "cost", "total", "subtotal", "balance", "fee", "salary"}
# trailing tokens that make "totalCount" a tally rather than an amount
NOT_CURRENCY_SUFFIXES = {"count", "id", "number", "items", "pages"}

BOOLEAN_PREFIXES = ("is", "has", "can", "should")
BOOLEAN_NAMES = {
    "active", "enabled", "disabled", "completed", "verified",
    "deleted", "visible", "published",
}
BOOLEAN_SURROGATES = {"true", "false", "yes", "no", "0", "1"}

_BOOLEAN_PREFIX_RE = re.compile(rf"^(?:{'|'.join(BOOLEAN_PREFIXES)})(?:_|[A-Z])")


def check(ctx: EvaluationContext) -> list[Finding]:
    """Scan body samples for inconsistent or surrogate data types."""
    findings: list[Finding] = []

    for endpoint in ctx.bodies:
        records = sample_records(endpoint.body_sample)
        if not records:
            continue
        path = endpoint.path
        reported: set[tuple[str, str]] = set()

        def report(rule_id: str, field: str, details: str) -> None:
            if (rule_id, field) in reported or not ctx.in_scope(rule_id):
                return
            reported.add((rule_id, field))
            findings.append(Finding(rule_id=rule_id, endpoint=path, method="GET", details=details))

        id_kinds = [kind_of(r["id"]) for r in records if "id" in r]
        if len(set(id_kinds)) > 1:
            kinds = ", ".join(sorted({k.value for k in id_kinds}))
            report(
                "datatypes-001",
                "id",
                f'Field "id" in "{path or "/"}" has inconsistent types across records ({kinds}).',
            )

        for record in records:
            for field, value in record.items():
                if is_date_field(field) and not _is_valid_date_value(value):
                    report(
                        "datatypes-002",
                        field,
                        f'Date field "{field}" in "{path or "/"}" holds {value!r}, '
                        f"which is not an ISO 8601 timestamp.",
                    )
                if is_currency_field(field) and _is_fractional_float(value):
                    report(
                        "datatypes-004",
                        field,
                        f'Currency field "{field}" in "{path or "/"}" holds the float {value!r}. '
                        f"Use integer minor units or a decimal string.",
                    )
                if is_boolean_field(field) and _is_boolean_surrogate(value):
                    report(
                        "datatypes-005",
                        field,
                        f'Boolean field "{field}" in "{path or "/"}" holds {value!r} '
                        f"instead of true/false.",
                    )

    return findings


def is_date_field(name: str) -> bool:
    tokens = field_tokens(name)
    if not tokens or NOT_DATE_WORDS.intersection(tokens):
        return False
    return tokens[-1] == "at" or any(t in DATE_WORDS for t in tokens)


def is_currency_field(name: str) -> bool:
    tokens = field_tokens(name)
    if not tokens or tokens[-1] in NOT_CURRENCY_SUFFIXES:
        return False
    return any(t in CURRENCY_WORDS for t in tokens)


def is_boolean_field(name: str) -> bool:
    return bool(_BOOLEAN_PREFIX_RE.match(name)) or name.lower() in BOOLEAN_NAMES


def _is_valid_date_value(value: Any) -> bool:
    kind = kind_of(value)
    if kind == JsonKind.STRING:
        return bool(ISO_8601_RE.match(value))
    # epoch numbers are the only other date encoding reported
    return kind != JsonKind.NUMBER


def _is_fractional_float(value: Any) -> bool:
    return isinstance(value, float) and not value.is_integer()


def _is_boolean_surrogate(value: Any) -> bool:
    kind = kind_of(value)
    if kind == JsonKind.STRING:
        return value.strip().lower() in BOOLEAN_SURROGATES
    if kind == JsonKind.NUMBER:
        return value in (0, 1)
    return False
